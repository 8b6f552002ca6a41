# src/fritter/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import freets_router, satellites_router, users_router

__all__ = [
    "freets_router",
    "satellites_router",
    "users_router",
]
