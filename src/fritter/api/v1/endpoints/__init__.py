# src/fritter/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .freets import router as freets_router
from .satellites import router as satellites_router
from .users import router as users_router

__all__ = [
    "freets_router",
    "satellites_router",
    "users_router",
]
