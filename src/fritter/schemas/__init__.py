"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .freet import (
    ExpandReplace,
    ExpandResponse,
    FreetCreate,
    FreetResponse,
    FreetUpdate,
    SimilarResponse,
    SourceResponse,
)
from .user import Credentials, MessageResponse, SessionResponse, UserResponse, UserUpdate

__all__ = [
    "ExpandReplace", "ExpandResponse",
    "FreetCreate", "FreetResponse", "FreetUpdate",
    "SimilarResponse", "SourceResponse",
    "Credentials", "MessageResponse", "SessionResponse", "UserResponse", "UserUpdate",
]
