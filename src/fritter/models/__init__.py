# src/fritter/models/__init__.py
"""SQLAlchemy models for the Fritter application."""

from .post import Post
from .satellite import ExpandedCommentary, SimilarityLink, SourceCitations
from .user import User

__all__ = [
    "ExpandedCommentary", "SimilarityLink", "SourceCitations",
    "Post",
    "User",
]
