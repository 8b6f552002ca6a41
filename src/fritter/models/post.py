# src/fritter/models/post.py
"""SQLAlchemy model for freets, the root content entity."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fritter.db.session import Base
from fritter.db.time import utcnow
from fritter.models.user import User


class Post(Base):
    """A short text item posted by a user.

    The three satellite references are plain identifiers, not foreign keys:
    each satellite carries the owning ``post_id`` back-reference, so the cycle
    exists only between identifiers and is resolved with two lookups.
    """

    __tablename__ = "freet"
    __table_args__ = (
        Index("ix_freet_author_id", "author_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    date_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    # Null only while the creating transaction is still in flight.
    expand_content_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    source_citation_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    similar_link_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    author: Mapped[User] = relationship("User", lazy="joined")
