# src/fritter/models/satellite.py
"""Satellite records owned 1:1 by a freet.

Identifiers are never reused, so a repointed freet always names a fresh record.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from fritter.db.session import Base


class ExpandedCommentary(Base):
    """Long-form commentary attached to a freet."""

    __tablename__ = "expand"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique owner: a freet never has two live commentary rows.
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("freet.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)


class SourceCitations(Base):
    """Up to three free-text citations backing a freet."""

    __tablename__ = "source"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("freet.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    source_one: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_two: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_three: Mapped[str | None] = mapped_column(Text, nullable=True)


class SimilarityLink(Base):
    """The two freets most similar to the owner, as ranked by the oracle.

    A target is None when the corpus held too few other freets to fill the pair.
    """

    __tablename__ = "similar"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("freet.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    similar_post_id_one: Mapped[int | None] = mapped_column(Integer, nullable=True)
    similar_post_id_two: Mapped[int | None] = mapped_column(Integer, nullable=True)
