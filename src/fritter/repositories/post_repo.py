"""Data access helpers for working with freets."""
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from fritter.models.post import Post
from fritter.models.user import User

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for freet entities.

    Mutating helpers only flush; committing is left to the caller so that a
    freet and its satellites land in the same transaction.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a freet by identifier."""
        return self.session.get(Post, post_id)

    def get_by_expand_id(self, expand_id: int) -> Post | None:
        """Return the freet currently pointing at an expanded-commentary record."""
        result = self.session.execute(select(Post).where(Post.expand_content_id == expand_id))
        return result.scalars().first()

    def get_by_source_id(self, source_id: int) -> Post | None:
        """Return the freet currently pointing at a source-citations record."""
        result = self.session.execute(select(Post).where(Post.source_citation_id == source_id))
        return result.scalars().first()

    def list_all(self) -> list[Post]:
        """Return every freet, most recently modified first."""
        result = self.session.execute(
            select(Post).order_by(Post.date_modified.desc(), Post.id.desc())
        )
        return list(result.scalars())

    def list_by_username(self, username: str) -> list[Post]:
        """Return the freets of the author with ``username`` (any case)."""
        result = self.session.execute(
            select(Post)
            .join(User, Post.author_id == User.id)
            .where(func.lower(User.username) == username.lower())
            .order_by(Post.date_modified.desc(), Post.id.desc())
        )
        return list(result.scalars())

    def list_ids_by_author(self, author_id: int) -> Sequence[int]:
        """Return the identifiers of every freet written by ``author_id``."""
        result = self.session.execute(select(Post.id).where(Post.author_id == author_id))
        return list(result.scalars())

    def corpus(self) -> list[tuple[int, str, datetime]]:
        """Return ``(id, content, date_modified)`` for every stored freet."""
        result = self.session.execute(select(Post.id, Post.content, Post.date_modified))
        return [(row.id, row.content, row.date_modified) for row in result]

    def create(self, *, author_id: int, content: str, now: datetime) -> Post:
        """Insert a new freet and return the persisted ORM instance.

        Args:
            author_id: Identifier of the authoring user.
            content: Author-supplied text.
            now: Timestamp used for both creation and modification dates.
        """
        post = Post(
            author_id=author_id,
            content=content,
            date_created=now,
            date_modified=now,
        )
        self.session.add(post)
        self.session.flush()
        return post

    def update_expand_id(self, post: Post, expand_id: int) -> Post:
        """Repoint the freet at a new expanded-commentary record."""
        post.expand_content_id = expand_id
        self.session.flush()
        return post

    def update_source_id(self, post: Post, source_id: int) -> Post:
        """Repoint the freet at a new source-citations record."""
        post.source_citation_id = source_id
        self.session.flush()
        return post

    def update_similar_id(self, post: Post, similar_id: int) -> Post:
        """Repoint the freet at a new similarity-link record."""
        post.similar_link_id = similar_id
        self.session.flush()
        return post

    def delete(self, post_id: int) -> bool:
        """Delete a freet row. Returns True if a row was removed."""
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        self.session.flush()
        return bool(result.rowcount)
