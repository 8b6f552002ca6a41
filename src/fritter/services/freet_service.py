"""Orchestrates freet mutations across the freet store and its satellites.

Every mutation runs in one database transaction: steps flush as they go and
the sequence commits once. Any failure rolls the whole sequence back, so no
freet is left pointing at a missing or stale satellite.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from fritter.db.time import utcnow
from fritter.models.post import Post
from fritter.models.satellite import ExpandedCommentary, SimilarityLink, SourceCitations
from fritter.models.user import User
from fritter.repositories.post_repo import PostRepository
from fritter.repositories.satellite_repo import (
    ExpandRepository,
    SimilarRepository,
    SourceRepository,
)
from fritter.schemas.freet import FreetResponse
from fritter.services.similarity import CorpusSimilarityOracle, SimilarityOracle, SimilarPair

logger = logging.getLogger(__name__)


class FreetService:
    """Create, update and delete freets together with their satellites."""

    def __init__(self, session: Session, oracle: SimilarityOracle | None = None) -> None:
        self.session = session
        self.posts = PostRepository(session)
        self.expands = ExpandRepository(session)
        self.sources = SourceRepository(session)
        self.similar = SimilarRepository(session)
        self.oracle = oracle or CorpusSimilarityOracle(self.posts)

    @contextmanager
    def _transaction(self, action: str, post_id: int | None = None) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.error("Rolled back %s of freet %s", action, post_id, exc_info=True)
            raise

    # --- satellite replacement ------------------------------------------------------

    def _replace_expand(self, post: Post, expand_content: str) -> None:
        self.expands.delete_by_owner(post.id)
        expand_id = self.expands.create(post.id, expand_content)
        self.posts.update_expand_id(post, expand_id)

    def _replace_sources(
        self,
        post: Post,
        source_one: str | None,
        source_two: str | None,
        source_three: str | None,
    ) -> None:
        self.sources.delete_by_owner(post.id)
        source_id = self.sources.create(post.id, source_one, source_two, source_three)
        self.posts.update_source_id(post, source_id)

    def _replace_similar(self, post: Post, pair: SimilarPair) -> None:
        self.similar.delete_by_owner(post.id)
        similar_id = self.similar.create(post.id, pair)
        self.posts.update_similar_id(post, similar_id)

    # --- mutations ------------------------------------------------------------------

    def create(
        self,
        *,
        author_id: int,
        content: str,
        expand_content: str,
        source_one: str | None = None,
        source_two: str | None = None,
        source_three: str | None = None,
    ) -> Post:
        """Create a freet with its commentary, citations and similarity link.

        The similarity pair is ranked from the raw content before the freet
        exists, so it can never name the new freet itself.
        """
        with self._transaction("create"):
            pair = self.oracle.most_similar_from_content(content)
            post = self.posts.create(author_id=author_id, content=content, now=utcnow())
            self._replace_expand(post, expand_content)
            self._replace_sources(post, source_one, source_two, source_three)
            self._replace_similar(post, pair)
        self.session.refresh(post)
        logger.info("Created freet %s for author %s", post.id, author_id)
        return post

    def update(
        self,
        post_id: int,
        *,
        content: str,
        expand_content: str,
        source_one: str | None = None,
        source_two: str | None = None,
        source_three: str | None = None,
    ) -> Post:
        """Rewrite a freet and re-create all three of its satellites.

        Raises:
            LookupError: If the freet does not exist. The gate normally rules
                this out before the call.
        """
        with self._transaction("update", post_id):
            post = self.posts.get_by_id(post_id)
            if post is None:
                raise LookupError(f"Freet {post_id} does not exist")
            post.content = content
            self.session.flush()
            self._replace_expand(post, expand_content)
            self._replace_sources(post, source_one, source_two, source_three)
            self._replace_similar(post, self.oracle.most_similar_to_existing(post.id))
            post.date_modified = utcnow()
            self.session.flush()
        self.session.refresh(post)
        logger.info("Updated freet %s", post_id)
        return post

    def replace_expanded(self, post_id: int, expand_content: str) -> Post:
        """Re-create only the expanded commentary of a freet."""
        with self._transaction("expand", post_id):
            post = self.posts.get_by_id(post_id)
            if post is None:
                raise LookupError(f"Freet {post_id} does not exist")
            self._replace_expand(post, expand_content)
            post.date_modified = utcnow()
            self.session.flush()
        self.session.refresh(post)
        logger.info("Replaced expanded commentary of freet %s", post_id)
        return post

    def _delete_one(self, post_id: int) -> bool:
        self.expands.delete_by_owner(post_id)
        self.sources.delete_by_owner(post_id)
        self.similar.delete_by_owner(post_id)
        self.similar.clear_target(post_id)
        return self.posts.delete(post_id)

    def delete(self, post_id: int) -> bool:
        """Delete a freet and cascade to its satellites.

        Similarity links of other freets that named it lose that slot.
        """
        with self._transaction("delete", post_id):
            removed = self._delete_one(post_id)
        logger.info("Deleted freet %s", post_id)
        return removed

    def delete_all_by_author(self, author_id: int) -> int:
        """Delete every freet by ``author_id`` with the same cascade as :meth:`delete`."""
        with self._transaction("delete-all"):
            removed = self._delete_all_by_author(author_id)
        logger.info("Deleted %d freets of author %s", removed, author_id)
        return removed

    def delete_account(self, user: User) -> int:
        """Delete an account and every freet it wrote in a single transaction."""
        user_id = user.id
        with self._transaction("delete-account"):
            removed = self._delete_all_by_author(user_id)
            self.session.delete(user)
            self.session.flush()
        logger.info("Deleted account %s with %d freets", user_id, removed)
        return removed

    def _delete_all_by_author(self, author_id: int) -> int:
        post_ids = self.posts.list_ids_by_author(author_id)
        for post_id in post_ids:
            self._delete_one(post_id)
        return len(post_ids)

    # --- reads ----------------------------------------------------------------------

    def find_one(self, post_id: int) -> Post | None:
        return self.posts.get_by_id(post_id)

    def find_all(self) -> list[Post]:
        return self.posts.list_all()

    def find_all_by_username(self, username: str) -> list[Post]:
        return self.posts.list_by_username(username)

    def expand_for(self, post_id: int) -> ExpandedCommentary | None:
        return self.expands.find_by_owner(post_id)

    def sources_for(self, post_id: int) -> SourceCitations | None:
        return self.sources.find_by_owner(post_id)

    def similar_for(self, post_id: int) -> SimilarityLink | None:
        return self.similar.find_by_owner(post_id)

    def to_response(self, post: Post) -> FreetResponse:
        """Resolve satellites and the author for the API layer."""
        expand = self.expands.find_by_id(post.expand_content_id) if post.expand_content_id else None
        sources = self.sources.find_by_id(post.source_citation_id) if post.source_citation_id else None
        link = self.similar.find_by_id(post.similar_link_id) if post.similar_link_id else None
        return FreetResponse(
            id=post.id,
            author=post.author.username,
            content=post.content,
            date_created=post.date_created,
            date_modified=post.date_modified,
            expand_content_id=post.expand_content_id,
            source_citation_id=post.source_citation_id,
            similar_link_id=post.similar_link_id,
            expand_content=expand.content if expand else None,
            sources=(
                [sources.source_one, sources.source_two, sources.source_three]
                if sources
                else [None, None, None]
            ),
            similar=(
                [link.similar_post_id_one, link.similar_post_id_two]
                if link
                else [None, None]
            ),
        )
