"""Stores for the satellite records owned by a freet.

Every store is keyed by the owning freet identifier. Records are never
patched in place: the orchestrator deletes by owner and creates afresh.
"""
from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from fritter.db.session import Base
from fritter.models.satellite import ExpandedCommentary, SimilarityLink, SourceCitations

__all__ = [
    "ExpandRepository",
    "SatelliteRepository",
    "SimilarRepository",
    "SourceRepository",
]

RecordT = TypeVar("RecordT", bound=Base)


class SatelliteRepository(Generic[RecordT]):
    """Shared create / find / delete operations keyed by owner."""

    model: ClassVar[type[Any]]

    def __init__(self, session: Session) -> None:
        self.session = session

    def _create(self, owner_post_id: int, **fields: Any) -> int:
        record = self.model(post_id=owner_post_id, **fields)
        self.session.add(record)
        self.session.flush()
        return int(record.id)

    def find_by_id(self, record_id: int) -> RecordT | None:
        """Return a record by its own identifier."""
        return self.session.get(self.model, record_id)

    def find_by_owner(self, owner_post_id: int) -> RecordT | None:
        """Return the record owned by a freet, if any."""
        result = self.session.execute(
            select(self.model).where(self.model.post_id == owner_post_id)
        )
        return result.scalars().first()

    def delete_by_owner(self, owner_post_id: int) -> int:
        """Delete the records owned by a freet and return how many were removed."""
        result = self.session.execute(
            delete(self.model).where(self.model.post_id == owner_post_id)
        )
        self.session.flush()
        return int(result.rowcount or 0)


class ExpandRepository(SatelliteRepository[ExpandedCommentary]):
    model = ExpandedCommentary

    def create(self, owner_post_id: int, content: str) -> int:
        """Persist commentary for a freet and return the new record id."""
        return self._create(owner_post_id, content=content)


class SourceRepository(SatelliteRepository[SourceCitations]):
    model = SourceCitations

    def create(
        self,
        owner_post_id: int,
        source_one: str | None,
        source_two: str | None,
        source_three: str | None,
    ) -> int:
        """Persist the three citations for a freet and return the new record id."""
        return self._create(
            owner_post_id,
            source_one=source_one,
            source_two=source_two,
            source_three=source_three,
        )


class SimilarRepository(SatelliteRepository[SimilarityLink]):
    model = SimilarityLink

    def create(self, owner_post_id: int, pair: tuple[int | None, int | None]) -> int:
        """Persist a ranked similarity pair for a freet and return the new record id."""
        one, two = pair
        return self._create(
            owner_post_id,
            similar_post_id_one=one,
            similar_post_id_two=two,
        )

    def clear_target(self, target_post_id: int) -> None:
        """Null out every link slot that points at a deleted freet."""
        self.session.execute(
            update(SimilarityLink)
            .where(SimilarityLink.similar_post_id_one == target_post_id)
            .values(similar_post_id_one=None)
        )
        self.session.execute(
            update(SimilarityLink)
            .where(SimilarityLink.similar_post_id_two == target_post_id)
            .values(similar_post_id_two=None)
        )
        self.session.flush()
