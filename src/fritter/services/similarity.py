"""Similarity oracle used to link each freet to its two closest neighbours."""
from __future__ import annotations

import re
from collections import Counter
from datetime import datetime
from typing import Protocol

import numpy as np

from fritter.repositories.post_repo import PostRepository

SimilarPair = tuple[int | None, int | None]

_WORD_RE = re.compile(r"\w+")


class SimilarityOracle(Protocol):
    """Ranking capability consumed by the freet orchestrator."""

    def most_similar_from_content(self, content: str) -> SimilarPair:
        """Return the two freets closest to ``content``."""

    def most_similar_to_existing(self, post_id: int) -> SimilarPair:
        """Return the two freets closest to a stored freet, excluding itself."""


def _vectorize(text: str) -> Counter[str]:
    return Counter(word.lower() for word in _WORD_RE.findall(text))


def cosine_similarity(vec1: Counter[str], vec2: Counter[str]) -> float:
    """Compute cosine similarity of two word-count vectors."""
    vocabulary = sorted(vec1.keys() | vec2.keys())
    v1 = np.array([vec1[word] for word in vocabulary], dtype=float)
    v2 = np.array([vec2[word] for word in vocabulary], dtype=float)
    norm1, norm2 = np.linalg.norm(v1), np.linalg.norm(v2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    return float(np.dot(v1, v2) / (norm1 * norm2))


class CorpusSimilarityOracle:
    """Bag-of-words cosine ranking over every stored freet.

    Ties are broken by most recent modification, then highest id. When fewer
    than two candidates exist the missing slots are None.
    """

    def __init__(self, repo: PostRepository) -> None:
        self.repo = repo

    def _rank(self, content: str, exclude: int | None) -> SimilarPair:
        target = _vectorize(content)
        scored: list[tuple[float, datetime, int]] = []
        for post_id, text, modified in self.repo.corpus():
            if post_id == exclude:
                continue
            scored.append((cosine_similarity(target, _vectorize(text)), modified, post_id))
        scored.sort(reverse=True)
        ranked = [post_id for _, _, post_id in scored[:2]]
        ranked.extend([None] * (2 - len(ranked)))
        return ranked[0], ranked[1]

    def most_similar_from_content(self, content: str) -> SimilarPair:
        return self._rank(content, exclude=None)

    def most_similar_to_existing(self, post_id: int) -> SimilarPair:
        post = self.repo.get_by_id(post_id)
        if post is None:
            raise LookupError(f"Freet {post_id} does not exist")
        return self._rank(post.content, exclude=post_id)
