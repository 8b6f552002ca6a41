"""Tests for the corpus similarity oracle."""

from collections import Counter
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from fritter.services.similarity import CorpusSimilarityOracle, cosine_similarity

BASE = datetime(2026, 1, 1, 12, 0, 0)


class FakeRepo:
    """Minimal stand-in exposing the two reads the oracle performs."""

    def __init__(self, rows):
        self.rows = rows

    def corpus(self):
        return list(self.rows)

    def get_by_id(self, post_id):
        for row_id, content, _ in self.rows:
            if row_id == post_id:
                return SimpleNamespace(id=row_id, content=content)
        return None


def _rows(*contents):
    return [(i + 1, text, BASE + timedelta(minutes=i)) for i, text in enumerate(contents)]


def test_cosine_similarity_bounds():
    a = Counter({"cats": 2, "dogs": 1})
    assert cosine_similarity(a, a) == pytest.approx(1.0)
    assert cosine_similarity(a, Counter({"fish": 3})) == 0.0
    assert cosine_similarity(Counter(), a) == 0.0
    assert cosine_similarity(Counter(), Counter()) == 0.0


def test_cosine_similarity_partial_overlap():
    score = cosine_similarity(Counter({"cats": 1, "dogs": 1}), Counter({"cats": 1}))
    assert isinstance(score, float)
    assert score == pytest.approx(1 / 2 ** 0.5)


def test_from_content_ranks_closest_first():
    oracle = CorpusSimilarityOracle(
        FakeRepo(_rows("cats are great pets", "stock market news", "cats and dogs are pets"))
    )
    assert oracle.most_similar_from_content("cats are pets") == (1, 3)


def test_to_existing_never_returns_itself_and_pair_is_distinct():
    oracle = CorpusSimilarityOracle(
        FakeRepo(_rows("rain today", "rain today again", "sunny tomorrow", "rain rain rain"))
    )
    one, two = oracle.most_similar_to_existing(2)
    assert 2 not in (one, two)
    assert one != two
    assert one == 1


def test_ties_prefer_most_recently_modified():
    oracle = CorpusSimilarityOracle(FakeRepo(_rows("alpha", "beta", "gamma")))
    # No overlap with any freet: every score is zero, newest wins.
    assert oracle.most_similar_from_content("omega") == (3, 2)


def test_sparse_corpus_pads_with_none():
    assert CorpusSimilarityOracle(FakeRepo([])).most_similar_from_content("x") == (None, None)
    oracle = CorpusSimilarityOracle(FakeRepo(_rows("only one", "other")))
    assert oracle.most_similar_to_existing(1) == (2, None)


def test_to_existing_unknown_freet_raises():
    with pytest.raises(LookupError):
        CorpusSimilarityOracle(FakeRepo([])).most_similar_to_existing(99)
