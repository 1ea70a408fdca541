"""Unit tests for greedy first-fit clustering and exact counting."""

from __future__ import annotations

import pytest

from fuzzyscorer.cancellation import CancellationToken
from fuzzyscorer.errors import ScoringCancelledError
from fuzzyscorer.models.datatypes import WordScore
from fuzzyscorer.similarity.clustering import cluster_tokens, count_exact


def _pairs(scores: list[WordScore]) -> list[tuple[str, int]]:
    return [score.as_pair() for score in scores]


def test_cluster_tokens_groups_typos_under_first_seen_representative() -> None:
    """Tokens within the threshold should join the earliest representative."""

    result = cluster_tokens(["apple", "aple", "apple"], threshold=1)

    assert _pairs(result) == [("apple", 3)]


def test_cluster_tokens_is_first_fit_not_best_fit() -> None:
    """A token should bind to the earliest matching group even if a later one is closer."""

    # "abbb" is 3 edits from "aaaa" but only 1 from the later representative "bbbb".
    result = cluster_tokens(["aaaa", "bbbb", "abbb"], threshold=3)

    assert _pairs(result) == [("aaaa", 2), ("bbbb", 1)]


def test_cluster_tokens_compares_only_against_representatives() -> None:
    """Grouping should be non-transitive: members do not extend a group's reach."""

    # d(aaa, aab) = 1, d(aab, abb) = 1, but d(aaa, abb) = 2.
    result = cluster_tokens(["aaa", "aab", "abb"], threshold=1)

    assert _pairs(result) == [("aaa", 2), ("abb", 1)]


def test_cluster_tokens_is_order_dependent() -> None:
    """Reordering input may change representatives and grouping."""

    forward = cluster_tokens(["aaa", "aab", "abb"], threshold=1)
    backward = cluster_tokens(["aab", "aaa", "abb"], threshold=1)

    assert _pairs(forward) == [("aaa", 2), ("abb", 1)]
    assert _pairs(backward) == [("aab", 3)]


def test_cluster_tokens_compares_case_insensitively_but_keeps_first_casing() -> None:
    """Representative should keep the original casing of its founding token."""

    result = cluster_tokens(["Hello", "HELLO", "helo", "World"], threshold=1)

    assert _pairs(result) == [("Hello", 3), ("World", 1)]


def test_cluster_tokens_at_zero_matches_exact_counting() -> None:
    """Threshold zero should behave exactly like case-insensitive counting."""

    tokens = ["Hello", "world", "hello", "again", "WORLD", "aple", "apple"]

    assert cluster_tokens(tokens, threshold=0) == count_exact(tokens)
    assert _pairs(count_exact(tokens)) == [
        ("Hello", 2),
        ("world", 2),
        ("again", 1),
        ("aple", 1),
        ("apple", 1),
    ]


def test_cluster_tokens_returns_empty_for_no_tokens() -> None:
    """Empty token sequences should produce no groups."""

    assert cluster_tokens([], threshold=5) == []
    assert count_exact([]) == []


def test_cluster_tokens_polls_cancellation_between_tokens() -> None:
    """Cancellation requested mid-pass should abort without returning partial groups."""

    token = CancellationToken()
    seen: list[str] = []

    def _generator():
        for word in ["alpha", "beta", "gamma"]:
            seen.append(word)
            if word == "beta":
                token.cancel()
            yield word

    with pytest.raises(ScoringCancelledError) as exc_info:
        cluster_tokens(_generator(), threshold=1, cancellation=token)

    assert exc_info.value.stage == "cluster"
    assert seen == ["alpha", "beta"]


def test_count_exact_honors_cancellation() -> None:
    """Exact counting should also stop when cancellation is pending."""

    token = CancellationToken()
    token.cancel()

    with pytest.raises(ScoringCancelledError):
        count_exact(["apple"], cancellation=token)
