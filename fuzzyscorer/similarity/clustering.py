"""Greedy first-fit clustering of word tokens.

Responsibilities:
- Assign each token to the earliest-created group whose representative is
  within the similarity threshold, or open a new group.
- Emit one `WordScore` per group in group-creation order.

The policy is order-dependent and non-transitive: a token binds to
the first matching group even when a later group's representative is closer.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..cancellation import CancellationToken
from ..models.datatypes import WordScore
from .distance import levenshtein_distance


@dataclass(slots=True)
class _Group:
    """Tokens bound to one representative during a single clustering pass."""

    representative: str
    folded: str
    members: list[str] = field(default_factory=list)


def _matches(folded_token: str, group: _Group, threshold: int) -> bool:
    if threshold == 0:
        return folded_token == group.folded
    return levenshtein_distance(folded_token, group.folded, score_cutoff=threshold) <= threshold


def cluster_tokens(
    tokens: Iterable[str],
    threshold: int,
    cancellation: CancellationToken | None = None,
) -> list[WordScore]:
    """Group tokens by case-insensitive edit distance using first-fit assignment.

    Args:
        tokens: Normalized tokens in order of first appearance.
        threshold: Maximum edit distance between a token and a representative.
        cancellation: Optional token polled once before each token is placed.

    Returns:
        One `WordScore` per group, ordered by group creation, labelled with the
        representative's original casing and scored by member count.
    """

    groups: list[_Group] = []
    for token in tokens:
        if cancellation is not None:
            cancellation.raise_if_cancelled(stage="cluster")

        folded = token.lower()
        group = next((group for group in groups if _matches(folded, group, threshold)), None)
        if group is None:
            group = _Group(representative=token, folded=folded)
            groups.append(group)
        group.members.append(token)

    return [WordScore(group.representative, len(group.members)) for group in groups]


def count_exact(
    tokens: Iterable[str],
    cancellation: CancellationToken | None = None,
) -> list[WordScore]:
    """Count tokens case-insensitively, keeping first-seen casing and order."""

    counts: dict[str, int] = {}
    representatives: dict[str, str] = {}
    for token in tokens:
        if cancellation is not None:
            cancellation.raise_if_cancelled(stage="cluster")
        folded = token.lower()
        representatives.setdefault(folded, token)
        counts[folded] = counts.get(folded, 0) + 1

    return [WordScore(representatives[folded], count) for folded, count in counts.items()]
