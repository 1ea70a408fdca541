"""Levenshtein edit distance backed by `rapidfuzz`."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(source: str, target: str, score_cutoff: int | None = None) -> int:
    """Return the minimum number of single-character edits turning `source` into `target`.

    Insertions, deletions, and substitutions each cost one. Comparison is
    case-sensitive; callers fold case before calling when they need otherwise.

    When `score_cutoff` is given, any distance above it is reported as
    `score_cutoff + 1`, which lets the computation stop early.
    """

    return int(Levenshtein.distance(source, target, score_cutoff=score_cutoff))
