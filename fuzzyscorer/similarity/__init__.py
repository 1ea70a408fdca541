"""Similarity engine: edit distance and greedy word clustering."""

from .clustering import cluster_tokens, count_exact
from .distance import levenshtein_distance

__all__ = ["cluster_tokens", "count_exact", "levenshtein_distance"]
