"""Top-level package for FuzzyScorer.

This package scores words in free-form text, either by case-insensitive
frequency or by greedy first-fit grouping of near-duplicate words under a
Levenshtein distance threshold. The main entry points are `score_exact`,
`score_fuzzy`, and the `WordScorer` class behind them.
"""

from .cancellation import CancellationToken
from .errors import (
    InputTooLargeError,
    InvalidThresholdError,
    ScoringCancelledError,
    ScoringError,
)
from .limits import MAX_SIMILARITY_THRESHOLD, MAX_WORD_LENGTH, MAX_WORDS_PER_TEXT
from .models.datatypes import WordScore
from .scorer import WordScorer, score_exact, score_fuzzy

__all__ = [
    "CancellationToken",
    "InputTooLargeError",
    "InvalidThresholdError",
    "MAX_SIMILARITY_THRESHOLD",
    "MAX_WORDS_PER_TEXT",
    "MAX_WORD_LENGTH",
    "ScoringCancelledError",
    "ScoringError",
    "WordScore",
    "WordScorer",
    "score_exact",
    "score_fuzzy",
    "__version__",
]

__version__ = "0.1.0"
