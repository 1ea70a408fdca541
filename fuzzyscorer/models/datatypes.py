"""Core datatypes shared across FuzzyScorer modules.

Responsibilities:
- Represent immutable result records returned by the scoring operations.
- Reject invalid values at construction so results never need re-checking.

Key types:
- `WordScore`
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WordScore:
    """A representative word and the number of tokens scored under it.

    Attributes:
        text: Representative word in its first-seen casing.
        score: Count of tokens grouped under `text`.
    """

    text: str
    score: int

    def __post_init__(self) -> None:
        """Validate text and score once, at construction."""

        if not isinstance(self.text, str) or not self.text:
            raise ValueError("`text` must be a non-empty string.")
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise ValueError("`score` must be an integer.")
        if self.score < 0:
            raise ValueError("Score cannot be negative.")

    def as_pair(self) -> tuple[str, int]:
        """Return the record as a plain `(text, score)` tuple."""

        return self.text, self.score
