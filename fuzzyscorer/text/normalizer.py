"""Text normalization stage.

Responsibilities:
- Strip characters that cannot be part of a word token.
- Split text into ordered word tokens, preserving original case.
- Enforce per-word length and total word-count safety limits.
"""

from __future__ import annotations

import unicodedata

from ..cancellation import CancellationToken
from ..errors import InputTooLargeError
from ..limits import MAX_WORD_LENGTH, MAX_WORDS_PER_TEXT

# Whitespace outside the Unicode separator categories.
_CONTROL_WHITESPACE = frozenset("\t\n\v\f\r\x85")


def is_token_character(character: str) -> bool:
    """Return whether a character survives normalization.

    Unicode letters and numbers, the hyphen, and whitespace are kept. Everything
    else (punctuation, symbols, control and format characters) is dropped.
    """

    if character == "-" or character in _CONTROL_WHITESPACE:
        return True
    return unicodedata.category(character)[0] in {"L", "N", "Z"}


class TextNormalizer:
    """Turn raw text into a bounded, ordered sequence of word tokens."""

    def __init__(
        self,
        max_word_length: int = MAX_WORD_LENGTH,
        max_words: int = MAX_WORDS_PER_TEXT,
    ) -> None:
        self.max_word_length = max_word_length
        self.max_words = max_words

    def strip_disallowed(self, text: str) -> str:
        """Remove every character that cannot appear in a token."""

        return "".join(character for character in text if is_token_character(character))

    def normalize(
        self,
        text: str | None,
        cancellation: CancellationToken | None = None,
    ) -> list[str]:
        """Return word tokens in order of appearance.

        Raises:
            InputTooLargeError: If more than `max_words` tokens survive.
            ScoringCancelledError: If `cancellation` is already set.
        """

        if not text or text.isspace():
            return []
        if cancellation is not None:
            cancellation.raise_if_cancelled(stage="normalize")

        words = [
            word
            for word in self.strip_disallowed(text).split()
            if len(word) <= self.max_word_length
        ]
        if len(words) > self.max_words:
            raise InputTooLargeError(count=len(words), limit=self.max_words)
        return words


def extract_words(
    text: str | None,
    cancellation: CancellationToken | None = None,
) -> list[str]:
    """Normalize `text` with the default safety limits."""

    return TextNormalizer().normalize(text, cancellation=cancellation)
