"""Text preprocessing components.

This package turns raw input into validated word tokens before scoring.
"""

from .normalizer import TextNormalizer, extract_words, is_token_character

__all__ = ["TextNormalizer", "extract_words", "is_token_character"]
