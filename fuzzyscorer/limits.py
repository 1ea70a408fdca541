"""Fixed safety limits bounding the work of a single scoring call.

These values are not runtime-tunable; they cap the quadratic clustering pass
and the per-pair distance computation.
"""

from __future__ import annotations

from .errors import InvalidThresholdError

MAX_WORDS_PER_TEXT = 10_000
MAX_WORD_LENGTH = 256
MIN_SIMILARITY_THRESHOLD = 0
MAX_SIMILARITY_THRESHOLD = 50


def validate_threshold(threshold: object) -> int:
    """Return `threshold` when it is an integer within the accepted range.

    Raises:
        InvalidThresholdError: For non-integers, booleans, and out-of-range values.
    """

    if (
        isinstance(threshold, bool)
        or not isinstance(threshold, int)
        or not MIN_SIMILARITY_THRESHOLD <= threshold <= MAX_SIMILARITY_THRESHOLD
    ):
        raise InvalidThresholdError(
            value=threshold,
            minimum=MIN_SIMILARITY_THRESHOLD,
            maximum=MAX_SIMILARITY_THRESHOLD,
        )
    return threshold
