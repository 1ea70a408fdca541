"""Scoring orchestration for exact and fuzzy word scoring.

Responsibilities:
- Validate the similarity threshold before any work begins.
- Run normalization and clustering as named, observable stages.
- Expose module-level `score_exact` and `score_fuzzy` convenience functions.

Every call owns its token list and group state; a failing or cancelled call
raises and returns nothing.
"""

from __future__ import annotations

from .cancellation import CancellationToken
from .limits import validate_threshold
from .models.datatypes import WordScore
from .similarity.clustering import cluster_tokens, count_exact
from .telemetry.logger import ScoringLogger
from .telemetry.stages import StageProgressCallback, StageTelemetryMixin
from .text.normalizer import TextNormalizer


def _summarize_tokens(tokens: list[str]) -> dict[str, object]:
    return {"tokens": len(tokens)}


def _summarize_scores(scores: list[WordScore]) -> dict[str, object]:
    return {"groups": len(scores)}


class WordScorer(StageTelemetryMixin):
    """Score words in free-form text, exactly or by fuzzy grouping."""

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        run_logger: ScoringLogger | None = None,
        stage_progress_callback: StageProgressCallback | None = None,
    ) -> None:
        self._normalizer = normalizer or TextNormalizer()
        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def _normalize(
        self,
        text: str | None,
        cancellation: CancellationToken | None,
    ) -> list[str]:
        return self._run_stage(
            "normalize",
            lambda: self._normalizer.normalize(text, cancellation=cancellation),
            summarize=_summarize_tokens,
        )

    def score_exact(
        self,
        text: str | None,
        cancellation: CancellationToken | None = None,
    ) -> list[WordScore]:
        """Count words case-insensitively.

        The first-seen casing of each word is kept as its label, and results are
        ordered by first appearance.
        """

        tokens = self._normalize(text, cancellation)
        return self._run_stage(
            "cluster",
            lambda: count_exact(tokens, cancellation=cancellation),
            summarize=_summarize_scores,
        )

    def score_fuzzy(
        self,
        text: str | None,
        threshold: int,
        cancellation: CancellationToken | None = None,
    ) -> list[WordScore]:
        """Group near-duplicate words whose edit distance is within `threshold`.

        Raises:
            InvalidThresholdError: If `threshold` is outside `[0, 50]`.
            InputTooLargeError: If the text normalizes to too many words.
            ScoringCancelledError: If `cancellation` fires before completion.
        """

        self._run_stage("validate", lambda: validate_threshold(threshold))
        tokens = self._normalize(text, cancellation)
        return self._run_stage(
            "cluster",
            lambda: cluster_tokens(tokens, threshold, cancellation=cancellation),
            summarize=_summarize_scores,
        )


def score_exact(
    text: str | None,
    cancellation: CancellationToken | None = None,
) -> list[WordScore]:
    """Case-insensitive exact-match word frequency count."""

    return WordScorer().score_exact(text, cancellation=cancellation)


def score_fuzzy(
    text: str | None,
    threshold: int,
    cancellation: CancellationToken | None = None,
) -> list[WordScore]:
    """Fuzzy word grouping by edit distance; see `WordScorer.score_fuzzy`."""

    return WordScorer().score_fuzzy(text, threshold, cancellation=cancellation)
