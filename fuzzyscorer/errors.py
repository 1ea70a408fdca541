"""Domain exceptions for scoring and CLI diagnostics."""

from __future__ import annotations


class ScoringError(RuntimeError):
    """Raised when a specific scoring stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped scoring error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class InputTooLargeError(ScoringError):
    """Raised when normalized text holds more words than the configured limit."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            stage="normalize",
            detail=f"Input contains {count} words, exceeding limit of {limit}.",
            hint="Split the text into smaller pieces and score them separately.",
        )
        self.count = count
        self.limit = limit


class InvalidThresholdError(ScoringError):
    """Raised when a similarity threshold falls outside the accepted range."""

    def __init__(self, value: object, minimum: int, maximum: int) -> None:
        super().__init__(
            stage="validate",
            detail=(
                f"Similarity threshold must be an integer between {minimum} and {maximum}, "
                f"got {value!r}."
            ),
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ScoringCancelledError(ScoringError):
    """Raised when a caller cooperatively aborts a scoring run."""

    def __init__(self, stage: str = "cluster") -> None:
        super().__init__(stage=stage, detail="Scoring was cancelled before completion.")
