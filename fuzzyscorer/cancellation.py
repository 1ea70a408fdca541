"""Cooperative cancellation for long-running scoring calls.

Responsibilities:
- Provide a flag that callers (possibly on another thread) can set.
- Optionally expire on a monotonic deadline.
- Let scoring loops poll between tokens and abort without partial results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from threading import Event
from time import monotonic
from typing import Callable

from .errors import ScoringCancelledError


@dataclass(slots=True)
class CancellationToken:
    """Polled cancellation flag with an optional monotonic deadline."""

    deadline: float | None = None
    clock: Callable[[], float] = monotonic
    _event: Event = field(default_factory=Event)

    @classmethod
    def with_timeout(
        cls,
        seconds: float,
        clock: Callable[[], float] = monotonic,
    ) -> CancellationToken:
        """Create a token that reports cancellation once `seconds` have elapsed."""

        if not (math.isfinite(seconds) and seconds > 0):
            raise ValueError("`seconds` must be a positive, finite number.")
        return cls(deadline=clock() + seconds, clock=clock)

    def cancel(self) -> None:
        """Request cancellation; safe to call from any thread."""

        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Return whether cancellation was requested or the deadline passed."""

        if self._event.is_set():
            return True
        if self.deadline is not None and self.clock() >= self.deadline:
            self._event.set()
            return True
        return False

    def raise_if_cancelled(self, stage: str = "cluster") -> None:
        """Raise `ScoringCancelledError` when cancellation is pending."""

        if self.is_cancelled:
            raise ScoringCancelledError(stage=stage)
