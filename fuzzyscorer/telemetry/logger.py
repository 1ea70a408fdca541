"""Structured scoring-stage logging.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Keep log lines free of input text; only counts and error types are logged.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ScoringLogger:
    """Emit deterministic stage logs for one or more scoring runs.

    Stage name, event, and context travel as bound `extra` fields; the sink's
    format template turns them into one `[phase]` line.
    """

    _FORMAT = "[phase] level={level} stage={extra[stage]} event={extra[event]}{extra[context]}"

    def __init__(self, sink: TextIO | None = None) -> None:
        """Route stage records to `sink` (stdout by default)."""

        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format=self._FORMAT,
            level="INFO",
            colorize=False,
            filter=lambda record: "stage" in record["extra"],
        )

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        _loguru_logger.bind(
            stage=stage,
            event=event,
            context=_format_context(context),
        ).log(level, "{} {}", stage, event)

    def log_stage_start(self, stage: str, **context: object) -> None:
        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event with result counts such as `tokens` or `groups`."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage failure carrying only the exception type name."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
