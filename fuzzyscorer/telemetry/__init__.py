"""Telemetry and observability helpers.

This package emits deterministic stage events for scoring runs.
"""

from .logger import ScoringLogger
from .stages import StageProgressCallback, StageTelemetryMixin

__all__ = ["ScoringLogger", "StageProgressCallback", "StageTelemetryMixin"]
