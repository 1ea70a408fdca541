"""Shared typed data models for FuzzyScorer.

This package contains dataclasses returned by the scoring operations and
shared between modules without circular imports.
"""

from .datatypes import WordScore

__all__ = ["WordScore"]
