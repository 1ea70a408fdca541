"""Shared pytest fixtures for the full FuzzyScorer test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def typo_text() -> str:
    """Provide a short text mixing exact repeats, typos, and casing variants."""

    return "Apple aple apple Banana bananna banana cherry Cherry cheery"


@pytest.fixture(autouse=True)
def _clear_scorer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `FUZZYSCORER_*` variables from leaking into config resolution."""

    for key in (
        "FUZZYSCORER_THRESHOLD",
        "FUZZYSCORER_TIMEOUT_SECONDS",
        "FUZZYSCORER_DEFAULT_TEXT",
        "FUZZYSCORER_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
