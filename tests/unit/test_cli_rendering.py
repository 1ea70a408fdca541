"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from fuzzyscorer.cli_rendering import echo_word_scores, exit_with_command_error
from fuzzyscorer.errors import InputTooLargeError
from fuzzyscorer.models.datatypes import WordScore


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("score", InputTooLargeError(count=12, limit=10))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "score failed at stage `normalize`: Input contains 12 words" in captured.err
    assert "Hint: Split the text into smaller pieces" in captured.err
    assert captured.out == ""


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-scoring failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("score", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "score failed: unexpected failure" in captured.err


def test_echo_word_scores_prints_rows_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Score rows should be printed one per line to stdout, in result order."""

    echo_word_scores([WordScore("Hello", 2), WordScore("world", 1)])

    assert capsys.readouterr().out.splitlines() == ["Hello: 2", "world: 1"]
