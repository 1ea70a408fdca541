"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for score rows and
command diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NoReturn

import typer

from .errors import ScoringError
from .models.datatypes import WordScore


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ScoringError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_word_scores(scores: Iterable[WordScore]) -> None:
    """Print one `text: score` row per result, in result order."""

    for word_score in scores:
        typer.echo(f"{word_score.text}: {word_score.score}")
