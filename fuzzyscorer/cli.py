"""Command-line interface for FuzzyScorer.

Responsibilities:
- Join positional words into one text and score it.
- Resolve command settings from CLI options, environment, and YAML config.
- Print one `text: score` row per result and map failures to exit code 1.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cancellation import CancellationToken
from .cli_rendering import echo_word_scores, exit_with_command_error
from .config import ConfigLoader, ScorerConfig
from .errors import ScoringError
from .scorer import WordScorer
from .telemetry.logger import ScoringLogger

app = typer.Typer(
    name="fuzzyscorer",
    help="Score words in text by exact or fuzzy frequency.",
)


class StageProgressIndicator:
    """Render deterministic per-stage progress lines on stderr."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}",
            err=True,
        )


def _load_yaml_config(config_path: Path | None) -> ScorerConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return ScorerConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ScoringError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ScoringError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    threshold: int | None,
    timeout: float | None,
    verbose: bool | None,
) -> ScorerConfig:
    """Resolve settings with precedence: CLI option > environment > YAML > default."""

    base_config = _load_yaml_config(config_file)
    try:
        env_config = base_config.merged_with(ConfigLoader.env_overrides())
    except ValueError as exc:
        raise ScoringError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `FUZZYSCORER_*` variables and rerun.",
        ) from exc
    try:
        resolved = env_config.merged_with({"timeout_seconds": timeout, "verbose": verbose})
    except ValueError as exc:
        raise ScoringError(stage="config", detail=str(exc)) from exc
    if threshold is not None:
        # An explicit option is range-checked by the scorer's `validate` stage.
        resolved = replace(resolved, threshold=threshold)
    return resolved


@app.command("score")
def score_command(
    words: Annotated[
        list[str] | None,
        typer.Argument(help="Words to score; joined with spaces into one text."),
    ] = None,
    threshold: Annotated[
        int | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Maximum edit distance for fuzzy grouping (0-50). Omit for exact counting.",
        ),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Cancel scoring after this many seconds."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    verbose: Annotated[
        bool | None,
        typer.Option("--verbose/--quiet", help="Log scoring stages to stderr."),
    ] = None,
) -> None:
    """Score words in the given text."""

    try:
        config = _resolve_command_config(config_file, threshold, timeout, verbose)

        if words:
            text = " ".join(words)
        else:
            text = config.default_text
            typer.echo("No arguments provided. Using default sample text.", err=True)

        scorer = WordScorer(
            run_logger=ScoringLogger(sink=sys.stderr) if config.verbose else None,
            stage_progress_callback=(
                StageProgressIndicator("score").on_stage_start if config.verbose else None
            ),
        )
        cancellation = (
            CancellationToken.with_timeout(config.timeout_seconds)
            if config.timeout_seconds is not None
            else None
        )
        if config.threshold is None:
            results = scorer.score_exact(text, cancellation=cancellation)
        else:
            results = scorer.score_fuzzy(text, config.threshold, cancellation=cancellation)
    except Exception as exc:
        exit_with_command_error("score", exc)

    echo_word_scores(results)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
