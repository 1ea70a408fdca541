"""Configuration model and loaders for the FuzzyScorer CLI.

Responsibilities:
- Define command defaults as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Merge sources with deterministic precedence.

Key types:
- `ScorerConfig`: normalized command settings.
- `ConfigLoader`: static construction helpers for `ScorerConfig`.

Safety limits live in `fuzzyscorer.limits` and are not configurable.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import math
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import InvalidThresholdError
from .limits import validate_threshold
from .parsing import (
    normalize_optional_string,
    parse_optional_float,
    parse_optional_int,
    parse_permissive_boolean,
)

DEFAULT_SAMPLE_TEXT = "pierwszy tekst drugi tekst pierwszy tekst"


@dataclass(slots=True)
class ScorerConfig:
    """Command settings for one CLI invocation.

    Attributes:
        threshold: Similarity threshold for fuzzy mode; `None` selects exact mode.
        timeout_seconds: Optional cancellation deadline for the scoring call.
        default_text: Text scored when no words are given on the command line.
        verbose: Whether stage events are logged to stderr.
    """

    threshold: int | None = None
    timeout_seconds: float | None = None
    default_text: str = DEFAULT_SAMPLE_TEXT
    verbose: bool = False

    def validate(self) -> None:
        """Validate configuration values before scoring."""

        if self.threshold is not None:
            try:
                validate_threshold(self.threshold)
            except InvalidThresholdError as exc:
                raise ValueError(f"`threshold`: {exc.detail}") from exc
        if self.timeout_seconds is not None and not (
            math.isfinite(self.timeout_seconds) and self.timeout_seconds > 0
        ):
            raise ValueError("`timeout_seconds` must be a positive, finite number.")
        if not self.default_text.strip():
            raise ValueError("`default_text` must not be blank.")

    def merged_with(self, overrides: Mapping[str, Any]) -> ScorerConfig:
        """Return a copy where every non-`None` override replaces the field value."""

        values = {item.name: getattr(self, item.name) for item in fields(self)}
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown config field `{key}`.")
            if value is not None:
                values[key] = value
        merged = ScorerConfig(**values)
        merged.validate()
        return merged


class ConfigLoader:
    """Factory methods for building `ScorerConfig` instances."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"threshold", "timeout_seconds", "default_text", "verbose"}
    )

    _ENV_KEYS = {
        "threshold": "FUZZYSCORER_THRESHOLD",
        "timeout_seconds": "FUZZYSCORER_TIMEOUT_SECONDS",
        "default_text": "FUZZYSCORER_DEFAULT_TEXT",
        "verbose": "FUZZYSCORER_VERBOSE",
    }

    @staticmethod
    def from_yaml(path: Path) -> ScorerConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ScorerConfig:
        """Create a validated config from environment variables."""

        return ScorerConfig().merged_with(ConfigLoader.env_overrides(env))

    @staticmethod
    def env_overrides(env: Mapping[str, str] | None = None) -> dict[str, Any]:
        """Read config overrides from environment variables, skipping blank values."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        raw = {
            field_name: env_map[env_key]
            for field_name, env_key in ConfigLoader._ENV_KEYS.items()
            if env_key in env_map
        }
        return ConfigLoader._parse_fields(raw)

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ScorerConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        try:
            return ScorerConfig().merged_with(ConfigLoader._parse_fields(payload))
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc

    @staticmethod
    def _parse_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
        """Convert raw field values into typed overrides."""

        parsed: dict[str, Any] = {}
        if "threshold" in payload:
            parsed["threshold"] = parse_optional_int(payload["threshold"], "threshold")
        if "timeout_seconds" in payload:
            parsed["timeout_seconds"] = parse_optional_float(
                payload["timeout_seconds"], "timeout_seconds"
            )
        if "default_text" in payload:
            parsed["default_text"] = normalize_optional_string(payload["default_text"])
        if "verbose" in payload and normalize_optional_string(payload["verbose"]) is not None:
            verbose = parse_permissive_boolean(payload["verbose"])
            if verbose is None:
                raise ValueError(
                    "`verbose` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            parsed["verbose"] = verbose
        return parsed
