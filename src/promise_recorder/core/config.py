# src/promise_recorder/core/config.py
"""
Configuration schema and loading for promise trackers.

Uses Pydantic for validation and YAML for test fixtures. Settings are
frozen (immutable) after construction.

Precedence (highest to lowest):
1. overrides - dict passed by the caller (e.g., a pytest fixture)
2. config file - YAML file on disk
3. defaults - Built-in Pydantic defaults
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from promise_recorder.contracts.results import (
    PromiseResult,
    PromiseResultFailed,
    PromiseResultNotReady,
    PromiseResultSuccessful,
)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class PromiseResultSettings(BaseModel):
    """One entry of the result feed.

    Example YAML:
        promise_results:
          - status: successful
            value_hex: "0x2a"
          - status: failed
          - status: not_ready
    """

    model_config = {"frozen": True, "extra": "forbid"}

    status: Literal["not_ready", "successful", "failed"] = Field(
        description="Outcome of the earlier promise",
    )
    value_hex: str | None = Field(
        default=None,
        description="Hex-encoded return value (successful results only, optional 0x prefix)",
    )

    @field_validator("value_hex")
    @classmethod
    def validate_hex(cls, v: str | None) -> str | None:
        """Value must decode as hex."""
        if v is None:
            return v
        digits = v[2:] if v.lower().startswith("0x") else v
        try:
            bytes.fromhex(digits)
        except ValueError as e:
            raise ValueError(f"value_hex is not valid hex: {v!r}") from e
        return v

    @model_validator(mode="after")
    def validate_value_matches_status(self) -> PromiseResultSettings:
        """Only successful results carry a value."""
        if self.status != "successful" and self.value_hex is not None:
            raise ValueError(f"value_hex is only allowed for successful results, not {self.status}")
        return self

    def to_result(self) -> PromiseResult:
        if self.status == "not_ready":
            return PromiseResultNotReady()
        if self.status == "failed":
            return PromiseResultFailed()
        value = self.value_hex or ""
        digits = value[2:] if value.lower().startswith("0x") else value
        return PromiseResultSuccessful(bytes.fromhex(digits))


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON lines instead of console output",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        normalized = v.upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return normalized


class TrackerSettings(BaseModel):
    """Top-level settings for a PromiseTracker fixture."""

    model_config = {"frozen": True, "extra": "forbid"}

    promise_results: tuple[PromiseResultSettings, ...] = Field(
        default=(),
        description="Results visible to callbacks, in host order",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    def to_promise_results(self) -> tuple[PromiseResult, ...]:
        return tuple(entry.to_result() for entry in self.promise_results)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


# Regex pattern for ${VAR} or ${VAR:-default} syntax
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


def _expand_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively expand ${VAR} and ${VAR:-default} patterns in config values.

    Unset variables without a default are left as-is.
    """

    def replacer(match: re.Match[str]) -> str:
        env_value = os.environ.get(match.group(1))
        if env_value is not None:
            return env_value
        default = match.group(2)
        if default is not None:
            return default
        return match.group(0)

    def _expand_value(value: Any) -> Any:
        if isinstance(value, str):
            return _ENV_VAR_PATTERN.sub(replacer, value)
        elif isinstance(value, dict):
            return {k: _expand_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [_expand_value(item) for item in value]
        else:
            return value

    return {k: _expand_value(v) for k, v in config.items()}


def load_settings(config_path: Path, *, overrides: dict[str, Any] | None = None) -> TrackerSettings:
    """Load tracker settings from a YAML file.

    Args:
        config_path: Path to YAML configuration file
        overrides: Values layered over the file (highest precedence)

    Returns:
        Validated TrackerSettings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is not a YAML mapping
        yaml.YAMLError: If YAML is malformed
        pydantic.ValidationError: If configuration fails validation
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must be a YAML mapping, got {type(loaded).__name__}")

    raw_config = _expand_env_vars(loaded)
    if overrides is not None:
        raw_config = deep_merge(raw_config, overrides)

    return TrackerSettings(**raw_config)
