"""Configuration system for qselect.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (QSELECT_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from qselect.exceptions import ConfigValidationError

_OVERRIDE_PREFIX = "qselect_"


class SelectConfig(BaseSettings):
    """Configuration for qselect.

    Resolution order: init kwargs -> env vars (QSELECT_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="QSELECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Pivot choice ---

    pivot_strategy: str = Field(
        default="last",
        description="Pivot strategy: 'last', 'median_of_three', 'random'",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the 'random' pivot strategy (None = unseeded)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


_ALL_FIELDS: frozenset[str] = frozenset(SelectConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'qselect_' prefix from an override key, if present."""
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Field overrides, with or without the 'qselect_' prefix.

    Raises:
        ConfigValidationError: If any key does not name a config field.
    """
    for key in overrides:
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )


def resolve_config(
    defaults: SelectConfig,
    overrides: dict[str, Any] | None,
) -> SelectConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call field overrides (e.g. ``{"pivot_strategy": "random"}``).

    Returns:
        A new SelectConfig with overrides applied, or *defaults* itself when
        there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update({_strip_prefix(key): value for key, value in overrides.items()})
    try:
        return SelectConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
