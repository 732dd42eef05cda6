# SPDX-License-Identifier: MIT
"""Lint options and gate profiles.

Options resolve with CLI > env > TOML file > default priority. The TOML
file is either given explicitly or found as ``[tool.stylegate]`` in the
nearest ``pyproject.toml``.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel, to_snake

from stylegate.errors import ConfigurationError
from stylegate.rules.base import RuleSeverity
from stylegate.rules.context import DEFAULT_OPERATORS

ENV_PREFIX = "STYLEGATE_"

# Environment variable suffix -> option name
_ENV_OPTIONS: dict[str, str] = {
    "SOFT_LIMIT": "soft_limit",
    "HARD_LIMIT": "hard_limit",
    "INDENT_SIZE": "indent_size",
    "TAB_WIDTH": "tab_width",
    "ENABLED_RULES": "enabled_rules",
    "WORKERS": "workers",
}


class LintConfig(BaseModel):
    """Recognized lint options. Accepts snake_case names or camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    soft_limit: int = Field(default=80, ge=1)
    hard_limit: int = Field(default=120, ge=1)
    indent_size: int = Field(default=2, ge=1)
    tab_width: int = Field(default=1, ge=1)
    enabled_rules: frozenset[str] | None = None
    operators: tuple[str, ...] = DEFAULT_OPERATORS
    workers: int = Field(default=4, ge=1)

    @field_validator("operators")
    @classmethod
    def _operators_are_tokens(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for token in value:
            if not token or any(ch.isspace() for ch in token):
                msg = f"operator tokens must be non-empty and contain no whitespace: {token!r}"
                raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _limits_ordered(self) -> LintConfig:
        if self.soft_limit > self.hard_limit:
            msg = f"softLimit ({self.soft_limit}) must not exceed hardLimit ({self.hard_limit})"
            raise ValueError(msg)
        return self


@dataclass(frozen=True)
class ProfileConfig:
    """Gate profile: the lowest severity that fails a run."""

    name: str
    fail_on: RuleSeverity


PROFILES: dict[str, ProfileConfig] = {
    "default": ProfileConfig(name="default", fail_on=RuleSeverity.ERROR),
    "strict": ProfileConfig(name="strict", fail_on=RuleSeverity.WARNING),
}


def _error_summary(e: ValidationError) -> str:
    """Field paths and messages only, without echoing input values."""
    parts: list[str] = []
    for err in e.errors():
        loc = ".".join(str(loc) for loc in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _option_name(key: str) -> str:
    return to_snake(key.replace("-", "_"))


def make_config(options: Mapping[str, Any]) -> LintConfig:
    """Validate *options* (any key spelling) into a LintConfig.

    Raises:
        ConfigurationError: If any option is unknown or invalid.
    """
    normalized = {_option_name(k): v for k, v in options.items()}
    try:
        return LintConfig.model_validate(normalized)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {_error_summary(e)}") from e


def find_pyproject(search_path: Path) -> Path | None:
    """Return the nearest pyproject.toml at or above *search_path*, if any."""
    current = search_path.resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Read stylegate options from a TOML file.

    ``pyproject.toml`` is read from ``[tool.stylegate]``; any other file from
    a ``[stylegate]`` table when present, else from its top level.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {path}: {e.strerror or type(e).__name__}"
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid UTF-8") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

    if path.name == "pyproject.toml":
        section = data.get("tool", {}).get("stylegate", {})
    else:
        section = data.get("stylegate", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"stylegate settings in {path} must be a table")
    return section


def _env_options() -> dict[str, Any]:
    options: dict[str, Any] = {}
    for suffix, name in _ENV_OPTIONS.items():
        raw = os.environ.get(ENV_PREFIX + suffix)
        if raw is None or not raw.strip():
            continue
        if name == "enabled_rules":
            options[name] = [part.strip() for part in raw.split(",") if part.strip()]
        else:
            options[name] = raw.strip()
    return options


def load_config(
    cli_options: Mapping[str, Any] | None = None,
    *,
    config_path: Path | None = None,
    search_from: Path | None = None,
) -> LintConfig:
    """Resolve lint options with CLI > env > file > default priority.

    Args:
        cli_options: Options from command-line flags. ``None`` values are ignored.
        config_path: Explicit TOML file. Takes precedence over pyproject discovery.
        search_from: Directory to start looking for ``pyproject.toml``.

    Raises:
        ConfigurationError: If a file is missing or malformed, or an option is invalid.
    """
    merged: dict[str, Any] = {}
    if config_path is not None:
        file_options = read_config_file(config_path)
    elif search_from is not None and (pyproject := find_pyproject(search_from)) is not None:
        file_options = read_config_file(pyproject)
    else:
        file_options = {}

    merged.update({_option_name(k): v for k, v in file_options.items()})
    merged.update(_env_options())
    if cli_options:
        merged.update({_option_name(k): v for k, v in cli_options.items() if v is not None})
    return make_config(merged)


def load_profile(cli_profile: str | None = None) -> ProfileConfig:
    """Load profile config with CLI > env > default priority.

    Raises:
        ConfigurationError: If the profile name is not recognized.
    """
    name = cli_profile or os.environ.get(ENV_PREFIX + "PROFILE", "default")
    if name not in PROFILES:
        msg = f"Unknown profile: {name!r}. Valid profiles: {sorted(PROFILES.keys())}"
        raise ConfigurationError(msg)
    return PROFILES[name]
