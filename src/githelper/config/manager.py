# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from githelper.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "githelper.yml"

DEFAULT_REQUIRED_FILES: Final[tuple[str, ...]] = ("README.md", ".gitignore", ".gitattributes")
DEFAULT_SCRIPT_SUFFIXES: Final[tuple[str, ...]] = (".sh",)
DEFAULT_FIX_COMMIT_MESSAGE: Final = "Make scripts executable"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so tests can redirect the environment.
    """
    return (
        Path("/etc/githelper") / USER_CFG,  # System defaults
        Path.home() / ".config" / "githelper" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "githelper" / USER_CFG,  # XDG override
        Path(os.getenv("GITHELPER_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Later files override earlier ones key by key. Missing files are skipped;
    a file that exists but cannot be parsed raises ConfigError.
    """
    merged_data: dict = {}
    found_configs = []

    for candidate in candidates:
        # Unset env vars produce relative paths like "githelper/githelper.yml"
        if not candidate.is_absolute() or not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {candidate}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {candidate} must contain a mapping")

        merged_data.update(data)
        found_configs.append(str(candidate))
        logger.debug(f"Loaded config from {candidate}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug(f"No {USER_CFG} found, using defaults")
    return merged_data


# ---- Models ----

class HygieneSettings(BaseModel):
    """Settings for the check_repo hygiene checks."""
    required_files: list[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_FILES))
    script_suffixes: list[str] = Field(default_factory=lambda: list(DEFAULT_SCRIPT_SUFFIXES))
    fix_commit_message: str = DEFAULT_FIX_COMMIT_MESSAGE

    @field_validator("script_suffixes")
    @classmethod
    def normalize_suffixes(cls, suffixes: list[str]) -> list[str]:
        """Accept suffixes with or without the leading dot."""
        return [s if s.startswith(".") else f".{s}" for s in suffixes]


class UserConfig(BaseModel):
    """git-helper user configuration. Every field has a default."""

    # Optional logging configuration
    local_log: Optional[Path] = None

    hygiene: HygieneSettings = Field(default_factory=HygieneSettings)

    @field_validator("local_log")
    @classmethod
    def local_log_must_be_absolute(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and not value.is_absolute():
            raise ValueError(f"local_log path must be absolute: {value}")
        return value


def load_merged_user_config() -> UserConfig:
    """Load and merge user config from all locations (system defaults + user overrides)."""
    merged_data = _load_merged_config_data(_get_user_config_search_paths())
    try:
        return UserConfig.model_validate(merged_data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
