# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/settings.py

"""
Basic git configuration check.

Reads user.name, user.email and push.default from git's configuration
store. Nothing is written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Optional

from githelper.core.git import PathLike, get_config_value

# Checked keys, in display order, with the command that fixes each one
REQUIRED_SETTINGS: Final[dict[str, str]] = {
    "user.name": "git config --global user.name 'Your Name'",
    "user.email": "git config --global user.email 'your.email@example.com'",
    "push.default": "git config --global push.default current",
}


@dataclass
class GitSetting:
    key: str
    value: Optional[str]

    @property
    def is_set(self) -> bool:
        return self.value is not None

    @property
    def remediation(self) -> str:
        return REQUIRED_SETTINGS[self.key]


@dataclass
class SettingsReport:
    settings: list[GitSetting] = field(default_factory=list)

    @property
    def missing(self) -> list[GitSetting]:
        return [s for s in self.settings if not s.is_set]

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict:
        return {
            "complete": self.is_complete,
            "settings": {s.key: s.value for s in self.settings},
            "missing": [s.key for s in self.missing],
        }


def check_basic_settings(cwd: Optional[PathLike] = None) -> SettingsReport:
    """Read every required setting and return the report."""
    return SettingsReport(
        settings=[GitSetting(key, get_config_value(key, cwd=cwd)) for key in REQUIRED_SETTINGS]
    )
