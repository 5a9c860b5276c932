# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/repository.py

from pathlib import Path
from typing import Union

from loguru import logger

from githelper.system.exceptions import NotARepositoryError

GIT_DIR = ".git"


def is_git_repo(path: Union[str, Path]) -> bool:
    """Return True if path contains a git metadata directory."""
    return (Path(path) / GIT_DIR).is_dir()


def require_git_repo(path: Union[str, Path]) -> Path:
    """Return path as a Path, or raise NotARepositoryError naming it."""
    if not is_git_repo(path):
        logger.debug(f"No {GIT_DIR} directory in {path}")
        raise NotARepositoryError(str(path))
    return Path(path)
