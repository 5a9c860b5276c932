# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/git.py

"""
Git subprocess runner.

Every git invocation in git-helper goes through run_git() so that logging
and error translation live in one place.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from githelper.system.exceptions import GitCommandError

PathLike = Union[str, Path]

# Exit status reported when the git binary itself cannot be started
GIT_NOT_FOUND_EXIT: int = 127


def run_git(
    args: Sequence[str],
    cwd: Optional[PathLike] = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run git with args and return the completed process.

    Args:
        args: Arguments after ``git``
        cwd: Working directory for the command (default: current directory)
        check: Raise GitCommandError on a non-zero exit status

    Returns:
        Completed process with text stdout and stderr

    Raises:
        GitCommandError: If git exits non-zero and check is True, or if git
            cannot be executed at all
    """
    cmd = ["git", *args]
    logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd or '.'})")
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        raise GitCommandError(args, GIT_NOT_FOUND_EXIT, f"failed to execute git: {e}") from e

    if result.returncode != 0:
        logger.debug(f"git exited {result.returncode}: {result.stderr.strip()}")
        if check:
            raise GitCommandError(args, result.returncode, result.stderr)

    return result


def git_output(args: Sequence[str], cwd: Optional[PathLike] = None) -> str:
    """Run a checked git command and return its stripped stdout."""
    return run_git(args, cwd=cwd).stdout.strip()


def git_succeeds(args: Sequence[str], cwd: Optional[PathLike] = None) -> bool:
    """Return True if the git command exits 0.

    Exit status 1 means False; anything else is a real failure and raises.
    Used for predicates such as ``diff --quiet``.
    """
    result = run_git(args, cwd=cwd, check=False)
    if result.returncode == 0:
        return True
    if result.returncode == 1:
        return False
    raise GitCommandError(args, result.returncode, result.stderr)


def get_config_value(key: str, cwd: Optional[PathLike] = None) -> Optional[str]:
    """Read a value from git's configuration store, None if unset."""
    result = run_git(["config", "--get", key], cwd=cwd, check=False)
    if result.returncode == 0:
        return result.stdout.strip()
    if result.returncode == 1:
        return None
    raise GitCommandError(["config", "--get", key], result.returncode, result.stderr)


def list_remotes(cwd: Optional[PathLike] = None) -> list[str]:
    """Return the names of the configured remotes."""
    output = git_output(["remote"], cwd=cwd)
    return [line.strip() for line in output.splitlines() if line.strip()]
