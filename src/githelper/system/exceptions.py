# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/system/exceptions.py

"""
git-helper exception classes.

The CLI layer turns these into console messages and exit codes. Anything
raised by git itself arrives as GitCommandError and keeps git's exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from githelper.core.operations import SyncResult


class GitHelperError(Exception):
    """Base exception for all git-helper errors."""
    pass


class ConfigError(GitHelperError):
    """Raised when the git-helper configuration cannot be loaded or validated."""
    pass


class NotARepositoryError(GitHelperError):
    """Raised when a directory does not contain a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} is not a valid Git repository.")


class GitCommandError(GitHelperError):
    """A git command exited with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        message = f"git {' '.join(self.args_list)} failed with exit code {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


# === SYNC ERRORS ===

class SyncError(GitHelperError):
    """Base class for controlled aborts of the sync operation."""

    def __init__(self, message: str, result: Optional["SyncResult"] = None):
        self.result = result
        super().__init__(message)


class MissingRemoteError(SyncError):
    """No remote is configured for the repository."""
    pass


class SyncConflictError(SyncError):
    """pull --rebase stopped; the rebase is left for manual resolution."""
    pass
