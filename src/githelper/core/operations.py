# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/operations.py

"""
State-changing operations: undo and sync.

Both work on the current directory (or cwd when given) and leave all
locking and atomicity to git. Git failures propagate as GitCommandError;
only the missing-remote and pull-conflict cases of sync are turned into
controlled SyncError aborts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from githelper.core.git import PathLike, git_output, git_succeeds, list_remotes, run_git
from githelper.system.exceptions import MissingRemoteError, SyncConflictError

Notify = Callable[[str], None]


@dataclass
class UndoResult:
    subject: str


@dataclass
class SyncResult:
    """What sync did so far. Carried by SyncError when it aborts."""
    stashed: bool = False
    stash_restored: bool = False
    pulled: bool = False
    pushed: bool = False
    tags_pushed: bool = False
    pull_output: str = ""
    status_output: str = ""

    @property
    def stash_pending(self) -> bool:
        return self.stashed and not self.stash_restored

    def to_dict(self) -> dict:
        return {
            "stashed": self.stashed,
            "stash_restored": self.stash_restored,
            "pulled": self.pulled,
            "pushed": self.pushed,
            "tags_pushed": self.tags_pushed,
        }


def undo_last_commit(cwd: Optional[PathLike] = None) -> UndoResult:
    """Soft-reset the current branch by one commit, keeping its changes staged.

    Raises:
        GitCommandError: If there is no commit to read or no parent to reset to
    """
    subject = git_output(["log", "-1", "--pretty=%s"], cwd=cwd)
    run_git(["reset", "--soft", "HEAD~1"], cwd=cwd)
    logger.info(f"Undid commit: {subject}")
    return UndoResult(subject=subject)


def has_local_changes(cwd: Optional[PathLike] = None) -> bool:
    """True if the work tree or the index differs from HEAD."""
    return not (
        git_succeeds(["diff", "--quiet"], cwd=cwd)
        and git_succeeds(["diff", "--cached", "--quiet"], cwd=cwd)
    )


def _restore_stash(result: SyncResult, notify: Notify, cwd: Optional[PathLike]) -> None:
    run_git(["stash", "pop"], cwd=cwd)
    result.stash_restored = True
    notify("Local changes unstashed.")


def sync_repository(cwd: Optional[PathLike] = None, notify: Optional[Notify] = None) -> SyncResult:
    """Stash, pull --rebase, push, push tags, and restore the stash.

    Whether a stash has to be restored is decided by the stash this call
    made, never by inspecting the stash list.

    Args:
        cwd: Repository work tree (default: current directory)
        notify: Called with a short message after each completed step

    Returns:
        SyncResult describing the completed steps

    Raises:
        MissingRemoteError: No remote is configured; nothing was fetched or pushed
        SyncConflictError: pull --rebase failed; the rebase is left in progress
        GitCommandError: Any other git failure (push rejected, stash pop conflict)
    """
    notify = notify or (lambda message: None)
    result = SyncResult()

    if has_local_changes(cwd):
        notify("Local changes detected.")
        run_git(["stash", "push", "--include-untracked"], cwd=cwd)
        result.stashed = True
        notify("Local changes stashed.")

    if not list_remotes(cwd=cwd):
        # Nothing has touched the work tree since the stash, so it pops cleanly
        if result.stashed:
            _restore_stash(result, notify, cwd)
        raise MissingRemoteError(
            "No remote repository configured. Please add a remote repository.", result
        )

    pull = run_git(["pull", "--rebase"], cwd=cwd, check=False)
    result.pull_output = (pull.stdout + pull.stderr).strip()
    if pull.returncode != 0:
        result.status_output = run_git(["status"], cwd=cwd, check=False).stdout
        raise SyncConflictError(
            "There were conflicts during the pull. Please resolve them.", result
        )
    result.pulled = True
    notify("Remote changes pulled successfully.")

    run_git(["push"], cwd=cwd)
    result.pushed = True
    notify("Changes pushed to the remote repository.")

    run_git(["push", "--tags"], cwd=cwd)
    result.tags_pushed = True
    notify("Tags pushed to the remote repository.")

    if result.stashed:
        _restore_stash(result, notify, cwd)

    return result
