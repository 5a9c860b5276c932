# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/commands/actions.py

"""
Action command handlers - commands that can change the repository.

Handles: check_repo, undo, sync
"""

import typer
from rich.console import Console
from rich.markup import escape

from githelper.cli.utils import ensure_git_repo, load_config_with_console
from githelper.core.hygiene import HygieneReport, inspect_repository, make_scripts_executable
from githelper.core.operations import SyncResult, UndoResult, sync_repository, undo_last_commit
from githelper.system.display import (
    display_flagged_files,
    display_non_executable_scripts,
    display_remote_status,
    display_required_files,
    display_scripts_fixed,
    display_sync_conflict,
    display_undo,
)
from githelper.system.exceptions import MissingRemoteError, SyncConflictError


def check_repo(
    console: Console,
    err_console: Console,
    directory: str = ".",
    assume_yes: bool = False
) -> HygieneReport:
    """Check directory against common repository practices.

    The only change this can make is committing the executable bit for
    shell scripts, and only after the user (or --yes) agrees.

    Args:
        console: Rich console for output
        err_console: Rich console for warnings
        directory: Repository directory
        assume_yes: Answer the fix prompt with yes

    Returns:
        Hygiene report for JSON output
    """
    repo_dir = ensure_git_repo(err_console, directory)
    settings = load_config_with_console(err_console).hygiene

    report = inspect_repository(repo_dir, settings)

    display_required_files(console, err_console, report)
    display_remote_status(console, err_console, report)
    display_non_executable_scripts(console, report.non_executable_scripts)

    if report.non_executable_scripts:
        confirmed = assume_yes or typer.confirm(
            "Do you want to make them executable and commit the changes?", default=False
        )
        if confirmed:
            report.fixed_scripts = make_scripts_executable(
                repo_dir, report.non_executable_scripts, settings.fix_commit_message
            )
            not_committed = [s for s in report.non_executable_scripts if s not in report.fixed_scripts]
            display_scripts_fixed(console, report.fixed_scripts, not_committed)

    display_flagged_files(console, report.flagged_files)
    return report


def undo(console: Console, err_console: Console) -> UndoResult:
    """Undo the last commit in the current directory, keeping its changes."""
    result = undo_last_commit()
    display_undo(console, result)
    return result


def sync(console: Console, err_console: Console) -> SyncResult:
    """Sync the current branch with its remote.

    Raises:
        typer.Exit: With code 1 if no remote exists or the pull hits conflicts
    """
    try:
        return sync_repository(notify=lambda message: console.print(escape(message)))
    except MissingRemoteError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except SyncConflictError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        display_sync_conflict(console, err_console, e.result)
        raise typer.Exit(1)
