# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/commands/info.py

"""
Info command handlers - read-only information commands.

Handles: check, log (show_history), stats
"""

from typing import Any, Optional

from rich.console import Console

from githelper.cli.utils import ensure_git_repo
from githelper.core.history import RepositoryStats, get_history, get_stats
from githelper.core.settings import SettingsReport, check_basic_settings
from githelper.system.display import (
    display_history,
    display_settings_report,
    display_stats,
    history_to_table,
)


def check(console: Console, err_console: Console) -> SettingsReport:
    """Report user.name, user.email and push.default.

    Args:
        console: Rich console for output
        err_console: Rich console for warnings

    Returns:
        Settings report for JSON output
    """
    report = check_basic_settings()
    display_settings_report(console, err_console, report)
    return report


def log(
    console: Console,
    err_console: Console,
    directory: str = ".",
    limit: Optional[int] = None,
    table: bool = False
) -> dict[str, Any]:
    """Show the commit history of directory as ``subject | author | date`` lines.

    Args:
        console: Rich console for output
        err_console: Rich console for errors
        directory: Repository directory
        limit: Maximum number of commits to show
        table: Render a table instead of plain lines

    Returns:
        Log result for JSON output
    """
    repo_dir = ensure_git_repo(err_console, directory)
    entries = get_history(repo_dir, limit=limit)

    if table:
        console.print(history_to_table(entries))
    else:
        display_history(console, entries)

    return {
        'directory': str(repo_dir),
        'entries': [entry.__dict__ for entry in entries],
        'total_commits': len(entries)
    }


def stats(console: Console, err_console: Console, directory: str = ".") -> RepositoryStats:
    """Print ``<N> commits by <C> contributors`` for directory."""
    repo_dir = ensure_git_repo(err_console, directory)
    repo_stats = get_stats(repo_dir)
    display_stats(console, repo_stats)
    return repo_stats
