# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/utils.py

"""
CLI utility functions shared by git-helper commands.

- Repository guard for directory-scoped commands
- Translation of git-helper exceptions into console output and exit codes

All functions handle console output and typer exits consistently.
"""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from githelper.config.manager import UserConfig, load_merged_user_config
from githelper.core.repository import require_git_repo
from githelper.system.exceptions import (
    ConfigError,
    GitCommandError,
    GitHelperError,
    NotARepositoryError,
)


def ensure_git_repo(err_console: Console, directory: str) -> Path:
    """
    Check that directory contains a git repository.

    Args:
        err_console: Rich console for error output
        directory: Directory given on the command line

    Returns:
        The directory as a Path

    Raises:
        typer.Exit: With code 1 if the directory has no .git directory
    """
    try:
        return require_git_repo(directory)
    except NotARepositoryError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)


def load_config_with_console(err_console: Console) -> UserConfig:
    """Load git-helper's own configuration, exiting 1 on errors."""
    try:
        return load_merged_user_config()
    except ConfigError as e:
        handle_config_error(err_console, str(e))


def exit_code_for(error: Exception) -> int:
    """Git failures keep git's exit status; every other error exits 1."""
    if isinstance(error, GitCommandError):
        return error.returncode
    return 1


def handle_config_error(err_console: Console, error_message: str) -> NoReturn:
    """Handle configuration errors with consistent formatting."""
    err_console.print(f"[red]✗[/red] Configuration error: {escape(error_message)}")
    raise typer.Exit(1)


def handle_operation_error(err_console: Console, operation: str, error: GitHelperError) -> NoReturn:
    """Handle operation errors with consistent formatting."""
    err_console.print(f"[red]✗[/red] Error {operation}: {escape(str(error))}")
    raise typer.Exit(exit_code_for(error))
