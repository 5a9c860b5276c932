# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/system/display.py

# Standard library imports
from pathlib import Path
from typing import Sequence

# Third-party imports
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local imports
from githelper.core.history import HistoryEntry, RepositoryStats
from githelper.core.hygiene import FlaggedFile, HygieneReport
from githelper.core.operations import SyncResult, UndoResult
from githelper.core.settings import SettingsReport


def display_settings_report(console: Console, err_console: Console, report: SettingsReport) -> None:
    """Show configured values, or one warning and one fix per missing setting.

    Warnings go to the error stream; the summary is only printed when
    nothing is missing.
    """
    if report.is_complete:
        console.print("[green]Git basic settings are properly configured:[/green]")
        for setting in report.settings:
            console.print(f"  {setting.key}: {escape(setting.value or '')}")
        return

    for setting in report.missing:
        err_console.print(f"[yellow]Warning:[/yellow] '{setting.key}' is not set!")
    err_console.print("Please configure these settings using the following commands:")
    for setting in report.missing:
        err_console.print(f"  {escape(setting.remediation)}", highlight=False)


def display_required_files(console: Console, err_console: Console, report: HygieneReport) -> None:
    console.print("Checking for necessary files in the repository root...")
    if not report.missing_files:
        console.print("[green]All necessary files are present in the repository root.[/green]")
        return
    for name in report.missing_files:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(name)} is missing in the repository root.")
    err_console.print("Please add the missing files to the repository root.")


def display_remote_status(console: Console, err_console: Console, report: HygieneReport) -> None:
    if report.has_remote:
        console.print(f"Remote repository is configured: {escape(', '.join(report.remotes))}")
    else:
        err_console.print("[yellow]Warning:[/yellow] No remote repository configured.")


def display_non_executable_scripts(console: Console, scripts: Sequence[Path]) -> None:
    if not scripts:
        console.print("[green]All shell scripts are executable.[/green]")
        return
    console.print("[yellow]Warning:[/yellow] Some shell scripts are not executable:")
    for script in scripts:
        console.print(f"  {escape(str(script))}", highlight=False)


def display_scripts_fixed(
    console: Console, scripts: Sequence[Path], not_committed: Sequence[Path] = ()
) -> None:
    """Report the committed scripts, and the ignored ones that were only chmodded."""
    if scripts:
        console.print(
            f"[green]✓[/green] {len(scripts)} shell scripts have been made executable "
            "and the changes have been committed."
        )
    if not_committed:
        console.print("Made executable but not committed (ignored by git):")
        for script in not_committed:
            console.print(f"  {escape(str(script))}", highlight=False)


def display_flagged_files(console: Console, flagged: Sequence[FlaggedFile]) -> None:
    if not flagged:
        console.print("[green]No inappropriate files found.[/green]")
        return
    console.print("[yellow]Warning:[/yellow] The following inappropriate files were found:")
    for item in flagged:
        console.print(f"  {escape(str(item.path))}: {item.description}", highlight=False)


def display_history(console: Console, entries: Sequence[HistoryEntry]) -> None:
    """One plain line per commit; no markup so subjects print verbatim."""
    for entry in entries:
        console.print(entry.formatted(), markup=False, highlight=False)


def history_to_table(entries: Sequence[HistoryEntry]) -> Table:
    """Convert history entries to a rich Table for the --table view."""
    table = Table()
    table.add_column("Date", style="green", no_wrap=True)
    table.add_column("Author", style="cyan")
    table.add_column("Subject")
    for entry in entries:
        table.add_row(entry.author_date, escape(entry.author_name), escape(entry.subject))
    return table


def display_stats(console: Console, stats: RepositoryStats) -> None:
    console.print(stats.summary(), markup=False, highlight=False)


def display_undo(console: Console, result: UndoResult) -> None:
    console.print(f'Undo of last commit "{escape(result.subject)}" successful.', highlight=False)


def display_sync_conflict(console: Console, err_console: Console, result: SyncResult) -> None:
    """Show git's own status after a failed pull --rebase."""
    if result.pull_output:
        err_console.print(f"[dim]{escape(result.pull_output)}[/dim]")
    if result.status_output:
        console.print(result.status_output.rstrip(), markup=False, highlight=False)
    if result.stash_pending:
        err_console.print(
            "Your local changes are still stashed. "
            "Run 'git stash pop' after resolving the conflicts."
        )
