# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/main.py

"""
CLI dispatcher for git-helper.

Each command is a thin typer wrapper that routes to a handler in
githelper.cli.commands through command_pattern(). Running without a
command, or with help / -h / --help, prints usage and exits 0.
"""

# Standard library imports
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Optional

# Third-party imports
import typer

# Local imports
from githelper.cli.patterns import command_pattern, console
from githelper.cli.commands import info as info_commands
from githelper.cli.commands import actions as action_commands
from githelper.system.logging_setup import setup_logging

# Initialize Typer app
app = typer.Typer(
    help="""git-helper - help with common git tasks and best practices

[bold blue]Configuration:[/bold blue] check
[bold green]Repository:[/bold green] check_repo, stats
[bold magenta]History:[/bold magenta] log (show_history), undo
[bold red]Remote:[/bold red] sync
""",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("git-helper")
        except PackageNotFoundError:
            pkg_version = "unknown"
        console.print(f"git-helper version {pkg_version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """git-helper - help with common git tasks and best practices."""
    setup_logging(debug=debug)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(name="help")
def help_command(ctx: typer.Context) -> None:
    """Show this message and exit."""
    typer.echo(ctx.parent.get_help())


# =============================================================================
# INFO COMMANDS - Read-only
# =============================================================================

@app.command()
def check(
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> Any:
    """[bold blue]Configuration[/bold blue]: Check basic git user configuration."""
    decorated_handler = command_pattern("check")(info_commands.check)
    return decorated_handler(to_json=to_json)


def log_command(
    directory: str = typer.Argument(".", help="Repository directory"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of commits to show"),
    table: bool = typer.Option(False, "--table", help="Show the history as a table"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> Any:
    """[bold magenta]History[/bold magenta]: Show a brief overview of the git log."""
    decorated_handler = command_pattern("log")(info_commands.log)
    return decorated_handler(to_json=to_json, directory=directory, limit=limit, table=table)


app.command(name="log")(log_command)
app.command(
    name="show_history",
    help="[bold magenta]History[/bold magenta]: Same as log."
)(log_command)


@app.command()
def stats(
    directory: str = typer.Argument(".", help="Repository directory"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON")
) -> Any:
    """[bold green]Repository[/bold green]: Show commit and contributor counts."""
    decorated_handler = command_pattern("stats")(info_commands.stats)
    return decorated_handler(to_json=to_json, directory=directory)


# =============================================================================
# ACTION COMMANDS - May change the repository
# =============================================================================

@app.command(name="check_repo")
def check_repo_command(
    directory: str = typer.Argument(".", help="Repository directory"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Fix non-executable scripts without asking"),
) -> Any:
    """[bold green]Repository[/bold green]: Check DIR for deviations from standard git practices."""
    decorated_handler = command_pattern("check_repo")(action_commands.check_repo)
    return decorated_handler(directory=directory, assume_yes=yes)


@app.command()
def undo() -> Any:
    """[bold magenta]History[/bold magenta]: Undo the last commit while preserving its changes."""
    decorated_handler = command_pattern("undo")(action_commands.undo)
    return decorated_handler()


@app.command()
def sync() -> Any:
    """[bold red]Remote[/bold red]: Sync the current branch with its remote."""
    decorated_handler = command_pattern("sync")(action_commands.sync)
    return decorated_handler()


# =============================================================================
# ENTRY POINT
# =============================================================================

def main() -> None:  # pragma: no cover - entry point
    """Entry point for the git-helper CLI application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
