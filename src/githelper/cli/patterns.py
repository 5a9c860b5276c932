# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/patterns.py

"""
Decorator pattern shared by every git-helper command.

command_pattern() supplies the stdout and stderr consoles to a handler,
turns GitHelperError into an error message plus exit code, and emits the
handler's result as JSON when --json was given.
"""

from functools import wraps
from typing import Any, Callable

from rich.console import Console

from githelper.cli.utils import handle_operation_error
from githelper.system.exceptions import GitHelperError
from githelper.system.json_collector import JSONCollector

# Consoles resolve sys.stdout/sys.stderr at print time, so test runners can capture them
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def command_pattern(command_name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a handler(console, err_console, **kwargs) for use from a typer command."""

    def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(handler)
        def wrapper(to_json: bool = False, **kwargs: Any) -> Any:
            collector = JSONCollector(enabled=to_json)
            try:
                result = handler(console, err_console, **kwargs)
            except GitHelperError as e:
                collector.capture_error(command_name, e)
                collector.output()
                handle_operation_error(err_console, command_name, e)

            collector.capture_success(command_name, result)
            collector.output()
            return result

        return wrapper

    return decorator
