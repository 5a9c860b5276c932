# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/cli/commands/__init__.py

"""
Command handlers for git-helper CLI operations.

This package contains the work behind each CLI command, separated from
the typer interface layer:

- info: Read-only commands (check, log/show_history, stats)
- actions: Commands that may change the repository (check_repo, undo, sync)
"""
