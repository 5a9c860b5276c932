# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/__init__.py

"""git-helper - shortcuts for common git tasks and best practices."""
