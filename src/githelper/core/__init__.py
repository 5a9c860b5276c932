# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/__init__.py

"""Git-facing logic for every git-helper command. No console output here."""
