# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/system/__init__.py

"""System-level support: exceptions, logging, display and JSON output."""
