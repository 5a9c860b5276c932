# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/config/__init__.py

"""Configuration for git-helper itself (not git's own configuration store)."""
