# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/system/json_collector.py

import json
from datetime import datetime
from typing import Any


class JSONCollector:
    """Collects structured results from CLI commands for scripting.

    When enabled, captures the command result and writes it to stdout as
    JSON between <JSON-STDOUT> markers. When disabled, all methods are no-ops.
    """

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self.data = {} if enabled else None

    def capture_success(self, command: str, result: Any) -> None:
        """Capture a successful command result.

        Args:
            command: Name of the command that produced the result
            result: Object with a to_dict() method, or anything JSON-serializable
        """
        if not self.enabled:
            return

        self.data["status"] = "success"
        self.data["command"] = command
        self.data["timestamp"] = datetime.now().isoformat()
        self.data["result"] = result.to_dict() if hasattr(result, "to_dict") else result

    def capture_error(self, command: str, error: Exception) -> None:
        if not self.enabled:
            return

        self.data["status"] = "error"
        self.data["command"] = command
        self.data["timestamp"] = datetime.now().isoformat()
        self.data["error"] = str(error)
        self.data["error_type"] = type(error).__name__

    def output(self) -> None:
        """Write collected JSON data to stdout if enabled."""
        if not self.enabled:
            return

        json_str = json.dumps(self.data, indent=2, default=str)
        print(f"<JSON-STDOUT>{json_str}</JSON-STDOUT>")
