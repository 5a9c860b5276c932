# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.17
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/test_cli_patterns.py

"""Tests for the command_pattern decorator."""

import json
from unittest.mock import Mock

import pytest
import typer

from githelper.cli.patterns import command_pattern, console, err_console
from githelper.core.history import RepositoryStats
from githelper.system.exceptions import GitCommandError, NotARepositoryError


class TestCommandPattern:

    def test_handler_receives_consoles_and_kwargs(self):
        handler = Mock(return_value={"ok": True})

        result = command_pattern("demo")(handler)(directory="repo")

        handler.assert_called_once_with(console, err_console, directory="repo")
        assert result == {"ok": True}

    def test_json_output_on_success(self, capsys):
        handler = Mock(return_value=RepositoryStats(commit_count=1, contributor_count=1))

        command_pattern("stats")(handler)(to_json=True)

        out = capsys.readouterr().out
        payload = json.loads(out.split("<JSON-STDOUT>")[1].split("</JSON-STDOUT>")[0])
        assert payload["command"] == "stats"
        assert payload["result"]["commit_count"] == 1

    def test_no_json_without_flag(self, capsys):
        command_pattern("stats")(Mock(return_value={}))()
        assert "<JSON-STDOUT>" not in capsys.readouterr().out

    def test_git_error_exits_with_git_status(self):
        handler = Mock(side_effect=GitCommandError(["push"], 128, "rejected"))

        with pytest.raises(typer.Exit) as exc_info:
            command_pattern("sync")(handler)()

        assert exc_info.value.exit_code == 128

    def test_domain_error_exits_one_and_reports_json(self, capsys):
        handler = Mock(side_effect=NotARepositoryError("nowhere"))

        with pytest.raises(typer.Exit) as exc_info:
            command_pattern("log")(handler)(to_json=True)

        assert exc_info.value.exit_code == 1
        out = capsys.readouterr().out
        assert '"status": "error"' in out
        assert '"error_type": "NotARepositoryError"' in out
