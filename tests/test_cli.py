# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.17
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/test_cli.py

"""End-to-end tests of the git-helper commands through typer's CliRunner."""

import json
import re
import stat

import pytest
from loguru import logger
from typer.testing import CliRunner

from githelper.cli.main import app
from tests.fixtures.git_repos import commit_file, git, init_repo

runner = CliRunner()

COMPLETE_GITCONFIG = """[user]
    name = Config User
    email = config@example.org
[push]
    default = current
"""


def extract_json(output: str) -> dict:
    match = re.search(r"<JSON-STDOUT>(.*)</JSON-STDOUT>", output, re.DOTALL)
    assert match, output
    return json.loads(match.group(1))


@pytest.fixture(autouse=True)
def reset_logging():
    """setup_logging() binds its sink to the runner's stderr; drop it afterwards."""
    yield
    logger.remove()


@pytest.fixture
def in_plain_dir(plain_dir, monkeypatch):
    monkeypatch.chdir(plain_dir)
    return plain_dir


class TestHelp:
    @pytest.mark.parametrize("args", [[], ["help"], ["-h"], ["--help"]])
    def test_usage_exits_zero(self, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "check_repo" in result.output
        assert "sync" in result.output

    def test_unknown_command(self):
        result = runner.invoke(app, ["frobnicate"])
        assert result.exit_code == 2

    def test_show_history_listed(self):
        result = runner.invoke(app, ["--help"])
        assert "show_history" in result.output


class TestRepositoryGuard:
    @pytest.mark.parametrize("command", ["log", "show_history", "stats", "check_repo"])
    def test_non_repository_exits_one(self, command, plain_dir):
        result = runner.invoke(app, [command, str(plain_dir)])
        assert result.exit_code == 1
        assert "is not a valid Git repository." in result.output
        assert plain_dir.name in result.output

    def test_default_directory_is_cwd(self, in_plain_dir):
        result = runner.invoke(app, ["stats"])
        assert result.exit_code == 1
        assert ". is not a valid Git repository." in result.output


class TestCheck:
    def test_complete_configuration(self, global_gitconfig, in_plain_dir):
        global_gitconfig(COMPLETE_GITCONFIG)

        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert "Git basic settings are properly configured:" in result.output
        assert "  user.name: Config User" in result.output
        assert "  user.email: config@example.org" in result.output
        assert "  push.default: current" in result.output
        assert "Warning" not in result.output

    def test_missing_push_default(self, global_gitconfig, in_plain_dir):
        global_gitconfig("[user]\n    name = Config User\n    email = config@example.org\n")

        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert result.output.count("is not set!") == 1
        assert "Warning: 'push.default' is not set!" in result.output
        assert "Please configure these settings using the following commands:" in result.output
        assert "git config --global push.default current" in result.output
        assert "properly configured" not in result.output

    def test_nothing_configured(self, in_plain_dir):
        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert result.output.count("is not set!") == 3
        assert "git config --global user.name 'Your Name'" in result.output

    def test_idempotent(self, global_gitconfig, in_plain_dir):
        global_gitconfig(COMPLETE_GITCONFIG)
        first = runner.invoke(app, ["check"])
        second = runner.invoke(app, ["check"])
        assert first.output == second.output

    def test_json(self, in_plain_dir):
        result = runner.invoke(app, ["check", "--json"])

        data = extract_json(result.output)
        assert data["status"] == "success"
        assert data["result"]["complete"] is False
        assert data["result"]["missing"] == ["user.name", "user.email", "push.default"]


class TestLog:
    def test_lines(self, repo):
        result = runner.invoke(app, ["log", str(repo)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 2
        assert re.fullmatch(r"Add data file \| Test User \| \d{4}-\d{2}-\d{2}", lines[0])
        assert lines[1].startswith("Initial commit | Test User | ")

    def test_show_history_alias(self, repo):
        expected = runner.invoke(app, ["log", str(repo)]).output
        assert runner.invoke(app, ["show_history", str(repo)]).output == expected

    def test_subject_with_markup_is_verbatim(self, repo):
        commit_file(repo, "x.txt", "x\n", "Fix [bold]markup[/bold] handling")
        result = runner.invoke(app, ["log", str(repo), "-n", "1"])
        assert result.output.startswith("Fix [bold]markup[/bold] handling | ")

    def test_json(self, repo):
        data = extract_json(runner.invoke(app, ["log", str(repo), "--json"]).output)
        assert data["result"]["total_commits"] == 2
        assert data["result"]["entries"][0]["subject"] == "Add data file"


class TestStats:
    def test_exact_output(self, repo):
        commit_file(repo, "more.txt", "m\n", "Third", author="Other Person <other@example.org>")

        result = runner.invoke(app, ["stats", str(repo)])

        assert result.exit_code == 0
        assert result.output == "3 commits by 2 contributors\n"

    def test_idempotent(self, repo):
        first = runner.invoke(app, ["stats", str(repo)])
        second = runner.invoke(app, ["stats", str(repo)])
        assert first.output == second.output
        assert git(repo, "rev-list", "--count", "HEAD") == "2"

    def test_json(self, repo):
        data = extract_json(runner.invoke(app, ["stats", str(repo), "--json"]).output)
        assert data["command"] == "stats"
        assert data["result"] == {
            "commit_count": 2,
            "contributor_count": 1,
            "summary": "2 commits by 1 contributors",
        }


class TestCheckRepo:
    @pytest.fixture
    def tidy_repo(self, repo):
        commit_file(repo, ".gitignore", "*.tmp\n", "Add gitignore")
        commit_file(repo, ".gitattributes", "* text=auto\n", "Add gitattributes")
        git(repo, "remote", "add", "origin", "https://example.invalid/repo.git")
        return repo

    def test_tidy_repository_has_no_warnings(self, tidy_repo):
        result = runner.invoke(app, ["check_repo", str(tidy_repo)])

        assert result.exit_code == 0
        assert "Warning" not in result.output
        assert "All necessary files are present in the repository root." in result.output
        assert "Remote repository is configured: origin" in result.output
        assert "No inappropriate files found." in result.output

    def test_one_warning_per_missing_file(self, repo):
        result = runner.invoke(app, ["check_repo", str(repo)])

        assert result.exit_code == 0
        assert result.output.count("is missing in the repository root.") == 2
        assert ".gitignore is missing" in result.output
        assert ".gitattributes is missing" in result.output
        assert "Warning: No remote repository configured." in result.output

    def test_declined_prompt_changes_nothing(self, tidy_repo):
        script = tidy_repo / "run.sh"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)
        head = git(tidy_repo, "rev-parse", "HEAD")

        result = runner.invoke(app, ["check_repo", str(tidy_repo)], input="n\n")

        assert result.exit_code == 0
        assert "Some shell scripts are not executable:" in result.output
        assert "Do you want to make them executable and commit the changes?" in result.output
        assert not script.stat().st_mode & stat.S_IXUSR
        assert git(tidy_repo, "rev-parse", "HEAD") == head

    def test_accepted_prompt_commits(self, tidy_repo):
        script = tidy_repo / "run.sh"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)

        result = runner.invoke(app, ["check_repo", str(tidy_repo)], input="y\n")

        assert result.exit_code == 0
        assert script.stat().st_mode & stat.S_IXUSR
        assert git(tidy_repo, "log", "-1", "--pretty=%s") == "Make scripts executable"
        assert "have been made executable" in result.output

    def test_yes_skips_prompt(self, tidy_repo):
        script = tidy_repo / "run.sh"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)

        result = runner.invoke(app, ["check_repo", str(tidy_repo), "--yes"])

        assert result.exit_code == 0
        assert "Do you want" not in result.output
        assert git(tidy_repo, "log", "-1", "--pretty=%s") == "Make scripts executable"

    def test_ignored_script_does_not_abort(self, tidy_repo):
        commit_file(tidy_repo, ".gitignore", "build/\n", "Ignore build output")
        head = git(tidy_repo, "rev-parse", "HEAD")
        generated = tidy_repo / "build" / "gen.sh"
        generated.parent.mkdir()
        generated.write_text("#!/bin/sh\n")
        generated.chmod(0o644)

        result = runner.invoke(app, ["check_repo", str(tidy_repo), "--yes"])

        assert result.exit_code == 0
        assert "Made executable but not committed (ignored by git):" in result.output
        assert "No inappropriate files found." in result.output
        assert generated.stat().st_mode & stat.S_IXUSR
        assert git(tidy_repo, "rev-parse", "HEAD") == head

    def test_flags_elf_binary(self, tidy_repo):
        (tidy_repo / "a.out").write_bytes(b"\x7fELF\x02\x01\x01" + b"\x00" * 57)

        result = runner.invoke(app, ["check_repo", str(tidy_repo)])

        assert result.exit_code == 0
        assert "The following inappropriate files were found:" in result.output
        assert "a.out: ELF executable" in result.output

    def test_configured_commit_message(self, tidy_repo, isolated_environment):
        config_dir = isolated_environment / "githelper"
        config_dir.mkdir()
        (config_dir / "githelper.yml").write_text(
            "hygiene:\n  fix_commit_message: chmod scripts\n"
        )
        script = tidy_repo / "run.sh"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)

        result = runner.invoke(app, ["check_repo", str(tidy_repo), "--yes"])

        assert result.exit_code == 0
        assert git(tidy_repo, "log", "-1", "--pretty=%s") == "chmod scripts"

    def test_invalid_config_exits_one(self, tidy_repo, isolated_environment):
        config_dir = isolated_environment / "githelper"
        config_dir.mkdir()
        (config_dir / "githelper.yml").write_text("hygiene: [not, a, mapping]\n")

        result = runner.invoke(app, ["check_repo", str(tidy_repo)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestUndo:
    def test_undo(self, repo, monkeypatch):
        monkeypatch.chdir(repo)

        result = runner.invoke(app, ["undo"])

        assert result.exit_code == 0
        assert 'Undo of last commit "Add data file" successful.' in result.output
        assert git(repo, "rev-list", "--count", "HEAD") == "1"
        assert git(repo, "diff", "--cached", "--name-only") == "data.txt"

    def test_single_commit_keeps_git_status(self, tmp_path, monkeypatch):
        single = init_repo(tmp_path / "single")
        commit_file(single, "README.md", "x\n", "Only commit")
        monkeypatch.chdir(single)

        result = runner.invoke(app, ["undo"])

        assert result.exit_code == 128
        assert git(single, "log", "-1", "--pretty=%s") == "Only commit"


class TestSync:
    def test_no_remote(self, repo, monkeypatch):
        monkeypatch.chdir(repo)
        head = git(repo, "rev-parse", "HEAD")

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "No remote repository configured. Please add a remote repository." in result.output
        assert "pulled" not in result.output
        assert git(repo, "rev-parse", "HEAD") == head

    def test_success(self, remote_setup, monkeypatch):
        work = remote_setup["work"]
        commit_file(work, "local.txt", "l\n", "Local work")
        monkeypatch.chdir(work)

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 0
        assert "Remote changes pulled successfully." in result.output
        assert "Changes pushed to the remote repository." in result.output
        assert "Tags pushed to the remote repository." in result.output

    def test_conflict_exits_one(self, remote_setup, monkeypatch):
        work, other = remote_setup["work"], remote_setup["other"]
        commit_file(other, "README.md", "theirs\n", "Their change")
        git(other, "push", "-q")
        commit_file(work, "README.md", "ours\n", "Our change")
        (work / "notes.txt").write_text("uncommitted\n")
        git(work, "add", "notes.txt")
        monkeypatch.chdir(work)

        result = runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "There were conflicts during the pull. Please resolve them." in result.output
        assert "still stashed" in result.output

    def test_stash_pop_conflict_keeps_git_status(self, remote_setup, monkeypatch):
        work, other = remote_setup["work"], remote_setup["other"]
        commit_file(other, "README.md", "theirs\n", "Their change")
        git(other, "push", "-q")
        (work / "README.md").write_text("ours, uncommitted\n")
        monkeypatch.chdir(work)

        result = runner.invoke(app, ["sync"])

        assert result.exit_code != 0
        assert "Error sync: git stash pop failed with exit code" in result.output
        assert f"exit code {result.exit_code}" in result.output
        assert "Local changes unstashed." not in result.output

    def test_rejected_push_keeps_git_status(self, remote_setup, monkeypatch):
        work = remote_setup["work"]
        hook = remote_setup["remote"] / "hooks" / "pre-receive"
        hook.parent.mkdir(exist_ok=True)
        hook.write_text("#!/bin/sh\nexit 1\n")
        hook.chmod(0o755)
        commit_file(work, "local.txt", "l\n", "Local work")
        monkeypatch.chdir(work)

        result = runner.invoke(app, ["sync"])

        assert result.exit_code != 0
        assert "Error sync: git push failed with exit code" in result.output
        assert f"exit code {result.exit_code}" in result.output
        assert "Tags pushed" not in result.output
