# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the git-helper test suite.

Every test runs with HOME, git's global/system config and git-helper's
own config pointed into tmp_path, so the developer's settings never leak
into results.
"""

from pathlib import Path

import pytest

from tests.fixtures.git_repos import clone_repo, commit_file, init_repo


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point HOME and every config location into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GITHELPER_CONFIG_HOME", str(home / "githelper"))
    for var in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE", "GIT_AUTHOR_NAME",
                "GIT_AUTHOR_EMAIL", "GIT_COMMITTER_NAME", "GIT_COMMITTER_EMAIL"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def global_gitconfig(isolated_environment):
    """Write the isolated global git config. Returns a writer taking file text."""
    config_path = isolated_environment / ".gitconfig"

    def write(text: str) -> Path:
        config_path.write_text(text)
        return config_path

    return write


@pytest.fixture
def plain_dir(tmp_path):
    """A directory that is not a git repository."""
    path = tmp_path / "plain"
    path.mkdir()
    return path


@pytest.fixture
def repo(tmp_path):
    """Repository with two commits by the default test user."""
    repo_dir = init_repo(tmp_path / "repo")
    commit_file(repo_dir, "README.md", "# Test Project\n", "Initial commit")
    commit_file(repo_dir, "data.txt", "first line\n", "Add data file")
    return repo_dir


@pytest.fixture
def remote_setup(tmp_path):
    """A bare remote plus two independent clones ("work" and "other") on main."""
    seed = init_repo(tmp_path / "seed")
    commit_file(seed, "README.md", "shared line\n", "Initial commit")
    remote = clone_repo(seed, tmp_path / "remote.git", bare=True)
    work = clone_repo(remote, tmp_path / "work")
    other = clone_repo(remote, tmp_path / "other")
    return {"remote": remote, "work": work, "other": other}
