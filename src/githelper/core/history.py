# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/history.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional

from loguru import logger

from githelper.core.git import git_output, run_git

# Fields are separated by ASCII unit separators so subjects may contain " | "
FIELD_SEP: Final = "\x1f"
LOG_FORMAT: Final = f"--pretty=format:%s{FIELD_SEP}%an{FIELD_SEP}%ad"


@dataclass
class HistoryEntry:
    subject: str
    author_name: str
    author_date: str  # YYYY-MM-DD

    def formatted(self) -> str:
        return f"{self.subject} | {self.author_name} | {self.author_date}"


@dataclass
class RepositoryStats:
    commit_count: int
    contributor_count: int

    def summary(self) -> str:
        return f"{self.commit_count} commits by {self.contributor_count} contributors"

    def to_dict(self) -> dict:
        return {
            "commit_count": self.commit_count,
            "contributor_count": self.contributor_count,
            "summary": self.summary(),
        }


def parse_log_output(output: str) -> list[HistoryEntry]:
    """Parse the output of ``git log`` run with LOG_FORMAT."""
    entries = []
    for line in output.splitlines():
        if not line:
            continue
        subject, author_name, author_date = line.split(FIELD_SEP, 2)
        entries.append(HistoryEntry(subject, author_name, author_date))
    return entries


def get_history(repo_dir: Path, limit: Optional[int] = None) -> list[HistoryEntry]:
    """Return the commit history of the current branch, newest first."""
    args = ["log", LOG_FORMAT, "--date=short"]
    if limit is not None:
        args.append(f"-n{limit}")
    entries = parse_log_output(run_git(args, cwd=repo_dir).stdout)
    logger.debug(f"Read {len(entries)} log entries from {repo_dir}")
    return entries


def count_commits(repo_dir: Path) -> int:
    """Number of commits reachable from HEAD."""
    return int(git_output(["rev-list", "--count", "HEAD"], cwd=repo_dir))


def count_contributors(repo_dir: Path) -> int:
    """Number of distinct author names across the history of all refs."""
    output = git_output(["shortlog", "-s", "-n", "--all"], cwd=repo_dir)
    return sum(1 for line in output.splitlines() if line.strip())


def get_stats(repo_dir: Path) -> RepositoryStats:
    return RepositoryStats(
        commit_count=count_commits(repo_dir),
        contributor_count=count_contributors(repo_dir),
    )
