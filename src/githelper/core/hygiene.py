# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/core/hygiene.py

"""
Repository hygiene checks for check_repo.

Four independent checks over a repository work tree:
- required files in the repository root
- at least one configured remote
- shell scripts without the executable bit
- files that should not live in a repository (disk images, office
  documents, ELF binaries), recognised by their leading signature bytes

Only make_scripts_executable() changes anything, and the CLI calls it
after the user has confirmed.
"""

from __future__ import annotations

import os
import stat
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Iterator, Optional, Sequence

from loguru import logger

from githelper.config.manager import HygieneSettings
from githelper.core.git import list_remotes, run_git
from githelper.core.repository import GIT_DIR
from githelper.system.exceptions import GitCommandError

ELF_MAGIC: Final = b"\x7fELF"
OLE2_MAGIC: Final = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ZIP_MAGIC: Final = b"PK\x03\x04"
ISO9660_MAGIC: Final = b"CD001"
# Primary volume descriptor lives at sector 16; the identifier follows its type byte
ISO9660_OFFSET: Final = 16 * 2048 + 1

# OLE2 stream names are stored as UTF-16LE in the directory entries
_OLE2_WORD_STREAM: Final = "WordDocument".encode("utf-16-le")
_OLE2_EXCEL_STREAMS: Final = ("Workbook".encode("utf-16-le"), "Book".encode("utf-16-le"))

DESCRIPTIONS: Final[dict[str, str]] = {
    "iso": "ISO 9660 disk image",
    "word": "Microsoft Word document",
    "excel": "Microsoft Excel spreadsheet",
    "elf": "ELF executable",
}

EXECUTABLE_BITS: Final = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass
class FlaggedFile:
    path: Path
    kind: str

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self.kind]


@dataclass
class HygieneReport:
    """Findings of check_repo for one repository."""
    repo_dir: Path
    missing_files: list[str] = field(default_factory=list)
    remotes: list[str] = field(default_factory=list)
    non_executable_scripts: list[Path] = field(default_factory=list)
    fixed_scripts: list[Path] = field(default_factory=list)
    flagged_files: list[FlaggedFile] = field(default_factory=list)

    @property
    def has_remote(self) -> bool:
        return bool(self.remotes)

    def to_dict(self) -> dict:
        return {
            "repo_dir": str(self.repo_dir),
            "missing_files": self.missing_files,
            "remotes": self.remotes,
            "non_executable_scripts": [str(p) for p in self.non_executable_scripts],
            "fixed_scripts": [str(p) for p in self.fixed_scripts],
            "flagged_files": [
                {"path": str(f.path), "kind": f.kind, "description": f.description}
                for f in self.flagged_files
            ],
        }


def _iter_work_tree(repo_dir: Path) -> Iterator[Path]:
    """Yield regular files below repo_dir, skipping .git and symlinks."""
    for root, dirs, files in os.walk(repo_dir):
        dirs[:] = sorted(d for d in dirs if d != GIT_DIR)
        for name in sorted(files):
            path = Path(root) / name
            if path.is_symlink() or not path.is_file():
                continue
            yield path


def find_missing_files(repo_dir: Path, required_files: Sequence[str]) -> list[str]:
    """Return the required root files that are absent, in the given order."""
    return [name for name in required_files if not (repo_dir / name).is_file()]


def find_non_executable_scripts(repo_dir: Path, suffixes: Sequence[str]) -> list[Path]:
    """Return scripts with one of the suffixes whose owner execute bit is clear."""
    scripts = []
    for path in _iter_work_tree(repo_dir):
        if path.suffix not in suffixes:
            continue
        if not path.stat().st_mode & stat.S_IXUSR:
            scripts.append(path)
    return scripts


def _classify_ole2(path: Path) -> Optional[str]:
    content = path.read_bytes()
    if _OLE2_WORD_STREAM in content:
        return "word"
    if any(stream in content for stream in _OLE2_EXCEL_STREAMS):
        return "excel"
    return None


def _classify_ooxml(path: Path) -> Optional[str]:
    try:
        with zipfile.ZipFile(path) as archive:
            names = archive.namelist()
    except zipfile.BadZipFile:
        return None
    if "word/document.xml" in names:
        return "word"
    if any(name.startswith("xl/") for name in names):
        return "excel"
    return None


def classify_file(path: Path) -> Optional[str]:
    """Return the disallowed kind of path ("iso", "word", "excel", "elf") or None."""
    with path.open("rb") as f:
        head = f.read(8)
        if head.startswith(ELF_MAGIC):
            return "elf"
        if head.startswith(OLE2_MAGIC):
            return _classify_ole2(path)
        if head.startswith(ZIP_MAGIC):
            return _classify_ooxml(path)
        f.seek(ISO9660_OFFSET)
        if f.read(len(ISO9660_MAGIC)) == ISO9660_MAGIC:
            return "iso"
    return None


def find_inappropriate_files(repo_dir: Path) -> list[FlaggedFile]:
    """Scan every work tree file and return the ones with a disallowed signature."""
    flagged = []
    for path in _iter_work_tree(repo_dir):
        try:
            kind = classify_file(path)
        except OSError as e:
            logger.warning(f"Cannot read {path}: {e}")
            continue
        if kind is not None:
            logger.debug(f"{path} looks like {DESCRIPTIONS[kind]}")
            flagged.append(FlaggedFile(path=path, kind=kind))
    return flagged


def find_ignored_paths(repo_dir: Path, rel_paths: Sequence[str]) -> set[str]:
    """Return the subset of rel_paths that git ignores and would refuse to add.

    Tracked files are never reported, even when an ignore pattern matches them.
    """
    if not rel_paths:
        return set()
    result = run_git(["check-ignore", "-z", "--", *rel_paths], cwd=repo_dir, check=False)
    # 1 means none of the paths is ignored
    if result.returncode not in (0, 1):
        raise GitCommandError(["check-ignore", "-z", "--", *rel_paths], result.returncode, result.stderr)
    return {path for path in result.stdout.split("\0") if path}


def make_scripts_executable(repo_dir: Path, scripts: Sequence[Path], message: str) -> list[Path]:
    """Set the execute bits on scripts, then stage and commit only those paths.

    Scripts that git ignores get the execute bits but are left out of the
    commit.

    Returns:
        The scripts that were committed
    """
    for script in scripts:
        mode = script.stat().st_mode
        script.chmod(mode | EXECUTABLE_BITS)
        logger.debug(f"chmod +x {script}")

    rel_paths = {script: os.path.relpath(script, repo_dir) for script in scripts}
    ignored = find_ignored_paths(repo_dir, list(rel_paths.values()))
    for rel in sorted(ignored):
        logger.info(f"Not committing {rel}: ignored by git")

    committed = [script for script, rel in rel_paths.items() if rel not in ignored]
    if not committed:
        return []

    to_commit = [rel_paths[script] for script in committed]
    run_git(["add", "--", *to_commit], cwd=repo_dir)
    run_git(["commit", "-m", message, "--", *to_commit], cwd=repo_dir)
    logger.info(f"Committed executable bit for {len(to_commit)} scripts in {repo_dir}")
    return committed


def inspect_repository(repo_dir: Path, settings: Optional[HygieneSettings] = None) -> HygieneReport:
    """Run the read-only hygiene checks and collect their findings."""
    settings = settings or HygieneSettings()
    return HygieneReport(
        repo_dir=repo_dir,
        missing_files=find_missing_files(repo_dir, settings.required_files),
        remotes=list_remotes(cwd=repo_dir),
        non_executable_scripts=find_non_executable_scripts(repo_dir, settings.script_suffixes),
        flagged_files=find_inappropriate_files(repo_dir),
    )
