# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/githelper/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from githelper.config.manager import load_merged_user_config


def detect_repo_name(start: Optional[Path] = None) -> Optional[str]:
    """Detect the current repository name from the enclosing git work tree.

    Walks up from start (default: cwd) looking for a .git directory and
    returns the name of the directory that holds it. Falls back to the
    start directory's own name.

    Returns:
        Repository name or None if not detected
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current] + list(current.parents):
        if (parent / ".git").is_dir():
            return parent.name or None

    if current.name and current.name != "/":
        return current.name

    return None


def setup_logging(debug: bool = False) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: WARNING+ (DEBUG+ with --debug)
    - File output: DEBUG+ if local_log is configured in user config
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    try:
        user_config = load_merged_user_config()
        if user_config.local_log:
            log_dir = Path(user_config.local_log)
            log_dir.mkdir(parents=True, exist_ok=True)

            repo_name = detect_repo_name() or "global"
            log_file = log_dir / f"git-helper-{repo_name}.log"

            logger.add(
                log_file,
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
                rotation="10 MB",
                retention="30 days",
                compression="gz"
            )
            logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Logging problems must not stop the command itself
        logger.warning(f"Failed to setup file logging: {e}")
