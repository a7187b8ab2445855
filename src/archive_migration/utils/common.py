#!/usr/bin/env python3
"""
Common utilities shared by the archive-migration entry points.
"""

import argparse
import logging
import sys
from pathlib import Path

from archive_migration.utils.repo_config import get_repo_config


def setup_logging(log_level: str | int = "INFO", log_file: str | None = None) -> None:
    """Setup logging configuration consistently across scripts.

    Args:
        log_level: Logging level as string ("INFO", "DEBUG") or integer constant
        log_file: Optional path to log file for file output
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        # Ensure parent directory exists if a custom path is provided
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            # If path invalid, keep console logging only
            pass
        else:
            handlers.append(logging.FileHandler(log_file))

    # Handle both string levels ("INFO") and integer levels (logging.INFO)
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def resolve_repo_args(
    explicit_easyconfigs_repo: str | None,
    explicit_archive_repo: str | None,
) -> tuple[str, str]:
    """Resolve final repository paths from explicit args over env/.env.

    - Reads defaults via get_repo_config()
    - Overrides each path if an explicit value is provided (non-empty)
    """
    easyconfigs_repo, archive_repo = get_repo_config()
    if explicit_easyconfigs_repo:
        easyconfigs_repo = explicit_easyconfigs_repo
    if explicit_archive_repo:
        archive_repo = explicit_archive_repo
    return easyconfigs_repo, archive_repo


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common command-line arguments to an ArgumentParser.

    Repository paths default to None so that resolve_repo_args() can fall back
    to the environment at run time.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument(
        "-a",
        "--archive-repo",
        help="Path to easybuild-easyconfigs-archive repo (default: $ARCHIVE_REPO or "
        "easybuild-easyconfigs-archive)",
    )
    parser.add_argument(
        "-e",
        "--easyconfigs-repo",
        help="Path to easybuild-easyconfigs repo (default: $EASYCONFIGS_REPO or "
        "easybuild-easyconfigs)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", help="Optional log file")
