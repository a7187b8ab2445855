#!/usr/bin/env python3
"""
Derive the path patterns that select the history of archived easyconfigs.

Every file currently under ``__archive__`` may have lived in any
``<letter>/<software>`` directory before it was archived, so each base name
is matched at the conventional two-level depth below the namespace prefix.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from archive_migration.constants import (
    EASYCONFIGS_NAMESPACE,
    FILTER_REPO_GLOB_PREFIX,
    PATTERN_TEMPLATE,
)
from archive_migration.migration.errors import PreconditionError

logger = logging.getLogger(__name__)


def list_archived_files(archive_dir: str | Path) -> list[Path]:
    """Return all regular files below ``archive_dir``, sorted by relative path."""
    archive_path = Path(archive_dir)
    if not archive_path.is_dir():
        raise PreconditionError(f"archive directory does not exist: {archive_path}")
    files = [p for p in archive_path.rglob("*") if p.is_file()]
    return sorted(files, key=lambda p: p.relative_to(archive_path).as_posix())


def derive_patterns(archive_dir: str | Path, prefix: str = EASYCONFIGS_NAMESPACE) -> list[str]:
    """Build one glob pattern per archived file.

    Duplicate base names in different archive subdirectories yield duplicate
    patterns; the history filter treats them as one.
    """
    prefix = prefix.rstrip("/")
    patterns = [
        PATTERN_TEMPLATE.format(prefix=prefix, basename=path.name)
        for path in list_archived_files(archive_dir)
    ]
    logger.debug("Derived %d path patterns from %s", len(patterns), archive_dir)
    return patterns


def format_patterns_file(patterns: Iterable[str]) -> str:
    """Render patterns in the ``--paths-from-file`` format of git filter-repo."""
    return "".join(f"{FILTER_REPO_GLOB_PREFIX}{pattern}\n" for pattern in patterns)


def write_patterns_file(patterns: Iterable[str], path: str | Path) -> Path:
    output_path = Path(path)
    output_path.write_text(format_patterns_file(patterns), encoding="utf-8")
    return output_path
