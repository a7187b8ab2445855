#!/usr/bin/env python3
"""
History rewriting backends.

The migration only depends on ``HistoryFilter.filter(repo, patterns)``: given a
repository and path patterns, rewrite it in place so that its history only
keeps the commits touching matching paths. ``GitFilterRepo`` delegates that to
``git filter-repo``.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from git import Repo

from archive_migration.constants import FILTER_REPO_EXECUTABLE, PATTERNS_FILE_NAME
from archive_migration.migration.errors import EmptyArchiveError, PreconditionError
from archive_migration.migration.patterns import write_patterns_file

logger = logging.getLogger(__name__)


class HistoryFilter(Protocol):
    def filter(self, repo: Repo, patterns: Sequence[str]) -> Repo: ...


def ensure_filter_repo_available() -> str:
    """Return the path of the git-filter-repo executable or fail."""
    executable = shutil.which(FILTER_REPO_EXECUTABLE)
    if executable is None:
        raise PreconditionError(
            f"{FILTER_REPO_EXECUTABLE} is not installed or not on PATH "
            "(pip install git-filter-repo)"
        )
    return executable


class GitFilterRepo:
    """Destructive history filter backed by ``git filter-repo --paths-from-file``.

    Args:
        patterns_dir: Directory receiving the patterns file. Defaults to the
            parent of the repository's working tree, which keeps the file out
            of the repository being rewritten.
    """

    def __init__(self, patterns_dir: str | Path | None = None) -> None:
        self.patterns_dir = Path(patterns_dir) if patterns_dir is not None else None

    def _patterns_path(self, repo: Repo) -> Path:
        base = self.patterns_dir
        if base is None:
            base = Path(str(repo.working_tree_dir)).parent
        return base / PATTERNS_FILE_NAME

    def filter(self, repo: Repo, patterns: Sequence[str]) -> Repo:
        if not patterns:
            # filter-repo without any --path keeps everything
            raise EmptyArchiveError("refusing to filter history with an empty pattern list")
        ensure_filter_repo_available()

        patterns_file = write_patterns_file(patterns, self._patterns_path(repo))
        logger.debug("Wrote %d patterns to %s", len(patterns), patterns_file)

        start_time = time.time()
        repo.git.filter_repo("--force", "--paths-from-file", str(patterns_file))
        logger.info("History filtered in %.2fs", time.time() - start_time)

        # filter-repo rewrites refs behind GitPython's back
        return Repo(repo.working_tree_dir)
