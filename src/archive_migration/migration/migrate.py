#!/usr/bin/env python3
"""
Migrate the commit history of archived easyconfigs into another repository.

- archived easyconfigs are taken from ``easybuild/easyconfigs/__archive__`` on
  the given branch of a local easybuild-easyconfigs repo
- the history of every archived file, including the commits made before it was
  archived, is copied into a new branch of the destination repo, ready to be
  proposed as a pull request
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from archive_migration.constants import ARCHIVE_SUBDIR
from archive_migration.migration.errors import (
    BranchExistsError,
    EmptyArchiveError,
    PreconditionError,
)
from archive_migration.migration.history_filter import GitFilterRepo, HistoryFilter
from archive_migration.migration.patterns import derive_patterns
from archive_migration.migration.snapshot import (
    scratch_directory,
    snapshot_repository,
    switch_branch,
)
from archive_migration.migration.transplant import branch_exists, transplant_history

logger = logging.getLogger(__name__)


@dataclass
class MigrationResult:
    branch: str
    archived_files: int
    commit_sha: str
    patterns: list[str] = field(default_factory=list)
    scratch_dir: Path | None = None


def check_repository(path: str | Path, label: str) -> Path:
    """Resolve ``path`` to an absolute path of an existing git checkout."""
    repo_path = Path(path).expanduser()
    if not repo_path.is_dir():
        raise PreconditionError(f"path to local {label} repo does not exist: {path}")
    repo_path = repo_path.resolve()
    try:
        Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise PreconditionError(
            f"path to local {label} repo is not a git repository: {path}"
        ) from e
    logger.debug("-- absolute path to target %s repo: %s", label, repo_path)
    return repo_path


def migrate_archive(
    branch: str,
    easyconfigs_repo: str | Path,
    archive_repo: str | Path,
    history_filter: HistoryFilter | None = None,
    keep_scratch: bool = False,
) -> MigrationResult:
    """Run the whole migration for ``branch``.

    Args:
        branch: Archive branch in the easyconfigs repo; also the name of the
            branch created in the archive repo
        easyconfigs_repo: Source checkout, never modified
        archive_repo: Destination checkout, receives the new branch
        history_filter: History rewriting backend (git filter-repo by default)
        keep_scratch: Leave the pruned copy on disk for inspection

    Returns:
        MigrationResult describing the new branch
    """
    archive_path = check_repository(archive_repo, "easybuild-easyconfigs-archive")
    easyconfigs_path = check_repository(easyconfigs_repo, "easybuild-easyconfigs")

    destination = Repo(archive_path)
    if branch_exists(destination, branch):
        raise BranchExistsError(
            f"branch ({branch}) already exists in easybuild-easyconfigs-archive repo"
        )

    start_time = time.time()
    with scratch_directory(keep=keep_scratch) as scratch_dir:
        snapshot = snapshot_repository(easyconfigs_path, scratch_dir)
        switch_branch(snapshot, branch)

        patterns = derive_patterns(Path(str(snapshot.working_tree_dir)) / ARCHIVE_SUBDIR)
        if not patterns:
            raise EmptyArchiveError(
                f"no archived easyconfigs found under '{ARCHIVE_SUBDIR}' on branch {branch}"
            )

        logger.info("== Filtering commit history of %d files under '__archive__'", len(patterns))
        if history_filter is None:
            history_filter = GitFilterRepo(patterns_dir=scratch_dir)
        pruned = history_filter.filter(snapshot, patterns)

        commit_sha = transplant_history(
            destination, Path(str(pruned.working_tree_dir)), branch, len(patterns)
        )

    logger.info(
        "✅ Migrated commit history of %d files into branch %s in %.2fs",
        len(patterns),
        branch,
        time.time() - start_time,
    )
    return MigrationResult(
        branch=branch,
        archived_files=len(patterns),
        commit_sha=commit_sha,
        patterns=patterns,
        scratch_dir=scratch_dir if keep_scratch else None,
    )
