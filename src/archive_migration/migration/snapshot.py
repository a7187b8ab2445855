#!/usr/bin/env python3
"""
Scratch copies of the source repository.

History filtering is destructive, so it always runs on a copy placed in a
temporary directory that is removed when the migration ends.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from git import Repo
from git.exc import GitCommandError

from archive_migration.constants import SCRATCH_DIR_PREFIX
from archive_migration.migration.errors import PreconditionError

logger = logging.getLogger(__name__)


@contextmanager
def scratch_directory(keep: bool = False) -> Iterator[Path]:
    """Yield a fresh temporary directory, deleted on exit unless ``keep`` is set."""
    tmpdir = tempfile.mkdtemp(prefix=SCRATCH_DIR_PREFIX)
    try:
        yield Path(tmpdir)
    finally:
        if keep:
            logger.info("Keeping scratch directory: %s", tmpdir)
        else:
            shutil.rmtree(tmpdir, ignore_errors=True)


def snapshot_repository(source: str | Path, scratch_dir: str | Path) -> Repo:
    """Copy ``source`` into ``scratch_dir`` under its own base name."""
    source_path = Path(source)
    target = Path(scratch_dir) / source_path.name
    logger.info(
        "== Copying easybuild-easyconfigs repo (%s) into temp directory (%s)",
        source_path,
        scratch_dir,
    )
    shutil.copytree(source_path, target, symlinks=True)
    return Repo(target)


def switch_branch(repo: Repo, branch: str) -> None:
    logger.info("== Checking out archive branch (%s)", branch)
    try:
        repo.git.switch(branch)
    except GitCommandError as e:
        raise PreconditionError(
            f"archive branch ({branch}) does not exist in easybuild-easyconfigs repo"
        ) from e
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("git status:\n%s", repo.git.status())
