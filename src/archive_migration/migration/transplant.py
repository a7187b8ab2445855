#!/usr/bin/env python3
"""
Transplant a pruned history into the destination repository.

The pruned snapshot shares no ancestor with the destination, so its branch is
pulled with ``--allow-unrelated-histories`` and incoming content wins on
conflict. The merge is left uncommitted and then finalized with a summary
commit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from git import Remote, Repo

from archive_migration.constants import COMMIT_MESSAGE_TEMPLATE, PRUNE_REMOTE_NAME
from archive_migration.migration.errors import BranchExistsError

logger = logging.getLogger(__name__)


def branch_exists(repo: Repo, branch: str) -> bool:
    return any(head.name == branch for head in repo.heads)


def create_branch(repo: Repo, branch: str) -> None:
    """Create ``branch`` from the current HEAD and switch to it."""
    if branch_exists(repo, branch):
        raise BranchExistsError(f"branch ({branch}) already exists in {repo.working_tree_dir}")

    logger.info("== Creating new branch (%s) in easybuild-easyconfigs-archive repo", branch)
    if not repo.head.is_valid():
        # Unborn HEAD (no commits yet): there is nothing to branch from
        repo.git.symbolic_ref("HEAD", f"refs/heads/{branch}")
    else:
        repo.git.branch(branch)
        repo.git.switch(branch)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("git status:\n%s", repo.git.status())


@contextmanager
def temporary_remote(repo: Repo, name: str, url: str | Path) -> Iterator[Remote]:
    remote = repo.create_remote(name, str(url))
    try:
        yield remote
    finally:
        repo.delete_remote(remote)
        logger.debug("Removed temporary remote %s", name)


def commit_message(file_count: int) -> str:
    return COMMIT_MESSAGE_TEMPLATE.format(count=file_count)


def transplant_history(
    repo: Repo,
    pruned_repo: str | Path,
    branch: str,
    file_count: int,
    remote_name: str = PRUNE_REMOTE_NAME,
) -> str:
    """Merge ``branch`` of ``pruned_repo`` into a new ``branch`` of ``repo``.

    Returns:
        SHA of the summary commit closing the transplant.
    """
    create_branch(repo, branch)

    logger.info("== Copying commit history into easybuild-easyconfigs-archive repo")
    with temporary_remote(repo, remote_name, pruned_repo):
        repo.git.pull(
            "--no-rebase",
            "--allow-unrelated-histories",
            "--strategy-option=theirs",
            "--no-commit",
            remote_name,
            branch,
        )
        # --allow-empty: pulling into an unborn branch fast-forwards and stages nothing
        repo.git.commit("--allow-empty", "-m", commit_message(file_count))

    sha = repo.head.commit.hexsha
    logger.info("Committed %s on branch %s", sha[:12], branch)
    return sha
