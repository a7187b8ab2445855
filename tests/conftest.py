"""Shared fixtures building throwaway git repositories.

- ``make_repo`` initializes a repository with a local identity so commits work
  without any global git configuration.
- ``commit_file`` / ``move_file`` record one commit each through the git CLI.
- ``easyconfigs_repo`` lays out a small easybuild-easyconfigs history with an
  archived easyconfig on branch ``archive-2023``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from git import Repo

ARCHIVE_BRANCH = "archive-2023"


def _init_repo(path: Path, initial_branch: str = "main") -> Repo:
    path.mkdir(parents=True, exist_ok=True)
    repo = Repo.init(path, initial_branch=initial_branch)
    # Configure identity for commits
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Tester")
        cw.set_value("user", "email", "tester@example.com")
        cw.set_value("commit", "gpgsign", "false")
    return repo


def _commit_file(repo: Repo, relpath: str, content: str, message: str) -> str:
    path = Path(str(repo.working_tree_dir)) / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    repo.git.add(relpath)
    repo.git.commit("-m", message)
    return repo.head.commit.hexsha


def _move_file(repo: Repo, src: str, dst: str, message: str) -> str:
    (Path(str(repo.working_tree_dir)) / dst).parent.mkdir(parents=True, exist_ok=True)
    repo.git.mv(src, dst)
    repo.git.commit("-m", message)
    return repo.head.commit.hexsha


def _log_messages(repo: Repo, rev: str = "HEAD") -> list[str]:
    return [c.message.strip() for c in repo.iter_commits(rev)]


@pytest.fixture
def log_messages() -> Callable[..., list[str]]:
    return _log_messages


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., Repo]:
    def _make(name: str, initial_branch: str = "main") -> Repo:
        return _init_repo(tmp_path / name, initial_branch)

    return _make


@pytest.fixture
def commit_file() -> Callable[[Repo, str, str, str], str]:
    return _commit_file


@pytest.fixture
def move_file() -> Callable[[Repo, str, str, str], str]:
    return _move_file


@pytest.fixture
def easyconfigs_repo(make_repo) -> Repo:
    """easybuild-easyconfigs with ``foo-1.0.eb`` archived on ``archive-2023``.

    History of ``archive-2023``:
      1. add README
      2. add foo-1.0.eb under category1/sub1
      3. add bar-2.0.eb under b/bar (never archived)
      4. move foo-1.0.eb into __archive__/a/b
    ``main`` stops at commit 3.
    """
    repo = make_repo("easybuild-easyconfigs")
    _commit_file(repo, "README.rst", "easyconfigs\n", "initial commit")
    _commit_file(
        repo,
        "easybuild/easyconfigs/category1/sub1/foo-1.0.eb",
        "name = 'foo'\nversion = '1.0'\n",
        "add foo 1.0",
    )
    _commit_file(
        repo,
        "easybuild/easyconfigs/b/bar/bar-2.0.eb",
        "name = 'bar'\nversion = '2.0'\n",
        "add bar 2.0",
    )
    repo.git.branch(ARCHIVE_BRANCH)
    repo.git.switch(ARCHIVE_BRANCH)
    _move_file(
        repo,
        "easybuild/easyconfigs/category1/sub1/foo-1.0.eb",
        "easybuild/easyconfigs/__archive__/a/b/foo-1.0.eb",
        "archive foo 1.0",
    )
    repo.git.switch("main")
    return repo


@pytest.fixture
def archive_repo(make_repo, commit_file) -> Repo:
    """easybuild-easyconfigs-archive with a single initial commit."""
    repo = make_repo("easybuild-easyconfigs-archive")
    commit_file(repo, "README.md", "archive\n", "initial archive commit")
    return repo
