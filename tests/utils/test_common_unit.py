#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging


def test_setup_logging_writes_log_file(tmp_path):
    from archive_migration.utils.common import setup_logging

    log_file = tmp_path / "logs" / "migration.log"
    setup_logging("INFO", str(log_file))
    logging.getLogger().info("hello")

    assert log_file.exists()
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_accepts_int_level():
    from archive_migration.utils.common import setup_logging

    setup_logging(logging.DEBUG)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info():
    from archive_migration.utils.common import setup_logging

    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_add_common_args_defaults():
    from archive_migration.utils.common import add_common_args

    parser = argparse.ArgumentParser()
    add_common_args(parser)
    args = parser.parse_args([])

    assert args.archive_repo is None
    assert args.easyconfigs_repo is None
    assert args.log_level == "INFO"
    assert args.log_file is None


def test_resolve_repo_args_explicit_over_env(monkeypatch):
    from archive_migration.utils.common import resolve_repo_args

    monkeypatch.setenv("EASYCONFIGS_REPO", "/env/ec")
    monkeypatch.setenv("ARCHIVE_REPO", "/env/archive")

    assert resolve_repo_args(None, None) == ("/env/ec", "/env/archive")
    assert resolve_repo_args("/cli/ec", "") == ("/cli/ec", "/env/archive")
    assert resolve_repo_args(None, "/cli/archive") == ("/env/ec", "/cli/archive")
