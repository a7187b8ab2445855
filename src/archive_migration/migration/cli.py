#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from git.exc import GitCommandError

from archive_migration.constants import PROG_NAME, VERSION
from archive_migration.migration.errors import PreconditionError
from archive_migration.migration.migrate import migrate_archive
from archive_migration.utils.common import add_common_args, resolve_repo_args, setup_logging

logger = logging.getLogger(__name__)


class MigrationArgumentParser(argparse.ArgumentParser):
    """Usage errors print the help text and exit with status 1."""

    def error(self, message: str) -> NoReturn:
        print(f"ERROR: {message}")
        self.print_help(sys.stdout)
        sys.exit(1)


def build_parser() -> MigrationArgumentParser:
    parser = MigrationArgumentParser(
        prog=PROG_NAME,
        description="Migrate commit history of archived easyconfigs into another repository",
    )
    parser.add_argument(
        "archive_branch",
        nargs="?",
        metavar="ARCHIVE_BRANCH",
        help="Branch of easybuild-easyconfigs holding the archived easyconfigs; "
        "created with the same name in the archive repo",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s v{VERSION}", help="Print version"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Set verbosity to debug level"
    )
    add_common_args(parser)
    parser.add_argument(
        "--keep-scratch",
        action="store_true",
        help="Keep the pruned copy of easybuild-easyconfigs on disk for inspection",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.archive_branch:
        parser.error("Missing name of ARCHIVE_BRANCH to migrate commit history of archive")

    easyconfigs_repo, archive_repo = resolve_repo_args(args.easyconfigs_repo, args.archive_repo)
    args.easyconfigs_repo = easyconfigs_repo
    args.archive_repo = archive_repo
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.debug else args.log_level, args.log_file)

    try:
        migrate_archive(
            args.archive_branch,
            args.easyconfigs_repo,
            args.archive_repo,
            keep_scratch=args.keep_scratch,
        )
    except PreconditionError as e:
        logger.error(str(e))
        sys.exit(1)
    except GitCommandError as e:
        command = e.command if isinstance(e.command, str) else " ".join(map(str, e.command))
        logger.error(f"git command failed ({e.status}): {command}")
        sys.exit(e.status if isinstance(e.status, int) and e.status > 0 else 1)


if __name__ == "__main__":
    main()
