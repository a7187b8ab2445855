#!/usr/bin/env python3
"""
Centralized constants for the archive-migration tool.

Repository layout names, defaults and message templates shared by the
migration stages and the CLI.
"""

VERSION = "1.0"
PROG_NAME = "archive-migration"

# Repository defaults (relative to the current directory unless overridden)
DEFAULT_EASYCONFIGS_REPO = "easybuild-easyconfigs"
DEFAULT_ARCHIVE_REPO = "easybuild-easyconfigs-archive"

# Easyconfigs live two levels below the namespace: <prefix>/<letter>/<software>/<file>
EASYCONFIGS_NAMESPACE = "easybuild/easyconfigs"
ARCHIVE_SUBDIR = f"{EASYCONFIGS_NAMESPACE}/__archive__"
PATTERN_TEMPLATE = "{prefix}/*/*/{basename}"

# git filter-repo
FILTER_REPO_EXECUTABLE = "git-filter-repo"
FILTER_REPO_GLOB_PREFIX = "glob:"
PATTERNS_FILE_NAME = "prune.list"

# Transplant
PRUNE_REMOTE_NAME = "prune-repo"
COMMIT_MESSAGE_TEMPLATE = "Archive commit history of {count} files in easybuild-easyconfigs"

# Scratch directories
SCRATCH_DIR_PREFIX = "archive-migration-"

# Environment variables
ENV_EASYCONFIGS_REPO = "EASYCONFIGS_REPO"
ENV_ARCHIVE_REPO = "ARCHIVE_REPO"
ENV_OVERRIDE_FLAG = "ARCHIVE_MIGRATION_ENV_OVERRIDE"
