#!/usr/bin/env python
"""
Thin CLI wrapper for the archive migration.
Use the console script entry point (see pyproject.toml) where possible.
"""

from archive_migration.migration.cli import main

if __name__ == "__main__":
    main()
