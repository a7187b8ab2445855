"""Exceptions raised by the migration stages.

Precondition failures are detected explicitly and reported as a single line
before exiting with status 1. Failures of git itself surface as
``git.exc.GitCommandError`` and are not wrapped here.
"""


class MigrationError(RuntimeError):
    pass


class PreconditionError(MigrationError):
    pass


class BranchExistsError(PreconditionError):
    pass


class EmptyArchiveError(PreconditionError):
    pass
