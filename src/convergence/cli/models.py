"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    The content layer only distinguishes "not found" from every other
    failure, and the exit codes follow that split:
    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Remote, empty or malformed response, bad input
    - NOT_FOUND (2): Requested space, page or attachment does not exist
    - CONFIG_ERROR (3): Credentials missing or rejected

    Example:
        >>> raise typer.Exit(ExitCode.NOT_FOUND)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    CONFIG_ERROR = 3
