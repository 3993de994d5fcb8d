"""Process exit codes for the sesemit CLI.

These constants keep exit statuses out of the CLI as bare integers.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit statuses."""

    OK = 0
    # Unreadable input, unwritable output, invalid JSON, unexpected errors
    FAILURE = 1
    # Missing positional arguments (argparse exits with this status)
    USAGE = 2
