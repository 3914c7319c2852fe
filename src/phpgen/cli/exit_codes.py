# topmark:header:start
#
#   project      : PhpGen
#   file         : exit_codes.py
#   file_relpath : src/phpgen/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 PhpGen contributors
#
# topmark:header:end

"""Exit codes for the PhpGen CLI.

PhpGen follows the BSD `sysexits` convention where practical so other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PhpGen CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    CONFIG_ERROR = 78  # EX_CONFIG
