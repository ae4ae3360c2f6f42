# topmark:header:start
#
#   project      : OrgCommentary
#   file         : exit_codes.py
#   file_relpath : src/orgcommentary/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the OrgCommentary CLI.

Values follow the BSD `sysexits` convention where practical so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OrgCommentary CLI.

    Attributes:
        SUCCESS: Conversion done (or nothing to do).
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        MALFORMED_TARGET: The target lacks the Commentary/Code markers. Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Target or companion does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        EXPORT_ERROR: The export engine failed. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: Reading or writing a file failed. Mirrors BSD ``EX_IOERR (74)``.
        LOCKED: The target is locked by another editing session; try again
            later. Mirrors BSD ``EX_TEMPFAIL (75)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    MALFORMED_TARGET = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    EXPORT_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    LOCKED = 75  # EX_TEMPFAIL
    CONFIG_ERROR = 78  # EX_CONFIG
