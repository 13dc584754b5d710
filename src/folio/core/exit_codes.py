# topmark:header:start
#
#   project      : Folio
#   file         : exit_codes.py
#   file_relpath : src/folio/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Folio CLI.

Folio aligns with the BSD `sysexits` convention where practical, so that other
tooling (CI jobs, process managers) can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Folio CLI.

    Attributes:
        SUCCESS: The build (and, in development mode, the watch session) ended normally.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        COMPILATION_ERROR: A stylesheet or typed script failed to compile.
            Mirrors BSD ``EX_DATAERR (65)``.
        BUILD_ERROR: Any other task failure inside the pipeline. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: Unrecoverable filesystem error. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    COMPILATION_ERROR = 65  # EX_DATAERR
    BUILD_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
