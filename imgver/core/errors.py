"""Error codes for CLI exit status.

Each fatal discovery signal has its own code so that CI steps can tell
"registry returned nothing" apart from "policy filtered everything out".
Code 2 is left to typer/click, which use it for usage errors (missing
argument, invalid option value).
"""

from enum import IntEnum

__all__ = ["ErrorCode", "USAGE_ERROR_EXIT_CODE"]


USAGE_ERROR_EXIT_CODE = 2


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (unknown product)
    - 3: No stable versions found in the tag source
    - 4: Versions found, but none survived the retention policy
    - 5: A short-form override could not be resolved
    """

    OK = 0
    USER_ERROR = 1
    NO_VERSIONS_FOUND = 3
    NO_VERSIONS_MATCH = 4
    OVERRIDE_NOT_FOUND = 5
