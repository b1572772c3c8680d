"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad step syntax, invalid arguments)
    - 2: I/O error (document or config missing, unreadable or malformed)
    - 3: Absent (the query evaluated to no value)
    """

    OK = 0
    USER_ERROR = 1
    IO_ERROR = 2
    ABSENT = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
