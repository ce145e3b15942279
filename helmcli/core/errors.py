"""Exit codes for the helmcli command line.

Values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (bad arguments, malformed --set, release not found)
- 2: Environment error (bad config file, helm binary missing)
- 3: Helm error (helm ran and exited non-zero)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    HELM_ERROR = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
