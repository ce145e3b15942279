"""Error presentation for CLI commands.

Maps helm failures to console messages and stable exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from helmcli.core.errors import ErrorCode
from helmcli.helm.errors import HelmError, MissingReleaseError
from helmcli.output.console import Style

if TYPE_CHECKING:
    from helmcli.output.console import ConsoleProtocol

__all__ = ["helm_error_exit_code", "print_helm_error"]


def print_helm_error(error: HelmError, console: ConsoleProtocol) -> None:
    console.error(str(error))
    match error:
        case MissingReleaseError(release=release):
            console.print(f"hint: check the release name and namespace of '{release}'", Style.DIM)
        case HelmError(returncode=-1):
            console.print("hint: is helm installed? see --helm or HELM_EXECUTABLE", Style.DIM)
        case _:
            pass


def helm_error_exit_code(error: HelmError) -> int:
    """Get the CLI exit code for a helm failure."""
    if error.returncode == -1:
        return int(ErrorCode.ENV_ERROR)
    if isinstance(error, MissingReleaseError):
        return int(ErrorCode.USER_ERROR)
    return int(ErrorCode.HELM_ERROR)
