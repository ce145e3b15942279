"""Helm client, per-caller state and error taxonomy."""

from .client import HelmCLI
from .context import CommandResult, ExecutionContext
from .errors import HelmError, InstallError, MissingReleaseError, UpgradeError

__all__ = [
    "CommandResult",
    "ExecutionContext",
    "HelmCLI",
    "HelmError",
    "InstallError",
    "MissingReleaseError",
    "UpgradeError",
]
