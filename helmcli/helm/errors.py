"""Exceptions raised when helm exits non-zero.

Helm's stderr is not parsed, so each error carries only the release it was
about and the exact exit code.
"""

from __future__ import annotations

from typing import ClassVar

__all__ = ["HelmError", "InstallError", "MissingReleaseError", "UpgradeError"]


class HelmError(Exception):
    """Base class for helm command failures.

    Attributes:
        release: Name of the release the command targeted.
        returncode: Exit status reported by helm.
    """

    action: ClassVar[str] = "run helm for"

    def __init__(self, release: str, returncode: int) -> None:
        self.release = release
        self.returncode = returncode
        super().__init__(
            f"could not {self.action} '{release}': helm exited with status code {returncode}"
        )


class MissingReleaseError(HelmError):
    """`helm get all` failed, the release does not exist (or is unreachable)."""

    action = "get release"


class InstallError(HelmError):
    action = "install chart"


class UpgradeError(HelmError):
    action = "upgrade chart"
