"""Tests for helmcli.helm.errors module."""

from __future__ import annotations

import pytest

from helmcli.helm.errors import HelmError, InstallError, MissingReleaseError, UpgradeError


def test_missing_release_message() -> None:
    error = MissingReleaseError("web", 1)
    assert str(error) == "could not get release 'web': helm exited with status code 1"
    assert error.release == "web"
    assert error.returncode == 1


def test_install_message() -> None:
    assert str(InstallError("r1", 1)) == "could not install chart 'r1': helm exited with status code 1"


def test_upgrade_message() -> None:
    assert str(UpgradeError("r1", 2)) == "could not upgrade chart 'r1': helm exited with status code 2"


@pytest.mark.parametrize("cls", [MissingReleaseError, InstallError, UpgradeError])
def test_all_kinds_are_helm_errors(cls: type[HelmError]) -> None:
    assert issubclass(cls, HelmError)
    assert issubclass(cls, Exception)


def test_kinds_are_distinct() -> None:
    assert not issubclass(InstallError, UpgradeError)
    assert not issubclass(UpgradeError, InstallError)
    assert not issubclass(InstallError, MissingReleaseError)
