"""Tests for helmcli.helm.command argument vectors."""

from __future__ import annotations

from pathlib import Path

import pytest

from helmcli.core.config import ClientConfig
from helmcli.helm import command

CONFIG = ClientConfig(kubeconfig=Path("/etc/kube/config"), executable="/usr/bin/helm")
BASE = ["/usr/bin/helm", "--kubeconfig", "/etc/kube/config"]


def test_base_cmd() -> None:
    assert command.base_cmd(CONFIG) == BASE


def test_repo_add() -> None:
    assert command.repo_add(CONFIG, "bitnami", "https://charts.bitnami.com/bitnami") == BASE + [
        "repo",
        "add",
        "bitnami",
        "https://charts.bitnami.com/bitnami",
    ]


def test_repo_update() -> None:
    assert command.repo_update(CONFIG) == BASE + ["repo", "update"]


def test_get_all() -> None:
    assert command.get_all(CONFIG, "web", "apps") == BASE + ["get", "all", "web", "-n", "apps"]


def test_install_without_params_has_no_set_flags() -> None:
    cmd = command.install(CONFIG, "bitnami/nginx", "web", "15.0.0", "default", {})
    assert cmd == BASE + ["install", "web", "bitnami/nginx", "--version", "15.0.0", "-n", "default"]
    assert "--set" not in cmd


def test_upgrade_uses_upgrade_verb() -> None:
    cmd = command.upgrade(CONFIG, "bitnami/nginx", "web", "15.1.0", "apps", {"a": "1"})
    assert cmd == BASE + [
        "upgrade",
        "web",
        "bitnami/nginx",
        "--version",
        "15.1.0",
        "-n",
        "apps",
        "--set",
        "a=1",
    ]


@pytest.mark.parametrize("count", [1, 3, 10])
def test_one_set_flag_per_param_in_order(count: int) -> None:
    params = {f"key{i}": str(count - i) for i in range(count)}

    cmd = command.install(CONFIG, "chart", "r", "1.0.0", "default", params)

    tail = cmd[len(BASE) + 7 :]
    assert tail.count("--set") == count
    assert tail[1::2] == [f"{k}={v}" for k, v in params.items()]


def test_set_flags_keep_insertion_order() -> None:
    assert command.set_flags({"b": "2", "a": "1"}) == ["--set", "b=2", "--set", "a=1"]


def test_set_flags_format_values() -> None:
    flags = command.set_flags({"enabled": True, "debug": False, "replicas": 3, "extra": None})
    assert flags[1::2] == ["enabled=true", "debug=false", "replicas=3", "extra=null"]


def test_values_with_spaces_stay_single_arguments() -> None:
    cmd = command.install(CONFIG, "chart", "my release", "1.0.0", "default", {"msg": "hello world"})
    assert "my release" in cmd
    assert "msg=hello world" in cmd
