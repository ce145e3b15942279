"""Argument vectors for the helm commands the client runs.

Every builder returns a list suitable for subprocess (no shell quoting), so
release names and values containing spaces or metacharacters reach helm
untouched.
"""

from __future__ import annotations

from collections.abc import Mapping

from helmcli.core.config import ClientConfig

__all__ = [
    "base_cmd",
    "get_all",
    "install",
    "repo_add",
    "repo_update",
    "set_flags",
    "upgrade",
]


def base_cmd(config: ClientConfig) -> list[str]:
    return [config.executable, "--kubeconfig", str(config.kubeconfig)]


def repo_add(config: ClientConfig, name: str, url: str) -> list[str]:
    return base_cmd(config) + ["repo", "add", name, url]


def repo_update(config: ClientConfig) -> list[str]:
    return base_cmd(config) + ["repo", "update"]


def get_all(config: ClientConfig, release: str, namespace: str) -> list[str]:
    return base_cmd(config) + ["get", "all", release, "-n", namespace]


def _format_value(value: object) -> str:
    # helm's --set parser only recognises lowercase booleans and null
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def set_flags(params: Mapping[str, object]) -> list[str]:
    """One `--set key=value` pair per entry, in mapping order."""
    flags: list[str] = []
    for key, value in params.items():
        flags += ["--set", f"{key}={_format_value(value)}"]
    return flags


def _release_cmd(
    config: ClientConfig,
    verb: str,
    chart: str,
    release: str,
    version: str,
    namespace: str,
    params: Mapping[str, object],
) -> list[str]:
    cmd = base_cmd(config) + [verb, release, chart]
    cmd += ["--version", version]
    cmd += ["-n", namespace]
    return cmd + set_flags(params)


def install(
    config: ClientConfig,
    chart: str,
    release: str,
    version: str,
    namespace: str,
    params: Mapping[str, object],
) -> list[str]:
    return _release_cmd(config, "install", chart, release, version, namespace, params)


def upgrade(
    config: ClientConfig,
    chart: str,
    release: str,
    version: str,
    namespace: str,
    params: Mapping[str, object],
) -> list[str]:
    return _release_cmd(config, "upgrade", chart, release, version, namespace, params)
