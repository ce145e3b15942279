"""Shared fixtures: a scriptable stand-in for the helm binary."""

from __future__ import annotations

import json
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

_SCRIPT = """\
import json
import sys
import time

args = sys.argv[1:]
with open({calls!r}, "a", encoding="utf-8") as f:
    f.write(json.dumps(args) + "\\n")

time.sleep({delay!r})
if {echo!r}:
    print(" ".join(args))
sys.stdout.write({stdout!r})
sys.stdout.flush()
sys.stderr.write({stderr!r})
sys.stderr.flush()

code = {exit_code!r}
if {fail_on!r} is not None and {fail_on!r} in args:
    code = {fail_code!r}
sys.exit(code)
"""


@dataclass(frozen=True, slots=True)
class FakeHelm:
    """A helm stand-in that records its argv and replays canned output."""

    path: Path
    calls_file: Path

    @property
    def executable(self) -> str:
        return str(self.path)

    def calls(self) -> list[list[str]]:
        if not self.calls_file.exists():
            return []
        lines = self.calls_file.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]


FakeHelmFactory = Callable[..., FakeHelm]


@pytest.fixture
def fake_helm(tmp_path: Path) -> FakeHelmFactory:
    if sys.platform == "win32":
        pytest.skip("fake helm relies on a POSIX shell wrapper")

    counter = 0

    def make(
        *,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        echo: bool = False,
        fail_on: str | None = None,
        fail_code: int = 1,
        delay: float = 0.0,
    ) -> FakeHelm:
        nonlocal counter
        counter += 1
        base = tmp_path / f"fake-helm-{counter}"
        base.mkdir()

        calls = base / "calls.jsonl"
        script = base / "helm.py"
        script.write_text(
            _SCRIPT.format(
                calls=str(calls),
                delay=delay,
                echo=echo,
                stdout=stdout,
                stderr=stderr,
                exit_code=exit_code,
                fail_on=fail_on,
                fail_code=fail_code,
            ),
            encoding="utf-8",
        )

        wrapper = base / "helm"
        wrapper.write_text(
            f"#!/bin/sh\nexec '{sys.executable}' '{script}' \"$@\"\n",
            encoding="utf-8",
        )
        wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeHelm(path=wrapper, calls_file=calls)

    return make


@pytest.fixture
def kubeconfig(tmp_path: Path) -> Path:
    path = tmp_path / "kubeconfig.yaml"
    path.write_text("apiVersion: v1\nkind: Config\n", encoding="utf-8")
    return path
