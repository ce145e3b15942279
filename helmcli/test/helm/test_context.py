"""Tests for helmcli.helm.context module."""

from __future__ import annotations

import sys
import threading
from io import StringIO

import pytest

from helmcli.helm.context import CommandResult, ExecutionContext, ThreadContexts


class TestCommandResult:
    def test_success_when_zero(self) -> None:
        assert CommandResult(command=("helm",), returncode=0).success is True

    @pytest.mark.parametrize("code", [1, 2, -1])
    def test_failure_when_nonzero(self, code: int) -> None:
        assert CommandResult(command=("helm",), returncode=code).success is False

    def test_frozen(self) -> None:
        result = CommandResult(command=("helm",), returncode=0)
        with pytest.raises(AttributeError):
            result.returncode = 1  # type: ignore[misc]


class TestExecutionContext:
    def test_starts_empty(self) -> None:
        ctx = ExecutionContext()
        assert ctx.last_result is None
        assert ctx.stdout is None
        assert ctx.stderr is None

    def test_defaults_to_process_streams(self, monkeypatch: pytest.MonkeyPatch) -> None:
        out, err = StringIO(), StringIO()
        monkeypatch.setattr(sys, "stdout", out)
        monkeypatch.setattr(sys, "stderr", err)

        ctx = ExecutionContext()

        assert ctx.out() is out
        assert ctx.err() is err

    def test_overrides(self) -> None:
        out, err = StringIO(), StringIO()
        ctx = ExecutionContext(stdout=out, stderr=err)
        assert ctx.out() is out
        assert ctx.err() is err


class TestThreadContexts:
    def test_same_thread_same_context(self) -> None:
        contexts = ThreadContexts()
        assert contexts.context is contexts.context

    def test_each_thread_gets_its_own(self) -> None:
        contexts = ThreadContexts()
        main = contexts.context
        seen: list[ExecutionContext] = []

        thread = threading.Thread(target=lambda: seen.append(contexts.context))
        thread.start()
        thread.join()

        assert len(seen) == 1
        assert seen[0] is not main
        assert seen[0].last_result is None
