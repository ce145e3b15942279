"""Per-caller command state.

An ExecutionContext holds what one logical caller has seen: the result of its
latest helm command and where that caller wants output to go. Callers may
pass a context explicitly to every operation; otherwise each thread gets its
own, created on first use.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass

from helmcli.platform.process import Sink

__all__ = ["CommandResult", "ExecutionContext", "ThreadContexts"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one helm invocation.

    Attributes:
        command: Argument vector that was run.
        returncode: Exit status (-1 if helm could not be started).
        truncated: True if part of the output was lost while draining.
    """

    command: tuple[str, ...]
    returncode: int
    truncated: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0


@dataclass(slots=True)
class ExecutionContext:
    """Mutable state scoped to a single caller.

    stdout/stderr of None mean the process's own streams, looked up at write
    time so that later replacements of sys.stdout are honoured.
    """

    last_result: CommandResult | None = None
    stdout: Sink | None = None
    stderr: Sink | None = None

    def out(self) -> Sink:
        return self.stdout if self.stdout is not None else sys.stdout

    def err(self) -> Sink:
        return self.stderr if self.stderr is not None else sys.stderr


class ThreadContexts(threading.local):
    """One lazily created ExecutionContext per thread."""

    def __init__(self) -> None:
        self.context = ExecutionContext()
