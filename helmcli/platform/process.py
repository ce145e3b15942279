"""Subprocess execution with concurrent output draining.

Every command runs with stdin closed and both output pipes drained line by
line in their own thread, so a chatty child can never block on a full pipe.
Launch failures come back as Err(ProcessError); a non-zero exit is still
Ok(CompletedCommand) because callers need the exit code either way.

Usage:
    match stream(["helm", "repo", "update"], sys.stdout, sys.stderr):
        case Ok(done):
            print(f"helm exited with {done.returncode}")
        case Err(error):
            print(f"could not start helm: {error.message}")
"""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from io import StringIO
from typing import IO, Protocol

from helmcli.core.result import Err, Ok, Result

__all__ = ["CompletedCommand", "ProcessError", "Sink", "capture", "stream"]


class Sink(Protocol):
    """Anything output lines can be written to (files, StringIO, sys.stdout)."""

    def write(self, s: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error raised by the OS while starting a subprocess.

    Attributes:
        command: The command that could not be started.
        message: OS error text.
        returncode: Always -1, the process never ran.
    """

    command: tuple[str, ...]
    message: str
    returncode: int = -1

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} could not be started: {self.message}"


@dataclass(frozen=True, slots=True)
class CompletedCommand:
    """A subprocess that ran to completion.

    Attributes:
        command: The argument vector that was executed.
        returncode: Exit status of the process.
        stdout: Captured standard output (empty when it was streamed).
        truncated: True if a pipe or sink failed while draining, meaning
            some output was lost.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    truncated: bool = False


def _as_line(line: str) -> str:
    return line if line.endswith("\n") else line + "\n"


def _drain(pipe: IO[str], emit: Callable[[str], object], failures: list[str]) -> None:
    """Forward every line of pipe to emit until EOF.

    A failing sink stops forwarding but reading continues, so the child is
    never left blocked on a full pipe.
    """
    forwarding = True
    try:
        for line in pipe:
            if not forwarding:
                continue
            try:
                emit(_as_line(line))
            except Exception as e:
                # keep reading until EOF whatever the sink raised
                failures.append(f"sink: {type(e).__name__}: {e}")
                forwarding = False
    except (OSError, ValueError) as e:
        failures.append(f"pipe: {e}")
    finally:
        pipe.close()


def _execute(
    cmd: Sequence[str],
    on_stdout: Callable[[str], object],
    on_stderr: Callable[[str], object],
) -> Result[tuple[int, bool], ProcessError]:
    command = tuple(cmd)
    try:
        proc = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        return Err(ProcessError(command=command, message=e.strerror or str(e)))

    assert proc.stdout is not None
    assert proc.stderr is not None

    failures: list[str] = []
    drains = [
        threading.Thread(target=_drain, args=(proc.stdout, on_stdout, failures), daemon=True),
        threading.Thread(target=_drain, args=(proc.stderr, on_stderr, failures), daemon=True),
    ]
    for t in drains:
        t.start()

    returncode = proc.wait()
    for t in drains:
        t.join()

    return Ok((returncode, bool(failures)))


def stream(cmd: Sequence[str], stdout: Sink, stderr: Sink) -> Result[CompletedCommand, ProcessError]:
    """Run a command, forwarding its output line by line to the given sinks.

    Args:
        cmd: Argument vector; never passed through a shell.
        stdout: Receives the child's standard output.
        stderr: Receives the child's standard error.

    Returns:
        Ok(CompletedCommand) once the process exited and both pipes are
        drained, Err(ProcessError) if it could not be started.
    """
    result = _execute(cmd, stdout.write, stderr.write)
    if isinstance(result, Err):
        return result

    returncode, truncated = result.value
    return Ok(CompletedCommand(command=tuple(cmd), returncode=returncode, truncated=truncated))


def capture(cmd: Sequence[str], stderr: Sink) -> Result[CompletedCommand, ProcessError]:
    """Run a command, buffering stdout and forwarding stderr.

    The captured text is returned in CompletedCommand.stdout.
    """
    buffer = StringIO()
    result = _execute(cmd, buffer.write, stderr.write)
    if isinstance(result, Err):
        return result

    returncode, truncated = result.value
    return Ok(
        CompletedCommand(
            command=tuple(cmd),
            returncode=returncode,
            stdout=buffer.getvalue(),
            truncated=truncated,
        )
    )
