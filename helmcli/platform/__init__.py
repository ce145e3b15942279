"""Platform abstraction layer."""

from .process import (
    CompletedCommand,
    ProcessError,
    Sink,
    capture,
    stream,
)

__all__ = [
    "CompletedCommand",
    "ProcessError",
    "Sink",
    "capture",
    "stream",
]
