"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from helmcli.core.errors import ErrorCode
from helmcli.core.result import Err, Ok, Result
from helmcli.output.console import Style

if TYPE_CHECKING:
    from helmcli.cli.context import CLIContext
    from helmcli.helm.context import CommandResult


def parse_set_values(values: list[str] | None) -> Result[dict[str, str], str]:
    """Turn repeated `--set key=value` options into an ordered mapping.

    Only the first '=' separates key from value, so values may contain '='.
    """
    params: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            return Err(f"invalid --set '{item}', expected key=value")
        params[key.strip()] = value
    return Ok(params)


def exit_on_failed_result(result: CommandResult | None, ctx: CLIContext, what: str) -> None:
    """Exit if the latest helm command did not succeed, otherwise return.

    Used for commands that report failure only through last_result.
    """
    if result is None or result.success:
        return
    ctx.console.error(f"{what} failed (exit {result.returncode})")
    if result.returncode == -1:
        ctx.console.print("hint: is helm installed? see --helm or HELM_EXECUTABLE", Style.DIM)
        exit_with_code(int(ErrorCode.ENV_ERROR))
    exit_with_code(int(ErrorCode.HELM_ERROR))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
