from __future__ import annotations

import typer

from helmcli.cli.commands._helpers import exit_on_failed_result
from helmcli.cli.context import build_context


repo_app = typer.Typer(no_args_is_help=True)


@repo_app.command("add")
def add(
    name: str = typer.Argument(..., help="Local name for the repository."),
    url: str = typer.Argument(..., help="Chart repository URL."),
) -> None:
    """Add a chart repository."""
    ctx = build_context()
    ctx.helm.add_repo(name, url)
    exit_on_failed_result(ctx.helm.last_result(), ctx, "helm repo add")
    ctx.console.success(f"repository {name} added")


@repo_app.command("update")
def update() -> None:
    """Refresh the index of every configured repository."""
    ctx = build_context()
    ctx.helm.update_repos()
    exit_on_failed_result(ctx.helm.last_result(), ctx, "helm repo update")
    ctx.console.success("repositories updated")
