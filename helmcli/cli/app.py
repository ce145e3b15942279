from __future__ import annotations

import os
from pathlib import Path

import typer

from helmcli import __version__
from helmcli.cli.commands.release import exists, get, install, upgrade
from helmcli.cli.commands.repo import repo_app
from helmcli.cli.context import CONFIG_ENV, EXECUTABLE_ENV, KUBECONFIG_ENV
from helmcli.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(get)
app.command()(exists)
app.command()(install)
app.command()(upgrade)

# Sub-apps
app.add_typer(repo_app, name="repo", help="Manage chart repositories.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML file with a [helm] table (kubeconfig, executable, namespace).",
    ),
    kubeconfig: Path | None = typer.Option(
        None,
        "--kubeconfig",
        help="Cluster credentials passed to helm (overrides config and KUBECONFIG).",
    ),
    helm: str | None = typer.Option(
        None,
        "--helm",
        help="helm executable (overrides config and HELM_EXECUTABLE).",
    ),
) -> None:
    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        os.environ[CONFIG_ENV] = str(path)

    if kubeconfig is not None:
        os.environ[KUBECONFIG_ENV] = str(kubeconfig.expanduser())

    if helm is not None:
        os.environ[EXECUTABLE_ENV] = helm


def main() -> None:
    app()
