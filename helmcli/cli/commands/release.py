from __future__ import annotations

from typing import Literal, NoReturn

import typer

from helmcli.cli.commands._helpers import (
    exit_on_failed_result,
    exit_with_code,
    parse_set_values,
)
from helmcli.cli.context import CLIContext, build_context
from helmcli.core.errors import ErrorCode
from helmcli.core.result import Err
from helmcli.helm.errors import HelmError
from helmcli.output.errors import helm_error_exit_code, print_helm_error


def get(
    release: str = typer.Argument(..., help="Release name."),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Release namespace."),
) -> None:
    """Show everything helm knows about a release."""
    ctx = build_context()
    try:
        output = ctx.helm.get_release(release, namespace or ctx.config.namespace)
    except HelmError as e:
        _fail(e, ctx)
    ctx.console.write(output)


def exists(
    release: str = typer.Argument(..., help="Release name."),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Release namespace."),
) -> None:
    """Print yes/no and exit 0/1 depending on whether a release exists."""
    ctx = build_context()
    if ctx.helm.release_exists(release, namespace or ctx.config.namespace):
        ctx.console.print("yes")
        return
    result = ctx.helm.last_result()
    if result is not None and result.returncode == -1:
        # helm could not be launched, the answer is unknown
        exit_on_failed_result(result, ctx, f"checking release '{release}'")
    ctx.console.print("no")
    exit_with_code(int(ErrorCode.USER_ERROR))


def install(
    chart: str = typer.Argument(..., help="Chart reference, e.g. bitnami/nginx."),
    release: str = typer.Argument(..., help="Release name."),
    version: str = typer.Option(..., "--version", help="Chart version."),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Target namespace."),
    set_values: list[str] | None = typer.Option(None, "--set", help="key=value, repeatable."),
) -> None:
    """Install a chart as a new release."""
    _deploy("install", chart, release, version, namespace, set_values)


def upgrade(
    chart: str = typer.Argument(..., help="Chart reference, e.g. bitnami/nginx."),
    release: str = typer.Argument(..., help="Release name."),
    version: str = typer.Option(..., "--version", help="Chart version."),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Target namespace."),
    set_values: list[str] | None = typer.Option(None, "--set", help="key=value, repeatable."),
) -> None:
    """Upgrade an existing release to another chart version."""
    _deploy("upgrade", chart, release, version, namespace, set_values)


def _deploy(
    verb: Literal["install", "upgrade"],
    chart: str,
    release: str,
    version: str,
    namespace: str | None,
    set_values: list[str] | None,
) -> None:
    ctx = build_context()

    parsed = parse_set_values(set_values)
    if isinstance(parsed, Err):
        ctx.console.error(parsed.error)
        exit_with_code(int(ErrorCode.USER_ERROR))
    params = parsed.value

    deploy = ctx.helm.install_chart if verb == "install" else ctx.helm.upgrade_chart
    try:
        deploy(
            chart,
            release=release,
            version=version,
            namespace=namespace or ctx.config.namespace,
            params=params,
        )
    except HelmError as e:
        _fail(e, ctx)
    done = "installed" if verb == "install" else "upgraded"
    ctx.console.success(f"{release} {done} ({chart} {version})")


def _fail(error: HelmError, ctx: CLIContext) -> NoReturn:
    print_helm_error(error, ctx.console)
    exit_with_code(helm_error_exit_code(error))
