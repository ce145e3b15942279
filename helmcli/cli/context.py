from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

import typer

from helmcli.core.config import ClientConfig, load_config
from helmcli.core.errors import ErrorCode
from helmcli.core.result import Err
from helmcli.helm.client import HelmCLI
from helmcli.output.console import ConsoleProtocol, RichConsole

# Set by the root callback from --config/--kubeconfig/--helm
CONFIG_ENV = "HELMCLI_CONFIG"
KUBECONFIG_ENV = "HELMCLI_KUBECONFIG"
EXECUTABLE_ENV = "HELMCLI_EXECUTABLE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: ClientConfig
    helm: HelmCLI
    console: ConsoleProtocol


def resolve_config() -> ClientConfig:
    """Config precedence: command-line flags, then --config file, then environment."""
    config_path = os.environ.get(CONFIG_ENV)
    if config_path:
        result = load_config(Path(config_path))
        if isinstance(result, Err):
            typer.echo(f"error: {result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = result.value
    else:
        config = ClientConfig.from_env()

    kubeconfig = os.environ.get(KUBECONFIG_ENV)
    if kubeconfig:
        config = replace(config, kubeconfig=Path(kubeconfig).expanduser())
    executable = os.environ.get(EXECUTABLE_ENV)
    if executable:
        config = replace(config, executable=executable)
    return config


def build_context() -> CLIContext:
    config = resolve_config()
    console = RichConsole()
    return CLIContext(
        config=config,
        helm=HelmCLI.from_config(config, console=console),
        console=console,
    )
