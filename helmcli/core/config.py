"""Typed client configuration.

The client needs two things to talk to a cluster: the kubeconfig file passed
through to helm and the helm executable itself. Both can be given directly,
read from a TOML file or picked up from the environment.

Example config.toml:

    [helm]
    kubeconfig = "~/.kube/staging.yaml"
    executable = "/usr/local/bin/helm"
    namespace = "apps"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_KUBECONFIG",
    "DEFAULT_NAMESPACE",
    "load_config",
]

DEFAULT_EXECUTABLE = "helm"
DEFAULT_NAMESPACE = "default"
DEFAULT_KUBECONFIG = Path("~/.kube/config")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable helm client settings.

    Attributes:
        kubeconfig: Cluster credentials file handed to helm via --kubeconfig.
        executable: Name or path of the helm binary.
        namespace: Namespace used when a command does not name one.
    """

    kubeconfig: Path
    executable: str = DEFAULT_EXECUTABLE
    namespace: str = DEFAULT_NAMESPACE

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, base_dir: Path | None = None) -> ClientConfig:
        """Create a ClientConfig from parsed TOML.

        Relative kubeconfig paths are resolved against base_dir when given.

        Raises:
            ValueError: If the [helm] table or its kubeconfig key is missing.
        """
        helm: StrDict | None = get_table(data, "helm")
        if helm is None:
            raise ValueError("missing [helm] table")

        kubeconfig = get_str(helm, "kubeconfig")
        if kubeconfig is None:
            raise ValueError("missing helm.kubeconfig")

        path = Path(kubeconfig).expanduser()
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path

        return cls(
            kubeconfig=path,
            executable=get_str(helm, "executable") or DEFAULT_EXECUTABLE,
            namespace=get_str(helm, "namespace") or DEFAULT_NAMESPACE,
        )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ClientConfig:
        """Build config from KUBECONFIG, HELM_EXECUTABLE and HELM_NAMESPACE.

        KUBECONFIG may hold a list of files; helm only accepts one on the
        command line, so the first entry wins.
        """
        environ = os.environ if env is None else env

        kubeconfig = DEFAULT_KUBECONFIG.expanduser()
        raw = environ.get("KUBECONFIG", "").strip()
        if raw:
            first = next((p for p in raw.split(os.pathsep) if p.strip()), None)
            if first is not None:
                kubeconfig = Path(first.strip()).expanduser()

        return cls(
            kubeconfig=kubeconfig,
            executable=environ.get("HELM_EXECUTABLE", "").strip() or DEFAULT_EXECUTABLE,
            namespace=environ.get("HELM_NAMESPACE", "").strip() or DEFAULT_NAMESPACE,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ClientConfig, ConfigError]:
    """Load client configuration from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Ok(ClientConfig) on success, Err(ConfigError) on failure.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ClientConfig.from_dict(result.value, base_dir=path.parent))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
