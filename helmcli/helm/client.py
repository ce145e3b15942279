"""Helm command-line client.

HelmCLI shells out to the helm binary for repository and release operations.
Output streams to the caller's sinks while helm runs; the exit status of the
latest command is kept per caller and exposed through last_result().

Usage:
    helm = HelmCLI(Path("~/.kube/config").expanduser())

    helm.add_repo("bitnami", "https://charts.bitnami.com/bitnami")
    if not helm.last_result().success:
        ...

    buf = io.StringIO()
    with helm.with_pipes(buf, buf):
        helm.install_chart(
            "bitnami/nginx",
            release="web",
            version="15.0.0",
            params={"replicaCount": 2},
        )

Concurrent callers each see their own last result and sinks: either rely on
the per-thread default context or pass an ExecutionContext explicitly. There
is no timeout, a hung helm process blocks the caller.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path

from helmcli.core.config import DEFAULT_EXECUTABLE, DEFAULT_NAMESPACE, ClientConfig
from helmcli.core.result import Err, Ok, Result
from helmcli.output.console import ConsoleProtocol
from helmcli.platform.process import CompletedCommand, ProcessError, Sink, capture, stream

from . import command
from .context import CommandResult, ExecutionContext, ThreadContexts
from .errors import InstallError, MissingReleaseError, UpgradeError

__all__ = ["HelmCLI"]


class HelmCLI:
    """Wrapper around the helm executable.

    Attributes:
        config: Immutable kubeconfig path and executable, shared by all callers.
    """

    def __init__(
        self,
        kubeconfig: Path | str,
        executable: str = DEFAULT_EXECUTABLE,
        *,
        console: ConsoleProtocol | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            kubeconfig: Cluster credentials file passed to every command.
            executable: Name or path of the helm binary.
            console: Optional console for diagnostics (truncated output).
        """
        self.config = ClientConfig(kubeconfig=Path(kubeconfig), executable=executable)
        self._console = console
        self._contexts = ThreadContexts()

    @classmethod
    def from_config(cls, config: ClientConfig, *, console: ConsoleProtocol | None = None) -> HelmCLI:
        return cls(config.kubeconfig, config.executable, console=console)

    @property
    def kubeconfig(self) -> Path:
        return self.config.kubeconfig

    @property
    def executable(self) -> str:
        return self.config.executable

    # -------------------------------------------------------------------------
    # Per-caller state
    # -------------------------------------------------------------------------

    def context(self) -> ExecutionContext:
        """Return the calling thread's default context."""
        return self._contexts.context

    def _resolve(self, context: ExecutionContext | None) -> ExecutionContext:
        return context if context is not None else self._contexts.context

    def last_result(self, *, context: ExecutionContext | None = None) -> CommandResult | None:
        """Result of the latest command run in this context, None before the first."""
        return self._resolve(context).last_result

    @property
    def stdout(self) -> Sink:
        return self.context().out()

    @property
    def stderr(self) -> Sink:
        return self.context().err()

    @contextmanager
    def with_pipes(
        self,
        out: Sink | None = None,
        err: Sink | None = None,
        *,
        context: ExecutionContext | None = None,
    ) -> Iterator[ExecutionContext]:
        """Send helm output to out/err for the duration of the block.

        None selects the process's own stream. The previous sinks are restored
        however the block exits.
        """
        ctx = self._resolve(context)
        previous_stdout, previous_stderr = ctx.stdout, ctx.stderr
        ctx.stdout, ctx.stderr = out, err
        try:
            yield ctx
        finally:
            ctx.stdout, ctx.stderr = previous_stdout, previous_stderr

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    def add_repo(self, name: str, url: str, *, context: ExecutionContext | None = None) -> None:
        """Run `helm repo add`. Never raises, inspect last_result()."""
        self._stream(command.repo_add(self.config, name, url), self._resolve(context))

    def update_repos(self, *, context: ExecutionContext | None = None) -> None:
        """Run `helm repo update`. Never raises, inspect last_result()."""
        self._stream(command.repo_update(self.config), self._resolve(context))

    # -------------------------------------------------------------------------
    # Releases
    # -------------------------------------------------------------------------

    def get_release(
        self,
        release: str,
        namespace: str = DEFAULT_NAMESPACE,
        *,
        context: ExecutionContext | None = None,
    ) -> str:
        """Return the output of `helm get all` for a release.

        stdout is captured rather than streamed; stderr still goes to the
        context's stderr sink.

        Raises:
            MissingReleaseError: helm exited non-zero.
        """
        ctx = self._resolve(context)
        output, result = self._capture(command.get_all(self.config, release, namespace), ctx)
        if not result.success:
            raise MissingReleaseError(release, result.returncode)
        return output

    def release_exists(
        self,
        release: str,
        namespace: str = DEFAULT_NAMESPACE,
        *,
        context: ExecutionContext | None = None,
    ) -> bool:
        ctx = self._resolve(context)
        try:
            self.get_release(release, namespace, context=ctx)
        except MissingReleaseError:
            return False
        result = ctx.last_result
        return result is not None and result.returncode == 0

    def install_chart(
        self,
        chart: str,
        *,
        release: str,
        version: str,
        namespace: str = DEFAULT_NAMESPACE,
        params: Mapping[str, object] | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Run `helm install` with one --set flag per params entry.

        Raises:
            InstallError: helm exited non-zero.
        """
        cmd = command.install(self.config, chart, release, version, namespace, params or {})
        result = self._stream(cmd, self._resolve(context))
        if not result.success:
            raise InstallError(release, result.returncode)

    def upgrade_chart(
        self,
        chart: str,
        *,
        release: str,
        version: str,
        namespace: str = DEFAULT_NAMESPACE,
        params: Mapping[str, object] | None = None,
        context: ExecutionContext | None = None,
    ) -> None:
        """Run `helm upgrade` with one --set flag per params entry.

        Raises:
            UpgradeError: helm exited non-zero.
        """
        cmd = command.upgrade(self.config, chart, release, version, namespace, params or {})
        result = self._stream(cmd, self._resolve(context))
        if not result.success:
            raise UpgradeError(release, result.returncode)

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def _stream(self, cmd: Sequence[str], ctx: ExecutionContext) -> CommandResult:
        # sinks are snapshotted here, a swap mid-command does not apply
        err = ctx.err()
        outcome = stream(cmd, ctx.out(), err)
        return self._record(ctx, cmd, outcome, err)

    def _capture(self, cmd: Sequence[str], ctx: ExecutionContext) -> tuple[str, CommandResult]:
        err = ctx.err()
        outcome = capture(cmd, err)
        result = self._record(ctx, cmd, outcome, err)
        output = outcome.value.stdout if isinstance(outcome, Ok) else ""
        return output, result

    def _record(
        self,
        ctx: ExecutionContext,
        cmd: Sequence[str],
        outcome: Result[CompletedCommand, ProcessError],
        err: Sink,
    ) -> CommandResult:
        match outcome:
            case Err(error):
                err.write(f"{error}\n")
                result = CommandResult(command=tuple(cmd), returncode=error.returncode)
            case Ok(done):
                result = CommandResult(
                    command=done.command,
                    returncode=done.returncode,
                    truncated=done.truncated,
                )
                if done.truncated and self._console is not None:
                    self._console.warning(
                        f"output of `{' '.join(cmd[3:])}` was truncated while draining"
                    )
        ctx.last_result = result
        return result
