"""Service Typer app factory."""

import typer

from initkit.api.service.cmd_install import cmd_install
from initkit.api.service.cmd_pid import cmd_pid
from initkit.api.service.cmd_remove import cmd_remove
from initkit.api.service.cmd_restart import cmd_restart
from initkit.api.service.cmd_start import cmd_start
from initkit.api.service.cmd_status import cmd_status
from initkit.api.service.cmd_stop import cmd_stop
from initkit.api.service.cmd_update_environ import cmd_update_environ
from initkit.cli._handle_stage_result import _handle_stage_result

_BACKEND_HELP = "Force an init system (systemd, sysv, upstart, procd, launchd) instead of detecting it"


def _parse_environ(pairs: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE arguments; later duplicates win."""
    environ: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}")
        environ[key] = value
    return environ


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Install and control services on the host init system",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install", context_settings={"ignore_unknown_options": True})
    def install_cmd(
        name: str = typer.Argument(..., help="Configured service name"),
        args: list[str] | None = typer.Argument(None, help="Extra arguments appended to the command"),  # noqa: B008
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Install a configured service."""
        _handle_stage_result(cmd_install)(name, args or [], backend=backend)

    @app.command(name="start")
    def start_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Start service."""
        _handle_stage_result(cmd_start)(name, backend=backend)

    @app.command(name="stop")
    def stop_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop)(name, backend=backend)

    @app.command(name="restart")
    def restart_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Restart service."""
        _handle_stage_result(cmd_restart)(name, backend=backend)

    @app.command(name="status")
    def status_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Check service status."""
        _handle_stage_result(cmd_status)(name, backend=backend)

    @app.command(name="pid")
    def pid_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Print the main process id (-1 when not running)."""
        _handle_stage_result(cmd_pid)(name, backend=backend)

    @app.command(name="remove")
    def remove_cmd(
        name: str = typer.Argument(..., help="Service name"),
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Remove an installed service."""
        _handle_stage_result(cmd_remove)(name, backend=backend)

    @app.command(name="env")
    def env_cmd(
        name: str = typer.Argument(..., help="Configured service name"),
        pairs: list[str] = typer.Argument(..., help="Environment as KEY=VALUE pairs"),  # noqa: B008
        backend: str | None = typer.Option(None, "--backend", "-b", help=_BACKEND_HELP),
    ) -> None:
        """Replace the service environment."""
        _handle_stage_result(cmd_update_environ)(name, _parse_environ(pairs), backend=backend)

    return app
