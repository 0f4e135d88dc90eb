"""Service public API - one managed service on the host's init system."""

from collections.abc import Mapping
from pathlib import Path

from ...utils.logger import get_logger
from ._AbstractImpl import _AbstractImpl
from .CommandRunner import CommandRunner
from .select_backend import select_backend
from .ServiceConfig import AUTO_BACKEND, _BACKEND_REGISTRY, ServiceConfig
from .ServiceDefinition import ServiceDefinition
from .ServiceStatus import ServiceStatus

logger = get_logger(__name__)


class Service:
    """Public API for service lifecycle operations.

    The backend kind is resolved once, at construction, either from the
    caller or by probing the host. Every operation is delegated to that
    backend and either returns a result label or raises a ServiceError.
    """

    def __init__(
        self,
        definition: ServiceDefinition,
        backend: str | None = None,
        runner: CommandRunner | None = None,
    ):
        if backend is None or backend == AUTO_BACKEND:
            backend = select_backend()
            logger.debug("Detected %s init system", backend)

        # Validate backend kind using the registry (single source of truth)
        if backend not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import backend implementation class directly from its _Impl module
        module = __import__(_BACKEND_REGISTRY[backend], fromlist=[""])
        impl_class: type[_AbstractImpl] = module._Impl
        self._backend = backend
        self._impl: _AbstractImpl = impl_class(definition, runner=runner)

    @classmethod
    def from_config(cls, service_config: ServiceConfig, name: str) -> "Service":
        """Build a Service for a configured definition, honouring backend and timeout settings.

        Raises:
            KeyError: If no service with that name is configured
        """
        definition = service_config.get_definition(name)
        runner = CommandRunner(timeout=service_config.command_timeout)
        return cls(definition, backend=service_config.backend, runner=runner)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Backends hold no resources, but we keep the pattern for consistency
        return False

    @property
    def backend(self) -> str:
        """Active backend kind."""
        return self._backend

    @property
    def definition(self) -> ServiceDefinition:
        return self._impl.definition

    @property
    def unit_path(self) -> Path:
        """Canonical path of the unit file for the active backend."""
        return self._impl.unit_path

    def install(self, *args: str) -> str:
        """Render and write the unit, then register it with the init system.

        Args:
            *args: Extra arguments appended after the command's own arguments

        Returns:
            ``"installed"``

        Raises:
            AlreadyInstalledError: If a unit already exists at the canonical path
        """
        return self._impl.install(*args)

    def start(self) -> str:
        """Start the installed service through the init system.

        Returns:
            ``"started"``

        Raises:
            NotInstalledError: If no unit exists at the canonical path
            CommandError: If the control command fails
        """
        return self._impl.start()

    def stop(self) -> str:
        """Stop the installed service through the init system.

        Returns:
            ``"stopped"``

        Raises:
            NotInstalledError: If no unit exists at the canonical path
            CommandError: If the control command fails
        """
        return self._impl.stop()

    def restart(self) -> str:
        """Restart the service, natively or as stop then start.

        Upstart and launchd ignore a failing stop before starting again.

        Returns:
            ``"restarted"``

        Raises:
            NotInstalledError: If no unit exists at the canonical path
            CommandError: If the restart (or the start that follows a stop) fails
        """
        return self._impl.restart()

    def status(self) -> str:
        """Query the init system for the running state.

        Returns:
            ``"running(pid: N)"``, ``"running"`` (pid unknown) or ``"stopped"``

        Raises:
            NotInstalledError: If no unit exists at the canonical path
            CommandError: If the status command cannot be run or fails unexpectedly
        """
        return self._impl.status()

    def pid(self) -> int:
        """Main process id of the service.

        Returns:
            The pid, or -1 when not running or undeterminable

        Raises:
            CommandError: If the status command cannot be run or fails unexpectedly
        """
        return self._impl.pid()

    def status_info(self) -> ServiceStatus:
        """Structured status for the stage commands.

        Returns:
            ServiceStatus; the host is only queried when the unit is installed

        Raises:
            PermissionDeniedError: If the backend requires root and the caller is not in the root group
            CommandError: If the status command cannot be run or fails unexpectedly
        """
        return self._impl.status_info()

    def remove(self) -> str:
        """Deactivate the service and delete its unit and activation records.

        Returns:
            ``"removed"``

        Raises:
            NotInstalledError: If no unit exists at the canonical path (nothing is deleted)
            CommandError: If deactivation fails
            OSError: If a file cannot be deleted
        """
        return self._impl.remove()

    def update_environ(self, environ: Mapping[str, str]) -> str:
        """Replace the service environment.

        systemd re-renders the unit and rewrites its EnvironmentFile; SysV,
        Upstart and procd rewrite the unit in place; launchd reinstalls.

        Returns:
            ``"updated"``

        Raises:
            NotInstalledError: If no unit exists (except launchd, which installs)
            ValueError: If a variable name or value is invalid
        """
        return self._impl.update_environ(environ)

    def is_installed(self) -> bool:
        """Whether a unit exists at the canonical path; never raises."""
        return self._impl.is_installed()

    def service_name(self) -> str:
        """Unit identifier on disk, e.g. ``webd.service`` or ``webd.plist``."""
        return self._impl.service_name()


def get_simple(name: str, backend: str | None = None, runner: CommandRunner | None = None) -> Service:
    """Service for an existing unit known only by name.

    Only operations that do not render a unit (start, stop, restart, status,
    pid, remove, is_installed) are meaningful on the result.
    """
    return Service(ServiceDefinition(name=name), backend=backend, runner=runner)


def legacy_unit_service(name: str, runner: CommandRunner | None = None) -> Service:
    """systemd Service for units installed under a name with spaces replaced by underscores."""
    return get_simple(name.replace(" ", "_"), backend="systemd", runner=runner)
