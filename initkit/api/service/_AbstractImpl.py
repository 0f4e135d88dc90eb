"""Abstract base class for init system backends."""

import os
import shutil
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from ...constants import INSTALLED, NO_PID, REMOVED, RESTARTED, RUNNING, STARTED, STOPPED, UNKNOWN_PID, UPDATED
from ...utils.logger import get_logger
from ._check_privileges import _check_privileges
from ._parse_status import ParsedStatus, _parse_status
from ._split_command import Which
from .CommandRunner import CommandRunner
from .errors import AlreadyInstalledError, CommandError, NotInstalledError, NotRunningError
from .ServiceDefinition import ServiceDefinition
from .ServiceStatus import ServiceStatus

logger = get_logger(__name__)


class _AbstractImpl(ABC):
    """Lifecycle contract shared by every init system backend.

    A backend owns one canonical unit path derived from the service name; the
    existence of that file is the only "installed" state. Every host command
    goes through ``self.runner``. Subclasses supply paths, rendering and the
    control command vocabulary, and override the steps that differ.
    """

    kind: str = ""

    # Mutating and status operations require the root group
    requires_root: bool = True

    # Exit codes of the status command that mean "answered: not running"
    not_running_codes: frozenset[int] = frozenset()

    # Permission bits for the written unit
    unit_mode: int = 0o644

    def __init__(
        self,
        definition: ServiceDefinition,
        runner: CommandRunner | None = None,
        which: Which = shutil.which,
    ):
        self.definition = definition
        self.runner = runner if runner is not None else CommandRunner()
        self._which = which

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    @abstractmethod
    def unit_path(self) -> Path:
        """Canonical path of the installed unit."""

    @abstractmethod
    def service_name(self) -> str:
        """On-disk unit identifier (name plus backend suffix)."""

    @abstractmethod
    def render(self, args: Sequence[str] = ()) -> str:
        """Render the unit text for the current definition."""

    @abstractmethod
    def _control_command(self, action: str) -> tuple[str, ...]:
        """Host command performing ``action`` (start, stop, restart, status)."""

    def _status_command(self) -> tuple[str, ...]:
        return self._control_command("status")

    def _activate(self) -> None:
        """Make a freshly written unit known to the init daemon."""

    def _before_remove(self) -> None:
        """Detach the unit from the init daemon before its file is deleted."""

    def _after_remove(self) -> None:
        """Clean up activation records once the unit file is gone."""

    # ------------------------------------------------------------------ checks

    def is_installed(self) -> bool:
        return os.path.exists(self.unit_path)

    def _check_privileges(self) -> None:
        if self.requires_root:
            _check_privileges(self.runner)

    def _require_installed(self) -> None:
        if not self.is_installed():
            raise NotInstalledError()

    def _write_unit(self, content: str) -> None:
        path = self.unit_path
        path.write_text(content, encoding="utf-8")
        os.chmod(path, self.unit_mode)

    # --------------------------------------------------------------- lifecycle

    def install(self, *args: str) -> str:
        self._check_privileges()
        if self.is_installed():
            raise AlreadyInstalledError()

        content = self.render(args)
        self._write_unit(content)
        logger.info("Wrote %s unit for %s at %s", self.kind, self.name, self.unit_path)

        # A failed activation leaves the unit file in place
        self._activate()
        logger.info("Installed %s", self.service_name())
        return INSTALLED

    def remove(self) -> str:
        self._check_privileges()
        self._require_installed()

        self._before_remove()
        os.remove(self.unit_path)
        self._after_remove()
        logger.info("Removed %s", self.service_name())
        return REMOVED

    def start(self) -> str:
        self._check_privileges()
        self._require_installed()
        self.runner.run(*self._control_command("start"))
        logger.info("Started %s", self.service_name())
        return STARTED

    def stop(self) -> str:
        self._check_privileges()
        self._require_installed()
        self.runner.run(*self._control_command("stop"))
        logger.info("Stopped %s", self.service_name())
        return STOPPED

    def restart(self) -> str:
        self._check_privileges()
        self._require_installed()
        self.runner.run(*self._control_command("restart"))
        logger.info("Restarted %s", self.service_name())
        return RESTARTED

    def update_environ(self, environ: Mapping[str, str]) -> str:
        """Re-render the unit with a new environment and rewrite it in place.

        Install-time extra arguments are not recorded anywhere, so the
        rewritten unit carries only the arguments embedded in the command.
        """
        self._check_privileges()
        self._require_installed()

        self.definition = self.definition.with_environ(dict(environ))
        self._write_unit(self.render())
        logger.info("Rewrote %s with %d environment variables", self.unit_path, len(environ))
        return UPDATED

    # ------------------------------------------------------------------ status

    def _query_status(self) -> ParsedStatus:
        command = self._status_command()
        result = self.runner.run_with_output(*command)
        if result.returncode in self.not_running_codes:
            return ParsedStatus(pid=None, running=False)
        if result.returncode != 0:
            raise CommandError(
                command[0],
                f"failed: exit status {result.returncode}",
                result.returncode,
                result.output,
            )
        return _parse_status(self.kind, result.output, self.name)

    def _running_pid(self) -> int:
        parsed = self._query_status()
        if not parsed.running or parsed.pid is None:
            raise NotRunningError()
        return parsed.pid

    def status(self) -> str:
        self._check_privileges()
        self._require_installed()
        try:
            pid = self._running_pid()
        except NotRunningError:
            return STOPPED
        if pid == UNKNOWN_PID:
            return RUNNING
        return f"{RUNNING}(pid: {pid})"

    def pid(self) -> int:
        try:
            pid = self._running_pid()
        except NotRunningError:
            return NO_PID
        return pid if pid > 0 else NO_PID

    def status_info(self) -> ServiceStatus:
        """Structured status; only queries the host when the unit is installed."""
        self._check_privileges()
        status = ServiceStatus(installed=self.is_installed(), unit_path=str(self.unit_path))
        if not status.installed:
            return status
        try:
            pid = self._running_pid()
        except NotRunningError:
            return status
        status.running = True
        status.pid = pid if pid > 0 else None
        return status
