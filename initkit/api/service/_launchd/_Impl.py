"""launchd backend - property lists loaded with launchctl."""

import time
from collections.abc import Mapping, Sequence
from contextlib import suppress
from pathlib import Path

from ....constants import RESTART_DELAY_SECONDS, RESTARTED, UPDATED
from ....utils.logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..errors import CommandError, NotInstalledError, ServiceError
from . import _template

logger = get_logger(__name__)


class _Impl(_AbstractImpl):
    """Per-user launch agents, or system launch daemons when no home exists."""

    kind = "launchd"

    # Loading a user agent needs no elevated group
    requires_root = False

    # launchctl list exits 113 (or 1 on older releases) for an unknown label
    not_running_codes = frozenset({1, 113})

    SYSTEM_DIR = Path("/Library/LaunchDaemons")

    @staticmethod
    def _home() -> Path | None:
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None

    @property
    def unit_path(self) -> Path:
        home = self._home()
        if home is None:
            return self.SYSTEM_DIR / self.service_name()
        return home / "Library" / "LaunchAgents" / self.service_name()

    def service_name(self) -> str:
        return f"{self.name}.plist"

    def _log_dir(self) -> str:
        home = self._home()
        if home is None:
            return _template.DAEMON_LOG_DIR
        return str(home / "Library" / "Logs")

    def render(self, args: Sequence[str] = ()) -> str:
        return _template.render(self.definition, args, which=self._which, log_dir=self._log_dir())

    def _control_command(self, action: str) -> tuple[str, ...]:
        if action == "start":
            return ("launchctl", "load", str(self.unit_path))
        if action == "stop":
            return ("launchctl", "unload", str(self.unit_path))
        if action == "status":
            return ("launchctl", "list", self.name)
        raise ValueError(f"launchctl has no {action!r} action")

    def _write_unit(self, content: str) -> None:
        self.unit_path.parent.mkdir(parents=True, exist_ok=True)
        super()._write_unit(content)

    def _before_remove(self) -> None:
        # The job may never have been loaded
        with suppress(CommandError):
            self.runner.run("launchctl", "remove", self.name)

    def restart(self) -> str:
        """Unload, pause briefly, load again; unload failures are ignored."""
        with suppress(ServiceError):
            self.stop()
        time.sleep(RESTART_DELAY_SECONDS)
        self.start()
        return RESTARTED

    def update_environ(self, environ: Mapping[str, str]) -> str:
        """Remove and reinstall the property list with a new environment."""
        try:
            self.remove()
        except NotInstalledError:
            logger.debug("%s was not installed before updating its environment", self.unit_path)
        self.definition = self.definition.with_environ(dict(environ))
        self.install()
        return UPDATED
