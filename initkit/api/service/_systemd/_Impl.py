"""systemd backend - installs a system unit under /etc/systemd/system."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from ....constants import UPDATED
from ....templating import shell_double_quoted
from ....utils.logger import get_logger
from .._AbstractImpl import _AbstractImpl
from . import _template

logger = get_logger(__name__)


class _Impl(_AbstractImpl):
    """systemd system units driven through ``systemctl``."""

    kind = "systemd"

    # systemctl status exits 3 for an inactive unit
    not_running_codes = frozenset({3})

    UNIT_DIR = Path("/etc/systemd/system")

    @property
    def unit_path(self) -> Path:
        return self.UNIT_DIR / self.service_name()

    def service_name(self) -> str:
        return f"{self.name}.service"

    @property
    def env_file(self) -> Path:
        """EnvironmentFile referenced by the unit; rewritten by update_environ."""
        return Path(_template.env_file_path(self.definition))

    def render(self, args: Sequence[str] = ()) -> str:
        return _template.render(self.definition, args, which=self._which)

    def _control_command(self, action: str) -> tuple[str, ...]:
        return ("systemctl", action, self.service_name())

    def _activate(self) -> None:
        self.runner.run("systemctl", "daemon-reload")
        self.runner.run("systemctl", "enable", self.service_name())

    def _before_remove(self) -> None:
        self.runner.run("systemctl", "disable", self.service_name())

    def _after_remove(self) -> None:
        self.env_file.unlink(missing_ok=True)
        self.runner.run("systemctl", "daemon-reload")

    def update_environ(self, environ: Mapping[str, str]) -> str:
        """Replace the environment in the unit and its EnvironmentFile, then reload systemd.

        The unit is re-rendered so its ``Environment=`` line carries exactly
        the new mapping; the EnvironmentFile holds the same values as
        double-quoted assignments.
        """
        self._check_privileges()
        self._require_installed()

        self.definition = self.definition.with_environ(dict(environ))
        self._write_unit(self.render())
        lines = [f'{key}="{shell_double_quoted(value)}"\n' for key, value in sorted(self.definition.environ.items())]
        self.env_file.write_text("".join(lines), encoding="utf-8")
        logger.info("Wrote %d environment variables to %s", len(lines), self.env_file)

        self._activate()
        return UPDATED
