"""Upstart backend - job configuration under /etc/init."""

from collections.abc import Sequence
from pathlib import Path

from ....constants import RESTARTED
from ....utils.logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..errors import ServiceError
from . import _template

logger = get_logger(__name__)


class _Impl(_AbstractImpl):
    """Upstart jobs controlled through ``start``, ``stop`` and ``status``."""

    kind = "upstart"

    JOB_DIR = Path("/etc/init")

    @property
    def unit_path(self) -> Path:
        return self.JOB_DIR / self.service_name()

    def service_name(self) -> str:
        return f"{self.name}.conf"

    def render(self, args: Sequence[str] = ()) -> str:
        return _template.render(self.definition, args, which=self._which)

    def _control_command(self, action: str) -> tuple[str, ...]:
        return (action, self.name)

    def restart(self) -> str:
        """Stop then start; a failed stop is logged and the start still runs."""
        self._check_privileges()
        self._require_installed()
        try:
            self.stop()
        except ServiceError as e:
            logger.warning("Stopping %s before restart failed: %s", self.name, e)
        self.start()
        return RESTARTED
