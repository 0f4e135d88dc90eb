"""SysV backend - LSB init script plus rc.d start/kill links."""

import os
from collections.abc import Sequence
from pathlib import Path

from ....utils.logger import get_logger
from .._AbstractImpl import _AbstractImpl
from . import _template

logger = get_logger(__name__)


class _Impl(_AbstractImpl):
    """SysV init scripts controlled through ``service``."""

    kind = "sysv"

    # LSB status: 1 dead with pid file, 2 dead with lock file, 3 stopped
    not_running_codes = frozenset({1, 2, 3})

    unit_mode = 0o755

    INIT_DIR = Path("/etc/init.d")
    RC_ROOT = Path("/etc")

    START_RUNLEVELS = (2, 3, 4, 5)
    STOP_RUNLEVELS = (0, 1, 6)
    START_PRIORITY = 87
    STOP_PRIORITY = 17

    @property
    def unit_path(self) -> Path:
        return self.INIT_DIR / self.name

    def service_name(self) -> str:
        return self.name

    def render(self, args: Sequence[str] = ()) -> str:
        return _template.render(self.definition, args, which=self._which)

    def _control_command(self, action: str) -> tuple[str, ...]:
        return ("service", self.name, action)

    def _rc_links(self) -> list[Path]:
        """Start links for the multi-user runlevels, kill links for halt/single/reboot."""
        links = [self.RC_ROOT / f"rc{level}.d" / f"S{self.START_PRIORITY}{self.name}" for level in self.START_RUNLEVELS]
        links += [self.RC_ROOT / f"rc{level}.d" / f"K{self.STOP_PRIORITY}{self.name}" for level in self.STOP_RUNLEVELS]
        return links

    def _activate(self) -> None:
        for link in self._rc_links():
            if not link.parent.is_dir():
                logger.warning("Skipping runlevel link %s: %s does not exist", link.name, link.parent)
                continue
            if os.path.lexists(link):
                link.unlink()
            link.symlink_to(self.unit_path)

    def _after_remove(self) -> None:
        for link in self._rc_links():
            link.unlink(missing_ok=True)
