"""procd backend - OpenWrt init scripts under /etc/init.d."""

from collections.abc import Sequence
from pathlib import Path

from .._AbstractImpl import _AbstractImpl
from . import _template


class _Impl(_AbstractImpl):
    """OpenWrt init scripts invoked directly by path."""

    kind = "procd"

    # Stopped: the self-contained script exits 1, rc.common exits 3
    not_running_codes = frozenset({1, 3})

    unit_mode = 0o755

    INIT_DIR = Path("/etc/init.d")

    @property
    def unit_path(self) -> Path:
        return self.INIT_DIR / self.name

    def service_name(self) -> str:
        return self.name

    def render(self, args: Sequence[str] = ()) -> str:
        return _template.render(self.definition, args, which=self._which)

    def _control_command(self, action: str) -> tuple[str, ...]:
        return (str(self.unit_path), action)

    def _activate(self) -> None:
        # Only the rc.common script understands "enable"
        if _template.is_agent(self.definition):
            self.runner.run(str(self.unit_path), "enable")

    def _before_remove(self) -> None:
        # Drop the /etc/rc.d boot links created by "enable"
        if _template.is_agent(self.definition):
            self.runner.run(str(self.unit_path), "disable")
