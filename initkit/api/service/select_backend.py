"""Detect which init system manages services on this host."""

import os
import platform
from collections.abc import Callable

# Probed in this order; the first marker found wins
_LINUX_MARKERS: tuple[tuple[str, str], ...] = (
    ("/run/systemd/system", "systemd"),
    ("/sbin/initctl", "upstart"),
    ("/sbin/procd", "procd"),
)

_FALLBACK_BACKEND = "sysv"


def select_backend(exists: Callable[[str], bool] = os.path.exists, system: str | None = None) -> str:
    """Pick the backend kind for this host.

    macOS always uses launchd. On other hosts the marker paths are probed in a
    fixed priority order (systemd, Upstart, procd) and SysV is the fallback.

    Args:
        exists: Host probe answering whether a path exists
        system: ``platform.system()`` value; detected when None

    Returns:
        Backend kind string
    """
    if system is None:
        system = platform.system()
    if system == "Darwin":
        return "launchd"

    for marker, kind in _LINUX_MARKERS:
        if exists(marker):
            return kind
    return _FALLBACK_BACKEND
