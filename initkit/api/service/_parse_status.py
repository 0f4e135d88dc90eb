"""Recover running state and pid from a backend's status command output."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from ...constants import UNKNOWN_PID


@dataclass(frozen=True)
class ParsedStatus:
    """Result of parsing a status command's output."""

    pid: int | None
    running: bool


@dataclass(frozen=True)
class _StatusGrammar:
    marker: Callable[[str], "re.Pattern[str]"]
    pid: "re.Pattern[str]"


# systemctl status:     "Active: active (running) ..." / "Main PID: 4321 (webd)"
# service <n> status:   "webd (pid  4321) is running..."
# status <n> (upstart): "webd start/running, process 4321"
# init script status:   "Running 4321" (script) or "running" (rc.common)
# launchctl list <n>:   '"Label" = "webd";' / '"PID" = 4321;'
_GRAMMARS: dict[str, _StatusGrammar] = {
    "systemd": _StatusGrammar(
        marker=lambda name: re.compile(r"Active: active"),
        pid=re.compile(r"Main PID: ([0-9]+)"),
    ),
    "sysv": _StatusGrammar(
        marker=lambda name: re.compile(r"is running"),
        pid=re.compile(r"pid\s+([0-9]+)"),
    ),
    "upstart": _StatusGrammar(
        marker=lambda name: re.compile(re.escape(name) + r" start/running"),
        pid=re.compile(r"process ([0-9]+)"),
    ),
    "procd": _StatusGrammar(
        marker=lambda name: re.compile(r"^\s*running\b", re.IGNORECASE | re.MULTILINE),
        pid=re.compile(r"running\s+([0-9]+)", re.IGNORECASE),
    ),
    "launchd": _StatusGrammar(
        marker=lambda name: re.compile(re.escape(name)),
        pid=re.compile(r"\"PID\" = ([0-9]+);"),
    ),
}


def _parse_status(kind: str, output: str, name: str = "") -> ParsedStatus:
    """Parse raw status output of the ``kind`` backend.

    Args:
        kind: Backend kind ("systemd", "sysv", "upstart", "procd", "launchd")
        output: Raw text printed by the backend's status command
        name: Service name, needed by grammars whose marker embeds it

    Returns:
        ParsedStatus; running with pid UNKNOWN_PID when the marker is present
        but no pid could be captured, not running when the marker is absent.

    Raises:
        ValueError: If kind is not a known backend
    """
    grammar = _GRAMMARS.get(kind)
    if grammar is None:
        raise ValueError(f"Unknown service backend: {kind!r} (supported: {list(_GRAMMARS)})")

    if not grammar.marker(name).search(output):
        return ParsedStatus(pid=None, running=False)

    match = grammar.pid.search(output)
    if match is None:
        return ParsedStatus(pid=UNKNOWN_PID, running=True)
    return ParsedStatus(pid=int(match.group(1)), running=True)
