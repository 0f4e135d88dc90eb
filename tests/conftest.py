"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from initkit.api.service.CommandRunner import CommandOutput, CommandRunner
from initkit.api.service.errors import CommandError
from initkit.api.service.ServiceDefinition import ServiceDefinition


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid initkit configuration dict with one service."""
    return {
        "log": {"level": "INFO"},
        "service": {
            "backend": "systemd",
            "command_timeout": None,
            "services": {
                "webd": {
                    "cmd": "/usr/bin/webd --port 8080",
                    "description": "Web daemon",
                },
            },
        },
    }


def webd_definition(**overrides) -> ServiceDefinition:
    """The ``webd`` definition used across backend tests."""
    data = {"name": "webd", "cmd": "/usr/bin/webd --port 8080", "description": "Web daemon"}
    data.update(overrides)
    return ServiceDefinition(**data)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def initkit_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up INITKIT_HOME with a minimal config file.

    Returns:
        Path to the initkit home directory
    """
    home = tmp_path / ".initkit"
    home.mkdir()
    monkeypatch.setenv("INITKIT_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict))
    return home


@pytest.fixture
def definition() -> ServiceDefinition:
    return webd_definition()


class FakeRunner(CommandRunner):
    """CommandRunner that records commands instead of running them.

    ``id -g`` answers with ``gid``; other status queries answer from
    ``outputs`` (default: empty output, exit 0). Commands listed in
    ``failing`` raise CommandError.
    """

    def __init__(self, gid: str = "0"):
        super().__init__()
        self.gid = gid
        self.calls: list[tuple[str, ...]] = []
        self.outputs: dict[tuple[str, ...], CommandOutput] = {}
        self.failing: set[tuple[str, ...]] = set()

    def run(self, command: str, *args: str) -> None:
        call = (command, *args)
        self.calls.append(call)
        if call in self.failing:
            raise CommandError(command, "failed: exit status 1", 1)

    def run_with_output(self, command: str, *args: str) -> CommandOutput:
        call = (command, *args)
        self.calls.append(call)
        if call in self.failing:
            raise CommandError(command, "failed: executable file not found")
        if call == ("id", "-g"):
            return CommandOutput(output=f"{self.gid}\n", returncode=0)
        return self.outputs.get(call, CommandOutput(output="", returncode=0))

    def commands(self) -> list[tuple[str, ...]]:
        """Recorded calls without the privilege probes."""
        return [call for call in self.calls if call != ("id", "-g")]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def unit_dirs(tmp_path: Path, monkeypatch) -> Path:
    """Redirect every backend's canonical directories into ``tmp_path``.

    Creates ``etc/systemd/system``, ``etc/init.d``, ``etc/init`` and the
    ``etc/rc{0..6}.d`` link directories, and points HOME at ``home``.

    Returns:
        The fake filesystem root
    """
    from initkit.api.service._launchd._Impl import _Impl as LaunchdImpl
    from initkit.api.service._procd._Impl import _Impl as ProcdImpl
    from initkit.api.service._systemd._Impl import _Impl as SystemdImpl
    from initkit.api.service._sysv._Impl import _Impl as SysvImpl
    from initkit.api.service._upstart._Impl import _Impl as UpstartImpl

    root = tmp_path / "root"
    etc = root / "etc"
    for sub in ("systemd/system", "init.d", "init", *(f"rc{level}.d" for level in range(7))):
        (etc / sub).mkdir(parents=True)
    home = root / "home"
    home.mkdir()

    monkeypatch.setattr(SystemdImpl, "UNIT_DIR", etc / "systemd" / "system")
    monkeypatch.setattr(SysvImpl, "INIT_DIR", etc / "init.d")
    monkeypatch.setattr(SysvImpl, "RC_ROOT", etc)
    monkeypatch.setattr(UpstartImpl, "JOB_DIR", etc / "init")
    monkeypatch.setattr(ProcdImpl, "INIT_DIR", etc / "init.d")
    monkeypatch.setattr(LaunchdImpl, "SYSTEM_DIR", root / "Library" / "LaunchDaemons")
    monkeypatch.setenv("HOME", str(home))
    return root


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def snapshot(root: Path) -> set[str]:
    """Relative paths of every file, directory and symlink under ``root``."""
    return {str(path.relative_to(root)) for path in root.rglob("*")}
