"""Lifecycle of a real systemd unit; needs root on a systemd host."""

import os
from pathlib import Path

import pytest

from initkit.api.service import Service, ServiceDefinition

pytestmark = pytest.mark.skipif(
    not Path("/run/systemd/system").is_dir() or os.geteuid() != 0,
    reason="requires root on a host booted with systemd",
)


@pytest.fixture
def sleeper(tmp_path):
    definition = ServiceDefinition(
        name="initkit-integration-sleeper",
        cmd="sleep 300",
        description="initkit integration test",
        working_dir=str(tmp_path),
        log_file=str(tmp_path / "sleeper.log"),
    )
    service = Service(definition, backend="systemd")
    yield service
    if service.is_installed():
        try:
            service.stop()
        finally:
            service.remove()


def test_install_start_stop_remove(sleeper):
    assert sleeper.install() == "installed"
    assert sleeper.start() == "started"
    assert sleeper.status().startswith("running")
    assert sleeper.pid() > 0

    assert sleeper.stop() == "stopped"
    assert sleeper.status() == "stopped"
    assert sleeper.pid() == -1

    assert sleeper.remove() == "removed"
    assert not sleeper.is_installed()
