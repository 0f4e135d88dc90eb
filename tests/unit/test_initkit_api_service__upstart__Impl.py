"""Unit tests for the Upstart backend."""

import pytest

from initkit.api.service._upstart._Impl import _Impl
from initkit.api.service.CommandRunner import CommandOutput
from initkit.api.service.errors import CommandError, NotInstalledError
from tests.conftest import snapshot, webd_definition

STATUS = ("status", "webd")


@pytest.fixture
def impl(unit_dirs, fake_runner):
    return _Impl(webd_definition(), runner=fake_runner)


def test_paths(impl, unit_dirs):
    assert impl.service_name() == "webd.conf"
    assert impl.unit_path == unit_dirs / "etc" / "init" / "webd.conf"


def test_install_and_remove_restore_filesystem(impl, unit_dirs, fake_runner):
    before = snapshot(unit_dirs)
    assert impl.install() == "installed"
    assert "start on runlevel [2345]" in impl.unit_path.read_text()
    assert impl.remove() == "removed"
    assert snapshot(unit_dirs) == before
    assert fake_runner.commands() == []


@pytest.mark.parametrize("action", ["start", "stop"])
def test_control_commands(impl, fake_runner, action):
    impl.install()
    getattr(impl, action)()
    assert fake_runner.commands() == [(action, "webd")]


def test_restart_is_stop_then_start(impl, fake_runner):
    impl.install()
    assert impl.restart() == "restarted"
    assert fake_runner.commands() == [("stop", "webd"), ("start", "webd")]


def test_restart_ignores_stop_failure(impl, fake_runner, caplog):
    impl.install()
    fake_runner.failing.add(("stop", "webd"))
    assert impl.restart() == "restarted"
    assert fake_runner.commands() == [("stop", "webd"), ("start", "webd")]
    assert "before restart failed" in caplog.text


def test_restart_start_failure_surfaces(impl, fake_runner):
    impl.install()
    fake_runner.failing.add(("start", "webd"))
    with pytest.raises(CommandError):
        impl.restart()


def test_restart_not_installed(impl, fake_runner):
    with pytest.raises(NotInstalledError):
        impl.restart()
    assert fake_runner.commands() == []


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("webd start/running, process 4321\n", "running(pid: 4321)"),
        ("webd stop/waiting\n", "stopped"),
    ],
)
def test_status(impl, fake_runner, output, expected):
    impl.install()
    fake_runner.outputs[STATUS] = CommandOutput(output, 0)
    assert impl.status() == expected


def test_status_non_zero_exit_is_error(impl, fake_runner):
    impl.install()
    fake_runner.outputs[STATUS] = CommandOutput("status: Unknown job: webd\n", 1)
    with pytest.raises(CommandError):
        impl.status()


def test_update_environ_rewrites_job(impl):
    impl.install()
    impl.update_environ({"PORT": "9090"})
    assert 'env PORT="9090"' in impl.unit_path.read_text()
