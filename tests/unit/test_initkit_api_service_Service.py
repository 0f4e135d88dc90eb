"""Unit tests for initkit.api.service.Service module."""

import importlib

import pytest

from initkit.api.service.CommandRunner import CommandOutput, CommandRunner
from initkit.api.service.errors import NotInstalledError
from initkit.api.service.Service import Service, get_simple, legacy_unit_service
from initkit.api.service.ServiceConfig import ServiceConfig
from tests.conftest import webd_definition

# The package re-exports the class under the module name
service_module = importlib.import_module("initkit.api.service.Service")


@pytest.mark.parametrize(
    ("backend", "service_name"),
    [
        ("systemd", "webd.service"),
        ("sysv", "webd"),
        ("upstart", "webd.conf"),
        ("procd", "webd"),
        ("launchd", "webd.plist"),
    ],
)
def test_explicit_backend(unit_dirs, fake_runner, backend, service_name):
    service = Service(webd_definition(), backend=backend, runner=fake_runner)
    assert service.backend == backend
    assert service.service_name() == service_name
    assert service.unit_path.name == service_name


def test_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported backend type"):
        Service(webd_definition(), backend="runit")


@pytest.mark.parametrize("backend", [None, "auto"])
def test_backend_detected_once(monkeypatch, fake_runner, backend):
    calls = []

    def select_backend():
        calls.append(1)
        return "upstart"

    monkeypatch.setattr(service_module, "select_backend", select_backend)
    service = Service(webd_definition(), backend=backend, runner=fake_runner)
    service.is_installed()
    service.service_name()
    assert service.backend == "upstart"
    assert calls == [1]


def test_default_runner(unit_dirs):
    service = Service(webd_definition(), backend="systemd")
    assert isinstance(service._impl.runner, CommandRunner)


def test_context_manager(unit_dirs, fake_runner):
    with Service(webd_definition(), backend="systemd", runner=fake_runner) as service:
        assert service.is_installed() is False


def test_lifecycle_delegation(unit_dirs, fake_runner):
    service = Service(webd_definition(working_dir=str(unit_dirs)), backend="systemd", runner=fake_runner)
    assert service.install("--debug") == "installed"
    assert service.is_installed()
    assert "--port 8080 --debug" in service.unit_path.read_text()

    fake_runner.outputs[("systemctl", "status", "webd.service")] = CommandOutput("Active: inactive (dead)\n", 3)
    assert service.status() == "stopped"
    assert service.start() == "started"
    assert service.stop() == "stopped"
    assert service.restart() == "restarted"
    assert service.pid() == -1
    assert service.status_info().running is False
    assert service.update_environ({"A": "1"}) == "updated"
    assert service.definition.environ == {"A": "1"}
    assert service.remove() == "removed"
    assert not service.is_installed()


def test_is_installed_never_raises(unit_dirs):
    service = Service(webd_definition(), backend="sysv", runner=None)
    assert service.is_installed() is False


def test_from_config(unit_dirs):
    config = ServiceConfig(
        backend="upstart",
        command_timeout=12.5,
        services={"webd": {"cmd": "/usr/bin/webd"}},
    )
    service = Service.from_config(config, "webd")
    assert service.backend == "upstart"
    assert service.definition.cmd == "/usr/bin/webd"
    assert service._impl.runner.timeout == 12.5


def test_from_config_unknown_service():
    with pytest.raises(KeyError):
        Service.from_config(ServiceConfig(backend="systemd"), "webd")


def test_get_simple_controls_existing_unit(unit_dirs, fake_runner):
    unit = unit_dirs / "etc" / "systemd" / "system" / "legacy.service"
    unit.write_text("[Unit]\n")
    service = get_simple("legacy", backend="systemd", runner=fake_runner)
    assert service.is_installed()
    service.start()
    assert fake_runner.commands() == [("systemctl", "start", "legacy.service")]


def test_get_simple_cannot_install(unit_dirs, fake_runner):
    with pytest.raises(ValueError, match="empty"):
        get_simple("legacy", backend="systemd", runner=fake_runner).install()


def test_legacy_unit_service_replaces_spaces(unit_dirs, fake_runner):
    service = legacy_unit_service("my old app", runner=fake_runner)
    assert service.backend == "systemd"
    assert service.service_name() == "my_old_app.service"
    with pytest.raises(NotInstalledError):
        service.stop()


@pytest.mark.parametrize(
    "method",
    ["install", "start", "stop", "restart", "status", "pid", "status_info", "remove", "update_environ", "is_installed"],
)
def test_public_methods_are_documented(method):
    doc = getattr(Service, method).__doc__
    assert doc
    if method != "is_installed":
        assert "Returns:" in doc or "Args:" in doc
