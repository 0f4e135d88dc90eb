"""Unit tests for initkit.api.service._render_unit and the backend templates."""

import plistlib

import pytest

from initkit.api.service._render_unit import render_unit
from initkit.api.service.ServiceDefinition import ServiceDefinition
from tests.conftest import webd_definition

KINDS = ["systemd", "sysv", "upstart", "procd", "launchd"]


def no_which(name):
    return None


def fake_which(name):
    return f"/opt/bin/{name}"


def _lines(text: str) -> list[str]:
    return text.splitlines()


class TestSystemd:
    def test_scenario(self):
        unit = render_unit("systemd", webd_definition(), which=no_which)
        lines = _lines(unit)
        assert "ExecStart=/bin/sh -c '/usr/bin/webd --port 8080  >>/var/log/webd.log 2>&1'" in lines
        assert "WantedBy=multi-user.target" in lines
        assert "Description=Web daemon" in lines
        assert "PIDFile=/var/run/webd.pid" in lines
        assert "ExecStartPre=/bin/rm -f /var/run/webd.pid" in lines
        assert "WorkingDirectory=/" in lines
        assert "EnvironmentFile=-/webd.env" in lines
        assert "Restart=on-failure" in lines
        assert "RestartSec=10" in lines
        assert unit.endswith("\n")

    def test_dependencies(self):
        unit = render_unit("systemd", webd_definition(dependencies=["db", "cache"]), which=no_which)
        assert "Requires=db cache" in _lines(unit)
        assert "After=db cache" in _lines(unit)

    def test_environment_sorted_and_quoted(self):
        definition = webd_definition(environ={"ZED": "last", "ALPHA": 'say "hi" 100%'})
        unit = render_unit("systemd", definition, which=no_which)
        assert 'Environment="ALPHA=say \\"hi\\" 100%%" "ZED=last"' in _lines(unit)
        # The next directive stays on its own line
        assert "EnvironmentFile=-/webd.env" in _lines(unit)

    def test_extra_args_are_shell_quoted_and_systemd_escaped(self):
        unit = render_unit("systemd", webd_definition(), args=["--name", "my app"], which=no_which)
        assert "ExecStart=/bin/sh -c '/usr/bin/webd --port 8080 --name \\'my app\\' >>/var/log/webd.log 2>&1'" in _lines(unit)

    def test_percent_and_dollar_escaped_in_exec_start(self):
        definition = webd_definition(cmd="/usr/bin/webd --fmt %s --home $HOME")
        unit = render_unit("systemd", definition, which=no_which)
        assert "--fmt %%s --home $$HOME" in unit

    def test_log_directory(self):
        unit = render_unit("systemd", webd_definition(log_file="/srv/logs/"), which=no_which)
        assert ">>/srv/logs/webd.log 2>&1'" in unit

    def test_restart_policy(self):
        unit = render_unit("systemd", webd_definition(restart="always", restart_sec=3), which=no_which)
        assert "Restart=always" in _lines(unit)
        assert "RestartSec=3" in _lines(unit)


class TestSysv:
    def test_lsb_header(self):
        script = render_unit("sysv", webd_definition(dependencies=["db"]), which=no_which)
        lines = _lines(script)
        assert lines[0] == "#! /bin/sh"
        assert "### BEGIN INIT INFO" in lines
        assert "# Provides: webd" in lines
        assert "# Required-Start: $network $named db" in lines
        assert "# Required-Stop: $network $named db" in lines
        assert "# Default-Start: 2 3 4 5" in lines
        assert "# Default-Stop: 0 1 6" in lines
        assert "# chkconfig: 2345 87 17" in lines

    def test_command_and_status_messages(self):
        script = render_unit("sysv", webd_definition(), args=["--verbose"], which=no_which)
        assert "cmd='/usr/bin/webd --port 8080 --verbose'" in _lines(script)
        assert 'logfile="/var/log/webd.log"' in _lines(script)
        assert "is running..." in script
        assert "is stopped" in script
        assert "return 3" in script

    def test_environment_exported(self):
        script = render_unit("sysv", webd_definition(environ={"TOKEN": "a$b"}), which=no_which)
        assert 'export TOKEN="a\\$b"' in _lines(script)

    def test_single_quote_in_command(self):
        script = render_unit("sysv", webd_definition(cmd="/usr/bin/webd --motd it's"), which=no_which)
        assert "cmd='/usr/bin/webd --motd it'\\''s '" in _lines(script)


class TestUpstart:
    def test_layout(self):
        job = render_unit("upstart", webd_definition(environ={"PORT": "8080"}), which=no_which)
        lines = _lines(job)
        assert 'description     "Web daemon"' in lines
        assert "start on runlevel [2345]" in lines
        assert "stop on runlevel [016]" in lines
        assert "respawn" in lines
        assert 'env PORT="8080"' in lines
        assert "chdir /" in lines
        assert "exec /bin/sh -c '/usr/bin/webd --port 8080  >> /var/log/webd.log 2>&1'" in lines

    def test_dependencies_in_start_condition(self):
        job = render_unit("upstart", webd_definition(dependencies=["db", "cache"]), which=no_which)
        assert "start on (runlevel [2345] and started db and started cache)" in _lines(job)


class TestProcd:
    def test_application_script(self):
        script = render_unit("procd", webd_definition(environ={"PORT": "8080"}), which=no_which)
        lines = _lines(script)
        assert lines[0] == "#!/bin/sh"
        assert 'cmd="/usr/bin/webd --port 8080 "' in lines
        assert 'export PORT="8080"' in lines
        assert 'pid_file="/var/run/$name.pid"' in lines
        assert 'echo "Running $(get_pid)"' in script
        assert 'echo "Stopped"' in script

    def test_agent_uses_rc_common(self):
        definition = ServiceDefinition(
            name="initkit-agent",
            cmd="/usr/bin/agent --mode edge",
            dependencies=["network-online"],
            environ={"B": "2", "A": "x y"},
        )
        script = render_unit("procd", definition, args=["--id", "7"], which=no_which)
        lines = _lines(script)
        assert lines[0] == "#!/bin/sh /etc/rc.common"
        assert "USE_PROCD=1" in lines
        assert "START=120" in lines
        assert "STOP=120" in lines
        assert "    /etc/init.d/network-online start" in lines
        assert "  procd_set_param command /usr/bin/agent --mode edge --id 7" in lines
        assert "  procd_set_param env 'A=x y' B=2" in lines
        assert "  procd_set_param respawn" in lines
        assert '  procd_set_param limits core="unlimited"  # If you need to set ulimit for your process' in lines
        assert "  procd_close_instance" in lines

    def test_agent_without_environment_has_no_env_param(self):
        definition = ServiceDefinition(name="initkit-agent", cmd="/usr/bin/agent")
        assert "procd_set_param env" not in render_unit("procd", definition, which=no_which)


class TestLaunchd:
    def test_valid_plist(self):
        definition = webd_definition(environ={"B": "2", "A": "<&>"}, working_dir="/srv/webd")
        data = plistlib.loads(render_unit("launchd", definition, args=["--x", "a&b"], which=no_which).encode())
        assert data["Label"] == "webd"
        assert data["ProgramArguments"] == ["/usr/bin/webd", "--port", "8080", "--x", "a&b"]
        assert data["EnvironmentVariables"] == {"A": "<&>", "B": "2"}
        assert data["WorkingDirectory"] == "/srv/webd"
        assert data["StandardOutPath"] == "/Library/Logs/webd.log"
        assert data["StandardErrorPath"] == "/Library/Logs/webd.log"
        assert data["KeepAlive"] is True
        assert data["RunAtLoad"] is True
        assert data["Disabled"] is False
        assert data["SessionCreate"] is False

    def test_environment_sorted(self):
        plist = render_unit("launchd", webd_definition(environ={"B": "2", "A": "1"}), which=no_which)
        assert plist.index("<key>A</key>") < plist.index("<key>B</key>")


class TestCommandResolution:
    @pytest.mark.parametrize("kind", KINDS)
    def test_bare_executable_resolved(self, kind):
        unit = render_unit(kind, webd_definition(cmd="webd --port 8080"), which=fake_which)
        assert "/opt/bin/webd" in unit

    def test_unresolvable_executable_kept(self):
        unit = render_unit("systemd", webd_definition(cmd="webd --port 8080"), which=no_which)
        assert "/bin/sh -c 'webd --port 8080 " in unit

    def test_path_executable_not_looked_up(self):
        looked_up = []

        def which(name):
            looked_up.append(name)
            return None

        render_unit("systemd", webd_definition(), which=which)
        assert looked_up == []

    def test_empty_command_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            render_unit("systemd", ServiceDefinition(name="webd"), which=no_which)


@pytest.mark.parametrize("kind", KINDS)
def test_rendering_is_deterministic(kind):
    definition = webd_definition(environ={"Z": "1", "A": "2", "M": "3"}, dependencies=["db"])
    first = render_unit(kind, definition, args=["--a", "b c"], which=no_which)
    second = render_unit(kind, webd_definition(environ={"M": "3", "Z": "1", "A": "2"}, dependencies=["db"]),
                         args=["--a", "b c"], which=no_which)
    assert first == second


def test_unknown_kind():
    with pytest.raises(ValueError, match="Unknown service backend"):
        render_unit("runit", webd_definition())
