"""OpenWrt init script templates.

The reserved agent service gets a native procd script sourcing
``/etc/rc.common``; every other service gets a self-contained script that
keeps its own pid file.
"""

import shlex
import shutil
from collections.abc import Sequence

from ....constants import PROCD_AGENT_NAME
from ....templating import render_template
from .._split_command import Which
from .._unit_context import _unit_context
from ..ServiceDefinition import ServiceDefinition

AGENT_TEMPLATE = """#!/bin/sh /etc/rc.common

# {{ name }} {{ description }}
USE_PROCD=1
START=120
STOP=120

start_service() {
  PROCD_DEBUG=1
  {% for dep in dependencies %}
  if [ -r /etc/init.d/{{ dep }} ]; then
    /etc/init.d/{{ dep }} start
  fi
  {% endfor %}
  procd_open_instance
  procd_set_param command {{ command_words }}
  {% if environ %}
  procd_set_param env {{ env_words }}
  {% endif %}

  # respawn automatically if something died, be careful if you have an alternative process supervisor
  # if process dies sooner than respawn_threshold, it is considered crashed and after 5 retries the service is stopped
  procd_set_param respawn

  procd_set_param stdout 1
  procd_set_param stderr 1
  procd_set_param limits core="unlimited"  # If you need to set ulimit for your process
  procd_close_instance
}
"""

APP_TEMPLATE = """#!/bin/sh

dir="{{ working_dir | dq }}"
cmd="{{ command_line | dq }} {{ args | dq }}"
user="root"
{% for key, value in environ %}
export {{ key }}="{{ value | dq }}"
{% endfor %}
name="{{ name }}"
pid_file="/var/run/$name.pid"
stdout_log="{{ log_file | dq }}"
stderr_log="/var/log/$name.err"

get_pid() {
    cat "$pid_file"
}

is_running() {
    [ -f "$pid_file" ] && kill -0 $(get_pid) > /dev/null 2>&1
}

case "$1" in
    start)
    if is_running; then
        echo "Already started"
    else
        echo "Starting $name"
        cd "$dir"
        /bin/sh -c "exec $cmd" >> "$stdout_log" 2>> "$stderr_log" &
        echo $! > "$pid_file"
        if ! is_running; then
            echo "Unable to start, see $stdout_log and $stderr_log"
            exit 1
        fi
    fi
    ;;
    stop)
    if is_running; then
        echo -n "Stopping $name.."
        kill $(get_pid)
        for i in 1 2 3 4 5 6 7 8 9 10
        do
            if ! is_running; then
                break
            fi

            echo -n "."
            sleep 1
        done
        echo

        if is_running; then
            echo "Not stopped; may still be shutting down or shutdown may have failed"
            exit 1
        else
            echo "Stopped"
            if [ -f "$pid_file" ]; then
                rm "$pid_file"
            fi
        fi
    else
        echo "Not running"
    fi
    ;;
    restart)
    $0 stop
    if is_running; then
        echo "Unable to stop, will not attempt to start"
        exit 1
    fi
    $0 start
    ;;
    status)
    if is_running; then
        echo "Running $(get_pid)"
    else
        echo "Stopped"
        exit 1
    fi
    ;;
    *)
    echo "Usage: $0 {start|stop|restart|status}"
    exit 1
    ;;
esac

exit 0
"""

DEFAULT_LOG_DIR = "/var/log"


def is_agent(definition: ServiceDefinition) -> bool:
    """Whether the definition is the reserved agent service."""
    return definition.name == PROCD_AGENT_NAME


def render(definition: ServiceDefinition, args: Sequence[str] = (), which: Which = shutil.which) -> str:
    context = _unit_context(definition, args, DEFAULT_LOG_DIR, which)
    if not is_agent(definition):
        return render_template(APP_TEMPLATE, context)

    context["command_words"] = " ".join(shlex.quote(word) for word in [context["executable"], *context["argv"]])
    context["env_words"] = " ".join(shlex.quote(f"{key}={value}") for key, value in context["environ"])
    return render_template(AGENT_TEMPLATE, context)
