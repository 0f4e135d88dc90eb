"""SysV (LSB) init script template."""

import shutil
from collections.abc import Sequence

from ....templating import render_template
from .._split_command import Which
from .._unit_context import _unit_context
from ..ServiceDefinition import ServiceDefinition

TEMPLATE = """#! /bin/sh
#
#       /etc/init.d/{{ name }}
#
#       Starts {{ name }} as a daemon
#
# chkconfig: 2345 87 17
# description: Starts and stops a single {{ name }} instance on this system

### BEGIN INIT INFO
# Provides: {{ name }}
# Required-Start: {{ required }}
# Required-Stop: {{ required }}
# Default-Start: 2 3 4 5
# Default-Stop: 0 1 6
# Short-Description: This service manages the {{ description }}.
# Description: {{ description }}
### END INIT INFO

proc="{{ name }}"
pidfile="/var/run/$proc.pid"
lockfile="/var/lock/subsys/$proc"
logfile="{{ log_file | dq }}"
workdir="{{ working_dir | dq }}"
servname="{{ description | dq }}"
cmd='{{ command_line | sq }} {{ args | sq }}'
{% for key, value in environ %}
export {{ key }}="{{ value | dq }}"
{% endfor %}

[ -d "$(dirname "$lockfile")" ] || mkdir -p "$(dirname "$lockfile")"

[ -e /etc/sysconfig/$proc ] && . /etc/sysconfig/$proc

get_pid() {
    cat "$pidfile" 2>/dev/null
}

is_running() {
    [ -f "$pidfile" ] && kill -0 "$(get_pid)" > /dev/null 2>&1
}

start() {
    if is_running; then
        echo "$servname is already running"
        return 0
    fi
    printf "Starting %s:\\t" "$servname"
    cd "$workdir" || exit 5
    echo "$(date)" >> "$logfile"
    /bin/sh -c "exec $cmd" >> "$logfile" 2>&1 &
    echo $! > "$pidfile"
    touch "$lockfile"
    echo "OK"
}

stop() {
    if ! is_running; then
        rm -f "$pidfile" "$lockfile"
        return 0
    fi
    printf "Stopping %s:\\t" "$servname"
    kill "$(get_pid)"
    for i in 1 2 3 4 5 6 7 8 9 10
    do
        is_running || break
        sleep 1
    done
    if is_running; then
        echo "FAILED"
        return 1
    fi
    rm -f "$pidfile" "$lockfile"
    echo "OK"
}

status() {
    if is_running; then
        echo "$proc (pid  $(get_pid)) is running..."
        return 0
    fi
    if [ -f "$pidfile" ]; then
        echo "$proc dead but pid file exists"
        return 1
    fi
    echo "$proc is stopped"
    return 3
}

case "$1" in
    start)
        start
        ;;
    stop)
        stop
        ;;
    restart)
        stop
        start
        ;;
    status)
        status
        ;;
    *)
        echo "Usage: $0 {start|stop|status|restart}"
        exit 2
esac

exit $?
"""

DEFAULT_LOG_DIR = "/var/log"


def render(definition: ServiceDefinition, args: Sequence[str] = (), which: Which = shutil.which) -> str:
    context = _unit_context(definition, args, DEFAULT_LOG_DIR, which)
    context["required"] = " ".join(["$network", "$named", *definition.dependencies])
    return render_template(TEMPLATE, context)
