"""systemd unit file template."""

import posixpath
import shutil
from collections.abc import Sequence

from ....templating import render_template
from .._split_command import Which
from .._unit_context import _unit_context
from ..ServiceDefinition import ServiceDefinition

TEMPLATE = """[Unit]
Description={{ description | specifiers }}
Requires={{ dependencies | join(' ') }}
After={{ dependencies | join(' ') }}

[Service]
CPUAccounting=yes
MemoryAccounting=yes
PIDFile=/var/run/{{ name }}.pid
ExecStartPre=/bin/rm -f /var/run/{{ name }}.pid
ExecStart=/bin/sh -c '{{ command_line | systemd }} {{ args | systemd }} >>{{ log_file_sh | systemd }} 2>&1'
WorkingDirectory={{ working_dir | specifiers }}
Environment={% for key, value in environ %}{{ ' ' if not loop.first else '' }}"{{ key }}={{ value | systemd_env }}"{% endfor %}

EnvironmentFile=-{{ env_file | specifiers }}
Restart={{ restart }}
RestartSec={{ restart_sec }}

[Install]
WantedBy=multi-user.target
"""

DEFAULT_LOG_DIR = "/var/log"


def env_file_path(definition: ServiceDefinition) -> str:
    """Path of the optional EnvironmentFile the unit reads at start."""
    return posixpath.join(definition.working_dir, f"{definition.name}.env")


def render(definition: ServiceDefinition, args: Sequence[str] = (), which: Which = shutil.which) -> str:
    context = _unit_context(definition, args, DEFAULT_LOG_DIR, which)
    context.update(
        env_file=env_file_path(definition),
        restart=definition.restart,
        restart_sec=definition.restart_sec,
    )
    return render_template(TEMPLATE, context)
