"""Upstart job configuration template."""

import shutil
from collections.abc import Sequence

from ....templating import render_template
from .._split_command import Which
from .._unit_context import _unit_context
from ..ServiceDefinition import ServiceDefinition

TEMPLATE = """# {{ name }} {{ description }}

description     "{{ description | dq }}"

start on {{ start_on }}
stop on runlevel [016]

respawn
#kill timeout 5
{% for key, value in environ %}
env {{ key }}="{{ value | dq }}"
{% endfor %}
chdir {{ working_dir }}
exec /bin/sh -c '{{ command_line | sq }} {{ args | sq }} >> {{ log_file_sh | sq }} 2>&1'
"""

DEFAULT_LOG_DIR = "/var/log"


def _start_on(dependencies: Sequence[str]) -> str:
    if not dependencies:
        return "runlevel [2345]"
    started = " and ".join(f"started {dep}" for dep in dependencies)
    return f"(runlevel [2345] and {started})"


def render(definition: ServiceDefinition, args: Sequence[str] = (), which: Which = shutil.which) -> str:
    context = _unit_context(definition, args, DEFAULT_LOG_DIR, which)
    context["start_on"] = _start_on(definition.dependencies)
    return render_template(TEMPLATE, context)
