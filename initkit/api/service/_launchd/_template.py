"""launchd property list template."""

import shutil
from collections.abc import Sequence

from ....templating import render_template
from .._split_command import Which
from .._unit_context import _unit_context
from ..ServiceDefinition import ServiceDefinition

TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>Label</key><string>{{ name | e }}</string>
    <key>EnvironmentVariables</key>
    <dict>
    {% for key, value in environ %}
        <key>{{ key | e }}</key>
        <string>{{ value | e }}</string>
    {% endfor %}
    </dict>
    <key>ProgramArguments</key>
    <array>
        <string>{{ executable | e }}</string>
    {% for arg in argv %}
        <string>{{ arg | e }}</string>
    {% endfor %}
    </array>
    <key>WorkingDirectory</key>
    <string>{{ working_dir | e }}</string>

    <key>StandardErrorPath</key>
    <string>{{ log_file | e }}</string>
    <key>StandardOutPath</key>
    <string>{{ log_file | e }}</string>

    <key>SessionCreate</key>
    <false/>
    <key>KeepAlive</key>
    <true/>
    <key>RunAtLoad</key>
    <true/>
    <key>Disabled</key>
    <false/>

</dict>
</plist>
"""

# Launch daemons log here; agents use ~/Library/Logs
DAEMON_LOG_DIR = "/Library/Logs"


def render(
    definition: ServiceDefinition,
    args: Sequence[str] = (),
    which: Which = shutil.which,
    log_dir: str = DAEMON_LOG_DIR,
) -> str:
    context = _unit_context(definition, args, log_dir, which)
    return render_template(TEMPLATE, context)
