"""Template context shared by every backend's unit renderer."""

import shlex
import shutil
from collections.abc import Sequence
from typing import Any

from ._split_command import Which, _split_command
from .ServiceDefinition import ServiceDefinition


def _unit_context(
    definition: ServiceDefinition,
    args: Sequence[str],
    default_log_dir: str,
    which: Which = shutil.which,
) -> dict[str, Any]:
    """Build the values every unit template may reference.

    ``command_line`` is the configured command with a resolved executable and
    ``args`` the explicit extra arguments, shell-quoted and space-joined; the
    leading arguments embedded in the command come first.
    """
    executable, leading_args, command_line = _split_command(definition.cmd, which)
    log_file = definition.resolve_log_file(default_log_dir)
    return {
        "name": definition.name,
        "description": definition.display_description,
        "executable": executable,
        "argv": [*leading_args, *args],
        "command_line": command_line,
        "args": " ".join(shlex.quote(arg) for arg in args),
        "working_dir": definition.working_dir,
        "dependencies": list(definition.dependencies),
        "environ": sorted(definition.environ.items()),
        "log_file": log_file,
        "log_file_sh": shlex.quote(log_file),
    }
