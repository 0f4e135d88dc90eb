"""Split a configured command line into executable and leading arguments."""

import os
import shutil
from collections.abc import Callable

Which = Callable[[str], "str | None"]


def _split_command(cmd: str, which: Which = shutil.which) -> tuple[str, list[str], str]:
    """Split ``cmd`` on whitespace and resolve a bare executable name.

    A bare name (no path separator) is looked up on the search path now, so the
    rendered unit does not depend on the search path at service start time.
    Names that cannot be resolved are kept as written.

    Returns:
        (executable, leading_args, command_line) where command_line is the
        original command text with the executable token replaced.
    """
    stripped = cmd.strip()
    parts = stripped.split()
    if not parts:
        raise ValueError("service command is empty")

    executable = parts[0]
    if os.path.basename(executable) == executable:
        resolved = which(executable)
        if resolved:
            executable = resolved

    command_line = executable + stripped[len(parts[0]):]
    return executable, parts[1:], command_line
