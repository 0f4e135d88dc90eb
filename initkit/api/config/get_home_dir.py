"""Get initkit home directory path or path under it."""

import os
from pathlib import Path

from ...constants import INITKIT_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get initkit home directory path or path under it.

    Checks INITKIT_HOME environment variable first, defaults to ~/.initkit if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to initkit home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.initkit")
        >>> get_home_dir("config.json")
        Path("/home/user/.initkit/config.json")
    """
    home_env = os.environ.get("INITKIT_HOME")
    if home_env:
        initkit_home = Path(home_env).expanduser().resolve()
    else:
        initkit_home = Path.home() / INITKIT_HOME_EXT

    return initkit_home / Path(*parts) if parts else initkit_home
