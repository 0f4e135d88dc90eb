"""initkit - install and drive long-running processes as native OS services."""

__version__ = "0.3.0"
