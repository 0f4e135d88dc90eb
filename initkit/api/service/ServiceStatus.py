"""Service status DTO."""

from dataclasses import dataclass


@dataclass
class ServiceStatus:
    """Status of a managed service, reconstructed from live host state."""

    installed: bool
    """Whether the unit file exists at the backend's canonical path."""

    unit_path: str
    """Path to the service definition file."""

    running: bool = False
    """Whether the service is currently running."""

    pid: int | None = None
    """Process ID of the running service, or None if not running or unknown."""
