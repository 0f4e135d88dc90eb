"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class ServiceOutput(BaseOutputSchema):
    """Fields shared by every service command output.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - name: str - service name the command acted on
    - backend: str - init system kind, empty string if it could not be resolved
    - message: str - result label on success, error text on failure
    """
    name: str = Field(..., description="Service name")
    backend: str = Field(..., description="Init system kind, empty string if not resolved")
    message: str = Field(..., description="Result label or error message")


class ServiceInstallOutput(ServiceOutput):
    """Output schema for service install command."""
    installed: bool = Field(..., description="Whether the unit was written and activated")
    unit_path: str = Field(..., description="Canonical unit path, empty string if not resolved")


class ServiceStartOutput(ServiceOutput):
    """Output schema for service start command."""
    running: bool = Field(..., description="Whether the start command succeeded")


class ServiceStopOutput(ServiceOutput):
    """Output schema for service stop command."""
    stopped: bool = Field(..., description="Whether the stop command succeeded")


class ServiceRestartOutput(ServiceOutput):
    """Output schema for service restart command."""
    running: bool = Field(..., description="Whether the restart sequence succeeded")


class ServiceStatusOutput(ServiceOutput):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """
    installed: bool = Field(..., description="Whether the unit exists at its canonical path")
    running: bool = Field(..., description="Whether the init system reports the service running")
    pid: int = Field(..., description="Main process id, -1 if not running or unknown")
    status: str = Field(..., description="'running(pid: N)', 'running', 'stopped' or a failure label")
    unit_path: str = Field(..., description="Canonical unit path, empty string if not resolved")


class ServicePidOutput(ServiceOutput):
    """Output schema for service pid command."""
    pid: int = Field(..., description="Main process id, -1 if not running or unknown")


class ServiceRemoveOutput(ServiceOutput):
    """Output schema for service remove command."""
    removed: bool = Field(..., description="Whether the unit was deactivated and deleted")


class ServiceUpdateEnvironOutput(ServiceOutput):
    """Output schema for service env command."""
    updated: bool = Field(..., description="Whether the new environment was applied")
    environ: dict[str, str] = Field(..., description="Environment now applied to the service")
