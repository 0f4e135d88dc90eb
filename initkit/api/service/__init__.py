"""Service module - install and drive a process under the host's init system."""

from ._parse_status import ParsedStatus, _parse_status as parse_status
from ._render_unit import render_unit
from .CommandRunner import CommandOutput, CommandRunner
from .errors import (
    AlreadyInstalledError,
    CommandError,
    NotInstalledError,
    NotRunningError,
    OSNotSupportedError,
    PermissionDeniedError,
    ServiceError,
)
from .select_backend import select_backend
from .Service import Service, get_simple, legacy_unit_service
from .ServiceConfig import ServiceConfig
from .ServiceDefinition import ServiceDefinition
from .ServiceStatus import ServiceStatus

__all__ = [
    "AlreadyInstalledError",
    "CommandError",
    "CommandOutput",
    "CommandRunner",
    "NotInstalledError",
    "NotRunningError",
    "OSNotSupportedError",
    "ParsedStatus",
    "PermissionDeniedError",
    "Service",
    "ServiceConfig",
    "ServiceDefinition",
    "ServiceError",
    "ServiceStatus",
    "get_simple",
    "legacy_unit_service",
    "parse_status",
    "render_unit",
    "select_backend",
]
