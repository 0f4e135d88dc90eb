"""Service lifecycle error taxonomy."""


class ServiceError(RuntimeError):
    """Base class for every failure reported by the service layer."""

    default_message = "service error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NotInstalledError(ServiceError):
    """The operation needs an installed unit but none exists at the canonical path."""

    default_message = "not installed"


class AlreadyInstalledError(ServiceError):
    """Install was called while a unit already exists at the canonical path."""

    default_message = "already installed"


class NotRunningError(ServiceError):
    """A status or pid query found no running instance."""

    default_message = "service is not running"


class PermissionDeniedError(ServiceError):
    """The caller is not in the root group."""

    default_message = "permission denied"


class OSNotSupportedError(ServiceError):
    """The host could not be interpreted (privilege probe failed or is unparsable)."""

    default_message = "OS not supported"


class CommandError(ServiceError):
    """An external command could not be run or did not succeed."""

    def __init__(self, command: str, detail: str, returncode: int | None = None, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(f"{command!r} {detail}")
