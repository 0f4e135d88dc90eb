"""Logical description of a managed service."""

import posixpath
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.@-]*$")
_ENV_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _reject_newlines(value: str, field: str) -> str:
    if "\n" in value or "\r" in value:
        raise ValueError(f"{field} must be a single line, got: {value!r}")
    return value


class ServiceDefinition(BaseModel):
    """Immutable service attributes every backend renders from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Unique unit-name safe identifier")
    cmd: str = Field("", description="Executable plus fixed arguments")
    description: str = Field("", description="Human readable description")
    working_dir: str = Field("/", description="Working directory of the process")
    dependencies: tuple[str, ...] = Field((), description="Services that must start first")
    environ: dict[str, str] = Field(default_factory=dict, description="Environment variables")
    log_file: str | None = Field(None, description="Log file path, or directory when ending with '/'")
    restart: str = Field("on-failure", description="systemd Restart= policy")
    restart_sec: int = Field(10, ge=0, description="systemd RestartSec= delay in seconds")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("service name is required")
        if not _NAME_RE.match(v):
            raise ValueError(
                f"service name must be a valid unit name (alphanumeric, '.', '_', '@', '-'), got: {v!r}"
            )
        return v

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for dep in v:
            if not _NAME_RE.match(dep):
                raise ValueError(f"dependency must be a valid unit name, got: {dep!r}")
        return v

    @field_validator("environ")
    @classmethod
    def validate_environ(cls, v: dict[str, str]) -> dict[str, str]:
        for key, value in v.items():
            if not _ENV_KEY_RE.match(key):
                raise ValueError(f"environment variable name is invalid: {key!r}")
            _reject_newlines(value, f"environment value of {key}")
        return v

    @field_validator("cmd", "description", "working_dir", "log_file", "restart")
    @classmethod
    def validate_single_line(cls, v: Any, info) -> Any:
        if v is None:
            return v
        return _reject_newlines(v, info.field_name)

    @property
    def display_description(self) -> str:
        """Description, falling back to the service name."""
        return self.description or self.name

    def resolve_log_file(self, default_dir: str) -> str:
        """Return the log file path, placing ``<name>.log`` in a directory when needed.

        Args:
            default_dir: Backend-specific directory used when no log file is configured
        """
        if not self.log_file:
            return posixpath.join(default_dir, f"{self.name}.log")
        if self.log_file.endswith("/"):
            return posixpath.join(self.log_file, f"{self.name}.log")
        return self.log_file

    def with_environ(self, environ: dict[str, str]) -> "ServiceDefinition":
        """Return a copy with a replaced environment mapping."""
        return ServiceDefinition(**{**self.model_dump(), "environ": dict(environ)})
