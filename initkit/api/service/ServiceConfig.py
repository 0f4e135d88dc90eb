"""Service configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .ServiceDefinition import ServiceDefinition

# Registry: add new backends here (ONLY place backend kinds are enumerated)
_BACKEND_REGISTRY: dict[str, str] = {
    "systemd": "initkit.api.service._systemd._Impl",
    "sysv": "initkit.api.service._sysv._Impl",
    "upstart": "initkit.api.service._upstart._Impl",
    "procd": "initkit.api.service._procd._Impl",
    "launchd": "initkit.api.service._launchd._Impl",
}

AUTO_BACKEND = "auto"


class ServiceConfig(BaseModel):
    """Backend selection, runner policy and the managed service definitions."""

    model_config = ConfigDict(extra="forbid")

    backend: str = Field(AUTO_BACKEND, description="'auto' or a backend kind")
    command_timeout: float | None = Field(None, gt=0, description="Seconds before a host command is abandoned")
    services: dict[str, ServiceDefinition] = Field(default_factory=dict, description="Definitions keyed by name")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        if v != AUTO_BACKEND and v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unknown service backend: {v!r} (supported: {[AUTO_BACKEND, *_BACKEND_REGISTRY]})")
        return v

    @model_validator(mode="before")
    @classmethod
    def populate_service_names(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"service config must be a dict, got {type(values).__name__}")
        services = values.get("services")
        if isinstance(services, dict):
            populated = {}
            for name, data in services.items():
                if isinstance(data, dict):
                    if data.get("name", name) != name:
                        raise ValueError(f"service {name!r} declares a different name: {data['name']!r}")
                    data = {**data, "name": name}
                populated[name] = data
            values = {**values, "services": populated}
        return values

    def get_definition(self, name: str) -> ServiceDefinition:
        """Look up a configured service definition.

        Raises:
            KeyError: If no service with that name is configured
        """
        if name not in self.services:
            raise KeyError(f"Service {name!r} is not configured (configured: {sorted(self.services)})")
        return self.services[name]
