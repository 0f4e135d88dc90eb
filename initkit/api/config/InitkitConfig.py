"""Top-level initkit configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..service.ServiceConfig import ServiceConfig
from .LogConfig import LogConfig
from .get_home_dir import get_home_dir


class InitkitConfig(BaseModel):
    """Top-level configuration: logging plus the managed service definitions."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on INITKIT_HOME or default to ~/.initkit."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "InitkitConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert InitkitConfig instance to a dictionary for serialization."""
        return {
            "log": self.log.model_dump(),
            "service": self.service.model_dump(),
        }
