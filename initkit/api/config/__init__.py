"""Configuration models and loaders."""

from .InitkitConfig import InitkitConfig
from .LogConfig import LogConfig
from .get_home_dir import get_home_dir

__all__ = ["InitkitConfig", "LogConfig", "get_home_dir"]
