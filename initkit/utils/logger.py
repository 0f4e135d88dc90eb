"""Logging utilities for initkit."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(initkit_home: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure unified initkit logging.

    Args:
        initkit_home: Path to initkit home directory. If None, derived from environment.
        level: Level for the ``initkit`` logger namespace.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if initkit_home is None:
        from ..api.config.get_home_dir import get_home_dir

        initkit_home = get_home_dir()

    # Ensure directory exists
    initkit_home.mkdir(parents=True, exist_ok=True)
    log_file = initkit_home / "initkit.log"

    root_logger = logging.getLogger("initkit")
    root_logger.setLevel(level)

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def set_log_level(level: int | str) -> None:
    """Change the level of the ``initkit`` logger namespace."""
    logging.getLogger("initkit").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Accepts either a short name ("service") or a dotted module name
    ("initkit.api.service.Service"); both end up under the ``initkit`` namespace.
    """
    if name == "initkit" or name.startswith("initkit."):
        return logging.getLogger(name)
    return logging.getLogger(f"initkit.{name}")
