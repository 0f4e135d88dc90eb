"""Thin wrapper around Jinja2 for rendering service unit files."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined


def shell_single_quoted(value: str) -> str:
    """Escape text for use inside a single-quoted shell word."""
    return str(value).replace("'", "'\\''")


def shell_double_quoted(value: str) -> str:
    """Escape text for use inside a double-quoted shell word."""
    text = str(value)
    for char in ("\\", '"', "$", "`"):
        text = text.replace(char, "\\" + char)
    return text


def systemd_quoted(value: str) -> str:
    """Escape text for a quoted systemd ``ExecStart=`` word.

    systemd unquotes the word itself, so the result reaches the process verbatim.
    """
    text = str(value).replace("\\", "\\\\")
    text = text.replace("'", "\\'").replace('"', '\\"')
    return text.replace("%", "%%").replace("$", "$$")


def systemd_env_quoted(value: str) -> str:
    """Escape text for a double-quoted systemd ``Environment=`` assignment."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return text.replace("%", "%%")


def systemd_specifiers(value: str) -> str:
    """Escape ``%`` specifiers in a plain systemd setting value."""
    return str(value).replace("%", "%%")


_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_ENV.filters["sq"] = shell_single_quoted
_ENV.filters["dq"] = shell_double_quoted
_ENV.filters["systemd"] = systemd_quoted
_ENV.filters["systemd_env"] = systemd_env_quoted
_ENV.filters["specifiers"] = systemd_specifiers


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
