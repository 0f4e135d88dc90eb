"""Render a backend's native unit file from a service definition."""

import importlib
import shutil
from collections.abc import Sequence

from ._split_command import Which
from .ServiceConfig import _BACKEND_REGISTRY
from .ServiceDefinition import ServiceDefinition


def render_unit(
    kind: str,
    definition: ServiceDefinition,
    args: Sequence[str] = (),
    which: Which = shutil.which,
) -> str:
    """Render the unit/config text ``kind`` would install for ``definition``.

    Pure given ``which``: identical inputs always produce identical text.

    Raises:
        ValueError: If kind is unknown or the definition has no command
    """
    if kind not in _BACKEND_REGISTRY:
        raise ValueError(f"Unknown service backend: {kind!r} (supported: {list(_BACKEND_REGISTRY)})")
    module = importlib.import_module(f"initkit.api.service._{kind}._template")
    return module.render(definition, args, which=which)
