"""Build a Service for a stage command from the user configuration."""

from ...utils.logger import set_log_level
from ..config.InitkitConfig import InitkitConfig
from .CommandRunner import CommandRunner
from .Service import Service, get_simple


def _load_service(name: str, backend: str | None = None, require_definition: bool = False) -> Service:
    """Load config, apply its log level and construct the Service for ``name``.

    A name missing from the configuration still gets a Service for an
    existing unit, unless the operation has to render one.

    Raises:
        ValueError: If the config is invalid or the backend kind is unknown
        KeyError: If ``require_definition`` is set and the name is not configured
    """
    config = InitkitConfig.load()
    set_log_level(config.log.level)

    service_config = config.service
    if backend is not None:
        service_config = service_config.model_copy(update={"backend": backend})

    if name in service_config.services or require_definition:
        return Service.from_config(service_config, name)

    return get_simple(name, backend=service_config.backend, runner=CommandRunner(timeout=service_config.command_timeout))
