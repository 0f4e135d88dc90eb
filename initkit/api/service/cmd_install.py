"""Service install command - writes and activates the unit for a configured service."""

from collections.abc import Iterator

from ...constants import INSTALL_FAILED
from .._output_schemas.service import ServiceInstallOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_install(name: str, args: list[str] | None = None, backend: str | None = None) -> StageResult:
    """Install a configured service on the host init system.

    The definition is read from config.json; ``args`` are appended after the
    command's own arguments in the rendered unit.
    """
    extra_args = list(args or [])

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        backend_type = ""
        unit_path = ""
        try:
            service = _load_service(name, backend, require_definition=True)
            backend_type = service.backend
            unit_path = str(service.unit_path)

            yield (0.5, f"Installing {service.service_name()}...")
            label = service.install(*extra_args)

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} {label} ({backend_type}: {unit_path})"
            result_obj.output = ServiceInstallOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                installed=True,
                unit_path=unit_path,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"{INSTALL_FAILED} {name}: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=INSTALL_FAILED,
                installed=False,
                unit_path=unit_path,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Installing service {name}...",
        progress_callback=do_work,
    )
