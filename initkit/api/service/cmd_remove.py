"""Service remove command - deactivates and deletes an installed unit."""

from collections.abc import Iterator

from ...constants import REMOVE_FAILED
from .._output_schemas.service import ServiceRemoveOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_remove(name: str, backend: str | None = None) -> StageResult:
    """Remove an installed service from the host init system."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        backend_type = ""
        try:
            service = _load_service(name, backend)
            backend_type = service.backend

            yield (0.5, f"Removing {service.service_name()}...")
            label = service.remove()

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} {label}"
            result_obj.output = ServiceRemoveOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                removed=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"{REMOVE_FAILED} {name}: {e}"
            result_obj.output = ServiceRemoveOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=REMOVE_FAILED,
                removed=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Removing service {name}...",
        progress_callback=do_work,
    )
