"""Service stop command - stops an installed service."""

from collections.abc import Iterator

from ...constants import STOP_FAILED
from .._output_schemas.service import ServiceStopOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_stop(name: str, backend: str | None = None) -> StageResult:
    """Stop service process."""

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

            yield (0.5, f"Stopping via {backend_type}...")
            label = service.stop()

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} {label}"
            result_obj.output = ServiceStopOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                stopped=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"{STOP_FAILED} {name}: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=STOP_FAILED,
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Stopping service {name}...",
        progress_callback=do_work,
    )
