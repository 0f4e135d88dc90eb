"""Service start command - starts an installed service."""

from collections.abc import Iterator

from ...constants import START_FAILED
from .._output_schemas.service import ServiceStartOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_start(name: str, backend: str | None = None) -> StageResult:
    """Start an installed service through its init system.

    Fails (without raising) when the unit is not installed.
    """

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

            yield (0.5, f"Starting via {backend_type}...")
            label = service.start()

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} {label}"
            result_obj.output = ServiceStartOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                running=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"{START_FAILED} {name}: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=START_FAILED,
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Starting service {name}...",
        progress_callback=do_work,
    )
