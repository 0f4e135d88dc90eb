"""Service status command - shows install state, running state and pid."""

from collections.abc import Iterator

from ...constants import NO_PID, RUNNING, UNDEFINED
from .._output_schemas.service import ServiceStatusOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_status(name: str, backend: str | None = None) -> StageResult:
    """Get service status.

    A service that is not installed is reported (with a warning), not
    treated as a failure; execution and permission errors are failures.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        backend_type = ""
        unit_path = ""
        try:
            service = _load_service(name, backend)
            backend_type = service.backend
            unit_path = str(service.unit_path)

            yield (0.4, "Checking installation...")
            if not service.is_installed():
                yield (1.0, "Complete")
                result_obj.result = f"Service {name} is not installed ({backend_type}: {unit_path})"
                result_obj.output = ServiceStatusOutput(
                    errors=[],
                    warnings=[f"{name} is not installed"],
                    name=name,
                    backend=backend_type,
                    message=result_obj.result,
                    installed=False,
                    running=False,
                    pid=NO_PID,
                    status=UNDEFINED,
                    unit_path=unit_path,
                ).model_dump(mode="python")
                result_obj.success = True
                return

            yield (0.6, f"Querying {backend_type}...")
            label = service.status()
            pid = service.pid() if label.startswith(RUNNING) else NO_PID

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} is {label}"
            result_obj.output = ServiceStatusOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                installed=True,
                running=label.startswith(RUNNING),
                pid=pid,
                status=label,
                unit_path=unit_path,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error getting status of {name}: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=str(e),
                installed=False,
                running=False,
                pid=NO_PID,
                status=UNDEFINED,
                unit_path=unit_path,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Checking status of {name}...",
        progress_callback=do_work,
    )
