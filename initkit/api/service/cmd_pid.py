"""Service pid command - reports the main process id."""

from collections.abc import Iterator

from ...constants import NO_PID
from .._output_schemas.service import ServicePidOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_pid(name: str, backend: str | None = None) -> StageResult:
    """Get the main process id of a service, -1 when it is not running."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        backend_type = ""
        try:
            service = _load_service(name, backend)
            backend_type = service.backend

            yield (0.5, f"Querying {backend_type}...")
            pid = service.pid()

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} pid: {pid}" if pid != NO_PID else f"Service {name} is not running"
            result_obj.output = ServicePidOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=str(pid),
                pid=pid,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error getting pid of {name}: {e}"
            result_obj.output = ServicePidOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=str(e),
                pid=NO_PID,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Looking up pid of {name}...",
        progress_callback=do_work,
    )
