"""Service restart command - restarts an installed service."""

from collections.abc import Iterator

from ...constants import RESTART_FAILED
from .._output_schemas.service import ServiceRestartOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_restart(name: str, backend: str | None = None) -> StageResult:
    """Restart a service.

    Uses the init system's native restart where one exists (systemd, SysV,
    procd); Upstart and launchd stop then start.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        backend_type = ""
        try:
            service = _load_service(name, backend)
            backend_type = service.backend

            yield (0.5, f"Restarting via {backend_type}...")
            label = service.restart()

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} {label}"
            result_obj.output = ServiceRestartOutput(
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
            result_obj.result = f"{RESTART_FAILED} {name}: {e}"
            result_obj.output = ServiceRestartOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=RESTART_FAILED,
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Restarting service {name}...",
        progress_callback=do_work,
    )
