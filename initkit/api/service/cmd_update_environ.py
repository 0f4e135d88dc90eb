"""Service env command - replaces the environment of an installed service."""

from collections.abc import Iterator

from ...constants import UPDATE_FAILED
from .._output_schemas.service import ServiceUpdateEnvironOutput
from ..StageResult import StageResult
from ._load_service import _load_service


def cmd_update_environ(name: str, environ: dict[str, str], backend: str | None = None) -> StageResult:
    """Replace a configured service's environment.

    systemd units are re-rendered and get a new EnvironmentFile; SysV,
    Upstart and procd units are rewritten in place; launchd property lists
    are reinstalled.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        backend_type = ""
        try:
            service = _load_service(name, backend, require_definition=True)
            backend_type = service.backend

            yield (0.5, f"Updating environment of {service.service_name()}...")
            label = service.update_environ(environ)

            yield (1.0, "Complete")
            result_obj.result = f"Service {name} environment {label} ({len(environ)} variables)"
            result_obj.output = ServiceUpdateEnvironOutput(
                errors=[],
                warnings=[],
                name=name,
                backend=backend_type,
                message=label,
                updated=True,
                environ=dict(service.definition.environ),
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"{UPDATE_FAILED} {name}: {e}"
            result_obj.output = ServiceUpdateEnvironOutput(
                errors=[str(e)],
                warnings=[],
                name=name,
                backend=backend_type,
                message=UPDATE_FAILED,
                updated=False,
                environ={},
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=f"Updating environment of {name}...",
        progress_callback=do_work,
    )
