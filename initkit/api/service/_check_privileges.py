"""Root-group precondition for backends that drive system init daemons."""

from .CommandRunner import CommandRunner
from .errors import CommandError, OSNotSupportedError, PermissionDeniedError


def _check_privileges(runner: CommandRunner) -> None:
    """Verify the effective group id is 0.

    Raises:
        PermissionDeniedError: If the caller is not in the root group
        OSNotSupportedError: If ``id -g`` cannot be run or its output parsed
    """
    try:
        result = runner.run_with_output("id", "-g")
    except CommandError as e:
        raise OSNotSupportedError(f"OS not supported: {e}") from e
    if result.returncode != 0:
        raise OSNotSupportedError(f"OS not supported: 'id -g' exited with {result.returncode}")
    try:
        gid = int(result.output.strip())
    except ValueError as e:
        raise OSNotSupportedError(f"OS not supported: unexpected 'id -g' output {result.output!r}") from e
    if gid != 0:
        raise PermissionDeniedError()
