"""Single entry point for every host command the service layer runs."""

import os
import subprocess
from dataclasses import dataclass

from ...utils.logger import get_logger
from .errors import CommandError

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Combined stdout/stderr of a finished command plus its exit status."""

    output: str
    returncode: int


class CommandRunner:
    """Runs external programs and applies the success policy.

    Success is a zero exit status. ``launchctl`` can report failure with a zero
    exit status, so for it a non-empty stderr is also a failure.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def run(self, command: str, *args: str) -> None:
        """Run a command and raise CommandError unless it succeeded."""
        logger.debug("run: %s %s", command, " ".join(args))
        try:
            result = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandError(command, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise CommandError(command, f"failed: {e}") from e

        stderr = (result.stderr or "").strip()
        if os.path.basename(command) == "launchctl" and stderr:
            raise CommandError(command, f"failed with stderr: {stderr}", result.returncode, stderr)
        if result.returncode != 0:
            detail = f"failed: exit status {result.returncode}"
            if stderr:
                detail += f": {stderr}"
            raise CommandError(command, detail, result.returncode, (result.stdout or "") + (result.stderr or ""))

    def run_with_output(self, command: str, *args: str) -> CommandOutput:
        """Run a command and return its combined output.

        A non-zero exit status is returned, not raised; only a command that
        cannot be started (or times out) raises CommandError.
        """
        logger.debug("run_with_output: %s %s", command, " ".join(args))
        try:
            result = subprocess.run(
                [command, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandError(command, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise CommandError(command, f"failed: {e}") from e
        return CommandOutput(output=result.stdout or "", returncode=result.returncode)
