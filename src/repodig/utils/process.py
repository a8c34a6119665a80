"""Blocking runner for the gh and git child processes."""

import subprocess
from dataclasses import dataclass

from repodig.exceptions import ProcessError


@dataclass(frozen=True)
class ProcessResult:
    """Captured output of a command that exited with status 0."""

    command: list[str]
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        """Stdout without surrounding whitespace."""
        return self.stdout.strip()


def run_tool(command: list[str], *, timeout: float | None = None) -> ProcessResult:
    """Run a command to completion, capturing its text output.

    Clones pass a timeout; searches wait for gh to exit.

    Raises:
        ProcessError: The executable is missing, the timeout expired, or the
            command exited non-zero. A timeout or missing executable is
            reported with returncode -1.
    """
    try:
        completed = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ProcessError(command, -1, f"Command not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise ProcessError(command, -1, f"Command timed out after {timeout}s") from e

    if completed.returncode != 0:
        raise ProcessError(command, completed.returncode, completed.stderr)

    return ProcessResult(command=command, stdout=completed.stdout, stderr=completed.stderr)
