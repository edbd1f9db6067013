from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

# Shell conventions: 127 = command not found, 126 = found but could not be executed.
EXIT_NOT_FOUND = 127
EXIT_CANNOT_EXECUTE = 126


@dataclass(frozen=True)
class CommandResult:
    command: list[str]
    cwd: str
    exit_code: int
    stdout: str
    stderr: str


class CommandTimeout(Exception):
    def __init__(self, command: list[str], timeout_s: float) -> None:
        super().__init__(f"Command timed out after {timeout_s}s: {' '.join(command)}")
        self.command = command
        self.timeout_s = timeout_s


def run_command(command: list[str], cwd: Path, timeout_s: float = 120) -> CommandResult:
    """Run `command` to completion, killing it once `timeout_s` has elapsed.

    Launch failures are reported like a shell would: 127 for a missing
    executable, 126 for anything else the OS refuses to start (permissions,
    oversized argv). Expiry raises CommandTimeout; callers never observe a
    partial result.
    """
    logger.debug("Running %s (cwd=%s, timeout=%ss)", command, cwd, timeout_s)
    try:
        proc = subprocess.run(
            command,
            cwd=str(cwd),
            encoding="utf-8",
            errors="surrogateescape",
            capture_output=True,
            timeout=timeout_s,
        )
        return CommandResult(
            command=command,
            cwd=str(cwd),
            exit_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
    except subprocess.TimeoutExpired:
        raise CommandTimeout(command, timeout_s) from None
    except FileNotFoundError as exc:
        return CommandResult(
            command=command,
            cwd=str(cwd),
            exit_code=EXIT_NOT_FOUND,
            stdout="",
            stderr=str(exc),
        )
    except OSError as exc:
        return CommandResult(
            command=command,
            cwd=str(cwd),
            exit_code=EXIT_CANNOT_EXECUTE,
            stdout="",
            stderr=str(exc),
        )
