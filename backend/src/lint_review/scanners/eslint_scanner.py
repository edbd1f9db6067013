from __future__ import annotations

import json
import logging
import os
import shlex
import shutil
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from lint_review.errors import LinterExecutionError, LinterOutputError, LinterTimeoutError
from lint_review.scanners.command_runner import CommandTimeout, run_command
from lint_review.scanners.models import FileResult


logger = logging.getLogger(__name__)

DEFAULT_LINT_TIMEOUT_S = 600

# ESLint exit codes: 0 = no errors, 1 = lint errors reported, 2 = config problem or crash.
CLEAN_EXIT_CODES = frozenset({0, 1})

_REPORT_ADAPTER = TypeAdapter(list[FileResult])


def resolve_eslint_command(project_root: Path) -> list[str]:
    """Return a runnable ESLint command for `project_root`.

    Preference order:
    0) `LINT_REVIEW_ESLINT_BIN` explicit override (may contain arguments)
    1) project-local `node_modules/.bin/eslint`
    2) `eslint` found on PATH
    3) `yarn -s eslint` when yarn is available
    4) bare `eslint`, left for the OS to fail on
    """
    override = os.environ.get("LINT_REVIEW_ESLINT_BIN")
    if override:
        return shlex.split(override)

    local_bin = project_root / "node_modules" / ".bin" / "eslint"
    if local_bin.exists():
        return [str(local_bin)]

    on_path = shutil.which("eslint")
    if on_path:
        return [on_path]

    yarn = shutil.which("yarn")
    if yarn:
        return [yarn, "-s", "eslint"]

    return ["eslint"]


def parse_eslint_report(stdout: str) -> list[FileResult]:
    """Validate ESLint's JSON report into FileResult models.

    Anything that is not a JSON array of `{filePath, messages}` objects is rejected.
    """
    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise LinterOutputError(f"ESLint produced non-JSON output: {exc}") from exc

    try:
        return _REPORT_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise LinterOutputError(f"ESLint report has an unexpected shape: {exc}") from exc


def scan_eslint(
    files: list[str],
    cwd: Path,
    timeout_s: float = DEFAULT_LINT_TIMEOUT_S,
) -> list[FileResult]:
    """Run ESLint over exactly `files` (relative to `cwd`) and return its per-file results.

    An empty file list never starts a process. Timeouts, non-clean exits and
    unparsable output all raise; none of them is reported as a clean run.
    """
    if not files:
        logger.info("No lintable files changed; skipping ESLint")
        return []

    cmd = [*resolve_eslint_command(cwd), "--format", "json", *files]

    try:
        result = run_command(cmd, cwd=cwd, timeout_s=timeout_s)
    except CommandTimeout as exc:
        raise LinterTimeoutError(f"ESLint did not finish within {timeout_s}s") from exc

    if result.exit_code not in CLEAN_EXIT_CODES:
        raise LinterExecutionError(
            f"ESLint failed (exit {result.exit_code}): {result.stderr.strip()[:500]}",
            exit_code=result.exit_code,
            stderr=result.stderr,
        )

    results = parse_eslint_report(result.stdout)
    logger.info("ESLint reported %d file(s)", len(results))
    return results
