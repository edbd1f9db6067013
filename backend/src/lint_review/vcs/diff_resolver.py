from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from lint_review.errors import DiffResolutionError
from lint_review.scanners.command_runner import CommandTimeout, run_command


logger = logging.getLogger(__name__)

LINTABLE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")

# Added, Copied, Modified, Renamed. Deleted files have nothing left to lint.
DIFF_FILTER = "ACMR"

GIT_TIMEOUT_S = 120


def filter_lintable(paths: Iterable[str], prefix: str) -> list[str]:
    """Keep paths under `prefix/` with a lintable extension, returned relative to the prefix."""
    root = prefix.strip("/") + "/"
    selected: list[str] = []
    seen: set[str] = set()
    for path in paths:
        if not path.startswith(root) or not path.endswith(LINTABLE_EXTENSIONS):
            continue
        relative = path[len(root):]
        if relative and relative not in seen:
            seen.add(relative)
            selected.append(relative)
    return selected


def resolve_changed_files(base_sha: str, head_sha: str, prefix: str, cwd: Path) -> list[str]:
    """List lintable files changed between `base_sha` and `head_sha`, relative to `prefix`.

    git reports paths relative to the repository root whatever directory it runs in.
    """
    cmd = [
        "git",
        "diff",
        "-z",
        "--name-only",
        f"--diff-filter={DIFF_FILTER}",
        f"{base_sha}..{head_sha}",
    ]
    try:
        result = run_command(cmd, cwd=cwd, timeout_s=GIT_TIMEOUT_S)
    except CommandTimeout as exc:
        raise DiffResolutionError(f"git diff did not finish within {GIT_TIMEOUT_S}s") from exc

    if result.exit_code != 0:
        raise DiffResolutionError(
            f"git diff {base_sha}..{head_sha} failed (exit {result.exit_code}): {result.stderr.strip()}",
            exit_code=result.exit_code,
            stderr=result.stderr,
        )

    # -z keeps paths verbatim; without it git quotes and octal-escapes non-ASCII names.
    files = filter_lintable(result.stdout.split("\0"), prefix)
    logger.info("Resolved %d lintable changed file(s) under %s/", len(files), prefix.strip("/"))
    return files
