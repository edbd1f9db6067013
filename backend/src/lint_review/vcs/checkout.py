from __future__ import annotations

import logging
from pathlib import Path

from lint_review.errors import CheckoutMismatchError, DiffResolutionError
from lint_review.scanners.command_runner import CommandTimeout, run_command


logger = logging.getLogger(__name__)

GIT_TIMEOUT_S = 30


def current_head(cwd: Path) -> str:
    try:
        result = run_command(["git", "rev-parse", "HEAD"], cwd=cwd, timeout_s=GIT_TIMEOUT_S)
    except CommandTimeout as exc:
        raise DiffResolutionError(f"git rev-parse did not finish within {GIT_TIMEOUT_S}s") from exc

    if result.exit_code != 0:
        raise DiffResolutionError(
            f"Unable to read HEAD in {cwd} (exit {result.exit_code}): {result.stderr.strip()}",
            exit_code=result.exit_code,
            stderr=result.stderr,
        )
    return result.stdout.strip()


def ensure_checked_out(cwd: Path, head_sha: str) -> None:
    """Raise CheckoutMismatchError unless the tree at `cwd` is checked out at `head_sha`."""
    actual = current_head(cwd)
    if actual.lower() != head_sha.strip().lower():
        raise CheckoutMismatchError(
            f"Working tree {cwd} is at {actual[:12]}, not the pull request head {head_sha[:12]}",
            expected=head_sha,
            actual=actual,
        )
    logger.debug("Working tree %s is at %s", cwd, actual)
