from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from lint_review.config import AppConfig
from lint_review.context import RunContext
from lint_review.formatting.annotations import build_annotations, count_findings, files_with_findings
from lint_review.reporting.reporter import Reporter, RunResult
from lint_review.scanners.eslint_scanner import scan_eslint
from lint_review.scanners.models import FileResult
from lint_review.triggers import should_be_skipped
from lint_review.vcs.diff_resolver import resolve_changed_files


logger = logging.getLogger(__name__)

DiffResolver = Callable[[str, str, str, Path], list[str]]
Linter = Callable[[list[str], Path, float], list[FileResult]]


def run_pipeline(
    context: RunContext,
    config: AppConfig,
    reporter: Reporter,
    diff_resolver: DiffResolver = resolve_changed_files,
    linter: Linter = scan_eslint,
) -> RunResult:
    """Lint the files a pull request changed and report the findings.

    Every stage error propagates; a failed run never produces a clean report.
    """
    if should_be_skipped(context.body):
        logger.info("Pull request body requests no review; skipping")
        return RunResult(skipped=True)

    # Fail on a missing summary sink before doing any work.
    reporter.check_summary_sink()

    files = diff_resolver(context.base_sha, context.head_sha, context.prefix, context.working_directory)

    lint_root = context.working_directory / context.prefix
    results = linter(files, lint_root, config.timeout_s)

    with_findings = files_with_findings(results)
    total = count_findings(with_findings)
    annotations = build_annotations(with_findings, context.working_directory, config.message_policy)
    return reporter.report(annotations, total)
