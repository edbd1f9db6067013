from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel

from lint_review.errors import ConfigurationError
from lint_review.formatting.annotations import Annotation
from lint_review.reporting.workflow_commands import format_command


logger = logging.getLogger(__name__)

CLEAN_SUMMARY = "No linter hints found in the changed code. :white_check_mark:"


class RunResult(BaseModel):
    skipped: bool = False
    total_findings: int = 0
    annotations: list[Annotation] = []
    passed: bool = True
    failure_message: str | None = None
    summary: str | None = None


def summary_emoji(total_findings: int) -> str:
    if total_findings <= 10:
        return ":worried:"
    if total_findings <= 100:
        return ":disappointed_relieved:"
    return ":sob:"


def failure_message(total_findings: int) -> str:
    return f"Found {total_findings} linter hints in the changed code."


def build_summary(total_findings: int) -> str:
    if total_findings == 0:
        return CLEAN_SUMMARY
    return f"{failure_message(total_findings)} {summary_emoji(total_findings)}"


class Reporter:
    """Turn a run's annotations into a RunResult without publishing anything.

    The webhook returns this result as its JSON response body; subclasses
    publish it to other sinks.
    """

    def check_summary_sink(self) -> None:
        pass

    def report(self, annotations: list[Annotation], total_findings: int) -> RunResult:
        self.check_summary_sink()

        if total_findings > 0:
            message = failure_message(total_findings)
            logger.info(message)
            result = RunResult(
                total_findings=total_findings,
                annotations=annotations,
                passed=False,
                failure_message=message,
                summary=build_summary(total_findings),
            )
        else:
            logger.info("No linter hints found")
            result = RunResult(total_findings=0, annotations=annotations, passed=True, summary=build_summary(0))

        self.publish(result)
        return result

    def publish(self, result: RunResult) -> None:
        pass


class ActionsReporter(Reporter):
    """Report a run through GitHub Actions workflow commands and the job summary file.

    Annotations and the failure status go to `stream` (stdout on a runner); the
    summary is appended to `summary_path` (the runner's GITHUB_STEP_SUMMARY).
    """

    def __init__(self, summary_path: Path | None, stream: TextIO | None = None) -> None:
        self._summary_path = summary_path
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def check_summary_sink(self) -> Path:
        if self._summary_path is None:
            raise ConfigurationError(
                "Unable to find environment variable for $GITHUB_STEP_SUMMARY. "
                "Check if your runtime environment supports job summaries."
            )
        return self._summary_path

    def warning(self, annotation: Annotation) -> None:
        properties = {
            "title": annotation.title,
            "file": annotation.file,
            "line": annotation.start_line,
            "endLine": annotation.end_line,
            "col": annotation.start_column,
            "endColumn": annotation.end_column,
        }
        print(format_command("warning", annotation.message, properties), file=self.stream)

    def set_failed(self, message: str) -> None:
        print(format_command("error", message), file=self.stream)

    def write_summary(self, text: str) -> None:
        path = self.check_summary_sink()
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text + "\n")

    def publish(self, result: RunResult) -> None:
        for annotation in result.annotations:
            self.warning(annotation)
        if result.failure_message:
            self.set_failed(result.failure_message)
        self.write_summary(result.summary or build_summary(result.total_findings))
