from __future__ import annotations

import os
from enum import Enum
from pathlib import Path, PurePath
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from lint_review.formatting.rule_urls import format_rule_message, rule_url
from lint_review.scanners.models import FileResult, Finding


class MessagePolicy(str, Enum):
    """Which finding text goes into the annotation title and which into its body."""

    # title = ESLint message, message = "See <docs> for details."
    POINTER = "pointer"
    # title = "<rule> (<docs>)", message = ESLint message
    RULE = "rule"


class Annotation(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    title: str
    message: str
    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None


def normalize_filename(file_path: str, working_directory: Path) -> str:
    """Express `file_path` relative to `working_directory` without touching the filesystem."""
    relative = os.path.relpath(file_path, str(working_directory))
    return PurePath(relative).as_posix()


def _rule_title(finding: Finding) -> str:
    rule = finding.rule_id or "eslint"
    url = rule_url(finding.rule_id)
    return f"{rule} ({url})" if url else rule


def to_annotation(
    finding: Finding,
    file: str,
    policy: MessagePolicy = MessagePolicy.POINTER,
) -> Annotation:
    if policy is MessagePolicy.RULE:
        title, message = _rule_title(finding), finding.message
    else:
        title, message = finding.message, format_rule_message(finding.rule_id)

    return Annotation(
        file=file,
        title=title,
        message=message,
        start_line=finding.line,
        start_column=finding.column,
        end_line=finding.end_line,
        end_column=finding.end_column,
    )


def files_with_findings(results: Iterable[FileResult]) -> list[FileResult]:
    return [result for result in results if result.messages]


def count_findings(results: Iterable[FileResult]) -> int:
    return sum(len(result.messages) for result in results)


def build_annotations(
    results: Iterable[FileResult],
    working_directory: Path,
    policy: MessagePolicy = MessagePolicy.POINTER,
) -> list[Annotation]:
    """One annotation per finding, in linter order; files without findings produce none."""
    annotations: list[Annotation] = []
    for result in files_with_findings(results):
        file = normalize_filename(result.file_path, working_directory)
        annotations.extend(to_annotation(finding, file, policy) for finding in result.messages)
    return annotations
