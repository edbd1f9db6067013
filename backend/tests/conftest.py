from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from lint_review.config import AppConfig
from lint_review.scanners.models import FileResult


def eslint_message(rule_id: str | None = "no-unused-vars", line: int = 1, **overrides: Any) -> dict[str, Any]:
    message = {
        "ruleId": rule_id,
        "severity": 2,
        "message": "'x' is assigned a value but never used.",
        "line": line,
        "column": 7,
        "nodeType": "Identifier",
        "messageId": "unusedVar",
        "endLine": line,
        "endColumn": 8,
    }
    message.update(overrides)
    return message


def file_result(file_path: str | Path, *messages: dict[str, Any]) -> FileResult:
    return FileResult.model_validate({"filePath": str(file_path), "messages": list(messages)})


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    (root / "pkg").mkdir(parents=True)
    return root


@pytest.fixture
def config(workdir: Path, tmp_path: Path) -> AppConfig:
    return AppConfig(
        prefix="pkg",
        working_directory=workdir,
        summary_path=tmp_path / "summary.md",
    )
