from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lint_review.config import AppConfig
from lint_review.github.client import PullRequestRecord


@dataclass(frozen=True)
class RunContext:
    base_sha: str
    head_sha: str
    prefix: str
    working_directory: Path
    body: str | None = None

    @staticmethod
    def from_pull_request(pull_request: PullRequestRecord, config: AppConfig) -> "RunContext":
        return RunContext(
            base_sha=pull_request.base_sha,
            head_sha=pull_request.head_sha,
            prefix=config.prefix,
            working_directory=config.working_directory,
            body=pull_request.body,
        )
