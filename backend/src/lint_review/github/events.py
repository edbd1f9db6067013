from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from lint_review.errors import ConfigurationError


class _Owner(BaseModel):
    login: str


class _Repository(BaseModel):
    name: str
    owner: _Owner


class _PullRequest(BaseModel):
    number: int


class PullRequestEvent(BaseModel):
    """The subset of a `pull_request` webhook delivery the bot reads."""

    action: str | None = None
    repository: _Repository
    pull_request: _PullRequest

    @property
    def owner(self) -> str:
        return self.repository.owner.login

    @property
    def repo(self) -> str:
        return self.repository.name

    @property
    def number(self) -> int:
        return self.pull_request.number


def parse_event(payload: dict[str, Any]) -> PullRequestEvent:
    try:
        return PullRequestEvent.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Not a pull_request event payload: {exc}") from exc


def load_event(path: Path) -> PullRequestEvent:
    """Read the event payload the Actions runner stores at GITHUB_EVENT_PATH."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to read event payload from {path}: {exc}") from exc
    return parse_event(payload)
