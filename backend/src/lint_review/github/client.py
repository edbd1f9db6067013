from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel

from lint_review.config import DEFAULT_GITHUB_API_URL
from lint_review.errors import GitHubAPIError


logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_S = 30


class PullRequestRecord(BaseModel):
    number: int
    body: str | None = None
    base_sha: str
    head_sha: str

    @staticmethod
    def from_api(data: dict[str, Any]) -> "PullRequestRecord":
        try:
            return PullRequestRecord(
                number=data["number"],
                body=data.get("body"),
                base_sha=data["base"]["sha"],
                head_sha=data["head"]["sha"],
            )
        except (KeyError, TypeError) as exc:
            raise GitHubAPIError(f"Pull request payload is missing {exc}") from exc


class GitHubClient:
    """Thin wrapper around the GitHub REST API for the calls the bot needs."""

    def __init__(
        self,
        token: str | None,
        api_url: str = DEFAULT_GITHUB_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequestRecord:
        """Fetch the full pull-request record (body and base/head SHAs)."""
        url = f"{self.api_url}/repos/{owner}/{repo}/pulls/{number}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, headers=self.headers, timeout=REQUEST_TIMEOUT_S)
        except requests.RequestException as exc:
            raise GitHubAPIError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code != 200:
            raise GitHubAPIError(
                f"GitHub returned {resp.status_code} for {owner}/{repo}#{number}",
                status_code=resp.status_code,
            )
        return PullRequestRecord.from_api(resp.json())
