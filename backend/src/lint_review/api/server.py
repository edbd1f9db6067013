from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel

from lint_review.config import AppConfig
from lint_review.context import RunContext
from lint_review.errors import CheckoutMismatchError, ConfigurationError, GitHubAPIError, LintReviewError
from lint_review.github.client import GitHubClient
from lint_review.github.events import parse_event
from lint_review.pipeline import run_pipeline
from lint_review.reporting.reporter import Reporter, RunResult
from lint_review.scanners.eslint_scanner import resolve_eslint_command
from lint_review.triggers import is_handled_action, should_be_skipped
from lint_review.vcs.checkout import ensure_checked_out

load_dotenv()

logger = logging.getLogger(__name__)

# Signature verification happens upstream; deliveries reaching this app are trusted.
app = FastAPI(title="lint-review webhook")


class WebhookResponse(BaseModel):
    status: str
    result: RunResult | None = None


def get_config() -> AppConfig:
    try:
        return AppConfig.from_env()
    except ConfigurationError as exc:
        # The server is misconfigured; the delivery itself is fine.
        logger.error("Server configuration error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from None


def get_github_client(config: AppConfig = Depends(get_config)) -> GitHubClient:
    return GitHubClient(config.github_token, config.github_api_url)


def get_reporter() -> Reporter:
    # Results are returned in the response body; workflow commands only mean something on a runner.
    return Reporter()


@app.get("/api/health")
def health() -> dict[str, Any]:
    """Lightweight runtime diagnostics."""
    return {
        "ok": True,
        "pid": os.getpid(),
        "sys_executable": sys.executable,
        "cwd": str(Path.cwd()),
        "eslint_command": resolve_eslint_command(Path.cwd()),
    }


@app.post("/api/webhook", response_model=WebhookResponse)
def webhook(
    payload: dict[str, Any],
    x_github_event: str | None = Header(default=None),
    config: AppConfig = Depends(get_config),
    client: GitHubClient = Depends(get_github_client),
    reporter: Reporter = Depends(get_reporter),
) -> WebhookResponse:
    """Run the lint review for an opened or synchronized pull request."""
    if x_github_event != "pull_request":
        return WebhookResponse(status="ignored")

    try:
        event = parse_event(payload)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None

    if not is_handled_action(event.action):
        return WebhookResponse(status="ignored")

    try:
        pull_request = client.get_pull_request(event.owner, event.repo, event.number)
        context = RunContext.from_pull_request(pull_request, config)
        if not should_be_skipped(context.body):
            ensure_checked_out(context.working_directory, context.head_sha)
        result = run_pipeline(context, config, reporter)
    except CheckoutMismatchError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from None
    except ConfigurationError as exc:
        logger.error("Server configuration error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from None
    except GitHubAPIError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from None
    except LintReviewError as exc:
        logger.error("Lint review failed for %s/%s#%d: %s", event.owner, event.repo, event.number, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from None

    if result.skipped:
        return WebhookResponse(status="skipped", result=result)
    return WebhookResponse(status="passed" if result.passed else "failed", result=result)


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "8000")))


if __name__ == "__main__":
    main()
