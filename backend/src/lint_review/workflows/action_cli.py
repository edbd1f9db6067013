from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from lint_review.config import AppConfig
from lint_review.context import RunContext
from lint_review.errors import ConfigurationError, LintReviewError
from lint_review.github.client import GitHubClient
from lint_review.github.events import load_event
from lint_review.pipeline import run_pipeline
from lint_review.reporting.reporter import ActionsReporter
from lint_review.reporting.workflow_commands import format_command
from lint_review.triggers import is_handled_action


load_dotenv()  # Local runs can supply INPUT_* / GITHUB_* variables from a .env file.

logger = logging.getLogger("lint_review")


def _configure_logging() -> None:
    # Workflow commands go to stdout; keep log lines on stderr.
    level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO
    logging.basicConfig(stream=sys.stderr, level=level, format="%(levelname)s %(name)s: %(message)s")


def run() -> int:
    config = AppConfig.from_env()

    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set; run inside a pull_request workflow")
    event = load_event(Path(event_path))

    if not is_handled_action(event.action):
        logger.info("Ignoring pull_request action %r", event.action)
        return 0

    client = GitHubClient(config.github_token, config.github_api_url)
    pull_request = client.get_pull_request(event.owner, event.repo, event.number)
    context = RunContext.from_pull_request(pull_request, config)

    logger.info(
        "Linting %s/%s#%d (%s..%s) under %s/",
        event.owner,
        event.repo,
        event.number,
        context.base_sha[:7],
        context.head_sha[:7],
        context.prefix,
    )
    result = run_pipeline(context, config, ActionsReporter(config.summary_path))
    return 0 if result.passed else 1


def main() -> None:
    _configure_logging()
    try:
        code = run()
    except LintReviewError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        print(format_command("error", str(exc)), flush=True)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
