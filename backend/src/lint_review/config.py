from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from lint_review.errors import ConfigurationError
from lint_review.formatting.annotations import MessagePolicy


DEFAULT_TIMEOUT_S = 600
DEFAULT_GITHUB_API_URL = "https://api.github.com"


def _get_input(environ: Mapping[str, str], name: str, required: bool = False) -> str:
    # The Actions runner exposes `with:` inputs as INPUT_<NAME> (spaces -> underscores, upper-cased).
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = (environ.get(key) or "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


@dataclass(frozen=True)
class AppConfig:
    prefix: str
    working_directory: Path
    summary_path: Path | None
    timeout_s: int = DEFAULT_TIMEOUT_S
    message_policy: MessagePolicy = MessagePolicy.POINTER
    github_token: str | None = None
    github_api_url: str = DEFAULT_GITHUB_API_URL

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Read the run configuration once from Actions-style environment variables."""
        env = os.environ if environ is None else environ

        prefix = _get_input(env, "prefix", required=True).strip("/")
        if not prefix:
            raise ConfigurationError("Input 'prefix' must name a subdirectory")

        working_directory_raw = _get_input(env, "workingDirectory")
        working_directory = Path(working_directory_raw) if working_directory_raw else Path.cwd()

        policy_raw = _get_input(env, "message_policy") or MessagePolicy.POINTER.value
        try:
            message_policy = MessagePolicy(policy_raw.lower())
        except ValueError:
            allowed = ", ".join(p.value for p in MessagePolicy)
            raise ConfigurationError(
                f"Invalid message_policy '{policy_raw}' (expected one of: {allowed})"
            ) from None

        timeout_raw = _get_input(env, "timeout_seconds")
        if timeout_raw:
            try:
                timeout_s = int(timeout_raw)
            except ValueError:
                raise ConfigurationError(f"Invalid timeout_seconds '{timeout_raw}'") from None
            if timeout_s <= 0:
                raise ConfigurationError("timeout_seconds must be positive")
        else:
            timeout_s = DEFAULT_TIMEOUT_S

        summary_raw = env.get("GITHUB_STEP_SUMMARY")
        return AppConfig(
            prefix=prefix,
            working_directory=working_directory,
            summary_path=Path(summary_raw) if summary_raw else None,
            timeout_s=timeout_s,
            message_policy=message_policy,
            github_token=env.get("GITHUB_TOKEN") or None,
            github_api_url=(env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
        )
