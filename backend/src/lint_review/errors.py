from __future__ import annotations


class LintReviewError(Exception):
    """Base class for failures that abort a lint review run."""


class ConfigurationError(LintReviewError):
    pass


class DiffResolutionError(LintReviewError):
    def __init__(self, message: str, exit_code: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class LinterExecutionError(LintReviewError):
    def __init__(self, message: str, exit_code: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class LinterTimeoutError(LinterExecutionError):
    pass


class LinterOutputError(LinterExecutionError):
    pass


class GitHubAPIError(LintReviewError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CheckoutMismatchError(LintReviewError):
    def __init__(self, message: str, expected: str, actual: str) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
