"""Exceptions raised while requesting team reviewers."""


class ReviewerRequestError(Exception):
    """Base class for every error this action reports."""


class ConfigError(ReviewerRequestError):
    """Action inputs are missing or malformed."""


class ContextError(ReviewerRequestError):
    """The action is not running in a pull request context."""


class TransientAPIError(ReviewerRequestError):
    """A GitHub API call failed (network, permissions, rate limit...)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidInputError(ReviewerRequestError):
    """Structurally malformed data was handed to the reviewer selection."""
