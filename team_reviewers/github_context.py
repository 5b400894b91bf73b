"""Pull request context of the current workflow run."""

import json
import os
from dataclasses import dataclass
from typing import Mapping

from team_reviewers.errors import ContextError


@dataclass
class PullRequestContext:
    owner: str
    repo: str
    pull_number: int
    author_login: str = ""


def parse_repository(repository: str) -> tuple[str, str]:
    owner, _, repo = repository.partition("/")
    if not owner or not repo or "/" in repo:
        raise ContextError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', got '{repository}'"
        )
    return owner, repo


def load_event_payload(event_path: str) -> dict:
    """Read the webhook payload that triggered the workflow"""
    if not event_path:
        raise ContextError("GITHUB_EVENT_PATH is not set")

    try:
        with open(event_path, encoding="utf-8") as event_file:
            payload = json.load(event_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ContextError(
            f"Could not read the event payload at '{event_path}': {exc}"
        ) from exc

    if not isinstance(payload, dict):
        raise ContextError(f"Event payload at '{event_path}' is not an object")
    return payload


def load_pull_request_context(
    environ: Mapping[str, str] | None = None,
) -> PullRequestContext:
    """
    Build the pull request context from the runner environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ContextError: when the repository is unknown or the triggering event
            is not a pull request event
    """
    if environ is None:
        environ = os.environ

    repository = environ.get("GITHUB_REPOSITORY", "").strip()
    if not repository:
        raise ContextError("GITHUB_REPOSITORY is not set")
    owner, repo = parse_repository(repository)

    payload = load_event_payload(environ.get("GITHUB_EVENT_PATH", "").strip())
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict):
        raise ContextError(
            "This action can only be run on pull request events"
        )

    pull_number = pull_request.get("number")
    if not isinstance(pull_number, int) or isinstance(pull_number, bool):
        raise ContextError("Pull request number is missing from the event payload")

    user = pull_request.get("user") or {}
    return PullRequestContext(
        owner=owner,
        repo=repo,
        pull_number=pull_number,
        author_login=user.get("login") or "",
    )
