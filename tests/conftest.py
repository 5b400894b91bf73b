"""Test fixtures for pytest."""

import json
from copy import deepcopy
from pathlib import Path
from typing import Dict, Generator, List
from unittest.mock import MagicMock

import pytest

from team_reviewers.data_types import TeamMember

TEAM = [
    TeamMember(login="alice", is_available=True),
    TeamMember(login="bob", is_available=True),
    TeamMember(login="carol", is_available=False),
    TeamMember(login="dave", is_available=True),
    TeamMember(login="erin", is_available=True),
]

PULL_REQUEST_EVENT = {
    "action": "opened",
    "pull_request": {
        "number": 42,
        "user": {"login": "dave"},
    },
}

ACTION_ENV = {
    "INPUT_REVIEWERS": "2",
    "INPUT_TEAM": "acme/frontend",
    "INPUT_TOKEN": "ghp_test",
    "GITHUB_REPOSITORY": "acme/webapp",
}


@pytest.fixture(scope="function")
def team_members() -> Generator[List[TeamMember], None, None]:
    """Provide a fresh copy of the team roster."""
    members = deepcopy(TEAM)
    yield members


@pytest.fixture(scope="function")
def event_path(tmp_path: Path) -> Path:
    """Write a pull_request event payload and return its path."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(PULL_REQUEST_EVENT), encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def action_env(event_path: Path) -> Dict[str, str]:
    """Provide runner environment variables for a pull request run."""
    return {**ACTION_ENV, "GITHUB_EVENT_PATH": str(event_path)}


@pytest.fixture(scope="function")
def mocked_client(team_members: List[TeamMember]) -> MagicMock:
    """Provide a GitHub client double with no reviewers requested yet."""
    client = MagicMock()
    client.get_pull_request.return_value = {"number": 42, "user": {"login": "dave"}}
    client.list_requested_reviewers.return_value = set()
    client.get_team_members.return_value = team_members
    return client
