"""
Configuration Loader

Loads the action inputs (reviewers, team, token, count-team-only) from the
environment the GitHub Actions runner prepares, validating them before any
API call is made.
"""
from dataclasses import dataclass
from typing import Tuple

from team_reviewers.env_constants import (
    DEFAULT_COUNT_TEAM_ONLY,
    FALSE_VALUES,
    TEAM_SEPARATOR,
    TRUE_VALUES,
    ActionInputs,
    get_input,
)
from team_reviewers.errors import ConfigError


@dataclass
class ActionConfig:
    """
    Validated action inputs.

    Attributes:
        desired_reviewers: Total number of reviewers wanted on the PR
        organization: Organization owning the team
        team_slug: Slug of the team to pick reviewers from
        token: GitHub token
        count_team_only: Count only team members among existing reviewers
    """

    desired_reviewers: int
    organization: str
    team_slug: str
    token: str
    count_team_only: bool = DEFAULT_COUNT_TEAM_ONLY


def parse_team_identifier(team: str) -> Tuple[str, str]:
    """
    Split an "org/team-slug" identifier.

    Raises:
        ConfigError: if there is not exactly one separator with a non-empty
            part on each side
    """
    parts = team.split(TEAM_SEPARATOR)
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ConfigError(
            f"Invalid team format. Expected 'org/team', got '{team}'"
        )
    organization, team_slug = (part.strip() for part in parts)
    return organization, team_slug


def parse_reviewer_number(value: str) -> int:
    """Parse the desired reviewer count, which must be a non-negative int"""
    try:
        number = int(value, 10)
    except ValueError as exc:
        raise ConfigError(
            f"Invalid reviewers input. Expected a non-negative integer, "
            f"got '{value}'"
        ) from exc

    if number < 0:
        raise ConfigError(
            f"Invalid reviewers input. Expected a non-negative integer, "
            f"got '{value}'"
        )
    return number


def parse_boolean(name: str, value: str, default: bool) -> bool:
    if not value:
        return default

    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid {name} input. Expected 'true' or 'false', got '{value}'"
    )


def get_required_input(name: str, environ: dict | None = None) -> str:
    value = get_input(name, environ)
    if not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def load_action_config(environ: dict | None = None) -> ActionConfig:
    """
    Load and validate the action inputs.

    Args:
        environ: Mapping to read inputs from (defaults to os.environ)

    Returns:
        ActionConfig with every input parsed

    Raises:
        ConfigError: on a missing or malformed input
    """
    desired_reviewers = parse_reviewer_number(
        get_required_input(ActionInputs.REVIEWERS.value, environ)
    )
    organization, team_slug = parse_team_identifier(
        get_required_input(ActionInputs.TEAM.value, environ)
    )
    token = get_required_input(ActionInputs.TOKEN.value, environ)
    count_team_only = parse_boolean(
        ActionInputs.COUNT_TEAM_ONLY.value,
        get_input(ActionInputs.COUNT_TEAM_ONLY.value, environ),
        DEFAULT_COUNT_TEAM_ONLY,
    )

    return ActionConfig(
        desired_reviewers=desired_reviewers,
        organization=organization,
        team_slug=team_slug,
        token=token,
        count_team_only=count_team_only,
    )
