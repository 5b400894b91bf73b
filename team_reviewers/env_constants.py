import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())


class ActionInputs(str, Enum):
    """Input names declared in action.yml"""

    # Total number of reviewers the pull request should have
    REVIEWERS = "reviewers"
    # Team to pick reviewers from, as "org/team-slug"
    TEAM = "team"
    # Token used for every GitHub API call
    TOKEN = "token"
    # Count only requested reviewers that belong to the team
    COUNT_TEAM_ONLY = "count-team-only"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input"""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: dict | None = None) -> str:
    """
    Read an action input from the environment.

    Args:
        name: Input name as declared in action.yml
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The stripped value, or an empty string when the input is unset
    """
    if environ is None:
        environ = os.environ
    return environ.get(input_env_name(name), "").strip()


TRUE_VALUES = {"true", "yes", "1"}
FALSE_VALUES = {"false", "no", "0"}

# Team identifier format: "organization/team-slug"
TEAM_SEPARATOR = "/"

# Default values
DEFAULT_COUNT_TEAM_ONLY = False

# GitHub API
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_GRAPHQL_URL = os.environ.get(
    "GITHUB_GRAPHQL_URL", f"{GITHUB_API_URL}/graphql"
)
GITHUB_API_VERSION = "2022-11-28"
API_REQUEST_TIMEOUT = 30  # seconds
TEAM_MEMBERS_PAGE_SIZE = 100  # GraphQL connections cap "first" at 100

TEAM_MEMBERS_QUERY = """
query getTeamMembers($owner: String!, $team: String!, $first: Int!, $after: String) {
  organization(login: $owner) {
    team(slug: $team) {
      members(first: $first, after: $after) {
        nodes {
          login
          status {
            indicatesLimitedAvailability
          }
        }
        pageInfo {
          hasNextPage
          endCursor
        }
      }
    }
  }
}
"""
