"""
GitHub API client for requesting pull request reviewers.

REST calls read the pull request and its review requests and write new review
requests. The team roster comes from GraphQL because member availability
(``status.indicatesLimitedAvailability``) is only exposed there.
"""

from typing import Any, Dict, Iterable, List, Optional, Set

import requests

from team_reviewers import utilities
from team_reviewers.data_types import TeamMember
from team_reviewers.env_constants import (
    API_REQUEST_TIMEOUT,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_GRAPHQL_URL,
    TEAM_MEMBERS_PAGE_SIZE,
    TEAM_MEMBERS_QUERY,
)
from team_reviewers.errors import TransientAPIError


class GitHubClient:
    """GitHub API client scoped to one token"""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        graphql_url: str = GITHUB_GRAPHQL_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub token used for every call
            base_url: REST API root
            graphql_url: GraphQL endpoint
            session: Optional pre-built session (used by tests)
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.base_url = base_url.rstrip("/")
        self.graphql_url = graphql_url
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            }
        )

    def _make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
    ) -> Any:
        """
        Make a request to the GitHub API.

        Returns:
            Decoded JSON body, or an empty dict for 204 responses

        Raises:
            TransientAPIError: on any transport or HTTP error
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=data,
                timeout=API_REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            status_code = None
            message = f"GitHub API error on {method} {url}: {exc}"
            if exc.response is not None:
                status_code = exc.response.status_code
                message = f"{message} - {exc.response.text}"
            raise TransientAPIError(message, status_code=status_code) from exc

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise TransientAPIError(
                f"GitHub API returned invalid JSON on {method} {url}",
                status_code=response.status_code,
            ) from exc

    def _rest(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        return self._make_request(method, f"{self.base_url}/{endpoint}", **kwargs)

    def graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run a GraphQL query and return its "data" object.

        Raises:
            TransientAPIError: on transport errors or a non-empty "errors" list
        """
        body = self._make_request(
            "POST", self.graphql_url, data={"query": query, "variables": variables}
        )
        if body.get("errors"):
            messages = "; ".join(
                error.get("message", str(error)) for error in body["errors"]
            )
            raise TransientAPIError(f"GraphQL errors: {messages}")
        return body.get("data") or {}

    def get_pull_request(self, owner: str, repo: str, number: int) -> Dict[str, Any]:
        return self._rest("GET", f"repos/{owner}/{repo}/pulls/{number}")

    def list_requested_reviewers(
        self, owner: str, repo: str, number: int
    ) -> Set[str]:
        """
        Get the logins of users currently requested to review a pull request.

        Team review requests are not included.
        """
        data = self._rest(
            "GET", f"repos/{owner}/{repo}/pulls/{number}/requested_reviewers"
        )
        return {
            user["login"] for user in data.get("users", []) if user.get("login")
        }

    def get_team_members(self, organization: str, team_slug: str) -> List[TeamMember]:
        """
        Fetch every member of a team, with their availability.

        Args:
            organization: Organization login
            team_slug: Team slug within the organization

        Returns:
            Members in the order GitHub returns them. Members without a
            status are considered available.

        Raises:
            TransientAPIError: if the API call fails or the team is not found
        """
        members: List[TeamMember] = []
        cursor = None

        while True:
            data = self.graphql(
                TEAM_MEMBERS_QUERY,
                {
                    "owner": organization,
                    "team": team_slug,
                    "first": TEAM_MEMBERS_PAGE_SIZE,
                    "after": cursor,
                },
            )
            team = (data.get("organization") or {}).get("team")
            if team is None:
                raise TransientAPIError(
                    f"Team '{organization}/{team_slug}' not found or not "
                    f"visible with the provided token"
                )

            connection = team.get("members") or {}
            members.extend(parse_member_nodes(connection.get("nodes") or []))

            page_info = connection.get("pageInfo") or {}
            if not page_info.get("hasNextPage"):
                break
            cursor = page_info.get("endCursor")
            if not cursor:
                break

        return members

    def request_reviewers(
        self, owner: str, repo: str, number: int, logins: Iterable[str]
    ) -> None:
        """Request reviews from the given users (no call for an empty list)"""
        reviewers = sorted(logins)
        if not reviewers:
            return

        self._rest(
            "POST",
            f"repos/{owner}/{repo}/pulls/{number}/requested_reviewers",
            data={"reviewers": reviewers},
        )


def parse_member_nodes(nodes: List[Optional[Dict[str, Any]]]) -> List[TeamMember]:
    """Convert GraphQL member nodes, skipping nodes without a login"""
    members = []
    for node in nodes:
        login = (node or {}).get("login")
        if not login:
            utilities.warning(f"Skipping team member without a login: {node}")
            continue

        status = node.get("status") or {}
        members.append(
            TeamMember(
                login=login,
                is_available=not status.get("indicatesLimitedAvailability", False),
            )
        )
    return members
