"""Data type definitions for the team reviewer request action."""

from dataclasses import dataclass, field
from typing import List, Set


@dataclass
class TeamMember:
    """
    Represents one member of the configured team at query time.

    Attributes:
        login: GitHub login of the member
        is_available: False when the member's status indicates limited
            availability. Defaults to True when the data source cannot
            report availability.
    """

    login: str
    is_available: bool = True


@dataclass
class SelectionRequest:
    """
    Input to the reviewer selection.

    Attributes:
        desired_total: Number of reviewers the pull request should end up with
        team_members: Team roster, in the order the API returned it
        existing_team_reviewer_count: Reviewers already counted toward the
            target (see ``count_team_only`` in the action config)
        pr_author_login: Login of the pull request author
        requested_logins: Logins already requested as reviewers on the PR
    """

    desired_total: int
    team_members: List[TeamMember] = field(default_factory=list)
    existing_team_reviewer_count: int = 0
    pr_author_login: str = ""
    requested_logins: Set[str] = field(default_factory=set)


@dataclass
class SelectionResult:
    """
    Output of the reviewer selection.

    Attributes:
        logins_to_request: Logins to request a review from
        shortfall: Slots that could not be filled from the eligible pool
        needed: Reviewers that were missing before selection
    """

    logins_to_request: Set[str] = field(default_factory=set)
    shortfall: int = 0
    needed: int = 0
