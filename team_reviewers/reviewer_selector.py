"""
Team Reviewer Selection

Tops up the reviewers of a pull request to a desired total by picking random
members of a team.

SELECTION LOGIC:
1. Needed reviewers = desired total - reviewers already counted (never < 0)
   - Nothing needed → nothing selected, the team roster is not looked at
2. Eligible pool = team members that are
   - not the pull request author
   - not already requested as reviewers
   - not flagged with limited availability
3. Random pick: the pool is shuffled with a Fisher-Yates shuffle and the
   first "needed" members are taken, so every member is equally likely to be
   chosen
4. Shortfall = needed reviewers that the pool could not cover. This is a
   normal outcome, reported to the caller rather than raised.

EXAMPLE:
Desired: 3, already requested: 0
Team: alice (available), bob (available), carol (limited availability)
Author: dave
Eligible pool: alice, bob → selected: alice, bob, shortfall: 1
"""

import random
from typing import Callable, Iterable, List, Sequence, Set

from team_reviewers import utilities
from team_reviewers.data_types import SelectionRequest, SelectionResult, TeamMember
from team_reviewers.errors import InvalidInputError

# randbelow(n) returns a uniformly distributed int in [0, n)
RandBelow = Callable[[int], int]


def validate_team_members(team_members: Iterable[TeamMember]) -> None:
    for position, member in enumerate(team_members):
        if not isinstance(member, TeamMember):
            raise InvalidInputError(
                f"Team member #{position} is not a TeamMember: {member!r}"
            )
        if not isinstance(member.login, str) or not member.login.strip():
            raise InvalidInputError(f"Team member #{position} has an empty login")


def compute_eligible_pool(
    team_members: Sequence[TeamMember],
    pr_author_login: str,
    requested_logins: Set[str],
) -> List[TeamMember]:
    """
    Filter the team down to the members who can be asked for a review.

    Logins are compared exactly, the way GitHub reports them. Input order is
    kept.

    Raises:
        InvalidInputError: if a member is not a TeamMember or has no login
    """
    validate_team_members(team_members)

    return [
        member
        for member in team_members
        if member.login != pr_author_login
        and member.login not in requested_logins
        and member.is_available
    ]


def compute_needed_count(desired_total: int, existing_count: int) -> int:
    return max(0, desired_total - existing_count)


def shuffle_in_place(items: List, randbelow: RandBelow = random.randrange) -> None:
    """Fisher-Yates shuffle: swap each position with a random earlier-or-equal one"""
    for index in range(len(items) - 1, 0, -1):
        swap_index = randbelow(index + 1)
        items[index], items[swap_index] = items[swap_index], items[index]


def select_random(
    pool: Sequence[TeamMember],
    count: int,
    randbelow: RandBelow = random.randrange,
) -> List[str]:
    """
    Pick min(count, len(pool)) distinct logins uniformly at random.

    Args:
        pool: Eligible team members
        count: Number of logins wanted
        randbelow: Random source, randbelow(n) → uniform int in [0, n)

    Returns:
        Selected logins, in shuffled order
    """
    if count <= 0 or not pool:
        return []

    shuffled = list(pool)
    shuffle_in_place(shuffled, randbelow)
    return [member.login for member in shuffled[:count]]


def select_reviewers(
    request: SelectionRequest,
    randbelow: RandBelow = random.randrange,
) -> SelectionResult:
    """
    Choose which team members to request a review from.

    Never raises for a small team: unfilled slots are returned as the
    shortfall. Malformed team data is reported as a warning and treated as
    an empty pool.
    """
    needed = compute_needed_count(
        request.desired_total, request.existing_team_reviewer_count
    )
    if needed == 0:
        return SelectionResult(logins_to_request=set(), shortfall=0, needed=0)

    try:
        pool = compute_eligible_pool(
            request.team_members,
            request.pr_author_login,
            request.requested_logins,
        )
    except InvalidInputError as exc:
        utilities.warning(f"Ignoring malformed team roster: {exc}")
        pool = []

    chosen = select_random(pool, needed, randbelow)

    return SelectionResult(
        logins_to_request=set(chosen),
        shortfall=max(0, needed - len(chosen)),
        needed=needed,
    )
