"""Test helpers for building rosters and random sources."""

from typing import Callable, Dict, List

from team_reviewers.data_types import TeamMember


def make_members(*logins: str, unavailable: tuple = ()) -> List[TeamMember]:
    """Build a roster where every login is available unless listed."""
    return [
        TeamMember(login=login, is_available=login not in unavailable)
        for login in logins
    ]


def constant_randbelow(offset: int = 0) -> Callable[[int], int]:
    """
    Random source that always returns ``n - 1 - offset`` clamped to [0, n).

    offset=0 keeps every element in place, a large offset always picks 0.
    """
    return lambda n: max(0, n - 1 - offset)


def failing_randbelow(n: int) -> int:
    raise AssertionError("randomness must not be used here")


def chi_square(counts: Dict[str, int], trials: int) -> float:
    """Chi-square statistic of observed counts against a uniform spread."""
    expected = trials / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts.values())
