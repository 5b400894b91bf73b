"""
Request Team Reviewers

Tops up the reviewers requested on a pull request to the configured number by
picking random members of a team.

INPUTS (action.yml, exposed by the runner as INPUT_* variables):
- reviewers: Total number of reviewers the pull request should have
- team: Team to pick reviewers from, as "org/team-slug"
- token: GitHub token allowed to read the team and request reviews
- count-team-only: Only count requested reviewers who belong to the team
  toward the total (default: false, every requested user counts)

FLOW:
1. Read the inputs and the pull request from the workflow context
2. Read the pull request author and the users already requested
3. Stop if the pull request already has enough reviewers
4. Fetch the team roster (with limited availability status)
5. Pick random eligible members and request their review
6. Warn when the team could not cover every missing reviewer

Exit Codes:
    0: Success (including "nothing to do" and partial fulfillment)
    1: Failure (bad inputs, not a pull request event, GitHub API error)
"""

import sys
from pathlib import Path
from typing import List, Optional, Set

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# pylint: next-line: disable=wrong-import-position
from team_reviewers import utilities  # noqa: E402
from team_reviewers.config_loader import ActionConfig, load_action_config  # noqa: E402
from team_reviewers.data_types import (  # noqa: E402
    SelectionRequest,
    SelectionResult,
    TeamMember,
)
from team_reviewers.github_client import GitHubClient  # noqa: E402
from team_reviewers.github_context import (  # noqa: E402
    PullRequestContext,
    load_pull_request_context,
)
from team_reviewers.reviewer_selector import (  # noqa: E402
    compute_needed_count,
    select_reviewers,
)


def count_existing_reviewers(
    requested_logins: Set[str],
    team_members: Optional[List[TeamMember]] = None,
) -> int:
    """
    Count the requested reviewers that count toward the desired total.

    Args:
        requested_logins: Users currently requested on the pull request
        team_members: When given, only requested users on this roster count
    """
    if team_members is None:
        return len(requested_logins)

    team_logins = {member.login for member in team_members}
    return len(requested_logins & team_logins)


def report_selection(config: ActionConfig, result: SelectionResult) -> None:
    """Warn when the eligible pool could not cover every missing reviewer"""
    if result.shortfall <= 0:
        return

    available = len(result.logins_to_request)
    if available == 0:
        utilities.warning("No eligible team members found to request reviews from.")
    else:
        utilities.warning(
            f"Requested {config.desired_reviewers} reviewers, but only "
            f"{available} eligible team members available."
        )


def request_team_reviewers(
    config: ActionConfig,
    context: PullRequestContext,
    client: GitHubClient,
) -> SelectionResult:
    """
    Top up the reviewers of the pull request in ``context``.

    Returns:
        The selection that was requested (empty when nothing was needed)
    """
    pull_request = client.get_pull_request(
        context.owner, context.repo, context.pull_number
    )
    author_login = (pull_request.get("user") or {}).get("login") or context.author_login
    requested_logins = client.list_requested_reviewers(
        context.owner, context.repo, context.pull_number
    )

    team_members: Optional[List[TeamMember]] = None
    if config.count_team_only:
        team_members = client.get_team_members(config.organization, config.team_slug)

    existing_reviewers = count_existing_reviewers(requested_logins, team_members)
    needed = compute_needed_count(config.desired_reviewers, existing_reviewers)

    if needed == 0:
        utilities.info(
            f"PR already has {existing_reviewers} reviewer(s) requested. "
            f"No additional reviewers needed."
        )
        return SelectionResult()

    utilities.info(
        f"PR has {existing_reviewers} reviewer(s) requested. "
        f"Need to request {needed} more."
    )

    if team_members is None:
        team_members = client.get_team_members(config.organization, config.team_slug)
    utilities.debug(
        f"Team {config.organization}/{config.team_slug} has "
        f"{len(team_members)} member(s)"
    )

    result = select_reviewers(
        SelectionRequest(
            desired_total=config.desired_reviewers,
            team_members=team_members,
            existing_team_reviewer_count=existing_reviewers,
            pr_author_login=author_login,
            requested_logins=requested_logins,
        )
    )
    report_selection(config, result)

    if result.logins_to_request:
        client.request_reviewers(
            context.owner,
            context.repo,
            context.pull_number,
            result.logins_to_request,
        )
        utilities.info(
            f"✅ Successfully requested reviews from: "
            f"{utilities.format_logins(result.logins_to_request)}"
        )

    return result


def main() -> int:
    try:
        config = load_action_config()
        context = load_pull_request_context()
        client = GitHubClient(config.token)
        request_team_reviewers(config, context, client)
    except Exception as exc:  # noqa: BLE001
        utilities.set_failed(str(exc) or f"Unknown error: {exc!r}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
