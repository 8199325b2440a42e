"""
Pull Request Auto-Assign

Picks reviewers and assignees for the pull request that triggered the
workflow and emits them for the next workflow step.

BUSINESS LOGIC:
1. Skip rules (nothing is assigned when any of them applies):
   - The PR title contains one of "skipKeywords" (case-insensitive)
   - The PR is a draft and "runOnDraft" is not set
   - "filterLabels.include" is set and the PR has none of those labels
   - The PR has any label from "filterLabels.exclude"

2. Reviewers come from (see lib/chooser.py):
   a) FREEDOM TEAMS, when "useFreedomTeams" is set
   b) REVIEW GROUPS, when "useReviewGroups" is set
   c) FLAT POOL, when "addReviewers" is set

3. Assignees come from the assignee groups and/or the flat assignee pool,
   or are just the PR author with "addAssignees: author".

OUTPUT:
- The plan is printed as JSON
- When GITHUB_OUTPUT is set, "skipped", "reviewers", "team_reviewers",
  "assignees" and "plan" step outputs are written for the workflow, which
  performs the actual review request

Exit codes:
    0: Plan computed (including skipped plans)
    1: Error (bad configuration, missing event payload, ...)

Environment Variables:
    CONFIG_PATH: YAML configuration (default: .github/auto_assign.yml)
    GITHUB_EVENT_PATH: Pull request event payload (set by GitHub Actions)
    GITHUB_OUTPUT: Step output file (set by GitHub Actions)
"""

import sys
import traceback
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# pylint: next-line: disable=wrong-import-position
from lib.chooser import (  # noqa: E402
    choose_assignees,
    choose_reviewers,
    includes_skip_keywords,
)
from lib.config_loader import load_config_from_file  # noqa: E402
from lib.data_types import (  # noqa: E402
    AssignConfig,
    AssignmentPlan,
    PullRequestEvent,
)
from lib.env_constants import ASSIGN_AUTHOR  # noqa: E402
from lib.utilities import (  # noqa: E402
    read_pull_request_event,
    write_plan_to_output,
)


def validate_config(config: AssignConfig) -> None:
    """
    Raises:
        ValueError: If a group option is enabled without any group
    """
    if config.use_review_groups and not config.review_groups:
        raise ValueError(
            "Error in configuration file to do with using review groups. "
            "Expected 'reviewGroups' variable to be set because the "
            "variable 'useReviewGroups' = true."
        )
    if config.use_assignee_groups and not config.assignee_groups:
        raise ValueError(
            "Error in configuration file to do with using assignee groups. "
            "Expected 'assigneeGroups' variable to be set because the "
            "variable 'useAssigneeGroups' = true."
        )


def get_skip_reason(event: PullRequestEvent, config: AssignConfig) -> str:
    """Why assignment should be skipped for this PR, or "" if it should run."""
    if config.skip_keywords and includes_skip_keywords(
        event.title, config.skip_keywords
    ):
        return "PR title includes skip-keywords"

    if event.draft and not config.run_on_draft:
        return "PR type is draft"

    return ""


def get_label_skip_reason(
    event: PullRequestEvent, config: AssignConfig
) -> str:
    include_labels = config.filter_labels.include
    if include_labels and not set(include_labels) & set(event.labels):
        return "PR is not tagged with any of the filterLabels.include"

    exclude_labels = config.filter_labels.exclude
    if exclude_labels and set(exclude_labels) & set(event.labels):
        return "PR is tagged with one of the filterLabels.exclude"

    return ""


def skipped_plan(skip_reason: str) -> AssignmentPlan:
    print(
        f"⏭️  Skips the process to add reviewers/assignees "
        f"since {skip_reason}"
    )
    return AssignmentPlan(skipped=True, skip_reason=skip_reason)


def handle_pull_request(
    event: PullRequestEvent, config: AssignConfig, rng=None
) -> AssignmentPlan:
    """
    Decide who to request a review from and who to assign.

    Args:
        event: The pull request that triggered the run
        config: Auto-assign configuration
        rng: Optional random source, see lib/chooser.py

    Returns:
        The assignment plan. "skipped" is set when a skip rule applied.

    Raises:
        ValueError: If the configuration enables groups without any group
    """
    # Keyword and draft skips take precedence over group validation.
    skip_reason = get_skip_reason(event, config)
    if skip_reason:
        return skipped_plan(skip_reason)

    validate_config(config)

    skip_reason = get_label_skip_reason(event, config)
    if skip_reason:
        return skipped_plan(skip_reason)

    owner = event.author
    reviewer_assignment = choose_reviewers(owner, config, rng)
    print(f"👀 Reviewers: {reviewer_assignment.reviewers}")
    print(f"👥 Team reviewers: {reviewer_assignment.team_reviewers}")

    assignees = []
    if (
        config.add_assignees is True
        or config.add_assignees == ASSIGN_AUTHOR
        or config.use_assignee_groups
    ):
        assignees = choose_assignees(owner, config, rng)
        print(f"📌 Assignees: {assignees}")

    return AssignmentPlan(
        reviewers=reviewer_assignment.reviewers,
        team_reviewers=reviewer_assignment.team_reviewers,
        assignees=assignees,
    )


def main() -> None:
    try:
        config = load_config_from_file()
        event = read_pull_request_event()
        print(f"📋 Pull request #{event.number} by {event.author}: "
              f"{event.title}")

        plan = handle_pull_request(event, config)

        print(plan.to_json())
        if write_plan_to_output(plan):
            print("✅ Plan written to the workflow outputs")
    except Exception:  # noqa: BLE001 # pylint: disable=broad-except
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
