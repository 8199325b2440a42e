import json
from typing import Any, Dict, List

from lib.data_types import AssignmentPlan, PullRequestEvent
from lib.env_constants import get_event_path, get_output_path


def parse_pull_request_event(payload: Dict[str, Any]) -> PullRequestEvent:
    """
    Extract the fields used for assignment from a webhook payload.

    Raises:
        ValueError: If the payload has no "pull_request" object
    """
    pull_request = payload.get("pull_request")
    if not pull_request:
        raise ValueError("The webhook payload does not contain a pull request")

    return PullRequestEvent(
        author=(pull_request.get("user") or {}).get("login", ""),
        title=pull_request.get("title") or "",
        draft=bool(pull_request.get("draft", False)),
        labels=[
            label["name"]
            for label in pull_request.get("labels") or []
            if label.get("name")
        ],
        number=pull_request.get("number"),
    )


def read_pull_request_event(event_path: str | None = None) -> PullRequestEvent:
    """
    Read the pull request event payload written by GitHub Actions.

    Args:
        event_path: Path of the JSON payload.
            If None, uses GITHUB_EVENT_PATH from the environment.
    """
    event_path = event_path or get_event_path()
    if not event_path:
        raise ValueError(
            "Event path must be provided either as parameter or "
            "via GITHUB_EVENT_PATH environment variable"
        )
    with open(event_path, encoding="utf-8") as file:
        payload = json.load(file)
    return parse_pull_request_event(payload)


def format_names(names: List[str]) -> str:
    """Comma-separated names, the format workflow outputs use."""
    return ",".join(names)


def write_plan_to_output(
    plan: AssignmentPlan, output_path: str | None = None
) -> bool:
    """
    Append the plan as "key=value" lines to the workflow output file.

    Args:
        plan: Plan to write
        output_path: Output file. If None, uses GITHUB_OUTPUT.

    Returns:
        True if written, False when there is no output file configured
    """
    output_path = output_path or get_output_path()
    if not output_path:
        return False

    lines = [
        f"skipped={str(plan.skipped).lower()}",
        f"reviewers={format_names(plan.reviewers)}",
        f"team_reviewers={format_names(plan.team_reviewers)}",
        f"assignees={format_names(plan.assignees)}",
        f"plan={plan.to_json()}",
    ]
    with open(output_path, "a", encoding="utf-8") as file:
        file.write("\n".join(lines) + "\n")
    return True
