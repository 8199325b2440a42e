import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())


class ConfigKeys(str, Enum):
    """Option names of the auto-assign YAML configuration file"""

    ADD_REVIEWERS = "addReviewers"
    ADD_ASSIGNEES = "addAssignees"
    REVIEWERS = "reviewers"
    ASSIGNEES = "assignees"
    NUMBER_OF_REVIEWERS = "numberOfReviewers"
    NUMBER_OF_ASSIGNEES = "numberOfAssignees"
    SKIP_KEYWORDS = "skipKeywords"
    USE_REVIEW_GROUPS = "useReviewGroups"
    USE_ASSIGNEE_GROUPS = "useAssigneeGroups"
    USE_FREEDOM_TEAMS = "useFreedomTeams"
    REVIEW_GROUPS = "reviewGroups"
    ASSIGNEE_GROUPS = "assigneeGroups"
    FREEDOM_TEAMS = "freedomTeams"
    SKIP_USERS = "skipUsers"
    RUN_ON_DRAFT = "runOnDraft"
    FILTER_LABELS = "filterLabels"


class FilterLabelKeys(str, Enum):
    """Keys of the filterLabels option"""

    INCLUDE = "include"
    EXCLUDE = "exclude"


# Options holding a flat list of identifiers/strings
LIST_OPTIONS = [
    ConfigKeys.REVIEWERS,
    ConfigKeys.ASSIGNEES,
    ConfigKeys.SKIP_KEYWORDS,
    ConfigKeys.SKIP_USERS,
]

# Options holding a mapping of group name -> list of identifiers
GROUP_OPTIONS = [
    ConfigKeys.REVIEW_GROUPS,
    ConfigKeys.ASSIGNEE_GROUPS,
    ConfigKeys.FREEDOM_TEAMS,
]

BOOL_OPTIONS = [
    ConfigKeys.ADD_REVIEWERS,
    ConfigKeys.USE_REVIEW_GROUPS,
    ConfigKeys.USE_ASSIGNEE_GROUPS,
    ConfigKeys.USE_FREEDOM_TEAMS,
    ConfigKeys.RUN_ON_DRAFT,
]

COUNT_OPTIONS = [
    ConfigKeys.NUMBER_OF_REVIEWERS,
    ConfigKeys.NUMBER_OF_ASSIGNEES,
]

# addAssignees may be a bool or this literal
ASSIGN_AUTHOR = "author"

DEFAULT_CONFIG_PATH = ".github/auto_assign.yml"


def get_config_path() -> str:
    """Path of the YAML configuration, from CONFIG_PATH or the default."""
    return os.environ.get("CONFIG_PATH", "").strip() or DEFAULT_CONFIG_PATH


def get_event_path() -> str | None:
    """Path of the GitHub Actions event payload, if running in a workflow."""
    return os.environ.get("GITHUB_EVENT_PATH") or None


def get_output_path() -> str | None:
    """Path of the GitHub Actions step output file, if any."""
    return os.environ.get("GITHUB_OUTPUT") or None
