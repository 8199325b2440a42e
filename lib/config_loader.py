"""
Configuration Loader

Loads the auto-assign configuration from a YAML file
(default: .github/auto_assign.yml, override with CONFIG_PATH).

Expected format (every option is optional):

    addReviewers: true
    addAssignees: author        # true, false or "author"
    numberOfReviewers: 1        # 0 = everybody in the pool
    reviewers:
      - reviewer-1
      - org/team-name           # team reviewer
    useFreedomTeams: true
    freedomTeams:
      teamA:
        - user-a1
    skipKeywords:
      - wip
    filterLabels:
      include: [ready]
      exclude: [do-not-review]
"""
from typing import Any, Dict, List

import yaml

from lib.data_types import AssignConfig, FilterLabels
from lib.env_constants import (
    ASSIGN_AUTHOR,
    BOOL_OPTIONS,
    COUNT_OPTIONS,
    GROUP_OPTIONS,
    LIST_OPTIONS,
    ConfigKeys,
    FilterLabelKeys,
    get_config_path,
)

# YAML option -> AssignConfig attribute
ATTRIBUTE_NAMES = {
    ConfigKeys.ADD_REVIEWERS: "add_reviewers",
    ConfigKeys.ADD_ASSIGNEES: "add_assignees",
    ConfigKeys.REVIEWERS: "reviewers",
    ConfigKeys.ASSIGNEES: "assignees",
    ConfigKeys.NUMBER_OF_REVIEWERS: "number_of_reviewers",
    ConfigKeys.NUMBER_OF_ASSIGNEES: "number_of_assignees",
    ConfigKeys.SKIP_KEYWORDS: "skip_keywords",
    ConfigKeys.USE_REVIEW_GROUPS: "use_review_groups",
    ConfigKeys.USE_ASSIGNEE_GROUPS: "use_assignee_groups",
    ConfigKeys.USE_FREEDOM_TEAMS: "use_freedom_teams",
    ConfigKeys.REVIEW_GROUPS: "review_groups",
    ConfigKeys.ASSIGNEE_GROUPS: "assignee_groups",
    ConfigKeys.FREEDOM_TEAMS: "freedom_teams",
    ConfigKeys.SKIP_USERS: "skip_users",
    ConfigKeys.RUN_ON_DRAFT: "run_on_draft",
}


def parse_name_list(key: str, value: Any) -> List[str]:
    """
    A YAML list of names; null means empty.

    Names are stringified and stripped, blank entries are dropped.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(
            f"Error in configuration file: expected '{key}' to be a list, "
            f"got {type(value).__name__}"
        )
    names = (str(item).strip() for item in value if item is not None)
    return [name for name in names if name]


def parse_groups(key: str, value: Any) -> Dict[str, List[str]]:
    """A YAML mapping of group name -> list of names, in file order."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(
            f"Error in configuration file: expected '{key}' to be a mapping "
            f"of group name to list, got {type(value).__name__}"
        )
    return {
        str(group): parse_name_list(f"{key}.{group}", members)
        for group, members in value.items()
    }


def parse_count(key: str, value: Any) -> int:
    """Selection count. Negative counts are treated as 0 (everybody)."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(
            f"Error in configuration file: expected '{key}' to be an integer"
        )
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Error in configuration file: expected '{key}' to be an "
            f"integer, got {value!r}"
        ) from exc
    if count < 0:
        print(f"Warning: '{key}' is negative ({count}), using 0 instead")
        return 0
    return count


def parse_bool(key: str, value: Any) -> bool:
    """A YAML boolean; null means false. Quoted strings are rejected."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(
            f"Error in configuration file: expected '{key}' to be a "
            f"boolean, got {value!r}"
        )
    return value


def parse_add_assignees(value: Any) -> bool | str:
    if value is None:
        return False
    if isinstance(value, str):
        if value != ASSIGN_AUTHOR:
            raise ValueError(
                "Error in configuration file to do with using addAssignees. "
                "Expected 'addAssignees' variable to be either boolean or "
                f"'{ASSIGN_AUTHOR}'"
            )
        return value
    return parse_bool(ConfigKeys.ADD_ASSIGNEES.value, value)


def parse_filter_labels(value: Any) -> FilterLabels:
    if value is None:
        return FilterLabels()
    if not isinstance(value, dict):
        raise ValueError(
            "Error in configuration file: expected 'filterLabels' to be a "
            "mapping with 'include' and/or 'exclude' lists"
        )
    return FilterLabels(
        include=parse_name_list(
            "filterLabels.include", value.get(FilterLabelKeys.INCLUDE.value)
        ),
        exclude=parse_name_list(
            "filterLabels.exclude", value.get(FilterLabelKeys.EXCLUDE.value)
        ),
    )


def config_from_dict(raw: Dict[str, Any] | None) -> AssignConfig:
    """
    Build an AssignConfig from the parsed YAML document.

    Args:
        raw: Parsed document. None (empty file) gives the default config.
            Unknown keys are ignored.

    Raises:
        ValueError: If an option has the wrong shape
    """
    if raw is None:
        return AssignConfig()
    if not isinstance(raw, dict):
        raise ValueError(
            "Error in configuration file: expected a mapping of options, "
            f"got {type(raw).__name__}"
        )

    values: Dict[str, Any] = {}
    for key in LIST_OPTIONS:
        if key.value in raw:
            values[ATTRIBUTE_NAMES[key]] = parse_name_list(
                key.value, raw[key.value]
            )
    for key in GROUP_OPTIONS:
        if key.value in raw:
            values[ATTRIBUTE_NAMES[key]] = parse_groups(
                key.value, raw[key.value]
            )
    for key in BOOL_OPTIONS:
        if key.value in raw:
            values[ATTRIBUTE_NAMES[key]] = parse_bool(
                key.value, raw[key.value]
            )
    for key in COUNT_OPTIONS:
        if key.value in raw:
            values[ATTRIBUTE_NAMES[key]] = parse_count(
                key.value, raw[key.value]
            )
    if ConfigKeys.ADD_ASSIGNEES.value in raw:
        values["add_assignees"] = parse_add_assignees(
            raw[ConfigKeys.ADD_ASSIGNEES.value]
        )
    if ConfigKeys.FILTER_LABELS.value in raw:
        values["filter_labels"] = parse_filter_labels(
            raw[ConfigKeys.FILTER_LABELS.value]
        )

    return AssignConfig(**values)


def load_config_from_file(config_path: str | None = None) -> AssignConfig:
    """
    Load the configuration YAML file.

    Args:
        config_path: Path of the file. If None, uses CONFIG_PATH from the
            environment or the default .github/auto_assign.yml.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file content is not a valid configuration
    """
    config_path = config_path or get_config_path()
    with open(config_path, encoding="utf-8") as file:
        raw = yaml.safe_load(file)

    config = config_from_dict(raw)
    print(
        f"Config loaded from {config_path}: "
        f"reviewers={len(config.reviewers)}, "
        f"review groups={len(config.review_groups)}, "
        f"freedom teams={len(config.freedom_teams)}, "
        f"number of reviewers={config.number_of_reviewers}"
    )
    return config
