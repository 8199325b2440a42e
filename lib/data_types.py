"""Data type definitions for the pull request auto-assign system."""

import json
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Union


@dataclass(frozen=True)
class Candidate:
    """
    A reviewer/assignee candidate parsed from its configured identifier.

    Attributes:
        name: User handle, or team name with the slash prefix stripped
        is_team: True when the identifier referenced a team
    """

    name: str
    is_team: bool = False

    @classmethod
    def parse(cls, identifier: str) -> "Candidate":
        """
        "/team" and "org/team" are team references, anything else is a user.

        The team name is the segment between the first and the second
        slash, so "org/team/extra" is the team "team".
        """
        if "/" in identifier:
            return cls(name=identifier.split("/")[1], is_team=True)
        return cls(name=identifier)


@dataclass
class Selection:
    """
    Result of one sampling pass over a pool.

    Attributes:
        users: Plain user handles
        teams: Team names (slash stripped)
    """

    users: List[str] = field(default_factory=list)
    teams: List[str] = field(default_factory=list)


@dataclass
class ReviewerAssignment:
    reviewers: List[str] = field(default_factory=list)
    team_reviewers: List[str] = field(default_factory=list)


@dataclass
class FilterLabels:
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class AssignConfig:
    """
    Auto-assign configuration, one attribute per option of the YAML file.

    Attributes:
        add_reviewers: Enable flat-pool reviewer selection
        add_assignees: Enable flat-pool assignee selection, or "author" to
            assign the PR author
        reviewers: Flat reviewer pool
        assignees: Flat assignee pool (falls back to reviewers when empty)
        number_of_reviewers: Picks per source for reviewers (0 = everyone)
        number_of_assignees: Picks per source for assignees
            (0 = use number_of_reviewers)
        skip_keywords: Title substrings that suppress assignment
        use_review_groups: Enable group-based reviewer selection
        use_assignee_groups: Enable group-based assignee selection
        use_freedom_teams: Enable freedom-team reviewer selection
        review_groups: Review group name -> pool
        assignee_groups: Assignee group name -> pool
        freedom_teams: Freedom team name -> pool
        skip_users: Identifiers always removed from the final result
        run_on_draft: Assign on draft pull requests too
        filter_labels: Label include/exclude filters
    """

    add_reviewers: bool = False
    add_assignees: Union[bool, str] = False
    reviewers: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)
    number_of_reviewers: int = 0
    number_of_assignees: int = 0
    skip_keywords: List[str] = field(default_factory=list)
    use_review_groups: bool = False
    use_assignee_groups: bool = False
    use_freedom_teams: bool = False
    review_groups: Dict[str, List[str]] = field(default_factory=dict)
    assignee_groups: Dict[str, List[str]] = field(default_factory=dict)
    freedom_teams: Dict[str, List[str]] = field(default_factory=dict)
    skip_users: List[str] = field(default_factory=list)
    run_on_draft: bool = False
    filter_labels: FilterLabels = field(default_factory=FilterLabels)


@dataclass
class PullRequestEvent:
    """The fields of a pull request event payload the handler looks at."""

    author: str
    title: str
    draft: bool = False
    labels: List[str] = field(default_factory=list)
    number: int | None = None


@dataclass
class AssignmentPlan:
    """
    What the calling workflow should request on the pull request.

    Attributes:
        skipped: True when assignment was bypassed
        skip_reason: Human readable reason, empty unless skipped
        reviewers: User handles to request a review from
        team_reviewers: Team names to request a review from
        assignees: User handles to assign
    """

    skipped: bool = False
    skip_reason: str = ""
    reviewers: List[str] = field(default_factory=list)
    team_reviewers: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(asdict(self))
