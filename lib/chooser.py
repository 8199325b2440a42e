"""
Reviewer / Assignee Selection

Picks reviewers and assignees for a pull request from the configured pools.

SOURCES (in the order they contribute to the result):
1. FREEDOM TEAMS: cross-cutting teams. If the PR author belongs to one or
   more of them, N picks are drawn from each of the author's teams.
   Otherwise N picks are drawn from the members of all freedom teams.
2. REVIEW GROUPS: N picks from EVERY group, groups kept in config order.
3. FLAT POOL: N picks from the "reviewers" list. Entries such as "/team" or
   "org/team" become team reviewers, everything else user reviewers.

RULES:
- The PR author is never picked
- N = 0 means "everybody in the pool"
- "skipUsers" are removed from the final lists
- Duplicates across sources are dropped, the first occurrence wins

EXAMPLE:
Author: owner
Freedom teams: teamA = [owner, teamA-1], teamB = [teamB-1]
Reviewers: [reviewer-1]
Number of reviewers: 1
Result: reviewers = [teamA-1, reviewer-1], team_reviewers = []

All functions are pure. Randomness comes from the optional "rng" argument
(e.g. random.Random(seed)); the module level random source is used otherwise.
"""

import random
from typing import Dict, Iterable, List, Optional, Sequence

from lib.data_types import (
    AssignConfig,
    Candidate,
    ReviewerAssignment,
    Selection,
)
from lib.env_constants import ASSIGN_AUTHOR


def includes_skip_keywords(title: str, skip_words: Iterable[str]) -> bool:
    """True if any skip word is a case-insensitive substring of the title."""
    lowered_title = title.lower()
    return any(word.lower() in lowered_title for word in skip_words)


def sample_names(
    names: Sequence[str], number_of_names: int, rng=None
) -> List[str]:
    """
    Draw "number_of_names" distinct positions of "names" at random.

    A number of 0 or less selects every name, in the original order.
    """
    if number_of_names <= 0:
        return list(names)
    rng = rng or random
    return rng.sample(list(names), min(number_of_names, len(names)))


def without(names: Iterable[str], excluded: Optional[str]) -> List[str]:
    return [name for name in names if excluded is None or name != excluded]


def dedupe(names: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping the first occurrence of each."""
    return list(dict.fromkeys(names))


def classify(identifiers: Iterable[str]) -> Selection:
    """Split identifiers into plain users and slash-stripped team names."""
    selection = Selection()
    for identifier in identifiers:
        candidate = Candidate.parse(identifier)
        if candidate.is_team:
            selection.teams.append(candidate.name)
        else:
            selection.users.append(candidate.name)
    return selection


def choose_users(
    candidates: Sequence[str],
    desired_number: int,
    filter_user: Optional[str] = None,
    rng=None,
) -> Selection:
    """
    Pick users and teams from a flat pool.

    Args:
        candidates: Pool of user handles and "/team" or "org/team" references
        desired_number: How many to pick (0 or less = the whole pool)
        filter_user: Identifier to leave out, typically the PR author
        rng: Optional random source with a "sample" method

    Returns:
        Selection with the picked users and team names
    """
    filtered = without(candidates, filter_user)
    return classify(sample_names(filtered, desired_number, rng))


def choose_users_from_groups(
    owner: str,
    groups: Dict[str, List[str]],
    desired_number: int,
    rng=None,
) -> List[str]:
    """
    Pick "desired_number" identifiers from every group, owner excluded.

    Groups are visited in mapping order and their picks concatenated.
    Identifiers are returned as configured (no team classification).
    """
    users: List[str] = []
    for members in groups.values():
        remaining = without(members or [], owner)
        users.extend(sample_names(remaining, desired_number, rng))
    return users


def choose_users_from_freedom_teams(
    owner: str,
    teams: Dict[str, List[str]],
    desired_number: int,
    rng=None,
) -> List[str]:
    """
    Pick reviewers from the freedom teams.

    Args:
        owner: PR author, never picked
        teams: Freedom team name -> members
        desired_number: Picks per owner team, or in total when the owner
            is not a member of any freedom team
        rng: Optional random source with a "sample" method

    Returns:
        Flat list of picked identifiers
    """
    owner_teams = {
        name: members
        for name, members in teams.items()
        if members and owner in members
    }
    if owner_teams:
        return choose_users_from_groups(owner, owner_teams, desired_number, rng)

    everyone = dedupe(
        member for members in teams.values() for member in (members or [])
    )
    return sample_names(without(everyone, owner), desired_number, rng)


def choose_reviewers(
    owner: str, config: AssignConfig, rng=None
) -> ReviewerAssignment:
    """
    Combine freedom team, review group and flat pool picks into the final
    reviewer lists.
    """
    reviewers: List[str] = []
    team_reviewers: List[str] = []

    if config.use_freedom_teams:
        reviewers.extend(
            choose_users_from_freedom_teams(
                owner, config.freedom_teams, config.number_of_reviewers, rng
            )
        )

    if config.use_review_groups:
        reviewers.extend(
            choose_users_from_groups(
                owner, config.review_groups, config.number_of_reviewers, rng
            )
        )

    if config.add_reviewers:
        chosen = choose_users(
            config.reviewers, config.number_of_reviewers, owner, rng
        )
        reviewers.extend(chosen.users)
        team_reviewers.extend(chosen.teams)

    skip_users = set(config.skip_users)
    return ReviewerAssignment(
        reviewers=dedupe(
            name for name in reviewers if name not in skip_users
        ),
        team_reviewers=dedupe(
            name for name in team_reviewers if name not in skip_users
        ),
    )


def choose_assignees(owner: str, config: AssignConfig, rng=None) -> List[str]:
    """
    Pick assignees.

    "addAssignees: author" assigns the PR author and nothing else. Otherwise
    assignee groups and the flat pool contribute like their reviewer
    counterparts. The flat pool falls back to "reviewers" when "assignees"
    is empty, and the count falls back to "numberOfReviewers" when
    "numberOfAssignees" is 0. Teams cannot be assignees and are dropped.
    """
    if config.add_assignees == ASSIGN_AUTHOR:
        return [owner]

    desired_number = config.number_of_assignees or config.number_of_reviewers
    assignees: List[str] = []

    if config.use_assignee_groups:
        assignees.extend(
            choose_users_from_groups(
                owner, config.assignee_groups, desired_number, rng
            )
        )

    if config.add_assignees is True:
        candidates = config.assignees or config.reviewers
        assignees.extend(
            choose_users(candidates, desired_number, owner, rng).users
        )

    skip_users = set(config.skip_users)
    return dedupe(name for name in assignees if name not in skip_users)
