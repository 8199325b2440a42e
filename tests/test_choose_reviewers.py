import random

import pytest

from lib.chooser import choose_assignees, choose_reviewers
from lib.data_types import AssignConfig
from tests.conftest import OWNER
from tests.utils import mutate_config


class TestChooseReviewers:
    def test_combines_global_reviewers_with_team_reviewers(
        self, config: AssignConfig
    ) -> None:
        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == ["teamA-1", "reviewer-1"]
        assert chosen.team_reviewers == []

    def test_does_not_select_duplicate_reviewers(
        self, config: AssignConfig
    ) -> None:
        mutate_config(config, freedom_teams={"teamA": ["owner", "reviewer-1"]})

        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == ["reviewer-1"]
        assert chosen.team_reviewers == []

    def test_freedom_teams_then_groups_then_flat_pool(
        self, config: AssignConfig
    ) -> None:
        mutate_config(
            config,
            use_review_groups=True,
            review_groups={"groupA": ["owner", "groupA-1"]},
            reviewers=["reviewer-1", "/core"],
            number_of_reviewers=0,
        )

        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == ["teamA-1", "groupA-1", "reviewer-1"]
        assert chosen.team_reviewers == ["core"]

    def test_group_team_references_stay_in_reviewers(
        self, config: AssignConfig
    ) -> None:
        mutate_config(
            config,
            use_freedom_teams=False,
            use_review_groups=True,
            review_groups={"groupA": ["/core"]},
            add_reviewers=False,
        )

        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == ["/core"]
        assert chosen.team_reviewers == []

    def test_skip_users_are_removed(self, config: AssignConfig) -> None:
        mutate_config(
            config,
            reviewers=["reviewer-1", "bot", "org/bots"],
            number_of_reviewers=0,
            skip_users=["bot", "bots", "teamA-1"],
        )

        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == ["reviewer-1"]
        assert chosen.team_reviewers == []

    def test_disabled_sources_contribute_nothing(
        self, config: AssignConfig
    ) -> None:
        mutate_config(config, use_freedom_teams=False, add_reviewers=False)

        chosen = choose_reviewers(OWNER, config)

        assert chosen.reviewers == []
        assert chosen.team_reviewers == []

    @pytest.mark.parametrize("seed", range(20))
    def test_owner_never_chosen_and_no_duplicates(
        self, config: AssignConfig, seed: int
    ) -> None:
        mutate_config(
            config,
            use_review_groups=True,
            review_groups={
                "groupA": ["owner", "a", "b", "/core"],
                "groupB": ["b", "c", "owner"],
            },
            freedom_teams={"teamA": ["a", "b", "c"], "teamB": ["owner", "c"]},
            reviewers=["a", "b", "c", "owner", "/core", "org/core"],
            number_of_reviewers=2,
        )

        chosen = choose_reviewers(OWNER, config, random.Random(seed))

        assert OWNER not in chosen.reviewers
        assert OWNER not in chosen.team_reviewers
        assert len(set(chosen.reviewers)) == len(chosen.reviewers)
        assert len(set(chosen.team_reviewers)) == len(chosen.team_reviewers)


class TestChooseAssignees:
    def test_assign_the_author(self, config: AssignConfig) -> None:
        mutate_config(config, add_assignees="author", assignees=["a", "b"])

        assert choose_assignees(OWNER, config) == [OWNER]

    def test_assignees_fall_back_to_reviewers(
        self, config: AssignConfig
    ) -> None:
        mutate_config(
            config,
            add_assignees=True,
            reviewers=["reviewer-1", "owner", "/team"],
            number_of_reviewers=0,
        )

        assert choose_assignees(OWNER, config) == ["reviewer-1"]

    def test_assignee_pool_and_number(self, config: AssignConfig) -> None:
        mutate_config(
            config,
            add_assignees=True,
            assignees=["a", "b", "c", "owner"],
            number_of_assignees=2,
        )

        assignees = choose_assignees(OWNER, config)

        assert len(assignees) == 2
        assert set(assignees) <= {"a", "b", "c"}

    def test_assignee_groups(self, config: AssignConfig) -> None:
        mutate_config(
            config,
            use_assignee_groups=True,
            assignee_groups={"groupA": ["owner", "a"], "groupB": ["a"]},
        )

        assert choose_assignees(OWNER, config) == ["a"]

    def test_nothing_enabled(self, config: AssignConfig) -> None:
        assert choose_assignees(OWNER, config) == []

    @pytest.mark.parametrize("seed", range(10))
    def test_skip_users_are_never_assigned(
        self, config: AssignConfig, seed: int
    ) -> None:
        mutate_config(
            config,
            add_assignees=True,
            use_assignee_groups=True,
            assignee_groups={"groupA": ["b", "c"]},
            assignees=["a", "b", "c"],
            number_of_assignees=0,
            number_of_reviewers=0,
            skip_users=["b"],
        )

        assignees = choose_assignees(OWNER, config, random.Random(seed))

        assert "b" not in assignees
        assert assignees == ["c", "a"]

    def test_number_falls_back_to_number_of_reviewers(
        self, config: AssignConfig
    ) -> None:
        mutate_config(
            config,
            add_assignees=True,
            assignees=["a", "b", "c"],
            number_of_assignees=0,
            number_of_reviewers=1,
        )

        assignees = choose_assignees(OWNER, config)

        assert len(assignees) == 1
        assert assignees[0] in {"a", "b", "c"}
