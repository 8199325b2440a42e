"""Test fixtures for pytest."""

import json
import random
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import yaml

from lib.config_loader import config_from_dict
from lib.data_types import AssignConfig

OWNER = "owner"

RAW_CONFIG: Dict[str, Any] = {
    "addReviewers": True,
    "addAssignees": False,
    "reviewers": ["reviewer-1"],
    "assignees": [],
    "numberOfAssignees": 0,
    "numberOfReviewers": 1,
    "skipKeywords": [],
    "useReviewGroups": False,
    "useAssigneeGroups": False,
    "useFreedomTeams": True,
    "reviewGroups": {},
    "assigneeGroups": {},
    "freedomTeams": {
        "teamA": ["owner", "teamA-1"],
        "teamB": ["teamB-1"],
    },
    "skipUsers": [],
}

PULL_REQUEST_EVENT: Dict[str, Any] = {
    "action": "opened",
    "pull_request": {
        "number": 42,
        "title": "Add a new feature",
        "draft": False,
        "user": {"login": OWNER},
        "labels": [{"name": "ready"}],
    },
}


@pytest.fixture(scope="function")
def raw_config() -> Generator[Dict[str, Any], None, None]:
    """Provide a fresh copy of the raw (YAML shaped) configuration."""
    yield deepcopy(RAW_CONFIG)


@pytest.fixture(scope="function")
def config(raw_config: Dict[str, Any]) -> Generator[AssignConfig, None, None]:
    """Provide the parsed configuration."""
    yield config_from_dict(raw_config)


@pytest.fixture(scope="function")
def rng() -> Generator[random.Random, None, None]:
    """Provide a seeded random source."""
    yield random.Random(1234)


@pytest.fixture(scope="function")
def config_file(
    tmp_path: Path, raw_config: Dict[str, Any]
) -> Generator[Path, None, None]:
    """Provide a YAML configuration file with the default test config."""
    path = tmp_path / "auto_assign.yml"
    path.write_text(yaml.safe_dump(raw_config), encoding="utf-8")
    yield path


@pytest.fixture(scope="function")
def event_file(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a pull request event payload file."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(PULL_REQUEST_EVENT), encoding="utf-8")
    yield path
