"""Test utilities for building configurations and events in tests."""

from typing import Any, List

from lib.data_types import AssignConfig, PullRequestEvent


def mutate_config(config: AssignConfig, **attributes: Any) -> AssignConfig:
    """
    Set configuration attributes for testing purposes.

    Args:
        config: Configuration to mutate
        attributes: Attribute name -> new value
    """
    for attribute_name, value in attributes.items():
        if not hasattr(config, attribute_name):
            raise AttributeError(f"AssignConfig has no '{attribute_name}'")
        setattr(config, attribute_name, value)
    return config


def make_event(
    title: str = "Add a new feature",
    author: str = "owner",
    draft: bool = False,
    labels: List[str] | None = None,
) -> PullRequestEvent:
    return PullRequestEvent(
        author=author,
        title=title,
        draft=draft,
        labels=labels or [],
        number=1,
    )
