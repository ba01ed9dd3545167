"""Behaviour-layer stories: greeting and demo lines."""

from __future__ import annotations

import pytest

from nulljoin.domain import behaviors


@pytest.mark.os_agnostic
def test_build_greeting_returns_canonical_text() -> None:
    """Verify build_greeting returns the canonical greeting string."""
    assert behaviors.build_greeting() == "Hello, world!"


@pytest.mark.os_agnostic
def test_build_fruit_list_keeps_absence_marker_in_place() -> None:
    """The demo list holds the absent entry at index 1."""
    assert behaviors.build_fruit_list() == ["apple", None, "banana", "cherry"]


@pytest.mark.os_agnostic
def test_build_fruit_list_returns_a_fresh_list_each_call() -> None:
    """Mutating one demo list must not leak into the next."""
    first = behaviors.build_fruit_list()
    first.append("damson")

    assert behaviors.build_fruit_list() == ["apple", None, "banana", "cherry"]


@pytest.mark.os_agnostic
def test_build_demo_lines_skips_the_absent_fruit() -> None:
    """The demo prints the greeting then the fruits without the absent entry."""
    assert behaviors.build_demo_lines() == ("Hello, world!", "apple, banana, cherry")
