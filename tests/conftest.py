"""Shared pytest fixtures and Hypothesis configuration."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
from hypothesis import Verbosity, settings

from validstring_utils.idcard import ChineseResidentIdChecker, set_default_id_checker

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def reset_default_id_checker() -> Iterator[None]:
    """Tests that swap the shared ID checker must not leak it."""
    yield
    set_default_id_checker(None)


@pytest.fixture
def fixed_checker() -> ChineseResidentIdChecker:
    """ID checker whose 'today' is pinned to 2024-06-01."""
    return ChineseResidentIdChecker(today=lambda: date(2024, 6, 1))


@pytest.fixture
def maven_tree(tmp_path):
    """A small ~/.m2-like tree.

    repo/
      a/lib.jar
      a/lib.jar.lastUpdated
      b/c/only.lastUpdated
      empty/
    """
    root = tmp_path / "repo"
    (root / "a").mkdir(parents=True)
    (root / "a" / "lib.jar").write_text("jar")
    (root / "a" / "lib.jar.lastUpdated").write_text("marker")
    (root / "b" / "c").mkdir(parents=True)
    (root / "b" / "c" / "only.lastUpdated").write_text("marker")
    (root / "empty").mkdir()
    return root
