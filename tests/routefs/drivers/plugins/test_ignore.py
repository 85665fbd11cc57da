"""Tests for the ignore-patterns plugin."""

from __future__ import annotations

import pytest

from routefs.drivers.plugins import IgnorePatternsPlugin


@pytest.fixture
def plugin() -> IgnorePatternsPlugin:
    return IgnorePatternsPlugin(["*.swp", ".git", "drafts/*"])


class TestIgnorePatternsPlugin:
    @pytest.mark.parametrize(
        "route",
        [
            ["site", ".index.md.swp"],
            ["site", "posts", "a.md.swp"],
            ["site", ".git", "HEAD"],
            ["site", "drafts", "wip.md"],
        ],
    )
    def test_matching_routes_dropped(self, plugin: IgnorePatternsPlugin, route: list[str]) -> None:
        assert plugin.matches(route)
        assert plugin.handle_file_change(route) is None

    @pytest.mark.parametrize(
        "route",
        [
            ["site", "index.md"],
            ["site", "posts", "git.md"],
            ["site", "published", "drafts.md"],
        ],
    )
    def test_other_routes_kept(self, plugin: IgnorePatternsPlugin, route: list[str]) -> None:
        assert not plugin.matches(route)
        assert plugin.handle_file_change(route) == [route]

    def test_partition_name_not_matched(self) -> None:
        plugin = IgnorePatternsPlugin([".git"])
        assert plugin.handle_file_change([".git", "notes.md"]) == [[".git", "notes.md"]]

    def test_bare_partition_never_matches(self) -> None:
        plugin = IgnorePatternsPlugin(["*"])
        assert not plugin.matches(["site"])

    def test_patterns_property(self) -> None:
        assert IgnorePatternsPlugin(["a", "b"]).patterns == ("a", "b")
