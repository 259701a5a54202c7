"""Tests for nested heading path resolution."""

import pytest

from mcp_obsidian.markdown import (
    MatchRule,
    PathNotFound,
    build_nested_structure,
    classify,
    resolve_heading_target,
    resolve_nested_path,
    split_nested_path,
)
from mcp_obsidian.markdown.resolver import clean_title, match_rule


def build(text):
    return build_nested_structure(classify(text))


class TestMatchRules:
    def test_exact_is_case_insensitive(self):
        assert match_rule("Setup", "setup") is MatchRule.EXACT

    def test_cleaned_exact_ignores_emoji(self):
        assert match_rule("🔧 Troubleshooting", "Troubleshooting") is MatchRule.CLEANED_EXACT

    def test_contains_and_contained(self):
        assert match_rule("Setup guide", "setup") is MatchRule.CONTAINS
        assert match_rule("Setup", "setup guide") is MatchRule.CONTAINED

    def test_no_match(self):
        assert match_rule("Intro", "Setup") is None

    def test_emptied_titles_never_match(self):
        assert clean_title("🚀✨") == ""
        assert match_rule("🚀✨", "Setup") is None
        assert match_rule("Setup", "🚀") is None

    def test_rule_order(self):
        assert MatchRule.EXACT < MatchRule.CLEANED_EXACT < MatchRule.CONTAINS < MatchRule.CONTAINED


class TestSplitNestedPath:
    def test_trims_and_drops_empty_segments(self):
        assert split_nested_path(" A  ->  B -> ") == ["A", "B"]

    def test_single_segment(self):
        assert split_nested_path("Setup") == ["Setup"]


class TestResolveNestedPath:
    def test_top_sub_scenario(self):
        forest = build("# Top\n## Sub\nSome text.")
        node = resolve_nested_path(forest, ["Top", "Sub"])
        assert node.title == "Sub"
        assert node.level == 2

    def test_exact_match_beats_substring_regardless_of_order(self):
        forest = build("# setup guide\nguide text\n# Setup\nsetup text")
        node = resolve_nested_path(forest, ["Setup"])
        assert node.title == "Setup"
        assert node.element.line == 3

    def test_emoji_decorated_headings(self):
        forest = build("# 🔧 Troubleshooting\n## Common Issues ⚠️\nRestart it.")
        node = resolve_nested_path(forest, ["Troubleshooting", "Common Issues"])
        assert node.title == "Common Issues ⚠️"

    def test_not_found_lists_top_level_headings(self):
        forest = build("# Intro\n## Details\n# Setup")
        result = resolve_nested_path(forest, ["Nope"])
        assert isinstance(result, PathNotFound)
        assert result.available == ["Intro", "Setup"]
        assert result.target == "Nope"

    def test_empty_path_is_not_found(self):
        forest = build("# Intro")
        result = resolve_nested_path(forest, ["  ", ""])
        assert isinstance(result, PathNotFound)
        assert result.available == ["Intro"]

    def test_backtracks_to_later_sibling(self):
        forest = build("# Notes\n## Alpha\n# Notes archive\n## Beta")
        node = resolve_nested_path(forest, ["Notes", "Beta"])
        assert node.title == "Beta"

    def test_content_nodes_are_not_waypoints(self):
        forest = build("# A\nSetup paragraph")
        assert isinstance(resolve_nested_path(forest, ["A", "Setup"]), PathNotFound)

    def test_strict_requires_root_anchor(self):
        forest = build("# Guide\n## Install\n### Linux")
        assert isinstance(resolve_nested_path(forest, ["Install", "Linux"]), PathNotFound)
        assert isinstance(resolve_nested_path(forest, ["Guide", "Linux"]), PathNotFound)

    def test_permissive_starts_below_root(self):
        forest = build("# Guide\n## Install\n### Linux")
        node = resolve_nested_path(forest, ["Install", "Linux"], permissive=True)
        assert node.title == "Linux"

    def test_permissive_skips_intermediate_headings(self):
        forest = build("# Guide\n## Install\n### Linux")
        node = resolve_nested_path(forest, ["Guide", "Linux"], permissive=True)
        assert node.title == "Linux"

    def test_permissive_still_needs_every_segment(self):
        forest = build("# Z\n## Y")
        assert isinstance(resolve_nested_path(forest, ["X", "Y"], permissive=True), PathNotFound)

    def test_permissive_finds_deep_single_segment(self):
        forest = build("# Guide\n## Install\n### Linux")
        assert resolve_nested_path(forest, ["Linux"], permissive=True).title == "Linux"
        assert isinstance(resolve_nested_path(forest, ["Linux"]), PathNotFound)


class TestResolveHeadingTarget:
    TEXT = "# Intro\n## Next Steps\n# Setup\n## next steps"

    def test_exact_spelling_wins(self):
        node = resolve_heading_target(build(self.TEXT), "next steps")
        assert node.element.line == 4

    def test_case_insensitive_fallback(self):
        node = resolve_heading_target(build("# Intro\n## Next Steps"), "NEXT STEPS")
        assert node.title == "Next Steps"

    def test_not_found_lists_every_heading(self):
        result = resolve_heading_target(build(self.TEXT), "Missing")
        assert isinstance(result, PathNotFound)
        assert result.available == ["Intro", "Next Steps", "Setup", "next steps"]

    @pytest.mark.parametrize("target", ["Intro", "  Intro  "])
    def test_target_is_trimmed(self, target):
        assert resolve_heading_target(build(self.TEXT), target).title == "Intro"


class TestDeepHeadingChains:
    TEXT = "\n".join("#" * n + f" H{n:04d}" for n in range(1, 1201))

    def test_strict_path_through_every_level(self):
        forest = build(self.TEXT)
        node = resolve_nested_path(forest, [f"H{n:04d}" for n in range(1, 1201)])
        assert node.title == "H1200"
        assert len(node.path) == 1200

    def test_permissive_path_skips_to_the_bottom(self):
        forest = build(self.TEXT)
        node = resolve_nested_path(forest, ["H0001", "H1200"], permissive=True)
        assert node.title == "H1200"

    def test_strict_path_cannot_skip_levels(self):
        forest = build(self.TEXT)
        result = resolve_nested_path(forest, ["H0001", "H0003"])
        assert isinstance(result, PathNotFound)

    def test_bare_title_at_the_bottom(self):
        node = resolve_heading_target(build(self.TEXT), "h1200")
        assert node.title == "H1200"
