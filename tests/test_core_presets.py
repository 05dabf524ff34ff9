"""Tests for chromazone.core.presets module."""

from __future__ import annotations

from rich.style import Style

from chromazone.core.presets import BUILTIN_STYLES, diff, get_builtin


class TestDiffPreset:
    """Tests for the diff preset."""

    def test_three_patterns(self):
        assert len(diff()) == 3

    def test_styles(self):
        styles = [ms.style for ms in diff()]
        assert styles == [
            Style(color="green"),
            Style(color="red"),
            Style(color="yellow"),
        ]

    def test_anchored_to_line_start(self):
        ps = diff()
        assert ps.find_earliest_match("a + b") is None
        assert ps.find_earliest_match("x -- y") is None

    def test_hunk_header_matches_whole_line(self):
        found = diff().find_earliest_match("@@ -1,2 +1,2 @@ def main():")
        assert found is not None
        match, ms = found
        assert match.group() == "@@ -1,2 +1,2 @@ def main():"
        assert ms.style == Style(color="yellow")


class TestGetBuiltin:
    """Tests for get_builtin function."""

    def test_known(self):
        assert get_builtin("diff") == diff()

    def test_unknown(self):
        assert get_builtin("nope") is None

    def test_registry(self):
        assert "diff" in BUILTIN_STYLES
