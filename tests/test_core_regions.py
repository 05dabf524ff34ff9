"""Tests for chromazone.core.regions module."""

from __future__ import annotations

import pytest
from rich.style import Style

from chromazone.core.patterns import MatchStyle, PatternSet, compile_pattern
from chromazone.core.presets import diff
from chromazone.core.regions import Matched, RegionScanner, Unmatched, scan

RED = Style(color="red")
BLUE = Style(color="blue")


def make_set(*pairs: tuple[str, Style]) -> PatternSet:
    return PatternSet(MatchStyle(compile_pattern(src), style) for src, style in pairs)


def texts(regions) -> list[str]:
    return [r.text for r in regions]


class TestRegionScanner:
    """Tests for RegionScanner iteration."""

    def test_no_match(self):
        regions = RegionScanner("haystack", make_set(("needle", RED)))
        assert next(regions) == Unmatched("haystack")
        with pytest.raises(StopIteration):
            next(regions)

    def test_match_in_the_middle(self):
        regions = list(scan("a needle in the haystack", make_set(("needle", RED))))
        assert regions == [
            Unmatched("a "),
            Matched("needle", RED),
            Unmatched(" in the haystack"),
        ]

    def test_match_at_start(self):
        regions = list(scan("needle!", make_set(("needle", RED))))
        assert regions == [Matched("needle", RED), Unmatched("!")]

    def test_whole_line_match(self):
        regions = list(scan("needle", make_set(("needle", RED))))
        assert regions == [Matched("needle", RED)]

    def test_empty_line(self):
        assert list(scan("", make_set(("x", RED)))) == []

    def test_empty_pattern_set(self):
        assert list(scan("some text", PatternSet())) == [Unmatched("some text")]

    def test_leftmost_wins(self):
        regions = list(scan("xx bar foo", make_set(("foo", RED), ("bar", BLUE))))
        matched = [r for r in regions if isinstance(r, Matched)]
        assert matched[0] == Matched("bar", BLUE)
        assert matched[1] == Matched("foo", RED)

    def test_separator_between_matches_kept(self):
        regions = list(scan("foo bar", make_set(("foo", RED), ("bar", BLUE))))
        assert regions == [Matched("foo", RED), Unmatched(" "), Matched("bar", BLUE)]

    def test_match_after_unmatched_not_repeated(self):
        regions = list(scan("xfooy", make_set(("foo", RED))))
        assert regions == [Unmatched("x"), Matched("foo", RED), Unmatched("y")]

    def test_adjacent_matches(self):
        regions = list(scan("foobar", make_set(("foo", RED), ("bar", BLUE))))
        assert regions == [Matched("foo", RED), Matched("bar", BLUE)]

    def test_repeated_matches(self):
        regions = list(scan("a-a-a", make_set(("a", RED))))
        assert texts(regions) == ["a", "-", "a", "-", "a"]
        assert all(isinstance(r, Matched) for r in regions[::2])

    def test_zero_width_pattern_terminates(self):
        regions = list(scan("bab", make_set(("a*", RED))))
        assert regions == [Unmatched("b"), Matched("a", RED), Unmatched("b")]

    def test_only_zero_width_matches(self):
        regions = list(scan("abc", make_set(("^", RED), (r"\b", BLUE))))
        assert regions == [Unmatched("abc")]

    def test_anchor_applies_to_remaining_text(self):
        regions = list(scan("aaa", make_set(("^a", RED))))
        assert regions == [Matched("a", RED)] * 3

    def test_anchor_after_buffered_match(self):
        regions = list(scan("-xab", make_set(("x", BLUE), ("^a", RED))))
        assert regions == [
            Unmatched("-"),
            Matched("x", BLUE),
            Matched("a", RED),
            Unmatched("b"),
        ]

    def test_matched_regions_never_empty(self):
        regions = scan("x y  z", make_set((r"\s*", RED), ("y", BLUE)))
        for region in regions:
            assert region.text

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "plain text",
            "foo bar baz foo",
            "foofoofoo",
            "   leading and trailing   ",
            "unicode: héllo wörld foo",
            "tabs\tand\tfoo\tbar",
        ],
    )
    def test_lossless(self, line: str):
        ps = make_set(("foo", RED), ("ba[rz]", BLUE), (r"\s+", Style(bold=True)))
        regions = list(scan(line, ps))
        assert "".join(texts(regions)) == line
        assert all(r.text for r in regions)

    def test_diff_preset_lines(self):
        ps = diff()
        assert list(scan("unchanged", ps)) == [Unmatched("unchanged")]
        (region,) = scan("+added", ps)
        assert isinstance(region, Matched)
        assert region.text == "+added"
