"""Split a line into unmatched and matched regions.

The scanner walks a line once, asking the pattern set for the leftmost match
in the text not yet covered. Text in front of a match is emitted first as an
unmatched region while the match waits in a one-slot buffer, so every
character of the line ends up in exactly one region, in order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rich.style import Style

from chromazone.core.patterns import PatternSet


@dataclass(frozen=True)
class Unmatched:
    """Text printed verbatim."""

    text: str


@dataclass(frozen=True)
class Matched:
    """Text matched by a pattern, printed with ``style``."""

    text: str
    style: Style


Region = Unmatched | Matched


class RegionScanner:
    """Iterator over the regions of one line.

    State is the text not scanned yet plus an optional match that was found
    but not emitted yet.
    """

    def __init__(self, line: str, pattern_set: PatternSet):
        self.line = line
        self.pattern_set = pattern_set
        self._remaining = line
        self._pending: Matched | None = None

    def __iter__(self) -> Iterator[Region]:
        return self

    def __next__(self) -> Region:
        if self._pending is not None:
            region, self._pending = self._pending, None
            return region

        if not self._remaining:
            raise StopIteration

        found = self.pattern_set.find_earliest_match(self._remaining)
        if found is None:
            text, self._remaining = self._remaining, ""
            return Unmatched(text)

        match, match_style = found
        start, end = match.span()
        text = self._remaining[:start]
        matched = Matched(match.group(), match_style.style)
        # Advance past the whole match, not just to its start
        self._remaining = self._remaining[end:]

        if start == 0:
            return matched

        self._pending = matched
        return Unmatched(text)


def scan(line: str, pattern_set: PatternSet) -> RegionScanner:
    """Return a lazy iterator over the regions of ``line``."""
    return RegionScanner(line, pattern_set)
