"""Compiled patterns paired with styles, and ordered sets of them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rich.style import Style

from chromazone.core.descriptions import parse_description
from chromazone.core.errors import InvalidPatternError


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile a user-supplied regular expression.

    Raises:
        InvalidPatternError: If the expression does not compile.
    """
    try:
        return re.compile(source)
    except re.error as e:
        raise InvalidPatternError(source, str(e)) from None


@dataclass(frozen=True)
class MatchStyle:
    """A pattern whose matches are painted with ``style``."""

    pattern: re.Pattern[str]
    style: Style

    @classmethod
    def from_source(cls, source: str, description: str) -> MatchStyle:
        """Build a match style from a regex source and a style description."""
        return cls(
            pattern=compile_pattern(source), style=parse_description(description)
        )

    def first_match(self, text: str) -> re.Match[str] | None:
        """Return the first non-empty match in ``text``.

        Zero-width matches are skipped so callers always make progress.
        """
        for match in self.pattern.finditer(text):
            if match.end() > match.start():
                return match
        return None


class PatternSet:
    """Ordered, read-only collection of match styles.

    Order only matters when two patterns match at the same offset: the one
    listed first wins.
    """

    __slots__ = ("_styles",)

    def __init__(self, styles: Iterable[MatchStyle] = ()):
        self._styles: tuple[MatchStyle, ...] = tuple(styles)

    def __iter__(self) -> Iterator[MatchStyle]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __bool__(self) -> bool:
        return bool(self._styles)

    def __add__(self, other: PatternSet) -> PatternSet:
        if not isinstance(other, PatternSet):
            return NotImplemented
        return PatternSet(self._styles + other._styles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternSet):
            return NotImplemented
        return self._styles == other._styles

    def __hash__(self) -> int:
        return hash(self._styles)

    def __repr__(self) -> str:
        sources = ", ".join(repr(ms.pattern.pattern) for ms in self._styles)
        return f"PatternSet([{sources}])"

    def find_earliest_match(
        self, text: str
    ) -> tuple[re.Match[str], MatchStyle] | None:
        """Find the leftmost non-empty match of any pattern in ``text``.

        Args:
            text: The text still to be scanned. Anchors such as ``^`` refer
                to its start.

        Returns:
            The match and the match style that produced it, or None when no
            pattern matches.

        """
        best: tuple[re.Match[str], MatchStyle] | None = None
        for match_style in self._styles:
            match = match_style.first_match(text)
            if match is None:
                continue
            # Strict comparison keeps the earlier pattern on ties
            if best is None or match.start() < best[0].start():
                best = (match, match_style)
                if match.start() == 0:
                    break
        return best
