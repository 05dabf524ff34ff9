"""Built-in styles that need no configuration file."""

from __future__ import annotations

from collections.abc import Callable

from rich.style import Style

from chromazone.core.patterns import MatchStyle, PatternSet, compile_pattern


def diff() -> PatternSet:
    """Style for ``diff -u`` output."""
    return PatternSet(
        [
            MatchStyle(compile_pattern(r"^\+.*$"), Style(color="green")),
            MatchStyle(compile_pattern(r"^-.*$"), Style(color="red")),
            MatchStyle(compile_pattern(r"^@@.*$"), Style(color="yellow")),
        ]
    )


BUILTIN_STYLES: dict[str, Callable[[], PatternSet]] = {
    "diff": diff,
}


def get_builtin(name: str) -> PatternSet | None:
    """Return the built-in style called ``name``, or None."""
    factory = BUILTIN_STYLES.get(name)
    return factory() if factory is not None else None
