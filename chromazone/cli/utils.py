"""Shared utilities for the cz command."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.markup import escape

from chromazone.config import read_style_from_config, read_style_names
from chromazone.core.errors import InputReadError, UnknownStyleError
from chromazone.core.patterns import MatchStyle, PatternSet
from chromazone.core.presets import BUILTIN_STYLES, get_builtin
from chromazone.core.regions import Matched, scan

logger = logging.getLogger(__name__)

# Stderr console for errors (doesn't interfere with piped output)
stderr_console = Console(stderr=True, highlight=False)

COLOR_CHOICES = ("auto", "always", "never")

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def setup_logging(verbose: bool) -> None:
    """Send debug logging to stderr when ``verbose`` is set."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def print_error(message: object) -> None:
    """Print an error message to stderr."""
    stderr_console.print(f"[red]Error: {escape(str(message))}[/red]", soft_wrap=True)


def resolve_color_system(mode: str) -> ColorSystem | None:
    """Map a --color choice to the color system used for rendering.

    Returns None when output should not be styled.
    """
    if mode == "never":
        return None
    if mode == "always":
        return ColorSystem.STANDARD
    # Check whatever stdout is at call time
    detected = Console(highlight=False).color_system
    return _COLOR_SYSTEMS.get(detected) if detected else None


def resolve_named_style(name: str, config_path: Path | None = None) -> PatternSet:
    """Find a style by name: built-ins first, then the styles file.

    Raises:
        UnknownStyleError: If no built-in or section has that name.
    """
    builtin = get_builtin(name)
    if builtin is not None:
        logger.debug("Using built-in style '%s'", name)
        return builtin

    if name not in read_style_names(config_path):
        raise UnknownStyleError(name)
    return read_style_from_config(name, config_path)


def build_pattern_set(
    style: str | None,
    matches: Iterable[tuple[str, str]],
    config_path: Path | None = None,
) -> PatternSet:
    """Combine the named style and ad hoc matches into one pattern set.

    Ad hoc matches come after the named style, so the named style wins when
    both match at the same offset.
    """
    pattern_set = PatternSet()
    if style is not None:
        pattern_set = resolve_named_style(style, config_path)

    extra = PatternSet(
        MatchStyle.from_source(source, description) for source, description in matches
    )
    pattern_set = pattern_set + extra
    logger.debug("Highlighting with %d pattern(s)", len(pattern_set))
    return pattern_set


def available_styles(config_path: Path | None = None) -> list[tuple[str, str]]:
    """List (name, origin) pairs for every style that --style accepts."""
    result = [(name, "built-in") for name in BUILTIN_STYLES]
    result.extend(
        (name, "config")
        for name in read_style_names(config_path)
        if name not in BUILTIN_STYLES
    )
    return result


def render_line(
    line: str, pattern_set: PatternSet, color_system: ColorSystem | None
) -> str:
    """Render one line with ANSI styling applied to matched regions."""
    if color_system is None:
        return line
    parts = []
    for region in scan(line, pattern_set):
        if isinstance(region, Matched):
            parts.append(region.style.render(region.text, color_system=color_system))
        else:
            parts.append(region.text)
    return "".join(parts)


def get_stdin() -> TextIO:
    """Return stdin set up so that only newlines end a line.

    A lone carriage return (progress bars, git output) stays part of its line.
    """
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(newline="")
    return sys.stdin


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from ``stream`` without their ``\\n`` or ``\\r\\n`` ending.

    Raises:
        InputReadError: If the stream cannot be read or decoded.
    """
    try:
        for line in stream:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(e)) from e
