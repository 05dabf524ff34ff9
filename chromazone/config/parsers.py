"""Styles file parsing and path resolution for chromazone."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from chromazone.core.patterns import MatchStyle, PatternSet
from chromazone.utils.patterns import MATCH_STYLE_PATTERN, SECTION_PATTERN

logger = logging.getLogger(__name__)

APP_DIR_NAME = "chromazone"
STYLES_FILE_NAME = "chromazone.styles"


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables in a path."""
    path_str = os.path.expandvars(str(path))
    return Path(path_str).expanduser()


def get_styles_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """Locate the styles file following the XDG base directory spec.

    Lookup order:
    1. ``CHROMAZONE_STYLES`` (explicit file path)
    2. ``$XDG_CONFIG_HOME/chromazone/chromazone.styles``
    3. ``$HOME/.config/chromazone/chromazone.styles``

    Args:
        environ: Environment to consult. Defaults to ``os.environ``.

    Returns:
        The path, or None if none of the variables is set. The file itself
        may not exist.

    """
    if environ is None:
        environ = os.environ

    explicit = environ.get("CHROMAZONE_STYLES")
    if explicit:
        return expand_path(explicit)

    config_home = environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / APP_DIR_NAME / STYLES_FILE_NAME

    home = environ.get("HOME")
    if home:
        return Path(home) / ".config" / APP_DIR_NAME / STYLES_FILE_NAME

    return None


def find_style(config: str, style: str) -> PatternSet:
    """Collect the match styles listed under section ``style``.

    Args:
        config: Full text of the styles file.
        style: Section name to look up (exact match).

    Returns:
        The match styles in file order. Empty if the section does not exist.

    Raises:
        InvalidPatternError: If a pattern in the section does not compile.
        UnknownStyleTokenError: If a description in the section is invalid.

    """
    result: list[MatchStyle] = []
    in_section = False

    for line in config.splitlines():
        if in_section:
            m = MATCH_STYLE_PATTERN.match(line)
            if m:
                result.append(MatchStyle.from_source(m.group(1), m.group(2)))
                continue

        m = SECTION_PATTERN.match(line)
        if m:
            in_section = m.group(1) == style

    logger.debug("Section [%s]: %d pattern(s)", style, len(result))
    return PatternSet(result)


def list_sections(config: str) -> list[str]:
    """Return section names in file order, without duplicates."""
    names: list[str] = []
    for line in config.splitlines():
        m = SECTION_PATTERN.match(line)
        if m and m.group(1) not in names:
            names.append(m.group(1))
    return names
