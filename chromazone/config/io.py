"""Styles file I/O for chromazone."""

from __future__ import annotations

import logging
from pathlib import Path

from chromazone.core.errors import ConfigReadError
from chromazone.core.patterns import PatternSet

from .parsers import find_style, get_styles_path, list_sections

logger = logging.getLogger(__name__)


def read_config_text(path: Path | None = None) -> str | None:
    """Read the styles file.

    A missing file is not an error: styles are optional.

    Args:
        path: File to read. Defaults to the resolved location.

    Returns:
        File contents, or None if no file could be located.

    Raises:
        ConfigReadError: If the file exists but cannot be read.

    """
    if path is None:
        path = get_styles_path()
        if path is None:
            logger.debug("No XDG_CONFIG_HOME or HOME set, skipping styles file")
            return None

    if not path.is_file():
        logger.debug("Styles file not found: %s", path)
        return None

    logger.debug("Reading styles from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e


def read_style_from_config(style: str, path: Path | None = None) -> PatternSet:
    """Load the named style from the styles file.

    Returns an empty set if the file or the section is missing.
    """
    config = read_config_text(path)
    if config is None:
        return PatternSet()
    return find_style(config, style)


def read_style_names(path: Path | None = None) -> list[str]:
    """List the section names defined in the styles file."""
    config = read_config_text(path)
    if config is None:
        return []
    return list_sections(config)
