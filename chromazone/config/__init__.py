"""Styles file handling for chromazone.

The main entry points are:
- get_styles_path(): Locate the styles file from the environment
- find_style(): Parse one section of a styles file
- read_style_from_config(): Load a named style from the styles file
"""

from __future__ import annotations

from .io import (
    read_config_text,
    read_style_from_config,
    read_style_names,
)
from .parsers import (
    APP_DIR_NAME,
    STYLES_FILE_NAME,
    expand_path,
    find_style,
    get_styles_path,
    list_sections,
)

__all__ = [
    "APP_DIR_NAME",
    "STYLES_FILE_NAME",
    "expand_path",
    "find_style",
    "get_styles_path",
    "list_sections",
    "read_config_text",
    "read_style_from_config",
    "read_style_names",
]
