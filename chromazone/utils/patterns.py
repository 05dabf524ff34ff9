"""Regex patterns for parsing the styles file.

The file looks like an INI file whose sections hold one quoted pattern and a
style description per line::

    [diff]
    "^@@.*@@$" yellow
    "^-.*" red
"""

from __future__ import annotations

import re

# Section header: [name]
SECTION_PATTERN = re.compile(r"^\s*\[(\w+)\]\s*$")

# Match style line: "pattern" description
MATCH_STYLE_PATTERN = re.compile(r'^\s*"(.*)"\s*(.*)$')
