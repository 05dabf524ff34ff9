"""Parse style descriptions such as ``red,bold`` or ``b:white,underline``.

A description is a comma-separated list of tokens. Each token is looked up in
a flat table and folded into a :class:`rich.style.Style` from left to right,
so a later token overrides an earlier one for the same attribute.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style

from chromazone.core.errors import UnknownStyleTokenError

# Color names accepted in descriptions, mapped to Rich color names
COLORS = {
    "black": "black",
    "blue": "blue",
    "cyan": "cyan",
    "green": "green",
    "magenta": "magenta",
    "purple": "magenta",
    "red": "red",
    "white": "white",
    "yellow": "yellow",
}

EFFECTS = ("bold", "italic", "strike", "underline")

BACKGROUND_PREFIX = "b:"
FOREGROUND_PREFIX = "f:"


@dataclass(frozen=True)
class Foreground:
    """Set the text color."""

    color: str

    def apply(self, style: Style) -> Style:
        return style + Style(color=self.color)


@dataclass(frozen=True)
class Background:
    """Set the background color."""

    color: str

    def apply(self, style: Style) -> Style:
        return style + Style(bgcolor=self.color)


@dataclass(frozen=True)
class Effect:
    """Switch on a text effect."""

    name: str

    def apply(self, style: Style) -> Style:
        return style + Style(**{self.name: True})


StyleAction = Foreground | Background | Effect


def _build_token_table() -> dict[str, StyleAction]:
    table: dict[str, StyleAction] = {}
    for name, color in COLORS.items():
        table[name] = Foreground(color)
        table[FOREGROUND_PREFIX + name] = Foreground(color)
        table[BACKGROUND_PREFIX + name] = Background(color)
    for effect in EFFECTS:
        table[effect] = Effect(effect)
    return table


TOKENS: dict[str, StyleAction] = _build_token_table()


def parse_token(token: str) -> StyleAction:
    """Look up a single description token.

    Raises:
        UnknownStyleTokenError: If the token is not a known color or effect.
    """
    action = TOKENS.get(token.strip().lower())
    if action is None:
        raise UnknownStyleTokenError(token.strip())
    return action


def parse_description(description: str) -> Style:
    """Turn a comma-separated description into a Rich style.

    Whitespace around tokens and empty tokens are ignored, so an empty
    description gives the null style.

    Args:
        description: Text such as ``"red, bold"`` or ``"b:yellow,black"``.

    Returns:
        The combined style.

    Raises:
        UnknownStyleTokenError: On the first token that is not recognized.
            No partial style is returned.

    """
    style = Style.null()
    for token in description.split(","):
        if not token.strip():
            continue
        style = parse_token(token).apply(style)
    return style
