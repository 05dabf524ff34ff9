"""Exceptions raised while building and applying styles."""

from __future__ import annotations

from pathlib import Path


class ChromazoneError(Exception):
    """Base exception for chromazone errors."""

    pass


class InvalidPatternError(ChromazoneError):
    """Raised when a regular expression fails to compile."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"invalid pattern '{source}': {detail}")


class UnknownStyleTokenError(ChromazoneError):
    """Raised when a style description contains an unknown color or effect."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown style token '{token}'")


class UnknownStyleError(ChromazoneError):
    """Raised when a named style is neither built in nor configured."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown style '{name}'")


class ConfigReadError(ChromazoneError):
    """Raised when an existing styles file cannot be read."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"cannot read {path}: {detail}")


class InputReadError(ChromazoneError):
    """Raised when the input stream cannot be read."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"cannot read input: {detail}")
