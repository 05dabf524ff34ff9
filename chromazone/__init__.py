"""chromazone - highlight regex matches in piped text."""

__version__ = "0.3.0"
