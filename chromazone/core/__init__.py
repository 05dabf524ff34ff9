"""Core highlighting logic for chromazone."""
