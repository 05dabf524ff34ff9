"""Utility modules for chromazone."""
