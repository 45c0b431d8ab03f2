"""Bookmarks API: validated, sanitized CRUD over a single bookmarks table."""

__version__ = "0.1.0"
