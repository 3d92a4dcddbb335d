"""Marker Map: markers with attached photos persisted in SQLite."""

__version__ = "0.1.0"
