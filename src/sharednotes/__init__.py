"""
sharednotes - Shared notes addressed by name

A small backend that stores one text blob per note name (last write wins),
plus an async client that keeps a local draft in sync with debounced autosave.

Version: 1.0.0
"""

__version__ = "1.0.0"
