"""Connector API: developer profiles, posts, likes and comments."""

__version__ = "0.1.0"
