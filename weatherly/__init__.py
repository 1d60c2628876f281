"""Weatherly: fast, simple current weather lookup."""

__version__ = "1.0.0"
