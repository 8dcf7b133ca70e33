"""Discover, load, save and delete markdown slash commands."""

__version__ = "0.1.0"
