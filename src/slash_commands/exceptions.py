"""Custom exceptions for slash commands."""


class SlashCommandError(Exception):
    """Base exception for slash commands."""

    pass


class InvalidCommandError(SlashCommandError):
    """Rejected input: empty name, bad scope, bad ID or path."""

    pass


class CommandNotFoundError(SlashCommandError):
    """No command matches the given ID."""

    pass


class CommandIOError(SlashCommandError):
    """Reading, writing or removing a command file failed."""

    pass
