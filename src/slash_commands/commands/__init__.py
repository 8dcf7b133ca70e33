"""Slash command discovery and storage."""
from .models import SlashCommand
from .builtin import BUILTIN_COMMANDS, default_commands
from .discovery import (
    extract_command_info,
    find_markdown_files,
    load_command_file,
    parse_markdown_with_frontmatter,
)
from .store import delete_command, get_command, list_commands, save_command

__all__ = [
    "SlashCommand",
    "BUILTIN_COMMANDS",
    "default_commands",
    "extract_command_info",
    "find_markdown_files",
    "load_command_file",
    "parse_markdown_with_frontmatter",
    "list_commands",
    "get_command",
    "save_command",
    "delete_command",
]
