"""Data models for slash commands."""
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class SlashCommand:
    """Represents a slash command from .claude/commands/**/*.md or the built-in table."""

    id: str
    name: str
    full_command: str  # "/name" or "/ns1:ns2:name"
    scope: str  # "project", "user" or "default"
    namespace: str | None = None
    file_path: str = ""  # empty for built-ins
    content: str = ""
    description: str | None = None
    allowed_tools: list[str] = field(default_factory=list)
    has_bash_commands: bool = False
    has_file_references: bool = False
    accepts_arguments: bool = False

    @property
    def is_builtin(self) -> bool:
        """Built-in commands have no backing file."""
        return self.scope == "default"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return asdict(self)
