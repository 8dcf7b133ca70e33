"""List, get, save and delete slash commands on disk."""
import logging
from pathlib import Path

import yaml

from ..exceptions import CommandIOError, CommandNotFoundError, InvalidCommandError
from .builtin import default_commands
from .discovery import (
    COMMAND_SUFFIX,
    find_markdown_files,
    load_command_file,
    starts_with_delimiter,
)
from .models import SlashCommand

logger = logging.getLogger(__name__)

PROJECT_SCOPE = "project"
USER_SCOPE = "user"
SAVE_SCOPES = (PROJECT_SCOPE, USER_SCOPE)


def commands_dir(root: Path | str) -> Path:
    """Commands directory under a project or home root: ``<root>/.claude/commands``."""
    return Path(root) / ".claude" / "commands"


def _scope_root(scope: str, project_path: str | None) -> Path:
    if scope == PROJECT_SCOPE:
        if not project_path:
            raise InvalidCommandError("Project path required for project scope")
        return commands_dir(project_path)
    return commands_dir(Path.home())


def _scan_scope(base_dir: Path, scope: str) -> list[SlashCommand]:
    """Load every command file under base_dir, skipping files that fail."""
    commands: list[SlashCommand] = []
    if not base_dir.exists():
        return commands

    logger.debug(f"Scanning {scope} commands at: {base_dir}")
    try:
        md_files = find_markdown_files(base_dir)
    except OSError as e:
        logger.error(f"Failed to find {scope} command files: {e}")
        return commands

    for md_file in md_files:
        try:
            cmd = load_command_file(md_file, base_dir, scope)
        except (OSError, UnicodeDecodeError, InvalidCommandError) as e:
            logger.error(f"Failed to load command from {md_file}: {e}")
            continue
        logger.debug(f"Loaded {scope} command: {cmd.full_command}")
        commands.append(cmd)

    return commands


def list_commands(project_path: str | None = None) -> list[SlashCommand]:
    """Discover built-in, project and user commands.

    Order: built-ins (table order), project commands, then user commands.
    Nothing is sorted or deduplicated, so a project and a user command with
    the same name both appear.

    Args:
        project_path: Optional project directory; its .claude/commands is scanned.

    Returns:
        Freshly loaded commands.
    """
    logger.info("Discovering slash commands")
    commands = default_commands()

    if project_path:
        commands.extend(_scan_scope(commands_dir(project_path), PROJECT_SCOPE))

    commands.extend(_scan_scope(commands_dir(Path.home()), USER_SCOPE))

    logger.info(f"Found {len(commands)} slash commands")
    return commands


def get_command(command_id: str) -> SlashCommand:
    """Get a single command by ID.

    Only built-in and user commands are searched; no project path is
    available here, so project commands are never found.
    """
    logger.debug(f"Getting slash command: {command_id}")

    if len(command_id.split("-")) < 2:
        raise InvalidCommandError("Invalid command ID")

    for cmd in list_commands(None):
        if cmd.id == command_id:
            return cmd

    raise CommandNotFoundError(f"Command not found: {command_id}")


def render_command_file(
    content: str,
    description: str | None = None,
    allowed_tools: list[str] | None = None,
) -> str:
    """Serialize a command: optional YAML header, blank line, then body.

    A body that itself opens with a delimiter line gets an empty header so
    it is not read back as frontmatter.
    """
    if description is None and not allowed_tools:
        if starts_with_delimiter(content):
            return f"---\n---\n\n{content}"
        return content

    header: dict = {}
    if description is not None:
        header["description"] = description
    if allowed_tools:
        header["allowed-tools"] = list(allowed_tools)

    dumped = yaml.safe_dump(
        header,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=1 << 16,
    )
    return f"---\n{dumped}---\n\n{content}"


def save_command(
    scope: str,
    name: str,
    namespace: str | None = None,
    content: str = "",
    description: str | None = None,
    allowed_tools: list[str] | None = None,
    project_path: str | None = None,
) -> SlashCommand:
    """Create or overwrite a command file and return it freshly loaded.

    Args:
        scope: "project" or "user".
        name: Command name, becomes ``<name>.md``.
        namespace: Optional "a:b" namespace, becomes nested directories.
        content: Markdown body.
        description: Optional description for the header.
        allowed_tools: Optional tool list for the header.
        project_path: Required for project scope.

    Returns:
        The saved SlashCommand.
    """
    logger.info(f"Saving slash command: {name} in scope: {scope}")

    if not name:
        raise InvalidCommandError("Command name cannot be empty")

    if scope not in SAVE_SCOPES:
        raise InvalidCommandError("Invalid scope. Must be 'project' or 'user'")

    base_dir = _scope_root(scope, project_path)

    target_dir = base_dir
    if namespace:
        for segment in namespace.split(":"):
            if segment:
                target_dir = target_dir / segment

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CommandIOError(f"Failed to create directories: {e}") from e

    file_path = target_dir / f"{name}{COMMAND_SUFFIX}"

    try:
        file_path.write_text(
            render_command_file(content, description, allowed_tools),
            encoding="utf-8",
            newline="",
        )
    except OSError as e:
        raise CommandIOError(f"Failed to write command file: {e}") from e

    try:
        return load_command_file(file_path, base_dir, scope)
    except (OSError, UnicodeDecodeError, InvalidCommandError) as e:
        raise CommandIOError(f"Failed to load saved command: {e}") from e


def remove_empty_dirs(directory: Path, stop_at: Path) -> None:
    """Remove directory if empty, then each empty ancestor below stop_at.

    Best-effort: failures are logged and ignored.
    """
    directory = Path(directory)
    stop_at = Path(stop_at)

    while directory != stop_at and stop_at in directory.parents:
        try:
            if any(directory.iterdir()):
                return
            directory.rmdir()
        except OSError as e:
            logger.debug(f"Could not remove {directory}: {e}")
            return
        directory = directory.parent


def delete_command(command_id: str, project_path: str | None = None) -> str:
    """Delete a command file and prune empty namespace directories.

    Returns:
        Confirmation message, e.g. "Deleted command: /frontend:component".
    """
    logger.info(f"Deleting slash command: {command_id}")

    if command_id.startswith(f"{PROJECT_SCOPE}-") and not project_path:
        raise InvalidCommandError("Project path required to delete project commands")

    command = next(
        (cmd for cmd in list_commands(project_path) if cmd.id == command_id),
        None,
    )
    if command is None:
        raise CommandNotFoundError(f"Command not found: {command_id}")

    if command.is_builtin:
        raise InvalidCommandError(f"Cannot delete built-in command: {command.full_command}")

    file_path = Path(command.file_path)
    try:
        file_path.unlink()
    except OSError as e:
        raise CommandIOError(f"Failed to delete command file: {e}") from e

    remove_empty_dirs(file_path.parent, _scope_root(command.scope, project_path))

    return f"Deleted command: {command.full_command}"
