"""Discover and parse slash command files."""
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import InvalidCommandError
from .models import SlashCommand

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
COMMAND_SUFFIX = ".md"
_PATH_SEPARATORS = re.compile(r"[\\/]")


def _is_delimiter(line: str) -> bool:
    return line.rstrip("\r\n") == FRONTMATTER_DELIMITER


def starts_with_delimiter(text: str) -> bool:
    """True when the first line of text is a frontmatter delimiter."""
    lines = text.splitlines(keepends=True)
    return bool(lines) and _is_delimiter(lines[0])


def _validate_frontmatter(data: Any) -> dict[str, Any]:
    """Check parsed YAML has the shape of a command header."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ValueError("description must be a string")

    tools = data.get("allowed-tools")
    if tools is not None:
        if not isinstance(tools, list) or not all(isinstance(t, str) for t in tools):
            raise ValueError("allowed-tools must be a list of strings")

    return data


def parse_markdown_with_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Split a command file into YAML frontmatter and markdown body.

    Args:
        content: Raw file text.

    Returns:
        (frontmatter, body). Frontmatter is None when the file has no
        header, the header is never closed, or it is not valid YAML of the
        expected shape; in those cases body is the whole original text.
    """
    lines = content.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return None, content

    end = next(
        (i for i in range(1, len(lines)) if _is_delimiter(lines[i])),
        None,
    )
    if end is None:
        return None, content

    try:
        frontmatter = _validate_frontmatter(yaml.safe_load("".join(lines[1:end])))
    except (yaml.YAMLError, ValueError) as e:
        logger.debug(f"Failed to parse frontmatter: {e}")
        return None, content

    body_lines = lines[end + 1:]
    # Drop the blank line separating header and body
    if body_lines and body_lines[0].strip("\r\n") == "":
        body_lines = body_lines[1:]

    return frontmatter, "".join(body_lines)


def extract_command_info(file_path: Path, base_path: Path) -> tuple[str, str | None]:
    """Derive command name and namespace from a file's location.

    ``<base>/a/b/c.md`` gives ``("c", "a:b")``; ``<base>/x.md`` gives
    ``("x", None)``.
    """
    try:
        relative = Path(file_path).relative_to(base_path)
    except ValueError as e:
        raise InvalidCommandError(f"Failed to get relative path: {e}") from e

    parts = relative.with_suffix("").parts if relative.parts else ()
    if not parts:
        raise InvalidCommandError("Invalid command path")

    if len(parts) == 1:
        return parts[0], None

    return parts[-1], ":".join(parts[:-1])


def find_markdown_files(directory: Path) -> list[Path]:
    """Recursively collect .md files, skipping hidden files and directories.

    A missing directory yields an empty list.
    """
    directory = Path(directory)
    files: list[Path] = []
    if not directory.is_dir():
        return files

    for entry in sorted(directory.iterdir()):
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            files.extend(find_markdown_files(entry))
        elif entry.is_file() and entry.suffix == COMMAND_SUFFIX:
            files.append(entry)

    return files


def make_command_id(scope: str, file_path: Path) -> str:
    """Build a stable ID from scope and path, e.g. ``user--home-me-.claude-commands-x.md``."""
    return f"{scope}-{_PATH_SEPARATORS.sub('-', str(file_path))}"


def load_command_file(file_path: Path, base_path: Path, scope: str) -> SlashCommand:
    """Load a single command from a markdown file.

    Args:
        file_path: Path to the .md file.
        base_path: Commands root the file was found under.
        scope: "project" or "user".

    Returns:
        Parsed SlashCommand.

    Raises:
        OSError: The file could not be read.
        InvalidCommandError: The file does not sit under base_path.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading command from: {file_path}")

    # newline="" keeps \r\n and lone \r in the body as written
    with file_path.open(encoding="utf-8", newline="") as f:
        content = f.read()
    frontmatter, body = parse_markdown_with_frontmatter(content)
    name, namespace = extract_command_info(file_path, Path(base_path))

    full_command = f"/{namespace}:{name}" if namespace else f"/{name}"

    frontmatter = frontmatter or {}

    return SlashCommand(
        id=make_command_id(scope, file_path),
        name=name,
        full_command=full_command,
        scope=scope,
        namespace=namespace,
        file_path=str(file_path),
        content=body,
        description=frontmatter.get("description"),
        allowed_tools=list(frontmatter.get("allowed-tools") or []),
        has_bash_commands="!`" in body,
        has_file_references="@" in body,
        accepts_arguments="$ARGUMENTS" in body,
    )
