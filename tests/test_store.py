"""Test listing, getting, saving and deleting slash commands."""
import logging

import pytest
from pathlib import Path

from slash_commands.commands.builtin import BUILTIN_COMMANDS
from slash_commands.commands.discovery import load_command_file
from slash_commands.commands.store import (
    commands_dir,
    delete_command,
    get_command,
    list_commands,
    remove_empty_dirs,
    render_command_file,
    save_command,
)
from slash_commands.exceptions import (
    CommandIOError,
    CommandNotFoundError,
    InvalidCommandError,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def project(tmp_path):
    """Project directory with an empty commands tree."""
    project = tmp_path / "myproject"
    commands_dir(project).mkdir(parents=True)
    return project


def test_list_commands_builtins_only(home):
    """No project and no user commands: exactly the built-in table."""
    commands = list_commands()

    assert len(commands) == len(BUILTIN_COMMANDS)
    assert [c.id for c in commands] == [row[0] for row in BUILTIN_COMMANDS]


def test_list_commands_missing_project_dir(home, tmp_path):
    """A project without .claude/commands contributes nothing."""
    commands = list_commands(str(tmp_path / "nonexistent"))

    assert len(commands) == len(BUILTIN_COMMANDS)


def test_list_commands_order(home, project):
    """Built-ins first, then project commands, then user commands."""
    user_dir = commands_dir(home)
    user_dir.mkdir(parents=True)
    (user_dir / "review.md").write_text("User review.")
    (commands_dir(project) / "review.md").write_text("Project review.")
    (commands_dir(project) / "deploy.md").write_text("Deploy.")

    commands = list_commands(str(project))
    custom = commands[len(BUILTIN_COMMANDS):]

    assert [(c.scope, c.name) for c in custom] == [
        ("project", "deploy"),
        ("project", "review"),
        ("user", "review"),
    ]


def test_list_commands_no_dedup(home, project):
    """Same-named project and user commands both appear, plus the built-in."""
    user_dir = commands_dir(home)
    user_dir.mkdir(parents=True)
    (user_dir / "review.md").write_text("User review.")
    (commands_dir(project) / "review.md").write_text("Project review.")

    commands = list_commands(str(project))

    reviews = [c for c in commands if c.full_command == "/review"]
    assert {c.scope for c in reviews} == {"default", "project", "user"}


def test_list_commands_without_project_skips_project(home, project):
    """Project commands only show up when a project path is given."""
    (commands_dir(project) / "deploy.md").write_text("Deploy.")

    commands = list_commands()

    assert all(c.scope != "project" for c in commands)


def test_list_commands_skips_bad_file(home, caplog):
    """One unreadable file is logged and skipped; the rest still load."""
    user_dir = commands_dir(home)
    user_dir.mkdir(parents=True)
    (user_dir / "bad.md").write_bytes(b"\xff\xfe\xfa not utf-8")
    (user_dir / "good.md").write_text("Fine.")

    with caplog.at_level(logging.ERROR):
        commands = list_commands()

    names = [c.name for c in commands if c.scope == "user"]
    assert names == ["good"]
    assert "Failed to load command" in caplog.text


def test_list_commands_records_are_fresh(home):
    """Changes on disk show up on the next listing."""
    user_dir = commands_dir(home)
    user_dir.mkdir(parents=True)
    cmd_file = user_dir / "x.md"
    cmd_file.write_text("First")

    assert [c.content for c in list_commands() if c.scope == "user"] == ["First"]

    cmd_file.write_text("Second $ARGUMENTS")
    (user_cmd,) = [c for c in list_commands() if c.scope == "user"]

    assert user_cmd.content == "Second $ARGUMENTS"
    assert user_cmd.accepts_arguments is True


def test_get_command_builtin(home):
    """Built-ins are found by ID."""
    cmd = get_command("default-help")

    assert cmd.full_command == "/help"
    assert cmd.scope == "default"


def test_get_command_user(home):
    """User commands are found by ID."""
    saved = save_command("user", "review", content="Review.")

    cmd = get_command(saved.id)

    assert cmd.file_path == saved.file_path
    assert cmd.content == "Review."


def test_get_command_invalid_id(home):
    """IDs without a separator are rejected."""
    with pytest.raises(InvalidCommandError, match="Invalid command ID"):
        get_command("nohyphen")


def test_get_command_not_found(home):
    """Unknown IDs raise not found."""
    with pytest.raises(CommandNotFoundError, match="Command not found: user-nope"):
        get_command("user-nope")


def test_get_command_cannot_see_project_commands(home, project):
    """Lookup by ID has no project context, so project commands are not found."""
    saved = save_command("project", "deploy", content="Deploy.", project_path=str(project))

    with pytest.raises(CommandNotFoundError):
        get_command(saved.id)


def test_render_command_file_without_metadata():
    """No description and no tools: body only."""
    assert render_command_file("Body") == "Body"


def test_render_command_file_body_with_delimiter():
    """A body opening with a delimiter line gets an empty header."""
    assert render_command_file("---\nbody") == "---\n---\n\n---\nbody"


def test_render_command_file_with_metadata():
    """Header has description first, then the tools list, then a blank line."""
    text = render_command_file("Body", "Review code", ["Read", "Grep"])

    assert text == (
        "---\n"
        "description: Review code\n"
        "allowed-tools:\n"
        "- Read\n"
        "- Grep\n"
        "---\n"
        "\n"
        "Body"
    )


def test_save_command_user(home):
    """Saving a user command writes under ~/.claude/commands."""
    cmd = save_command("user", "review", content="Review this.")

    expected = commands_dir(home) / "review.md"
    assert cmd.file_path == str(expected)
    assert expected.read_text() == "Review this."
    assert cmd.scope == "user"
    assert cmd.full_command == "/review"


def test_save_command_project_namespace(home, project):
    """Namespace segments become nested directories."""
    cmd = save_command(
        "project",
        "component",
        namespace="frontend:react",
        content="Build a component for $ARGUMENTS",
        project_path=str(project),
    )

    expected = commands_dir(project) / "frontend" / "react" / "component.md"
    assert expected.exists()
    assert cmd.namespace == "frontend:react"
    assert cmd.full_command == "/frontend:react:component"
    assert cmd.accepts_arguments is True


def test_save_command_round_trip(home):
    """Saved description, tools and body load back unchanged."""
    content = "\nCheck @README.md\n\nRun !`git diff` for $ARGUMENTS\n"
    description = "Review: the `diff` # carefully"
    tools = ["Bash(git diff:*)", "Read"]

    saved = save_command(
        "user",
        "review",
        namespace="git",
        content=content,
        description=description,
        allowed_tools=tools,
    )
    loaded = load_command_file(Path(saved.file_path), commands_dir(home), "user")

    assert loaded.description == description
    assert loaded.allowed_tools == tools
    assert loaded.content == content
    assert loaded == saved
    assert loaded.has_bash_commands is True
    assert loaded.has_file_references is True


def test_save_command_keeps_crlf_body(home):
    """Carriage returns in the body survive save and load, with or without a header."""
    content = "line1\r\nline2\r\nold mac\rline\r\n"

    plain = save_command("user", "plain", content=content)
    described = save_command("user", "described", content=content, description="d")

    assert plain.content == content
    assert described.content == content
    assert described.description == "d"
    assert Path(plain.file_path).read_bytes() == content.encode()


def test_load_crlf_file_with_header(home):
    """A CRLF file on disk keeps its line endings in the body."""
    user_dir = commands_dir(home)
    user_dir.mkdir(parents=True)
    (user_dir / "win.md").write_bytes(b"---\r\ndescription: Win\r\n---\r\n\r\nBody\r\nmore\r\n")

    (cmd,) = [c for c in list_commands() if c.scope == "user"]

    assert cmd.description == "Win"
    assert cmd.content == "Body\r\nmore\r\n"


def test_save_command_body_starting_with_delimiter(home):
    """A body that opens with its own --- block is not mistaken for a header."""
    content = "---\na: 1\n---\nbody"

    saved = save_command("user", "fenced", content=content)

    assert saved.content == content
    assert saved.description is None
    assert saved.allowed_tools == []


def test_save_command_overwrites(home):
    """Saving the same name again replaces the file."""
    save_command("user", "review", content="Old", description="Old")
    cmd = save_command("user", "review", content="New")

    assert cmd.content == "New"
    assert cmd.description is None
    assert len([c for c in list_commands() if c.scope == "user"]) == 1


def test_save_command_empty_name(home):
    """Empty name is rejected before touching disk."""
    with pytest.raises(InvalidCommandError, match="name cannot be empty"):
        save_command("user", "", content="x")

    assert not commands_dir(home).exists()


def test_save_command_invalid_scope(home):
    """Only project and user scopes can be saved."""
    with pytest.raises(InvalidCommandError, match="Invalid scope"):
        save_command("default", "x", content="x")


def test_save_command_project_requires_path(home):
    """Project scope needs a project path."""
    with pytest.raises(InvalidCommandError, match="Project path required"):
        save_command("project", "x", content="x")


def test_save_command_mkdir_failure(home, tmp_path):
    """Directory creation failures surface as CommandIOError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(CommandIOError, match="Failed to create directories"):
        save_command("project", "x", content="x", project_path=str(blocker))


def test_delete_command_user(home):
    """Deleting removes the file and returns a confirmation."""
    saved = save_command("user", "review", content="Review.")

    message = delete_command(saved.id)

    assert message == "Deleted command: /review"
    assert not Path(saved.file_path).exists()
    assert commands_dir(home).is_dir()


def test_delete_command_prunes_empty_namespace_dirs(home, project):
    """Empty namespace directories are removed up to the commands root."""
    saved = save_command(
        "project",
        "component",
        namespace="frontend:react",
        content="Build.",
        project_path=str(project),
    )

    delete_command(saved.id, str(project))

    root = commands_dir(project)
    assert root.is_dir()
    assert not (root / "frontend").exists()


def test_delete_command_keeps_nonempty_dirs(home):
    """Directories that still hold commands are kept."""
    first = save_command("user", "a", namespace="tools:lint", content="A")
    save_command("user", "b", namespace="tools", content="B")

    delete_command(first.id)

    root = commands_dir(home)
    assert not (root / "tools" / "lint").exists()
    assert (root / "tools" / "b.md").exists()


def test_delete_project_command_requires_path(home):
    """Project IDs need the project path."""
    with pytest.raises(InvalidCommandError, match="Project path required"):
        delete_command("project--somewhere-x.md")


def test_delete_command_not_found(home):
    """Unknown IDs raise not found."""
    with pytest.raises(CommandNotFoundError):
        delete_command("user-missing")


def test_delete_builtin_command(home):
    """Built-ins have no file to delete."""
    with pytest.raises(InvalidCommandError, match="built-in"):
        delete_command("default-help")


def test_remove_empty_dirs_stops_at_root(tmp_path):
    """Cleanup never removes the stop directory or anything above it."""
    root = tmp_path / "commands"
    nested = root / "a" / "b"
    nested.mkdir(parents=True)

    remove_empty_dirs(nested, root)

    assert root.is_dir()
    assert not (root / "a").exists()


def test_remove_empty_dirs_outside_root(tmp_path):
    """Directories outside the stop directory are left alone."""
    root = tmp_path / "commands"
    root.mkdir()
    other = tmp_path / "other"
    other.mkdir()

    remove_empty_dirs(other, root)

    assert other.is_dir()
