"""slash-commands entry point."""
import json
import logging
from typing import TextIO

import click

from .commands import delete_command, get_command, list_commands, save_command
from .config.settings import Config, load_config
from .exceptions import SlashCommandError

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.WARNING),
    )


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Manage markdown slash commands in .claude/commands."""
    config = load_config(config_path)
    if verbose:
        config.log_level = "DEBUG"
    _setup_logging(config.log_level)
    logger.debug(f"Using config: project_path={config.project_path}")
    ctx.obj = config


@cli.command("list")
@click.option("--project", "-p", default=None, help="Project directory")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@click.pass_obj
def list_cmd(config: Config, project: str | None, as_json: bool) -> None:
    """List built-in, project and user commands."""
    commands = list_commands(project or config.project_path)

    if as_json or config.output.json:
        click.echo(json.dumps([c.to_dict() for c in commands], indent=2))
        return

    width = max((len(c.full_command) for c in commands), default=0)
    for cmd in commands:
        click.echo(f"{cmd.full_command:<{width}}  {cmd.scope:<7}  {cmd.description or ''}")


@cli.command("show")
@click.argument("command_id")
def show_cmd(command_id: str) -> None:
    """Show one command as JSON."""
    try:
        cmd = get_command(command_id)
    except SlashCommandError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(cmd.to_dict(), indent=2))


@cli.command("save")
@click.argument("name")
@click.option("--scope", type=click.Choice(["project", "user"]), default="user",
              show_default=True)
@click.option("--namespace", "-n", default=None, help="Namespace, e.g. frontend:react")
@click.option("--description", "-d", default=None)
@click.option("--tool", "tools", multiple=True, help="Allowed tool (repeatable)")
@click.option("--project", "-p", default=None, help="Project directory")
@click.option("--content", "-c", default=None, help="Command body")
@click.option("--file", "body_file", type=click.File("r"), default=None,
              help="Read body from file ('-' for stdin)")
@click.pass_obj
def save_cmd(
    config: Config,
    name: str,
    scope: str,
    namespace: str | None,
    description: str | None,
    tools: tuple[str, ...],
    project: str | None,
    content: str | None,
    body_file: TextIO | None,
) -> None:
    """Create or overwrite a command file."""
    if content is None:
        content = body_file.read() if body_file else click.get_text_stream("stdin").read()

    try:
        cmd = save_command(
            scope=scope,
            name=name,
            namespace=namespace,
            content=content,
            description=description,
            allowed_tools=list(tools),
            project_path=project or config.project_path,
        )
    except SlashCommandError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Saved {cmd.full_command} -> {cmd.file_path}")


@cli.command("delete")
@click.argument("command_id")
@click.option("--project", "-p", default=None, help="Project directory")
@click.pass_obj
def delete_cmd(config: Config, command_id: str, project: str | None) -> None:
    """Delete a command file by ID."""
    try:
        message = delete_command(command_id, project or config.project_path)
    except SlashCommandError as e:
        raise click.ClickException(str(e)) from e
    click.echo(message)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
