"""CLI interface for skillsync using Typer."""

import logging

import typer
from rich.console import Console
from rich.markup import escape

from skillsync.core.documents import discover_skills, load_command
from skillsync.core.exceptions import SourceMissingError, SyncError
from skillsync.core.synchronizer import Synchronizer
from skillsync.utils.config import Config
from skillsync.utils.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="skillsync",
    help="Install Claude skills and the /initialize-project command into ~/.claude",
    no_args_is_help=False,
    add_completion=False,
)

console = Console()


def install_command(config: Config) -> None:
    """Copy the command and skills into the destination and report what's installed."""
    console.print("Installing Claude Skills...")

    try:
        result = Synchronizer(config).run()
    except SyncError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Installed /{config.command_name} command")
    console.print("[green]✓[/green] Installed skills:")
    for name in result.installed_skills:
        console.print(f"  - {escape(name)}", highlight=False)

    console.print("\n[bold green]Installation complete![/bold green]\n")
    console.print("Usage:")
    console.print("  1. Open any project folder")
    console.print("  2. Run Claude Code")
    console.print(f"  3. Type: /{config.command_name}\n")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each step and copied file",
    ),
) -> None:
    """
    Install Claude skills.

    Run without a subcommand to copy commands/ and skills/ from this
    repository into ~/.claude, overwriting existing copies.
    """
    setup_logging(verbose)
    config = Config.load()
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        install_command(config)


@app.command("list")
def list_skills(ctx: typer.Context) -> None:
    """List skills installed in ~/.claude/skills."""
    config: Config = ctx.obj["config"]

    skills_dir = config.dest_skills_path
    if not skills_dir.is_dir():
        console.print(
            f"[yellow]No skills installed at {escape(str(skills_dir))}. Run 'skillsync' to install.[/yellow]"
        )
        return

    command_file = config.dest_commands_path / config.command_file
    try:
        command = load_command(command_file)
        line = f"Command: /{escape(command.id)}"
        if command.description:
            line += f" - {escape(command.description)}"
        console.print(line, highlight=False)
    except SourceMissingError:
        logger.debug(f"No installed command at {command_file}")

    skills = discover_skills(skills_dir, config.skill_pattern)
    console.print(
        typer.style(f"Installed Skills: {len(skills)}", bold=True, fg="cyan")
    )
    for skill in skills:
        console.print(f"\n{typer.style(escape(skill.id), bold=True, fg='cyan')}")
        if skill.name != skill.id:
            console.print(f"  {escape(skill.name)}", highlight=False)
        if skill.description:
            console.print(f"  {escape(skill.description)}", highlight=False)
        if skill.dependencies:
            console.print(
                f"  Load with: {escape(', '.join(skill.dependencies))}", highlight=False
            )


if __name__ == "__main__":
    app()
