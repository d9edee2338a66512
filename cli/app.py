"""
midireader - Standard MIDI File decoder.

A CLI tool for inspecting the header, tracks and events of .mid files.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from midireader import __version__
from cli.commands.info import info
from cli.commands.events import events
from cli.commands.dump import dump

console = Console()

# Main app
app = typer.Typer(
    name="midireader",
    help="Decode and inspect Standard MIDI Files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="events")(events)
app.command(name="dump")(dump)


def configure_logging(verbose: bool) -> None:
    """Route library log records through Rich on stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]midireader[/bold] version {__version__}")
    console.print("[dim]Standard MIDI File decoder[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    midireader - Decode and inspect Standard MIDI Files.

    [bold]Quick Start:[/bold]

        midireader info song.mid              # Header and track summary
        midireader events song.mid -t 1       # Decoded events of track 1
        midireader events song.mid            # Asks which track to read

    [bold]Utility Commands:[/bold]

        midireader dump song.mid --track 1    # Annotated hex dump

    Use --help with any command for more details.
    """
    configure_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
