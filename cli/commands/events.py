"""
Events command - decode and list the events of one track.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cli.commands.info import open_midi_file
from cli.display.formatters import format_division
from cli.display.tables import display_events
from midireader.exceptions import MidiDecodeError

console = Console()
app = typer.Typer()


@app.command()
def events(
    file: Path = typer.Argument(..., help="MIDI file to decode"),
    track: Optional[int] = typer.Option(
        None, "--track", "-t", help="Track index (0-based); prompted for when omitted"
    ),
    limit: int = typer.Option(0, "--limit", "-l", help="Show at most this many events (0=all)"),
    strict: bool = typer.Option(
        False, "--strict", help="Fail if events do not end at the declared track length"
    ),
    no_offsets: bool = typer.Option(False, "--no-offsets", help="Hide byte offsets"),
) -> None:
    """
    Decode one track and list its events.

    For each event shows the delta time, the running tick count, the
    status byte (in parentheses when running status was used) and the
    decoded fields: note number and velocity, controller and value,
    program, pressure, pitch wheel, meta type and contents, SysEx data.

    Examples:

        midireader events song.mid --track 1

        midireader events song.mid -t 0 --limit 50

        midireader events song.mid
    """
    reader = open_midi_file(file, strict=strict)

    if not reader.tracks:
        console.print("[yellow]No tracks found in file.[/yellow]")
        raise typer.Exit(1)

    if track is None:
        track = typer.prompt(
            f"Which track would you like to read? (0-{len(reader.tracks) - 1})", type=int
        )

    if not 0 <= track < len(reader.tracks):
        console.print(
            f"[red]Invalid track number: {track}. Use 0-{len(reader.tracks) - 1}.[/red]"
        )
        raise typer.Exit(1)

    ref = reader.get_track(track)

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n"
            f"[bold]Chunk Type:[/bold] MTrk\n"
            f"[bold]Chunk Length:[/bold] {ref.length}\n"
            f"[bold]Offset:[/bold] 0x{ref.start_offset:X} - 0x{ref.end_offset:X}\n"
            f"[bold]Division:[/bold] {format_division(reader.header.division)}",
            title=f"[bold]Track {track}[/bold]",
            border_style="blue",
        )
    )

    try:
        shown = display_events(
            reader.decode_track(ref),
            title=f"Track {track} Events",
            limit=limit or None,
            show_offsets=not no_offsets,
        )
    except MidiDecodeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[dim]Total: {shown} events displayed[/dim]")


if __name__ == "__main__":
    app()
