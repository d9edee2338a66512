"""
Info command - display header and track summary.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli.display.tables import display_header_info, display_tracks_table
from midireader.analysis.track_analyzer import TrackAnalyzer
from midireader.exceptions import MidiDecodeError
from midireader.formats.smf.reader import MidiFileReader

console = Console()
app = typer.Typer()


def open_midi_file(file: Path, strict: bool = False) -> MidiFileReader:
    """Open a MIDI file for a command, exiting with an error message on failure."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    if not file.is_file():
        console.print(f"[red]Error: Not a file: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    try:
        return MidiFileReader.read(file, strict=strict)
    except (MidiDecodeError, OSError) as e:
        console.print(f"[red]Error: Cannot read {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to analyze"),
    strict: bool = typer.Option(
        False, "--strict", help="Treat track length mismatches as errors"
    ),
    header_only: bool = typer.Option(False, "--header", "-H", help="Show the header only"),
) -> None:
    """
    Display header and track information.

    Shows:
    - Chunk type and length, file format, number of tracks
    - Division (PPQ ticks or SMPTE frames/ticks)
    - Per-track name, offset, length, event count, channels and note range

    Examples:

        midireader info song.mid

        midireader info song.mid --header
    """
    reader = open_midi_file(file, strict=strict)

    display_header_info(reader.header, str(file), len(reader.data))

    if header_only:
        return

    console.print()
    analysis = TrackAnalyzer().analyze_reader(reader, str(file))
    display_tracks_table(analysis)

    if not analysis.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
