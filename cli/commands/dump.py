"""
Dump command - annotated hex dump of a MIDI file.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cli.commands.info import open_midi_file
from midireader.formats.smf.reader import MidiFileReader

console = Console()
app = typer.Typer()

TRACK_COLORS = ["cyan", "green", "magenta", "yellow", "blue", "bright_cyan", "bright_green"]

# (start, end, name, description, color)
Region = Tuple[int, int, str, str, str]


def build_regions(reader: MidiFileReader) -> List[Region]:
    """Map the header chunk and each track chunk to a named, colored region."""
    header_end = 8 + reader.header.chunk_length
    regions: List[Region] = [(0, header_end, "MThd", "Header chunk", "bright_blue")]

    for track in reader.tracks:
        color = TRACK_COLORS[track.index % len(TRACK_COLORS)]
        regions.append(
            (
                track.chunk_offset,
                track.end_offset,
                f"MTrk {track.index}",
                f"Track {track.index} ({track.length} bytes of events)",
                color,
            )
        )

    return regions


def get_region_for_offset(regions: List[Region], offset: int) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "OTHER", "Alien chunk or trailing data", "dim"


def format_hex_line(
    regions: List[Region], data: bytes, offset: int, bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump with colors and annotations.

    Returns Rich Text object with colored output.
    """
    region_name, _, region_color = get_region_for_offset(regions, offset)

    text = Text()
    text.append(f"0x{offset:06X} ", style="dim")
    text.append(f"[{region_name:8s}] ", style=region_color)

    for byte in data:
        if byte == 0x00:
            style = "dim"
        elif byte & 0x80:
            # Status bytes and VLQ continuation bytes
            style = "bold yellow"
        else:
            style = "bold white"

        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    # Pad if less than full line
    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    # ASCII representation
    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=50)

    for start, end, name, desc, color in regions:
        table.add_row(
            Text(name, style=color),
            f"{desc} (0x{start:X}-0x{end - 1:X})",
        )

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="MIDI file to dump"),
    track: Optional[int] = typer.Option(
        None, "--track", "-t", help="Dump only this track chunk (0-based)"
    ),
    start: int = typer.Option(0, "--start", "-s", help="Start offset"),
    length: int = typer.Option(0, "--length", "-l", help="Number of bytes (0=all)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a MIDI file.

    Lines are tagged with the chunk they belong to; bytes with the high
    bit set (status bytes, VLQ continuation bytes) are highlighted.

    Examples:

        midireader dump song.mid

        midireader dump song.mid --track 1

        midireader dump song.mid --start 22 --length 64
    """
    reader = open_midi_file(file)
    data = reader.data
    regions = build_regions(reader)

    if track is not None:
        if not 0 <= track < len(reader.tracks):
            console.print(
                f"[red]Invalid track number: {track}. Use 0-{len(reader.tracks) - 1}.[/red]"
            )
            raise typer.Exit(1)
        ref = reader.get_track(track)
        start = ref.chunk_offset
        length = ref.end_offset - ref.chunk_offset

    if length == 0:
        length = len(data) - start

    end = min(start + length, len(data))

    if not no_legend and track is None:
        console.print(create_legend(regions))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Showing:[/bold] 0x{start:X} - 0x{max(start, end - 1):X} "
            f"({max(0, end - start)} bytes)",
            title="[bold]MIDI Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    lines_shown = 0
    for offset in range(start, end, width):
        chunk = data[offset : min(offset + width, end)]
        console.print(format_hex_line(regions, chunk, offset, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
