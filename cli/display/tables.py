"""
Rich table displays for MIDI file information.

Provides formatted output for header, track and event listings.
"""

from itertools import islice
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import (
    describe_event,
    event_type_name,
    format_status,
    value_bar,
)
from midireader.analysis.track_analyzer import FileAnalysis
from midireader.models.event import EventKind, TrackEvent
from midireader.models.header import HeaderInfo, SmpteFormat

console = Console()

KIND_STYLES = {
    EventKind.CHANNEL_VOICE: "cyan",
    EventKind.META: "magenta",
    EventKind.SYSEX: "yellow",
    EventKind.SYSTEM_COMMON: "blue",
    EventKind.UNKNOWN: "red",
}


def display_header_info(header: HeaderInfo, filepath: str = "", filesize: int = 0) -> None:
    """Display the MThd chunk fields."""
    division = header.division

    lines = []
    if filepath:
        lines.append(f"[bold]File:[/bold] {escape(filepath)}")
        lines.append(f"[bold]Size:[/bold] {filesize} bytes")
    lines.append("[bold]Chunk Type:[/bold] MThd")
    lines.append(f"[bold]Chunk Length:[/bold] {header.chunk_length}")
    lines.append(f"[bold]File Format:[/bold] {header.format} ({header.format_name})")
    lines.append(f"[bold]Number of Tracks:[/bold] {header.track_count}")
    lines.append(f"[bold]Division Type:[/bold] {division.kind}")

    if isinstance(division, SmpteFormat):
        lines.append(f"[bold]SMPTE Format:[/bold] {division.frames_per_second}")
        lines.append(f"[bold]Ticks Per Frame:[/bold] {division.ticks_per_frame}")
    else:
        lines.append(f"[bold]Ticks Per Quarter Note:[/bold] {division.ticks}")

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]MIDI Header[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_tracks_table(analysis: FileAnalysis) -> None:
    """Display a summary table of all tracks."""
    table = Table(
        title="Tracks",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style="cyan", width=20)
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Length", width=8)
    table.add_column("Events", width=18)
    table.add_column("Channels", width=12)
    table.add_column("Notes", width=9)
    table.add_column("Ticks", width=8)
    table.add_column("Status", width=12)

    max_events = max((t.event_count for t in analysis.tracks), default=0)

    for track in analysis.tracks:
        channels = ",".join(str(ch + 1) for ch in track.channels) or "-"

        if track.error:
            status = "[red]Error[/red]"
        elif track.drift:
            status = f"[yellow]Drift {track.drift:+d}[/yellow]"
        elif not track.has_end_of_track:
            status = "[yellow]No EOT[/yellow]"
        else:
            status = "[green]OK[/green]"

        table.add_row(
            str(track.index),
            escape(track.name) or "[dim]-[/dim]",
            f"0x{track.start_offset:X}",
            str(track.declared_length),
            value_bar(track.event_count, max_value=max_events, width=10),
            channels,
            track.note_range_str or "-",
            str(track.total_ticks),
            status,
        )

    console.print(table)

    for track in analysis.tracks:
        if track.error:
            console.print(f"[red]Track {track.index}: {escape(track.error)}[/red]")


def display_events(
    events: Iterable[TrackEvent],
    title: str = "Events",
    limit: Optional[int] = None,
    show_offsets: bool = True,
) -> int:
    """
    Display decoded events as a table.

    Events are consumed lazily; with a limit, decoding stops early.

    Returns:
        Number of events displayed
    """
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold green")
    if show_offsets:
        table.add_column("Offset", style="dim", width=8)
    table.add_column("Delta", justify="right", width=7)
    table.add_column("Time", justify="right", width=8)
    table.add_column("Status", width=6)
    table.add_column("Type", width=24)
    table.add_column("Details")

    shown = 0
    ticks = 0

    if limit is not None:
        events = islice(events, limit)

    # Rows decoded before a failure are still shown
    try:
        for event in events:
            ticks += event.delta_time
            style = KIND_STYLES.get(event.kind, "white")

            row = [
                str(event.delta_time),
                str(ticks),
                format_status(event.payload),
                f"[{style}]{event_type_name(event.payload)}[/{style}]",
                escape(describe_event(event.payload)),
            ]
            if show_offsets:
                row.insert(0, f"0x{event.offset:X}")

            table.add_row(*row)
            shown += 1
    finally:
        console.print(table)

    return shown
