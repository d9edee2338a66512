"""
Display formatting utilities for CLI output.

Provides bar graphics, hex strings and one-line descriptions of decoded
MIDI header fields and events.
"""

from typing import Optional

from midireader.analysis.track_analyzer import midi_note_to_name
from midireader.models.event import (
    ChannelOpcode,
    ChannelVoiceEvent,
    EventPayload,
    MetaEvent,
    SysExEvent,
    SystemCommonEvent,
    UnknownEvent,
)
from midireader.models.header import Division, SmpteFormat


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic.

    Returns:
        Formatted string like " 91 [███████░░░]" (default scale is the 7-bit MIDI range)
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:3d} [{bar}]"
    return f"[{bar}]"


def hex_bytes(data: bytes, limit: Optional[int] = None) -> str:
    """Space-separated hex, truncated with an ellipsis after limit bytes."""
    shown = data if limit is None else data[:limit]
    text = " ".join(f"{b:02X}" for b in shown)
    if limit is not None and len(data) > limit:
        text += " …"
    return text


def printable_text(data: bytes) -> str:
    """Latin-1 text with control characters replaced by dots."""
    return "".join(chr(b) if 32 <= b < 127 or b >= 160 else "." for b in data)


def format_division(division: Division) -> str:
    if isinstance(division, SmpteFormat):
        return (
            f"SMPTE {division.frame_rate} fps (code {division.frames_per_second}), "
            f"{division.ticks_per_frame} ticks/frame"
        )
    return f"PPQ {division.ticks} ticks/quarter note"


def format_status(payload: EventPayload) -> str:
    """Status byte as hex, parenthesised when it came from running status."""
    if isinstance(payload, ChannelVoiceEvent):
        if payload.running_status:
            return f"({payload.status:02X})"
        return f"{payload.status:02X}"
    if isinstance(payload, MetaEvent):
        return "FF"
    return f"{payload.status:02X}"


def event_type_name(payload: EventPayload) -> str:
    if isinstance(payload, ChannelVoiceEvent):
        return payload.name
    if isinstance(payload, MetaEvent):
        return "Meta Event"
    if isinstance(payload, SysExEvent):
        return "SysEx Continuation" if payload.continuation else "SysEx Event"
    if isinstance(payload, SystemCommonEvent):
        return payload.name
    return "Unknown"


def describe_channel_voice(event: ChannelVoiceEvent) -> str:
    """Decoded fields of a channel voice event."""
    ch = f"Ch {event.channel + 1:2d}"
    op = event.opcode

    if op in (ChannelOpcode.NOTE_OFF, ChannelOpcode.NOTE_ON):
        return (
            f"{ch}  Note {event.note:3d} ({midi_note_to_name(event.note)})  "
            f"Velocity {event.velocity}"
        )
    if op == ChannelOpcode.POLY_PRESSURE:
        return f"{ch}  Key {event.note:3d}  Value {event.value}"
    if op == ChannelOpcode.CONTROL_CHANGE:
        return f"{ch}  Controller {event.controller:3d}  Value {event.value}"
    if op == ChannelOpcode.PROGRAM_CHANGE:
        return f"{ch}  Program {event.program}"
    if op == ChannelOpcode.CHANNEL_PRESSURE:
        return f"{ch}  Value {event.value}"
    return f"{ch}  LSB {event.data[0]}  MSB {event.data[1]}  ({event.pitch - 8192:+d})"


def describe_meta(event: MetaEvent, hex_limit: int = 16) -> str:
    """Label, length and contents of a meta event."""
    label = event.label or f"Unknown meta 0x{event.meta_type:02X}"
    parts = [f"{label}  len {len(event.data)}"]

    if event.tempo is not None:
        if event.bpm is not None:
            parts.append(f"{event.tempo} µs/qn ({event.bpm:.2f} BPM)")
        else:
            parts.append(f"{event.tempo} µs/qn")
    elif event.time_signature is not None:
        num, den, clocks, notated = event.time_signature
        parts.append(f"{num}/{den}  {clocks} clocks/click  {notated} 32nds/qn")
    elif event.key_signature is not None:
        sf, minor = event.key_signature
        accidentals = f"{abs(sf)} {'sharp' if sf >= 0 else 'flat'}{'s' if abs(sf) != 1 else ''}"
        parts.append(f"{accidentals} {'minor' if minor else 'major'}")
    elif event.is_text:
        parts.append(f'"{printable_text(event.data)}"')

    if event.data and not event.is_text:
        parts.append(f"[{hex_bytes(event.data, hex_limit)}]")

    return "  ".join(parts)


def describe_event(payload: EventPayload) -> str:
    """One-line description of any payload variant."""
    if isinstance(payload, ChannelVoiceEvent):
        return describe_channel_voice(payload)
    if isinstance(payload, MetaEvent):
        return describe_meta(payload)
    if isinstance(payload, SysExEvent):
        return f"len {len(payload.data)}  [{hex_bytes(payload.data, 16)}]"
    if isinstance(payload, SystemCommonEvent):
        return "payload skipped"
    if isinstance(payload, UnknownEvent):
        return f"status 0x{payload.status:02X}, no payload"
    return ""
