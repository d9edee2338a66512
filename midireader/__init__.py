"""
midireader - Standard MIDI File decoder.

This library provides tools to:
- Decode the MThd header (format, track count, PPQ or SMPTE division)
- Locate every MTrk chunk without parsing it
- Lazily decode track events, including running status, meta and SysEx events

Example usage:
    from midireader import MidiFileReader

    reader = MidiFileReader.read("song.mid")
    print(f"Format {reader.header.format}, {len(reader.tracks)} tracks")

    for event in reader.decode_track(0):
        print(event.delta_time, event.payload)
"""

__version__ = "0.1.0"
__author__ = "midireader Contributors"

from midireader.exceptions import (
    MidiDecodeError,
    TruncatedInputError,
    MalformedVarintError,
    RunningStatusUnavailableError,
    InvalidFormatError,
    MalformedTrackLengthError,
)
from midireader.formats.smf.reader import MidiFileReader, open_session, decode_track
from midireader.models.event import TrackEvent, EventKind
from midireader.models.header import HeaderInfo
from midireader.models.track import TrackRef

__all__ = [
    "MidiFileReader",
    "open_session",
    "decode_track",
    "HeaderInfo",
    "TrackRef",
    "TrackEvent",
    "EventKind",
    "MidiDecodeError",
    "TruncatedInputError",
    "MalformedVarintError",
    "RunningStatusUnavailableError",
    "InvalidFormatError",
    "MalformedTrackLengthError",
]
