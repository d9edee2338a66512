"""
MIDI file analyzer.

Summarizes a Standard MIDI File for display:
- Header fields and division
- Per-track event counts by kind
- Channels, note range and total ticks per track
- Track names and End of Track presence
- Drift between declared and consumed track length
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from midireader.exceptions import MidiDecodeError
from midireader.formats.smf.reader import MidiFileReader
from midireader.models.event import (
    ChannelVoiceEvent,
    EventKind,
    MetaEvent,
    MetaType,
)
from midireader.models.header import HeaderInfo

logger = logging.getLogger(__name__)


def midi_note_to_name(midi_note: int) -> str:
    """Convert MIDI note number to note name (e.g., 60 -> C4)."""
    if midi_note < 0 or midi_note > 127:
        return f"?{midi_note}"
    notes = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
    octave = (midi_note // 12) - 1
    note = notes[midi_note % 12]
    return f"{note}{octave}"


@dataclass
class TrackAnalysis:
    """Summary of one decoded track."""

    index: int
    start_offset: int
    declared_length: int
    name: str = ""
    event_count: int = 0
    kind_counts: Dict[EventKind, int] = field(default_factory=dict)
    channels: List[int] = field(default_factory=list)  # 0-based, sorted
    total_ticks: int = 0
    note_low: Optional[int] = None
    note_high: Optional[int] = None
    has_end_of_track: bool = False
    consumed_length: Optional[int] = None  # unset when decoding failed
    error: Optional[str] = None

    @property
    def drift(self) -> Optional[int]:
        """Bytes consumed beyond (+) or short of (-) the declared length."""
        if self.consumed_length is None:
            return None
        return self.consumed_length - self.declared_length

    @property
    def note_range_str(self) -> str:
        if self.note_low is None or self.note_high is None:
            return ""
        return f"{midi_note_to_name(self.note_low)}-{midi_note_to_name(self.note_high)}"

    @property
    def valid(self) -> bool:
        return self.error is None


@dataclass
class FileAnalysis:
    """Summary of a whole MIDI file."""

    filepath: str
    filesize: int
    header: HeaderInfo
    tracks: List[TrackAnalysis] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(track.valid for track in self.tracks)

    @property
    def total_events(self) -> int:
        return sum(track.event_count for track in self.tracks)


class TrackAnalyzer:
    """
    Analyzer for Standard MIDI Files.

    Example:
        analyzer = TrackAnalyzer()
        analysis = analyzer.analyze_file("song.mid")
        for track in analysis.tracks:
            print(track.index, track.name, track.event_count)
    """

    def analyze_file(self, filepath: Union[str, Path], strict: bool = False) -> FileAnalysis:
        """
        Open and analyze every track of a file.

        Header errors propagate; a track that fails to decode is recorded
        with its error and the remaining tracks are still analyzed.
        """
        reader = MidiFileReader.read(filepath, strict=strict)
        return self.analyze_reader(reader, str(filepath))

    def analyze_reader(self, reader: MidiFileReader, filepath: str = "") -> FileAnalysis:
        analysis = FileAnalysis(
            filepath=filepath,
            filesize=len(reader.data),
            header=reader.header,
        )

        for track in reader.tracks:
            analysis.tracks.append(self.analyze_track(reader, track.index))

        return analysis

    def analyze_track(self, reader: MidiFileReader, index: int) -> TrackAnalysis:
        """Decode one track and summarize it."""
        track = reader.get_track(index)
        result = TrackAnalysis(
            index=track.index,
            start_offset=track.start_offset,
            declared_length=track.length,
        )

        kinds: Counter = Counter()
        channels = set()

        try:
            for event in reader.decode_track(track):
                kinds[event.kind] += 1
                result.total_ticks += event.delta_time
                payload = event.payload

                if isinstance(payload, ChannelVoiceEvent):
                    channels.add(payload.channel)
                    if payload.is_note_on:
                        note = payload.note
                        result.note_low = note if result.note_low is None else min(result.note_low, note)
                        result.note_high = note if result.note_high is None else max(result.note_high, note)

                elif isinstance(payload, MetaEvent):
                    if payload.meta_type == MetaType.TRACK_NAME and not result.name:
                        result.name = payload.text
                    elif payload.is_end_of_track:
                        result.has_end_of_track = True

        except MidiDecodeError as e:
            logger.debug("Track %d failed to decode: %s", index, e)
            result.error = str(e)

        result.event_count = sum(kinds.values())
        result.kind_counts = dict(kinds)
        result.channels = sorted(channels)
        if result.error is None:
            result.consumed_length = reader.cursor.position - track.start_offset

        return result
