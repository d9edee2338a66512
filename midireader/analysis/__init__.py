"""Analysis tools for MIDI files."""

from midireader.analysis.track_analyzer import (
    TrackAnalyzer,
    TrackAnalysis,
    FileAnalysis,
    midi_note_to_name,
)

__all__ = [
    "TrackAnalyzer",
    "TrackAnalysis",
    "FileAnalysis",
    "midi_note_to_name",
]
