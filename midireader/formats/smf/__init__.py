"""Standard MIDI File (.mid) format handlers."""

from midireader.formats.smf.reader import MidiFileReader, open_session, open_reader, decode_track
from midireader.formats.smf.cursor import ByteCursor
from midireader.formats.smf.chunk_parser import ChunkHeader, read_chunk_header, scan_tracks
from midireader.formats.smf.header import read_header, decode_division
from midireader.formats.smf.event_decoder import TrackEventDecoder, decode_event

__all__ = [
    "MidiFileReader",
    "open_session",
    "open_reader",
    "decode_track",
    "ByteCursor",
    "ChunkHeader",
    "read_chunk_header",
    "scan_tracks",
    "read_header",
    "decode_division",
    "TrackEventDecoder",
    "decode_event",
]
