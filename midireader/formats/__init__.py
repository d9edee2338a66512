"""Format handlers for MIDI files."""

from midireader.formats.smf import MidiFileReader, open_session, decode_track

__all__ = ["MidiFileReader", "open_session", "decode_track"]
