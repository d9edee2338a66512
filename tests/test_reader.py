"""Tests for the MIDI file reader session."""

import io
import struct

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from midireader import (
    InvalidFormatError,
    MalformedTrackLengthError,
    MidiFileReader,
    TruncatedInputError,
    decode_track,
    open_session,
)
from midireader.formats.smf.reader import open_reader
from midireader.models.event import EventKind


class TestOpenSession:
    """Test cases for opening a file image."""

    def test_from_bytes(self, two_track_data):
        header, tracks = open_session(two_track_data)

        assert header.format == 1
        assert header.track_count == 2
        assert header.division.ticks == 480
        assert len(tracks) == 2
        assert tracks[0].start_offset == 22

    def test_from_path(self, two_track_file):
        header, tracks = open_session(two_track_file)
        assert len(tracks) == 2

    def test_from_str_path(self, two_track_file):
        header, _ = open_session(str(two_track_file))
        assert header.format == 1

    def test_from_file_object(self, two_track_data):
        header, tracks = open_session(io.BytesIO(two_track_data))
        assert [t.index for t in tracks] == [0, 1]

    def test_unsupported_source(self):
        with pytest.raises(TypeError):
            open_session(12345)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_session(tmp_path / "missing.mid")

    def test_not_a_midi_file(self):
        with pytest.raises(InvalidFormatError):
            open_session(b"RIFF\x00\x00\x00\x06\x00\x00\x00\x01\x00\x60")

    def test_truncated_file(self, two_track_data):
        """Test a file cut inside the second chunk header."""
        with pytest.raises(TruncatedInputError):
            open_session(two_track_data[:65])

    def test_track_count_zero(self, make_smf):
        header, tracks = open_session(make_smf([], file_format=1))
        assert header.track_count == 0
        assert tracks == []


class TestMidiFileReader:
    """Test cases for MidiFileReader."""

    def test_read(self, two_track_file):
        reader = MidiFileReader.read(two_track_file)

        assert reader.header.format == 1
        assert len(reader.data) == two_track_file.stat().st_size

    def test_decode_track_by_index(self, two_track_data):
        reader = open_reader(two_track_data)
        events = reader.read_track_events(1)

        assert len(events) == 3
        assert events[1].payload.running_status

    def test_decode_track_restarts(self, two_track_data):
        """Test that each decode starts at the track's first event."""
        reader = open_reader(two_track_data)
        iterator = reader.decode_track(0)
        first = next(iterator)

        again = reader.read_track_events(0)
        assert again[0] == first
        assert len(again) == 7

    def test_decode_is_lazy(self, make_smf):
        """Test that a broken event is only reported when reached."""
        data = make_smf([bytes([0x00, 0xC0, 0x01, 0x00, 0x90, 0x3C])])
        reader = open_reader(data)
        iterator = reader.decode_track(0)

        assert next(iterator).payload.program == 1
        with pytest.raises(TruncatedInputError):
            next(iterator)

    def test_strict_override(self, make_chunk):
        """Test strict can be switched on for a single decode."""
        data = make_chunk(b"MThd", struct.pack(">HHH", 0, 1, 96)) + make_chunk(
            b"MTrk", bytes([0x00, 0x90, 0x3C, 0x40]), length=3
        )
        reader = open_reader(data)

        assert len(reader.read_track_events(0)) == 1
        with pytest.raises(MalformedTrackLengthError):
            list(reader.decode_track(0, strict=True))

    def test_get_track_out_of_range(self, two_track_data):
        reader = open_reader(two_track_data)
        with pytest.raises(IndexError):
            reader.get_track(2)

    def test_decode_without_data(self):
        with pytest.raises(RuntimeError):
            MidiFileReader().decode_track(0)

    def test_can_read(self, two_track_file, tmp_path):
        other = tmp_path / "other.bin"
        other.write_bytes(b"not midi at all")

        assert MidiFileReader.can_read(two_track_file)
        assert not MidiFileReader.can_read(other)
        assert not MidiFileReader.can_read(tmp_path / "missing.mid")


class TestDecodeTrack:
    """Test cases for the independent track decoder."""

    def test_interleaved_tracks(self, two_track_data):
        """Test two tracks can be walked at the same time."""
        _, tracks = open_session(two_track_data)
        first = decode_track(two_track_data, tracks[0])
        second = decode_track(two_track_data, tracks[1])

        kinds = []
        for a, b in zip(first, second):
            kinds.append((a.kind, b.kind))

        assert kinds == [
            (EventKind.META, EventKind.CHANNEL_VOICE),
            (EventKind.META, EventKind.CHANNEL_VOICE),
            (EventKind.META, EventKind.META),
        ]

    def test_offsets_are_absolute(self, two_track_data):
        _, tracks = open_session(two_track_data)
        events = list(decode_track(two_track_data, tracks[1]))
        assert events[0].offset == tracks[1].start_offset
