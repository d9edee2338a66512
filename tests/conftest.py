"""Test configuration and fixtures."""

import struct

import pytest


def chunk(tag: bytes, body: bytes, length=None) -> bytes:
    """Frame a chunk body; length overrides the declared length."""
    if length is None:
        length = len(body)
    return tag + struct.pack(">I", length) + body


def header_chunk(file_format=1, track_count=1, division=96) -> bytes:
    return chunk(b"MThd", struct.pack(">HHH", file_format, track_count, division))


def smf(tracks, file_format=None, division=96) -> bytes:
    """Build a file image from a list of MTrk event streams."""
    if file_format is None:
        file_format = 0 if len(tracks) == 1 else 1
    body = b"".join(chunk(b"MTrk", events) for events in tracks)
    return header_chunk(file_format, len(tracks), division) + body


# Two note-ons on channel 0, the second using running status, then End of Track
RUNNING_STATUS_TRACK = bytes(
    [0x00, 0x90, 0x3C, 0x40, 0x00, 0x3C, 0x00, 0x00, 0xFF, 0x2F, 0x00]
)

# Track name "Test", tempo 120 BPM, 4/4, program change, note, End of Track
NAMED_TRACK = bytes(
    [0x00, 0xFF, 0x03, 0x04]
    + list(b"Test")
    + [0x00, 0xFF, 0x51, 0x03, 0x07, 0xA1, 0x20]
    + [0x00, 0xFF, 0x58, 0x04, 0x04, 0x02, 0x18, 0x08]
    + [0x00, 0xC1, 0x05]
    + [0x00, 0x91, 0x40, 0x64]
    + [0x83, 0x60, 0x81, 0x40, 0x00]
    + [0x00, 0xFF, 0x2F, 0x00]
)


@pytest.fixture
def make_chunk():
    """Return the chunk framing helper."""
    return chunk


@pytest.fixture
def make_smf():
    """Return the file image builder."""
    return smf


@pytest.fixture
def running_status_track():
    return RUNNING_STATUS_TRACK


@pytest.fixture
def named_track():
    return NAMED_TRACK


@pytest.fixture
def two_track_data():
    """Format 1 file: a named track and a running status track."""
    return smf([NAMED_TRACK, RUNNING_STATUS_TRACK], division=480)


@pytest.fixture
def two_track_file(tmp_path, two_track_data):
    """Return path to a two-track .mid file on disk."""
    path = tmp_path / "song.mid"
    path.write_bytes(two_track_data)
    return path
