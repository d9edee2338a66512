"""Tests for event and header models."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from midireader.models.event import (
    ChannelOpcode,
    ChannelVoiceEvent,
    MetaEvent,
    SystemCommonEvent,
    SystemCommonKind,
    channel_data_length,
    meta_type_label,
)
from midireader.models.header import HeaderInfo, SmpteFormat, TicksPerQuarterNote
from midireader.models.track import RunningStatus, TrackRef


class TestMetaLabels:
    """Test cases for the meta type label table."""

    @pytest.mark.parametrize(
        "meta_type,label",
        [
            (0x00, "Sequence Number"),
            (0x01, "Text Event"),
            (0x02, "Copyright Notice"),
            (0x03, "Track Name"),
            (0x04, "Instrument Name"),
            (0x05, "Lyric"),
            (0x06, "Marker"),
            (0x07, "Cue Point"),
            (0x20, "MIDI Channel Prefix"),
            (0x2F, "End of Track"),
            (0x51, "Set Tempo"),
            (0x54, "SMPTE Offset"),
            (0x58, "Time Signature"),
            (0x59, "Key Signature"),
            (0x7F, "Sequencer-Specific"),
        ],
    )
    def test_known_labels(self, meta_type, label):
        assert meta_type_label(meta_type) == label

    @pytest.mark.parametrize("meta_type", [0x08, 0x21, 0x60, 0x7E])
    def test_unknown_label(self, meta_type):
        assert meta_type_label(meta_type) is None


class TestChannelVoiceEvent:
    """Test cases for channel voice helpers."""

    def test_data_lengths(self):
        assert channel_data_length(0xC0) == 1
        assert channel_data_length(0xD0) == 1
        for opcode in (0x80, 0x90, 0xA0, 0xB0, 0xE0):
            assert channel_data_length(opcode) == 2

    def test_not_a_channel_opcode(self):
        with pytest.raises(ValueError):
            channel_data_length(0xF0)

    def test_note_fields(self):
        event = ChannelVoiceEvent(ChannelOpcode.NOTE_ON, 9, b"\x24\x64")

        assert event.status == 0x99
        assert event.name == "Note On"
        assert event.note == 36
        assert event.velocity == 100
        assert event.is_note_on
        assert event.controller is None

    def test_control_change(self):
        event = ChannelVoiceEvent(ChannelOpcode.CONTROL_CHANGE, 0, b"\x07\x64")
        assert event.controller == 7
        assert event.value == 100
        assert event.note is None

    def test_channel_pressure(self):
        event = ChannelVoiceEvent(ChannelOpcode.CHANNEL_PRESSURE, 0, b"\x30")
        assert event.value == 0x30
        assert event.data2 is None

    def test_pitch_wheel(self):
        """Test the 14-bit pitch value is LSB first."""
        event = ChannelVoiceEvent(ChannelOpcode.PITCH_BEND, 0, b"\x00\x40")
        assert event.pitch == 8192
        assert event.name == "Pitch Wheel Change"


class TestMetaEvent:
    """Test cases for meta event helpers."""

    def test_key_signature_flats(self):
        event = MetaEvent(meta_type=0x59, data=bytes([0xFD, 0x01]))
        assert event.key_signature == (-3, True)

    def test_tempo_wrong_length(self):
        assert MetaEvent(meta_type=0x51, data=b"\x07\xa1").tempo is None

    def test_text_is_latin1(self):
        event = MetaEvent(meta_type=0x01, data=b"Caf\xe9")
        assert event.is_text
        assert event.text == "Café"

    def test_system_common_name(self):
        assert SystemCommonEvent(SystemCommonKind.SONG_SELECT).name == "Song Select"


class TestHeaderModels:
    """Test cases for header and track models."""

    def test_format_names(self):
        header = HeaderInfo(format=0, track_count=1, division=TicksPerQuarterNote(96))
        assert header.format_name == "Single track"
        assert not header.is_smpte

    def test_smpte_frame_rate(self):
        assert SmpteFormat(frames_per_second=-29, ticks_per_frame=80).frame_rate == 29

    def test_track_ref(self):
        track = TrackRef(index=0, start_offset=22, end_offset=100)
        assert track.length == 78
        assert track.chunk_offset == 14

    def test_running_status_byte(self):
        assert RunningStatus(opcode=0xB0, channel=15).status_byte == 0xBF
