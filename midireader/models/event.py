"""
Track event data models.

A decoded event is a delta time plus exactly one payload variant:
channel voice, meta, SysEx, system common or unknown.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Optional, Tuple, Union


class EventKind(str, Enum):
    """Payload categories produced by the track decoder."""

    CHANNEL_VOICE = "channel_voice"
    META = "meta"
    SYSEX = "sysex"
    SYSTEM_COMMON = "system_common"
    UNKNOWN = "unknown"


class ChannelOpcode(IntEnum):
    """Channel voice message families (high nibble of the status byte)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0


CHANNEL_OPCODE_NAMES = {
    ChannelOpcode.NOTE_OFF: "Note Off",
    ChannelOpcode.NOTE_ON: "Note On",
    ChannelOpcode.POLY_PRESSURE: "Polyphonic Key Pressure",
    ChannelOpcode.CONTROL_CHANGE: "Control Change",
    ChannelOpcode.PROGRAM_CHANGE: "Program Change",
    ChannelOpcode.CHANNEL_PRESSURE: "Channel Pressure",
    ChannelOpcode.PITCH_BEND: "Pitch Wheel Change",
}

# Data bytes following the status byte
CHANNEL_DATA_LENGTHS = {
    ChannelOpcode.NOTE_OFF: 2,
    ChannelOpcode.NOTE_ON: 2,
    ChannelOpcode.POLY_PRESSURE: 2,
    ChannelOpcode.CONTROL_CHANGE: 2,
    ChannelOpcode.PROGRAM_CHANGE: 1,
    ChannelOpcode.CHANNEL_PRESSURE: 1,
    ChannelOpcode.PITCH_BEND: 2,
}


def channel_data_length(opcode: int) -> int:
    """
    Number of data bytes for a channel voice opcode.

    Raises:
        ValueError: If opcode is not one of 0x80-0xE0
    """
    try:
        return CHANNEL_DATA_LENGTHS[ChannelOpcode(opcode)]
    except ValueError:
        raise ValueError(f"Not a channel voice opcode: 0x{opcode:02X}") from None


class MetaType(IntEnum):
    """Meta event types with a known meaning."""

    SEQUENCE_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    CHANNEL_PREFIX = 0x20
    END_OF_TRACK = 0x2F
    SET_TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F


META_TYPE_LABELS = {
    MetaType.SEQUENCE_NUMBER: "Sequence Number",
    MetaType.TEXT: "Text Event",
    MetaType.COPYRIGHT: "Copyright Notice",
    MetaType.TRACK_NAME: "Track Name",
    MetaType.INSTRUMENT_NAME: "Instrument Name",
    MetaType.LYRIC: "Lyric",
    MetaType.MARKER: "Marker",
    MetaType.CUE_POINT: "Cue Point",
    MetaType.CHANNEL_PREFIX: "MIDI Channel Prefix",
    MetaType.END_OF_TRACK: "End of Track",
    MetaType.SET_TEMPO: "Set Tempo",
    MetaType.SMPTE_OFFSET: "SMPTE Offset",
    MetaType.TIME_SIGNATURE: "Time Signature",
    MetaType.KEY_SIGNATURE: "Key Signature",
    MetaType.SEQUENCER_SPECIFIC: "Sequencer-Specific",
}

TEXT_META_TYPES = frozenset(range(0x01, 0x08))


def meta_type_label(meta_type: int) -> Optional[str]:
    """Human-readable name for a meta type byte, None if unrecognized."""
    try:
        return META_TYPE_LABELS[MetaType(meta_type)]
    except ValueError:
        return None


class SystemCommonKind(IntEnum):
    """System common messages with a payload the decoder skips."""

    SONG_POSITION_POINTER = 0xF2
    SONG_SELECT = 0xF3


SYSTEM_COMMON_LENGTHS = {
    SystemCommonKind.SONG_POSITION_POINTER: 2,
    SystemCommonKind.SONG_SELECT: 1,
}


@dataclass(frozen=True)
class ChannelVoiceEvent:
    """
    Note, controller, program, pressure or pitch wheel message.

    Attributes:
        opcode: Message family (ChannelOpcode)
        channel: MIDI channel 0-15
        data: 1 data byte (program change, channel pressure) or 2
        running_status: True if the status byte was omitted in the file
    """

    kind: ClassVar[EventKind] = EventKind.CHANNEL_VOICE

    opcode: ChannelOpcode
    channel: int
    data: bytes
    running_status: bool = False

    @property
    def status(self) -> int:
        return self.opcode | self.channel

    @property
    def name(self) -> str:
        return CHANNEL_OPCODE_NAMES[self.opcode]

    @property
    def data1(self) -> int:
        return self.data[0]

    @property
    def data2(self) -> Optional[int]:
        return self.data[1] if len(self.data) > 1 else None

    @property
    def is_note_on(self) -> bool:
        """Note-on with velocity > 0."""
        return self.opcode == ChannelOpcode.NOTE_ON and self.data[1] > 0

    @property
    def is_note_off(self) -> bool:
        """Note-off, or note-on with velocity 0."""
        return self.opcode == ChannelOpcode.NOTE_OFF or (
            self.opcode == ChannelOpcode.NOTE_ON and self.data[1] == 0
        )

    @property
    def note(self) -> Optional[int]:
        if self.opcode in (
            ChannelOpcode.NOTE_OFF,
            ChannelOpcode.NOTE_ON,
            ChannelOpcode.POLY_PRESSURE,
        ):
            return self.data[0]
        return None

    @property
    def velocity(self) -> Optional[int]:
        if self.opcode in (ChannelOpcode.NOTE_OFF, ChannelOpcode.NOTE_ON):
            return self.data[1]
        return None

    @property
    def controller(self) -> Optional[int]:
        return self.data[0] if self.opcode == ChannelOpcode.CONTROL_CHANGE else None

    @property
    def value(self) -> Optional[int]:
        """Controller value, key pressure or channel pressure."""
        if self.opcode in (ChannelOpcode.CONTROL_CHANGE, ChannelOpcode.POLY_PRESSURE):
            return self.data[1]
        if self.opcode == ChannelOpcode.CHANNEL_PRESSURE:
            return self.data[0]
        return None

    @property
    def program(self) -> Optional[int]:
        return self.data[0] if self.opcode == ChannelOpcode.PROGRAM_CHANGE else None

    @property
    def pitch(self) -> Optional[int]:
        """Pitch wheel position 0-16383 (8192 = centre)."""
        if self.opcode != ChannelOpcode.PITCH_BEND:
            return None
        return (self.data[1] << 7) | self.data[0]


@dataclass(frozen=True)
class MetaEvent:
    """
    Meta event (status 0xFF).

    Attributes:
        meta_type: Type byte (not necessarily a known MetaType)
        data: Payload bytes, verbatim
    """

    kind: ClassVar[EventKind] = EventKind.META

    meta_type: int
    data: bytes

    @property
    def label(self) -> Optional[str]:
        return meta_type_label(self.meta_type)

    @property
    def is_text(self) -> bool:
        return self.meta_type in TEXT_META_TYPES

    @property
    def is_end_of_track(self) -> bool:
        return self.meta_type == MetaType.END_OF_TRACK

    @property
    def text(self) -> str:
        """Payload decoded as Latin-1 (text meta events carry 8-bit text)."""
        return self.data.decode("latin-1")

    @property
    def tempo(self) -> Optional[int]:
        """Microseconds per quarter note for Set Tempo events."""
        if self.meta_type != MetaType.SET_TEMPO or len(self.data) != 3:
            return None
        return int.from_bytes(self.data, "big")

    @property
    def bpm(self) -> Optional[float]:
        tempo = self.tempo
        if not tempo:
            return None
        return 60_000_000 / tempo

    @property
    def time_signature(self) -> Optional[Tuple[int, int, int, int]]:
        """(numerator, denominator, clocks per click, 32nds per quarter)."""
        if self.meta_type != MetaType.TIME_SIGNATURE or len(self.data) != 4:
            return None
        nn, dd, cc, bb = self.data
        return nn, 2**dd, cc, bb

    @property
    def key_signature(self) -> Optional[Tuple[int, bool]]:
        """(sharps if positive / flats if negative, is_minor)."""
        if self.meta_type != MetaType.KEY_SIGNATURE or len(self.data) != 2:
            return None
        sf = self.data[0] - 256 if self.data[0] > 127 else self.data[0]
        return sf, bool(self.data[1])


@dataclass(frozen=True)
class SysExEvent:
    """
    System exclusive event.

    Attributes:
        data: Payload bytes after the length field
        continuation: True for the 0xF7 (escape/continuation) form
    """

    kind: ClassVar[EventKind] = EventKind.SYSEX

    data: bytes
    continuation: bool = False

    @property
    def status(self) -> int:
        return 0xF7 if self.continuation else 0xF0


@dataclass(frozen=True)
class SystemCommonEvent:
    """Song Position Pointer or Song Select; the payload is skipped."""

    kind: ClassVar[EventKind] = EventKind.SYSTEM_COMMON

    common_kind: SystemCommonKind

    @property
    def status(self) -> int:
        return int(self.common_kind)

    @property
    def name(self) -> str:
        return self.common_kind.name.replace("_", " ").title()


@dataclass(frozen=True)
class UnknownEvent:
    """Status byte without a payload rule; nothing after it was consumed."""

    kind: ClassVar[EventKind] = EventKind.UNKNOWN

    status: int


EventPayload = Union[ChannelVoiceEvent, MetaEvent, SysExEvent, SystemCommonEvent, UnknownEvent]


@dataclass(frozen=True)
class TrackEvent:
    """
    A single decoded track event.

    Attributes:
        delta_time: Ticks since the previous event in the track
        payload: One of the payload variants
        offset: Source offset of the event's first (delta time) byte
    """

    delta_time: int
    payload: EventPayload
    offset: int = 0

    @property
    def kind(self) -> EventKind:
        return self.payload.kind
