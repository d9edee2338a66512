"""
Track location and per-track decoder state models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackRef:
    """
    Location of one MTrk chunk's event stream in the source.

    Offsets are computed once when the file is opened, from the chunk's
    declared length. They are not checked against what decoding consumes.

    Attributes:
        index: Track number in file order (0-based)
        start_offset: Offset of the first event byte (just after the length field)
        end_offset: start_offset + declared length
    """

    index: int
    start_offset: int
    end_offset: int

    @property
    def length(self) -> int:
        """Declared length of the event stream in bytes."""
        return self.end_offset - self.start_offset

    @property
    def chunk_offset(self) -> int:
        """Offset of the chunk's 'MTrk' tag."""
        return self.start_offset - 8


@dataclass(frozen=True)
class RunningStatus:
    """
    Status reused by channel voice events that omit their status byte.

    A track starts with no running status (None); each decoded channel
    voice event replaces it.

    Attributes:
        opcode: High nibble of the last status byte (0x80-0xE0)
        channel: Low nibble of the last status byte (0-15)
    """

    opcode: int
    channel: int

    @property
    def status_byte(self) -> int:
        return self.opcode | self.channel
