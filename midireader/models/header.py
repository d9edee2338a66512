"""
Header chunk data models.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TicksPerQuarterNote:
    """
    Metrical timing: delta times count fractions of a quarter note.

    Attributes:
        ticks: Pulses per quarter note (15 bits)
    """

    ticks: int

    @property
    def kind(self) -> str:
        return "PPQ"


@dataclass(frozen=True)
class SmpteFormat:
    """
    Time-code timing: delta times count subdivisions of a SMPTE frame.

    Attributes:
        frames_per_second: Signed frame-rate code as stored (-24, -25, -29, -30)
        ticks_per_frame: Resolution within a frame
    """

    frames_per_second: int
    ticks_per_frame: int

    @property
    def kind(self) -> str:
        return "SMPTE"

    @property
    def frame_rate(self) -> int:
        """Frames per second as a positive number (-29 stands for 29.97 drop-frame)."""
        return -self.frames_per_second


Division = Union[TicksPerQuarterNote, SmpteFormat]


@dataclass(frozen=True)
class HeaderInfo:
    """
    Decoded MThd chunk.

    Attributes:
        format: File format (0 = single track, 1 = simultaneous, 2 = independent)
        track_count: Number of track chunks declared
        division: Timing division, PPQ or SMPTE
        chunk_length: Declared length of the header body (normally 6)
    """

    format: int
    track_count: int
    division: Division
    chunk_length: int = 6

    @property
    def is_smpte(self) -> bool:
        return isinstance(self.division, SmpteFormat)

    @property
    def format_name(self) -> str:
        names = {
            0: "Single track",
            1: "Multiple tracks, synchronous",
            2: "Multiple tracks, asynchronous",
        }
        return names.get(self.format, "Unknown")
