"""
Exceptions raised while decoding Standard MIDI Files.

Every error is terminal to the decode call that raised it. The input is
a static file, so nothing is retried.
"""


class MidiDecodeError(ValueError):
    """Base class for all decoding failures (faulty or non-MIDI input)."""

    pass


class TruncatedInputError(MidiDecodeError, EOFError):
    """The source ended before a fixed-size field could be read."""

    pass


class MalformedVarintError(MidiDecodeError):
    """A variable-length quantity ran past 4 bytes or was cut short."""

    pass


class RunningStatusUnavailableError(MidiDecodeError):
    """A data byte appeared where a status byte was needed and no running status exists."""

    pass


class InvalidFormatError(MidiDecodeError):
    """The header chunk is not a usable MThd chunk."""

    pass


class MalformedTrackLengthError(MidiDecodeError):
    """Decoded events did not end exactly at the track's declared end (strict mode)."""

    pass
