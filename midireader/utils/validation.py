"""
Sanity checks for Standard MIDI File structures.
"""

from midireader.exceptions import InvalidFormatError, MalformedTrackLengthError
from midireader.models.track import TrackRef

SMF_HEADER_MAGIC = b"MThd"
SMF_TRACK_MAGIC = b"MTrk"
VALID_FORMATS = (0, 1, 2)


def validate_header_tag(tag: str) -> None:
    """
    Validate the tag of the first chunk.

    Raises:
        InvalidFormatError: If the tag is not 'MThd'
    """
    if tag != SMF_HEADER_MAGIC.decode("latin-1"):
        raise InvalidFormatError(f"Expected 'MThd' header chunk, got {tag!r}")


def validate_header_length(length: int, minimum: int = 6) -> None:
    """
    Validate the declared header body length.

    Raises:
        InvalidFormatError: If the body is too short to hold format/tracks/division
    """
    if length < minimum:
        raise InvalidFormatError(f"Header chunk length must be at least {minimum}, got {length}")


def validate_format(file_format: int) -> None:
    """
    Validate the SMF format number.

    Raises:
        InvalidFormatError: If format is not 0, 1 or 2
    """
    if file_format not in VALID_FORMATS:
        raise InvalidFormatError(f"MIDI file format must be 0, 1 or 2, got {file_format}")


def validate_track_end(track: TrackRef, position: int) -> None:
    """
    Check that decoding a track stopped exactly at its declared end.

    Only used in strict mode; by default drift is tolerated.

    Raises:
        MalformedTrackLengthError: If position differs from track.end_offset
    """
    if position != track.end_offset:
        drift = position - track.end_offset
        raise MalformedTrackLengthError(
            f"Track {track.index} declares {track.length} bytes but events "
            f"ended at offset {position} ({drift:+d} bytes)"
        )


def validate_smf_header(data: bytes) -> bool:
    """
    Check whether data starts like a Standard MIDI File.

    Args:
        data: File data (at least 8 bytes)

    Returns:
        True if the data begins with an MThd chunk of plausible length
    """
    if len(data) < 8:
        return False

    if data[:4] != SMF_HEADER_MAGIC:
        return False

    return int.from_bytes(data[4:8], "big") >= 6
