"""
MThd header chunk decoder.

Header Structure:
    Offset  Size    Description
    0x00    4       Tag "MThd"
    0x04    4       Body length (normally 6)
    0x08    2       Format (0, 1 or 2)
    0x0A    2       Number of track chunks
    0x0C    2       Division

Division:
    bit 15 = 0: bits 0-14 are ticks per quarter note
    bit 15 = 1: high byte is a negative SMPTE frame rate (-24, -25, -29, -30),
                low byte is ticks per frame
"""

import logging
import struct

from midireader.formats.smf.chunk_parser import read_chunk_header
from midireader.formats.smf.cursor import ByteCursor
from midireader.models.header import Division, HeaderInfo, SmpteFormat, TicksPerQuarterNote
from midireader.utils.validation import (
    validate_format,
    validate_header_length,
    validate_header_tag,
)

logger = logging.getLogger(__name__)

HEADER_BODY_SIZE = 6


def decode_division(raw: int) -> Division:
    """
    Decode the 16-bit division field.

    Args:
        raw: Division word as stored (big-endian uint16)

    Returns:
        TicksPerQuarterNote or SmpteFormat

    Example:
        >>> decode_division(0xE218)
        SmpteFormat(frames_per_second=-30, ticks_per_frame=24)
    """
    if raw & 0x8000:
        frames_per_second = struct.unpack(">b", bytes([raw >> 8]))[0]
        return SmpteFormat(frames_per_second=frames_per_second, ticks_per_frame=raw & 0xFF)

    return TicksPerQuarterNote(ticks=raw & 0x7FFF)


def decode_header_body(body: bytes, chunk_length: int = HEADER_BODY_SIZE) -> HeaderInfo:
    """
    Decode the fixed 6-byte MThd body.

    Args:
        body: At least 6 bytes
        chunk_length: Declared header length, kept for display

    Raises:
        InvalidFormatError: If the format number is not 0, 1 or 2
    """
    file_format, track_count, division = struct.unpack(">HHH", body[:HEADER_BODY_SIZE])
    validate_format(file_format)

    return HeaderInfo(
        format=file_format,
        track_count=track_count,
        division=decode_division(division),
        chunk_length=chunk_length,
    )


def read_header(cursor: ByteCursor) -> HeaderInfo:
    """
    Read the header chunk at the cursor.

    The cursor is left at the end of the header chunk as declared by its
    length field, so any extra header bytes are skipped.

    Raises:
        TruncatedInputError: If the file is shorter than the header
        InvalidFormatError: If the chunk is not a valid MThd chunk
    """
    chunk = read_chunk_header(cursor)
    validate_header_tag(chunk.tag)
    validate_header_length(chunk.length, HEADER_BODY_SIZE)

    header = decode_header_body(cursor.read_exact(HEADER_BODY_SIZE), chunk.length)

    if chunk.length > HEADER_BODY_SIZE:
        logger.debug("Ignoring %d extra header bytes", chunk.length - HEADER_BODY_SIZE)

    cursor.seek(chunk.end_offset)
    return header
