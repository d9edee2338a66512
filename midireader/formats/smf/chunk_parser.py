"""
SMF chunk framing.

Every chunk starts with a 4-byte ASCII tag and a 4-byte big-endian
length:

    [tag: 4 bytes] [length: uint32 BE] [body: length bytes]

The file is an MThd chunk followed by MTrk chunks. Track bodies are
located here but never parsed; the declared lengths are trusted to find
the next chunk.
"""

import logging
from dataclasses import dataclass
from typing import List

from midireader.exceptions import TruncatedInputError
from midireader.formats.smf.cursor import ByteCursor
from midireader.models.track import TrackRef
from midireader.utils.validation import SMF_TRACK_MAGIC

logger = logging.getLogger(__name__)

CHUNK_HEADER_SIZE = 8


@dataclass(frozen=True)
class ChunkHeader:
    """
    Framing of one chunk.

    Attributes:
        tag: 4-character chunk type ('MThd', 'MTrk', or alien)
        length: Declared body length
        offset: Offset of the tag in the source
    """

    tag: str
    length: int
    offset: int

    @property
    def body_offset(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    @property
    def end_offset(self) -> int:
        return self.body_offset + self.length


def read_chunk_header(cursor: ByteCursor) -> ChunkHeader:
    """
    Read a chunk tag and length at the cursor.

    Args:
        cursor: Positioned at the start of a chunk

    Returns:
        ChunkHeader; the cursor is left at the first body byte

    Raises:
        TruncatedInputError: If fewer than 8 bytes remain
    """
    offset = cursor.position

    if cursor.remaining < CHUNK_HEADER_SIZE:
        raise TruncatedInputError(
            f"Chunk header at offset {offset} needs {CHUNK_HEADER_SIZE} bytes, "
            f"only {cursor.remaining} left"
        )

    tag = cursor.read_exact(4).decode("latin-1")
    length = cursor.read_u32()

    return ChunkHeader(tag=tag, length=length, offset=offset)


def scan_tracks(cursor: ByteCursor, start: int, track_count: int) -> List[TrackRef]:
    """
    Locate the event streams of the first track_count MTrk chunks.

    Chunks with other tags are skipped by their declared length and do
    not count as tracks.

    Args:
        cursor: Cursor over the whole file
        start: Offset of the first chunk after the header chunk
        track_count: Number of tracks declared in the header

    Returns:
        One TrackRef per track, in file order

    Raises:
        TruncatedInputError: If the file ends before all tracks are found
    """
    tracks: List[TrackRef] = []
    cursor.seek(start)

    while len(tracks) < track_count:
        chunk = read_chunk_header(cursor)

        if chunk.tag.encode("latin-1") != SMF_TRACK_MAGIC:
            logger.debug(
                "Skipping alien chunk %r (%d bytes) at offset 0x%X",
                chunk.tag,
                chunk.length,
                chunk.offset,
            )
            cursor.seek(chunk.end_offset)
            continue

        track = TrackRef(
            index=len(tracks),
            start_offset=chunk.body_offset,
            end_offset=chunk.end_offset,
        )
        logger.debug(
            "Track %d: %d bytes at 0x%X-0x%X",
            track.index,
            track.length,
            track.start_offset,
            track.end_offset,
        )
        tracks.append(track)
        cursor.seek(chunk.end_offset)

    return tracks
