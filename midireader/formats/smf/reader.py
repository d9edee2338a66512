"""
Standard MIDI File reader.

Opens .mid files, decodes the header and locates every track chunk up
front; track events are decoded on demand.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from midireader.formats.smf.chunk_parser import scan_tracks
from midireader.formats.smf.cursor import ByteCursor
from midireader.formats.smf.event_decoder import TrackEventDecoder
from midireader.formats.smf.header import read_header
from midireader.models.event import TrackEvent
from midireader.models.header import HeaderInfo
from midireader.models.track import TrackRef
from midireader.utils.validation import validate_smf_header

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, str, Path, BinaryIO]


class MidiFileReader:
    """
    Reader session for one Standard MIDI File.

    Owns the byte cursor, the decoded header and the table of track
    locations. Decoding a track reseeks the shared cursor, so only one
    track should be iterated at a time per reader.

    Example:
        reader = MidiFileReader.read("song.mid")
        print(f"Format {reader.header.format}, {len(reader.tracks)} tracks")
        for event in reader.decode_track(0):
            print(event.delta_time, event.payload)
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.cursor: Optional[ByteCursor] = None
        self.header: Optional[HeaderInfo] = None
        self.tracks: List[TrackRef] = []
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path], strict: bool = False) -> "MidiFileReader":
        """
        Open a MIDI file and return a ready reader.

        Args:
            filepath: Path to .mid file
            strict: Reject tracks whose events do not end at the declared length

        Returns:
            Reader with header and track table populated
        """
        reader = cls(strict=strict)
        reader.parse_file(filepath)
        return reader

    def parse_file(self, filepath: Union[str, Path]) -> Tuple[HeaderInfo, List[TrackRef]]:
        """
        Parse a MIDI file from disk.

        Args:
            filepath: Path to .mid file

        Returns:
            Tuple of (header, track refs)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        logger.debug("Read %d bytes from %s", len(data), filepath)
        return self.parse_bytes(data)

    def parse_bytes(
        self, data: Union[bytes, bytearray, memoryview]
    ) -> Tuple[HeaderInfo, List[TrackRef]]:
        """
        Parse a MIDI file image.

        Args:
            data: Complete file contents

        Returns:
            Tuple of (header, track refs)

        Raises:
            TruncatedInputError: If the header or a track chunk header is cut short
            InvalidFormatError: If the header chunk is invalid
        """
        self._raw_data = bytes(data)
        self.cursor = ByteCursor(self._raw_data)

        self.header = read_header(self.cursor)
        self.tracks = scan_tracks(self.cursor, self.cursor.position, self.header.track_count)

        logger.debug(
            "Opened MIDI file: format %d, %d tracks, %s division",
            self.header.format,
            len(self.tracks),
            self.header.division.kind,
        )
        return self.header, self.tracks

    @property
    def data(self) -> bytes:
        return self._raw_data

    def get_track(self, index: int) -> TrackRef:
        """
        Look up a track by index.

        Raises:
            IndexError: If there is no such track
        """
        if not 0 <= index < len(self.tracks):
            raise IndexError(f"Track index {index} out of range (0-{len(self.tracks) - 1})")
        return self.tracks[index]

    def decode_track(
        self, track: Union[int, TrackRef], strict: Optional[bool] = None
    ) -> Iterator[TrackEvent]:
        """
        Decode a track's events lazily.

        Every call starts again from the track's first byte with no
        running status.

        Args:
            track: Track index or TrackRef
            strict: Override the reader's strict setting for this track

        Returns:
            Iterator over the track's events
        """
        if self.cursor is None:
            raise RuntimeError("No MIDI data loaded")

        if isinstance(track, int):
            track = self.get_track(track)

        if strict is None:
            strict = self.strict

        return iter(TrackEventDecoder(self.cursor, track, strict=strict))

    def read_track_events(self, track: Union[int, TrackRef]) -> List[TrackEvent]:
        """Decode a whole track into a list."""
        return list(self.decode_track(track))

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a Standard MIDI File.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with an MThd chunk
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(8)
        except OSError:
            return False

        return validate_smf_header(header)


def open_session(source: Source, strict: bool = False) -> Tuple[HeaderInfo, List[TrackRef]]:
    """
    Decode the header and track table of a MIDI file.

    Args:
        source: File contents, a path, or a binary file object

    Returns:
        Tuple of (header, track refs)

    Raises:
        TruncatedInputError: If the source ends inside the header or a chunk header
    """
    reader = open_reader(source, strict=strict)
    return reader.header, reader.tracks


def open_reader(source: Source, strict: bool = False) -> MidiFileReader:
    """
    Create a reader for bytes, a path or a binary file object.

    Args:
        source: File contents, a path, or a binary file object

    Returns:
        Reader with header and track table populated
    """
    reader = MidiFileReader(strict=strict)

    if isinstance(source, (bytes, bytearray, memoryview)):
        reader.parse_bytes(source)
    elif isinstance(source, (str, Path)):
        reader.parse_file(source)
    elif hasattr(source, "read"):
        reader.parse_bytes(source.read())
    else:
        raise TypeError(f"Unsupported MIDI source: {type(source).__name__}")

    return reader


def decode_track(
    data: Union[bytes, bytearray, memoryview], track: TrackRef, strict: bool = False
) -> Iterator[TrackEvent]:
    """
    Decode one track of a file image with a cursor of its own.

    Unlike MidiFileReader.decode_track, the returned iterator shares no
    position with other decoders, so several tracks can be walked at once.

    Args:
        data: Complete file contents
        track: Track located by open_session()
        strict: Reject tracks whose events do not end at the declared length
    """
    return iter(TrackEventDecoder(ByteCursor(data), track, strict=strict))
