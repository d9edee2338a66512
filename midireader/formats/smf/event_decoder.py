"""
MTrk event stream decoder.

Each event is:

    [delta time: VLQ] [status byte, or first data byte] [payload]

Payload rules by status:
    0xFF        Meta: type byte, VLQ length, data
    0xF0        SysEx: VLQ length, data
    0xF7        SysEx continuation/escape: VLQ length, data
    0xF2        Song Position Pointer: 2 bytes
    0xF3        Song Select: 1 byte
    0xF1-0xFE   anything else: no payload, reported as unknown
    0x80-0xEF   Channel voice: 1 data byte for 0xC_/0xD_, otherwise 2
    0x00-0x7F   Running status: the byte is the first data byte of a
                channel voice event reusing the previous status

Running status is carried explicitly from one event to the next and only
channel voice events change it.
"""

import logging
from typing import Iterator, Optional, Tuple

from midireader.exceptions import RunningStatusUnavailableError
from midireader.formats.smf.cursor import ByteCursor
from midireader.models.event import (
    SYSTEM_COMMON_LENGTHS,
    ChannelOpcode,
    ChannelVoiceEvent,
    EventPayload,
    MetaEvent,
    SysExEvent,
    SystemCommonEvent,
    SystemCommonKind,
    TrackEvent,
    UnknownEvent,
    channel_data_length,
)
from midireader.models.track import RunningStatus, TrackRef
from midireader.utils.validation import validate_track_end
from midireader.utils.vlq import read_vlq

logger = logging.getLogger(__name__)

META_STATUS = 0xFF
SYSEX_STATUS = 0xF0
SYSEX_CONTINUATION_STATUS = 0xF7


def _read_meta(cursor: ByteCursor) -> MetaEvent:
    meta_type = cursor.read_u8()
    length = read_vlq(cursor)
    return MetaEvent(meta_type=meta_type, data=cursor.read_exact(length))


def _read_sysex(cursor: ByteCursor, continuation: bool) -> SysExEvent:
    length = read_vlq(cursor)
    return SysExEvent(data=cursor.read_exact(length), continuation=continuation)


def _read_system(cursor: ByteCursor, status: int) -> EventPayload:
    """Dispatch a 0xF0-0xFF status byte."""
    if status == META_STATUS:
        return _read_meta(cursor)

    if status == SYSEX_STATUS:
        return _read_sysex(cursor, continuation=False)

    if status == SYSEX_CONTINUATION_STATUS:
        return _read_sysex(cursor, continuation=True)

    try:
        kind = SystemCommonKind(status)
    except ValueError:
        return UnknownEvent(status=status)

    cursor.read_exact(SYSTEM_COMMON_LENGTHS[kind])
    return SystemCommonEvent(common_kind=kind)


def decode_event(
    cursor: ByteCursor, running: Optional[RunningStatus]
) -> Tuple[TrackEvent, Optional[RunningStatus]]:
    """
    Decode one event at the cursor.

    Args:
        cursor: Positioned at the event's delta time
        running: Running status left by the previous event, None at track start

    Returns:
        Tuple of (event, running status for the next event)

    Raises:
        MalformedVarintError: If the delta time or a length is malformed
        TruncatedInputError: If the payload is cut short
        RunningStatusUnavailableError: If a data byte appears with no running status
    """
    offset = cursor.position
    delta_time = read_vlq(cursor)
    status = cursor.read_u8()

    if status >= 0xF0:
        payload = _read_system(cursor, status)
        return TrackEvent(delta_time=delta_time, payload=payload, offset=offset), running

    if status & 0x80:
        opcode = ChannelOpcode(status & 0xF0)
        channel = status & 0x0F
    else:
        if running is None:
            raise RunningStatusUnavailableError(
                f"Data byte 0x{status:02X} at offset {cursor.position - 1} "
                "with no running status"
            )
        cursor.unread_u8()
        opcode = ChannelOpcode(running.opcode)
        channel = running.channel

    running_status = not status & 0x80

    data = cursor.read_exact(channel_data_length(opcode))
    payload = ChannelVoiceEvent(
        opcode=opcode, channel=channel, data=data, running_status=running_status
    )

    return (
        TrackEvent(delta_time=delta_time, payload=payload, offset=offset),
        RunningStatus(opcode=int(opcode), channel=channel),
    )


class TrackEventDecoder:
    """
    Lazy decoder for one track's event stream.

    Iterating seeks the cursor to the track start, resets running status
    and yields events until the cursor reaches the track's declared end.
    An event that runs past the end is returned as decoded; the overrun is
    only reported when strict is set.

    Example:
        decoder = TrackEventDecoder(cursor, track)
        for event in decoder:
            print(event.delta_time, event.kind)
    """

    def __init__(self, cursor: ByteCursor, track: TrackRef, strict: bool = False):
        self.cursor = cursor
        self.track = track
        self.strict = strict

    def __iter__(self) -> Iterator[TrackEvent]:
        return self.events()

    def events(self) -> Iterator[TrackEvent]:
        """Generate the track's events from its first byte."""
        cursor = self.cursor
        track = self.track
        running: Optional[RunningStatus] = None
        count = 0

        cursor.seek(track.start_offset)
        logger.debug("Decoding track %d from offset 0x%X", track.index, track.start_offset)

        while cursor.position < track.end_offset:
            event, running = decode_event(cursor, running)
            count += 1
            yield event

        if cursor.position != track.end_offset:
            logger.debug(
                "Track %d decoding ended at 0x%X, declared end 0x%X",
                track.index,
                cursor.position,
                track.end_offset,
            )

        if self.strict:
            validate_track_end(track, cursor.position)

        logger.debug("Track %d: %d events", track.index, count)
