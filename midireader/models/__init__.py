"""Data models for decoded MIDI files."""

from midireader.models.header import HeaderInfo, TicksPerQuarterNote, SmpteFormat, Division
from midireader.models.track import TrackRef, RunningStatus
from midireader.models.event import (
    TrackEvent,
    EventKind,
    ChannelOpcode,
    ChannelVoiceEvent,
    MetaType,
    MetaEvent,
    SysExEvent,
    SystemCommonKind,
    SystemCommonEvent,
    UnknownEvent,
    meta_type_label,
)

__all__ = [
    "HeaderInfo",
    "TicksPerQuarterNote",
    "SmpteFormat",
    "Division",
    "TrackRef",
    "RunningStatus",
    "TrackEvent",
    "EventKind",
    "ChannelOpcode",
    "ChannelVoiceEvent",
    "MetaType",
    "MetaEvent",
    "SysExEvent",
    "SystemCommonKind",
    "SystemCommonEvent",
    "UnknownEvent",
    "meta_type_label",
]
