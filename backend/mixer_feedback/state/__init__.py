"""
State snapshot: the read-only live device state predicates evaluate against.

- snapshot.py: pydantic node tree and coerce_snapshot()
- accessors.py: null-safe lookups by stage/keyer/box/window index
- enums.py: named device values
"""

from .accessors import (
    get_aux_source,
    get_channel_strip_audio,
    get_channel_strip_source,
    get_classic_audio,
    get_classic_audio_channel,
    get_dsk,
    get_media_player,
    get_mix_effect,
    get_multiviewer_window,
    get_super_source,
    get_super_source_box,
    get_usk,
)
from .enums import (
    ArtOption,
    ChannelStripMixOption,
    ClassicMixOption,
    FadeToBlackStatus,
    KeyFrame,
    MacroPlayerStatus,
    MediaSourceType,
    RecordingStatus,
    StreamingStatus,
    TransitionStyle,
)
from .snapshot import StateSnapshot, coerce_snapshot

__all__ = [
    "StateSnapshot",
    "coerce_snapshot",
    "get_aux_source",
    "get_channel_strip_audio",
    "get_channel_strip_source",
    "get_classic_audio",
    "get_classic_audio_channel",
    "get_dsk",
    "get_media_player",
    "get_mix_effect",
    "get_multiviewer_window",
    "get_super_source",
    "get_super_source_box",
    "get_usk",
    "ArtOption",
    "ChannelStripMixOption",
    "ClassicMixOption",
    "FadeToBlackStatus",
    "KeyFrame",
    "MacroPlayerStatus",
    "MediaSourceType",
    "RecordingStatus",
    "StreamingStatus",
    "TransitionStyle",
]
