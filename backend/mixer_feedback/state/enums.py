"""
Device enumerations as reported in the state snapshot.

Snapshot fields keep the raw integer the device reports; these enums give the
values names for option choices and comparisons.
"""

from enum import Enum, IntEnum


class TransitionStyle(IntEnum):
    MIX = 0
    DIP = 1
    WIPE = 2
    DVE = 3
    STING = 4


class KeyFrame(IntEnum):
    A = 1
    B = 2
    FULL = 3
    RUN_TO_INFINITE = 4


class ArtOption(IntEnum):
    BACKGROUND = 0
    FOREGROUND = 1


class MediaSourceType(IntEnum):
    STILL = 1
    CLIP = 2


class StreamingStatus(IntEnum):
    IDLE = 1
    CONNECTING = 2
    STREAMING = 4
    STOPPING = 32


class RecordingStatus(IntEnum):
    IDLE = 0
    RECORDING = 1
    STOPPING = 128


class ClassicMixOption(IntEnum):
    OFF = 0
    ON = 1
    AFV = 2


class ChannelStripMixOption(IntEnum):
    OFF = 1
    ON = 2
    AFV = 4


class MacroPlayerStatus(str, Enum):
    """Macro player run state. Exactly one per snapshot."""

    IDLE = "idle"
    RUNNING = "running"
    WAITING = "waiting"


class FadeToBlackStatus(str, Enum):
    """Derived fade-to-black state. Exactly one per stage."""

    OFF = "off"
    FADING = "fading"
    FULLY_BLACK = "on"
