"""
State Snapshot: read-only view of the live device state.

The snapshot is owned by the external state-sync collaborator. It may be
replaced wholesale between evaluations but is never mutated during one.
Predicates only read from it.

Sub-nodes that a device can transiently omit (just after connect, during a
desync) are Optional. A missing node is never an error: predicates treat it
as "does not match".

Analog values keep the device's scaled integer units:
- box size and crop: thousandths
- box position: hundredths
- art clip and gain: tenths of a percent
- channel-strip gains: hundredths of a dB
Classic audio gains are already in dB.
"""

import logging
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .enums import FadeToBlackStatus, MacroPlayerStatus, MediaSourceType, TransitionStyle

logger = logging.getLogger(__name__)


class SnapshotNode(BaseModel):
    """Base for every snapshot node: frozen, tolerant of unknown fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# ============================================================================
# INPUTS AND TALLY
# ============================================================================

class InputProperties(SnapshotNode):
    short_name: str = ""
    long_name: str = ""


class TallyState(SnapshotNode):
    program: bool = False
    preview: bool = False


# ============================================================================
# MIX EFFECT STAGES
# ============================================================================

class FlyProperties(SnapshotNode):
    is_at_key_frame: int = 0


class UpstreamKeyer(SnapshotNode):
    on_air: bool = False
    fill_source: int = 0
    cut_source: int = 0
    fly_properties: Optional[FlyProperties] = None


class TransitionProperties(SnapshotNode):
    """Next-transition style and layer selection (0 = background, 1..N = keyers)."""

    style: int = TransitionStyle.MIX
    selection: Tuple[int, ...] = (0,)


class RateSetting(SnapshotNode):
    rate: int = 0


class TransitionSettings(SnapshotNode):
    """Per-style transition settings. Sting has no rate."""

    mix: Optional[RateSetting] = None
    dip: Optional[RateSetting] = None
    wipe: Optional[RateSetting] = None
    dve: Optional[RateSetting] = None


class TransitionPosition(SnapshotNode):
    in_transition: bool = False
    handle_position: int = 0
    remaining_frames: int = 0


class FadeToBlack(SnapshotNode):
    is_fully_black: bool = False
    in_transition: bool = False
    remaining_frames: int = 0
    rate: int = 0

    @property
    def status(self) -> FadeToBlackStatus:
        if self.in_transition:
            return FadeToBlackStatus.FADING
        if self.is_fully_black:
            return FadeToBlackStatus.FULLY_BLACK
        return FadeToBlackStatus.OFF


class MixEffect(SnapshotNode):
    program_input: int = 0
    preview_input: int = 0
    transition_properties: Optional[TransitionProperties] = None
    transition_settings: Optional[TransitionSettings] = None
    transition_position: Optional[TransitionPosition] = None
    fade_to_black: Optional[FadeToBlack] = None
    upstream_keyers: Dict[int, UpstreamKeyer] = Field(default_factory=dict)


# ============================================================================
# DOWNSTREAM KEYERS
# ============================================================================

class DownstreamKeyerProperties(SnapshotNode):
    tie: bool = False
    rate: int = 0


class DownstreamKeyerSources(SnapshotNode):
    fill_source: int = 0
    cut_source: int = 0


class DownstreamKeyer(SnapshotNode):
    on_air: bool = False
    in_transition: bool = False
    properties: Optional[DownstreamKeyerProperties] = None
    sources: Optional[DownstreamKeyerSources] = None


# ============================================================================
# COMPOSITOR (SUPERSOURCE)
# ============================================================================

class SuperSourceProperties(SnapshotNode):
    art_fill_source: int = 0
    art_cut_source: int = 0
    art_option: int = 0
    art_pre_multiplied: bool = False
    art_clip: int = 0
    art_gain: int = 0
    art_invert_key: bool = False


class SuperSourceBox(SnapshotNode):
    enabled: bool = False
    source: int = 0
    x: int = 0
    y: int = 0
    size: int = 1000
    cropped: bool = False
    crop_top: int = 0
    crop_bottom: int = 0
    crop_left: int = 0
    crop_right: int = 0


class SuperSource(SnapshotNode):
    properties: Optional[SuperSourceProperties] = None
    boxes: Dict[int, SuperSourceBox] = Field(default_factory=dict)


class VideoState(SnapshotNode):
    mix_effects: Dict[int, MixEffect] = Field(default_factory=dict)
    downstream_keyers: Dict[int, DownstreamKeyer] = Field(default_factory=dict)
    super_sources: Dict[int, SuperSource] = Field(default_factory=dict)
    auxes: Dict[int, int] = Field(default_factory=dict)


# ============================================================================
# MACROS, MEDIA, MULTIVIEWERS, OUTPUTS
# ============================================================================

class MacroPlayer(SnapshotNode):
    """The single macro player. ``macro_index`` is 0-based."""

    status: MacroPlayerStatus = MacroPlayerStatus.IDLE
    macro_index: int = 0
    loop: bool = False


class MacroRecorder(SnapshotNode):
    is_recording: bool = False
    macro_index: int = 0


class MacroProperties(SnapshotNode):
    name: str = ""
    description: str = ""
    is_used: bool = False


class MacroState(SnapshotNode):
    player: MacroPlayer = Field(default_factory=MacroPlayer)
    recorder: MacroRecorder = Field(default_factory=MacroRecorder)
    macros: Dict[int, MacroProperties] = Field(default_factory=dict)


class MediaPlayer(SnapshotNode):
    source_type: int = MediaSourceType.STILL
    still_index: int = 0
    clip_index: int = 0
    playing: bool = False
    loop: bool = False


class MediaState(SnapshotNode):
    players: Dict[int, MediaPlayer] = Field(default_factory=dict)


class MultiviewerWindow(SnapshotNode):
    source: int = 0


class Multiviewer(SnapshotNode):
    windows: Dict[int, MultiviewerWindow] = Field(default_factory=dict)


class OutputStatus(SnapshotNode):
    state: int = 0


class StreamingState(SnapshotNode):
    status: Optional[OutputStatus] = None


class RecordingState(SnapshotNode):
    status: Optional[OutputStatus] = None


# ============================================================================
# AUDIO
# ============================================================================

class ClassicAudioChannel(SnapshotNode):
    gain: float = 0.0
    balance: float = 0.0
    mix_option: int = 0


class ClassicAudioMaster(SnapshotNode):
    gain: float = 0.0


class ClassicAudioState(SnapshotNode):
    kind: Literal["classic"] = "classic"
    channels: Dict[int, ClassicAudioChannel] = Field(default_factory=dict)
    master: Optional[ClassicAudioMaster] = None


class ChannelStripSourceProperties(SnapshotNode):
    gain: int = 0
    fader_gain: int = 0
    mix_option: int = 1


class ChannelStripSource(SnapshotNode):
    properties: Optional[ChannelStripSourceProperties] = None


class ChannelStripInput(SnapshotNode):
    """Sources are keyed by the device's source id string (e.g. '-65280')."""

    sources: Dict[str, ChannelStripSource] = Field(default_factory=dict)


class ChannelStripMasterProperties(SnapshotNode):
    fader_gain: int = 0


class ChannelStripMaster(SnapshotNode):
    properties: Optional[ChannelStripMasterProperties] = None


class ChannelStripMonitor(SnapshotNode):
    gain: int = 0
    input_master_muted: bool = False


class ChannelStripAudioState(SnapshotNode):
    kind: Literal["channel_strip"] = "channel_strip"
    inputs: Dict[int, ChannelStripInput] = Field(default_factory=dict)
    master: Optional[ChannelStripMaster] = None
    monitor: Optional[ChannelStripMonitor] = None


AudioState = Annotated[
    Union[ClassicAudioState, ChannelStripAudioState],
    Field(discriminator="kind"),
]


# ============================================================================
# SNAPSHOT ROOT
# ============================================================================

class StateSnapshot(SnapshotNode):
    """Root of the live device state tree."""

    inputs: Dict[int, InputProperties] = Field(default_factory=dict)
    tally: Dict[int, TallyState] = Field(default_factory=dict)
    video: VideoState = Field(default_factory=VideoState)
    macro: Optional[MacroState] = None
    media: MediaState = Field(default_factory=MediaState)
    multiviewers: Dict[int, Multiviewer] = Field(default_factory=dict)
    streaming: Optional[StreamingState] = None
    recording: Optional[RecordingState] = None
    audio: Optional[AudioState] = None


def coerce_snapshot(value: Union[StateSnapshot, Mapping[str, Any], None]) -> Optional[StateSnapshot]:
    """
    Accept a snapshot or a raw state mapping.

    Returns:
        The validated snapshot, or None if the mapping does not describe a
        valid state tree
    """
    if isinstance(value, StateSnapshot):
        return value
    if value is None:
        return None
    try:
        return StateSnapshot.model_validate(value)
    except ValidationError as e:
        logger.debug(f"Rejecting malformed state snapshot: {e.error_count()} error(s)")
        return None
