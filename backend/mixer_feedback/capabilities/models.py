"""
Capability Models: static, per-device-variant feature descriptor.

A CapabilityModel says WHICH subsystems a mixer variant has and HOW MANY of
each. It never describes live state; that is the snapshot's job.

CRITICAL RULES:
1. Immutable once constructed (frozen pydantic model)
2. Counts are non-negative; a mixer always has at least one stage
3. Audio is a tagged variant, never several optional fields
4. A capability change requires a new model and a new registry
"""

from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# AUDIO ARCHITECTURE
# ============================================================================

class AudioArchitecture(str, Enum):
    """Audio engine fitted to a device variant."""

    NONE = "none"
    CLASSIC = "classic"
    CHANNEL_STRIP = "channel_strip"


class AudioInputSpec(BaseModel):
    """One audio input known to the audio engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    port_type: str = ""


class NoAudio(BaseModel):
    """Variant without a controllable audio engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["none"] = "none"


class ClassicAudio(BaseModel):
    """Classic per-channel gain/mix-option audio mixer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["classic"] = "classic"
    inputs: Tuple[AudioInputSpec, ...] = ()


class ChannelStripAudio(BaseModel):
    """
    Channel-strip audio mixer.

    Each input carries one or more sources (stereo, split mono) with their own
    input gain, fader gain and mix option. A monitor bus is optional.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["channel_strip"] = "channel_strip"
    inputs: Tuple[AudioInputSpec, ...] = ()
    monitor: bool = False


AudioCapabilities = Annotated[
    Union[NoAudio, ClassicAudio, ChannelStripAudio],
    Field(discriminator="kind"),
]


# ============================================================================
# VIDEO INPUTS
# ============================================================================

class InputSpec(BaseModel):
    """A video source the device exposes (camera input, colour bars, media player...)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    port_type: str = ""


# ============================================================================
# CAPABILITY MODEL
# ============================================================================

class CapabilityModel(BaseModel):
    """
    Complete, immutable capability description of one device variant.

    Every predicate builder reads from this model only. Two equal models
    always produce registries with identical predicate ids.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    model_id: int = 0
    label: str = "Video mixer"

    # Mix/effect stages and keyers
    stages: int = Field(default=1, ge=1)
    keyers_per_stage: int = Field(default=0, ge=0)
    downstream_keyers: int = Field(default=0, ge=0)
    dves: int = Field(default=0, ge=0)

    # Compositor ("supersource")
    super_sources: int = Field(default=0, ge=0)
    super_source_boxes: int = Field(default=4, ge=0)

    # Routing and monitoring
    auxes: int = Field(default=0, ge=0)
    multiviewers: int = Field(default=0, ge=0)
    multiviewer_windows: int = Field(default=10, ge=0)

    # Macros and media
    macros: int = Field(default=0, ge=0)
    media_players: int = Field(default=0, ge=0)
    stills: int = Field(default=0, ge=0)
    clips: int = Field(default=0, ge=0)

    # Outputs
    streaming: bool = False
    recording: bool = False

    inputs: Tuple[InputSpec, ...] = ()
    audio: AudioCapabilities = Field(default_factory=NoAudio)

    @property
    def audio_architecture(self) -> AudioArchitecture:
        """Tag of the fitted audio engine."""
        return AudioArchitecture(self.audio.kind)
