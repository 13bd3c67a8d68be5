"""
Reusable option pickers.

Pickers derive their choices from the CapabilityModel only, so a schema is
fixed for the lifetime of a registry. Source pickers accept any integer id
(the device may add sources at runtime); their choices are presentation hints
labelled from the snapshot's input names when the host asks for them.
"""

from typing import List, Optional

from ..capabilities import CapabilityModel, ChannelStripAudio, ClassicAudio
from ..comparators import NumberComparitor
from ..state.enums import (
    ArtOption,
    FadeToBlackStatus,
    KeyFrame,
    MacroPlayerStatus,
    TransitionStyle,
)
from ..transitions import SelectionMatchMethod, keyer_flag_id
from .fields import Choice, OptionField, checkbox, dropdown, number, range_field

# Media player source ids at and above this offset select a clip
MEDIA_PLAYER_SOURCE_CLIP_OFFSET = 1000

CHANNEL_STRIP_SOURCE_CHOICES = (
    Choice("-65280", "Stereo"),
    Choice("-256", "Mono (Ch1)"),
    Choice("-255", "Mono (Ch2)"),
)


def _indexed(count: int, prefix: str) -> List[Choice]:
    return [Choice(i, f"{prefix} {i + 1}") for i in range(count)]


def _source_choices(model: CapabilityModel) -> List[Choice]:
    return [Choice(source.id, f"Input {source.id}") for source in model.inputs]


def _default_source(model: CapabilityModel) -> int:
    ids = [source.id for source in model.inputs]
    if 1 in ids:
        return 1
    return ids[0] if ids else 0


# ============================================================================
# STAGES, SOURCES, KEYERS
# ============================================================================

def stage_picker(model: CapabilityModel, position: int = 0) -> OptionField:
    """
    M/E stage picker.

    ``position`` 0 yields the single ``mixeffect`` option; 1..N yield the
    numbered options of N-way predicates, defaulting to successive stages.
    """
    option_id = "mixeffect" if position == 0 else f"mixeffect{position}"
    default = 0 if position == 0 else min(position - 1, model.stages - 1)
    return dropdown(option_id, "M/E", _indexed(model.stages, "M/E"), default)


def source_picker(model: CapabilityModel, position: int = 0, option_id: str = "input", label: str = "Input") -> OptionField:
    if position:
        option_id = f"{option_id}{position}"
    return dropdown(
        option_id,
        label,
        _source_choices(model),
        _default_source(model),
        allow_custom=True,
        source_choices=True,
    )


def usk_picker(model: CapabilityModel) -> OptionField:
    return dropdown("key", "Key", _indexed(model.keyers_per_stage, "Key"))


def dsk_picker(model: CapabilityModel) -> OptionField:
    return dropdown("key", "Key", _indexed(model.downstream_keyers, "DSK"))


def key_fill_source_picker(model: CapabilityModel) -> OptionField:
    return source_picker(model, option_id="fill", label="Fill Source")


def keyframe_picker() -> OptionField:
    return dropdown(
        "keyframe",
        "Key Frame",
        [
            Choice(KeyFrame.A.value, "A"),
            Choice(KeyFrame.B.value, "B"),
            Choice(KeyFrame.FULL.value, "Full"),
            Choice(KeyFrame.RUN_TO_INFINITE.value, "Run to infinite"),
        ],
    )


def invert_picker() -> OptionField:
    return checkbox("invert", "Invert")


# ============================================================================
# COMPOSITOR (SUPERSOURCE)
# ============================================================================

def super_source_id_picker(model: CapabilityModel) -> Optional[OptionField]:
    """Compositor picker, or None on devices with a single compositor."""
    if model.super_sources <= 1:
        return None
    return dropdown("ssrc_id", "Super Source", _indexed(model.super_sources, "Super Source"))


def super_source_box_picker(model: CapabilityModel) -> OptionField:
    return dropdown("box_index", "Box #", _indexed(model.super_source_boxes, "Box"))


def art_option_picker(option_id: str = "art_option") -> OptionField:
    return dropdown(
        option_id,
        "Place in",
        [Choice(ArtOption.BACKGROUND.value, "Background"), Choice(ArtOption.FOREGROUND.value, "Foreground")],
    )


ART_PROPERTY_CHOICES = (
    Choice("fill", "Fill Source"),
    Choice("key", "Key Source"),
    Choice("art_option", "Place in"),
    Choice("art_pre_multiplied", "Pre-multiplied"),
    Choice("art_clip", "Clip"),
    Choice("art_gain", "Gain"),
    Choice("art_invert_key", "Invert key"),
)


def super_source_art_properties_pickers(model: CapabilityModel) -> List[OptionField]:
    return [
        dropdown(
            "properties",
            "Properties",
            ART_PROPERTY_CHOICES,
            tuple(choice.id for choice in ART_PROPERTY_CHOICES),
            multiple=True,
            value_type=str,
        ),
        source_picker(model, option_id="fill", label="Fill Source"),
        source_picker(model, option_id="key", label="Key Source"),
        art_option_picker(),
        checkbox("art_pre_multiplied", "Pre-multiplied", True),
        range_field("art_clip", "Clip", 50, 0, 100, 0.1),
        range_field("art_gain", "Gain", 70, 0, 100, 0.1),
        checkbox("art_invert_key", "Invert key"),
    ]


BOX_PROPERTY_CHOICES = (
    Choice("source", "Source"),
    Choice("size", "Size"),
    Choice("x", "X"),
    Choice("y", "Y"),
    Choice("crop_enable", "Crop Enable"),
    Choice("crop_top", "Crop Top"),
    Choice("crop_bottom", "Crop Bottom"),
    Choice("crop_left", "Crop Left"),
    Choice("crop_right", "Crop Right"),
)


def super_source_box_properties_pickers(model: CapabilityModel) -> List[OptionField]:
    return [
        dropdown(
            "properties",
            "Properties",
            BOX_PROPERTY_CHOICES,
            tuple(choice.id for choice in BOX_PROPERTY_CHOICES),
            multiple=True,
            value_type=str,
        ),
        source_picker(model, option_id="source", label="Source"),
        range_field("size", "Size", 0.5, 0.07, 1, 0.01),
        range_field("x", "X", 0, -48, 48, 0.01),
        range_field("y", "Y", 0, -27, 27, 0.01),
        checkbox("crop_enable", "Crop Enable"),
        range_field("crop_top", "Crop Top", 0, 0, 18, 0.01),
        range_field("crop_bottom", "Crop Bottom", 0, 0, 18, 0.01),
        range_field("crop_left", "Crop Left", 0, 0, 32, 0.01),
        range_field("crop_right", "Crop Right", 0, 0, 32, 0.01),
    ]


# ============================================================================
# TRANSITIONS AND FADE TO BLACK
# ============================================================================

def transition_style_picker(skip_sting: bool) -> OptionField:
    choices = [
        Choice(TransitionStyle.MIX.value, "Mix"),
        Choice(TransitionStyle.DIP.value, "Dip"),
        Choice(TransitionStyle.WIPE.value, "Wipe"),
        Choice(TransitionStyle.DVE.value, "DVE"),
    ]
    if not skip_sting:
        choices.append(Choice(TransitionStyle.STING.value, "Sting"))
    return dropdown("style", "Transition Style", choices)


def rate_picker(label: str) -> OptionField:
    return number("rate", label, 25, 1, 250)


def match_method_picker() -> OptionField:
    return dropdown(
        "match_method",
        "Match method",
        [
            Choice(SelectionMatchMethod.EXACT.value, "Exact"),
            Choice(SelectionMatchMethod.CONTAINS.value, "Contains"),
            Choice(SelectionMatchMethod.NOT_CONTAIN.value, "Not Contain"),
        ],
        value_type=str,
    )


def transition_selection_pickers(model: CapabilityModel) -> List[OptionField]:
    fields = [checkbox("background", "Background", True)]
    for layer in range(1, model.keyers_per_stage + 1):
        fields.append(checkbox(keyer_flag_id(layer), f"Key {layer}"))
    return fields


def fade_to_black_state_picker() -> OptionField:
    return dropdown(
        "state",
        "State",
        [
            Choice(FadeToBlackStatus.FULLY_BLACK.value, "On"),
            Choice(FadeToBlackStatus.OFF.value, "Off"),
            Choice(FadeToBlackStatus.FADING.value, "Fading"),
        ],
        value_type=str,
    )


# ============================================================================
# ROUTING, MONITORING, MEDIA, MACROS
# ============================================================================

def aux_picker(model: CapabilityModel) -> OptionField:
    return dropdown("aux", "AUX", _indexed(model.auxes, "Aux"))


def multiviewer_picker(model: CapabilityModel) -> OptionField:
    return dropdown("multiviewer_id", "MV", _indexed(model.multiviewers, "MV"))


def multiviewer_window_picker(model: CapabilityModel) -> OptionField:
    return dropdown("window_index", "Window #", _indexed(model.multiviewer_windows, "Window"))


def media_player_picker(model: CapabilityModel) -> OptionField:
    return dropdown("media_player", "Media Player", _indexed(model.media_players, "Media Player"))


def media_player_source_picker(model: CapabilityModel) -> OptionField:
    choices = [Choice(i, f"Still {i + 1}") for i in range(model.stills)]
    choices += [
        Choice(MEDIA_PLAYER_SOURCE_CLIP_OFFSET + i, f"Clip {i + 1}")
        for i in range(model.clips)
    ]
    return dropdown("source", "Source", choices)


def macro_picker(model: CapabilityModel) -> OptionField:
    return dropdown(
        "macro_index",
        f"Macro Number (1-{model.macros})",
        [Choice(i, f"Macro {i}") for i in range(1, model.macros + 1)],
    )


MACRO_STATE_RECORDING = "recording"
MACRO_STATE_USED = "used"


def macro_state_picker() -> OptionField:
    return dropdown(
        "state",
        "State",
        [
            Choice(MacroPlayerStatus.RUNNING.value, "Is Running"),
            Choice(MacroPlayerStatus.WAITING.value, "Is Waiting"),
            Choice(MACRO_STATE_RECORDING, "Is Recording"),
            Choice(MACRO_STATE_USED, "Is Used"),
        ],
        MacroPlayerStatus.WAITING.value,
        value_type=str,
    )


# ============================================================================
# AUDIO
# ============================================================================

def comparitor_picker() -> OptionField:
    return dropdown(
        "comparitor",
        "Comparitor",
        [
            Choice(NumberComparitor.EQUAL.value, "Equal"),
            Choice(NumberComparitor.NOT_EQUAL.value, "Not Equal"),
            Choice(NumberComparitor.GREATER_THAN.value, "Greater than"),
            Choice(NumberComparitor.GREATER_THAN_EQUAL.value, "Greater than or equal"),
            Choice(NumberComparitor.LESS_THAN.value, "Less than"),
            Choice(NumberComparitor.LESS_THAN_EQUAL.value, "Less than or equal"),
        ],
        value_type=str,
    )


def audio_input_picker(model: CapabilityModel) -> OptionField:
    choices = []
    if isinstance(model.audio, (ClassicAudio, ChannelStripAudio)):
        choices = [Choice(audio_input.id, f"Audio {audio_input.id}") for audio_input in model.audio.inputs]
    default = choices[0].id if choices else 1
    return dropdown("input", "Input", choices, default, allow_custom=True, source_choices=True)


def channel_strip_source_picker() -> OptionField:
    return dropdown(
        "source",
        "Source",
        CHANNEL_STRIP_SOURCE_CHOICES,
        allow_custom=True,
        value_type=str,
    )


def gain_picker(label: str, minimum: float, maximum: float) -> OptionField:
    return range_field("gain", label, 0, minimum, maximum, 0.1)
