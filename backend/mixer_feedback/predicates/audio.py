"""
Audio predicates.

Audio is a structural three-way dispatch on the capability model's audio
architecture. Each branch yields its own disjoint predicate set; no branch
exposes the other's ids.

Gain predicates compare with a NumberComparitor. Learn reports the current
gain and keeps the user's comparitor only if it is satisfied by equality,
otherwise it switches to "eq" so the learned options re-match.
"""

import math
from typing import Callable, Dict, List, Optional

from ..capabilities import AudioArchitecture, CapabilityModel, ChannelStripAudio
from ..comparators import NumberComparitor, compare_number
from ..options import Choice, OptionSchema, dropdown
from ..options.pickers import (
    audio_input_picker,
    channel_strip_source_picker,
    comparitor_picker,
    gain_picker,
)
from ..state import (
    ChannelStripMixOption,
    ClassicMixOption,
    get_channel_strip_audio,
    get_channel_strip_source,
    get_classic_audio,
    get_classic_audio_channel,
)
from .definition import PREVIEW_HINT, PredicateDefinition
from .ids import FeedbackId

# Channel-strip gains are reported in hundredths of a dB
CHANNEL_STRIP_GAIN_SCALE = 100

_CLASSIC_MIX_OPTIONS = frozenset(option.value for option in ClassicMixOption)
_CHANNEL_STRIP_MIX_OPTIONS = frozenset(option.value for option in ChannelStripMixOption)


def _learn_gain(opts, gain: Optional[float]):
    if gain is None or not math.isfinite(gain):
        return None
    comparitor = NumberComparitor(opts.comparitor)
    if not comparitor.is_inclusive:
        comparitor = NumberComparitor.EQUAL
    return {"gain": gain, "comparitor": comparitor.value}


def _gain_predicate(
    feedback_id: FeedbackId,
    label: str,
    description: str,
    leading_fields: list,
    gain_label: str,
    gain_min: float,
    gain_max: float,
    read_gain: Callable,
) -> PredicateDefinition:
    """Gain predicate reading the current gain (dB) through ``read_gain(state, opts)``."""

    def evaluate(state, opts) -> bool:
        return compare_number(opts.gain, opts.comparitor, read_gain(state, opts))

    def learn(state, opts):
        return _learn_gain(opts, read_gain(state, opts))

    return PredicateDefinition(
        id=feedback_id,
        label=label,
        description=description,
        options=OptionSchema(
            feedback_id.value,
            [*leading_fields, comparitor_picker(), gain_picker(gain_label, gain_min, gain_max)],
        ),
        hint=PREVIEW_HINT,
        evaluate_fn=evaluate,
        learn_fn=learn,
    )


# ============================================================================
# CLASSIC AUDIO
# ============================================================================

def _classic_channel_gain(state, opts):
    channel = get_classic_audio_channel(state, opts.input)
    return channel.gain if channel is not None else None


def _classic_master_gain(state, opts):
    audio = get_classic_audio(state)
    if audio is None or audio.master is None:
        return None
    return audio.master.gain


def _evaluate_classic_mix_option(state, opts) -> bool:
    channel = get_classic_audio_channel(state, opts.input)
    return channel is not None and channel.mix_option == opts.option


def _learn_classic_mix_option(state, opts):
    channel = get_classic_audio_channel(state, opts.input)
    if channel is None or channel.mix_option not in _CLASSIC_MIX_OPTIONS:
        return None
    return {"option": channel.mix_option}


def _classic_audio_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    input_option = audio_input_picker(model)
    mix_option = dropdown(
        "option",
        "Mix option",
        [
            Choice(ClassicMixOption.OFF.value, "Off"),
            Choice(ClassicMixOption.ON.value, "On"),
            Choice(ClassicMixOption.AFV.value, "AFV"),
        ],
    )

    return [
        _gain_predicate(
            FeedbackId.CLASSIC_AUDIO_GAIN,
            "Classic Audio: Audio gain",
            "If the audio input has the specified gain, change style of the bank",
            [input_option],
            "Fader Level (-60 = -inf)",
            -60,
            6,
            _classic_channel_gain,
        ),
        PredicateDefinition(
            id=FeedbackId.CLASSIC_AUDIO_MIX_OPTION,
            label="Classic Audio: Mix option",
            description="If the audio input has the specified mix option, change style of the bank",
            options=OptionSchema(FeedbackId.CLASSIC_AUDIO_MIX_OPTION.value, [input_option, mix_option]),
            hint=PREVIEW_HINT,
            evaluate_fn=_evaluate_classic_mix_option,
            learn_fn=_learn_classic_mix_option,
        ),
        _gain_predicate(
            FeedbackId.CLASSIC_AUDIO_MASTER_GAIN,
            "Classic Audio: Master gain",
            "If the audio master has the specified gain, change style of the bank",
            [],
            "Fader Level (-60 = -inf)",
            -60,
            6,
            _classic_master_gain,
        ),
    ]


# ============================================================================
# CHANNEL-STRIP AUDIO
# ============================================================================

def _source_properties(state, opts):
    source = get_channel_strip_source(state, opts.input, opts.source)
    return source.properties if source is not None else None


def _channel_strip_input_gain(state, opts):
    props = _source_properties(state, opts)
    return props.gain / CHANNEL_STRIP_GAIN_SCALE if props is not None else None


def _channel_strip_fader_gain(state, opts):
    props = _source_properties(state, opts)
    return props.fader_gain / CHANNEL_STRIP_GAIN_SCALE if props is not None else None


def _channel_strip_master_gain(state, opts):
    audio = get_channel_strip_audio(state)
    if audio is None or audio.master is None or audio.master.properties is None:
        return None
    return audio.master.properties.fader_gain / CHANNEL_STRIP_GAIN_SCALE


def _channel_strip_monitor_gain(state, opts):
    audio = get_channel_strip_audio(state)
    if audio is None or audio.monitor is None:
        return None
    return audio.monitor.gain / CHANNEL_STRIP_GAIN_SCALE


def _evaluate_channel_strip_mix_option(state, opts) -> bool:
    props = _source_properties(state, opts)
    return props is not None and props.mix_option == opts.option


def _learn_channel_strip_mix_option(state, opts):
    props = _source_properties(state, opts)
    if props is None or props.mix_option not in _CHANNEL_STRIP_MIX_OPTIONS:
        return None
    return {"option": props.mix_option}


def _evaluate_monitor_muted(state, opts) -> bool:
    audio = get_channel_strip_audio(state)
    return bool(audio is not None and audio.monitor is not None and audio.monitor.input_master_muted)


def _channel_strip_audio_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    audio: ChannelStripAudio = model.audio
    input_option = audio_input_picker(model)
    source_option = channel_strip_source_picker()
    mix_option = dropdown(
        "option",
        "Mix option",
        [
            Choice(ChannelStripMixOption.OFF.value, "Off"),
            Choice(ChannelStripMixOption.ON.value, "On"),
            Choice(ChannelStripMixOption.AFV.value, "AFV"),
        ],
    )

    predicates = [
        _gain_predicate(
            FeedbackId.CHANNEL_STRIP_AUDIO_INPUT_GAIN,
            "Channel Strip Audio: Audio input gain",
            "If the audio input has the specified input gain, change style of the bank",
            [input_option, source_option],
            "Input Level (-100 = -inf)",
            -100,
            6,
            _channel_strip_input_gain,
        ),
        _gain_predicate(
            FeedbackId.CHANNEL_STRIP_AUDIO_FADER_GAIN,
            "Channel Strip Audio: Audio fader gain",
            "If the audio input has the specified fader gain, change style of the bank",
            [input_option, source_option],
            "Fader Level (-100 = -inf)",
            -100,
            10,
            _channel_strip_fader_gain,
        ),
        PredicateDefinition(
            id=FeedbackId.CHANNEL_STRIP_AUDIO_MIX_OPTION,
            label="Channel Strip Audio: Audio mix option",
            description="If the audio input has the specified mix option, change style of the bank",
            options=OptionSchema(
                FeedbackId.CHANNEL_STRIP_AUDIO_MIX_OPTION.value,
                [input_option, source_option, mix_option],
            ),
            hint=PREVIEW_HINT,
            evaluate_fn=_evaluate_channel_strip_mix_option,
            learn_fn=_learn_channel_strip_mix_option,
        ),
        _gain_predicate(
            FeedbackId.CHANNEL_STRIP_AUDIO_MASTER_GAIN,
            "Channel Strip Audio: Master fader gain",
            "If the master has the specified fader gain, change style of the bank",
            [],
            "Fader Level (-100 = -inf)",
            -100,
            10,
            _channel_strip_master_gain,
        ),
    ]

    if audio.monitor:
        predicates += [
            PredicateDefinition(
                id=FeedbackId.CHANNEL_STRIP_AUDIO_MONITOR_MASTER_MUTED,
                label="Channel Strip Audio: Monitor/Headphone Master muted",
                description="If the headphone master is muted, change style of the bank",
                options=OptionSchema(FeedbackId.CHANNEL_STRIP_AUDIO_MONITOR_MASTER_MUTED.value, []),
                hint=PREVIEW_HINT,
                evaluate_fn=_evaluate_monitor_muted,
            ),
            _gain_predicate(
                FeedbackId.CHANNEL_STRIP_AUDIO_MONITOR_FADER_GAIN,
                "Channel Strip Audio: Monitor/Headphone Gain",
                "If the headphone/monitor has the specified fader gain, change style of the bank",
                [],
                "Fader Level (-60 = Min)",
                -60,
                10,
                _channel_strip_monitor_gain,
            ),
        ]

    return predicates


_AUDIO_BUILDERS: Dict[AudioArchitecture, Callable[[CapabilityModel], List[PredicateDefinition]]] = {
    AudioArchitecture.NONE: lambda model: [],
    AudioArchitecture.CLASSIC: _classic_audio_predicates,
    AudioArchitecture.CHANNEL_STRIP: _channel_strip_audio_predicates,
}


def audio_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    return _AUDIO_BUILDERS[model.audio_architecture](model)
