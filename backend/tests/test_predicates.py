"""
Tests for per-subsystem evaluate semantics.

These tests verify:
1. Each predicate matches the snapshot values it names
2. Missing sub-state and malformed options evaluate False
3. The k-stage tuple predicates match all pairs or nothing
"""

import pytest

from mixer_feedback.capabilities import CapabilityModel
from mixer_feedback.registry import build_registry
from mixer_feedback.state import StateSnapshot


# -----------------------------------------------------------------------------
# Totality
# -----------------------------------------------------------------------------

class TestTotality:
    """evaluate never raises for noisy input."""

    @pytest.mark.parametrize("options", [{"mixeffect": "abc"}, {"input": None}, {"mixeffect": 9}, "program"])
    def test_malformed_options(self, registry, full_state, options):
        assert registry.evaluate("program_bg", full_state, options) is False

    def test_malformed_snapshot(self, registry):
        assert registry.evaluate("program_bg", {"video": []}, {}) is False
        assert registry.evaluate("program_bg", None, {}) is False

    def test_every_predicate_on_empty_snapshot(self, registry):
        for definition in registry:
            assert definition.evaluate({}, {}) in (True, False)

    def test_snapshot_model_is_accepted(self, registry, full_state):
        snapshot = StateSnapshot.model_validate(full_state)
        assert registry.evaluate("program_bg", snapshot, {"mixeffect": 0, "input": 1}) is True

    def test_huge_range_value(self, registry, full_state):
        options = {"box_index": 0, "properties": ["size"], "size": 1e308}
        assert registry.evaluate("ssrc_box_properties", full_state, options) is False


# -----------------------------------------------------------------------------
# Tally and stages
# -----------------------------------------------------------------------------

class TestStages:
    """Tally, preview and program sources."""

    def test_tally(self, registry, full_state):
        assert registry.evaluate("program_tally", full_state, {"input": 1}) is True
        assert registry.evaluate("program_tally", full_state, {"input": 2}) is False
        assert registry.evaluate("preview_tally", full_state, {"input": 2}) is True
        assert registry.evaluate("program_tally", full_state, {"input": 2, "invert": True}) is True

    def test_single_stage(self, registry, full_state):
        assert registry.evaluate("preview_bg", full_state, {"mixeffect": 0, "input": 2}) is True
        assert registry.evaluate("program_bg", full_state, {"mixeffect": 1, "input": 4}) is True
        assert registry.evaluate("program_bg", full_state, {"mixeffect": 1, "input": 1}) is False

    def test_three_stage_program(self, registry, full_state):
        options = {
            "mixeffect1": 0, "input1": 1,
            "mixeffect2": 1, "input2": 4,
            "mixeffect3": 2, "input3": 6,
        }
        assert registry.evaluate("program_bg_3", full_state, options) is True

        for stage in (0, 1, 2):
            changed = dict(full_state)
            changed["video"] = {
                **full_state["video"],
                "mix_effects": {
                    **full_state["video"]["mix_effects"],
                    stage: {**full_state["video"]["mix_effects"][stage], "program_input": 99},
                },
            }
            assert registry.evaluate("program_bg_3", changed, options) is False

    def test_three_stage_learn(self, registry, full_state):
        result = registry.learn("program_bg_3", full_state)
        assert result.supported
        assert (result.options["input1"], result.options["input2"], result.options["input3"]) == (1, 4, 6)

    def test_tuple_stage_defaults(self, registry):
        opts = registry.get("preview_bg_4").options.coerce({})
        assert (opts.mixeffect1, opts.mixeffect2, opts.mixeffect3, opts.mixeffect4) == (0, 1, 2, 3)


# -----------------------------------------------------------------------------
# Keyers
# -----------------------------------------------------------------------------

class TestKeyers:
    """Upstream and downstream keyers."""

    def test_usk_on_air(self, registry, full_state):
        assert registry.evaluate("usk_bg", full_state, {"mixeffect": 0, "key": 0}) is True
        assert registry.evaluate("usk_bg", full_state, {"mixeffect": 0, "key": 1}) is False
        assert registry.evaluate("usk_bg", full_state, {"mixeffect": 0, "key": 1, "invert": True}) is True

    def test_usk_source_and_key_frame(self, registry, full_state):
        assert registry.evaluate("usk_source", full_state, {"fill": 3}) is True
        assert registry.evaluate("usk_keyframe", full_state, {"keyframe": 2}) is True
        assert registry.evaluate("usk_keyframe", full_state, {"keyframe": 1}) is False

    def test_dsk(self, registry, full_state):
        assert registry.evaluate("dsk_bg", full_state, {"key": 0}) is True
        assert registry.evaluate("dsk_tie", full_state, {"key": 0}) is True
        assert registry.evaluate("dsk_tie", full_state, {"key": 1}) is False
        assert registry.evaluate("dsk_source", full_state, {"key": 0, "fill": 2000}) is True


# -----------------------------------------------------------------------------
# Compositor
# -----------------------------------------------------------------------------

class TestSuperSource:
    """Art and box predicates with quantized geometry."""

    def test_box_enable_and_source(self, registry, full_state):
        assert registry.evaluate("ssrc_box_enable", full_state, {"ssrc_id": 0, "box_index": 0}) is True
        assert registry.evaluate("ssrc_box_enable", full_state, {"ssrc_id": 1, "box_index": 0}) is False
        assert registry.evaluate("ssrc_box_source", full_state, {"box_index": 0, "source": 5}) is True

    def test_box_size_absorbs_jitter(self, registry, full_state):
        options = {"box_index": 0, "properties": ["size"], "size": 0.5}
        assert registry.evaluate("ssrc_box_properties", full_state, options) is True
        options["size"] = 0.49
        assert registry.evaluate("ssrc_box_properties", full_state, options) is False

    def test_crop_ignored_while_uncropped(self, registry, full_state):
        full_state["video"]["super_sources"][0]["boxes"][0]["cropped"] = False
        options = {"box_index": 0, "properties": ["crop_top"], "crop_top": 9.0}
        assert registry.evaluate("ssrc_box_properties", full_state, options) is True

    def test_undefined_range_never_matches(self, registry, full_state):
        options = {"box_index": 0, "properties": ["x"], "x": None}
        assert registry.evaluate("ssrc_box_properties", full_state, options) is False

    def test_art(self, registry, full_state):
        assert registry.evaluate("ssrc_art_source", full_state, {"source": 3010}) is True
        assert registry.evaluate("ssrc_art_option", full_state, {"art_option": 1}) is True
        options = {"properties": ["art_clip", "key"], "art_clip": 50.3, "key": 3011}
        assert registry.evaluate("ssrc_art_properties", full_state, options) is True

    def test_single_compositor_uses_first(self, default_model, full_state):
        registry = build_registry(default_model.model_copy(update={"super_sources": 1}))
        assert registry.evaluate("ssrc_box_source", full_state, {"box_index": 0, "source": 5}) is True


# -----------------------------------------------------------------------------
# Transitions and fade to black
# -----------------------------------------------------------------------------

class TestTransitions:
    """Style, selection, rate and fade to black."""

    def test_style(self, registry, full_state):
        assert registry.evaluate("transition_style", full_state, {"style": 1}) is True
        assert registry.evaluate("transition_style", full_state, {"style": 0}) is False

    def test_selection_exact_two_keyers(self, full_state):
        registry = build_registry(CapabilityModel(keyers_per_stage=2))
        options = {"match_method": "exact", "background": True, "key1": True, "key2": False}
        assert registry.evaluate("transition_selection", full_state, options) is True

    def test_selection_methods(self, registry, full_state):
        assert registry.evaluate(
            "transition_selection", full_state, {"match_method": "contains", "background": True}
        ) is True
        assert registry.evaluate(
            "transition_selection", full_state, {"match_method": "not-contain", "background": False, "key2": True}
        ) is True
        assert registry.evaluate(
            "transition_selection", full_state, {"match_method": "exact", "background": True}
        ) is False

    def test_rate_per_style(self, registry, full_state):
        assert registry.evaluate("transition_rate", full_state, {"style": 0, "rate": 30}) is True
        assert registry.evaluate("transition_rate", full_state, {"style": 3, "rate": 60}) is True
        assert registry.evaluate("transition_rate", full_state, {"style": 3, "rate": 30}) is False

    def test_in_transition(self, registry, full_state):
        assert registry.evaluate("in_transition", full_state, {"mixeffect": 0}) is True
        assert registry.evaluate("in_transition", full_state, {"mixeffect": 1}) is False

    @pytest.mark.parametrize(
        "node,state",
        [
            ({"is_fully_black": True}, "on"),
            ({"is_fully_black": True, "in_transition": True}, "fading"),
            ({}, "off"),
        ],
    )
    def test_fade_to_black_state(self, registry, full_state, node, state):
        full_state["video"]["mix_effects"][0]["fade_to_black"] = node
        assert registry.evaluate("fade_to_black_is_black", full_state, {"state": state}) is True

    def test_fade_to_black_rate(self, registry, full_state):
        assert registry.evaluate("fade_to_black_rate", full_state, {"rate": 35}) is True


# -----------------------------------------------------------------------------
# Outputs, routing, macros, media
# -----------------------------------------------------------------------------

class TestOutputsAndRouting:
    """Streaming, recording, aux, multiviewer and media players."""

    def test_outputs(self, registry, full_state):
        assert registry.evaluate("stream_status", full_state, {"state": 4}) is True
        assert registry.evaluate("stream_status", full_state, {"state": 1}) is False
        assert registry.evaluate("record_status", full_state, {"state": 1}) is True
        assert registry.evaluate("record_status", {}, {"state": 0}) is False

    def test_aux(self, registry, full_state):
        assert registry.evaluate("aux_bg", full_state, {"aux": 0, "input": 3}) is True
        assert registry.evaluate("aux_bg", full_state, {"aux": 1, "input": 3}) is False

    def test_multiviewer(self, registry, full_state):
        options = {"multiviewer_id": 0, "window_index": 0, "source": 7}
        assert registry.evaluate("mv_source", full_state, options) is True

    def test_media_player(self, registry, full_state):
        assert registry.evaluate("media_player_source", full_state, {"source": 1001}) is True
        assert registry.evaluate("media_player_source", full_state, {"source": 1}) is False

    def test_macro_states(self, registry, full_state):
        assert registry.evaluate("macro", full_state, {"macro_index": 5, "state": "running"}) is True
        assert registry.evaluate("macro", full_state, {"macro_index": 5, "state": "waiting"}) is False
        assert registry.evaluate("macro", full_state, {"macro_index": 5, "state": "used"}) is True
        assert registry.evaluate("macro", full_state, {"macro_index": 6, "state": "used"}) is False
        assert registry.evaluate("macro", full_state, {"macro_index": 5, "state": "recording"}) is False

    def test_macro_loop(self, registry, full_state):
        assert registry.evaluate("macro_loop", full_state, {"loop": True}) is True
        assert registry.evaluate("macro_loop", full_state, {"loop": False}) is False

    def test_macros_missing_from_snapshot(self, registry, full_state):
        del full_state["macro"]
        assert registry.evaluate("macro_loop", full_state, {"loop": False}) is False
        assert registry.evaluate("macro_loop", {}, {"loop": True}) is False
        assert registry.evaluate("macro", full_state, {"macro_index": 5, "state": "used"}) is False


# -----------------------------------------------------------------------------
# Audio
# -----------------------------------------------------------------------------

class TestAudio:
    """Classic and channel-strip audio."""

    def test_classic_gain(self, registry, full_state):
        assert registry.evaluate("classic_audio_gain", full_state, {"input": 1, "gain": -6.5}) is True
        options = {"input": 1, "gain": -10, "comparitor": "gt"}
        assert registry.evaluate("classic_audio_gain", full_state, options) is True
        assert registry.evaluate("classic_audio_gain", full_state, {"input": 2, "gain": -6.5}) is False

    def test_classic_mix_option(self, registry, full_state):
        assert registry.evaluate("classic_audio_mix_option", full_state, {"input": 1, "option": 2}) is True

    def test_classic_predicates_ignore_channel_strip_state(self, registry, channel_strip_state):
        assert registry.evaluate("classic_audio_master_gain", channel_strip_state, {"gain": 0}) is False

    def test_channel_strip_gains(self, channel_strip_registry, channel_strip_state):
        registry = channel_strip_registry
        base = {"input": 1, "source": "-65280"}
        assert registry.evaluate("channel_strip_audio_input_gain", channel_strip_state, {**base, "gain": 3.5}) is True
        assert registry.evaluate("channel_strip_audio_fader_gain", channel_strip_state, {**base, "gain": -12.5}) is True
        assert registry.evaluate("channel_strip_audio_master_gain", channel_strip_state, {"gain": -5}) is True
        assert registry.evaluate("channel_strip_audio_monitor_fader_gain", channel_strip_state, {"gain": -20}) is True

    def test_channel_strip_source_id_coerced(self, channel_strip_registry, channel_strip_state):
        options = {"input": 1, "source": -65280, "option": 4}
        assert channel_strip_registry.evaluate("channel_strip_audio_mix_option", channel_strip_state, options) is True

    def test_monitor_muted(self, channel_strip_registry, channel_strip_state):
        assert channel_strip_registry.evaluate("channel_strip_audio_monitor_master_muted", channel_strip_state) is True
        channel_strip_state["audio"]["monitor"]["input_master_muted"] = False
        assert channel_strip_registry.evaluate("channel_strip_audio_monitor_master_muted", channel_strip_state) is False
