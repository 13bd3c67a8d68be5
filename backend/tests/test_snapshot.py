"""
Tests for the state snapshot and its null-safe accessors.
"""

from mixer_feedback.state import (
    FadeToBlackStatus,
    StateSnapshot,
    coerce_snapshot,
    get_aux_source,
    get_channel_strip_source,
    get_classic_audio,
    get_classic_audio_channel,
    get_dsk,
    get_multiviewer_window,
    get_super_source_box,
    get_usk,
)


class TestCoerceSnapshot:
    """Boundary validation of raw state mappings."""

    def test_mapping(self, full_state):
        snapshot = coerce_snapshot(full_state)
        assert isinstance(snapshot, StateSnapshot)
        assert snapshot.video.mix_effects[0].program_input == 1

    def test_passthrough(self, full_state):
        snapshot = StateSnapshot.model_validate(full_state)
        assert coerce_snapshot(snapshot) is snapshot

    def test_malformed(self):
        assert coerce_snapshot({"tally": {"one": {}}}) is None
        assert coerce_snapshot(None) is None
        assert coerce_snapshot({"audio": {"kind": "fairlight"}}) is None

    def test_unknown_fields_are_ignored(self):
        assert coerce_snapshot({"hyperdecks": {0: {}}}) is not None

    def test_absent_macro_node(self):
        assert coerce_snapshot({}).macro is None

    def test_selection_keeps_device_order(self, full_state):
        snapshot = coerce_snapshot(full_state)
        assert snapshot.video.mix_effects[0].transition_properties.selection == (1, 0)

    def test_fade_to_black_status(self, full_state):
        me = coerce_snapshot(full_state).video.mix_effects[0]
        assert me.fade_to_black.status == FadeToBlackStatus.FULLY_BLACK


class TestAccessors:
    """Absent nodes are None, never an error."""

    def test_present(self, full_state):
        snapshot = coerce_snapshot(full_state)
        assert get_usk(snapshot, 0, 0).fill_source == 3
        assert get_dsk(snapshot, 0).on_air is True
        assert get_super_source_box(snapshot, 0).source == 5
        assert get_aux_source(snapshot, 0) == 3
        assert get_multiviewer_window(snapshot, 0, 0).source == 7
        assert get_classic_audio_channel(snapshot, 1).mix_option == 2

    def test_absent(self):
        snapshot = StateSnapshot()
        assert get_usk(snapshot, 3, 0) is None
        assert get_dsk(snapshot, 1) is None
        assert get_super_source_box(snapshot, 0, ssrc_id=1) is None
        assert get_aux_source(snapshot, 5) is None
        assert get_multiviewer_window(snapshot, 1, 9) is None
        assert get_classic_audio(snapshot) is None

    def test_audio_architecture_mismatch(self, channel_strip_state):
        snapshot = coerce_snapshot(channel_strip_state)
        assert get_classic_audio(snapshot) is None
        assert get_channel_strip_source(snapshot, 1, -65280).properties.gain == 350
