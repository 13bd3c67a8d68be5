"""
Pytest configuration for the feedback registry test suite.
"""

import sys
from pathlib import Path

import pytest

# Add backend to Python path for test imports
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from mixer_feedback.capabilities import (  # noqa: E402
    DEFAULT_PROFILE,
    AudioInputSpec,
    CapabilityModel,
    ChannelStripAudio,
)
from mixer_feedback.registry import build_registry  # noqa: E402


def make_full_state() -> dict:
    """
    Raw state mapping populating every node the default profile can address.

    Values deliberately carry device jitter (box size 497, crop 1234...) so
    learn has to quantize.
    """
    return {
        "inputs": {
            1: {"short_name": "CAM1", "long_name": "Camera 1"},
            2: {"short_name": "CAM2", "long_name": "Camera 2"},
            3: {"short_name": "CAM3", "long_name": "Camera 3"},
        },
        "tally": {
            1: {"program": True, "preview": False},
            2: {"program": False, "preview": True},
        },
        "video": {
            "mix_effects": {
                0: {
                    "program_input": 1,
                    "preview_input": 2,
                    "transition_properties": {"style": 1, "selection": [1, 0]},
                    "transition_settings": {
                        "mix": {"rate": 30},
                        "dip": {"rate": 40},
                        "wipe": {"rate": 50},
                        "dve": {"rate": 60},
                    },
                    "transition_position": {"in_transition": True, "handle_position": 5000},
                    "fade_to_black": {"is_fully_black": True, "rate": 35},
                    "upstream_keyers": {
                        0: {
                            "on_air": True,
                            "fill_source": 3,
                            "cut_source": 4,
                            "fly_properties": {"is_at_key_frame": 2},
                        },
                    },
                },
                1: {"program_input": 4, "preview_input": 5},
                2: {"program_input": 6, "preview_input": 7},
                3: {"program_input": 8, "preview_input": 1},
            },
            "downstream_keyers": {
                0: {
                    "on_air": True,
                    "properties": {"tie": True, "rate": 30},
                    "sources": {"fill_source": 2000, "cut_source": 2001},
                },
            },
            "super_sources": {
                0: {
                    "properties": {
                        "art_fill_source": 3010,
                        "art_cut_source": 3011,
                        "art_option": 1,
                        "art_pre_multiplied": False,
                        "art_clip": 503,
                        "art_gain": 697,
                        "art_invert_key": True,
                    },
                    "boxes": {
                        0: {
                            "enabled": True,
                            "source": 5,
                            "x": 483,
                            "y": -271,
                            "size": 497,
                            "cropped": True,
                            "crop_top": 1234,
                            "crop_bottom": 0,
                            "crop_left": 2718,
                            "crop_right": 15,
                        },
                    },
                },
            },
            "auxes": {0: 3},
        },
        "macro": {
            "player": {"status": "running", "macro_index": 4, "loop": True},
            "recorder": {"is_recording": False, "macro_index": 0},
            "macros": {4: {"name": "Open", "is_used": True}},
        },
        "media": {"players": {0: {"source_type": 2, "clip_index": 1}}},
        "multiviewers": {0: {"windows": {0: {"source": 7}}}},
        "streaming": {"status": {"state": 4}},
        "recording": {"status": {"state": 1}},
        "audio": {
            "kind": "classic",
            "channels": {1: {"gain": -6.5, "balance": 0.0, "mix_option": 2}},
            "master": {"gain": 0.0},
        },
    }


CHANNEL_STRIP_MODEL = DEFAULT_PROFILE.model_copy(
    update={
        "model_id": 2,
        "label": "Channel strip mixer",
        "audio": ChannelStripAudio(
            inputs=(AudioInputSpec(id=1), AudioInputSpec(id=2), AudioInputSpec(id=1301)),
            monitor=True,
        ),
    }
)


def make_channel_strip_state() -> dict:
    state = make_full_state()
    state["audio"] = {
        "kind": "channel_strip",
        "inputs": {
            1: {
                "sources": {
                    "-65280": {"properties": {"gain": 350, "fader_gain": -1250, "mix_option": 4}},
                },
            },
        },
        "master": {"properties": {"fader_gain": -500}},
        "monitor": {"gain": -2000, "input_master_muted": True},
    }
    return state


@pytest.fixture
def default_model() -> CapabilityModel:
    return DEFAULT_PROFILE


@pytest.fixture
def registry(default_model):
    return build_registry(default_model)


@pytest.fixture
def full_state() -> dict:
    return make_full_state()


@pytest.fixture
def channel_strip_model() -> CapabilityModel:
    return CHANNEL_STRIP_MODEL


@pytest.fixture
def channel_strip_registry(channel_strip_model):
    return build_registry(channel_strip_model)


@pytest.fixture
def channel_strip_state() -> dict:
    return make_channel_strip_state()
