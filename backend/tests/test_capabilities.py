"""
Tests for the capability model and its resolution from device records.

These tests verify:
1. Reported fields override the default profile
2. Missing, None and invalid fields fall back to the default
3. Unknown fields are ignored
4. The audio variant is a tagged union
"""

import logging

import pytest
from pydantic import BaseModel, ValidationError

from mixer_feedback.capabilities import (
    DEFAULT_PROFILE,
    AudioArchitecture,
    CapabilityModel,
    ChannelStripAudio,
    ClassicAudio,
    NoAudio,
    resolve_capabilities,
)


# -----------------------------------------------------------------------------
# CapabilityModel
# -----------------------------------------------------------------------------

class TestCapabilityModel:
    """Validation of the immutable capability model."""

    def test_stage_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            CapabilityModel(stages=0)

    def test_counts_must_be_non_negative(self):
        with pytest.raises(ValidationError):
            CapabilityModel(auxes=-1)

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            CapabilityModel(stages=2, hyperdecks=4)

    def test_model_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_PROFILE.stages = 1

    def test_audio_defaults_to_none(self):
        model = CapabilityModel()
        assert isinstance(model.audio, NoAudio)
        assert model.audio_architecture == AudioArchitecture.NONE

    def test_audio_discriminator(self):
        model = CapabilityModel.model_validate(
            {"audio": {"kind": "channel_strip", "inputs": [{"id": 1}], "monitor": True}}
        )
        assert isinstance(model.audio, ChannelStripAudio)
        assert model.audio.monitor is True
        assert model.audio_architecture == AudioArchitecture.CHANNEL_STRIP

    def test_unknown_audio_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            CapabilityModel.model_validate({"audio": {"kind": "fairlight"}})

    def test_default_profile(self):
        assert DEFAULT_PROFILE.label == "Auto Detect"
        assert DEFAULT_PROFILE.stages == 4
        assert isinstance(DEFAULT_PROFILE.audio, ClassicAudio)


# -----------------------------------------------------------------------------
# resolve_capabilities
# -----------------------------------------------------------------------------

class TestResolveCapabilities:
    """Field-by-field merge of a device record with the default profile."""

    def test_empty_record_yields_default(self):
        assert resolve_capabilities({}) == DEFAULT_PROFILE
        assert resolve_capabilities(None) == DEFAULT_PROFILE

    def test_reported_fields_take_precedence(self):
        model = resolve_capabilities({"stages": 1, "super_sources": 0, "label": "Mini"})
        assert model.stages == 1
        assert model.super_sources == 0
        assert model.label == "Mini"
        assert model.auxes == DEFAULT_PROFILE.auxes

    def test_none_fields_fall_back(self):
        model = resolve_capabilities({"stages": None, "auxes": 1})
        assert model.stages == DEFAULT_PROFILE.stages
        assert model.auxes == 1

    def test_invalid_field_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mixer_feedback.capabilities.resolver"):
            model = resolve_capabilities({"stages": 0, "macros": "many", "auxes": 2})
        assert model.stages == DEFAULT_PROFILE.stages
        assert model.macros == DEFAULT_PROFILE.macros
        assert model.auxes == 2
        assert "stages" in caplog.text
        assert "macros" in caplog.text

    def test_unknown_fields_are_ignored(self):
        model = resolve_capabilities({"hyperdecks": 4, "stages": 2})
        assert model.stages == 2

    def test_audio_variant_is_replaced_whole(self):
        model = resolve_capabilities({"audio": {"kind": "none"}})
        assert model.audio_architecture == AudioArchitecture.NONE

    def test_invalid_audio_keeps_default(self):
        model = resolve_capabilities({"audio": {"kind": "channel_strip", "monitor": "loud"}})
        assert model.audio == DEFAULT_PROFILE.audio

    def test_custom_defaults(self):
        base = CapabilityModel(stages=2, auxes=1)
        model = resolve_capabilities({"auxes": 3}, defaults=base)
        assert model.stages == 2
        assert model.auxes == 3

    def test_unsupported_record_type_yields_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mixer_feedback.capabilities.resolver"):
            model = resolve_capabilities(["stages", 2])
        assert model == DEFAULT_PROFILE
        assert "list" in caplog.text

    def test_accepts_pydantic_record(self):
        class DeviceRecord(BaseModel):
            stages: int = 2
            clips: int = 0

        model = resolve_capabilities(DeviceRecord())
        assert model.stages == 2
        assert model.clips == 0

    def test_resolution_is_deterministic(self):
        record = {"stages": 3, "audio": {"kind": "classic", "inputs": [{"id": 1}]}}
        assert resolve_capabilities(record) == resolve_capabilities(record)
