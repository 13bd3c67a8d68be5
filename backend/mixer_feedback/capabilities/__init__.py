"""
Capability model: which subsystems a device variant has, and how many.

- models.py: CapabilityModel and the tagged audio variant
- profiles.py: DEFAULT_PROFILE used before/alongside device reports
- resolver.py: merge a partial device record with the default profile
"""

from .models import (
    AudioArchitecture,
    AudioCapabilities,
    AudioInputSpec,
    CapabilityModel,
    ChannelStripAudio,
    ClassicAudio,
    InputSpec,
    NoAudio,
)
from .profiles import DEFAULT_PROFILE
from .resolver import resolve_capabilities

__all__ = [
    "AudioArchitecture",
    "AudioCapabilities",
    "AudioInputSpec",
    "CapabilityModel",
    "ChannelStripAudio",
    "ClassicAudio",
    "InputSpec",
    "NoAudio",
    "DEFAULT_PROFILE",
    "resolve_capabilities",
]
