"""
Predicate definitions grouped by device subsystem.

Each builder takes a CapabilityModel and returns the definitions its
subsystem contributes. A builder whose capability count is zero returns an
empty list: gated-out predicates are absent, not disabled.
"""

from .audio import audio_predicates
from .definition import (
    LearnResult,
    LearnStatus,
    PredicateDefinition,
    PresentationHint,
)
from .ids import FeedbackId
from .keyers import dsk_predicates, usk_predicates
from .macros import macro_predicates
from .mix_effects import mix_effect_predicates
from .outputs import output_predicates
from .routing import aux_predicates, media_player_predicates, multiviewer_predicates
from .super_source import super_source_predicates
from .transition import fade_to_black_predicates, transition_predicates

# Assembly order; it is also the id order of a built registry
SUBSYSTEM_BUILDERS = (
    mix_effect_predicates,
    usk_predicates,
    dsk_predicates,
    super_source_predicates,
    transition_predicates,
    fade_to_black_predicates,
    output_predicates,
    audio_predicates,
    aux_predicates,
    macro_predicates,
    multiviewer_predicates,
    media_player_predicates,
)

__all__ = [
    "FeedbackId",
    "LearnResult",
    "LearnStatus",
    "PredicateDefinition",
    "PresentationHint",
    "SUBSYSTEM_BUILDERS",
]
