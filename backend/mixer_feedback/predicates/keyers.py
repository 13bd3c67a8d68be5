"""
Upstream and downstream keyer predicates.

Upstream keyers exist only when the device reports keyers per stage; the key
frame predicate additionally needs a DVE. Downstream keyers are gated on the
downstream keyer count.
"""

from typing import List

from ..capabilities import CapabilityModel
from ..options import OptionSchema
from ..options.pickers import (
    dsk_picker,
    invert_picker,
    key_fill_source_picker,
    keyframe_picker,
    stage_picker,
    usk_picker,
)
from ..state import KeyFrame, get_dsk, get_usk
from .definition import ON_AIR_HINT, SOURCE_HINT, PredicateDefinition
from .ids import FeedbackId

_KEY_FRAMES = frozenset(frame.value for frame in KeyFrame)


# ============================================================================
# UPSTREAM KEYERS
# ============================================================================

def _usk_on_air(state, opts) -> bool:
    usk = get_usk(state, opts.mixeffect, opts.key)
    return bool(usk is not None and usk.on_air) != opts.invert


def _usk_source(state, opts) -> bool:
    usk = get_usk(state, opts.mixeffect, opts.key)
    return usk is not None and usk.fill_source == opts.fill


def _learn_usk_source(state, opts):
    usk = get_usk(state, opts.mixeffect, opts.key)
    if usk is None:
        return None
    return {"fill": usk.fill_source}


def _usk_key_frame(state, opts) -> bool:
    usk = get_usk(state, opts.mixeffect, opts.key)
    if usk is None or usk.fly_properties is None:
        return False
    return usk.fly_properties.is_at_key_frame == opts.keyframe


def _learn_usk_key_frame(state, opts):
    usk = get_usk(state, opts.mixeffect, opts.key)
    if usk is None or usk.fly_properties is None:
        return None
    # The device reports 0 while the keyer sits between key frames
    if usk.fly_properties.is_at_key_frame not in _KEY_FRAMES:
        return None
    return {"keyframe": usk.fly_properties.is_at_key_frame}


def usk_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.keyers_per_stage:
        return []

    predicates = [
        PredicateDefinition(
            id=FeedbackId.USK_ON_AIR,
            label="Upstream key: OnAir state",
            description="If the specified upstream keyer is active, change style of the bank",
            options=OptionSchema(
                FeedbackId.USK_ON_AIR.value,
                [stage_picker(model), usk_picker(model), invert_picker()],
            ),
            hint=ON_AIR_HINT,
            evaluate_fn=_usk_on_air,
        ),
        PredicateDefinition(
            id=FeedbackId.USK_SOURCE,
            label="Upstream key: Fill source",
            description="If the input specified is in use by the USK specified, change style of the bank",
            options=OptionSchema(
                FeedbackId.USK_SOURCE.value,
                [stage_picker(model), usk_picker(model), key_fill_source_picker(model)],
            ),
            hint=SOURCE_HINT,
            evaluate_fn=_usk_source,
            learn_fn=_learn_usk_source,
        ),
    ]

    if model.dves:
        predicates.append(
            PredicateDefinition(
                id=FeedbackId.USK_KEY_FRAME,
                label="Upstream key: Key frame",
                description="If the USK specified is at the Key Frame specified, change style of the bank",
                options=OptionSchema(
                    FeedbackId.USK_KEY_FRAME.value,
                    [stage_picker(model), usk_picker(model), keyframe_picker()],
                ),
                hint=SOURCE_HINT,
                evaluate_fn=_usk_key_frame,
                learn_fn=_learn_usk_key_frame,
            )
        )

    return predicates


# ============================================================================
# DOWNSTREAM KEYERS
# ============================================================================

def _dsk_on_air(state, opts) -> bool:
    dsk = get_dsk(state, opts.key)
    return bool(dsk is not None and dsk.on_air) != opts.invert


def _dsk_tie(state, opts) -> bool:
    dsk = get_dsk(state, opts.key)
    tied = dsk is not None and dsk.properties is not None and dsk.properties.tie
    return bool(tied) != opts.invert


def _dsk_source(state, opts) -> bool:
    dsk = get_dsk(state, opts.key)
    return dsk is not None and dsk.sources is not None and dsk.sources.fill_source == opts.fill


def _learn_dsk_source(state, opts):
    dsk = get_dsk(state, opts.key)
    if dsk is None or dsk.sources is None:
        return None
    return {"fill": dsk.sources.fill_source}


def dsk_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.downstream_keyers:
        return []

    return [
        PredicateDefinition(
            id=FeedbackId.DSK_ON_AIR,
            label="Downstream key: OnAir",
            description="If the specified downstream keyer is onair, change style of the bank",
            options=OptionSchema(FeedbackId.DSK_ON_AIR.value, [dsk_picker(model), invert_picker()]),
            hint=ON_AIR_HINT,
            evaluate_fn=_dsk_on_air,
        ),
        PredicateDefinition(
            id=FeedbackId.DSK_TIE,
            label="Downstream key: Tied",
            description="If the specified downstream keyer is tied, change style of the bank",
            options=OptionSchema(FeedbackId.DSK_TIE.value, [dsk_picker(model), invert_picker()]),
            hint=ON_AIR_HINT,
            evaluate_fn=_dsk_tie,
        ),
        PredicateDefinition(
            id=FeedbackId.DSK_SOURCE,
            label="Downstream key: Fill source",
            description="If the input specified is in use by the DSK specified, change style of the bank",
            options=OptionSchema(
                FeedbackId.DSK_SOURCE.value,
                [dsk_picker(model), key_fill_source_picker(model)],
            ),
            hint=SOURCE_HINT,
            evaluate_fn=_dsk_source,
            learn_fn=_learn_dsk_source,
        ),
    ]
