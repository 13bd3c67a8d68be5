"""
Tally and preview/program source predicates.

Single-stage predicates exist on every device. N-way predicates
(``preview_bg_k`` / ``program_bg_k``) match k (stage, source) pairs at once
and exist for k = 2..min(MAX_STAGE_TUPLE, stages).
"""

from typing import List

from ..capabilities import CapabilityModel
from ..options import OptionSchema
from ..options.pickers import invert_picker, source_picker, stage_picker
from ..state import get_mix_effect
from .definition import ON_AIR_HINT, PREVIEW_HINT, PredicateDefinition, PresentationHint
from .ids import PREVIEW_BG_BY_STAGE_COUNT, PROGRAM_BG_BY_STAGE_COUNT, FeedbackId

MAX_STAGE_TUPLE = 4

_COUNT_WORDS = {2: "Two", 3: "Three", 4: "Four"}

# (snapshot attribute, label word, hint)
_BUSES = {
    "preview": ("preview_input", "preview", PREVIEW_HINT),
    "program": ("program_input", "program", ON_AIR_HINT),
}


# ============================================================================
# TALLY
# ============================================================================

def _tally_predicate(model: CapabilityModel, feedback_id: FeedbackId, bus: str, hint: PresentationHint) -> PredicateDefinition:
    def evaluate(state, opts) -> bool:
        tally = state.tally.get(opts.input)
        active = bool(tally is not None and getattr(tally, bus))
        return active != opts.invert

    return PredicateDefinition(
        id=feedback_id,
        label=f"Tally: {bus.capitalize()}",
        description=f"If the input specified has an active {bus} tally light, change style of the bank",
        options=OptionSchema(feedback_id.value, [source_picker(model), invert_picker()]),
        hint=hint,
        evaluate_fn=evaluate,
    )


# ============================================================================
# SINGLE STAGE
# ============================================================================

def _single_stage_predicate(model: CapabilityModel, feedback_id: FeedbackId, bus: str) -> PredicateDefinition:
    attr, word, hint = _BUSES[bus]

    def evaluate(state, opts) -> bool:
        me = get_mix_effect(state, opts.mixeffect)
        return me is not None and getattr(me, attr) == opts.input

    def learn(state, opts):
        me = get_mix_effect(state, opts.mixeffect)
        if me is None:
            return None
        return {"input": getattr(me, attr)}

    return PredicateDefinition(
        id=feedback_id,
        label=f"ME: One ME {word} source",
        description=f"If the input specified is in use by {word} on the M/E stage specified, change style of the bank",
        options=OptionSchema(feedback_id.value, [stage_picker(model), source_picker(model)]),
        hint=hint,
        evaluate_fn=evaluate,
        learn_fn=learn,
    )


# ============================================================================
# N-WAY STAGES
# ============================================================================

def _multi_stage_predicate(model: CapabilityModel, feedback_id: FeedbackId, bus: str, count: int) -> PredicateDefinition:
    """
    Predicate over ``count`` (stage, source) pairs.

    True iff every pair matches its stage's current source. Learn fills all
    sources atomically or not at all.
    """
    attr, word, hint = _BUSES[bus]
    positions = tuple(range(1, count + 1))

    fields = []
    for position in positions:
        fields.append(stage_picker(model, position))
        fields.append(source_picker(model, position))

    def _stages(state, opts):
        return [get_mix_effect(state, getattr(opts, f"mixeffect{p}")) for p in positions]

    def evaluate(state, opts) -> bool:
        for position, me in zip(positions, _stages(state, opts)):
            if me is None or getattr(me, attr) != getattr(opts, f"input{position}"):
                return False
        return True

    def learn(state, opts):
        stages = _stages(state, opts)
        if any(me is None for me in stages):
            return None
        return {f"input{p}": getattr(me, attr) for p, me in zip(positions, stages)}

    return PredicateDefinition(
        id=feedback_id,
        label=f"ME: {_COUNT_WORDS[count]} ME {word} sources",
        description=f"If the inputs specified are in use by {word} on the M/E stages specified, change style of the bank",
        options=OptionSchema(feedback_id.value, fields),
        hint=hint,
        evaluate_fn=evaluate,
        learn_fn=learn,
    )


def mix_effect_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    predicates = [
        _tally_predicate(model, FeedbackId.PROGRAM_TALLY, "program", ON_AIR_HINT),
        _tally_predicate(model, FeedbackId.PREVIEW_TALLY, "preview", PREVIEW_HINT),
        _single_stage_predicate(model, FeedbackId.PREVIEW_BG, "preview"),
    ]
    for count in range(2, min(MAX_STAGE_TUPLE, model.stages) + 1):
        predicates.append(_multi_stage_predicate(model, PREVIEW_BG_BY_STAGE_COUNT[count], "preview", count))

    predicates.append(_single_stage_predicate(model, FeedbackId.PROGRAM_BG, "program"))
    for count in range(2, min(MAX_STAGE_TUPLE, model.stages) + 1):
        predicates.append(_multi_stage_predicate(model, PROGRAM_BG_BY_STAGE_COUNT[count], "program", count))

    return predicates
