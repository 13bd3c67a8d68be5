"""
Transition and fade-to-black predicates.

Every stage has a transition engine and a fade-to-black, so these predicates
exist on all devices. The sting style is offered only when the device has
clips to play it from.
"""

from typing import List, Optional

from ..capabilities import CapabilityModel
from ..options import OptionSchema
from ..options.pickers import (
    fade_to_black_state_picker,
    match_method_picker,
    rate_picker,
    stage_picker,
    transition_selection_pickers,
    transition_style_picker,
)
from ..state import FadeToBlackStatus, TransitionStyle, get_mix_effect
from ..state.snapshot import RateSetting, TransitionSettings
from ..transitions import SelectionMatchMethod, calculate_transition_selection, match_selection
from .definition import STATUS_HINT, PredicateDefinition
from .ids import FeedbackId


def _rate_setting(settings: TransitionSettings, style: int) -> Optional[RateSetting]:
    """Rate-bearing settings for a style. Sting has none."""
    if style == TransitionStyle.MIX:
        return settings.mix
    if style == TransitionStyle.DIP:
        return settings.dip
    if style == TransitionStyle.WIPE:
        return settings.wipe
    if style == TransitionStyle.DVE:
        return settings.dve
    return None


def transition_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    style_option = transition_style_picker(skip_sting=model.clips == 0)
    offered_styles = frozenset(style_option.choice_ids)

    def evaluate_style(state, opts) -> bool:
        me = get_mix_effect(state, opts.mixeffect)
        if me is None or me.transition_properties is None:
            return False
        return me.transition_properties.style == opts.style

    def learn_style(state, opts):
        me = get_mix_effect(state, opts.mixeffect)
        if me is None or me.transition_properties is None:
            return None
        if me.transition_properties.style not in offered_styles:
            return None
        return {"style": me.transition_properties.style}

    def evaluate_selection(state, opts) -> bool:
        me = get_mix_effect(state, opts.mixeffect)
        if me is None or me.transition_properties is None:
            return False
        expected = calculate_transition_selection(model.keyers_per_stage, opts.model_dump())
        return match_selection(
            SelectionMatchMethod(opts.match_method),
            expected,
            me.transition_properties.selection,
        )

    def evaluate_rate(state, opts) -> bool:
        me = get_mix_effect(state, opts.mixeffect)
        if me is None or me.transition_settings is None:
            return False
        setting = _rate_setting(me.transition_settings, opts.style)
        return setting is not None and setting.rate == opts.rate

    def learn_rate(state, opts):
        me = get_mix_effect(state, opts.mixeffect)
        if me is None or me.transition_settings is None:
            return None
        setting = _rate_setting(me.transition_settings, opts.style)
        if setting is None:
            return None
        return {"rate": setting.rate}

    def evaluate_in_transition(state, opts) -> bool:
        me = get_mix_effect(state, opts.mixeffect)
        return bool(me is not None and me.transition_position is not None and me.transition_position.in_transition)

    return [
        PredicateDefinition(
            id=FeedbackId.TRANSITION_STYLE,
            label="Transition: Style",
            description="If the specified transition style is active, change style of the bank",
            options=OptionSchema(FeedbackId.TRANSITION_STYLE.value, [stage_picker(model), style_option]),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_style,
            learn_fn=learn_style,
        ),
        PredicateDefinition(
            id=FeedbackId.TRANSITION_SELECTION,
            label="Transition: Selection",
            description="If the specified transition selection is active, change style of the bank",
            options=OptionSchema(
                FeedbackId.TRANSITION_SELECTION.value,
                [stage_picker(model), match_method_picker(), *transition_selection_pickers(model)],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_selection,
        ),
        PredicateDefinition(
            id=FeedbackId.TRANSITION_RATE,
            label="Transition: Rate",
            description="If the specified transition rate is active, change style of the bank",
            options=OptionSchema(
                FeedbackId.TRANSITION_RATE.value,
                [stage_picker(model), transition_style_picker(skip_sting=True), rate_picker("Transition Rate")],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_rate,
            learn_fn=learn_rate,
        ),
        PredicateDefinition(
            id=FeedbackId.IN_TRANSITION,
            label="Transition: Active/Running",
            description="If the specified transition is active, change style of the bank",
            options=OptionSchema(FeedbackId.IN_TRANSITION.value, [stage_picker(model)]),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_in_transition,
        ),
    ]


# ============================================================================
# FADE TO BLACK
# ============================================================================

def _evaluate_fade_state(state, opts) -> bool:
    me = get_mix_effect(state, opts.mixeffect)
    if me is None or me.fade_to_black is None:
        return False
    return me.fade_to_black.status == FadeToBlackStatus(opts.state)


def _learn_fade_state(state, opts):
    me = get_mix_effect(state, opts.mixeffect)
    if me is None or me.fade_to_black is None:
        return None
    return {"state": me.fade_to_black.status.value}


def _evaluate_fade_rate(state, opts) -> bool:
    me = get_mix_effect(state, opts.mixeffect)
    return me is not None and me.fade_to_black is not None and me.fade_to_black.rate == opts.rate


def _learn_fade_rate(state, opts):
    me = get_mix_effect(state, opts.mixeffect)
    if me is None or me.fade_to_black is None:
        return None
    return {"rate": me.fade_to_black.rate}


def fade_to_black_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    return [
        PredicateDefinition(
            id=FeedbackId.FADE_TO_BLACK_IS_BLACK,
            label="Fade to black: Active",
            description="If the specified fade to black is active, change style of the bank",
            options=OptionSchema(
                FeedbackId.FADE_TO_BLACK_IS_BLACK.value,
                [stage_picker(model), fade_to_black_state_picker()],
            ),
            hint=STATUS_HINT,
            evaluate_fn=_evaluate_fade_state,
            learn_fn=_learn_fade_state,
        ),
        PredicateDefinition(
            id=FeedbackId.FADE_TO_BLACK_RATE,
            label="Fade to black: Rate",
            description="If the specified fade to black rate matches, change style of the bank",
            options=OptionSchema(FeedbackId.FADE_TO_BLACK_RATE.value, [stage_picker(model), rate_picker("Rate")]),
            hint=STATUS_HINT,
            evaluate_fn=_evaluate_fade_rate,
            learn_fn=_learn_fade_rate,
        ),
    ]
