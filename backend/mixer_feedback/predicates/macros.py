"""
Macro player/recorder predicates.

Macro numbers are 1-based in options and 0-based in the snapshot.
"""

from typing import List

from ..capabilities import CapabilityModel
from ..options import OptionSchema, checkbox
from ..options.pickers import MACRO_STATE_RECORDING, MACRO_STATE_USED, macro_picker, macro_state_picker
from ..state import MacroPlayerStatus
from .definition import MACRO_HINT, PredicateDefinition
from .ids import FeedbackId

_PLAYER_STATES = (MacroPlayerStatus.RUNNING, MacroPlayerStatus.WAITING)


def _evaluate_macro(state, opts) -> bool:
    if state.macro is None:
        return False
    index = opts.macro_index - 1
    player = state.macro.player
    recorder = state.macro.recorder

    if opts.state == MACRO_STATE_RECORDING:
        return recorder.is_recording and recorder.macro_index == index
    if opts.state == MACRO_STATE_USED:
        props = state.macro.macros.get(index)
        return props is not None and props.is_used
    return player.status.value == opts.state and player.macro_index == index


def _evaluate_loop(state, opts) -> bool:
    return state.macro is not None and state.macro.player.loop == opts.loop


def macro_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.macros:
        return []

    def learn_macro(state, opts):
        if state.macro is None:
            return None
        player = state.macro.player
        recorder = state.macro.recorder
        if player.status in _PLAYER_STATES:
            index, learned_state = player.macro_index, player.status.value
        elif recorder.is_recording:
            index, learned_state = recorder.macro_index, MACRO_STATE_RECORDING
        else:
            return None
        if not 0 <= index < model.macros:
            return None
        return {"macro_index": index + 1, "state": learned_state}

    def learn_loop(state, opts):
        if state.macro is None:
            return None
        return {"loop": state.macro.player.loop}

    return [
        PredicateDefinition(
            id=FeedbackId.MACRO,
            label="Macro: State",
            description="If the specified macro is running or waiting, change style of the bank",
            options=OptionSchema(FeedbackId.MACRO.value, [macro_picker(model), macro_state_picker()]),
            hint=MACRO_HINT,
            evaluate_fn=_evaluate_macro,
            learn_fn=learn_macro,
        ),
        PredicateDefinition(
            id=FeedbackId.MACRO_LOOP,
            label="Macro: Looping",
            description="If the macro player loop is in the specified state, change style of the bank",
            options=OptionSchema(FeedbackId.MACRO_LOOP.value, [checkbox("loop", "Looping", True)]),
            hint=MACRO_HINT,
            evaluate_fn=_evaluate_loop,
            learn_fn=learn_loop,
        ),
    ]
