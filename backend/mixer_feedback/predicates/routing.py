"""
Routing predicates: aux outputs, multiviewer windows and media player sources.
"""

from typing import List

from ..capabilities import CapabilityModel
from ..options import OptionSchema
from ..options.pickers import (
    MEDIA_PLAYER_SOURCE_CLIP_OFFSET,
    aux_picker,
    media_player_picker,
    media_player_source_picker,
    multiviewer_picker,
    multiviewer_window_picker,
    source_picker,
)
from ..state import MediaSourceType, get_aux_source, get_media_player, get_multiviewer_window
from .definition import PREVIEW_HINT, SOURCE_HINT, PredicateDefinition
from .ids import FeedbackId


# ============================================================================
# AUX
# ============================================================================

def _evaluate_aux(state, opts) -> bool:
    source = get_aux_source(state, opts.aux)
    return source is not None and source == opts.input


def _learn_aux(state, opts):
    source = get_aux_source(state, opts.aux)
    if source is None:
        return None
    return {"input": source}


def aux_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.auxes:
        return []
    return [
        PredicateDefinition(
            id=FeedbackId.AUX_BG,
            label="Aux/Output: Source",
            description="If the input specified is selected in the aux bus specified, change style of the bank",
            options=OptionSchema(FeedbackId.AUX_BG.value, [aux_picker(model), source_picker(model)]),
            hint=PREVIEW_HINT,
            evaluate_fn=_evaluate_aux,
            learn_fn=_learn_aux,
        )
    ]


# ============================================================================
# MULTIVIEWER
# ============================================================================

def _evaluate_mv_source(state, opts) -> bool:
    window = get_multiviewer_window(state, opts.multiviewer_id, opts.window_index)
    return window is not None and window.source == opts.source


def _learn_mv_source(state, opts):
    window = get_multiviewer_window(state, opts.multiviewer_id, opts.window_index)
    if window is None:
        return None
    return {"source": window.source}


def multiviewer_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.multiviewers or not model.multiviewer_windows:
        return []
    return [
        PredicateDefinition(
            id=FeedbackId.MV_SOURCE,
            label="Multiviewer: Window source",
            description="If the specified MV window is set to the specified source, change style of the bank",
            options=OptionSchema(
                FeedbackId.MV_SOURCE.value,
                [
                    multiviewer_picker(model),
                    multiviewer_window_picker(model),
                    source_picker(model, option_id="source", label="Source"),
                ],
            ),
            hint=SOURCE_HINT,
            evaluate_fn=_evaluate_mv_source,
            learn_fn=_learn_mv_source,
        )
    ]


# ============================================================================
# MEDIA PLAYERS
# ============================================================================

def _media_player_source(player) -> int:
    """Combined source id: still index, or clip index offset into the clip range."""
    if player.source_type == MediaSourceType.CLIP:
        return MEDIA_PLAYER_SOURCE_CLIP_OFFSET + player.clip_index
    if player.source_type == MediaSourceType.STILL:
        return player.still_index
    return -1


def media_player_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.media_players or not (model.stills or model.clips):
        return []

    def evaluate(state, opts) -> bool:
        player = get_media_player(state, opts.media_player)
        return player is not None and _media_player_source(player) == opts.source

    def learn(state, opts):
        player = get_media_player(state, opts.media_player)
        if player is None:
            return None
        if player.source_type == MediaSourceType.STILL and 0 <= player.still_index < model.stills:
            return {"source": player.still_index}
        if player.source_type == MediaSourceType.CLIP and 0 <= player.clip_index < model.clips:
            return {"source": MEDIA_PLAYER_SOURCE_CLIP_OFFSET + player.clip_index}
        return None

    return [
        PredicateDefinition(
            id=FeedbackId.MEDIA_PLAYER_SOURCE,
            label="Media player: Source",
            description="If the specified media player has the specified source, change style of the bank",
            options=OptionSchema(
                FeedbackId.MEDIA_PLAYER_SOURCE.value,
                [media_player_picker(model), media_player_source_picker(model)],
            ),
            hint=PREVIEW_HINT,
            evaluate_fn=evaluate,
            learn_fn=learn,
        )
    ]
