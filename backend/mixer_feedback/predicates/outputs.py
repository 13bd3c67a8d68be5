"""
Streaming and recording status predicates.
"""

from enum import IntEnum
from typing import List, Type

from ..capabilities import CapabilityModel
from ..options import Choice, OptionSchema, dropdown
from ..state import RecordingStatus, StreamingStatus
from .definition import PREVIEW_HINT, PredicateDefinition
from .ids import FeedbackId


def _status_predicate(
    feedback_id: FeedbackId,
    output: str,
    statuses: Type[IntEnum],
    default: IntEnum,
) -> PredicateDefinition:
    known = frozenset(status.value for status in statuses)
    option = dropdown(
        "state",
        "State",
        [Choice(status.value, status.name.capitalize()) for status in statuses],
        default.value,
    )

    def current_state(state):
        node = getattr(state, output)
        if node is None or node.status is None:
            return None
        return node.status.state

    def evaluate(state, opts) -> bool:
        current = current_state(state)
        return current is not None and current == opts.state

    def learn(state, opts):
        current = current_state(state)
        if current is None or current not in known:
            return None
        return {"state": current}

    noun = "stream" if output == "streaming" else "record"
    return PredicateDefinition(
        id=feedback_id,
        label=f"{output.capitalize()}: Active/Running",
        description=f"If the {noun} has the specified status, change style of the bank",
        options=OptionSchema(feedback_id.value, [option]),
        hint=PREVIEW_HINT,
        evaluate_fn=evaluate,
        learn_fn=learn,
    )


def output_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    predicates = []
    if model.streaming:
        predicates.append(
            _status_predicate(FeedbackId.STREAM_STATUS, "streaming", StreamingStatus, StreamingStatus.STREAMING)
        )
    if model.recording:
        predicates.append(
            _status_predicate(FeedbackId.RECORD_STATUS, "recording", RecordingStatus, RecordingStatus.RECORDING)
        )
    return predicates
