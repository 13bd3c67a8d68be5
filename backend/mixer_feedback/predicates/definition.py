"""
Predicate definitions.

A PredicateDefinition bundles an option schema, an evaluate function, an
optional learn function and a presentation hint. The wrapped functions take
the snapshot explicitly and never touch ambient state.

Boundary rules:
- evaluate never raises for plausibly-noisy input: a malformed snapshot or
  option value is "no match"
- learn returns LEARNED with a full option set that re-matches the snapshot,
  or UNSUPPORTED; never a wrong answer
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..options import OptionSchema
from ..state import StateSnapshot, coerce_snapshot
from .ids import FeedbackId

logger = logging.getLogger(__name__)

SnapshotInput = Union[StateSnapshot, Mapping[str, Any]]
EvaluateFn = Callable[[StateSnapshot, Any], bool]
LearnFn = Callable[[StateSnapshot, Any], Optional[Dict[str, Any]]]


# ============================================================================
# PRESENTATION
# ============================================================================

@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Packed 0xRRGGBB value."""
        return (self.r << 16) | (self.g << 8) | self.b


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
YELLOW = Color(255, 255, 0)
AMBER = Color(238, 238, 0)


@dataclass(frozen=True)
class PresentationHint:
    """Style the host applies while a predicate is true."""

    color: Color
    bgcolor: Color

    def to_dict(self) -> Dict[str, int]:
        return {"color": self.color.to_int(), "bgcolor": self.bgcolor.to_int()}


ON_AIR_HINT = PresentationHint(WHITE, RED)
PREVIEW_HINT = PresentationHint(BLACK, GREEN)
STATUS_HINT = PresentationHint(BLACK, YELLOW)
SOURCE_HINT = PresentationHint(BLACK, AMBER)
MACRO_HINT = PresentationHint(WHITE, AMBER)


# ============================================================================
# LEARN OUTCOME
# ============================================================================

class LearnStatus(str, Enum):
    LEARNED = "learned"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class LearnResult:
    """Outcome of reverse inference from the current snapshot."""

    status: LearnStatus
    options: Optional[Dict[str, Any]] = None
    reason: str = ""

    @property
    def supported(self) -> bool:
        return self.status == LearnStatus.LEARNED

    @classmethod
    def learned(cls, options: Dict[str, Any]) -> "LearnResult":
        return cls(status=LearnStatus.LEARNED, options=options)

    @classmethod
    def unsupported(cls, reason: str) -> "LearnResult":
        return cls(status=LearnStatus.UNSUPPORTED, reason=reason)


# ============================================================================
# DEFINITION
# ============================================================================

@dataclass(frozen=True, eq=False)
class PredicateDefinition:
    """
    One named, option-parameterized boolean test over a snapshot.

    Attributes:
        id: Stable predicate id
        label: Short display text
        description: Longer display text
        options: Option schema
        hint: Presentation hint
        evaluate_fn: (snapshot, typed options) -> bool
        learn_fn: (snapshot, typed options) -> learned values or None
    """

    id: FeedbackId
    label: str
    description: str
    options: OptionSchema
    hint: PresentationHint
    evaluate_fn: EvaluateFn
    learn_fn: Optional[LearnFn] = field(default=None)

    @property
    def learnable(self) -> bool:
        return self.learn_fn is not None

    def evaluate(self, snapshot: SnapshotInput, options: Optional[Mapping[str, Any]] = None) -> bool:
        """True if the snapshot satisfies this predicate for the given options."""
        state = coerce_snapshot(snapshot)
        if state is None:
            return False
        typed = self.options.coerce(options)
        if typed is None:
            return False
        return bool(self.evaluate_fn(state, typed))

    def learn(self, snapshot: SnapshotInput, options: Optional[Mapping[str, Any]] = None) -> LearnResult:
        """
        Derive option values that make this predicate true for the snapshot.

        Options not touched by the inference keep their current (coerced)
        values, so the result is a complete option set.
        """
        if self.learn_fn is None:
            return LearnResult.unsupported(f"'{self.id.value}' does not support learn")

        state = coerce_snapshot(snapshot)
        if state is None:
            return LearnResult.unsupported("malformed snapshot")
        typed = self.options.coerce(options)
        if typed is None:
            return LearnResult.unsupported("invalid option values")

        learned = self.learn_fn(state, typed)
        if learned is None:
            logger.debug(f"Learn unsupported for '{self.id.value}': required state is missing")
            return LearnResult.unsupported("required state is missing from the snapshot")

        merged: Dict[str, Any] = dict(options or {})
        merged.update(typed.model_dump())
        merged.update(learned)
        return LearnResult.learned(merged)

    def describe(self, source_labels: Optional[Mapping[int, str]] = None) -> Dict[str, Any]:
        """Host-facing description of this predicate."""
        return {
            "id": self.id.value,
            "label": self.label,
            "description": self.description,
            "options": self.options.describe(source_labels),
            "style": self.hint.to_dict(),
            "learnable": self.learnable,
        }
