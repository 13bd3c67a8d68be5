"""
Capability-gated feedback predicates for multi-stage video mixers.

Usage:
    model = resolve_capabilities(device_record)
    registry = build_registry(model)
    registry.evaluate("program_bg", snapshot, {"mixeffect": 0, "input": 1})
    registry.learn("program_bg", snapshot)
"""

from .capabilities import DEFAULT_PROFILE, CapabilityModel, resolve_capabilities
from .config import FeedbackSettings, configure_logging
from .errors import (
    CapabilityModelError,
    DuplicatePredicateError,
    FeedbackError,
    OptionSchemaError,
    PredicateNotFoundError,
)
from .predicates import FeedbackId, LearnResult, LearnStatus, PredicateDefinition
from .registry import PredicateRegistry, build_registry
from .state import StateSnapshot, coerce_snapshot

__all__ = [
    "DEFAULT_PROFILE",
    "CapabilityModel",
    "resolve_capabilities",
    "FeedbackSettings",
    "configure_logging",
    "CapabilityModelError",
    "DuplicatePredicateError",
    "FeedbackError",
    "OptionSchemaError",
    "PredicateNotFoundError",
    "FeedbackId",
    "LearnResult",
    "LearnStatus",
    "PredicateDefinition",
    "PredicateRegistry",
    "build_registry",
    "StateSnapshot",
    "coerce_snapshot",
]
