"""
Predicate registry and factory.

build_registry() is a pure function of the CapabilityModel: the same model
always yields the same ids in the same order, independent of any snapshot.
A capability change requires a fresh registry.

Design rules:
- Gated-out predicates are absent
- Unknown ids raise PredicateNotFoundError; callers consult ids() first
- A malformed capability model fails fast, no partial registry is built
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError

from .capabilities import CapabilityModel
from .errors import CapabilityModelError, DuplicatePredicateError, PredicateNotFoundError
from .predicates import SUBSYSTEM_BUILDERS, FeedbackId, LearnResult, PredicateDefinition
from .predicates.definition import SnapshotInput
from .state import coerce_snapshot

logger = logging.getLogger(__name__)

PredicateKey = Union[FeedbackId, str]


def _key(predicate_id: PredicateKey) -> str:
    if isinstance(predicate_id, FeedbackId):
        return predicate_id.value
    return str(predicate_id)


class PredicateRegistry:
    """
    Immutable set of predicate definitions built for one capability model.

    Provides:
    - Id listing and lookup
    - evaluate / learn by id
    - Host-facing description of every predicate
    """

    def __init__(self, model: CapabilityModel, definitions: List[PredicateDefinition]):
        self._model = model
        self._definitions: Dict[str, PredicateDefinition] = {}
        for definition in definitions:
            key = definition.id.value
            if key in self._definitions:
                raise DuplicatePredicateError(key)
            self._definitions[key] = definition

    @property
    def model(self) -> CapabilityModel:
        return self._model

    def ids(self) -> List[str]:
        """Predicate ids in assembly order."""
        return list(self._definitions)

    def get(self, predicate_id: PredicateKey) -> PredicateDefinition:
        """
        Get a definition by id.

        Raises:
            PredicateNotFoundError: If the id is not present for this model
        """
        definition = self._definitions.get(_key(predicate_id))
        if definition is None:
            raise PredicateNotFoundError(_key(predicate_id))
        return definition

    def __contains__(self, predicate_id: object) -> bool:
        if not isinstance(predicate_id, str):
            return False
        return _key(predicate_id) in self._definitions

    def __iter__(self) -> Iterator[PredicateDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def evaluate(
        self,
        predicate_id: PredicateKey,
        snapshot: SnapshotInput,
        options: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        return self.get(predicate_id).evaluate(snapshot, options)

    def learn(
        self,
        predicate_id: PredicateKey,
        snapshot: SnapshotInput,
        options: Optional[Mapping[str, Any]] = None,
    ) -> LearnResult:
        return self.get(predicate_id).learn(snapshot, options)

    def describe(self, snapshot: Optional[SnapshotInput] = None) -> List[Dict[str, Any]]:
        """
        Describe every predicate for the host.

        Args:
            snapshot: Optional snapshot whose input names label source choices

        Returns:
            List of predicate description dicts in id order
        """
        source_labels: Dict[int, str] = {}
        state = coerce_snapshot(snapshot) if snapshot is not None else None
        if state is not None:
            source_labels = {
                input_id: props.long_name
                for input_id, props in state.inputs.items()
                if props.long_name
            }
        return [definition.describe(source_labels) for definition in self]


def build_registry(model: Union[CapabilityModel, Mapping[str, Any]]) -> PredicateRegistry:
    """
    Build the predicate registry for a capability model.

    Args:
        model: CapabilityModel, or a mapping of its fields

    Returns:
        A new PredicateRegistry

    Raises:
        CapabilityModelError: If the model is malformed
        DuplicatePredicateError: If two subsystems emit the same id
    """
    try:
        if isinstance(model, CapabilityModel):
            # Re-validate: model_construct() and model_copy(update=...) bypass validation
            validated = CapabilityModel.model_validate(model.model_dump())
        elif isinstance(model, Mapping):
            validated = CapabilityModel.model_validate(dict(model))
        else:
            raise CapabilityModelError(f"expected CapabilityModel or mapping, got {type(model).__name__}")
    except ValidationError as e:
        raise CapabilityModelError(f"{e.error_count()} invalid field(s): {e}") from e

    definitions: List[PredicateDefinition] = []
    for builder in SUBSYSTEM_BUILDERS:
        definitions.extend(builder(validated))

    registry = PredicateRegistry(validated, definitions)
    logger.info(f"Built predicate registry for '{validated.label}': {len(registry)} predicates")
    return registry
