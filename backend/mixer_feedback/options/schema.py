"""
Option schema: ordered option fields plus the pydantic model that coerces
untyped host values into typed predicate options.

The coercion model is built lazily on first use and never changes afterwards.
Coercion failure is not an error: it yields None and the predicate reports
"no match".
"""

import logging
from functools import cached_property
from typing import Annotated, Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Type

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    FiniteFloat,
    ValidationError,
    create_model,
)

from ..errors import OptionSchemaError
from .fields import OptionField, OptionKind

logger = logging.getLogger(__name__)


def _member_of(field: OptionField):
    allowed = frozenset(field.choice_ids)

    def check(value):
        if value not in allowed:
            raise ValueError(f"{value!r} is not a valid choice for '{field.id}'")
        return value

    return check


def _int_to_str(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _annotation_for(field: OptionField) -> Any:
    """Python type annotation used to coerce one option value."""
    if field.kind == OptionKind.CHECKBOX:
        return bool
    if field.kind == OptionKind.NUMBER:
        return int
    if field.kind == OptionKind.RANGE:
        # None is kept so that an undefined target never matches
        return Optional[FiniteFloat]

    item: Any = field.value_type
    if field.value_type is str:
        item = Annotated[str, BeforeValidator(_int_to_str)]
    if not field.allow_custom:
        item = Annotated[item, AfterValidator(_member_of(field))]
    if field.multiple:
        return Tuple[item, ...]
    return item


class OptionSchema:
    """
    Ordered, immutable list of option fields for one predicate.

    Raises:
        OptionSchemaError: If two fields share an id
    """

    def __init__(self, name: str, fields: Iterable[Optional[OptionField]]):
        self.name = name
        # Optional pickers (e.g. the compositor id on single-compositor
        # devices) are declared as None and dropped here
        self._fields: Tuple[OptionField, ...] = tuple(f for f in fields if f is not None)

        seen = set()
        for field in self._fields:
            if field.id in seen:
                raise OptionSchemaError(field.id, f"duplicate option id in schema '{name}'")
            seen.add(field.id)

    def __iter__(self) -> Iterator[OptionField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, option_id: object) -> bool:
        return any(field.id == option_id for field in self._fields)

    @property
    def fields(self) -> Tuple[OptionField, ...]:
        return self._fields

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(field.id for field in self._fields)

    def defaults(self) -> Dict[str, Any]:
        """Default value of every option."""
        return {field.id: field.default for field in self._fields}

    @cached_property
    def model(self) -> Type[BaseModel]:
        """
        Typed option model for this schema.

        Raises:
            OptionSchemaError: If a declared default does not validate
        """
        definitions = {
            field.id: (_annotation_for(field), field.default)
            for field in self._fields
        }
        model = create_model(
            f"{self.name}Options",
            __config__=ConfigDict(extra="ignore", frozen=True),
            **definitions,
        )
        try:
            model.model_validate(self.defaults())
        except ValidationError as e:
            raise OptionSchemaError(self.name, f"invalid default: {e}") from e
        return model

    def coerce(self, raw: Optional[Mapping[str, Any]]) -> Optional[BaseModel]:
        """
        Coerce untyped host values.

        Missing options take their default. Unknown keys are ignored.

        Returns:
            Typed options, or None if any value cannot be coerced
        """
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            logger.debug(f"Rejecting non-mapping options for '{self.name}': {type(raw).__name__}")
            return None
        try:
            return self.model.model_validate(dict(raw))
        except ValidationError as e:
            logger.debug(f"Rejecting options for '{self.name}': {e.error_count()} invalid value(s)")
            return None

    def describe(self, source_labels: Optional[Mapping[int, str]] = None) -> List[Dict[str, Any]]:
        """
        Host-facing description of every option.

        Args:
            source_labels: Input id -> display name, used for source pickers
        """
        described = []
        for field in self._fields:
            entry: Dict[str, Any] = {
                "id": field.id,
                "label": field.label,
                "type": field.kind.value,
                "default": list(field.default) if field.multiple else field.default,
            }
            if field.kind == OptionKind.DROPDOWN:
                choices = []
                for choice in field.choices:
                    label = choice.label
                    if field.source_choices and source_labels and choice.id in source_labels:
                        label = source_labels[choice.id]
                    choices.append({"id": choice.id, "label": label})
                entry["choices"] = choices
                entry["multiple"] = field.multiple
                entry["allow_custom"] = field.allow_custom
            if field.kind in (OptionKind.NUMBER, OptionKind.RANGE):
                entry["min"] = field.minimum
                entry["max"] = field.maximum
                entry["step"] = field.step
            described.append(entry)
        return described
