"""
Option field declarations.

An option field is pure data: id, label, kind, default and presentation
bounds. The schema turns a list of fields into a pydantic model that coerces
untyped host values.

Kinds:
- checkbox: boolean
- number: integer
- dropdown: enumerated choice (single, multi-select, or custom-value)
- range: decimal with min/max/step presentation bounds
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Union

ChoiceId = Union[int, str]


class OptionKind(str, Enum):
    CHECKBOX = "checkbox"
    NUMBER = "number"
    DROPDOWN = "dropdown"
    RANGE = "range"


@dataclass(frozen=True)
class Choice:
    id: ChoiceId
    label: str


@dataclass(frozen=True)
class OptionField:
    """
    One typed option of a predicate.

    Attributes:
        id: Key under which the host stores the value
        label: Human-readable label
        kind: Option kind
        default: Value used when the host supplies none
        choices: Enumerated choices (dropdown only)
        multiple: Dropdown accepts a list of choice ids
        allow_custom: Dropdown accepts values outside ``choices``
        value_type: Python type of dropdown values (int or str)
        minimum/maximum/step: Presentation bounds (number and range)
        source_choices: Choice labels come from the snapshot's input names
    """

    id: str
    label: str
    kind: OptionKind
    default: Any
    choices: Tuple[Choice, ...] = ()
    multiple: bool = False
    allow_custom: bool = False
    value_type: type = int
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: Optional[float] = None
    source_choices: bool = False

    @property
    def choice_ids(self) -> Tuple[ChoiceId, ...]:
        return tuple(choice.id for choice in self.choices)


def checkbox(option_id: str, label: str, default: bool = False) -> OptionField:
    return OptionField(id=option_id, label=label, kind=OptionKind.CHECKBOX, default=default)


def number(
    option_id: str,
    label: str,
    default: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> OptionField:
    return OptionField(
        id=option_id,
        label=label,
        kind=OptionKind.NUMBER,
        default=default,
        minimum=minimum,
        maximum=maximum,
        step=1,
    )


def range_field(
    option_id: str,
    label: str,
    default: float,
    minimum: float,
    maximum: float,
    step: float,
) -> OptionField:
    return OptionField(
        id=option_id,
        label=label,
        kind=OptionKind.RANGE,
        default=default,
        minimum=minimum,
        maximum=maximum,
        step=step,
    )


def dropdown(
    option_id: str,
    label: str,
    choices: Iterable[Choice],
    default: Any = None,
    *,
    multiple: bool = False,
    allow_custom: bool = False,
    value_type: type = int,
    source_choices: bool = False,
) -> OptionField:
    """
    Declare a dropdown option.

    When ``default`` is omitted the first choice is used (an empty tuple for
    multi-select dropdowns).
    """
    choices = tuple(choices)
    if default is None:
        if multiple:
            default = ()
        elif choices:
            default = choices[0].id
        else:
            default = value_type()
    return OptionField(
        id=option_id,
        label=label,
        kind=OptionKind.DROPDOWN,
        default=default,
        choices=choices,
        multiple=multiple,
        allow_custom=allow_custom,
        value_type=value_type,
        source_choices=source_choices,
    )
