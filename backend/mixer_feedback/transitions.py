"""
Transition selection calculator.

A stage's next-transition selection is a set of layer ids:
- 0 is the background
- 1..N are the upstream keyers, N bounded by the stage's keyer count

The calculator turns per-layer boolean flags into the canonical ascending
selection and compares it against the device-reported selection.
"""

from enum import Enum
from typing import Any, Iterable, Mapping, Tuple

BACKGROUND_LAYER = 0


class SelectionMatchMethod(str, Enum):
    """How an expected selection is compared to the current one."""

    EXACT = "exact"
    CONTAINS = "contains"
    NOT_CONTAIN = "not-contain"


def keyer_flag_id(layer: int) -> str:
    """Option id of the flag for keyer layer ``layer`` (1-based)."""
    return f"key{layer}"


def calculate_transition_selection(keyer_count: int, flags: Mapping[str, Any]) -> Tuple[int, ...]:
    """
    Build the canonical selection from per-layer flags.

    Args:
        keyer_count: Number of keyers on the stage
        flags: Mapping with ``background`` and ``key1``..``keyN`` truthy values

    Returns:
        Ascending tuple of included layer ids
    """
    selection = []
    if flags.get("background"):
        selection.append(BACKGROUND_LAYER)
    for layer in range(1, keyer_count + 1):
        if flags.get(keyer_flag_id(layer)):
            selection.append(layer)
    return tuple(selection)


def match_selection(
    method: SelectionMatchMethod,
    expected: Iterable[int],
    current: Iterable[int],
) -> bool:
    """
    Compare an expected selection to the current one.

    EXACT is set equality, independent of the order the device reported.
    """
    expected_set = set(expected)
    current_set = set(current)

    if method == SelectionMatchMethod.EXACT:
        return expected_set == current_set
    if method == SelectionMatchMethod.CONTAINS:
        return expected_set <= current_set
    if method == SelectionMatchMethod.NOT_CONTAIN:
        return expected_set.isdisjoint(current_set)
    return False
