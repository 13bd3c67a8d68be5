"""
Quantized numeric comparators.

Device-reported analog values (box geometry, crop, art clip/gain, audio
levels) live in a scaled integer domain and carry encoding noise. Options are
expressed as user-facing decimals. These helpers bridge the two.

Rules:
- An undefined or non-numeric target never matches (it is NOT treated as zero)
- Rounding is round-to-nearest, ties away from zero
- NumberComparitor applies no tolerance beyond the caller's explicit rounding
"""

import math
from enum import Enum
from typing import Any, Optional, Union

Number = Union[int, float]


class NumberComparitor(str, Enum):
    """Ordered comparison applied as ``actual <op> target``."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    LESS_THAN_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_THAN_EQUAL = "gte"

    @property
    def is_inclusive(self) -> bool:
        """True if equal values satisfy this comparison."""
        return self in (
            NumberComparitor.EQUAL,
            NumberComparitor.LESS_THAN_EQUAL,
            NumberComparitor.GREATER_THAN_EQUAL,
        )


def to_number(value: Any) -> Optional[float]:
    """
    Coerce an untyped option value to a finite number.

    Returns:
        The number, or None for None, booleans, non-numeric strings,
        NaN and infinities
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def quantize(actual: Number, quantum: Number) -> Number:
    """
    Round ``actual`` to the nearest multiple of ``quantum``.

    A zero quantum leaves the value untouched.
    """
    if not quantum:
        return actual
    step = abs(quantum)
    multiple = round_half_away(actual / step) * step
    if isinstance(actual, int) and isinstance(step, int):
        return int(multiple)
    return multiple


def compare_as_int(
    target: Any,
    actual: Optional[Number],
    scale: Number,
    rounding: Number = 1,
) -> bool:
    """
    Compare a decimal option against a device integer value.

    The target is multiplied by ``scale`` and rounded into the device's
    integer domain. When ``rounding`` is non-zero the actual value is first
    quantized to the nearest multiple of it.

    Args:
        target: Untyped option value (user-facing units)
        actual: Device-reported value (scaled integer units)
        scale: Factor from option units to device units
        rounding: Quantum absorbing device jitter (0 disables)

    Returns:
        True only if both values are defined and equal after scaling
    """
    target_value = to_number(target)
    if target_value is None or actual is None:
        return False
    scaled = target_value * scale
    if not math.isfinite(scaled):
        return False
    if rounding:
        actual = quantize(actual, rounding)
    return round_half_away(scaled) == actual


def compare_number(target: Any, comparitor: Any, actual: Optional[Number]) -> bool:
    """
    Compare ``actual`` against ``target`` with the given comparitor.

    Unknown comparitors compare for equality. A non-numeric target or a
    missing actual value never matches.
    """
    target_value = to_number(target)
    if target_value is None or actual is None:
        return False

    try:
        op = NumberComparitor(comparitor)
    except ValueError:
        op = NumberComparitor.EQUAL

    if op == NumberComparitor.GREATER_THAN:
        return actual > target_value
    if op == NumberComparitor.GREATER_THAN_EQUAL:
        return actual >= target_value
    if op == NumberComparitor.LESS_THAN:
        return actual < target_value
    if op == NumberComparitor.LESS_THAN_EQUAL:
        return actual <= target_value
    if op == NumberComparitor.NOT_EQUAL:
        return actual != target_value
    return actual == target_value
