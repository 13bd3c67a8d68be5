"""
Tests for the transition selection calculator.
"""

import pytest

from mixer_feedback.transitions import (
    SelectionMatchMethod,
    calculate_transition_selection,
    keyer_flag_id,
    match_selection,
)


class TestCalculateSelection:
    """Flags -> canonical ascending selection."""

    def test_background_and_first_keyer(self):
        flags = {"background": True, "key1": True, "key2": False}
        assert calculate_transition_selection(2, flags) == (0, 1)

    def test_keyers_beyond_count_are_ignored(self):
        flags = {"background": False, "key1": True, "key3": True}
        assert calculate_transition_selection(2, flags) == (1,)

    def test_empty_selection(self):
        assert calculate_transition_selection(4, {}) == ()

    def test_flag_ids(self):
        assert keyer_flag_id(1) == "key1"
        assert keyer_flag_id(4) == "key4"


class TestMatchSelection:
    """exact / contains / not-contain."""

    def test_exact_is_order_independent(self):
        expected = calculate_transition_selection(2, {"background": True, "key1": True, "key2": False})
        assert match_selection(SelectionMatchMethod.EXACT, expected, (1, 0)) is True

    def test_exact_rejects_superset(self):
        assert match_selection(SelectionMatchMethod.EXACT, (0,), (0, 1)) is False

    @pytest.mark.parametrize(
        "expected,current,result",
        [
            ((0,), (0, 2), True),
            ((0, 1), (0, 2), False),
            ((), (3,), True),
        ],
    )
    def test_contains_is_subset(self, expected, current, result):
        assert match_selection(SelectionMatchMethod.CONTAINS, expected, current) is result

    @pytest.mark.parametrize(
        "expected,current,result",
        [
            ((1, 2), (0, 3), True),
            ((1, 2), (0, 2), False),
        ],
    )
    def test_not_contain_is_disjoint(self, expected, current, result):
        assert match_selection(SelectionMatchMethod.NOT_CONTAIN, expected, current) is result
