"""Tests for the oracle and property helpers."""

from __future__ import annotations

import pytest

from sortcore import Order
from sortcore.validate import (
    assert_no_mutation,
    equals_oracle,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle_directions() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert oracle_sort(a, Order.DESCENDING) == [3, 2, 1]
    assert oracle_sort(a, "desc") == [3, 2, 1]
    assert a == [3, 1, 2]
    assert equals_oracle(a, [3, 2, 1], Order.DESCENDING)
    assert not equals_oracle(a, [1, 2, 3], Order.DESCENDING)


def test_oracle_descending_is_stable() -> None:
    items = [(1, "a"), (2, "b"), (1, "c")]
    assert oracle_sort(items, Order.DESCENDING, key=lambda t: t[0]) == [(2, "b"), (1, "a"), (1, "c")]


def test_ordering_checks() -> None:
    assert is_ordered([])
    assert is_ordered([1, 1, 2])
    assert not is_ordered([2, 1])
    assert is_ordered([3, 3, 1], Order.DESCENDING)
    assert first_order_violation_index([1, 3, 2, 4]) == 1
    assert first_order_violation_index([3, 1, 2], Order.DESCENDING) == 1
    assert first_order_violation_index([5, 4], Order.DESCENDING) is None


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([1, 1], [1, 2])
    assert permutation_counter_diff([1, 1, 3], [1, 2, 3]) == {1: 1, 2: -1}
    assert permutation_counter_diff([1], [1]) == {}


def test_assert_no_mutation() -> None:
    assert_no_mutation([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="index 1"):
        assert_no_mutation([1, 2], [1, 3])
    with pytest.raises(AssertionError, match="length"):
        assert_no_mutation([1, 2], [1])


def test_is_stable() -> None:
    a, b, c = (1, "a"), (1, "b"), (0, "c")
    key = lambda t: t[0]  # noqa: E731
    assert is_stable([a, b, c], [c, a, b], key)
    assert not is_stable([a, b, c], [c, b, a], key)
    assert not is_stable([a, b, c], [c, a], key)
    assert not is_stable([a, b], [a, (1, "z")], key)
    with pytest.raises(ValueError):
        is_stable([a, a], [a, a], key)
