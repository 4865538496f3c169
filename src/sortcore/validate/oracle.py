"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth:
- correct total order for any mutually comparable elements
- stable, including with reverse=True (equal elements keep input order)

Public API (stable):
    oracle_sort(a, order=Order.ASCENDING, key=None) -> list
    equals_oracle(a, out, order=Order.ASCENDING, key=None) -> bool

The oracle never mutates its input.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from sortcore.order import KeyFn, Order

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], order: Any = Order.ASCENDING, key: KeyFn = None) -> List[Any]:
    """Return a new list with the elements of `a` in `order`."""
    return sorted(a, key=key, reverse=Order.parse(order) is Order.DESCENDING)


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], order: Any = Order.ASCENDING, key: KeyFn = None
) -> bool:
    """
    True iff `out` is exactly `oracle_sort(a, order, key)`.

    For a stable algorithm this holds even when equal keys are
    distinguishable; for quicksort compare values only.
    """
    return list(out) == oracle_sort(a, order, key)
