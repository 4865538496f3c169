"""
Property helpers for validating sorting results.

Public API (stable):
    is_ordered(xs, order=ASCENDING, key=None) -> bool
    first_order_violation_index(xs, order=ASCENDING, key=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    is_stable(before, after, key) -> bool

Notes
-----
- Ordering is non-strict: neighbours that compare equal are always fine.
- Stability cannot be seen from values alone when equal keys are
  indistinguishable. `is_stable` works on items that carry a tie-breaker
  (e.g. (value, tag) pairs sorted by value) and checks that items with
  equal keys kept their input order.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, List, Optional, Sequence

from sortcore.order import Comparison, KeyFn, Order, make_comparator

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
]


def is_ordered(xs: Sequence[Any], order: Any = Order.ASCENDING, key: KeyFn = None) -> bool:
    """Return True iff no neighbour pair in `xs` is out of `order`."""
    return first_order_violation_index(xs, order, key) is None


def first_order_violation_index(
    xs: Sequence[Any], order: Any = Order.ASCENDING, key: KeyFn = None
) -> Optional[int]:
    """
    Return the first index i where xs[i] belongs strictly after xs[i+1], or
    None if `xs` is ordered.

        i = first_order_violation_index(out, Order.DESCENDING)
        assert i is None, f"out of order at i={i}: {out[i]} vs {out[i+1]}"
    """
    compare = make_comparator(order, key)
    for i in range(len(xs) - 1):
        if compare(xs[i], xs[i + 1]) is Comparison.GREATER:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold the same multiset of (hashable) values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in ca.keys() | cb.keys():
        d = ca[k] - cb[k]
        if d != 0:
            diff[k] = d
    return diff


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Raise AssertionError naming the first difference if `after` is not
    element-wise equal to `before`.
    """
    if len(before) != len(after):
        raise AssertionError(f"Input mutated: length changed from {len(before)} to {len(after)}")
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def is_stable(before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Any]) -> bool:
    """
    Return True iff items with equal `key` appear in `after` in the same
    relative order as in `before`.

    Items are matched by identity, so pass the very objects that were
    sorted (tagged tuples or small records work well).
    """
    if len(before) != len(after):
        return False
    position = {id(item): i for i, item in enumerate(before)}
    if len(position) != len(before):
        raise ValueError("is_stable needs distinct objects; tag duplicates first")

    groups: Dict[Any, List[int]] = defaultdict(list)
    for item in after:
        if id(item) not in position:
            return False
        groups[key(item)].append(position[id(item)])
    for positions in groups.values():
        if positions != sorted(positions):
            return False
    return True
