"""
Quicksort with the Lomuto partition scheme and a last-element pivot.

The pivot is always seq[high]. Already-sorted, reverse-sorted and all-equal
inputs therefore take O(n^2) comparisons; this is kept on purpose so the
benchmark numbers show the textbook behaviour. Quicksort is not stable.

Recursion goes into the smaller partition only and the larger one is handled
by the loop, which bounds stack depth to O(log n) even on the quadratic
inputs. The resulting order is the same as the plain double recursion.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, MutableSequence, Optional

from sortcore.order import Comparator, Comparison, KeyFn, Order, make_comparator, swap

from ._common import check_range, order_from_config

__all__ = ["quicksort", "partition", "sort_all", "sort"]

logger = logging.getLogger(__name__)


def quicksort(
    seq: MutableSequence[Any],
    low: int,
    high: int,
    order: Order = Order.ASCENDING,
    *,
    key: KeyFn = None,
) -> None:
    """
    Sort seq[low..high] (inclusive) in place.

    Raises InvalidInputError if the range does not fit inside `seq`.
    """
    check_range(seq, low, high)
    _quicksort(seq, low, high, make_comparator(order, key))


def partition(seq: MutableSequence[Any], low: int, high: int, compare: Comparator) -> int:
    """
    Partition seq[low..high] around the pivot seq[high].

    On return every element left of the returned index does not come after
    the pivot in the requested order, every element right of it does not come
    before it, and the pivot sits at its final sorted position.
    """
    pivot = seq[high]
    i = low - 1
    for j in range(low, high):
        if compare(seq[j], pivot) is not Comparison.GREATER:
            i += 1
            swap(seq, i, j)
    swap(seq, i + 1, high)
    return i + 1


def _quicksort(seq: MutableSequence[Any], low: int, high: int, compare: Comparator) -> None:
    while low < high:
        p = partition(seq, low, high, compare)
        if p - low < high - p:
            _quicksort(seq, low, p - 1, compare)
            low = p + 1
        else:
            _quicksort(seq, p + 1, high, compare)
            high = p - 1


def sort_all(seq: MutableSequence[Any], order: Order = Order.ASCENDING, key: KeyFn = None) -> None:
    """Sort the whole of `seq` in place."""
    logger.debug("quicksort n=%d order=%s", len(seq), Order.parse(order).value)
    _quicksort(seq, 0, len(seq) - 1, make_comparator(order, key))


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Harness entry point: return a new list sorted with quicksort.

    config keys:
        order: "ascending" (default) or "descending"
    """
    out = list(a)
    sort_all(out, order_from_config(config))
    return out
