"""
Top-down merge sort over an inclusive index range.

Each merge copies the two sorted halves into temporary buffers and writes
them back into seq[left..right]. On ties the left buffer wins, which keeps
the sort stable. O(n log n) time in every case, O(n) auxiliary space for
the buffers of a single merge.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, MutableSequence, Optional

from sortcore.order import Comparator, Comparison, KeyFn, Order, make_comparator

from ._common import check_range, order_from_config

__all__ = ["mergesort", "merge", "sort_all", "sort"]

logger = logging.getLogger(__name__)


def mergesort(
    seq: MutableSequence[Any],
    left: int,
    right: int,
    order: Order = Order.ASCENDING,
    *,
    key: KeyFn = None,
) -> None:
    """
    Sort seq[left..right] (inclusive) in place.

    Raises InvalidInputError if the range does not fit inside `seq`.
    """
    check_range(seq, left, right)
    _mergesort(seq, left, right, make_comparator(order, key))


def _mergesort(seq: MutableSequence[Any], left: int, right: int, compare: Comparator) -> None:
    if left >= right:
        return
    middle = (left + right) // 2
    _mergesort(seq, left, middle, compare)
    _mergesort(seq, middle + 1, right, compare)
    merge(seq, left, middle, right, compare)


def merge(
    seq: MutableSequence[Any], left: int, middle: int, right: int, compare: Comparator
) -> None:
    """Merge the sorted runs seq[left..middle] and seq[middle+1..right]."""
    left_buf = list(seq[left : middle + 1])
    right_buf = list(seq[middle + 1 : right + 1])
    n1, n2 = len(left_buf), len(right_buf)

    i = j = 0
    k = left
    while i < n1 and j < n2:
        # Stable: equal elements come from the left run first
        if compare(left_buf[i], right_buf[j]) is not Comparison.GREATER:
            seq[k] = left_buf[i]
            i += 1
        else:
            seq[k] = right_buf[j]
            j += 1
        k += 1

    while i < n1:
        seq[k] = left_buf[i]
        i += 1
        k += 1
    while j < n2:
        seq[k] = right_buf[j]
        j += 1
        k += 1


def sort_all(seq: MutableSequence[Any], order: Order = Order.ASCENDING, key: KeyFn = None) -> None:
    """Sort the whole of `seq` in place."""
    logger.debug("mergesort n=%d order=%s", len(seq), Order.parse(order).value)
    _mergesort(seq, 0, len(seq) - 1, make_comparator(order, key))


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Harness entry point: return a new list sorted with merge sort.

    config keys:
        order: "ascending" (default) or "descending"
    """
    out = list(a)
    sort_all(out, order_from_config(config))
    return out
