"""
Insertion sort.

Stable because an element is only shifted past predecessors that come
strictly after it. O(n) on already-ordered input, O(n^2) otherwise; meant
for small inputs. The library never picks it automatically.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, MutableSequence, Optional

from sortcore.order import Comparison, KeyFn, Order, make_comparator

from ._common import check_mutable_sequence, order_from_config

__all__ = ["insertionsort", "sort_all", "sort"]

logger = logging.getLogger(__name__)


def insertionsort(
    seq: MutableSequence[Any], order: Order = Order.ASCENDING, *, key: KeyFn = None
) -> None:
    """Sort the whole of `seq` in place."""
    check_mutable_sequence(seq)
    compare = make_comparator(order, key)
    for i in range(1, len(seq)):
        held = seq[i]
        j = i - 1
        while j >= 0 and compare(seq[j], held) is Comparison.GREATER:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = held


def sort_all(seq: MutableSequence[Any], order: Order = Order.ASCENDING, key: KeyFn = None) -> None:
    logger.debug("insertionsort n=%d order=%s", len(seq), Order.parse(order).value)
    insertionsort(seq, order, key=key)


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Harness entry point: return a new list sorted with insertion sort.

    config keys:
        order: "ascending" (default) or "descending"
    """
    out = list(a)
    sort_all(out, order_from_config(config))
    return out
