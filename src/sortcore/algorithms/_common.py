"""Helpers shared by the algorithm modules."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Dict, Optional

from sortcore.errors import InvalidInputError
from sortcore.order import Order


def check_mutable_sequence(seq: Any) -> None:
    """In-place sorters need a mutable sequence; strings and tuples are rejected."""
    if not isinstance(seq, MutableSequence):
        raise InvalidInputError(
            f"expected a mutable sequence to sort in place; got {type(seq).__name__}"
        )


def check_range(seq: MutableSequence[Any], low: int, high: int) -> None:
    """
    Validate an inclusive index range [low, high] against `seq`.

    An empty range is written as high == low - 1 (e.g. [0, -1] for an empty
    sequence).
    """
    check_mutable_sequence(seq)
    if isinstance(low, bool) or not isinstance(low, int):
        raise InvalidInputError(f"low must be an int; got {low!r}")
    if isinstance(high, bool) or not isinstance(high, int):
        raise InvalidInputError(f"high must be an int; got {high!r}")
    n = len(seq)
    if low < 0 or high >= n or low > high + 1:
        raise InvalidInputError(
            f"range [{low}, {high}] out of bounds for sequence of length {n}"
        )


def order_from_config(config: Optional[Dict[str, Any]]) -> Order:
    if not config:
        return Order.ASCENDING
    if not isinstance(config, dict):
        raise InvalidInputError("config must be a dict if provided")
    return Order.parse(config.get("order", Order.ASCENDING))
