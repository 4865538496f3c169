"""
Order direction and the comparison predicate derived from it.

Every algorithm in this package compares elements through a single function
built once by `make_comparator`. Ascending and descending differ only in the
sense of that function, so the algorithms never branch on direction.

Public API (stable):
    Order, Comparison
    make_comparator(order, key=None) -> Callable[[T, T], Comparison]
    swap(seq, i, j) -> None
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableSequence, Optional, TypeVar

from .errors import InvalidInputError

T = TypeVar("T")

KeyFn = Optional[Callable[[Any], Any]]
Comparator = Callable[[Any, Any], "Comparison"]

__all__ = ["Order", "Comparison", "Comparator", "make_comparator", "swap"]


class Order(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: Any) -> "Order":
        """
        Coerce `value` into an Order.

        Accepts an Order, "ascending"/"descending", "asc"/"desc" (any case),
        or a bool where True means ascending.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ASCENDING if value else cls.DESCENDING
        if isinstance(value, str):
            text = value.strip().lower()
            if text in ("ascending", "asc"):
                return cls.ASCENDING
            if text in ("descending", "desc"):
                return cls.DESCENDING
        raise InvalidInputError(
            f"Unknown order direction: {value!r}. Use 'ascending' or 'descending'"
        )


class Comparison(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def make_comparator(order: Order, key: KeyFn = None) -> Comparator:
    """
    Build the comparison predicate for `order`.

    The returned function answers "where does `a` sit relative to `b` in the
    requested order": LESS means `a` belongs strictly before `b`, GREATER
    strictly after, EQUAL means either placement is correct.
    Only `<` is used on the (key-extracted) elements.
    """
    order = Order.parse(order)

    def natural(a: Any, b: Any) -> Comparison:
        if key is not None:
            a, b = key(a), key(b)
        if a < b:
            return Comparison.LESS
        if b < a:
            return Comparison.GREATER
        return Comparison.EQUAL

    if order is Order.ASCENDING:
        return natural

    def reverse(a: Any, b: Any) -> Comparison:
        return natural(b, a)

    return reverse


def swap(seq: MutableSequence[T], i: int, j: int) -> None:
    """Exchange the elements at positions i and j."""
    seq[i], seq[j] = seq[j], seq[i]
