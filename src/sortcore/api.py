"""
Functional front door to the sorting algorithms.

    sort(sequence, order=Order.ASCENDING, algorithm=Algorithm.QUICK, *, key=None) -> list

`sort` never mutates its argument: it validates the input, copies it into a
fresh list and runs the selected in-place algorithm on the copy. Quicksort is
the documented default; any other selector must name a known algorithm.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List

from .algorithms import Algorithm, get_sorter
from .errors import InvalidInputError
from .order import KeyFn, Order

__all__ = ["sort", "validate_sequence"]


def validate_sequence(sequence: Any, key: KeyFn = None) -> None:
    """
    Check that `sequence` is a sequence of mutually comparable elements.

    Strings and bytes are rejected even though they are sequences; sorting
    them character-wise is almost never what a caller meant.

    Raises
    ------
    InvalidInputError
    """
    if isinstance(sequence, (str, bytes, bytearray)) or not isinstance(sequence, Sequence):
        raise InvalidInputError(
            f"expected a sequence of comparable elements; got {type(sequence).__name__}"
        )
    if len(sequence) == 0:
        return
    first = _extract(sequence, 0, key)
    for idx in range(1, len(sequence)):
        item = _extract(sequence, idx, key)
        try:
            _ = (item < first, first < item)
        except TypeError as e:
            raise InvalidInputError(
                f"element at index {idx} ({type(item).__name__}) is not comparable "
                f"with element at index 0 ({type(first).__name__})"
            ) from e


def _extract(sequence: Sequence[Any], idx: int, key: KeyFn) -> Any:
    if key is None:
        return sequence[idx]
    try:
        return key(sequence[idx])
    except TypeError as e:
        raise InvalidInputError(f"key function failed on element at index {idx}: {e}") from e


def sort(
    sequence: Sequence[Any],
    order: Any = Order.ASCENDING,
    algorithm: Any = Algorithm.QUICK,
    *,
    key: KeyFn = None,
) -> List[Any]:
    """
    Return a new list with the elements of `sequence` in the requested order.

    Parameters
    ----------
    sequence : Sequence
        Elements of one comparable type. Not mutated.
    order : Order | str | bool
        Direction; see `Order.parse`.
    algorithm : Algorithm | str
        "quick" (default), "merge" or "insertion". Merge and insertion sort
        are stable; quicksort is not.
    key : callable, optional
        Extracts the comparison key from each element, like `sorted(key=...)`.

    Raises
    ------
    InvalidInputError
        If `sequence` is not a sequence of mutually comparable elements.
    UnsupportedAlgorithmError
        If `algorithm` does not name a known algorithm.
    """
    order = Order.parse(order)
    sorter = get_sorter(Algorithm.parse(algorithm))
    validate_sequence(sequence, key)

    out = list(sequence)
    try:
        sorter(out, order, key)
    except TypeError as e:
        # Mixed types that slipped past the pairwise check against index 0
        raise InvalidInputError(f"elements are not mutually comparable: {e}") from e
    return out
