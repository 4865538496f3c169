"""
Algorithm registry.

Each algorithm lives in its own module exposing:
    - a documented in-place mutator (quicksort / mergesort / insertionsort)
    - sort_all(seq, order, key)       # in place, whole sequence
    - sort(a, *, config=None) -> list # harness entry point, returns a new list

Callers select an algorithm through the `Algorithm` enum:
    from sortcore.algorithms import Algorithm, get_sorter
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, MutableSequence

from sortcore.errors import UnsupportedAlgorithmError
from sortcore.order import KeyFn, Order

from . import insertion, merge, quick
from .insertion import insertionsort
from .merge import mergesort
from .quick import quicksort

InPlaceSorter = Callable[[MutableSequence[Any], Order, KeyFn], None]

__all__ = [
    "Algorithm",
    "InPlaceSorter",
    "get_sorter",
    "get_module",
    "quicksort",
    "mergesort",
    "insertionsort",
]


class Algorithm(str, Enum):
    QUICK = "quick"
    MERGE = "merge"
    INSERTION = "insertion"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def stable(self) -> bool:
        return self is not Algorithm.QUICK

    @classmethod
    def parse(cls, value: Any) -> "Algorithm":
        """Coerce `value` into an Algorithm; unknown selectors are an error."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for alg in cls:
                if text in (alg.value, f"{alg.value}sort", f"{alg.value}_sort"):
                    return alg
        raise UnsupportedAlgorithmError(value, [a.value for a in cls])


_DISPLAY_NAMES = {
    Algorithm.QUICK: "Quick Sort",
    Algorithm.MERGE: "Merge Sort",
    Algorithm.INSERTION: "Insertion Sort",
}

_MODULES: Dict[Algorithm, Any] = {
    Algorithm.QUICK: quick,
    Algorithm.MERGE: merge,
    Algorithm.INSERTION: insertion,
}


def get_module(algorithm: Any) -> Any:
    """Return the module implementing `algorithm` (has `sort(a, *, config=None)`)."""
    return _MODULES[Algorithm.parse(algorithm)]


def get_sorter(algorithm: Any) -> InPlaceSorter:
    """Return the whole-sequence in-place sorter for `algorithm`."""
    return get_module(algorithm).sort_all
