"""
sortcore: comparator-driven quicksort, merge sort and insertion sort.

Quick start:
    from sortcore import sort, Order, Algorithm
    sort([3, 1, 2], Order.DESCENDING, Algorithm.MERGE)   # -> [3, 2, 1]

The in-place range mutators are also exported for callers that want them:
    quicksort(seq, low, high, order)
    mergesort(seq, left, right, order)
    insertionsort(seq, order)
"""

from .algorithms import Algorithm, get_sorter, insertionsort, mergesort, quicksort
from .api import sort, validate_sequence
from .errors import InvalidInputError, SortError, UnsupportedAlgorithmError
from .order import Comparison, Order, make_comparator, swap

__version__ = "0.1.0"

__all__ = [
    "sort",
    "validate_sequence",
    "Order",
    "Algorithm",
    "Comparison",
    "make_comparator",
    "swap",
    "get_sorter",
    "quicksort",
    "mergesort",
    "insertionsort",
    "SortError",
    "InvalidInputError",
    "UnsupportedAlgorithmError",
]
