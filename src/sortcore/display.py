"""
Console display wrapper and CLI.

Usage:
    sortcore                                   # demo array, quicksort, both directions
    sortcore 5 3 9 1 --order desc --algorithm merge
    python -m sortcore --all                   # every algorithm, both directions

Output format (one block per run):
    Original array: [34, 7, 23, ...]
    Sorted array (ascending using Quick Sort): [1, 5, 7, ...]
    Execution time: 0.012345 ms
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Any, List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from .algorithms import Algorithm
from .api import sort, validate_sequence
from .errors import SortError
from .order import Order

__all__ = ["DEMO_ARRAY", "format_array", "sort_and_display", "recommend", "main"]

DEMO_ARRAY: List[int] = [34, 7, 23, 32, 5, 62, 1, 19, 42, 11, 94]

# Below this size insertion sort usually beats the n log n sorts
SMALL_N = 50

logger = logging.getLogger(__name__)


def format_array(values: Sequence[Any]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def sort_and_display(
    values: Sequence[Any],
    order: Any = Order.ASCENDING,
    algorithm: Any = Algorithm.QUICK,
    *,
    console: Optional[Console] = None,
) -> List[Any]:
    """
    Sort `values`, print the original and sorted arrays plus the elapsed time,
    and return the sorted list. `values` is not mutated.

    Invalid input raises InvalidInputError before anything is printed.
    """
    console = console or Console()
    order = Order.parse(order)
    algorithm = Algorithm.parse(algorithm)
    validate_sequence(values)

    console.print(f"Original array: {format_array(values)}", markup=False, highlight=False, soft_wrap=True)

    t0 = time.perf_counter_ns()
    out = sort(values, order, algorithm)
    t1 = time.perf_counter_ns()
    elapsed_ms = (t1 - t0) / 1e6
    logger.debug("%s %s n=%d took %.6f ms", algorithm.value, order.value, len(out), elapsed_ms)

    console.print(
        f"Sorted array ({order.value} using {algorithm.display_name}): {format_array(out)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    console.print(f"Execution time: {elapsed_ms:.6f} ms", markup=False, highlight=False, soft_wrap=True)
    return out


def recommend(n: int, *, stable: bool = False, memory_constrained: bool = False) -> Algorithm:
    """
    Suggest an algorithm for `n` elements. Advisory only: `sort()` never
    picks an algorithm on its own.

    - stability required        -> merge sort, or insertion sort when
                                   memory is also constrained (stable, in place)
    - small n (< SMALL_N)       -> insertion sort
    - otherwise                 -> quicksort (in place, unlike merge sort)
    """
    if n < 0:
        raise ValueError("n must be nonnegative")
    if stable:
        return Algorithm.INSERTION if memory_constrained else Algorithm.MERGE
    if n < SMALL_N:
        return Algorithm.INSERTION
    return Algorithm.QUICK


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="sortcore",
        description="Sort integers with quicksort, merge sort or insertion sort and show the result.",
    )
    p.add_argument("values", nargs="*", type=int, help="Integers to sort (default: a demo array)")
    p.add_argument(
        "--order",
        choices=["ascending", "descending", "asc", "desc"],
        default=None,
        help="Sort direction (default: show both)",
    )
    p.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.QUICK.value,
        help="Algorithm to use (default: quick)",
    )
    p.add_argument("--all", action="store_true", help="Run every algorithm in both directions")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    console = Console()

    values = args.values if args.values else list(DEMO_ARRAY)
    algorithms = list(Algorithm) if args.all else [Algorithm.parse(args.algorithm)]
    orders = [Order.parse(args.order)] if args.order else [Order.ASCENDING, Order.DESCENDING]

    try:
        for alg in algorithms:
            for order in orders:
                console.print(f"[bold]{order.value.upper()} ORDER ({alg.display_name}):[/bold]")
                sort_and_display(values, order, alg, console=console)
                console.print()
    except SortError as e:
        console.print(f"[bold red]Sort failed:[/bold red] {e}")
        return 1

    if args.all:
        hint = recommend(len(values))
        console.print(f"Recommended for n={len(values)}: [bold]{hint.display_name}[/bold]")
    return 0
