"""
Integer dataset generators for exercising and benchmarking the sorters.

The shapes are chosen around the algorithms' known weak spots: the
last-element pivot makes quicksort quadratic on "sorted", "reversed" and
"all_equal", while insertion sort is linear on "sorted" and close to it on
"nearly_sorted".

Distributions (spec["dist"]):
- "random":         uniform integers from params["range"] == [lo, hi] (inclusive)
- "sorted":         [0, 1, ..., n-1]
- "reversed":       [n-1, ..., 1, 0]
- "nearly_sorted":  "sorted" then ceil(swap_frac * n) random index swaps
                    (params["swap_frac"], default 0.05)
- "few_uniques":    params["k"] distinct values drawn from the optional
                    inclusive params["range"] (default [0, 4294967295])
- "all_equal":      n copies of params["value"] (default 0)

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Returns plain Python lists; the algorithms never see NumPy types.
Deterministic shapes ignore `rng`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

Params = Dict[str, Any]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers shaped by `spec`, drawing randomness from `rng`.

    Parameters
    ----------
    n : int
        Length of the dataset, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
    rng : numpy.random.Generator
        Caller-owned, seeded upstream for reproducibility.

    Raises
    ------
    ValueError
        On a bad `n`, an unknown distribution or invalid params.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return _GENERATORS[dist](int(n), params, rng)


# ------------------------- generators ------------------------- #


def _random(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    if n == 0:
        return []
    # integers() is half-open, so +1 makes hi inclusive
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _reversed(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _nearly_sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {raw!r}") from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return arr
    pairs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in pairs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", [0, 4294967295]), "few_uniques")
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    values: List[int] = []
    seen = set()
    while len(values) < actual_k:
        for v in rng.integers(lo, hi + 1, size=2 * (actual_k - len(values)), dtype=np.int64).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == actual_k:
                    break
    return [values[t] for t in rng.integers(0, actual_k, size=n).tolist()]


def _all_equal(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    value = params.get("value", 0)
    if not _is_int_like(value):
        raise ValueError(f"all_equal.params.value must be an integer; got {value!r}")
    return [int(value)] * n


_GENERATORS: Dict[str, Callable[[int, Params, np.random.Generator], List[int]]] = {
    "random": _random,
    "sorted": _sorted,
    "reversed": _reversed,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "all_equal": _all_equal,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars, but not bool
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
