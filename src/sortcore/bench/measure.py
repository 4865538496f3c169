"""
Timing harness for the sorters.

One sample is exactly one call to an algorithm module's
`sort(a, config=...)`, timed with `time.perf_counter_ns`. Copying the
input, GC handling, warmup and output checks all happen outside the timed
block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "order": "ascending" | "descending",
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # set for "error" and "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index
    }

"invalid" means a call returned without raising but its output did not
match the oracle (only when check_output=True).
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from sortcore.algorithms._common import order_from_config
from sortcore.validate import equals_oracle

__all__ = ["time_sort_call"]

logger = logging.getLogger(__name__)


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool = True,
    check_output: bool = False,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Registry name of the algorithm ("quick", "merge", "insertion").
    algo_fn : Callable[..., list]
        `sort(a, *, config=None)` from an algorithm module.
    a : list
        Input data; must come back unmutated.
    config : dict | None
        Passed through unchanged; its "order" also drives output checks.
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first.
    disable_gc : bool
        Collect, then disable the GC for the timed loop; restored afterwards.
    timeout_seconds : float
        A single sample slower than this stops sampling with status "timeout".
        The call itself is not interrupted.
    defensive_copy : bool
        Pass a fresh copy of `a` to every call.
    check_output : bool
        Compare the first sample's output against the oracle.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    order = order_from_config(config)
    result: Dict[str, Any] = {
        "algo": algo_name,
        "order": order.value,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if check_output and r == 0 and not equals_oracle(a, out, order):
                result["status"] = "invalid"
                result["error"] = f"output does not match oracle ({order.value})"
                break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled
        if disable_gc and prev_gc_enabled:
            gc.enable()

    logger.debug(
        "%s n=%d %s: status=%s samples=%d",
        algo_name, len(a), order.value, result["status"], len(result["samples_ns"]),
    )
    return result
