"""
Experiment runner: sweeps sizes x algorithms x directions from a YAML config.

Usage (from repo root):
    python -m sortcore.bench.runner experiments/configs/01_random_scaling.yaml
    sortcore-bench experiments/configs/02_quicksort_worst_case.yaml

Config keys (all required unless noted):
    experiment_name: str
    output_dir: str                 # run directories are created under it
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    check_output: bool              # optional, default true
    dataset: {dist: ..., params: {...}}
    sizes: [int, ...]
    algorithms:
      - name: quick                 # quick | merge | insertion
        order: descending           # optional, default ascending

Outputs in a new run directory:
    - config_resolved.yaml    # the config actually used, defaults filled in
    - meta.json               # python/numpy/pandas versions, machine, git commit
    - results.jsonl           # one line per timing sample, plus status lines
    - summary.csv             # median, IQR, min, max per (algo, order, n)

For each size one dataset is generated and handed to every algorithm. After
a timeout, error or wrong output an algorithm/direction pair is skipped for
all larger sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortcore.algorithms import Algorithm, get_module
from sortcore.bench.measure import time_sort_call
from sortcore.datasets import make_dataset
from sortcore.order import Order

__all__ = ["AlgoSpec", "REQUIRED_KEYS", "run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]

SUMMARY_COLUMNS = ["algo", "order", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    algorithm: Algorithm
    order: Order
    sort_fn: Callable[..., List[Any]]

    @property
    def label(self) -> str:
        return f"{self.algorithm.value}/{self.order.value}"

    @property
    def config(self) -> Dict[str, Any]:
        return {"order": self.order.value}


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
    run_dir.mkdir()
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- helpers: config ------------------------- #

def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if not isinstance(entry, dict):
            raise ValueError(f"Algorithm entries must be mappings; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")

        algorithm = Algorithm.parse(name)
        order = Order.parse(entry.get("order", Order.ASCENDING))
        spec = AlgoSpec(algorithm=algorithm, order=order, sort_fn=get_module(algorithm).sort)
        if spec.label in seen:
            raise ValueError(f"Duplicate algorithm/order in config: {spec.label}")
        seen.add(spec.label)
        specs.append(spec)
    if not specs:
        raise ValueError("Config 'algorithms' must list at least one algorithm")
    return specs


def _validate_sizes(raw: Any) -> List[int]:
    if not isinstance(raw, list) or not raw:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    sizes = []
    for n in raw:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"Config 'sizes' entries must be nonnegative integers; got {n!r}")
        sizes.append(n)
    return sizes


# ------------------------- summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    empty = pd.DataFrame(columns=SUMMARY_COLUMNS)
    if not jsonl_path.exists():
        return empty
    df = pd.read_json(jsonl_path, lines=True)
    if df.empty or "time_ns" not in df.columns:
        return empty
    df = df[df["time_ns"].notna()]
    if df.empty:
        return empty

    out = (
        df.groupby(["algo", "order", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            q1=("time_ns", lambda s: s.quantile(0.25)),
            q3=("time_ns", lambda s: s.quantile(0.75)),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out["iqr_ns"] = out["q3"] - out["q1"]
    out = out.drop(columns=["q1", "q3"])
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "order", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    median_ms = median_ns / 1e6
    if iqr_ns is None:
        return f"{median_ms:.3f}"
    return f"{median_ms:.3f} ± {iqr_ns / 1e6:.3f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    # Show first, middle and last size only
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("Order")
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for (algo, order), group in summary.groupby(["algo", "order"], sort=True):
        row = [str(algo), str(order)]
        for n in picks:
            s = group[group["n"] == n]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """
    Run the experiment described by the YAML file at `config_path` and
    return the run directory.

    Raises
    ------
    ValueError
        If the config is missing keys or holds invalid values.
    """
    cfg = _load_yaml(Path(config_path))

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    cfg.setdefault("check_output", True)

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes = _validate_sizes(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    check_output = bool(cfg["check_output"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.label: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.label for a in algos)}")

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in algos:
            if skipped[spec.label]:
                continue

            res = time_sort_call(
                algo_name=spec.algorithm.value,
                algo_fn=spec.sort_fn,
                a=base_a,
                config=spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
                check_output=check_output,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": spec.algorithm.value,
                        "order": spec.order.value,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                skipped[spec.label] = True
                logger.warning("%s stopped at n=%d: %s %s", spec.label, n, status, res["error"] or "")
                _append_jsonl(
                    {
                        "algo": spec.algorithm.value,
                        "order": spec.order.value,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
