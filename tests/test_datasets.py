"""Tests for the dataset generators."""

from __future__ import annotations

import numpy as np
import pytest

from sortcore.datasets import SUPPORTED_DISTS, make_dataset


def _rng(seed: int = 7) -> np.random.Generator:
    return np.random.default_rng(seed)


def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {"random", "sorted", "reversed", "nearly_sorted", "few_uniques", "all_equal"}


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "random", "params": {"range": [0, 10]}},
        {"dist": "sorted"},
        {"dist": "reversed"},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 3}},
        {"dist": "all_equal", "params": {"value": 4}},
    ],
)
def test_lengths_and_plain_ints(spec) -> None:
    for n in (0, 1, 37):
        out = make_dataset(n, spec, _rng())
        assert isinstance(out, list)
        assert len(out) == n
        assert all(type(x) is int for x in out)


def test_random_is_inclusive_and_reproducible() -> None:
    spec = {"dist": "random", "params": {"range": [-2, 2]}}
    a = make_dataset(2000, spec, _rng(1))
    assert set(a) == {-2, -1, 0, 1, 2}
    assert a == make_dataset(2000, spec, _rng(1))


def test_deterministic_shapes() -> None:
    assert make_dataset(5, {"dist": "sorted"}, _rng()) == [0, 1, 2, 3, 4]
    assert make_dataset(5, {"dist": "reversed", "params": {}}, _rng()) == [4, 3, 2, 1, 0]
    assert make_dataset(3, {"dist": "all_equal"}, _rng()) == [0, 0, 0]


def test_nearly_sorted_is_a_permutation() -> None:
    out = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}, _rng())
    assert sorted(out) == list(range(100))
    assert make_dataset(10, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, _rng()) == list(range(10))


def test_few_uniques_caps_distinct_values() -> None:
    out = make_dataset(500, {"dist": "few_uniques", "params": {"k": 4, "range": [10, 20]}}, _rng())
    assert len(set(out)) <= 4
    assert all(10 <= x <= 20 for x in out)
    # k larger than the span is capped by the span
    out = make_dataset(50, {"dist": "few_uniques", "params": {"k": 100, "range": [0, 1]}}, _rng())
    assert set(out) <= {0, 1}


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "sorted"}),
        (1.5, {"dist": "sorted"}),
        (True, {"dist": "sorted"}),
        (3, "sorted"),
        (3, {"dist": "bogo"}),
        (3, {"dist": "random"}),
        (3, {"dist": "random", "params": {"range": [5, 1]}}),
        (3, {"dist": "random", "params": {"range": [0, 1, 2]}}),
        (3, {"dist": "random", "params": {"range": [0.5, 1]}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}),
        (3, {"dist": "few_uniques", "params": {}}),
        (3, {"dist": "few_uniques", "params": {"k": 0}}),
        (3, {"dist": "all_equal", "params": {"value": "x"}}),
        (3, {"dist": "sorted", "params": [1]}),
    ],
)
def test_invalid_inputs(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())
