"""Tests for the display wrapper, the recommendation table and the CLI."""

from __future__ import annotations

import pytest
from rich.console import Console

from sortcore import Algorithm, InvalidInputError, Order
from sortcore.display import DEMO_ARRAY, format_array, main, recommend, sort_and_display


def _console() -> Console:
    return Console(record=True, width=200, color_system=None)


def test_format_array() -> None:
    assert format_array([]) == "[]"
    assert format_array([3, 1, 2]) == "[3, 1, 2]"


def test_sort_and_display_output() -> None:
    console = _console()
    values = list(DEMO_ARRAY)
    out = sort_and_display(values, Order.DESCENDING, Algorithm.MERGE, console=console)

    assert out == [94, 62, 42, 34, 32, 23, 19, 11, 7, 5, 1]
    assert values == DEMO_ARRAY
    text = console.export_text()
    assert "Original array: [34, 7, 23, 32, 5, 62, 1, 19, 42, 11, 94]" in text
    assert "Sorted array (descending using Merge Sort): [94, 62, 42, 34, 32, 23, 19, 11, 7, 5, 1]" in text
    assert "Execution time: " in text
    assert " ms" in text


def test_sort_and_display_accepts_strings_for_options() -> None:
    console = _console()
    out = sort_and_display([2, 3, 1], "asc", "insertion", console=console)
    assert out == [1, 2, 3]
    assert "ascending using Insertion Sort" in console.export_text()


def test_sort_and_display_propagates_errors() -> None:
    with pytest.raises(InvalidInputError):
        sort_and_display([1, "a"], console=_console())


@pytest.mark.parametrize("values", [None, "cba", [1, "a"]])
def test_sort_and_display_prints_nothing_for_invalid_input(values) -> None:
    console = _console()
    with pytest.raises(InvalidInputError):
        sort_and_display(values, console=console)
    assert console.export_text() == ""


@pytest.mark.parametrize(
    "n, kwargs, expected",
    [
        (10, {}, Algorithm.INSERTION),
        (49, {}, Algorithm.INSERTION),
        (50, {}, Algorithm.QUICK),
        (100_000, {}, Algorithm.QUICK),
        (100_000, {"stable": True}, Algorithm.MERGE),
        (10, {"stable": True}, Algorithm.MERGE),
        (100_000, {"stable": True, "memory_constrained": True}, Algorithm.INSERTION),
        (100_000, {"memory_constrained": True}, Algorithm.QUICK),
    ],
)
def test_recommend(n, kwargs, expected) -> None:
    assert recommend(n, **kwargs) is expected


def test_recommend_rejects_negative() -> None:
    with pytest.raises(ValueError):
        recommend(-1)


def test_cli_demo_both_directions(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Sorted array (ascending using Quick Sort): [1, 5, 7, 11, 19, 23, 32, 34, 42, 62, 94]" in out
    assert "Sorted array (descending using Quick Sort): [94, 62, 42, 34, 32, 23, 19, 11, 7, 5, 1]" in out


def test_cli_values_and_options(capsys) -> None:
    assert main(["5", "3", "9", "1", "--order", "desc", "--algorithm", "merge"]) == 0
    out = capsys.readouterr().out
    assert "Original array: [5, 3, 9, 1]" in out
    assert "Sorted array (descending using Merge Sort): [9, 5, 3, 1]" in out
    assert "ascending using" not in out


def test_cli_all(capsys) -> None:
    assert main(["--all", "2", "1"]) == 0
    out = capsys.readouterr().out
    for alg in Algorithm:
        assert f"ascending using {alg.display_name}" in out
        assert f"descending using {alg.display_name}" in out
    assert "Recommended for n=2: Insertion Sort" in out


def test_cli_rejects_unknown_algorithm() -> None:
    with pytest.raises(SystemExit):
        main(["--algorithm", "bubble"])
