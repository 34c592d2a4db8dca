import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.sorting import (
    bingo_sort,
    bubble_sort,
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
    tim_sort,
)


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=120))
def test_comparison_sorts_match_sorted(values):
    expected = sorted(values)
    assert bingo_sort(values) == expected
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert shell_sort(values) == expected
    assert tim_sort(values) == expected


@given(values=st.lists(st.integers(min_value=0, max_value=100000), max_size=120))
def test_non_negative_sorts_match_sorted(values):
    expected = sorted(values)
    assert counting_sort(values) == expected
    assert radix_sort(values) == expected


@given(values=st.lists(st.floats(min_value=0, max_value=1, exclude_max=True), max_size=120))
def test_bucket_sort_matches_sorted(values):
    assert bucket_sort(values) == sorted(values)


def test_empty_input():
    assert bingo_sort([]) == []
    assert bubble_sort([]) == []
    assert bucket_sort([]) == []
    assert counting_sort([]) == []
    assert heap_sort([]) == []
    assert insertion_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert radix_sort([]) == []
    assert selection_sort([]) == []
    assert shell_sort([]) == []
    assert tim_sort([]) == []


def test_input_is_not_mutated():
    values = [5, 3, 9, 1, 3, 0]
    snapshot = list(values)
    expected = sorted(snapshot)
    results = {
        "bingo": bingo_sort(values),
        "bubble": bubble_sort(values),
        "counting": counting_sort(values),
        "heap": heap_sort(values),
        "insertion": insertion_sort(values),
        "merge": merge_sort(values),
        "quick": quick_sort(values),
        "radix": radix_sort(values),
        "selection": selection_sort(values),
        "shell": shell_sort(values),
        "tim": tim_sort(values),
    }
    assert values == snapshot
    assert results == {name: expected for name in results}


def test_accepts_generators():
    expected = [2, 2, 4, 7]
    source = (4, 2, 7, 2)
    assert bingo_sort(x for x in source) == expected
    assert bubble_sort(x for x in source) == expected
    assert counting_sort(x for x in source) == expected
    assert heap_sort(x for x in source) == expected
    assert insertion_sort(x for x in source) == expected
    assert merge_sort(x for x in source) == expected
    assert quick_sort(x for x in source) == expected
    assert radix_sort(x for x in source) == expected
    assert selection_sort(x for x in source) == expected
    assert shell_sort(x for x in source) == expected
    assert tim_sort(x for x in source) == expected


def test_comparison_sorts_handle_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]
    assert bingo_sort(words) == expected
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected
    assert shell_sort(words) == expected
    assert tim_sort(words) == expected


def test_long_reversed_and_sorted_runs():
    descending = list(range(300, 0, -1))
    ascending_from_one = list(range(1, 301))
    ascending = list(range(300))
    assert bingo_sort(descending) == ascending_from_one
    assert bubble_sort(descending) == ascending_from_one
    assert heap_sort(descending) == ascending_from_one
    assert insertion_sort(descending) == ascending_from_one
    assert merge_sort(descending) == ascending_from_one
    assert quick_sort(descending) == ascending_from_one
    assert selection_sort(descending) == ascending_from_one
    assert shell_sort(descending) == ascending_from_one
    assert tim_sort(descending) == ascending_from_one
    assert bingo_sort(ascending) == ascending
    assert bubble_sort(ascending) == ascending
    assert heap_sort(ascending) == ascending
    assert insertion_sort(ascending) == ascending
    assert merge_sort(ascending) == ascending
    assert quick_sort(ascending) == ascending
    assert selection_sort(ascending) == ascending
    assert shell_sort(ascending) == ascending
    assert tim_sort(ascending) == ascending


def test_all_equal():
    values = [7] * 50
    assert bingo_sort(values) == values
    assert bubble_sort(values) == values
    assert counting_sort(values) == values
    assert heap_sort(values) == values
    assert insertion_sort(values) == values
    assert merge_sort(values) == values
    assert quick_sort(values) == values
    assert radix_sort(values) == values
    assert selection_sort(values) == values
    assert shell_sort(values) == values
    assert tim_sort(values) == values


def test_counting_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_radix_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.2, bad, 0.5])


def test_radix_sort_multi_digit():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(values) == [2, 24, 45, 66, 75, 90, 170, 802]


def test_main_default_algorithm(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 1 2 5 4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 3 4 5 "


@pytest.mark.parametrize("algorithm", ["bingo", "counting", "heap", "radix", "tim"])
def test_main_named_algorithm(monkeypatch, capsys, algorithm):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 9 0 9 3"))
    assert main([algorithm]) == 0
    assert capsys.readouterr().out == "0 3 9 9 "


def test_main_bucket_floats(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0.75 0.25 0.5\n"))
    assert main(["bucket"]) == 0
    assert capsys.readouterr().out == "0.25 0.5 0.75 "


def test_main_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1 2"))
    with pytest.raises(SystemExit) as excinfo:
        main(["merge"])
    assert excinfo.value.code == 2


def test_main_unknown_algorithm():
    with pytest.raises(SystemExit) as excinfo:
        main(["nonexistent"])
    assert excinfo.value.code == 2