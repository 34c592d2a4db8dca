"""Classic sorting algorithms.

Each function takes an iterable and returns a new sorted list. The input is
left unchanged.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from itertools import chain, repeat
from typing import Any

_RUN = 32


def bingo_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving every copy of the current smallest value into place per pass."""
    items = list(values)
    if not items:
        return items
    bingo = min(items)
    largest = max(items)
    next_bingo = largest
    position = 0
    while bingo < next_bingo:
        for i in range(position, len(items)):
            if items[i] == bingo:
                items[i], items[position] = items[position], items[i]
                position += 1
            elif items[i] < next_bingo:
                next_bingo = items[i]
        bingo, next_bingo = next_bingo, largest
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by exchanging each position with any later, smaller element."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def _insertion_sort_range(items: list[Any], left: int, right: int) -> None:
    """Insertion-sort ``items[left:right + 1]`` in place."""
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    _insertion_sort_range(items, 0, len(items) - 1)
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per element."""
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[min(int(size * value), size - 1)].append(value)
    return list(chain.from_iterable(insertion_sort(bucket) for bucket in buckets))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return list(chain.from_iterable(repeat(value, times) for value, times in enumerate(counts)))


def _sift_down(items: list[Any], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:size]``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(items: list[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``items[left:mid + 1]`` and ``items[mid + 1:right + 1]``."""
    left_run = items[left : mid + 1]
    right_run = items[mid + 1 : right + 1]
    i = j = 0
    out = left
    while i < len(left_run) and j < len(right_run):
        if left_run[i] < right_run[j]:
            items[out] = left_run[i]
            i += 1
        else:
            items[out] = right_run[j]
            j += 1
        out += 1
    rest = left_run[i:] + right_run[j:]
    items[out : out + len(rest)] = rest


def _merge_sort_range(items: list[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort_range(items, left, mid)
    _merge_sort_range(items, mid + 1, right)
    _merge(items, left, mid, right)


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by recursively sorting both halves and merging them."""
    items = list(values)
    _merge_sort_range(items, 0, len(items) - 1)
    return items


def _partition(items: list[Any], left: int, right: int) -> int:
    """Partition around ``items[right]`` and return the pivot's final index."""
    pivot = items[right]
    boundary = left - 1
    for j in range(left, right):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[right] = items[right], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            pivot = _partition(items, left, right)
            pending.append((pivot + 1, right))
            pending.append((left, pivot - 1))
    return items


def _count_by_digit(items: list[int], exp: int) -> list[int]:
    """Stable counting sort of ``items`` on the decimal digit selected by ``exp``."""
    counts = [0] * 10
    for value in items:
        counts[(value // exp) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    result = [0] * len(items)
    for value in reversed(items):
        digit = (value // exp) % 10
        counts[digit] -= 1
        result[counts[digit]] = value
    return result


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers one decimal digit at a time, least significant first."""
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _count_by_digit(items, exp)
        exp *= 10
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping the smallest remaining element into each position."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by gapped insertion sorts with the gap halved each round."""
    items = list(values)
    size = len(items)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            held = items[i]
            j = i
            while j >= gap and items[j - gap] > held:
                items[j] = items[j - gap]
                j -= gap
            items[j] = held
        gap //= 2
    return items


def tim_sort(values: Iterable[Any]) -> list[Any]:
    """Sort runs of 32 by insertion, then merge runs of doubling width."""
    items = list(values)
    size = len(items)
    for start in range(0, size, _RUN):
        _insertion_sort_range(items, start, min(start + _RUN - 1, size - 1))
    width = _RUN
    while width < size:
        for left in range(0, size, 2 * width):
            mid = left + width - 1
            right = min(left + 2 * width - 1, size - 1)
            if mid < right:
                _merge(items, left, mid, right)
        width *= 2
    return items


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bingo": bingo_sort,
    "bubble": bubble_sort,
    "bucket": bucket_sort,
    "counting": counting_sort,
    "heap": heap_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "radix": radix_sort,
    "selection": selection_sort,
    "shell": shell_sort,
    "tim": tim_sort,
}


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many numbers from standard input and print them sorted."""
    parser = argparse.ArgumentParser(
        prog="sorting",
        description="Read N and then N numbers from standard input and print them sorted.",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="quick",
        choices=sorted(ALGORITHMS),
        help="sorting algorithm to use (default: quick)",
    )
    args = parser.parse_args(argv)
    is_float = args.algorithm == "bucket"
    convert: Callable[[str], Any] = float if is_float else int
    try:
        tokens = sys.stdin.read().split()
        if not tokens:
            raise ValueError("expected a count on standard input")
        total = int(tokens[0])
        if total < 0 or len(tokens) - 1 < total:
            raise ValueError("not enough numbers on standard input")
        numbers = [convert(token) for token in tokens[1 : total + 1]]
        result = ALGORITHMS[args.algorithm](numbers)
    except ValueError as error:
        parser.error(str(error))
    render = (lambda x: f"{x:g}") if is_float else str
    sys.stdout.write("".join(f"{render(value)} " for value in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())