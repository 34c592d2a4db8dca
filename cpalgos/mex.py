"""Minimum excluded value (MEX) of collections, with updates and range queries."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable
from itertools import count

_DEMO_SETS = ([0, 1, 2, 4, 5], [0, 1, 2, 3, 4], [1, 2, 3, 4, 5])
_DEMO_ARRAY = [0, 0, 1, 2, 4, 6]


def find_mex(nums: Iterable[int]) -> int:
    """Return the smallest non-negative integer not in ``nums``."""
    present = set(nums)
    return next(candidate for candidate in count() if candidate not in present)


class Mex:
    """A list of integers whose MEX stays available under point updates."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._frequency = Counter(self._values)
        self._missing = set(range(len(self._values) + 1)).difference(self._frequency)
        self._heap = sorted(self._missing)

    def _mark_missing(self, value: int) -> None:
        if value not in self._missing:
            self._missing.add(value)
            heapq.heappush(self._heap, value)

    def mex(self) -> int:
        """Return the current MEX."""
        while self._heap[0] not in self._missing:
            heapq.heappop(self._heap)
        return self._heap[0]

    def update(self, index: int, value: int) -> None:
        """Replace the element at ``index`` with ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        old = self._values[index]
        self._frequency[old] -= 1
        if self._frequency[old] == 0 and old >= 0:
            self._mark_missing(old)
        self._values[index] = value
        self._frequency[value] += 1
        self._missing.discard(value)


class MexSegmentTree:
    """Minimum segment tree over the values ``0..max_value``.

    Each value holds a position (0 until set); ``find_mex`` returns the
    smallest value whose position lies below a bound.
    """

    def __init__(self, max_value: int) -> None:
        if max_value < 0:
            raise ValueError("max_value must be non-negative")
        self._size = max_value + 1
        self._tree = [0] * (4 * self._size)

    def set(self, index: int, value: int) -> None:
        """Store ``value`` as the position of ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._set(1, 0, self._size - 1, index, value)

    def _set(self, node: int, low: int, high: int, index: int, value: int) -> None:
        if low == high:
            self._tree[node] = value
            return
        mid = (low + high) // 2
        if index <= mid:
            self._set(2 * node, low, mid, index, value)
        else:
            self._set(2 * node + 1, mid + 1, high, index, value)
        self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def find_mex(self, bound: int) -> int:
        """Return the smallest index whose stored position is below ``bound``.

        If every index holds a position of at least ``bound``, return
        ``max_value + 1``.
        """
        if self._tree[1] >= bound:
            return self._size
        node, low, high = 1, 0, self._size - 1
        while low < high:
            mid = (low + high) // 2
            if self._tree[2 * node] < bound:
                node, high = 2 * node, mid
            else:
                node, low = 2 * node + 1, mid + 1
        return low


def range_mex(values: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer MEX queries over subarrays offline.

    Each query is a pair ``(left, right)`` of 0-based inclusive indices;
    the answers come back in query order.
    """
    values = list(values)
    size = len(values)
    by_end: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    answers_needed = 0
    for query_index, (left, right) in enumerate(queries):
        if not 0 <= left <= right < size:
            raise ValueError(f"invalid query ({left}, {right}) for {size} values")
        by_end[right].append((left, query_index))
        answers_needed += 1

    # A subarray has at most `size` elements, so its MEX never exceeds `size`.
    tree = MexSegmentTree(size)
    results = [0] * answers_needed
    for position, value in enumerate(values):
        if 0 <= value <= size:
            tree.set(value, position + 1)
        for left, query_index in by_end.get(position, ()):
            results[query_index] = tree.find_mex(left + 1)
    return results


def _describe(values: list[int]) -> str:
    listed = ", ".join(map(str, values))
    return f"MEX of {{{listed}}} is {find_mex(values)}"


def main(argv: list[str] | None = None) -> int:
    """Print MEX values, or answer subarray MEX queries read from standard input."""
    parser = argparse.ArgumentParser(prog="mex", description="Compute the MEX of integers.")
    parser.add_argument("values", nargs="*", type=int, help="integers to examine")
    parser.add_argument(
        "--queries",
        action="store_true",
        help=(
            "read a count and that many 'left right' pairs (0-based, inclusive) "
            "from standard input and print the MEX of each subarray"
        ),
    )
    args = parser.parse_args(argv)

    if args.queries:
        values = args.values or list(_DEMO_ARRAY)
        try:
            numbers = [int(token) for token in sys.stdin.read().split()]
            total, pairs = numbers[0], numbers[1:]
            if len(pairs) < 2 * total:
                raise ValueError("not enough query bounds")
            queries = list(zip(pairs[0 : 2 * total : 2], pairs[1 : 2 * total : 2]))
            answers = range_mex(values, queries)
        except (ValueError, IndexError) as error:
            parser.error(str(error) or "malformed query input")
        for answer in answers:
            print(answer)
        return 0

    for values in [args.values] if args.values else _DEMO_SETS:
        print(_describe(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())