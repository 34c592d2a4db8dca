"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import islice


def prefix_function(pattern: Sequence) -> list[int]:
    """Return the failure table of ``pattern``.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.
    """
    table = [0] * len(pattern)
    k = 0
    for i, item in enumerate(islice(pattern, 1, None), start=1):
        while k and item != pattern[k]:
            k = table[k - 1]
        if item == pattern[k]:
            k += 1
        table[i] = k
    return table


def find_occurrences(text: Sequence, pattern: Sequence) -> list[int]:
    """Return the 0-based start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported, in increasing order.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_function(pattern)
    length = len(pattern)
    found: list[int] = []
    k = 0
    for i, item in enumerate(text):
        while k and item != pattern[k]:
            k = table[k - 1]
        if item == pattern[k]:
            k += 1
        if k == length:
            found.append(i - length + 1)
            k = table[k - 1]
    return found


def main(argv: list[str] | None = None) -> int:
    """Read a text and a pattern from standard input and print 1-based match positions."""
    parser = argparse.ArgumentParser(
        prog="kmp",
        description=(
            "Read TEXT and PATTERN as whitespace-separated tokens from standard "
            "input and print the 1-based start position of every occurrence."
        ),
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        parser.error("expected a text and a pattern on standard input")
    text, pattern = tokens[0], tokens[1]
    sys.stdout.write("".join(f"{start + 1} " for start in find_occurrences(text, pattern)))
    return 0


if __name__ == "__main__":
    sys.exit(main())