"""Minimum and maximum edge weight on tree paths via binary lifting."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable

_NO_EDGES = (10**9, -(10**9))


class WeightedTree:
    """A rooted tree with weighted edges over nodes ``0..size-1``."""

    def __init__(self, size: int, edges: Iterable[tuple[int, int, int]], root: int = 0) -> None:
        if size < 1:
            raise ValueError("a tree needs at least one node")
        self._size = size
        self._check(root)
        edges = list(edges)
        if len(edges) != size - 1:
            raise ValueError(f"a tree of {size} nodes needs {size - 1} edges, got {len(edges)}")

        adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]
        for u, v, weight in edges:
            self._check(u)
            self._check(v)
            adjacency[u].append((v, weight))
            adjacency[v].append((u, weight))

        parent = [root] * size
        low0: list[float] = [math.inf] * size
        high0: list[float] = [-math.inf] * size
        self._depth = [0] * size
        visited = [False] * size
        visited[root] = True
        stack = [root]
        while stack:
            u = stack.pop()
            for v, weight in adjacency[u]:
                if not visited[v]:
                    visited[v] = True
                    parent[v] = u
                    low0[v] = high0[v] = weight
                    self._depth[v] = self._depth[u] + 1
                    stack.append(v)
        if not all(visited):
            raise ValueError("edges do not connect every node")

        self._up = [parent]
        self._low = [low0]
        self._high = [high0]
        for _ in range(1, max(1, (size - 1).bit_length())):
            up, low, high = self._up[-1], self._low[-1], self._high[-1]
            self._low.append([min(a, low[p]) for a, p in zip(low, up)])
            self._high.append([max(a, high[p]) for a, p in zip(high, up)])
            self._up.append([up[p] for p in up])

    def _check(self, node: int) -> None:
        if not 0 <= node < self._size:
            raise IndexError(f"node {node} out of range")

    def depth(self, node: int) -> int:
        """Return the number of edges between ``node`` and the root."""
        self._check(node)
        return self._depth[node]

    def path_extremes(self, u: int, v: int) -> tuple[int, int]:
        """Return ``(minimum, maximum)`` edge weight on the path between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if u == v:
            raise ValueError("the path from a node to itself has no edges")
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        low: float = math.inf
        high: float = -math.inf

        diff = self._depth[u] - self._depth[v]
        level = 0
        while diff:
            if diff & 1:
                low = min(low, self._low[level][u])
                high = max(high, self._high[level][u])
                u = self._up[level][u]
            diff >>= 1
            level += 1
        if u == v:
            return low, high

        for level in reversed(range(len(self._up))):
            up = self._up[level]
            if up[u] != up[v]:
                low = min(low, self._low[level][u], self._low[level][v])
                high = max(high, self._high[level][u], self._high[level][v])
                u, v = up[u], up[v]
        low = min(low, self._low[0][u], self._low[0][v])
        high = max(high, self._high[0][u], self._high[0][v])
        return low, high


def main(argv: list[str] | None = None) -> int:
    """Read a tree and path queries (1-based nodes) from stdin; print min and max per query."""
    parser = argparse.ArgumentParser(
        prog="lca",
        description=(
            "Read N, then N-1 lines 'u v weight', then Q, then Q lines 'u v' "
            "(nodes numbered from 1) and print the minimum and maximum edge "
            "weight on each path."
        ),
    )
    parser.parse_args(argv)
    try:
        numbers = iter([int(token) for token in sys.stdin.read().split()])
        size = next(numbers)
        edges = [(next(numbers) - 1, next(numbers) - 1, next(numbers)) for _ in range(size - 1)]
        tree = WeightedTree(size, edges, 0)
        total = next(numbers)
        queries = [(next(numbers) - 1, next(numbers) - 1) for _ in range(total)]
        lines = []
        for u, v in queries:
            low, high = _NO_EDGES if u == v else tree.path_extremes(u, v)
            lines.append(f"{low} {high}\n")
    except StopIteration:
        parser.error("input ended early")
    except (ValueError, IndexError) as error:
        parser.error(str(error))
    sys.stdout.write("".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())