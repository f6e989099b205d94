"""Small graph utilities: adjacency matrices, grid rooms and two-colouring."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

OPEN_CELL = "."
MATRIX_HEADER = "Adjacency Matrix for the Graph: "


class Graph:
    """An undirected graph stored as an adjacency matrix."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of vertices must not be negative")
        self._matrix = [[0] * n for _ in range(n)]

    def __len__(self) -> int:
        return len(self._matrix)

    @property
    def matrix(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [row[:] for row in self._matrix]

    def add_edge(self, u: int, v: int) -> None:
        """Connect vertices ``u`` and ``v`` (0-based)."""
        n = len(self._matrix)
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) leaves the graph")
        self._matrix[u][v] = 1
        self._matrix[v][u] = 1

    def format(self) -> str:
        """Render the adjacency matrix, one row per line."""
        lines = [MATRIX_HEADER]
        lines.extend("".join(f"{cell} " for cell in row) for row in self._matrix)
        return "\n".join(lines) + "\n"

    __str__ = format


def count_rooms(rows: Sequence[str]) -> int:
    """Count the connected areas of open floor (``.``) in a rectangular map."""
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("the map must be rectangular")
    height = len(rows)

    seen: set[tuple[int, int]] = set()
    rooms = 0
    for start in (
        (r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == OPEN_CELL
    ):
        if start in seen:
            continue
        rooms += 1
        seen.add(start)
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for nr, nc in ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)):
                if (
                    0 <= nr < height
                    and 0 <= nc < width
                    and (nr, nc) not in seen
                    and rows[nr][nc] == OPEN_CELL
                ):
                    seen.add((nr, nc))
                    queue.append((nr, nc))
    return rooms


def two_color(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Split vertices 1..n into teams 1 and 2 so no edge joins two of a team.

    Edges are directed, 1-based ``(a, b)`` pairs; colouring starts at vertex
    1 and follows edges forward.  Vertices it never reaches go to team 2.
    Returns None when no such split exists.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    successors: list[set[int]] = [set() for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) leaves the graph")
        successors[a - 1].add(b - 1)
    ordered = [sorted(targets) for targets in successors]

    color = [-1] * n
    color[0] = 1
    stack = [(0, iter(ordered[0]))]
    while stack:
        vertex, targets = stack[-1]
        target = next(targets, None)
        if target is None:
            stack.pop()
            continue
        wanted = 1 - color[vertex]
        if color[target] == -1:
            color[target] = wanted
            stack.append((target, iter(ordered[target])))
        elif color[target] != wanted:
            return None
    return [1 if c == 0 else 2 for c in color]