"""Solutions to a set of Beecrowd judge problems."""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from itertools import chain
from typing import Iterable, Sequence

PRIME_LIMIT = 32650
TREND_WINDOW = 30


def _primes_below(limit: int) -> tuple[int, ...]:
    sieve = bytearray([1]) * limit
    sieve[0:2] = b"\x00\x00"
    for candidate in range(2, math.isqrt(limit - 1) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, limit, candidate))
            )
    return tuple(number for number, flag in enumerate(sieve) if flag)


PRIMES = _primes_below(PRIME_LIMIT)


def josephus_primes(n: int) -> int:
    """Return the survivor of a circle of ``n`` people where the k-th count is the k-th prime."""
    if n < 1:
        raise ValueError("the circle needs at least one person")
    if n > len(PRIMES):
        raise ValueError(f"at most {len(PRIMES)} people are supported")
    people = list(range(1, n + 1))
    position = 0
    for prime in PRIMES:
        if len(people) == 1:
            break
        position = (position + prime - 1) % len(people)
        del people[position]
    return people[0]


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _solve_line(line: Sequence[str], total: int, solved: dict[str, int]) -> bool:
    unknown = Counter(symbol for symbol in line if symbol not in solved)
    if len(unknown) != 1:
        return False
    (symbol, occurrences), = unknown.items()
    remaining = total - sum(solved[s] for s in line if s in solved)
    solved[symbol] = _trunc_div(remaining, occurrences)
    return True


def solve_symbol_grid(
    rows: Sequence[Sequence[str]],
    row_sums: Sequence[int],
    column_sums: Sequence[int],
) -> dict[str, int]:
    """Find the value of every symbol in a grid given its row and column sums.

    Returns the values ordered by symbol name.  Raises ValueError when the
    grid cannot be solved one line at a time.
    """
    if len(rows) != len(row_sums):
        raise ValueError("one sum is needed per row")
    if any(len(row) != len(column_sums) for row in rows):
        raise ValueError("every row needs one entry per column sum")
    columns = [list(column) for column in zip(*rows)] if rows else []
    unsolved = {symbol for row in rows for symbol in row}
    solved: dict[str, int] = {}
    lines = list(chain(zip(rows, row_sums), zip(columns, column_sums)))
    while unsolved:
        progress = False
        for line, total in lines:
            if _solve_line(line, total, solved):
                progress = True
        unsolved -= solved.keys()
        if unsolved and not progress:
            raise ValueError("the grid cannot be solved")
    return dict(sorted(solved.items()))


def knapsack_pyramid(
    volumes: Sequence[int], prices: Sequence[int], budget: int
) -> int:
    """Return the height of the pyramid built from the most volume the budget buys."""
    if len(volumes) != len(prices):
        raise ValueError("volumes and prices must have the same length")
    if any(volume <= 0 for volume in volumes):
        raise ValueError("volumes must be positive")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    if budget < 0:
        raise ValueError("budget must not be negative")
    if budget == 0:
        return 0

    items = sorted((price / volume, volume, price) for volume, price in zip(volumes, prices))
    remaining = budget
    bought = 0.0
    for ratio, volume, price in items:
        if remaining >= price:
            remaining -= price
            bought += volume
        else:
            bought += remaining / ratio
            break

    total = int(bought)
    levels = 0
    while total > levels:
        levels += 1
        total -= levels
    return levels


def star_trek(stars: Iterable[int]) -> tuple[int, int]:
    """Walk the stars, stealing a sheep at each one.

    Returns the number of distinct stars visited and the sheep left over.
    """
    sheep = list(stars)
    visited: set[int] = set()
    position = 0
    while 0 <= position < len(sheep):
        visited.add(position)
        if sheep[position] == 0:
            break
        step = -1 if sheep[position] % 2 == 0 else 1
        sheep[position] -= 1
        position += step
    return len(visited), sum(sheep)


def minimum_spanning_cost(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> int | None:
    """Return the cost of a spanning tree over vertices 1..n, or None if the graph is disconnected."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, weight in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) leaves the graph")
        adjacency[a - 1].append((b - 1, weight))
        adjacency[b - 1].append((a - 1, weight))

    key = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    key[0] = 0
    heap = [(0, 0)]
    while heap:
        _, u = heapq.heappop(heap)
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                heapq.heappush(heap, (weight, v))
                parent[v] = u

    if not all(in_tree):
        return None
    return sum(
        next(weight for v, weight in adjacency[i] if v == parent[i])
        for i in range(1, n)
        if parent[i] != -1
    )


def days_to_goal(current: int, goal: int, last_days: Sequence[float]) -> int:
    """Count the days to reach ``goal`` when each day adds the rounded-up mean of the last 30."""
    if len(last_days) != TREND_WINDOW:
        raise ValueError(f"exactly {TREND_WINDOW} past days are needed")
    window = deque(last_days, maxlen=TREND_WINDOW)
    total = float(sum(window))
    days = 0
    while True:
        mean = math.ceil(total / TREND_WINDOW)
        current += mean
        days += 1
        if goal <= current:
            return days
        total = total - window[0] + mean
        window.append(mean)
        if max(window) <= 0:
            raise ValueError("the goal is never reached")


def max_grouped_value(
    groups: Sequence[Sequence[tuple[float, float]]], capacity: float
) -> float:
    """Best total value choosing at most one (value, weight) item per group.

    Values and weights are handled in tenths, truncated as read.
    """
    limit = int(capacity * 10)
    if limit < 0:
        raise ValueError("capacity must not be negative")
    scaled = [[(int(value * 10), int(weight * 10)) for value, weight in group] for group in groups]
    if any(weight < 0 for group in scaled for _, weight in group):
        raise ValueError("weights must not be negative")

    best = [0] * (limit + 1)
    for group in scaled:
        current = best[:]
        for load in range(limit + 1):
            for value, weight in group:
                if load >= weight:
                    current[load] = max(current[load], best[load - weight] + value)
        best = current
    return best[limit] / 10.0