"""Solutions to a set of mid-range Codeforces problems."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence

QUERY_ORIGINAL = 1
QUERY_SORTED = 2


def max_sold(days: Sequence[tuple[int, int]], sell_outs: int) -> int:
    """Return the most products sold when ``sell_outs`` days have their stock doubled.

    ``days`` holds, for each day, the products on the shelf and the clients
    who come.  Each client buys one product if one is left.
    """
    if sell_outs < 0:
        raise ValueError("the number of sell-out days must not be negative")
    if any(products < 0 or clients < 0 for products, clients in days):
        raise ValueError("products and clients must not be negative")

    plain = [min(products, clients) for products, clients in days]
    doubled = [min(2 * products, clients) for products, clients in days]
    gains = sorted(
        ((doubled[index] - plain[index], index) for index in range(len(days))),
        reverse=True,
    )
    chosen = {index for _, index in gains[:sell_outs]}
    return sum(
        max(doubled[index] - plain[index], doubled[index]) if index in chosen else plain[index]
        for index in range(len(days))
    )


def stone_queries(
    costs: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Answer range-sum queries over the stones.

    Each query is ``(type, l, r)`` with 1-based inclusive bounds.  Type 1
    sums the stones in their given order, type 2 sums them sorted by cost.
    """
    original = list(accumulate(costs, initial=0))
    ordered = list(accumulate(sorted(costs), initial=0))
    n = len(costs)
    answers = []
    for kind, left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"range {left}..{right} is outside 1..{n}")
        if kind == QUERY_ORIGINAL:
            prefix = original
        elif kind == QUERY_SORTED:
            prefix = ordered
        else:
            raise ValueError(f"unknown query type {kind}")
        answers.append(prefix[right] - prefix[left - 1])
    return answers


def find_reversal(values: Sequence[int]) -> tuple[int, int] | None:
    """Find a segment whose reversal sorts ``values``.

    Returns 1-based inclusive bounds, ``(1, 1)`` when the values are already
    sorted, or None when no single reversal sorts them.
    """
    target = sorted(values)
    start = next(
        (index for index, (value, wanted) in enumerate(zip(values, target)) if value != wanted),
        None,
    )
    if start is None:
        return 1, 1

    end = start
    previous = values[start]
    for index in range(start, len(values)):
        if values[index] > previous:
            break
        end = index
        previous = values[index]

    candidate = list(values)
    candidate[start : end + 1] = reversed(candidate[start : end + 1])
    if candidate != target:
        return None
    return start + 1, end + 1


def stabilize_towers(
    heights: Sequence[int], k: int
) -> tuple[int, list[tuple[int, int]]]:
    """Move cubes from the tallest to the shortest tower at most ``k`` times.

    Returns the least instability (tallest minus shortest) reached and the
    moves that reach it, each as 1-based ``(from, to)`` tower numbers.
    """
    if not heights:
        raise ValueError("at least one tower is needed")
    if k < 0:
        raise ValueError("k must not be negative")

    towers = sorted([height, index] for index, height in enumerate(heights))

    def spread() -> int:
        return towers[-1][0] - towers[0][0]

    moves: list[tuple[int, int]] = []
    best: int | None = None
    best_count = 0
    while len(moves) < k and spread() != 0:
        towers[0][0] += 1
        towers[-1][0] -= 1
        moves.append((towers[-1][1] + 1, towers[0][1] + 1))
        towers.sort()
        current = spread()
        if best is None or current < best:
            best, best_count = current, len(moves)

    current = spread()
    if best is None or current < best:
        best, best_count = current, len(moves)
    return best, moves[:best_count]


def palindrome_double(s: str) -> str:
    """Return ``s`` followed by its reverse, an even-length palindrome."""
    return s + s[::-1]


def has_triangle(lengths: Iterable[int]) -> bool:
    """Tell whether three of the segments form a non-degenerate triangle."""
    segments = sorted(lengths)
    i, j, k = 0, 1, 2
    while k < len(segments):
        if segments[k] < segments[i] + segments[j]:
            return True
        if i < j - 1:
            i += 1
        elif j < k - 1:
            j += 1
        else:
            k += 1
    return False