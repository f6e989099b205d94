"""Solutions to a set of early Codeforces problems."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence

CROPS = ("Carrots", "Kiwis", "Grapes")
WASTE = "Waste"
INGREDIENTS = "BSC"
MIN_BOYS = 4
MIN_GIRLS = 1


def count_deputies(office: Sequence[str], president: str) -> int:
    """Count the distinct desks that touch the president's desk.

    ``office`` is a rectangular plan, one string per row, with ``.`` for
    empty floor and a letter for each desk.
    """
    if not office:
        return 0
    width = len(office[0])
    if any(len(row) != width for row in office):
        raise ValueError("the office plan must be rectangular")
    height = len(office)
    neighbours = set()
    for y, row in enumerate(office):
        for x, cell in enumerate(row):
            if cell != president:
                continue
            for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                if 0 <= nx < width and 0 <= ny < height:
                    other = office[ny][nx]
                    if other != "." and other != cell:
                        neighbours.add(other)
    return len(neighbours)


def semifinal_candidates(results: Sequence[tuple[int, int]]) -> tuple[str, str]:
    """Mark who may reach the final from each of two semifinals.

    ``results`` holds, per place, the times of the two semifinals.  Returns
    two strings of ``0`` and ``1``, one for each semifinal.
    """
    n = len(results)
    first = [a for a, _ in results]
    second = [b for _, b in results]
    ranked = sorted(
        (value, index) for index, pair in enumerate(results) for value in pair
    )
    marked_first = [False] * n
    marked_second = [False] * n
    for value, index in ranked[:n]:
        if first[index] == value:
            marked_first[index] = True
        elif second[index] == value:
            marked_second[index] = True
    for index in range(n // 2):
        marked_first[index] = True
        marked_second[index] = True

    def render(marks: list[bool]) -> str:
        return "".join("1" if mark else "0" for mark in marks)

    return render(marked_first), render(marked_second)


def plant_crops(
    m: int,
    waste: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[str]:
    """Name what grows in each queried cell of a field ``m`` cells wide.

    Cells are planted row by row with carrots, kiwis and grapes in turn,
    skipping waste cells.  Coordinates are 1-based (row, column).
    """
    if m < 1:
        raise ValueError("the field must be at least one cell wide")

    def cell(x: int, y: int) -> int:
        return (x - 1) * m + y - 1

    wasted = sorted(cell(x, y) for x, y in waste)
    wasted_set = set(wasted)
    answers = []
    for x, y in queries:
        position = cell(x, y)
        if position in wasted_set:
            answers.append(WASTE)
        else:
            skipped = bisect_left(wasted, position)
            answers.append(CROPS[(position - skipped) % len(CROPS)])
    return answers


def combination(n: int, k: int) -> int:
    """Return the number of ways to choose ``k`` items from ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def count_groups(n: int, m: int, t: int) -> int:
    """Count groups of ``t`` actors with at least four of ``n`` boys and one of ``m`` girls."""
    return sum(
        combination(n, boys) * combination(m, t - boys)
        for boys in range(MIN_BOYS, min(n, t) + 1)
        if t - boys >= MIN_GIRLS
    )


def cut_ribbon(length: int, sizes: Sequence[int]) -> int | None:
    """Return the most pieces a ribbon can be cut into using only ``sizes``.

    Returns None when the ribbon cannot be cut exactly.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if any(size <= 0 for size in sizes):
        raise ValueError("piece sizes must be positive")
    best: list[int | None] = [None] * (length + 1)
    best[0] = 0
    for total in range(1, length + 1):
        for size in sizes:
            if size > total:
                continue
            previous = best[total - size]
            if previous is None:
                continue
            candidate = previous + 1
            current = best[total]
            if current is None or candidate > current:
                best[total] = candidate
    return best[length]


def lightest_fence_start(heights: Sequence[int], k: int) -> int:
    """Return the 1-based start of the first ``k`` consecutive planks with the least total height."""
    n = len(heights)
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and the number of planks")
    window = sum(heights[:k])
    best = window
    start = 0
    for i in range(1, n - k + 1):
        window += heights[i + k - 1] - heights[i - 1]
        if window < best:
            best = window
            start = i
    return start + 1


def max_hamburgers(
    recipe: str,
    stock: Sequence[int],
    prices: Sequence[int],
    rubles: int,
) -> int:
    """Return how many hamburgers can be made.

    ``recipe`` is made of the letters B, S and C; ``stock`` and ``prices``
    give the pieces at hand and the price of one piece, in that order.
    """
    if not recipe:
        raise ValueError("the recipe must not be empty")
    if set(recipe) - set(INGREDIENTS):
        raise ValueError(f"the recipe may only use {INGREDIENTS}")
    if len(stock) != len(INGREDIENTS) or len(prices) != len(INGREDIENTS):
        raise ValueError("stock and prices need one entry per ingredient")
    if any(amount < 0 for amount in stock):
        raise ValueError("stock must not be negative")
    if any(price <= 0 for price in prices):
        raise ValueError("prices must be positive")
    if rubles < 0:
        raise ValueError("rubles must not be negative")

    left = dict(zip(INGREDIENTS, stock))
    cost = dict(zip(INGREDIENTS, prices))
    burger_price = sum(cost[piece] for piece in recipe)

    count = 0
    bought = 0
    while True:
        for piece in recipe:
            if left[piece] > 0:
                left[piece] -= 1
                bought = 0
            elif rubles >= cost[piece]:
                rubles -= cost[piece]
                bought += 1
            else:
                return count
        count += 1
        if bought > len(recipe):
            return count + rubles // burger_price