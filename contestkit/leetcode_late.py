"""Solutions to a set of later LeetCode problems."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from itertools import permutations
from typing import Iterator, Sequence

EMPTY = 0
FRESH = 1
ROTTEN = 2

OPEN = "."

TRIBONACCI_LIMIT = 37
INFINITE_SET_SIZE = 1000
DIGITS = "123456789"

_GRID_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _require_rectangle(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("the grid must be rectangular")
    return len(grid), width


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); rot spreads to the four
    neighbours each minute.
    """
    rows, cols = _require_rectangle(grid)
    minutes: dict[tuple[int, int], int] = {}
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == ROTTEN:
                minutes[(r, c)] = 0
                queue.append((r, c))

    while queue:
        r, c = queue.popleft()
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and grid[nr][nc] == FRESH
                and (nr, nc) not in minutes
            ):
                minutes[(nr, nc)] = minutes[(r, c)] + 1
                queue.append((nr, nc))

    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != EMPTY and (r, c) not in minutes:
                return -1
    return max(minutes.values(), default=0)


def relative_sort_array(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``, then the rest ascending."""
    counts = Counter(arr1)
    known = set(arr2)
    ordered = [value for value in arr2 for _ in range(counts[value])]
    ordered.extend(sorted(value for value in arr1 if value not in known))
    return ordered


def tribonacci(n: int) -> int:
    """Return the ``n``-th Tribonacci number, T0 = 0, T1 = T2 = 1."""
    if not 0 <= n <= TRIBONACCI_LIMIT:
        raise ValueError(f"n must be between 0 and {TRIBONACCI_LIMIT}")
    if n == 0:
        return 0
    if n < 3:
        return 1
    a, b, c = 0, 1, 1
    for _ in range(n - 2):
        a, b, c = b, c, a + b + c
    return c


def max_split_score(s: str) -> int:
    """Split ``s`` into two non-empty parts; return the most zeros on the left plus ones on the right."""
    if not s:
        raise ValueError("the string must not be empty")
    right = s.count("1")
    left = 0
    best = 0
    for char in s[:-1]:
        if char == "1":
            right -= 1
        else:
            left += 1
        best = max(best, left + right)
    return best


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Return the steps from ``entrance`` (row, column) to the nearest open border cell, or -1.

    The entrance itself does not count as an exit.
    """
    rows, cols = _require_rectangle(maze)
    start = (entrance[0], entrance[1])
    if not (0 <= start[0] < rows and 0 <= start[1] < cols):
        raise ValueError("the entrance lies outside the maze")
    seen: set[tuple[int, int]] = set()
    queue = deque([(start, 0)])
    while queue:
        (r, c), steps = queue.popleft()
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                if (r, c) == start:
                    continue
                return steps
            if maze[nr][nc] == OPEN and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append(((nr, nc), steps + 1))
    return -1


def min_moves_to_seat(seats: Sequence[int], students: Sequence[int]) -> int:
    """Return the fewest single steps that seat every student."""
    if len(seats) != len(students):
        raise ValueError("there must be one seat per student")
    return sum(abs(seat - student) for seat, student in zip(sorted(seats), sorted(students)))


def successful_pairs(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """For each spell, count the potions whose product with it reaches ``success``."""
    order = sorted(range(len(spells)), key=lambda index: spells[index])
    strongest_first = sorted(potions, reverse=True)
    answers = [0] * len(spells)
    j = 0
    for index in order:
        while j < len(strongest_first) and spells[index] * strongest_first[j] >= success:
            j += 1
        answers[index] = j
    return answers


class SmallestInfiniteSet:
    """A set that starts with 1..1000 and hands out its smallest member."""

    def __init__(self) -> None:
        self._members = set(range(1, INFINITE_SET_SIZE + 1))
        self._heap = sorted(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, num: object) -> bool:
        return num in self._members

    def pop_smallest(self) -> int:
        """Remove and return the smallest member."""
        if not self._heap:
            raise IndexError("pop from an empty set")
        smallest = heapq.heappop(self._heap)
        self._members.discard(smallest)
        return smallest

    def add_back(self, num: int) -> None:
        """Put ``num`` into the set if it is not already there."""
        if num not in self._members:
            self._members.add(num)
            heapq.heappush(self._heap, num)


def _matches(pattern: str, digits: tuple[str, ...]) -> bool:
    return all(
        (rule == "D" and before > after) or (rule == "I" and before < after)
        for rule, before, after in zip(pattern, digits, digits[1:])
    )


def _candidates(pattern: str) -> Iterator[str]:
    for digits in permutations(DIGITS, len(pattern) + 1):
        if _matches(pattern, digits):
            yield "".join(digits)


def smallest_number(pattern: str) -> str:
    """Return the smallest string of distinct digits 1..9 following an I/D pattern."""
    result = next(_candidates(pattern), None)
    if result is None:
        raise ValueError("no number of distinct digits follows the pattern")
    return result


def total_cost(costs: Sequence[int], k: int, candidates: int) -> int:
    """Return the cost of hiring ``k`` workers, each the cheapest among the first and last candidates."""
    if not 0 <= k <= len(costs):
        raise ValueError("k must be between 0 and the number of workers")
    head: list[int] = []
    tail: list[int] = []
    i, j = 0, len(costs) - 1
    while i <= j and i != candidates:
        heapq.heappush(head, costs[i])
        i += 1
        if i > j:
            break
        heapq.heappush(tail, costs[j])
        j -= 1

    total = 0
    for _ in range(k):
        if not tail or (head and head[0] <= tail[0]):
            total += heapq.heappop(head)
            if i <= j:
                heapq.heappush(head, costs[i])
                i += 1
        else:
            total += heapq.heappop(tail)
            if i <= j:
                heapq.heappush(tail, costs[j])
                j -= 1
    return total


def max_subsequence_score(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> int:
    """Return the best sum of ``k`` chosen ``nums1`` values times the least chosen ``nums2`` value."""
    if len(nums1) != len(nums2):
        raise ValueError("nums1 and nums2 must have the same length")
    chosen: list[int] = []
    total = 0
    best = 0
    for multiplier, value in sorted(zip(nums2, nums1), reverse=True):
        total += value
        heapq.heappush(chosen, value)
        if len(chosen) == k:
            best = max(best, total * multiplier)
        if len(chosen) > k - 1:
            total -= heapq.heappop(chosen)
    return best


def _splits_to(digits: str, goal: int) -> bool:
    if goal < 0:
        return False
    if int(digits) == goal:
        return True
    if int(digits) < goal:
        return False
    return any(
        _splits_to(digits[cut:], goal - int(digits[:cut]))
        for cut in range(1, len(digits))
    )


def punishment_number(n: int) -> int:
    """Sum the squares of those i in 1..n whose square's digits split into parts summing to i."""
    return sum(i * i for i in range(1, n + 1) if _splits_to(str(i * i), i))