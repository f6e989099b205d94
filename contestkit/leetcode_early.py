"""Solutions to a set of early LeetCode problems."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import combinations, product
from typing import Callable, Sequence

INT_MAX = 2**31 - 1

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _c_remainder(value: int, divisor: int) -> int:
    """Remainder that takes the sign of the dividend, as integer division truncates."""
    return int(math.fmod(value, divisor)) if abs(value) < 2**52 else (
        value - divisor * (abs(value) // abs(divisor)) * (1 if (value >= 0) == (divisor > 0) else -1)
    )


def letter_combinations(digits: str) -> list[str]:
    """Return every string a phone keypad can spell from ``digits``.

    Digits without letters (0, 1 and anything else) spell nothing.
    """
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(KEYPAD.get(d, "") for d in digits))]


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours, or -1 if none is found."""
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    if n == 1:
        return 0
    if nums[0] > nums[1]:
        return 0
    for i in range(1, n - 1):
        if nums[i] > nums[i + 1] and nums[i] > nums[i - 1]:
            return i
    if nums[-1] > nums[-2]:
        return n - 1
    return -1


def rob(nums: Sequence[int]) -> int:
    """Return the most money taken from houses in a row without robbing two adjacent ones."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[1], nums[0])
    for value in nums[2:]:
        before, best = best, max(best, before + value)
    return best


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest element of ``nums``."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of elements")
    return heapq.nlargest(k, nums)[-1]


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every set of ``k`` distinct digits 1..9 summing to ``n``, each in ascending order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def min_patches(nums: Sequence[int], n: int) -> int:
    """Return how many numbers must be added to sorted ``nums`` so sums of some of them cover 1..n."""
    count = 0
    covered = 0
    i = 0
    while i < len(nums) and covered < n:
        if nums[i] > covered + 1:
            count += 1
            covered = 2 * covered + 1
        else:
            covered += nums[i]
            i += 1
    while covered < n:
        covered = 2 * covered + 1
        count += 1
    return count


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether some element has a smaller one before it and a larger one after it.

    The running maximum from the right starts at zero.
    """
    prefix = []
    lowest = INT_MAX
    for value in nums:
        lowest = min(lowest, value)
        prefix.append(lowest)
    suffix = [0] * len(nums)
    highest = 0
    for i in range(len(nums) - 1, -1, -1):
        highest = max(highest, nums[i])
        suffix[i] = highest
    return any(low < value < high for low, value, high in zip(prefix, nums, suffix))


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n.

    ``guess(num)`` returns -1 if ``num`` is too high, 1 if it is too low
    and 0 when it is right.
    """
    left, right = 1, n
    while left <= right:
        mid = left + (right - left) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer > 0:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("the guess function never confirms a number")


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Return the most capital after finishing at most ``k`` affordable projects starting from ``w``."""
    if len(profits) != len(capital):
        raise ValueError("profits and capital must have the same length")
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    j = 0
    for _ in range(k):
        while j < len(projects) and projects[j][0] <= w:
            heapq.heappush(available, -projects[j][1])
            j += 1
        if not available:
            break
        w -= heapq.heappop(available)
    return w


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Tell whether a subarray of length two or more sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    seen: set[int] = set()
    total = 0
    for value in nums:
        previous = total
        total = _c_remainder(total + value, k)
        if total in seen:
            return True
        seen.add(previous)
    return False


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is the sum of two squares."""
    if c < 0:
        raise ValueError("c must not be negative")
    i, j = 0, math.isqrt(c)
    while j >= i:
        total = i * i + j * j
        if total == c:
            return True
        if total > c:
            j -= 1
        else:
            i += 1
    return False


def replace_words(dictionary: Sequence[str], sentence: str) -> str:
    """Replace each word of ``sentence`` by its shortest root from ``dictionary``."""
    roots = sorted(dictionary, key=len)
    return " ".join(
        next((root for root in roots if word.startswith(root)), word)
        for word in sentence.split()
    )


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes ``piles`` within ``h`` hours, or 0 if none does."""

    def fits(speed: int) -> bool:
        return sum((pile + speed - 1) // speed for pile in piles) <= h

    low, high = 0, max([1, *piles])
    speed = 0
    while low <= high:
        mid = low + (high - low) // 2
        if mid != 0 and fits(mid):
            high = mid - 1
            speed = mid
        else:
            low = mid + 1
    return speed


def min_increment_for_unique(nums: Sequence[int]) -> int:
    """Return the fewest unit increments that make every value distinct."""
    ordered = sorted(nums)
    count = 0
    previous = None
    for value in ordered:
        if previous is not None and value <= previous:
            count += previous + 1 - value
            value = previous + 1
        previous = value
    return count


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Count the non-empty subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        remainder = _c_remainder(total, k)
        if remainder < 0:
            remainder += k
        count += seen[remainder]
        seen[remainder] += 1
    return count