import pytest

from contestkit.codeforces_middle import (
    find_reversal,
    has_triangle,
    max_sold,
    palindrome_double,
    stabilize_towers,
    stone_queries,
)


def test_max_sold_sample():
    assert max_sold([(2, 1), (3, 5), (2, 3), (1, 5)], 2) == 10


def test_max_sold_without_sell_outs_sells_stock_when_clients_suffice():
    days = [(2, 5), (3, 7), (1, 4)]
    assert max_sold(days, 0) == sum(products for products, _ in days)


def test_max_sold_limited_by_clients():
    days = [(10, 3), (8, 2)]
    assert max_sold(days, 2) == sum(clients for _, clients in days)


def test_max_sold_grows_with_sell_outs():
    days = [(2, 10), (5, 6), (1, 1), (4, 20)]
    totals = [max_sold(days, f) for f in range(len(days) + 1)]
    assert totals == sorted(totals)


def test_max_sold_rejects_negative_sell_outs():
    with pytest.raises(ValueError):
        max_sold([(1, 1)], -1)


def test_stone_queries_full_range_is_total():
    costs = [6, 4, 2, 7, 2, 7]
    n = len(costs)
    assert stone_queries(costs, [(1, 1, n), (2, 1, n)]) == [sum(costs), sum(costs)]


def test_stone_queries_single_cells():
    costs = [6, 4, 2, 7, 2, 7]
    n = len(costs)
    answers = stone_queries(costs, [(2, 1, 1), (2, n, n), (1, 3, 3)])
    assert answers == [min(costs), max(costs), costs[2]]


def test_stone_queries_sorted_prefix_is_smallest():
    costs = [5, 1, 9, 3]
    original, ordered = stone_queries(costs, [(1, 1, 2), (2, 1, 2)])
    assert ordered <= original


@pytest.mark.parametrize("query", [(3, 1, 1), (1, 0, 2), (1, 2, 5), (2, 3, 2)])
def test_stone_queries_rejects_bad_queries(query):
    with pytest.raises(ValueError):
        stone_queries([1, 2, 3, 4], [query])


def test_find_reversal_sorted_input():
    assert find_reversal([1, 2, 3]) == (1, 1)


@pytest.mark.parametrize(
    "values",
    [[3, 2, 1], [2, 1, 3, 4], [1, 5, 4, 3, 6], [1, 2, 2, 1], [4, 4, 1]],
)
def test_find_reversal_sorts_the_values(values):
    bounds = find_reversal(values)
    assert bounds is not None
    left, right = bounds
    fixed = values[: left - 1] + values[left - 1 : right][::-1] + values[right:]
    assert fixed == sorted(values)


@pytest.mark.parametrize("values", [[3, 1, 2, 4], [2, 1, 3, 1]])
def test_find_reversal_impossible(values):
    assert find_reversal(values) is None


def test_stabilize_towers_sample():
    assert stabilize_towers([5, 8, 5], 2) == (0, [(2, 1), (2, 3)])


@pytest.mark.parametrize(
    ("heights", "k"),
    [([2, 2, 4], 1), ([10, 1, 3, 7], 5), ([1, 100], 3), ([4, 4, 4], 10)],
)
def test_stabilize_towers_moves_reach_reported_instability(heights, k):
    instability, moves = stabilize_towers(heights, k)
    assert len(moves) <= k
    towers = list(heights)
    for source, target in moves:
        towers[source - 1] -= 1
        towers[target - 1] += 1
    assert sum(towers) == sum(heights)
    assert max(towers) - min(towers) == instability


def test_stabilize_towers_without_moves():
    heights = [3, 9, 1]
    assert stabilize_towers(heights, 0) == (max(heights) - min(heights), [])


def test_stabilize_towers_rejects_empty():
    with pytest.raises(ValueError):
        stabilize_towers([], 1)


@pytest.mark.parametrize("s", ["a", "ab", "xyz", ""])
def test_palindrome_double(s):
    result = palindrome_double(s)
    assert result == result[::-1]
    assert result.startswith(s)
    assert len(result) == 2 * len(s)


@pytest.mark.parametrize(
    ("lengths", "expected"),
    [
        ([1, 5, 3, 2, 4], True),
        ([4, 1, 2], False),
        ([1, 1, 1], True),
        ([1, 2, 3], False),
        ([5, 5], False),
        ([], False),
    ],
)
def test_has_triangle(lengths, expected):
    assert has_triangle(lengths) is expected