import math

import pytest

from contestkit.codeforces_early import (
    combination,
    count_deputies,
    count_groups,
    cut_ribbon,
    lightest_fence_start,
    max_hamburgers,
    plant_crops,
    semifinal_candidates,
)


def test_count_deputies_sample():
    office = ["G.B.", ".RR.", "TTT."]
    assert count_deputies(office, "R") == 2


def test_count_deputies_alone():
    assert count_deputies(["..", ".Z"], "Z") == 0


def test_count_deputies_ignores_diagonals():
    assert count_deputies(["A.", ".Z"], "Z") == 0


def test_count_deputies_counts_each_desk_once():
    office = ["AAA", "ZZZ", "AAA"]
    assert count_deputies(office, "Z") == 1


def test_count_deputies_rejects_ragged_plan():
    with pytest.raises(ValueError):
        count_deputies(["AB", "A"], "A")


def test_semifinal_candidates_sample():
    results = [(9840, 9920), (9860, 9980), (9930, 10020), (10040, 10090)]
    assert semifinal_candidates(results) == ("1110", "1100")


def test_semifinal_candidates_invariants():
    results = [(1, 100), (2, 101), (3, 102), (4, 103), (5, 104)]
    first, second = semifinal_candidates(results)
    assert len(first) == len(second) == len(results)
    assert first[:2] == "11" and second[:2] == "11"
    assert first == "11111"


def test_plant_crops_sample():
    waste = [(4, 3), (1, 3), (3, 3), (2, 5), (3, 2)]
    queries = [(1, 3), (1, 4), (2, 3), (2, 4), (1, 1), (1, 1)]
    assert plant_crops(5, waste, queries) == [
        "Waste",
        "Grapes",
        "Carrots",
        "Kiwis",
        "Carrots",
        "Carrots",
    ]


def test_plant_crops_cycle_without_waste():
    queries = [(1, y) for y in range(1, 7)]
    assert plant_crops(6, [], queries) == [
        "Carrots",
        "Kiwis",
        "Grapes",
        "Carrots",
        "Kiwis",
        "Grapes",
    ]


def test_plant_crops_rejects_empty_field():
    with pytest.raises(ValueError):
        plant_crops(0, [], [(1, 1)])


@pytest.mark.parametrize("n,k", [(5, 2), (10, 0), (10, 10), (30, 15), (60, 7)])
def test_combination_matches_math_comb(n, k):
    assert combination(n, k) == math.comb(n, k)


def test_combination_k_above_n():
    assert combination(3, 5) == 0


def test_combination_rejects_negative():
    with pytest.raises(ValueError):
        combination(-1, 2)


def test_count_groups_samples():
    assert count_groups(5, 2, 5) == 10
    assert count_groups(4, 3, 5) == 3


def test_count_groups_too_few_boys():
    assert count_groups(3, 10, 5) == 0


def test_cut_ribbon_samples():
    assert cut_ribbon(5, (5, 3, 2)) == 2
    assert cut_ribbon(7, (5, 5, 2)) == 2


def test_cut_ribbon_unit_pieces():
    assert cut_ribbon(17, (1, 4, 9)) == 17


def test_cut_ribbon_impossible():
    assert cut_ribbon(7, (2, 4, 6)) is None


def test_cut_ribbon_rejects_zero_size():
    with pytest.raises(ValueError):
        cut_ribbon(5, (0, 1, 2))


def test_lightest_fence_start_sample():
    assert lightest_fence_start([1, 2, 6, 1, 1, 7, 1], 3) == 3


def test_lightest_fence_start_prefers_first():
    assert lightest_fence_start([4, 4, 4, 4], 2) == 1


def test_lightest_fence_start_rejects_bad_k():
    with pytest.raises(ValueError):
        lightest_fence_start([1, 2, 3], 4)
    with pytest.raises(ValueError):
        lightest_fence_start([1, 2, 3], 0)


def test_max_hamburgers_samples():
    assert max_hamburgers("BBBSSC", (6, 4, 1), (1, 2, 3), 4) == 2
    assert max_hamburgers("BBC", (1, 10, 1), (1, 10, 1), 21) == 7
    assert max_hamburgers("BSC", (1, 1, 1), (1, 1, 3), 1000000000000) == 200000000001


def test_max_hamburgers_only_money():
    assert max_hamburgers("BSC", (0, 0, 0), (2, 3, 5), 50) == 5


def test_max_hamburgers_nothing():
    assert max_hamburgers("B", (0, 0, 0), (1, 1, 1), 0) == 0


def test_max_hamburgers_rejects_unknown_ingredient():
    with pytest.raises(ValueError):
        max_hamburgers("BXC", (1, 1, 1), (1, 1, 1), 10)


def test_max_hamburgers_rejects_free_ingredient():
    with pytest.raises(ValueError):
        max_hamburgers("BSC", (1, 1, 1), (0, 1, 1), 10)