import pytest

from olimpiada.y2020 import (
    accelerator,
    atlanta,
    best_frame,
    fissure,
    pandemic,
    shirts_available,
    third_sibling_age,
    three_for_two,
)


@pytest.mark.parametrize("d", [6, 7, 8, 14, 15, 16, 30, 31, 32])
def test_accelerator_valid_distances_give_sensor(d):
    assert accelerator(d) in (1, 2, 3)


@pytest.mark.parametrize("d", range(3, 40))
def test_accelerator_periodic(d):
    assert accelerator(d) == accelerator(d + 8)


def test_accelerator_consecutive_sensors():
    assert accelerator(7) == accelerator(6) + 1
    assert accelerator(8) == accelerator(7) + 1


def test_fissure_value():
    assert fissure(["123", "456", "789"], "5") == ["***", "**6", "789"]


def test_fissure_blocked_start():
    grid = ["99", "99"]
    result = fissure(grid, "0")
    assert result[0][0] == "*"
    assert result[0][1:] == grid[0][1:]
    assert result[1] == grid[1]


def test_fissure_soft_everywhere():
    grid = ["012", "345", "678"]
    assert fissure(grid, "9") == ["*" * 3] * 3


def test_fissure_hard_cells_unchanged():
    grid = ["1919", "1111", "9991"]
    result = fissure(grid, "5")
    for row, original in zip(result, grid):
        for cell, before in zip(row, original):
            if before > "5":
                assert cell == before
            else:
                assert cell == "*"


def test_pandemic_without_meetings():
    assert pandemic(10, 3, 1, []) == 1


def test_pandemic_meeting_spreads():
    meeting = [3, 4, 5]
    assert pandemic(10, 3, 1, [meeting]) == len(meeting)


def test_pandemic_before_start_day_does_not_spread():
    assert pandemic(10, 3, 5, [[3, 4, 5]]) == pandemic(10, 3, 5, [])


def test_pandemic_chain():
    first, second = [1, 2], [2, 6, 7]
    assert pandemic(10, 1, 1, [first, second]) == len(set(first) | set(second))


def test_pandemic_meeting_without_carriers():
    assert pandemic(10, 1, 1, [[4, 5, 6]]) == pandemic(10, 1, 1, [])


def test_pandemic_unknown_person_raises():
    with pytest.raises(ValueError):
        pandemic(3, 1, 1, [[1, 4]])


def test_three_for_two_value():
    assert three_for_two([10, 20, 30, 40]) == 80


def test_three_for_two_order_independent():
    prices = [5, 1, 9, 3, 7, 2, 8]
    assert three_for_two(prices) == three_for_two(sorted(prices))
    assert three_for_two(prices) <= sum(prices)


def test_three_for_two_equal_items():
    assert three_for_two([7, 7, 7]) == 7 + 7


def test_three_for_two_fewer_than_three():
    assert three_for_two([4, 9]) == 4 + 9


def test_shirts_exact_stock():
    requests = [1, 2, 1, 2, 2]
    assert shirts_available(requests, requests.count(1), requests.count(2))


def test_shirts_short_of_small():
    requests = [1, 2, 1, 2, 2]
    assert not shirts_available(requests, requests.count(1) - 1, requests.count(2))


def test_shirts_short_of_medium():
    requests = [1, 2, 1, 2, 2]
    assert not shirts_available(requests, 10, requests.count(2) - 1)


@pytest.mark.parametrize("a,b", [(5, 8), (10, 10), (1, 20)])
def test_third_sibling_evenly_spaced(a, b):
    assert third_sibling_age(a, b) - b == b - a


def test_best_frame_none_fits():
    assert best_frame(10, 10, [(5, 5), (9, 20)]) == -1


def test_best_frame_exact_fit_wins():
    assert best_frame(3, 4, [(10, 10), (3, 4), (5, 5)]) == 2


def test_best_frame_rotation():
    assert best_frame(3, 4, [(4, 3)]) == 1


def test_best_frame_tie_keeps_first():
    assert best_frame(2, 2, [(3, 3), (3, 3)]) == 1


@pytest.mark.parametrize("side_l,side_c", [(3, 3), (3, 7), (4, 5), (2, 9)])
def test_atlanta_recovers_rectangle(side_l, side_c):
    a = 2 * (side_l + side_c) - 4
    b = (side_l - 2) * (side_c - 2)
    low, high = atlanta(a, b)
    assert low <= high
    assert 2 * (low + high) - 4 == a
    assert (low - 2) * (high - 2) == b


def test_atlanta_impossible():
    assert atlanta(1, 1) == (-1, -1)