import random

import pytest

from puzzlegen.utils import format_duration, make_rng, orthogonal_neighbors, rand_int_inclusive, random_pick, surrounding_cells


def test_random_pick_rejects_empty_input():
    with pytest.raises(ValueError):
        random_pick([])


def test_rand_int_inclusive_hits_both_ends():
    rng = random.Random(0)
    values = {rand_int_inclusive(1, 3, rng) for _ in range(200)}
    assert values == {1, 2, 3}


def test_make_rng():
    rng = random.Random(1)
    assert make_rng(rng) is rng
    assert make_rng(5).random() == random.Random(5).random()


def test_neighbourhoods_stay_on_the_board():
    assert sorted(orthogonal_neighbors(0, 0, 3)) == [(0, 1), (1, 0)]
    assert len(surrounding_cells(1, 1, 3)) == 8
    assert sorted(surrounding_cells(2, 2, 3)) == [(1, 1), (1, 2), (2, 1)]


def test_format_duration():
    assert format_duration(0.0123) == "12.30 ms"
    assert format_duration(2.5) == "2.500 s"
    assert format_duration(75) == "1 min 15.00 s"
