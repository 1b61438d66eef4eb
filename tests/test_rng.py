import pytest

from gmengine.rng import EngineRandom


def test_same_seed_gives_same_sequence():
    first = EngineRandom()
    second = EngineRandom()
    first.set_seed(1234)
    second.set_seed(1234)
    assert [first.random_int(0, 1000) for _ in range(20)] == [
        second.random_int(0, 1000) for _ in range(20)
    ]


def test_constructor_seed_matches_set_seed():
    seeded = EngineRandom(99)
    reseeded = EngineRandom()
    reseeded.set_seed(99)
    assert [seeded.random_float(0.0, 1.0) for _ in range(10)] == [
        reseeded.random_float(0.0, 1.0) for _ in range(10)
    ]


def test_reseeding_restarts_sequence():
    rng = EngineRandom()
    rng.set_seed(7)
    first = [rng.random_int(-50, 50) for _ in range(10)]
    rng.set_seed(7)
    assert [rng.random_int(-50, 50) for _ in range(10)] == first


def test_random_int_stays_in_closed_range_and_reaches_both_ends():
    rng = EngineRandom(5)
    values = {rng.random_int(1, 3) for _ in range(500)}
    assert values == {1, 2, 3}


def test_random_int_swapped_bounds():
    rng = EngineRandom(11)
    values = [rng.random_int(10, -10) for _ in range(300)]
    assert all(-10 <= v <= 10 for v in values)
    assert min(values) < 0 < max(values)


def test_random_int_equal_bounds():
    rng = EngineRandom(3)
    assert all(rng.random_int(4, 4) == 4 for _ in range(10))


@pytest.mark.parametrize("low, high", [(0.0, 1.0), (-5.0, 5.0), (2.5, -2.5)])
def test_random_float_in_half_open_range(low, high):
    rng = EngineRandom(21)
    lo, hi = min(low, high), max(low, high)
    values = [rng.random_float(low, high) for _ in range(500)]
    assert all(lo <= v < hi for v in values)


def test_random_float_equal_bounds():
    rng = EngineRandom(8)
    assert rng.random_float(3.5, 3.5) == 3.5


def test_different_seeds_differ():
    a = EngineRandom(1)
    b = EngineRandom(2)
    assert [a.random_int(0, 10**9) for _ in range(5)] != [
        b.random_int(0, 10**9) for _ in range(5)
    ]