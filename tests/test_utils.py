import math
import random

from game.megabonk.utils import clamp, normalize, distance, circle_collide, rand_range, seed_everything


def test_clamp_bounds():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(3.5, 0, 10) == 3.5


def test_normalize_unit_and_zero_vector():
    x, y = normalize(3.0, 4.0)
    assert math.isclose(x, 0.6) and math.isclose(y, 0.8)
    # Zero vector falls back to a divisor of 1 instead of faulting
    assert normalize(0.0, 0.0) == (0.0, 0.0)


def test_distance_and_circle_collide():
    assert distance(0, 0, 3, 4) == 5
    assert circle_collide(0, 0, 5, 9, 0, 5)
    # Touching circles do not count as overlapping
    assert not circle_collide(0, 0, 5, 10, 0, 5)


def test_rand_range_stays_in_bounds_and_is_seeded():
    seed_everything(3)
    first = [rand_range(-6, 6) for _ in range(50)]
    assert all(-6 <= v < 6 for v in first)

    seed_everything(3)
    assert [rand_range(-6, 6) for _ in range(50)] == first


def test_seed_everything_none_is_noop():
    random.seed(1)
    expected = random.random()
    random.seed(1)
    seed_everything(None)
    assert random.random() == expected
