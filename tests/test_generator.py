import random
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from curve_engine import Mode, Point, PointGenerator  # noqa: E402


class ScriptedRandom:
    """randint returns the scripted values in order."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, lo, hi):
        value = self.values.pop(0)
        assert lo <= value <= hi
        return value


@pytest.mark.parametrize("count", [2, 3, 4])
def test_generate_invariants(count: int) -> None:
    gen = PointGenerator(rng=random.Random(count))
    for _ in range(50):
        points = gen.generate(count)
        assert len(points) == count
        xs = [p.x for p in points]
        assert len(set(xs)) == count
        for p in points:
            assert -4 <= p.x <= 3
            assert -4 <= p.y <= 3


def test_duplicate_x_is_redrawn() -> None:
    gen = PointGenerator(rng=ScriptedRandom([1, 2, 1, -4, 3]))
    assert gen.generate(2) == [Point(1, 2), Point(-4, 3)]


def test_same_seed_same_points() -> None:
    assert PointGenerator(seed=3).generate(4) == PointGenerator(seed=3).generate(4)


def test_generate_for_mode() -> None:
    gen = PointGenerator(seed=1)
    assert len(gen.generate_for_mode(Mode.LINEAR)) == 2
    assert len(gen.generate_for_mode(Mode.CUBIC)) == 4


def test_all_eight_x_values() -> None:
    points = PointGenerator(seed=0).generate(8)
    assert sorted(p.x for p in points) == list(range(-4, 4))


@pytest.mark.parametrize("count", [0, 9])
def test_count_out_of_range_rejected(count: int) -> None:
    with pytest.raises(ValueError):
        PointGenerator(seed=0).generate(count)
