import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from curve_engine import CanvasTransform, Coefficients, Mode, grid_lines, sample_path  # noqa: E402
from curve_engine.sampler import LINE_TO, MOVE_TO, sample_xs  # noqa: E402


def test_default_domain_has_321_samples() -> None:
    path = sample_path(Coefficients(), Mode.QUADRATIC)
    assert len(path) == 321


def test_first_sample_moves_rest_draw_lines() -> None:
    path = sample_path(Coefficients(), Mode.LINEAR)
    ops = [cmd.op for cmd in path]
    assert ops[0] == MOVE_TO
    assert set(ops[1:]) == {LINE_TO}


def test_samples_cover_both_domain_ends() -> None:
    xs = sample_xs((-8, 8), 0.05)
    assert xs[0] == -8
    assert xs[-1] == pytest.approx(8)


def test_path_uses_canvas_transform() -> None:
    tf = CanvasTransform(width=600, height=600, scale=40)
    path = sample_path(Coefficients(a=2, b=1), Mode.LINEAR, domain=(0, 1), step=1, transform=tf)
    assert path.points == [(300, 260), (340, 180)]
    assert path.to_svg() == "M 300 260 L 340 180"


def test_sample_path_does_not_mutate_inputs() -> None:
    coeffs = Coefficients(1, 2, 3)
    first = sample_path(coeffs, Mode.CUBIC)
    second = sample_path(coeffs, Mode.CUBIC)
    assert coeffs == Coefficients(1, 2, 3)
    assert first.points == second.points
    assert first is not second


def test_invalid_step_rejected() -> None:
    with pytest.raises(ValueError):
        sample_xs((-8, 8), 0)


def test_grid_lines_every_scale_pixels() -> None:
    lines = grid_lines(CanvasTransform(600, 600, 40))
    assert len(lines) == 16
    assert lines[0] == 0
    assert lines[-1] == 600


@pytest.mark.parametrize("step", [0.7, 0.3, 3])
def test_samples_never_pass_domain_max(step) -> None:
    xs = sample_xs((-8, 8), step)
    assert xs[0] == -8
    assert xs[-1] <= 8
    assert xs[-1] + step > 8
