import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from curve_engine import Coefficients, Mode, evaluate, format_equation  # noqa: E402


def test_linear_ignores_c() -> None:
    coeffs = Coefficients(a=2, b=1, c=100)
    assert evaluate(3, coeffs, Mode.LINEAR) == 7


def test_quadratic_formula() -> None:
    coeffs = Coefficients(a=1, b=-2, c=3)
    assert evaluate(2, coeffs, Mode.QUADRATIC) == 4 - 4 + 3


def test_cubic_has_no_quadratic_term() -> None:
    assert evaluate(2, Coefficients(1, 0, 0), Mode.CUBIC) == 8
    assert evaluate(-1, Coefficients(2, 3, 1), Mode.CUBIC) == -2 - 3 + 1


def test_unknown_mode_returns_zero() -> None:
    assert evaluate(5, Coefficients(3, 3, 3), "quartic") == 0


@pytest.mark.parametrize("mode", list(Mode))
def test_evaluate_is_deterministic(mode: Mode) -> None:
    coeffs = Coefficients(0.7, -1.3, 2.2)
    assert evaluate(1.5, coeffs, mode) == evaluate(1.5, coeffs, mode)


def test_format_equation() -> None:
    coeffs = Coefficients(1, 0, 0)
    assert format_equation(coeffs, Mode.LINEAR) == "y = 1.00x + 0.00"
    assert format_equation(coeffs, Mode.QUADRATIC) == "y = 1.00x² + 0.00x + 0.00"
    assert format_equation(Coefficients(-1.5, 2, 0.25), Mode.CUBIC) == "y = -1.50x³ + 2.00x + 0.25"
    assert format_equation(coeffs, None) == ""
