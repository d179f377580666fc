"""
curve.py - 다항식 곡선 모델
(x, 계수, 모드) -> y 계산 및 수식 문자열 표시
"""

from .models import Coefficients, Mode


def evaluate(x: float, coefficients: Coefficients, mode: Mode) -> float:
    """
    곡선 위의 y값 계산

    - LINEAR:    y = ax + b
    - QUADRATIC: y = ax² + bx + c
    - CUBIC:     y = ax³ + bx + c  (2차항 없음)
    - 그 외:     0
    """
    a, b, c = coefficients.a, coefficients.b, coefficients.c

    if mode == Mode.LINEAR:
        return a * x + b
    if mode == Mode.QUADRATIC:
        return a * x * x + b * x + c
    if mode == Mode.CUBIC:
        return a * x * x * x + b * x + c
    return 0.0


def format_equation(coefficients: Coefficients, mode: Mode) -> str:
    """화면 표시용 수식 (소수 둘째 자리)"""
    a, b, c = coefficients.a, coefficients.b, coefficients.c

    if mode == Mode.LINEAR:
        return f"y = {a:.2f}x + {b:.2f}"
    if mode == Mode.QUADRATIC:
        return f"y = {a:.2f}x² + {b:.2f}x + {c:.2f}"
    if mode == Mode.CUBIC:
        return f"y = {a:.2f}x³ + {b:.2f}x + {c:.2f}"
    return ""
