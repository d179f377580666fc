"""
validator.py - 정답 판정 모듈
현재 곡선이 모든 목표 점을 허용 오차 안에서 지나는지 검증
"""

import logging
from typing import List, Dict
from dataclasses import dataclass, field

from .curve import evaluate
from .models import Coefficients, Mode, Point, TargetSet

logger = logging.getLogger(__name__)


DEFAULT_TOLERANCE = 0.4


@dataclass
class PointResult:
    """목표 점 하나에 대한 판정 결과"""
    point: Point
    curve_y: float
    residual: float  # |곡선 y - 목표 y|
    passed: bool

    def __str__(self):
        status = "✓" if self.passed else "✗"
        return (f"{status} ({self.point.x}, {self.point.y}) "
                f"곡선 y={self.curve_y:.2f}, 오차={self.residual:.2f}")


@dataclass
class CheckReport:
    """전체 판정 보고서"""
    tolerance: float
    results: List[PointResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """모든 점 통과 시 성공 (점이 없으면 참)"""
        return all(r.passed for r in self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    def add_result(self, result: PointResult):
        self.results.append(result)

    def get_failures(self) -> List[PointResult]:
        return [r for r in self.results if not r.passed]

    def to_dict(self) -> Dict:
        return {
            'succeeded': self.succeeded,
            'tolerance': self.tolerance,
            'passed_count': self.passed_count,
            'total': len(self.results),
            'results': [
                {
                    'point': r.point.to_dict(),
                    'curve_y': r.curve_y,
                    'residual': r.residual,
                    'passed': r.passed
                }
                for r in self.results
            ]
        }

    def __str__(self):
        lines = [
            "=== 판정 결과 ===",
            f"전체 결과: {'✓ 성공' if self.succeeded else '✗ 실패'}",
            f"통과: {self.passed_count}/{len(self.results)} (허용 오차 {self.tolerance})",
        ]
        for r in self.results:
            lines.append(f"  {r}")
        return "\n".join(lines)


class SolutionChecker:
    """
    정답 판정 클래스

    각 목표 점에서 |f(x) - y| < tolerance 이면 통과,
    모든 점이 통과해야 성공.
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE):
        self.tolerance = tolerance

    def check_detailed(
        self,
        coefficients: Coefficients,
        mode: Mode,
        targets: TargetSet
    ) -> CheckReport:
        """점별 결과를 포함한 판정"""
        report = CheckReport(tolerance=self.tolerance)

        for p in targets:
            y = evaluate(p.x, coefficients, mode)
            residual = abs(y - p.y)
            report.add_result(PointResult(
                point=p,
                curve_y=y,
                residual=residual,
                passed=residual < self.tolerance
            ))

        logger.debug("판정: %s %d/%d", mode.value if isinstance(mode, Mode) else mode,
                     report.passed_count, len(report.results))
        return report

    def check(
        self,
        coefficients: Coefficients,
        mode: Mode,
        targets: TargetSet
    ) -> bool:
        """성공 여부만 반환"""
        return self.check_detailed(coefficients, mode, targets).succeeded


def check_solution(
    coefficients: Coefficients,
    mode: Mode,
    targets: TargetSet,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """편의 함수"""
    return SolutionChecker(tolerance).check(coefficients, mode, targets)
