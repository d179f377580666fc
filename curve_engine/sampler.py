"""
sampler.py - 곡선 샘플링
모델 곡선을 촘촘히 샘플링해 캔버스 좌표의 꺾은선(CurvePath)으로 변환
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple, Iterator, Optional

import numpy as np

from .curve import evaluate
from .models import Coefficients, Mode, CanvasTransform


MOVE_TO = "M"  # 새 선분 시작
LINE_TO = "L"  # 이전 점과 직선 연결


@dataclass(frozen=True)
class PathCommand:
    """경로 명령 하나 (캔버스 좌표)"""
    op: str
    x: float
    y: float


@dataclass
class CurvePath:
    """캔버스 좌표 꺾은선"""
    commands: List[PathCommand] = field(default_factory=list)

    def __len__(self):
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def points(self) -> List[Tuple[float, float]]:
        return [(cmd.x, cmd.y) for cmd in self.commands]

    def to_svg(self) -> str:
        """SVG path 문자열 ("M x y L x y ...")"""
        return " ".join(f"{cmd.op} {cmd.x:g} {cmd.y:g}" for cmd in self.commands)


def sample_xs(domain: Tuple[float, float] = (-8.0, 8.0), step: float = 0.05) -> np.ndarray:
    """
    구간 [min, max]를 step 간격으로 나눈 x값 (양 끝 포함)

    누적 덧셈 오차로 마지막 점이 빠지지 않도록 인덱스로 계산한다.
    step이 구간을 나누어 떨어뜨리지 않으면 max를 넘지 않는 점까지만.
    """
    lo, hi = domain
    if step <= 0:
        raise ValueError(f"step은 양수여야 함: {step}")
    if hi < lo:
        raise ValueError(f"구간 오류: {domain}")
    count = int(math.floor((hi - lo) / step + 1e-9)) + 1
    return lo + np.arange(count) * step


def sample_path(
    coefficients: Coefficients,
    mode: Mode,
    domain: Tuple[float, float] = (-8.0, 8.0),
    step: float = 0.05,
    transform: Optional[CanvasTransform] = None
) -> CurvePath:
    """
    곡선을 샘플링하여 CurvePath 생성

    첫 점은 MOVE_TO, 이후 점은 모두 LINE_TO.
    호출할 때마다 새로 계산하며 입력은 바꾸지 않는다.
    """
    if transform is None:
        transform = CanvasTransform()

    commands = []
    for i, x in enumerate(sample_xs(domain, step)):
        x = float(x)
        y = evaluate(x, coefficients, mode)
        px, py = transform.to_canvas(x, y)
        commands.append(PathCommand(MOVE_TO if i == 0 else LINE_TO, px, py))

    return CurvePath(commands)


def grid_lines(transform: CanvasTransform) -> List[float]:
    """격자선 위치 (scale 픽셀 간격, 0 ~ width)"""
    count = int(transform.width // transform.scale)
    return [i * transform.scale for i in range(count + 1)]
