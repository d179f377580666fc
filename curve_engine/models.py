"""
models.py - 핵심 데이터 모델 정의
Mode, Coefficients, Point, CanvasTransform, GameConfig, GameState 클래스
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple


class Mode(Enum):
    """곡선 종류 (다항식 차수)"""
    LINEAR = "linear"        # 1차: y = ax + b
    QUADRATIC = "quadratic"  # 2차: y = ax² + bx + c
    CUBIC = "cubic"          # 3차: y = ax³ + bx + c

    @classmethod
    def from_value(cls, value) -> 'Mode':
        """문자열(또는 Mode)에서 Mode 변환"""
        if isinstance(value, Mode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"알 수 없는 모드: {value!r} (가능: {choices})")


# 모드별 목표 점 개수
POINT_COUNTS = {
    Mode.LINEAR: 2,
    Mode.QUADRATIC: 3,
    Mode.CUBIC: 4,
}


def point_count_for(mode: Mode) -> int:
    """모드에 필요한 목표 점 개수"""
    return POINT_COUNTS[mode]


def active_coefficients(mode: Mode) -> Tuple[str, ...]:
    """모드에서 사용하는 계수 이름 (1차에서는 c를 쓰지 않음)"""
    if mode == Mode.LINEAR:
        return ('a', 'b')
    return ('a', 'b', 'c')


@dataclass(frozen=True)
class Coefficients:
    """
    다항식 계수
    - c는 1차(LINEAR) 모드에서 무시된다
    - 불변 객체이므로 곡선 캐시의 키로 사용 가능
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0

    NAMES = ('a', 'b', 'c')

    def with_value(self, which: str, value: float) -> 'Coefficients':
        """계수 하나만 바꾼 새 객체 반환"""
        if which not in self.NAMES:
            raise ValueError(f"알 수 없는 계수: {which!r} (가능: a, b, c)")
        values = self.to_dict()
        values[which] = float(value)
        return Coefficients(**values)

    def to_dict(self) -> dict:
        return {'a': self.a, 'b': self.b, 'c': self.c}

    @classmethod
    def from_dict(cls, data: dict) -> 'Coefficients':
        return cls(
            a=float(data.get('a', 1.0)),
            b=float(data.get('b', 0.0)),
            c=float(data.get('c', 0.0)),
        )


# 세션 시작 / 모드 변경 / 레벨 통과 시 초기값
DEFAULT_COEFFICIENTS = Coefficients(1.0, 0.0, 0.0)


@dataclass(frozen=True)
class Point:
    """목표 점 (모델 좌표). 생성기는 정수 좌표만 만든다"""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data) -> 'Point':
        """{'x':..,'y':..} 또는 [x, y] 형태 지원"""
        if isinstance(data, dict):
            return cls(x=data['x'], y=data['y'])
        if isinstance(data, (list, tuple)) and len(data) >= 2:
            return cls(x=data[0], y=data[1])
        raise ValueError(f"점 형식 오류: [x, y] 또는 {{x, y}} 필요, 받은 값 {data!r}")


# 목표 점 집합 (순서 유지, x는 서로 다름)
TargetSet = List[Point]


@dataclass(frozen=True)
class CanvasTransform:
    """
    모델 좌표 -> 캔버스(그리기) 좌표 변환
    캔버스의 y축은 아래로 증가하므로 y는 부호가 뒤집힌다
    """
    width: float = 600
    height: float = 600
    scale: float = 40

    def to_canvas_x(self, x: float) -> float:
        return self.width / 2 + x * self.scale

    def to_canvas_y(self, y: float) -> float:
        return self.height / 2 - y * self.scale

    def to_canvas(self, x: float, y: float) -> Tuple[float, float]:
        return self.to_canvas_x(x), self.to_canvas_y(y)


@dataclass
class GameConfig:
    """게임 설정값"""
    # 목표 점 좌표 범위 (양 끝 포함)
    coord_min: int = -4
    coord_max: int = 3

    # 정답 판정 허용 오차
    tolerance: float = 0.4

    # 곡선 샘플링 구간 / 간격
    domain: Tuple[float, float] = (-8.0, 8.0)
    step: float = 0.05

    # 캔버스
    width: int = 600
    height: int = 600
    scale: int = 40

    default_mode: Mode = Mode.QUADRATIC

    # 슬라이더 입력 범위
    coefficient_min: float = -5.0
    coefficient_max: float = 5.0
    coefficient_step: float = 0.1

    def transform(self) -> CanvasTransform:
        return CanvasTransform(width=self.width, height=self.height, scale=self.scale)

    def validate_coefficient(self, which: str, value: float) -> float:
        """입력 범위 확인 (CLI / API 입력용)"""
        value = float(value)
        if not (self.coefficient_min <= value <= self.coefficient_max):
            raise ValueError(
                f"계수 {which}={value} 가 범위를 벗어남 "
                f"[{self.coefficient_min}, {self.coefficient_max}]"
            )
        return value


@dataclass
class GameState:
    """게임 상태 (GameSession이 단독 소유)"""
    mode: Mode
    coefficients: Coefficients = DEFAULT_COEFFICIENTS
    targets: TargetSet = field(default_factory=list)
    last_check_succeeded: Optional[bool] = None

    def to_dict(self) -> dict:
        return {
            'mode': self.mode.value,
            'coefficients': self.coefficients.to_dict(),
            'targets': [p.to_dict() for p in self.targets],
            'last_check_succeeded': self.last_check_succeeded,
        }

    def __repr__(self):
        pts = ", ".join(f"({p.x},{p.y})" for p in self.targets)
        c = self.coefficients
        return (f"GameState({self.mode.name}, a={c.a}, b={c.b}, c={c.c}, "
                f"[{pts}])")
