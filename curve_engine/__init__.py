"""
Curve Engine - 다항식 곡선 맞추기 퍼즐

계수를 조절해 곡선이 무작위 목표 점을 모두 지나도록 만드는 학습용 게임 엔진
"""

from .models import (
    Mode,
    Coefficients,
    Point,
    TargetSet,
    CanvasTransform,
    GameConfig,
    GameState,
    DEFAULT_COEFFICIENTS,
    point_count_for,
    active_coefficients
)

from .curve import (
    evaluate,
    format_equation
)

from .generator import PointGenerator

from .sampler import (
    PathCommand,
    CurvePath,
    sample_path,
    grid_lines
)

from .validator import (
    PointResult,
    CheckReport,
    SolutionChecker,
    check_solution
)

from .session import (
    Renderer,
    NotificationUI,
    GameSession
)

from .visualizer import (
    GridConfig,
    GraphVisualizer,
)

from .localization import Localizer

from .preferences import (
    PreferenceStore,
    MemoryPreferenceStore,
    JsonPreferenceStore
)


__version__ = "1.0.0"
__all__ = [
    # Models
    "Mode",
    "Coefficients",
    "Point",
    "TargetSet",
    "CanvasTransform",
    "GameConfig",
    "GameState",
    "DEFAULT_COEFFICIENTS",
    "point_count_for",
    "active_coefficients",

    # Curve
    "evaluate",
    "format_equation",

    # Generator
    "PointGenerator",

    # Sampler
    "PathCommand",
    "CurvePath",
    "sample_path",
    "grid_lines",

    # Validator
    "PointResult",
    "CheckReport",
    "SolutionChecker",
    "check_solution",

    # Session
    "Renderer",
    "NotificationUI",
    "GameSession",

    # Visualizer
    "GridConfig",
    "GraphVisualizer",

    # Localization / Preferences
    "Localizer",
    "PreferenceStore",
    "MemoryPreferenceStore",
    "JsonPreferenceStore",
]
