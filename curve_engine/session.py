"""
session.py - 게임 세션 (상태 + 전이)
모드, 계수, 목표 점을 관리하고 렌더러/알림 UI에 결과를 전달
"""

import logging
from typing import Callable, List, Optional, Tuple, Protocol

from .generator import PointGenerator
from .models import (
    Mode, Coefficients, GameConfig, GameState, TargetSet,
    DEFAULT_COEFFICIENTS, point_count_for
)
from .sampler import CurvePath, sample_path
from .validator import SolutionChecker, CheckReport

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """곡선/목표 점을 그리는 쪽 (캔버스 좌표로 전달받음)"""

    def render(self, path: CurvePath, targets: List[Tuple[float, float]]) -> None:
        ...


class NotificationUI(Protocol):
    """판정 결과 알림. 닫히면 on_acknowledge를 호출해야 한다"""

    def notify(self, succeeded: bool, on_acknowledge: Callable[[], None]) -> None:
        ...


class GameSession:
    """
    게임 세션 - 단일 GameState를 단독 소유

    전이:
    1. set_coefficient: 계수 하나 변경 (곡선 재계산)
    2. change_mode: 모드 변경 + 계수 초기화 + 목표 점 재생성
    3. check: 판정 후 알림 (상태는 바꾸지 않음)
    4. acknowledge: 알림 닫기, 성공이었으면 같은 모드로 다음 레벨
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        generator: Optional[PointGenerator] = None,
        renderer: Optional[Renderer] = None,
        notifier: Optional[NotificationUI] = None,
        seed: Optional[int] = None
    ):
        """
        Args:
            config: 게임 설정 (None이면 기본값)
            generator: 목표 점 생성기 (테스트에서 난수 주입용)
            renderer: 곡선을 받아 그릴 객체
            notifier: 판정 결과 알림 UI
            seed: generator가 없을 때 사용할 랜덤 시드
        """
        self.config = config or GameConfig()
        self.generator = generator or PointGenerator(
            seed=seed,
            coord_min=self.config.coord_min,
            coord_max=self.config.coord_max
        )
        self.checker = SolutionChecker(self.config.tolerance)
        self.transform = self.config.transform()
        self.renderer = renderer
        self.notifier = notifier

        self.last_report: Optional[CheckReport] = None
        self.awaiting_acknowledge = False

        # 알림 번호: 레벨이 바뀌거나 다시 판정하면 이전 알림의 콜백은 무효
        self._notification_id = 0

        # 곡선 캐시: ((계수, 모드), 경로)
        self._path_cache: Optional[Tuple[Tuple[Coefficients, Mode], CurvePath]] = None

        mode = self.config.default_mode
        self._state = GameState(
            mode=mode,
            coefficients=DEFAULT_COEFFICIENTS,
            targets=self.generator.generate(point_count_for(mode))
        )
        self._publish()

    # --------------------------------------------------------
    # 상태 조회
    # --------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def coefficients(self) -> Coefficients:
        return self._state.coefficients

    @property
    def targets(self) -> TargetSet:
        return list(self._state.targets)

    @property
    def curve_path(self) -> CurvePath:
        """현재 곡선 경로 (계수/모드가 같으면 캐시 사용)"""
        key = (self._state.coefficients, self._state.mode)
        if self._path_cache is None or self._path_cache[0] != key:
            path = sample_path(
                self._state.coefficients,
                self._state.mode,
                domain=self.config.domain,
                step=self.config.step,
                transform=self.transform
            )
            self._path_cache = (key, path)
        return self._path_cache[1]

    @property
    def canvas_targets(self) -> List[Tuple[float, float]]:
        """목표 점을 곡선과 같은 변환으로 옮긴 좌표"""
        return [self.transform.to_canvas(p.x, p.y) for p in self._state.targets]

    # --------------------------------------------------------
    # 전이
    # --------------------------------------------------------
    def set_coefficient(self, which: str, value: float):
        """계수 하나 덮어쓰기"""
        self._state.coefficients = self._state.coefficients.with_value(which, value)
        self._publish()

    def change_mode(self, new_mode):
        """모드 변경 = 새 모드의 새 레벨 시작"""
        mode = Mode.from_value(new_mode)
        logger.debug("모드 변경: %s -> %s", self._state.mode.value, mode.value)
        self._state.mode = mode
        self._reset_level()

    def next_level(self):
        """같은 모드로 다음 레벨"""
        logger.info("레벨 통과, 새 목표 점 생성 (%s)", self._state.mode.value)
        self._reset_level()

    def check(self) -> bool:
        """
        현재 계수로 판정하고 결과를 알림 UI로 보냄
        모드/계수/목표 점은 바꾸지 않는다
        """
        report = self.checker.check_detailed(
            self._state.coefficients,
            self._state.mode,
            self._state.targets
        )
        succeeded = report.succeeded
        self.last_report = report
        self._state.last_check_succeeded = succeeded
        self.awaiting_acknowledge = True
        self._notification_id += 1
        token = self._notification_id

        if self.notifier is not None:
            self.notifier.notify(succeeded, lambda: self._acknowledge_notification(token, succeeded))
        return succeeded

    def acknowledge(self, result: Optional[bool] = None) -> bool:
        """
        알림 닫기

        Args:
            result: 닫은 알림의 판정 결과 (None이면 마지막 판정)

        Returns:
            다음 레벨로 넘어갔으면 True (열린 알림이 없으면 아무것도 하지 않음)
        """
        if not self.awaiting_acknowledge:
            return False
        if result is None:
            result = bool(self._state.last_check_succeeded)
        self.awaiting_acknowledge = False

        if result:
            self.next_level()
            return True
        return False

    # --------------------------------------------------------
    # 내부
    # --------------------------------------------------------
    def _acknowledge_notification(self, token: int, succeeded: bool) -> bool:
        if token != self._notification_id:
            logger.debug("지난 알림 무시 (#%d, 현재 #%d)", token, self._notification_id)
            return False
        return self.acknowledge(succeeded)

    def _reset_level(self):
        self._state.coefficients = DEFAULT_COEFFICIENTS
        self._state.targets = self.generator.generate(point_count_for(self._state.mode))
        self._state.last_check_succeeded = None
        self.last_report = None
        self.awaiting_acknowledge = False
        self._notification_id += 1
        self._publish()

    def _publish(self):
        if self.renderer is not None:
            self.renderer.render(self.curve_path, self.canvas_targets)
