"""
generator.py - 목표 점 생성기
PointGenerator 클래스 (중복 x 거절 방식)
"""

import logging
import random
from typing import Optional, Set

from .models import Point, TargetSet, Mode, point_count_for

logger = logging.getLogger(__name__)


class PointGenerator:
    """
    목표 점 생성기

    x는 [coord_min, coord_max] 정수 중 균등 추출하고, 이미 쓴 x면 다시 뽑는다.
    x가 채택되면 y를 같은 범위에서 독립적으로 뽑는다.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        coord_min: int = -4,
        coord_max: int = 3
    ):
        """
        Args:
            seed: 랜덤 시드 (재현성용)
            rng: 직접 주입할 난수 생성기 (seed보다 우선)
            coord_min, coord_max: 좌표 범위 (양 끝 포함)
        """
        if coord_min > coord_max:
            raise ValueError(f"좌표 범위 오류: {coord_min} > {coord_max}")
        self.rng = rng if rng is not None else random.Random(seed)
        self.coord_min = coord_min
        self.coord_max = coord_max

    @property
    def available_x(self) -> int:
        """뽑을 수 있는 서로 다른 x 개수"""
        return self.coord_max - self.coord_min + 1

    def generate(self, count: int) -> TargetSet:
        """
        서로 다른 x를 가진 목표 점 count개 생성

        count가 가능한 x 개수를 넘으면 끝나지 않으므로 미리 막는다.
        """
        if not 1 <= count <= self.available_x:
            raise ValueError(
                f"점 개수 {count} 불가 (1 ~ {self.available_x})"
            )

        used_x: Set[int] = set()
        points: TargetSet = []

        while len(points) < count:
            x = self.rng.randint(self.coord_min, self.coord_max)
            if x in used_x:
                continue
            used_x.add(x)
            points.append(Point(
                x=x,
                y=self.rng.randint(self.coord_min, self.coord_max)
            ))

        logger.debug("목표 점 생성: %s", [(p.x, p.y) for p in points])
        return points

    def generate_for_mode(self, mode: Mode) -> TargetSet:
        """모드에 맞는 개수로 생성"""
        return self.generate(point_count_for(mode))
