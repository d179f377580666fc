"""
visualizer.py - 그래프 시각화 엔진
격자, 좌표축, 곡선 경로, 목표 점을 캔버스 좌표 그대로 그린다
"""

import io
import base64
from typing import List, Optional, Tuple
from dataclasses import dataclass

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .models import CanvasTransform
from .sampler import CurvePath, grid_lines


# ============================================================
# 설정값
# ============================================================
@dataclass
class GridConfig:
    # 캔버스 (인치)
    fig_size: float = 6.0
    dpi: int = 100

    # 도형 크기 (픽셀, 캔버스 좌표)
    grid_dot_radius: float = 2.0
    target_radius: float = 9.0

    # 선 굵기
    grid_line_width: float = 0.5
    axis_line_width: float = 1.5
    curve_line_width: float = 2.5

    # 색상 팔레트 (light)
    color_background: str = '#ffffff'
    color_grid: str = '#e3e7ee'
    color_axis: str = '#5b6472'
    color_curve: str = '#3b82f6'
    color_target: str = '#ef4444'

    # 색상 팔레트 (dark)
    dark_background: str = '#151922'
    dark_grid: str = '#2a3140'
    dark_axis: str = '#a0a8b8'
    dark_curve: str = '#60a5fa'
    dark_target: str = '#f87171'

    def palette(self, theme: str = "light") -> dict:
        if theme == "dark":
            return {
                'background': self.dark_background,
                'grid': self.dark_grid,
                'axis': self.dark_axis,
                'curve': self.dark_curve,
                'target': self.dark_target,
            }
        return {
            'background': self.color_background,
            'grid': self.color_grid,
            'axis': self.color_axis,
            'curve': self.color_curve,
            'target': self.color_target,
        }


# ============================================================
# 시각화 엔진 메인
# ============================================================
class GraphVisualizer:
    """
    곡선 그래프 그리기

    GameSession의 renderer로 붙이면 상태가 바뀔 때마다 그린다
    (마지막 이미지는 last_image에 base64로 보관).
    """

    def __init__(
        self,
        transform: Optional[CanvasTransform] = None,
        config: Optional[GridConfig] = None,
        theme: str = "light"
    ):
        self.transform = transform or CanvasTransform()
        self.config = config or GridConfig()
        self.theme = theme
        self.last_image: Optional[str] = None

    def render(self, path: CurvePath, targets: List[Tuple[float, float]]) -> None:
        self.last_image = self.draw(path, targets)

    def draw(
        self,
        path: CurvePath,
        targets: List[Tuple[float, float]],
        save_path: Optional[str] = None
    ) -> str:
        cfg = self.config
        tf = self.transform
        colors = cfg.palette(self.theme)

        fig, ax = plt.subplots(figsize=(cfg.fig_size, cfg.fig_size))
        fig.patch.set_facecolor(colors['background'])
        ax.set_facecolor(colors['background'])

        # 1. 격자
        self._draw_grid(ax, colors)

        # 2. 좌표축 (캔버스 중앙)
        ax.plot([0, tf.width], [tf.height / 2, tf.height / 2],
                color=colors['axis'], lw=cfg.axis_line_width, zorder=2)
        ax.plot([tf.width / 2, tf.width / 2], [0, tf.height],
                color=colors['axis'], lw=cfg.axis_line_width, zorder=2)

        # 3. 곡선
        self._draw_path(ax, path, colors)

        # 4. 목표 점
        for (px, py) in targets:
            ax.add_patch(Circle((px, py), cfg.target_radius,
                                facecolor=colors['target'], edgecolor='none', zorder=5))

        # 캔버스 좌표: y는 아래로 증가
        ax.set_xlim(0, tf.width)
        ax.set_ylim(tf.height, 0)
        ax.set_aspect('equal')
        ax.axis('off')
        plt.tight_layout(pad=0)

        if save_path:
            fig.savefig(save_path, dpi=cfg.dpi, facecolor=colors['background'])

        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=cfg.dpi, facecolor=colors['background'])
        buf.seek(0)
        img_base64 = base64.b64encode(buf.read()).decode('utf-8')
        plt.close(fig)
        return img_base64

    def _draw_grid(self, ax, colors):
        cfg = self.config
        tf = self.transform
        positions = grid_lines(tf)

        for pos in positions:
            ax.plot([pos, pos], [0, tf.height], color=colors['grid'],
                    lw=cfg.grid_line_width, zorder=1)
            ax.plot([0, tf.width], [pos, pos], color=colors['grid'],
                    lw=cfg.grid_line_width, zorder=1)

        # 격자 교차점
        gx, gy = np.meshgrid(positions, positions)
        for x, y in zip(gx.ravel(), gy.ravel()):
            ax.add_patch(Circle((x, y), cfg.grid_dot_radius,
                                facecolor=colors['grid'], edgecolor='none', zorder=1))

    def _draw_path(self, ax, path: CurvePath, colors):
        """MOVE_TO에서 끊고 LINE_TO는 이어 그림"""
        segment_x: List[float] = []
        segment_y: List[float] = []
        for cmd in path:
            if cmd.op == "M" and segment_x:
                ax.plot(segment_x, segment_y, color=colors['curve'],
                        lw=self.config.curve_line_width, zorder=4)
                segment_x, segment_y = [], []
            segment_x.append(cmd.x)
            segment_y.append(cmd.y)
        if segment_x:
            ax.plot(segment_x, segment_y, color=colors['curve'],
                    lw=self.config.curve_line_width, zorder=4)

    def save_to_file(self, path: CurvePath, targets, filepath: str):
        """파일로 저장"""
        self.draw(path, targets, save_path=filepath)
