"""
그룹 막대 차트 렌더러
레이아웃 엔진 기하 + 색상 팔레트로 격자, 막대, 축 레이블을 그린다
"""
import logging
from typing import Optional

from inverter_chart_system.config import get_config
from inverter_chart_system.core.layout_engine import ChartGeometry, LayoutEngine
from inverter_chart_system.core.models import IDLE, ChartData, HoverState
from inverter_chart_system.visualization.colors import color_for, fallback_gradient, gradient_stops
from inverter_chart_system.visualization.surface import DrawingSurface

logger = logging.getLogger(__name__)
config = get_config()

GRID_COLOR = '#F0F0F0'
LABEL_COLOR = '#6B7280'
LABEL_SIZE = 11
PERIOD_LABEL_OFFSET = 20
Y_LABEL_OFFSET_X = 10
Y_LABEL_OFFSET_Y = 4


def format_axis_value(value: float) -> str:
    """Y 축 값 표시 (천 단위 K, 정수 반올림)"""
    scaled = value / 1000
    # 0.5 는 위로 올림
    rounded = int(scaled + 0.5) if scaled >= 0 else -int(-scaled + 0.5)
    return f"{rounded}K"


class BarChartRenderer:
    """인버터별 그룹 막대 렌더러 (매 호출마다 전체 지우고 다시 그림)"""

    def __init__(self, layout: Optional[LayoutEngine] = None, corner_radius: Optional[float] = None,
                 grid_divisions: Optional[int] = None):
        self.layout = layout or LayoutEngine()
        self.corner_radius = config.BAR_CORNER_RADIUS if corner_radius is None else corner_radius
        self.grid_divisions = config.GRID_DIVISIONS if grid_divisions is None else grid_divisions

    def render(self, surface: DrawingSurface, chart_data: ChartData,
               hover: HoverState = IDLE) -> Optional[ChartGeometry]:
        """
        차트 전체를 다시 그린다

        Returns:
            사용한 기하 정보, 데이터가 없으면 None (그리기 호출 없음)
        """
        if not chart_data.has_data:
            return None

        geometry = self.layout.for_chart(chart_data, surface.width, surface.height)
        surface.clear()

        self._draw_grid(surface, geometry)
        bar_count = self._draw_bars(surface, geometry, chart_data, hover)
        self._draw_period_labels(surface, geometry, chart_data)
        self._draw_y_labels(surface, geometry)

        logger.debug("차트 렌더 완료: 기간 %d개, 막대 %d개", chart_data.period_count, bar_count)
        return geometry

    def _draw_grid(self, surface, geometry):
        left = geometry.padding
        right = geometry.surface_width - geometry.padding
        for y in geometry.grid_lines(self.grid_divisions):
            surface.line(left, y, right, y, GRID_COLOR, 1)

    def _draw_bars(self, surface, geometry, chart_data, hover) -> int:
        drawn = 0
        for period_index in range(chart_data.period_count):
            samples = chart_data.samples_for(period_index)
            hovered_period = hover.period_index == period_index

            if not samples:
                bounds = geometry.fallback_bar_bounds(period_index, chart_data.fallback_value(period_index))
                if bounds.height <= 0:
                    continue
                top, bottom = fallback_gradient(hovered_period)
                surface.rounded_bar(bounds.x, bounds.y, bounds.width, bounds.height,
                                    self.corner_radius, top, bottom)
                drawn += 1
                continue

            for entity_index, sample in enumerate(samples):
                bounds = geometry.bar_bounds(period_index, entity_index, sample.value, len(samples))
                # 높이 0 막대는 그리지 않음 (히트 테스트 영역은 유지)
                if bounds.height <= 0:
                    continue
                hovered = hovered_period and hover.entity_index == entity_index
                top, bottom = gradient_stops(color_for(entity_index), hovered)
                surface.rounded_bar(bounds.x, bounds.y, bounds.width, bounds.height,
                                    self.corner_radius, top, bottom)
                drawn += 1
        return drawn

    def _draw_period_labels(self, surface, geometry, chart_data):
        y = geometry.surface_height - PERIOD_LABEL_OFFSET
        for period_index, label in enumerate(chart_data.periods):
            surface.text(geometry.period_label_x(period_index), y, label,
                         LABEL_COLOR, LABEL_SIZE, 'center')

    def _draw_y_labels(self, surface, geometry):
        x = geometry.padding - Y_LABEL_OFFSET_X
        lines = geometry.grid_lines(self.grid_divisions)
        values = geometry.grid_values(self.grid_divisions)
        for y, value in zip(lines, values):
            surface.text(x, y + Y_LABEL_OFFSET_Y, format_axis_value(value),
                         LABEL_COLOR, LABEL_SIZE, 'right')
