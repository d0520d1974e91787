"""
레이아웃 엔진
그룹 막대 차트의 순수 기하 계산 (렌더러와 히트 테스터가 공유)
"""
from dataclasses import dataclass
from typing import List, Optional

from inverter_chart_system.config import get_config

config = get_config()

# 기간 슬롯 중 막대 그룹이 차지하는 비율 (나머지 30% 는 그룹 간 간격)
GROUP_WIDTH_RATIO = 0.7
MULTI_BAR_RATIO = 0.85
SINGLE_BAR_RATIO = 0.6


@dataclass(frozen=True)
class Bounds:
    """논리 픽셀 공간의 사각형 (y 는 아래로 증가)"""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_x(self, px: float) -> bool:
        return self.x <= px <= self.right


@dataclass(frozen=True)
class ChartGeometry:
    """한 번의 렌더에 쓰이는 불변 기하 상수"""

    surface_width: float
    surface_height: float
    padding: float
    period_count: int
    max_entities_per_period: int
    max_value: float

    @property
    def chart_width(self) -> float:
        return self.surface_width - 2 * self.padding

    @property
    def chart_height(self) -> float:
        return self.surface_height - 2 * self.padding

    @property
    def period_slot_width(self) -> float:
        return self.chart_width / self.period_count

    @property
    def group_width(self) -> float:
        return self.period_slot_width * GROUP_WIDTH_RATIO

    @property
    def entity_slot_width(self) -> float:
        return self.group_width / self.max_entities_per_period

    @property
    def bar_width(self) -> float:
        if self.max_entities_per_period > 1:
            return self.entity_slot_width * MULTI_BAR_RATIO
        return self.group_width * SINGLE_BAR_RATIO

    def group_start_x(self, period_index: int) -> float:
        return (self.padding + self.period_slot_width * period_index
                + (self.period_slot_width - self.group_width) / 2)

    def bar_x(self, period_index: int, entity_index: int) -> float:
        return self.group_start_x(period_index) + entity_index * self.entity_slot_width

    def bar_height(self, value: float) -> float:
        if value > 0:
            return (value / self.max_value) * self.chart_height
        return 0.0

    def bar_y(self, value: float) -> float:
        return self.padding + self.chart_height - self.bar_height(value)

    def group_bounds(self, period_index: int) -> Bounds:
        return Bounds(self.group_start_x(period_index), self.padding,
                      self.group_width, self.chart_height)

    @property
    def single_bar_width(self) -> float:
        return self.group_width * SINGLE_BAR_RATIO

    def bar_width_for(self, bar_count: Optional[int] = None) -> float:
        """기간의 막대 수에 따른 막대 폭 (막대가 하나뿐인 기간은 단일 막대 폭)"""
        if bar_count is None or bar_count > 1:
            return self.bar_width
        return self.single_bar_width

    def bar_bounds(self, period_index: int, entity_index: int, value: float,
                   bar_count: Optional[int] = None) -> Bounds:
        return Bounds(self.bar_x(period_index, entity_index), self.bar_y(value),
                      self.bar_width_for(bar_count), self.bar_height(value))

    def fallback_bar_bounds(self, period_index: int, value: float) -> Bounds:
        """인버터 분해가 없는 기간의 단일 막대"""
        return self.bar_bounds(period_index, 0, value, bar_count=1)

    def period_label_x(self, period_index: int) -> float:
        return self.padding + self.period_slot_width * period_index + self.period_slot_width / 2

    def grid_lines(self, divisions: int) -> List[float]:
        """격자선 y 좌표 (위에서 아래로, divisions + 1 개)"""
        return [self.padding + (self.chart_height / divisions) * i for i in range(divisions + 1)]

    def grid_values(self, divisions: int) -> List[float]:
        return [self.max_value - (self.max_value / divisions) * i for i in range(divisions + 1)]


class LayoutEngine:
    """차트 기하 계산 클래스"""

    def __init__(self, padding: Optional[float] = None):
        self.padding = config.CHART_PADDING if padding is None else padding

    def compute(self, surface_width: float, surface_height: float, period_count: int,
                max_entities_per_period: int, max_value: float = 1.0) -> ChartGeometry:
        """
        표면 크기와 기간/인버터 수로부터 기하 상수 계산

        0 으로 나누지 않도록 기간 수, 인버터 수, 최대값은 최소 1 로 보정한다.
        """
        return ChartGeometry(
            surface_width=float(surface_width),
            surface_height=float(surface_height),
            padding=float(self.padding),
            period_count=max(int(period_count), 1),
            max_entities_per_period=max(int(max_entities_per_period), 1),
            max_value=max(float(max_value), 1.0),
        )

    def for_chart(self, chart_data, surface_width: float, surface_height: float) -> ChartGeometry:
        return self.compute(surface_width, surface_height, chart_data.period_count,
                            chart_data.max_entities_per_period, chart_data.max_value)
