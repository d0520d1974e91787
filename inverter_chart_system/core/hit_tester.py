"""
히트 테스트 모듈
포인터 픽셀 좌표를 (기간, 인버터) 인덱스로 역변환
"""
from typing import Optional, Tuple

from inverter_chart_system.config import get_config
from inverter_chart_system.core.layout_engine import ChartGeometry
from inverter_chart_system.core.models import IDLE, ChartData, HoverState

config = get_config()


def to_logical(x: float, y: float, logical_size: Tuple[float, float],
               displayed_size: Optional[Tuple[float, float]] = None) -> Tuple[float, float]:
    """
    표시 크기 기준 포인터 좌표를 캔버스 논리 좌표로 변환

    Args:
        x, y: 표시된 캔버스 기준 포인터 좌표
        logical_size: 캔버스 논리 해상도 (width, height)
        displayed_size: 화면에 실제 표시된 크기 (없으면 변환하지 않음)
    """
    if not displayed_size:
        return x, y
    displayed_width, displayed_height = displayed_size
    logical_width, logical_height = logical_size
    if displayed_width > 0:
        x = x * logical_width / displayed_width
    if displayed_height > 0:
        y = y * logical_height / displayed_height
    return x, y


class HitTester:
    """그룹 막대 히트 테스트 클래스"""

    def __init__(self, scale_pointer: Optional[bool] = None):
        self.scale_pointer = config.HIT_TEST_SCALE_POINTER if scale_pointer is None else scale_pointer

    def hit_test(self, geometry: ChartGeometry, chart_data: ChartData, x: float, y: float,
                 displayed_size: Optional[Tuple[float, float]] = None) -> HoverState:
        """
        포인터 위치에 해당하는 HoverState 반환

        x 좌표만으로 판정하며, 그룹은 왼쪽부터 겹치지 않게 배치되므로
        첫 번째로 일치하는 기간에서 탐색을 멈춘다.
        """
        if self.scale_pointer:
            x, y = to_logical(x, y, (geometry.surface_width, geometry.surface_height), displayed_size)

        for period_index in range(chart_data.period_count):
            group_start = geometry.group_start_x(period_index)
            if not group_start <= x <= group_start + geometry.group_width:
                continue

            samples = chart_data.samples_for(period_index)
            width = geometry.bar_width_for(len(samples))
            for entity_index in range(len(samples)):
                bar_x = geometry.bar_x(period_index, entity_index)
                if bar_x <= x <= bar_x + width:
                    return HoverState(period_index, entity_index)
            # 그룹 안이지만 막대 사이 간격이거나 인버터 분해가 없는 기간
            return HoverState(period_index, None)

        return IDLE
