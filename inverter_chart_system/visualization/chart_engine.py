"""
인터랙티브 그룹 막대 차트 엔진
데이터 변경과 호버 전이 시 전체 다시 그리기, 포인터 이벤트 처리, 툴팁 계산
"""
import logging
from typing import Optional, Tuple

from inverter_chart_system.config import get_config
from inverter_chart_system.core.data_normalizer import DataNormalizer
from inverter_chart_system.core.hit_tester import HitTester
from inverter_chart_system.core.hover_state import HoverStateMachine
from inverter_chart_system.core.models import ChartData, HoverState
from inverter_chart_system.core.tooltip import TooltipBox, TooltipContent, TooltipPositioner
from inverter_chart_system.visualization.renderer import BarChartRenderer
from inverter_chart_system.visualization.surface import DrawingSurface, MatplotlibSurface

logger = logging.getLogger(__name__)
config = get_config()


class InverterChartEngine:
    """그리기 표면 하나를 독점하는 차트 엔진"""

    def __init__(self, surface: Optional[DrawingSurface] = None,
                 renderer: Optional[BarChartRenderer] = None,
                 hit_tester: Optional[HitTester] = None,
                 tooltip: Optional[TooltipPositioner] = None,
                 normalizer: Optional[DataNormalizer] = None):
        self.surface = surface or MatplotlibSurface()
        self.renderer = renderer or BarChartRenderer()
        self.hit_tester = hit_tester or HitTester()
        self.tooltip = tooltip or TooltipPositioner()
        self.normalizer = normalizer or DataNormalizer()
        self.hover_machine = HoverStateMachine()
        self.chart_data = ChartData()
        self.geometry = None
        self.redraw_count = 0

    @property
    def hover(self) -> HoverState:
        return self.hover_machine.hover

    @property
    def has_data(self) -> bool:
        return self.chart_data.has_data

    def set_data(self, periods=None, period_series=None, fallback_series=None) -> ChartData:
        """새 데이터 스냅샷 적용 후 다시 그리기"""
        return self.set_chart_data(self.normalizer.normalize(periods, period_series, fallback_series))

    def set_chart_data(self, chart_data: ChartData) -> ChartData:
        logger.debug("차트 데이터 갱신: 기간 %d개, 데이터 있음=%s",
                     chart_data.period_count, chart_data.has_data)
        self.chart_data = chart_data
        self.hover_machine.reset()
        self.render()
        return chart_data

    def render(self):
        previous = self.geometry
        self.geometry = self.renderer.render(self.surface, self.chart_data, self.hover)
        if self.geometry is not None:
            self.redraw_count += 1
        elif previous is not None:
            # 데이터가 사라지면 이전 차트를 지운다
            self.surface.clear()

    def close(self):
        close = getattr(self.surface, "close", None)
        if close is not None:
            close()

    def pointer_move(self, x: float, y: float,
                     displayed_size: Optional[Tuple[float, float]] = None) -> HoverState:
        """
        캔버스 기준 포인터 이동 처리

        Args:
            x, y: 표시된 캔버스 기준 포인터 좌표
            displayed_size: 화면에 표시된 캔버스 크기 (논리 해상도와 다를 때)
        """
        # 데이터가 없으면 호스트가 포인터 핸들러를 붙이지 않는 것과 같음
        if not self.has_data or self.geometry is None:
            return self.hover

        target = self.hit_tester.hit_test(self.geometry, self.chart_data, x, y, displayed_size)
        if self.hover_machine.pointer_move(target):
            self.render()
        return self.hover

    def pointer_leave(self) -> HoverState:
        if self.hover_machine.pointer_leave():
            self.render()
        return self.hover

    def tooltip_content(self) -> Optional[TooltipContent]:
        return self.tooltip.content(self.chart_data, self.hover)

    def tooltip_box(self, client_x: float, client_y: float,
                    viewport_width: float, viewport_height: float) -> Optional[TooltipBox]:
        """툴팁을 보여줄 내용이 있을 때만 위치 반환"""
        if self.tooltip_content() is None:
            return None
        return self.tooltip.position(client_x, client_y, viewport_width, viewport_height)

    @property
    def placeholder(self) -> Optional[str]:
        if self.has_data:
            return None
        return config.NO_DATA_MESSAGE
