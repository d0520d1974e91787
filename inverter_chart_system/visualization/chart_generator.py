"""
차트 이미지 생성 모듈
"""
import logging
from io import BytesIO
from typing import List, Optional

from inverter_chart_system.core.data_normalizer import DataNormalizer
from inverter_chart_system.core.models import IDLE, ChartData, HoverState
from inverter_chart_system.visualization.renderer import BarChartRenderer
from inverter_chart_system.visualization.surface import MatplotlibSurface

logger = logging.getLogger(__name__)


class ChartGenerator:
    """차트 PNG 생성 클래스"""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 dpi: Optional[int] = None):
        self.width = width
        self.height = height
        self.dpi = dpi
        self.renderer = BarChartRenderer()
        self.normalizer = DataNormalizer()

    def generate_inverter_chart(self, chart_data: ChartData, hover: HoverState = IDLE) -> Optional[BytesIO]:
        """인버터별 월간 발전량 그룹 막대 차트 생성 (데이터가 없으면 None)"""
        if not chart_data.has_data:
            return None

        surface = MatplotlibSurface(self.width, self.height, self.dpi)
        try:
            self.renderer.render(surface, chart_data, hover)
            img_bytes = surface.to_png()
        finally:
            surface.close()

        logger.debug("인버터 차트 PNG 생성: %d bytes", img_bytes.getbuffer().nbytes)
        return img_bytes

    def generate_monthly_chart(self, monthly_energy: List[float],
                               periods: Optional[List[str]] = None) -> Optional[BytesIO]:
        """인버터 분해 없이 월별 합계만 있는 차트 생성"""
        chart_data = self.normalizer.normalize(periods, [], monthly_energy)
        return self.generate_inverter_chart(chart_data)
