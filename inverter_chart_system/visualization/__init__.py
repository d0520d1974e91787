"""
visualization 모듈 - 인버터 발전량 차트 그리기

이 모듈은 다음 컴포넌트들을 포함합니다:
- colors: 팔레트 순환 및 색상 밝기 조절
- surface: 그리기 표면 (matplotlib, 기록용)
- renderer: 격자/막대/레이블 렌더러
- chart_engine: 포인터 이벤트를 처리하는 인터랙티브 엔진
- chart_generator: PNG 차트 생성
"""

from .chart_generator import ChartGenerator
from .chart_engine import InverterChartEngine
from .renderer import BarChartRenderer
from .surface import DrawingSurface, RecordingSurface, MatplotlibSurface
from .colors import PALETTE, color_for, lighten

__version__ = "1.0.0"
__author__ = "Inverter Chart Team"

# 기본 차트 생성기 인스턴스
default_chart_generator = ChartGenerator()


# 편의 함수들
def create_inverter_chart(chart_data, hover=None):
    """인버터별 월간 발전량 차트 생성 (편의 함수)"""
    if hover is None:
        return default_chart_generator.generate_inverter_chart(chart_data)
    return default_chart_generator.generate_inverter_chart(chart_data, hover)


def create_monthly_chart(monthly_energy, periods=None):
    """월별 합계 차트 생성 (편의 함수)"""
    return default_chart_generator.generate_monthly_chart(monthly_energy, periods)


__all__ = [
    'ChartGenerator',
    'InverterChartEngine',
    'BarChartRenderer',
    'DrawingSurface',
    'RecordingSurface',
    'MatplotlibSurface',
    'PALETTE',
    'color_for',
    'lighten',
    'default_chart_generator',
    'create_inverter_chart',
    'create_monthly_chart'
]
