"""
core 모듈 - 인버터 발전량 차트 엔진의 핵심 로직

이 모듈은 다음 컴포넌트들을 포함합니다:
- models: 기간/인버터 샘플, 호버 상태 데이터 모델
- data_normalizer: 가변 길이 기간 데이터 정규화
- layout_engine: 그룹/막대 기하 계산
- hit_tester: 포인터 좌표 -> (기간, 인버터) 역변환
- hover_state: Idle/Hovering 상태 머신
- tooltip: 툴팁 위치 및 내용 계산
"""

from .models import EntitySample, HoverState, ChartData, IDLE
from .data_normalizer import DataNormalizer
from .layout_engine import LayoutEngine, ChartGeometry, Bounds
from .hit_tester import HitTester
from .hover_state import HoverStateMachine
from .tooltip import TooltipPositioner, TooltipBox, TooltipContent

__version__ = "1.0.0"
__author__ = "Inverter Chart Team"


# 편의를 위한 단축 함수
def quick_hit_test(periods, period_series, fallback_series, x, y, width=None, height=None):
    """데이터와 포인터 좌표만으로 HoverState 계산"""
    from inverter_chart_system.config import get_config

    config = get_config()
    chart_data = DataNormalizer().normalize(periods, period_series, fallback_series)
    if not chart_data.has_data:
        return IDLE

    geometry = LayoutEngine().for_chart(
        chart_data,
        config.CHART_WIDTH if width is None else width,
        config.CHART_HEIGHT if height is None else height,
    )
    return HitTester().hit_test(geometry, chart_data, x, y)


__all__ = [
    'EntitySample',
    'HoverState',
    'ChartData',
    'IDLE',
    'DataNormalizer',
    'LayoutEngine',
    'ChartGeometry',
    'Bounds',
    'HitTester',
    'HoverStateMachine',
    'TooltipPositioner',
    'TooltipBox',
    'TooltipContent',
    'quick_hit_test'
]
