"""
툴팁 위치 및 내용 계산
"""
from dataclasses import dataclass, field
from typing import List, Optional

from inverter_chart_system.config import get_config
from inverter_chart_system.core.models import ChartData, HoverState

config = get_config()

# 포인터 기준 초기 앵커 오프셋
ANCHOR_OFFSET_X = 10
ANCHOR_OFFSET_Y = -40
FLIP_MARGIN = 10
BELOW_POINTER_OFFSET = 20
EDGE_MARGIN = 10


@dataclass(frozen=True)
class TooltipBox:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class TooltipLine:
    label: str
    value: float

    @property
    def text(self) -> str:
        return f"{self.label}: {format_energy(self.value)}"


@dataclass(frozen=True)
class TooltipContent:
    title: str
    lines: List[TooltipLine] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            'title': self.title,
            'lines': [{'label': line.label, 'value': line.value, 'text': line.text}
                      for line in self.lines],
        }


def format_energy(value: float) -> str:
    """발전량 표시 형식 (천 단위 구분, 소수 둘째 자리)"""
    return f"{value:,.2f} kWh"


class TooltipPositioner:
    """화면 안에 머무는 툴팁 위치 계산 클래스"""

    def __init__(self, width: Optional[float] = None, height: Optional[float] = None):
        self.width = config.TOOLTIP_WIDTH if width is None else width
        self.height = config.TOOLTIP_HEIGHT if height is None else height

    def position(self, pointer_x: float, pointer_y: float,
                 viewport_width: float, viewport_height: float) -> TooltipBox:
        """
        클라이언트 좌표 기준 툴팁 박스 위치 계산

        Args:
            pointer_x, pointer_y: 캔버스 기준이 아닌 화면(클라이언트) 좌표
            viewport_width, viewport_height: 뷰포트 크기

        Returns:
            축별로 독립적으로 보정된 TooltipBox
        """
        x = pointer_x + ANCHOR_OFFSET_X
        y = pointer_y + ANCHOR_OFFSET_Y

        if x + self.width > viewport_width:
            x = pointer_x - self.width - FLIP_MARGIN
        if y < EDGE_MARGIN:
            y = pointer_y + BELOW_POINTER_OFFSET
        if y + self.height > viewport_height:
            y = viewport_height - self.height - EDGE_MARGIN

        return TooltipBox(max(x, 0.0), max(y, 0.0), self.width, self.height)

    def content(self, chart_data: ChartData, hover: HoverState) -> Optional[TooltipContent]:
        """호버 대상의 툴팁 내용 (보여줄 값이 없으면 None)"""
        if hover.is_idle or hover.period_index >= chart_data.period_count:
            return None

        period_index = hover.period_index
        title = chart_data.periods[period_index]
        samples = chart_data.samples_for(period_index)

        if not samples:
            total = chart_data.fallback_value(period_index)
            if total <= 0:
                return None
            return TooltipContent(title, [TooltipLine('Total', total)])

        if hover.entity_index is not None:
            if hover.entity_index >= len(samples):
                return None
            sample = samples[hover.entity_index]
            if sample.value <= 0:
                return None
            return TooltipContent(title, [TooltipLine(sample.display_name, sample.value)])

        lines = [TooltipLine(sample.display_name, sample.value) for sample in samples]
        if len(samples) > 1:
            lines.append(TooltipLine('Total', sum(sample.value for sample in samples)))
        return TooltipContent(title, lines)
