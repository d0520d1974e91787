"""
차트 엔진 데이터 모델
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class EntitySample:
    """한 기간 안의 인버터 한 대의 발전량"""

    entity_id: str
    display_name: str
    value: float = 0.0
    serial_number: Optional[str] = None


@dataclass(frozen=True)
class HoverState:
    """포인터가 가리키는 (기간, 인버터) 인덱스"""

    period_index: Optional[int] = None
    entity_index: Optional[int] = None

    @property
    def is_idle(self) -> bool:
        return self.period_index is None


IDLE = HoverState()


@dataclass(frozen=True)
class ChartData:
    """정규화된 차트 입력 스냅샷

    period_series[i] 는 periods[i] 와 1:1 로 정렬되며, 인버터 분해가 없는
    기간은 빈 리스트로 남고 fallback_series[i] 로 그려진다.
    """

    periods: List[str] = field(default_factory=list)
    period_series: List[List[EntitySample]] = field(default_factory=list)
    fallback_series: List[float] = field(default_factory=list)
    has_data: bool = False

    @property
    def period_count(self) -> int:
        return len(self.periods)

    @property
    def max_entities_per_period(self) -> int:
        return max([len(samples) for samples in self.period_series] + [1])

    @property
    def max_value(self) -> float:
        values = []
        for i, samples in enumerate(self.period_series):
            if samples:
                values.extend(sample.value for sample in samples)
            else:
                values.append(self.fallback_value(i))
        # 0 으로 나누지 않도록 최소 1
        return max(values + [1.0])

    def fallback_value(self, period_index: int) -> float:
        if period_index < len(self.fallback_series):
            return self.fallback_series[period_index]
        return 0.0

    def samples_for(self, period_index: int) -> List[EntitySample]:
        if 0 <= period_index < len(self.period_series):
            return self.period_series[period_index]
        return []
