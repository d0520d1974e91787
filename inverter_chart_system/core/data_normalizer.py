"""
데이터 정규화 모듈
기간별 가변 길이 인버터 데이터를 레이아웃 엔진이 쓰는 조밀한 구조로 변환
"""
import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from inverter_chart_system.config import get_config
from inverter_chart_system.core.models import ChartData, EntitySample

logger = logging.getLogger(__name__)
config = get_config()

# 원시 측정값에서 인버터 ID/발전량을 찾을 때 확인하는 키 (우선순위 순)
INVERTER_ID_KEYS = ('inverter_id', 'inverterId', 'projectInverterId', 'project_inverter_id')
VALUE_KEYS = ('energy_kwh', 'generate_kw', 'generated_kw', 'power', 'value')


def coerce_value(raw) -> float:
    """발전량 값을 0 이상의 유한한 float 로 변환 (실패시 0)"""
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug("숫자가 아닌 발전량 값을 0 으로 처리: %r", raw)
        return 0.0
    if not math.isfinite(value) or value < 0:
        logger.debug("유효하지 않은 발전량 값을 0 으로 처리: %r", raw)
        return 0.0
    return value


def _as_list(raw, what: str) -> list:
    """배열 형태 입력을 list 로 변환 (문자열, dict, 스칼라는 빈 목록)"""
    if raw is None:
        return []
    if isinstance(raw, (str, bytes, dict)) or not isinstance(raw, Iterable):
        logger.warning("%s 가 배열이 아니어서 무시: %r", what, raw)
        return []
    return list(raw)


def inverter_display_name(entity_id, name: Optional[str] = None, serial_number: Optional[str] = None) -> str:
    """인버터 표시 이름 생성"""
    if name:
        return f"{name} (S: {serial_number or 'N/A'})"
    return f"Inverter {entity_id}"


class DataNormalizer:
    """기간별 인버터 발전량 정규화 클래스"""

    def __init__(self, default_labels: Optional[Sequence[str]] = None):
        self.default_labels = list(default_labels or config.DEFAULT_PERIOD_LABELS)

    def normalize(
        self,
        periods: Optional[Sequence[str]] = None,
        period_series: Optional[Sequence] = None,
        fallback_series: Optional[Sequence] = None,
    ) -> ChartData:
        """
        원시 기간별 배열을 ChartData 로 변환

        Args:
            periods: 기간 레이블 (없으면 기본 월 레이블 사용)
            period_series: 기간별 인버터 샘플 목록 (들쭉날쭉하거나 없을 수 있음)
            fallback_series: 인버터 분해가 없는 기간에 쓰는 합계값

        Returns:
            periods 와 정렬된 ChartData
        """
        raw_series = [_as_list(entries, "period entry")
                      for entries in _as_list(period_series, "period_series")]
        raw_fallback = _as_list(fallback_series, "fallback_series")

        has_data = any(raw_series) or bool(raw_fallback)
        labels = self._resolve_labels(periods, max(len(raw_series), len(raw_fallback)))

        series = []
        for i in range(len(labels)):
            entries = raw_series[i] if i < len(raw_series) else None
            series.append(self._normalize_period(entries))

        fallback = [
            coerce_value(raw_fallback[i]) if i < len(raw_fallback) else 0.0
            for i in range(len(labels))
        ]

        return ChartData(
            periods=labels,
            period_series=series,
            fallback_series=fallback,
            has_data=has_data,
        )

    def _resolve_labels(self, periods, data_length: int) -> List[str]:
        labels = _as_list(periods, "periods")
        if labels:
            return [str(label) for label in labels]
        count = data_length or len(self.default_labels)
        return [self.default_labels[i % len(self.default_labels)] for i in range(count)]

    def _normalize_period(self, entries) -> List[EntitySample]:
        # 없는 데이터는 0 값 인버터로 만들지 않고 "항목 없음" 으로 둔다
        if not entries:
            return []
        samples = []
        for index, entry in enumerate(entries):
            sample = self._to_sample(entry, index)
            if sample is not None:
                samples.append(sample)
        return samples

    def _to_sample(self, entry, index: int) -> Optional[EntitySample]:
        if isinstance(entry, EntitySample):
            return EntitySample(
                entity_id=entry.entity_id,
                display_name=entry.display_name,
                value=coerce_value(entry.value),
                serial_number=entry.serial_number,
            )
        if not isinstance(entry, dict):
            logger.warning("인버터 샘플 형식이 아니어서 건너뜀: %r", entry)
            return None

        entity_id = entry.get('entity_id', entry.get('id', index + 1))
        serial = entry.get('serial_number', entry.get('serialNumber'))
        name = entry.get('display_name', entry.get('displayName'))
        if not name:
            name = inverter_display_name(entity_id, entry.get('name'), serial)

        return EntitySample(
            entity_id=str(entity_id),
            display_name=str(name),
            value=coerce_value(entry.get('value')),
            serial_number=serial,
        )

    def from_readings(
        self,
        readings,
        project_inverters: Optional[Iterable[Dict]] = None,
        fallback_series: Optional[Sequence] = None,
    ) -> ChartData:
        """
        원시 인버터 측정값을 월별/인버터별로 합산하여 ChartData 생성

        Args:
            readings: 측정 레코드 목록 또는 DataFrame (date, 인버터 ID, 발전량)
            project_inverters: 인버터 이름/시리얼 조회용 목록
            fallback_series: 월별 합계 대체값 (선택)

        Returns:
            월 레이블("Jan 2024")과 정렬된 ChartData
        """
        df = readings if isinstance(readings, pd.DataFrame) else pd.DataFrame(list(readings or []))
        if df.empty or 'date' not in df.columns:
            return self.normalize([], [], fallback_series)

        frame = pd.DataFrame({
            'date': pd.to_datetime(df['date'], errors='coerce'),
            'inverter_id': self._pick_inverter_ids(df),
            'value': self._pick_column(df, VALUE_KEYS, 0).map(coerce_value),
        })

        dropped = int(frame['date'].isna().sum())
        if dropped:
            logger.warning("날짜를 해석할 수 없는 측정값 %d건 제외", dropped)
        frame = frame.dropna(subset=['date'])
        if frame.empty:
            return self.normalize([], [], fallback_series)

        frame['month'] = frame['date'].dt.to_period('M')
        monthly = frame.groupby(['month', 'inverter_id'], sort=True)['value'].sum()

        lookup = self._inverter_lookup(project_inverters)
        months = sorted(frame['month'].unique())
        periods = [month.strftime('%b %Y') for month in months]

        series = []
        for month in months:
            samples = []
            for inverter_id, value in monthly.loc[month].items():
                name, serial = lookup.get(inverter_id, (None, None))
                samples.append({
                    'entity_id': inverter_id,
                    'display_name': inverter_display_name(inverter_id, name, serial),
                    'serial_number': serial,
                    'value': float(value),
                })
            series.append(samples)

        return self.normalize(periods, series, fallback_series)

    def _pick_column(self, df: pd.DataFrame, keys, default) -> pd.Series:
        """첫 번째로 존재하는 후보 열 선택"""
        for key in keys:
            if key in df.columns:
                return df[key].where(df[key].notna(), default)
        return pd.Series([default] * len(df), index=df.index, dtype=object)

    def _pick_inverter_ids(self, df: pd.DataFrame) -> pd.Series:
        if 'inverter' in df.columns and not any(key in df.columns for key in INVERTER_ID_KEYS):
            # 중첩된 inverter.id
            return df['inverter'].map(
                lambda inv: inv.get('id', 'unknown') if isinstance(inv, dict) else 'unknown'
            ).astype(str)
        return self._pick_column(df, INVERTER_ID_KEYS, 'unknown').astype(str)

    def _inverter_lookup(self, project_inverters) -> Dict[str, tuple]:
        lookup = {}
        for item in project_inverters or []:
            if not isinstance(item, dict):
                continue
            inverter = item.get('inverter') or {}
            name = inverter.get('inverterName') or item.get('name')
            serial = item.get('inverter_serial_number') or item.get('serial_number')
            for key in (item.get('inverter_id'), item.get('id')):
                if key is not None:
                    lookup[str(key)] = (name, serial)
        return lookup
