"""
인버터 색상 할당 및 밝기 조절
"""
from typing import Tuple

# 인버터 인덱스 순으로 순환하는 팔레트
PALETTE = ['#10B981', '#F59E0B', '#3B82F6', '#EF4444',
           '#8B5CF6', '#06B6D4', '#A78BFA', '#EC4899']

# 인버터 분해가 없는 기간의 대체 막대 (인디고 그라데이션)
FALLBACK_GRADIENT = ('#6366F1', '#4F46E5')

NORMAL_LIGHTEN = 10
HOVER_LIGHTEN = 20


def color_for(entity_index: int) -> str:
    return PALETTE[entity_index % len(PALETTE)]


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    value = hex_color.lstrip('#')
    if len(value) == 3:
        value = ''.join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb) -> str:
    return '#{:02X}{:02X}{:02X}'.format(*rgb)


def lighten(hex_color: str, percent: float) -> str:
    """각 채널에 round(2.55 * percent) 를 더하고 [0, 255] 로 자른 색"""
    amount = int(round(2.55 * percent))
    return rgb_to_hex(min(255, max(0, channel + amount)) for channel in hex_to_rgb(hex_color))


def gradient_stops(base_color: str, hovered: bool = False) -> Tuple[str, str]:
    """막대 그라데이션 (위쪽 밝은 색, 아래쪽 기본 색)"""
    step = HOVER_LIGHTEN if hovered else NORMAL_LIGHTEN
    return lighten(base_color, step), base_color


def fallback_gradient(hovered: bool = False) -> Tuple[str, str]:
    top, bottom = FALLBACK_GRADIENT
    if hovered:
        return lighten(top, NORMAL_LIGHTEN), bottom
    return top, bottom
