"""Test palette cycling and color lightening."""
from inverter_chart_system.visualization.colors import (
    FALLBACK_GRADIENT,
    PALETTE,
    color_for,
    fallback_gradient,
    gradient_stops,
    hex_to_rgb,
    lighten,
)


def test_palette_has_at_least_eight_hues():
    assert len(PALETTE) >= 8
    assert len(set(PALETTE)) == len(PALETTE)


def test_color_for_cycles_by_index():
    assert color_for(0) == PALETTE[0]
    assert color_for(3) == PALETTE[3]
    assert color_for(len(PALETTE)) == PALETTE[0]
    assert color_for(len(PALETTE) * 2 + 1) == PALETTE[1]


def test_lighten_adds_scaled_step_to_each_channel():
    # round(2.55 * 20) = 51 = 0x33
    assert lighten('#000000', 20) == '#333333'
    assert lighten('#102030', 20) == '#435363'


def test_lighten_clamps_to_channel_range():
    assert lighten('#FFFFFF', 20) == '#FFFFFF'
    assert lighten('#FA0000', 20) == '#FF3333'
    assert lighten('#101010', -40) == '#000000'


def test_lighten_accepts_lowercase_and_short_hex():
    assert lighten('#abc', 0) == '#AABBCC'
    assert hex_to_rgb('#10b981') == (0x10, 0xB9, 0x81)


def test_gradient_stops_normal_and_hovered():
    base = PALETTE[2]
    assert gradient_stops(base) == (lighten(base, 10), base)
    assert gradient_stops(base, hovered=True) == (lighten(base, 20), base)


def test_fallback_gradient_is_indigo():
    assert fallback_gradient() == FALLBACK_GRADIENT
    top, bottom = fallback_gradient(hovered=True)
    assert bottom == FALLBACK_GRADIENT[1]
    assert top != FALLBACK_GRADIENT[0]
