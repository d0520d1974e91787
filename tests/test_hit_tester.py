"""Test pointer to (period, inverter) inverse mapping."""
import pytest

from inverter_chart_system.core.hit_tester import HitTester, to_logical
from inverter_chart_system.core.models import IDLE, HoverState

WIDTH = 600
HEIGHT = 320


@pytest.fixture
def hit_tester():
    return HitTester(scale_pointer=True)


def test_round_trip_for_every_positive_bar(hit_tester, layout, mixed_data):
    geometry = layout.for_chart(mixed_data, WIDTH, HEIGHT)
    for p, samples in enumerate(mixed_data.period_series):
        for e, sample in enumerate(samples):
            if sample.value <= 0:
                continue
            x = geometry.bar_x(p, e) + 1
            y = geometry.bar_y(sample.value) + 1
            assert hit_tester.hit_test(geometry, mixed_data, x, y) == HoverState(p, e)


def test_scenario_a_round_trip(hit_tester, geometry_a, scenario_a):
    assert hit_tester.hit_test(geometry_a, scenario_a, geometry_a.bar_x(0, 0) + 1, 100) == HoverState(0, 0)
    assert hit_tester.hit_test(geometry_a, scenario_a, geometry_a.bar_x(1, 1) + 1, 100) == HoverState(1, 1)


def test_pointer_between_groups_is_idle(hit_tester, geometry_a, scenario_a):
    gap_x = (geometry_a.group_bounds(0).right + geometry_a.group_start_x(1)) / 2
    assert hit_tester.hit_test(geometry_a, scenario_a, gap_x, 100) == IDLE


def test_pointer_outside_chart_is_idle(hit_tester, geometry_a, scenario_a):
    assert hit_tester.hit_test(geometry_a, scenario_a, 5, 100) == IDLE
    assert hit_tester.hit_test(geometry_a, scenario_a, WIDTH - 5, 100) == IDLE


def test_pointer_in_gap_inside_group_has_no_entity(hit_tester, geometry_a, scenario_a):
    # Feb 의 두 막대 사이 간격
    x = geometry_a.bar_x(1, 0) + geometry_a.bar_width + 1
    assert x < geometry_a.bar_x(1, 1)
    assert hit_tester.hit_test(geometry_a, scenario_a, x, 100) == HoverState(1, None)


def test_fallback_period_never_has_entity(hit_tester, layout, mixed_data):
    geometry = layout.for_chart(mixed_data, WIDTH, HEIGHT)
    x = geometry.bar_x(1, 0) + 1
    assert hit_tester.hit_test(geometry, mixed_data, x, 100) == HoverState(1, None)


def test_zero_value_bar_still_occupies_hit_geometry(hit_tester, layout, mixed_data):
    geometry = layout.for_chart(mixed_data, WIDTH, HEIGHT)
    x = geometry.bar_x(0, 1) + 1
    assert hit_tester.hit_test(geometry, mixed_data, x, 100) == HoverState(0, 1)


def test_single_bar_period_uses_its_own_width(hit_tester, geometry_a, scenario_a):
    # Jan 은 막대가 하나라 다중 막대 폭보다 넓게 그려짐
    x = geometry_a.bar_x(0, 0) + geometry_a.bar_width + 5
    assert x < geometry_a.bar_x(0, 0) + geometry_a.single_bar_width
    assert hit_tester.hit_test(geometry_a, scenario_a, x, 100) == HoverState(0, 0)


def test_to_logical_scales_each_axis():
    assert to_logical(300, 160, (600, 320), (1200, 640)) == (150, 80)
    assert to_logical(300, 160, (600, 320), None) == (300, 160)
    assert to_logical(300, 160, (600, 320), (0, 0)) == (300, 160)


class TestDisplayedSizeMismatch:
    """Surface displayed at twice its logical resolution."""

    DISPLAYED = (WIDTH * 2, HEIGHT * 2)

    def _displayed_point(self, geometry):
        # Feb 인버터 2 막대 안쪽 한 점을 표시 좌표로 변환
        return (geometry.bar_x(1, 1) + 1) * 2, (geometry.bar_y(80) + 1) * 2

    def test_scaled_pointer_hits_bar(self, geometry_a, scenario_a):
        x, y = self._displayed_point(geometry_a)
        tester = HitTester(scale_pointer=True)
        assert tester.hit_test(geometry_a, scenario_a, x, y, self.DISPLAYED) == HoverState(1, 1)

    def test_unscaled_pointer_misaligns(self, geometry_a, scenario_a):
        x, y = self._displayed_point(geometry_a)
        tester = HitTester(scale_pointer=False)
        assert tester.hit_test(geometry_a, scenario_a, x, y, self.DISPLAYED) == IDLE

    def test_same_size_display_is_unaffected(self, geometry_a, scenario_a):
        x = geometry_a.bar_x(1, 1) + 1
        for scale in (True, False):
            tester = HitTester(scale_pointer=scale)
            assert tester.hit_test(geometry_a, scenario_a, x, 100, (WIDTH, HEIGHT)) == HoverState(1, 1)


def test_quick_hit_test_from_raw_inputs():
    from inverter_chart_system.core import quick_hit_test

    periods = ["Jan", "Feb"]
    series = [[{"id": 1, "value": 100}], [{"id": 1, "value": 50}, {"id": 2, "value": 80}]]
    assert quick_hit_test(periods, series, [], 426, 100, WIDTH, HEIGHT) == HoverState(1, 1)
    assert quick_hit_test([], [], [], 426, 100) == IDLE
