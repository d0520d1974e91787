import pytest

from inverter_chart_system.core.data_normalizer import DataNormalizer
from inverter_chart_system.core.layout_engine import LayoutEngine
from inverter_chart_system.visualization.surface import RecordingSurface

WIDTH = 600
HEIGHT = 320


@pytest.fixture
def normalizer():
    return DataNormalizer()


@pytest.fixture
def scenario_a(normalizer):
    """Jan: 인버터 1대, Feb: 인버터 2대"""
    return normalizer.normalize(
        ["Jan", "Feb"],
        [[{"id": 1, "value": 100}],
         [{"id": 1, "value": 50}, {"id": 2, "value": 80}]],
        [100, 130],
    )


@pytest.fixture
def scenario_b(normalizer):
    """인버터 분해도 없고 대체값도 0"""
    return normalizer.normalize(["Jan", "Feb"], [[], []], [0, 0])


@pytest.fixture
def empty_data(normalizer):
    return normalizer.normalize([], [], [])


@pytest.fixture
def mixed_data(normalizer):
    """인버터 분해가 있는 달과 합계만 있는 달이 섞인 데이터"""
    return normalizer.normalize(
        ["Jan", "Feb", "Mar"],
        [[{"id": 1, "name": "SG10", "serial_number": "A1", "value": 400},
          {"id": 2, "name": "SUN2000", "value": 0},
          {"id": 3, "value": 250}],
         [],
         [{"id": 1, "name": "SG10", "serial_number": "A1", "value": 600}]],
        [650, 900, 600],
    )


@pytest.fixture
def layout():
    return LayoutEngine(padding=50)


@pytest.fixture
def geometry_a(layout, scenario_a):
    return layout.for_chart(scenario_a, WIDTH, HEIGHT)


@pytest.fixture
def recording_surface():
    return RecordingSurface(WIDTH, HEIGHT)
