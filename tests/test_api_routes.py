"""Test the Flask chart API."""
import pytest

from inverter_chart_system.config import DevelopmentConfig
from inverter_chart_system.web import create_app

PNG_MAGIC = b'\x89PNG\r\n\x1a\n'

CHART_BODY = {
    "periods": ["Jan", "Feb"],
    "period_series": [[{"id": 1, "name": "SG10", "value": 100}],
                      [{"id": 1, "name": "SG10", "value": 50},
                       {"id": 2, "name": "SUN2000", "serial_number": "B2", "value": 80}]],
    "fallback_series": [100, 130],
}


@pytest.fixture
def client():
    app = create_app(DevelopmentConfig)
    app.config['TESTING'] = True
    return app.test_client()


def test_chart_returns_png(client):
    response = client.post('/api/charts/inverter_monthly', json=CHART_BODY)
    assert response.status_code == 200
    assert response.mimetype == 'image/png'
    assert response.data.startswith(PNG_MAGIC)


def test_chart_with_hover_highlight(client):
    body = dict(CHART_BODY, hover={"period_index": 1, "entity_index": 1})
    response = client.post('/api/charts/inverter_monthly', json=body)
    assert response.status_code == 200
    assert response.mimetype == 'image/png'


def test_chart_without_data_returns_placeholder(client):
    response = client.post('/api/charts/inverter_monthly',
                           json={"periods": [], "period_series": [], "fallback_series": []})
    assert response.status_code == 200
    assert response.get_json() == {'success': False, 'placeholder': DevelopmentConfig.NO_DATA_MESSAGE}


@pytest.mark.parametrize("body", [
    [1, 2, 3],
    {"periods": "Jan"},
    {"period_series": {"a": 1}},
])
def test_chart_rejects_malformed_body(client, body):
    response = client.post('/api/charts/inverter_monthly', json=body)
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_scalar_period_entry_is_drawn_as_total(client):
    body = dict(CHART_BODY, period_series=[5, CHART_BODY["period_series"][1]])
    response = client.post('/api/charts/inverter_monthly', json=body)
    assert response.status_code == 200
    assert response.mimetype == 'image/png'


def test_chart_rejects_non_json(client):
    response = client.post('/api/charts/inverter_monthly', data='not json', content_type='text/plain')
    assert response.status_code == 400


class TestHoverEndpoint:
    """Test pointer hit-testing over HTTP."""

    def _post(self, client, pointer, viewport=None):
        body = dict(CHART_BODY, pointer=pointer)
        if viewport:
            body['viewport'] = viewport
        return client.post('/api/charts/inverter_monthly/hover', json=body)

    def test_hovering_a_bar(self, client):
        # Feb 인버터 2 막대: bar_x = 337.5 + 87.5 = 425
        response = self._post(client, {"x": 426, "y": 100, "client_x": 500, "client_y": 400},
                              {"width": 1280, "height": 720})
        payload = response.get_json()

        assert response.status_code == 200
        assert payload['state'] == 'hovering'
        assert payload['hover'] == {'period_index': 1, 'entity_index': 1}
        assert payload['tooltip']['box'] == {'x': 510, 'y': 360, 'width': 300, 'height': 100}
        assert payload['tooltip']['content']['lines'][0]['label'] == 'SUN2000 (S: B2)'

    def test_group_hover_lists_every_inverter(self, client):
        # Feb 두 막대 사이 간격
        payload = self._post(client, {"x": 413, "y": 100}).get_json()
        assert payload['hover'] == {'period_index': 1, 'entity_index': None}
        labels = [line['label'] for line in payload['tooltip']['content']['lines']]
        assert labels == ['SG10 (S: N/A)', 'SUN2000 (S: B2)', 'Total']

    def test_gap_between_groups(self, client):
        payload = self._post(client, {"x": 300, "y": 100}).get_json()
        assert payload['state'] == 'idle'
        assert payload['hover'] == {'period_index': None, 'entity_index': None}
        assert payload['tooltip'] is None

    def test_displayed_size_is_scaled(self, client):
        payload = self._post(client, {"x": 852, "y": 200,
                                      "displayed_width": 1200, "displayed_height": 640}).get_json()
        assert payload['hover'] == {'period_index': 1, 'entity_index': 1}

    def test_missing_pointer(self, client):
        response = client.post('/api/charts/inverter_monthly/hover', json=CHART_BODY)
        assert response.status_code == 400

    def test_non_numeric_pointer(self, client):
        response = self._post(client, {"x": "left", "y": 1})
        assert response.status_code == 400

    def test_no_data_placeholder(self, client):
        response = client.post('/api/charts/inverter_monthly/hover',
                               json={"periods": [], "pointer": {"x": 1, "y": 1}})
        assert response.get_json()['success'] is False


def test_readings_chart(client):
    body = {
        "readings": [
            {"date": "2024-01-05", "inverter_id": 1, "energy_kwh": 10},
            {"date": "2024-02-05", "inverter_id": 2, "energy_kwh": 12},
        ],
        "project_inverters": [{"inverter_id": 1, "inverter": {"inverterName": "SG10"}}],
    }
    response = client.post('/api/charts/inverter_readings', json=body)
    assert response.status_code == 200
    assert response.mimetype == 'image/png'


def test_readings_chart_requires_list(client):
    response = client.post('/api/charts/inverter_readings', json={"readings": "none"})
    assert response.status_code == 400
