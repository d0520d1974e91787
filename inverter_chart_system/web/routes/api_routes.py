"""
API 엔드포인트 라우트
"""
import logging

from flask import Blueprint, request, jsonify, send_file

from inverter_chart_system.config import get_config
from inverter_chart_system.core.data_normalizer import DataNormalizer
from inverter_chart_system.core.models import IDLE, HoverState
from inverter_chart_system.visualization.chart_engine import InverterChartEngine
from inverter_chart_system.visualization.chart_generator import ChartGenerator
from inverter_chart_system.visualization.surface import RecordingSurface

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)
config = get_config()

# 전역 인스턴스 생성
normalizer = DataNormalizer()
chart_gen = ChartGenerator()


class PayloadError(ValueError):
    """요청 본문 형식 오류"""


def _parse_chart_payload():
    """요청 JSON 에서 차트 입력 추출"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise PayloadError('JSON 객체 형식의 요청 본문이 필요합니다.')

    for key in ('periods', 'period_series', 'fallback_series'):
        if payload.get(key) is not None and not isinstance(payload[key], list):
            raise PayloadError(f'{key} 는 배열이어야 합니다.')

    chart_data = normalizer.normalize(
        payload.get('periods'),
        payload.get('period_series'),
        payload.get('fallback_series'),
    )
    return payload, chart_data


def _parse_hover(raw):
    if not isinstance(raw, dict):
        return IDLE
    period_index = raw.get('period_index')
    entity_index = raw.get('entity_index')
    if not isinstance(period_index, int):
        return IDLE
    return HoverState(period_index, entity_index if isinstance(entity_index, int) else None)


def _placeholder_response():
    return jsonify({'success': False, 'placeholder': config.NO_DATA_MESSAGE})


@api_bp.route('/charts/inverter_monthly', methods=['POST'])
def get_inverter_monthly_chart():
    """인버터별 월간 발전량 차트"""
    try:
        payload, chart_data = _parse_chart_payload()

        img_bytes = chart_gen.generate_inverter_chart(chart_data, _parse_hover(payload.get('hover')))
        if img_bytes is None:
            return _placeholder_response()

        return send_file(img_bytes, mimetype='image/png')

    except PayloadError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("차트 생성 오류")
        return jsonify({'error': f'차트 생성 오류: {str(e)}'}), 500


@api_bp.route('/charts/inverter_monthly/hover', methods=['POST'])
def get_inverter_chart_hover():
    """포인터 위치의 호버 대상과 툴팁"""
    try:
        payload, chart_data = _parse_chart_payload()
        if not chart_data.has_data:
            return _placeholder_response()

        pointer = payload.get('pointer')
        if not isinstance(pointer, dict) or 'x' not in pointer or 'y' not in pointer:
            raise PayloadError('pointer.x, pointer.y 가 필요합니다.')

        try:
            x = float(pointer['x'])
            y = float(pointer['y'])
            displayed_size = None
            if pointer.get('displayed_width') and pointer.get('displayed_height'):
                displayed_size = (float(pointer['displayed_width']), float(pointer['displayed_height']))
            client_x = float(pointer.get('client_x', x))
            client_y = float(pointer.get('client_y', y))
            viewport = payload.get('viewport') or {}
            viewport_width = float(viewport.get('width', config.CHART_WIDTH))
            viewport_height = float(viewport.get('height', config.CHART_HEIGHT))
        except (TypeError, ValueError, AttributeError):
            raise PayloadError('포인터/뷰포트 좌표는 숫자여야 합니다.')

        # 래스터화 없이 기하 계산만 필요
        engine = InverterChartEngine(surface=RecordingSurface(), normalizer=normalizer)
        engine.set_chart_data(chart_data)
        hover = engine.pointer_move(x, y, displayed_size)

        tooltip = None
        content = engine.tooltip_content()
        if content is not None:
            box = engine.tooltip_box(client_x, client_y, viewport_width, viewport_height)
            tooltip = {
                'box': {'x': box.x, 'y': box.y, 'width': box.width, 'height': box.height},
                'content': content.as_dict(),
            }

        return jsonify({
            'success': True,
            'state': engine.hover_machine.state,
            'hover': {'period_index': hover.period_index, 'entity_index': hover.entity_index},
            'tooltip': tooltip
        })

    except PayloadError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("호버 계산 오류")
        return jsonify({'error': f'호버 계산 오류: {str(e)}'}), 500


@api_bp.route('/charts/inverter_readings', methods=['POST'])
def get_inverter_readings_chart():
    """원시 인버터 측정값을 월별로 합산한 차트"""
    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get('readings', []), list):
            return jsonify({'error': 'readings 배열이 필요합니다.'}), 400

        chart_data = normalizer.from_readings(
            payload.get('readings', []),
            project_inverters=payload.get('project_inverters'),
        )

        img_bytes = chart_gen.generate_inverter_chart(chart_data)
        if img_bytes is None:
            return _placeholder_response()

        return send_file(img_bytes, mimetype='image/png')

    except Exception as e:
        logger.exception("측정값 차트 생성 오류")
        return jsonify({'error': f'차트 생성 오류: {str(e)}'}), 500
