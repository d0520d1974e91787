"""
web.routes 모듈 - Flask 라우트 모음

이 모듈은 다음 라우트들을 포함합니다:
- api_routes: 차트 이미지 및 호버/툴팁 API 엔드포인트들
"""
import logging

from .api_routes import api_bp

logger = logging.getLogger(__name__)

# 모든 블루프린트 목록
all_blueprints = [
    (api_bp, {'url_prefix': '/api'}),  # (blueprint, options)
]


def register_all_blueprints(app):
    """모든 블루프린트를 Flask 앱에 등록"""
    for blueprint, options in all_blueprints:
        app.register_blueprint(blueprint, **options)

    logger.info("%d개 블루프린트 등록 완료", len(all_blueprints))


__all__ = [
    'api_bp',
    'all_blueprints',
    'register_all_blueprints'
]
