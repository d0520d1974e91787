"""
Flask 애플리케이션 팩토리
"""
import logging

from flask import Flask
import matplotlib
matplotlib.use('Agg')  # 서버 환경에서 matplotlib 사용을 위한 백엔드 설정

from inverter_chart_system.config import get_config

logger = logging.getLogger(__name__)


def create_app(config_object=None):
    """Flask 앱 생성 및 설정"""
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    # 라우트 등록
    from inverter_chart_system.web.routes import register_all_blueprints
    register_all_blueprints(app)

    logger.info("Flask 앱 생성 완료 (env=%s)", app.config.get("FLASK_ENV"))

    return app
