"""
web 모듈 - Flask 웹 애플리케이션

이 모듈은 다음 컴포넌트들을 포함합니다:
- app: Flask 애플리케이션 팩토리
- routes: URL 라우팅 모듈들
"""

from .app import create_app
from inverter_chart_system.config import DevelopmentConfig, ProductionConfig

__version__ = "1.0.0"
__author__ = "Inverter Chart Team"


# Flask 앱 생성 편의 함수
def create_development_app():
    """개발용 Flask 앱 생성"""
    return create_app(DevelopmentConfig)


def create_production_app():
    """운영용 Flask 앱 생성"""
    return create_app(ProductionConfig)


__all__ = [
    'create_app',
    'create_development_app',
    'create_production_app'
]
