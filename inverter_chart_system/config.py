"""
인버터별 월간 발전량 차트 시스템 설정 파일
"""
import os
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()


def _env_bool(name, default):
    return os.getenv(name, default).lower() == 'true'


class Config:
    """기본 설정"""
    # Flask 설정
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    FLASK_DEBUG = _env_bool('FLASK_DEBUG', 'false')
    PORT = int(os.getenv('PORT', 5000))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # 캔버스 논리 해상도 (표시 크기와 무관)
    CHART_WIDTH = int(os.getenv('CHART_WIDTH', 600))
    CHART_HEIGHT = int(os.getenv('CHART_HEIGHT', 320))
    CHART_PADDING = float(os.getenv('CHART_PADDING', 50))
    CHART_DPI = int(os.getenv('CHART_DPI', 100))

    # 막대/격자 모양
    BAR_CORNER_RADIUS = float(os.getenv('BAR_CORNER_RADIUS', 8))
    GRID_DIVISIONS = int(os.getenv('GRID_DIVISIONS', 5))

    # 툴팁 박스 가정 크기
    TOOLTIP_WIDTH = float(os.getenv('TOOLTIP_WIDTH', 300))
    TOOLTIP_HEIGHT = float(os.getenv('TOOLTIP_HEIGHT', 100))

    # 표시 크기 != 논리 크기일 때 포인터 좌표 보정 여부
    HIT_TEST_SCALE_POINTER = _env_bool('HIT_TEST_SCALE_POINTER', 'true')

    # 기간 레이블 기본값
    DEFAULT_PERIOD_LABELS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                             'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
    NO_DATA_MESSAGE = os.getenv('NO_DATA_MESSAGE', 'No inverter generation data available.')

    # 데이터 파일 경로
    DATA_DIR = os.getenv('DATA_DIR', 'data')


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    FLASK_DEBUG = True
    FLASK_ENV = 'development'
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """운영 환경 설정"""
    FLASK_DEBUG = False
    FLASK_ENV = 'production'


# 환경에 따른 설정 선택
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}


def get_config():
    """현재 환경의 설정 반환"""
    env = os.getenv('FLASK_ENV', 'default')
    return config.get(env, config['default'])
