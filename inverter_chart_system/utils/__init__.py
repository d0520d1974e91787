"""
utils 모듈 - 공통 유틸리티 함수들

이 모듈은 다음 유틸리티들을 포함합니다:
- file_utils: 차트 입력 로드 및 차트 이미지 저장
"""
import logging

from .file_utils import (
    ensure_directories,
    load_json_file,
    save_json_file,
    load_chart_data_file,
    load_readings_csv,
    save_png_file,
    create_sample_data
)

__version__ = "1.0.0"
__author__ = "Inverter Chart Team"

logger = logging.getLogger(__name__)


# 프로젝트 초기화 함수
def initialize_project():
    """데이터 디렉토리와 샘플 데이터 준비"""
    logger.info("인버터 차트 시스템 초기화 시작...")

    ensure_directories()
    created = create_sample_data()

    logger.info("초기화 완료: 샘플 파일 %d개", len(created))
    return created


__all__ = [
    'ensure_directories',
    'load_json_file',
    'save_json_file',
    'load_chart_data_file',
    'load_readings_csv',
    'save_png_file',
    'create_sample_data',
    'initialize_project'
]
