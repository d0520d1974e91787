import os
import json
import logging
from io import BytesIO
from typing import Dict, List, Optional

import pandas as pd

from inverter_chart_system.config import get_config
from inverter_chart_system.core.data_normalizer import DataNormalizer
from inverter_chart_system.core.models import ChartData

logger = logging.getLogger(__name__)
config = get_config()


def ensure_directories():
    """필요한 디렉토리들 생성"""
    directories = [
        config.DATA_DIR,
        os.path.join(config.DATA_DIR, 'charts'),
        os.path.join(config.DATA_DIR, 'sample_data')
    ]

    for directory in directories:
        os.makedirs(directory, exist_ok=True)
        logger.debug("디렉토리 확인/생성: %s", directory)


def load_json_file(file_path: str) -> Optional[Dict]:
    """JSON 파일 로드"""
    try:
        if os.path.exists(file_path):
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        else:
            logger.warning("파일이 존재하지 않습니다: %s", file_path)
            return None
    except (OSError, ValueError) as e:
        logger.error("JSON 파일 로드 오류: %s - %s", file_path, e)
        return None


def save_json_file(data, file_path: str) -> bool:
    """JSON 파일 저장"""
    try:
        # 디렉토리 생성
        os.makedirs(os.path.dirname(file_path) or '.', exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info("JSON 파일 저장 완료: %s", file_path)
        return True

    except (OSError, TypeError) as e:
        logger.error("JSON 파일 저장 오류: %s - %s", file_path, e)
        return False


def load_chart_data_file(file_path: str, normalizer: Optional[DataNormalizer] = None) -> Optional[ChartData]:
    """
    차트 입력 JSON 파일을 ChartData 로 로드

    파일 형식: {"periods": [...], "period_series": [[...], ...], "fallback_series": [...]}
    또는 원시 측정값 {"readings": [...], "project_inverters": [...]}
    """
    data = load_json_file(file_path)
    if not isinstance(data, dict):
        return None

    normalizer = normalizer or DataNormalizer()
    if 'readings' in data:
        return normalizer.from_readings(data.get('readings') or [], data.get('project_inverters'),
                                        data.get('fallback_series'))
    return normalizer.normalize(data.get('periods'), data.get('period_series'),
                                data.get('fallback_series'))


def load_readings_csv(file_path: str) -> Optional[pd.DataFrame]:
    """인버터 측정값 CSV 파일 로드"""
    try:
        if os.path.exists(file_path):
            return pd.read_csv(file_path, encoding='utf-8')
        else:
            logger.warning("파일이 존재하지 않습니다: %s", file_path)
            return None
    except (OSError, ValueError) as e:
        logger.error("CSV 파일 로드 오류: %s - %s", file_path, e)
        return None


def save_png_file(img_bytes: BytesIO, file_path: str) -> bool:
    """PNG 바이트 스트림을 파일로 저장"""
    try:
        os.makedirs(os.path.dirname(file_path) or '.', exist_ok=True)

        with open(file_path, 'wb') as f:
            f.write(img_bytes.getvalue())

        logger.info("차트 이미지 저장 완료: %s", file_path)
        return True

    except OSError as e:
        logger.error("차트 이미지 저장 오류: %s - %s", file_path, e)
        return False


def create_sample_data() -> List[str]:
    """샘플 차트 입력 파일 생성"""
    sample_data_dir = os.path.join(config.DATA_DIR, 'sample_data')
    os.makedirs(sample_data_dir, exist_ok=True)

    # 1. 인버터별 월간 발전량 (일부 월은 합계만 존재)
    inverter_monthly = {
        "periods": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
        "period_series": [
            [{"id": 1, "name": "Sungrow SG10", "serial_number": "A1001", "value": 820.5},
             {"id": 2, "name": "Huawei SUN2000", "serial_number": "B2002", "value": 760.0}],
            [{"id": 1, "name": "Sungrow SG10", "serial_number": "A1001", "value": 905.2},
             {"id": 2, "name": "Huawei SUN2000", "serial_number": "B2002", "value": 842.7},
             {"id": 3, "name": "Solis 5K", "value": 410.3}],
            [],
            [{"id": 1, "name": "Sungrow SG10", "serial_number": "A1001", "value": 1210.0}],
            [],
            [{"id": 1, "name": "Sungrow SG10", "serial_number": "A1001", "value": 1398.4},
             {"id": 2, "name": "Huawei SUN2000", "serial_number": "B2002", "value": 0}]
        ],
        "fallback_series": [1580.5, 2158.2, 2010.0, 1210.0, 2420.8, 1398.4]
    }
    monthly_path = os.path.join(sample_data_dir, 'inverter_monthly.json')
    save_json_file(inverter_monthly, monthly_path)

    # 2. 원시 인버터 측정값 (CSV)
    sample_readings = pd.DataFrame({
        'date': ['2024-01-05', '2024-01-20', '2024-01-05', '2024-02-11', '2024-02-11', '2024-03-02'],
        'inverter_id': [1, 1, 2, 1, 2, 2],
        'energy_kwh': [410.0, 395.5, 388.1, 450.2, 431.9, 512.4]
    })
    readings_path = os.path.join(sample_data_dir, 'inverter_readings.csv')
    sample_readings.to_csv(readings_path, index=False, encoding='utf-8')

    logger.info("샘플 데이터 생성 완료: %s", sample_data_dir)
    return [monthly_path, readings_path]
