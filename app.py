# 인버터별 월간 발전량 차트 서버 실행 스크립트
import logging
import os

from dotenv import load_dotenv

load_dotenv()

from inverter_chart_system.config import get_config
from inverter_chart_system.utils import ensure_directories
from inverter_chart_system.web import create_app

config = get_config()
logging.basicConfig(
    level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

app = create_app(config)

if __name__ == '__main__':
    ensure_directories()
    port = int(os.getenv('PORT', config.PORT))
    logging.getLogger(__name__).info("서버 시작: http://0.0.0.0:%d", port)
    app.run(host='0.0.0.0', port=port, debug=config.FLASK_DEBUG)
