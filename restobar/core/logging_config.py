# restobar/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.
각 모듈은 `logging.getLogger(__name__)`으로 로거를 얻고, 설정은 여기서 한 번만 합니다.
"""

import logging

from restobar.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """루트 로거를 설정합니다. 디버그 모드에서는 SQLAlchemy 엔진 로그도 함께 출력합니다."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    if settings.DEBUG_MODE:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
