"""
로깅 설정 모듈
==============

라이브러리 전반의 로깅 핸들러와 포맷터를 설정합니다.
각 모듈은 logging.getLogger(__name__)으로 자신의 로거를 사용합니다.

작성자: AI Assistant
버전: 1.0.0
"""

import json
import logging
from datetime import datetime, timezone

from .config import LOG_LEVEL, LOG_FORMAT


class JSONFormatter(logging.Formatter):
    """로그 레코드를 JSON 한 줄로 출력하는 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> logging.Handler:
    """
    루트 로거에 스트림 핸들러를 설치하는 함수

    Args:
        level (str): 로그 레벨 이름 (DEBUG, INFO, ...)
        fmt (str): "json" 또는 "text"

    Returns:
        logging.Handler: 설치된 핸들러
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
