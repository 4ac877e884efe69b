"""
날짜 포맷팅 모듈
===============

게시글/댓글 작성 시각을 한국어 표기로 변환합니다.

주요 기능:
- 상대 시간 표기 ("방금 전", "5분 전", "3일 전", "2년 전" ...)
- 절대 시간 표기 ("2024.01.15", "2024.01.15 14:30", "2024년 1월 15일")

작성자: AI Assistant
버전: 1.0.0
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.config import EMPTY_DISPLAY, INVALID_DATE_DISPLAY
from .helpers import ISO_8601_PATTERN, parse_timestamp

logger = logging.getLogger(__name__)

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

# (구간 상한(초), 단위 크기(초), 단위명)
RELATIVE_UNITS = [
    (HOUR, MINUTE, "분"),
    (DAY, HOUR, "시간"),
    (WEEK, DAY, "일"),
    (MONTH, WEEK, "주"),
    (YEAR, MONTH, "개월"),
]

DATE_STYLE_DOT = "dot"
DATE_STYLE_KO = "ko"


def _has_time_component(value: Any) -> bool:
    if isinstance(value, datetime):
        return True
    if isinstance(value, date):
        return False
    match = ISO_8601_PATTERN.fullmatch(value.strip())
    return bool(match and match.group('time'))


def format_date(value: Any, now: Optional[datetime] = None) -> str:
    """
    날짜를 현재 시각 기준 상대 시간으로 표기하는 함수

    Args:
        value (Any): datetime, date 또는 ISO-8601 문자열
        now (Optional[datetime]): 기준 시각 (기본값: 현재 UTC 시각)

    Returns:
        str: "방금 전", "N분 전", "N시간 전", "N일 전", "N주 전", "N개월 전", "N년 전",
             미래 날짜는 "곧", "내일", "N일 후".
             None은 "-", 해석할 수 없는 값은 "날짜 없음"

    Raises:
        ValueError: 기준 시각 now를 해석할 수 없는 경우
    """
    if value is None:
        return EMPTY_DISPLAY

    timestamp = parse_timestamp(value)
    if timestamp is None:
        logger.warning("날짜를 해석할 수 없습니다: %r", value)
        return INVALID_DATE_DISPLAY

    if now is None:
        reference = datetime.now(timezone.utc)
    else:
        reference = parse_timestamp(now)
        if reference is None:
            raise ValueError(f"기준 시각을 해석할 수 없습니다: {now!r}")
    seconds = (reference - timestamp).total_seconds()

    if seconds < 0:
        return _format_future(-seconds)

    if seconds < MINUTE:
        return "방금 전"

    for limit, unit, label in RELATIVE_UNITS:
        if seconds < limit:
            return f"{int(seconds // unit)}{label} 전"

    return f"{int(seconds // YEAR)}년 전"


def _format_future(seconds: float) -> str:
    if seconds < DAY:
        return "곧"
    if seconds < 2 * DAY:
        return "내일"
    return f"{int(seconds // DAY)}일 후"


def format_date_absolute(value: Any, style: str = DATE_STYLE_DOT) -> str:
    """
    날짜를 절대 시간으로 표기하는 함수

    입력에 포함된 시간대를 그대로 사용하며 UTC로 변환하지 않습니다.

    Args:
        value (Any): datetime, date 또는 ISO-8601 문자열
        style (str): 'dot' -> "2024.01.15" (시각이 있으면 "2024.01.15 14:30"),
                     'ko' -> "2024년 1월 15일"

    Returns:
        str: 포맷팅된 날짜. None은 "-", 해석할 수 없는 값은 "날짜 없음"

    Raises:
        ValueError: 지원하지 않는 style인 경우
    """
    if style not in (DATE_STYLE_DOT, DATE_STYLE_KO):
        raise ValueError(f"지원하지 않는 날짜 표기 방식입니다: {style!r}")

    if value is None:
        return EMPTY_DISPLAY

    timestamp = parse_timestamp(value, utc=False)
    if timestamp is None:
        logger.warning("날짜를 해석할 수 없습니다: %r", value)
        return INVALID_DATE_DISPLAY

    if style == DATE_STYLE_KO:
        return f"{timestamp.year}년 {timestamp.month}월 {timestamp.day}일"

    if _has_time_component(value):
        return timestamp.strftime("%Y.%m.%d %H:%M")
    return timestamp.strftime("%Y.%m.%d")
