"""
도우미 함수 모듈
===============

이 모듈은 필터/검증/포맷팅 모듈이 공통으로 사용하는 도우미 함수들을 제공합니다.

주요 기능:
- 레코드 필드 접근 (딕셔너리와 객체를 동일하게 처리)
- 숫자 값 판별
- 날짜/시간 문자열 파싱

작성자: AI Assistant
버전: 1.0.0
"""

import logging
import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

import pandas as pd

logger = logging.getLogger(__name__)

# YYYY-MM-DD, 선택적으로 T(또는 공백) HH:MM[:SS[.ffffff]] 과 Z 또는 +HH:MM
ISO_8601_PATTERN = re.compile(
    r'\d{4}-\d{2}-\d{2}'
    r'(?P<time>[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?'
)


def get_field(item: Any, field: str, default: Any = None) -> Any:
    """
    레코드에서 필드 값을 읽는 함수

    딕셔너리 형태의 레코드와 속성을 가진 객체(Pydantic 모델 등)를
    모두 지원합니다.

    Args:
        item (Any): 레코드
        field (str): 필드명
        default (Any): 필드가 없을 때 반환할 기본값

    Returns:
        Any: 필드 값 또는 기본값
    """
    if isinstance(item, Mapping):
        return item.get(field, default)
    return getattr(item, field, default)


def is_number(value: Any) -> bool:
    """
    실수로 취급할 수 있는 값인지 확인하는 함수 (bool과 NaN은 제외)

    Args:
        value (Any): 확인할 값

    Returns:
        bool: 숫자 여부
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    return not math.isnan(value)


def parse_timestamp(value: Any, utc: bool = True) -> Optional[datetime]:
    """
    날짜/시간 값을 datetime으로 파싱하는 함수

    ISO-8601 문자열('Z' 접미사 포함), datetime, date 객체를 받습니다.
    utc=True이면 결과를 UTC 기준 aware datetime으로 맞추며,
    시간대 정보가 없는 값은 UTC로 간주합니다.

    Args:
        value (Any): 파싱할 값
        utc (bool): UTC로 변환할지 여부

    Returns:
        Optional[datetime]: 파싱된 datetime 또는 None
    """
    if value is None:
        return None
    if not isinstance(value, (str, datetime, date)):
        logger.debug("날짜로 해석할 수 없는 타입: %r", type(value))
        return None
    if isinstance(value, str):
        if not ISO_8601_PATTERN.fullmatch(value.strip()):
            logger.debug("ISO-8601 형식이 아닌 날짜: %r", value)
            return None
        value = value.strip()

    try:
        if isinstance(value, str):
            timestamp = pd.to_datetime(value, utc=utc, format="ISO8601")
        else:
            timestamp = pd.to_datetime(value, utc=utc)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("날짜 파싱 실패: %r (%s)", value, e)
        return None

    if pd.isna(timestamp):
        return None
    return timestamp.to_pydatetime()
