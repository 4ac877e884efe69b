"""
숫자 포맷팅 모듈
===============

숫자와 금액을 한국어 표기 문자열로 변환합니다.

주요 기능:
- 천/만/억/조 단위 축약 표기 (예: 15000 -> "1.5만")
- 원화 표기 (예: 15000 -> "₩15,000", 월세 1500000 -> "150만원")

반올림은 부동소수점 오차를 피하기 위해 Decimal로 계산합니다 (사사오입).

작성자: AI Assistant
버전: 1.0.0
"""

import logging
import math
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP, localcontext
from typing import Any, Optional

from ..core.config import (
    CURRENCY_SYMBOL,
    DEFAULT_PRECISION,
    EMPTY_DISPLAY,
    INFINITY_DISPLAY,
    MONTHLY_SUFFIX,
    MONTHLY_UNIT,
    NUMBER_UNITS,
)
from .helpers import is_number

logger = logging.getLogger(__name__)

CURRENCY_MODE_DEFAULT = "default"
CURRENCY_MODE_MONTHLY = "monthly"


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    return Decimal(str(float(value)))


def _round(value: Decimal, precision: int, ceiling: Optional[Decimal] = None) -> Decimal:
    """
    value를 precision 자리로 반올림하는 함수

    반올림 결과가 ceiling 이상이 되어 다음 단위로 넘어가게 되면
    반올림 대신 버림을 적용합니다 (9999 -> "9.9천").
    """
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + precision + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        if ceiling is not None and rounded >= ceiling:
            rounded = value.quantize(quantum, rounding=ROUND_DOWN)
    return rounded


def _to_text(value: Decimal) -> str:
    """소수점 이하의 불필요한 0을 제거한 문자열"""
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def _signed(original: Any, rounded: Decimal, text: str) -> str:
    """음수이고 반올림 결과가 0이 아니면 앞에 '-'를 붙임"""
    if original < 0 and rounded != 0:
        return "-" + text
    return text


def _special_display(value: Any) -> Optional[str]:
    """None, NaN, 숫자가 아닌 값, 무한대에 대한 표시 문자열 (일반 숫자이면 None)"""
    if value is None:
        return EMPTY_DISPLAY
    if not is_number(value):
        if not (isinstance(value, float) and math.isnan(value)):
            logger.warning("숫자가 아닌 값은 포맷팅할 수 없습니다: %r", value)
        return EMPTY_DISPLAY
    if math.isinf(value):
        return INFINITY_DISPLAY if value > 0 else "-" + INFINITY_DISPLAY
    return None


def format_number(num: Any, precision: int = DEFAULT_PRECISION) -> str:
    """
    숫자를 한국어 단위(천/만/억/조)로 축약하는 함수

    Args:
        num (Any): 포맷팅할 숫자
        precision (int): 소수점 자릿수 (기본값: 1)

    Returns:
        str: 포맷팅된 문자열. None/NaN은 "-", 무한대는 "∞"

    Raises:
        ValueError: precision이 0 이상의 정수가 아닌 경우

    Examples:
        >>> format_number(1500)
        '1.5천'
        >>> format_number(100000)
        '10만'
        >>> format_number(-50000)
        '-5만'
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError(f"precision은 0 이상의 정수여야 합니다: {precision!r}")

    special = _special_display(num)
    if special is not None:
        return special

    magnitude = abs(_to_decimal(num))

    # 큰 단위부터 검사하며, 바로 위 단위가 현재 단위 구간의 상한이 됨
    ceiling = None
    for unit, suffix in NUMBER_UNITS:
        if magnitude >= unit:
            break
        ceiling = unit
    else:
        unit, suffix = 1, ""

    limit = Decimal(ceiling) / Decimal(unit) if ceiling else None
    rounded = _round(magnitude / Decimal(unit), precision, limit)
    return _signed(num, rounded, _to_text(rounded) + suffix)


def format_currency(amount: Any, mode: str = CURRENCY_MODE_DEFAULT) -> str:
    """
    금액을 원화 표기 문자열로 변환하는 함수

    Args:
        amount (Any): 금액 (원)
        mode (str): 'default'는 "₩1,234,567", 'monthly'는 "150만원" 형식

    Returns:
        str: 포맷팅된 금액 문자열

    Raises:
        ValueError: 지원하지 않는 mode인 경우
    """
    if mode not in (CURRENCY_MODE_DEFAULT, CURRENCY_MODE_MONTHLY):
        raise ValueError(f"지원하지 않는 통화 표기 방식입니다: {mode!r}")

    special = _special_display(amount)
    if special is not None:
        return special

    magnitude = abs(_to_decimal(amount))

    if mode == CURRENCY_MODE_MONTHLY:
        rounded = _round(magnitude / Decimal(MONTHLY_UNIT), 1)
        return _signed(amount, rounded, _to_text(rounded) + MONTHLY_SUFFIX)

    won = _round(magnitude, 0)
    return _signed(amount, won, f"{CURRENCY_SYMBOL}{int(won):,}")
