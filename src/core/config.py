"""
설정 관리 모듈
==============

이 모듈은 헬퍼 라이브러리의 모든 설정을 중앙에서 관리합니다.
환경 변수와 도메인 상수(지역 필터, 검증 정책, 숫자 단위 등)를 정의합니다.

주요 기능:
- 환경 변수 로드 및 관리
- 로깅 설정값 정의
- 필터/검증/포맷팅 상수 정의
- 설정 요약 제공

작성자: AI Assistant
버전: 1.0.0
"""

import os
from dotenv import load_dotenv

# 환경 변수 로드 (.env 파일에서 설정값 읽기)
load_dotenv()

# =============================================================================
# 로깅 설정
# =============================================================================

# 로그 레벨 (기본값: INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 로그 형식: "text" 또는 "json"
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# =============================================================================
# 필터 설정
# =============================================================================

# 지역 필터의 "전체" 예약어 (이 값이 들어오면 필터링하지 않음)
ALL_REGIONS = "전체"

# 날짜 정렬 방향
SORT_ORDER_ASC = "asc"
SORT_ORDER_DESC = "desc"

# =============================================================================
# 검증 정책 설정
# =============================================================================

PASSWORD_MIN_LENGTH = 8

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20

# 사용자명에 허용되는 특수문자
USERNAME_SPECIAL_CHARS = "_-"

# =============================================================================
# 숫자/통화 포맷팅 설정
# =============================================================================

# 한국어 큰 수 단위 (큰 단위부터 검사)
NUMBER_UNITS = [
    (10 ** 12, "조"),
    (10 ** 8, "억"),
    (10 ** 4, "만"),
    (10 ** 3, "천"),
]

# 기본 소수점 자릿수
DEFAULT_PRECISION = 1

CURRENCY_SYMBOL = "₩"

# 월세 표기 단위 (만원)
MONTHLY_UNIT = 10 ** 4
MONTHLY_SUFFIX = "만원"

# 값이 없거나 숫자가 아닐 때 표시할 문자열
EMPTY_DISPLAY = "-"
INFINITY_DISPLAY = "∞"

# 날짜를 해석할 수 없을 때 표시할 문자열
INVALID_DATE_DISPLAY = "날짜 없음"

# =============================================================================
# 유틸리티 함수
# =============================================================================

def get_config_summary():
    """
    현재 설정 요약 정보 반환

    Returns:
        dict: 설정 정보 딕셔너리
    """
    return {
        "log_level": LOG_LEVEL,
        "log_format": LOG_FORMAT,
        "all_regions": ALL_REGIONS,
        "password_min_length": PASSWORD_MIN_LENGTH,
        "username_length": {
            "min": USERNAME_MIN_LENGTH,
            "max": USERNAME_MAX_LENGTH
        },
        "number_units": [suffix for _, suffix in NUMBER_UNITS],
        "currency_symbol": CURRENCY_SYMBOL
    }
