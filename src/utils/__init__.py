"""
헬퍼 함수 패키지
===============

이 패키지는 화면 표시와 폼 처리에 사용되는 순수 함수들을 포함합니다.

모듈 목록:
- data_filters: 지역 필터링, 평점/작성일 정렬, 게시글 검색
- validation: 이메일/비밀번호/사용자명 검증
- format_number: 한국어 단위 숫자 및 원화 표기
- format_date: 상대/절대 날짜 표기
- helpers: 공통 도우미 함수

작성자: AI Assistant
버전: 1.0.0
"""

from .data_filters import (
    filter_by_region,
    sort_by_rating,
    sort_by_date,
    search_posts,
    get_regions,
    count_by_region,
)
from .validation import validate_email, validate_password, validate_username
from .format_number import format_number, format_currency
from .format_date import format_date, format_date_absolute

__all__ = [
    'filter_by_region', 'sort_by_rating', 'sort_by_date', 'search_posts',
    'get_regions', 'count_by_region',
    'validate_email', 'validate_password', 'validate_username',
    'format_number', 'format_currency',
    'format_date', 'format_date_absolute',
]
