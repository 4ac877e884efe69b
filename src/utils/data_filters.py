"""
데이터 필터 모듈
===============

이 모듈은 메모리에 로드된 도시/게시글 목록을 필터링, 정렬, 검색하는
함수들을 제공합니다. 모든 함수는 입력 목록을 변경하지 않고 새 리스트를 반환합니다.

레코드는 딕셔너리이거나 해당 필드를 속성으로 가진 객체(Pydantic 모델 등)일 수 있으며,
각 함수는 필요한 필드만 읽습니다.

주요 기능:
- 지역별 필터링
- 평점순 / 작성일순 정렬 (안정 정렬)
- 제목/내용 검색
- 지역 목록 및 지역별 개수 집계

작성자: AI Assistant
버전: 1.0.0
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..core.config import ALL_REGIONS, SORT_ORDER_ASC, SORT_ORDER_DESC
from .helpers import get_field, is_number, parse_timestamp

logger = logging.getLogger(__name__)


def is_all_regions(region: Optional[str]) -> bool:
    """
    지역 필터 값이 "필터 없음"을 의미하는지 확인하는 함수

    Args:
        region (Optional[str]): 지역 필터 값

    Returns:
        bool: None이거나 "전체"이면 True
    """
    return region is None or region == ALL_REGIONS


def filter_by_region(items: Iterable[Any], region: Optional[str]) -> List[Any]:
    """
    지역으로 레코드를 필터링하는 함수

    Args:
        items (Iterable[Any]): region 필드를 가진 레코드 목록
        region (Optional[str]): 지역명. None 또는 "전체"이면 전체 반환

    Returns:
        List[Any]: 필터링된 레코드 리스트 (입력 순서 유지)
    """
    if is_all_regions(region):
        return list(items)
    return [item for item in items if get_field(item, 'region') == region]


def sort_by_rating(items: Iterable[Any]) -> List[Any]:
    """
    평점이 높은 순으로 정렬하는 함수

    평점이 없거나 숫자가 아닌 레코드는 맨 뒤로 보내며,
    같은 평점끼리는 원래 순서를 유지합니다.

    Args:
        items (Iterable[Any]): rating 필드를 가진 레코드 목록

    Returns:
        List[Any]: 정렬된 새 리스트
    """
    rated = []
    unrated = []
    for item in items:
        if is_number(get_field(item, 'rating')):
            rated.append(item)
        else:
            unrated.append(item)

    # reverse=True여도 sorted()는 같은 키의 순서를 유지함
    rated = sorted(rated, key=lambda item: get_field(item, 'rating'), reverse=True)
    return rated + unrated


def sort_by_date(items: Iterable[Any], order: str = SORT_ORDER_DESC) -> List[Any]:
    """
    created_at 기준으로 정렬하는 함수

    Args:
        items (Iterable[Any]): created_at(ISO-8601 문자열) 필드를 가진 레코드 목록
        order (str): 'desc'(최신순, 기본값) 또는 'asc'(오래된순)

    Returns:
        List[Any]: 정렬된 새 리스트. 날짜가 없거나 해석할 수 없는 레코드는 맨 뒤

    Raises:
        ValueError: order 값이 'asc'/'desc'가 아닌 경우
    """
    if order not in (SORT_ORDER_ASC, SORT_ORDER_DESC):
        raise ValueError(f"지원하지 않는 정렬 방향입니다: {order!r}")

    dated = []
    undated = []
    for item in items:
        timestamp = parse_timestamp(get_field(item, 'created_at'))
        if timestamp is None:
            logger.debug("created_at을 해석할 수 없어 맨 뒤로 정렬: %r", get_field(item, 'id'))
            undated.append(item)
        else:
            dated.append((timestamp, item))

    dated = sorted(dated, key=lambda pair: pair[0], reverse=(order == SORT_ORDER_DESC))
    return [item for _, item in dated] + undated


def search_posts(posts: Iterable[Any], query: Optional[str]) -> List[Any]:
    """
    제목 또는 내용에 검색어가 포함된 게시글을 찾는 함수

    검색어는 앞뒤 공백을 제거한 뒤 하나의 연속된 문자열로 취급하며,
    대소문자를 구분하지 않습니다 (lower 비교). 특수문자는 그대로 비교합니다.

    Args:
        posts (Iterable[Any]): title, content 필드를 가진 레코드 목록
        query (Optional[str]): 검색어. None이거나 비어 있으면 전체 반환

    Returns:
        List[Any]: 검색된 게시글 리스트 (입력 순서 유지)

    Raises:
        TypeError: query가 문자열이 아닌 경우
    """
    if query is not None and not isinstance(query, str):
        raise TypeError(f"검색어는 문자열이어야 합니다: {type(query).__name__}")
    if query is None or not query.strip():
        return list(posts)

    needle = query.strip().lower()
    return [
        post for post in posts
        if needle in (get_field(post, 'title') or "").lower()
        or needle in (get_field(post, 'content') or "").lower()
    ]


def get_regions(items: Iterable[Any]) -> List[str]:
    """
    지역 필터 선택지를 만드는 함수

    Args:
        items (Iterable[Any]): region 필드를 가진 레코드 목록

    Returns:
        List[str]: "전체"를 맨 앞에 둔, 처음 등장한 순서의 지역 목록 (중복 제거)
    """
    regions = [ALL_REGIONS]
    for item in items:
        region = get_field(item, 'region')
        if region and region not in regions:
            regions.append(region)
    return regions


def count_by_region(items: Iterable[Any]) -> Dict[str, int]:
    """
    지역별 레코드 개수를 집계하는 함수

    Args:
        items (Iterable[Any]): region 필드를 가진 레코드 목록

    Returns:
        Dict[str, int]: 개수가 많은 순으로 정렬된 {지역: 개수}
    """
    regions = [get_field(item, 'region') for item in items]
    regions = [region for region in regions if region]
    if not regions:
        return {}
    return {
        region: int(count)
        for region, count in pd.Series(regions).value_counts(sort=True).items()
    }
