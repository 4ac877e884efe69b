"""
데이터 모델 모듈
================

도시, 게시글, 검증 결과를 표현하는 Pydantic 모델을 정의합니다.
백엔드에서 받은 camelCase 키(monthlyCost 등)도 별칭으로 받아들입니다.

작성자: AI Assistant
버전: 1.0.0
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class City(BaseModel):
    """도시 정보"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    slug: str = ""
    region: str = Field(description="지역명 (지역 필터의 기준 값)")
    thumbnail: str = ""
    description: str = ""
    badge: Optional[Literal["popular", "rising", "new"]] = None

    # 생활비
    monthly_cost: int = Field(default=0, alias="monthlyCost")
    rent_studio: int = Field(default=0, alias="rentStudio")
    deposit: int = 0

    # 인프라
    internet_speed: int = Field(default=0, alias="internetSpeed")
    cafe_count: int = Field(default=0, alias="cafeCount")
    coworking_count: int = Field(default=0, alias="coworkingCount")

    # 날씨
    avg_temperature: float = Field(default=0, alias="avgTemperature")
    current_temperature: float = Field(default=0, alias="currentTemperature")
    air_quality: int = Field(default=0, alias="airQuality")

    # 점수
    rating: Optional[float] = Field(default=None, ge=0, le=5, description="0~5 사이 평점")
    nomad_score: Optional[float] = Field(default=None, alias="nomadScore")

    # 통계
    review_count: int = Field(default=0, alias="reviewCount")
    like_count: int = Field(default=0, alias="likeCount")
    nomads_now: int = Field(default=0, alias="nomadsNow")

    is_liked: bool = Field(default=False, alias="isLiked")

    @field_validator('name', 'region')
    @classmethod
    def validate_string_not_empty(cls, v):
        """문자열 필드가 비어있지 않은지 검증"""
        if not v or not v.strip():
            raise ValueError('이 필드는 비어있을 수 없습니다.')
        return v.strip()


class Post(BaseModel):
    """게시글 정보"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    title: str = ""
    content: str = ""
    city_id: Optional[str] = Field(default=None, alias="cityId")
    created_at: Optional[str] = Field(default=None, description="ISO-8601 작성 시각")
    rating: Optional[float] = None


class ValidationResult(BaseModel):
    """입력값 검증 결과"""
    valid: bool
    error: Optional[str] = None
    errors: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """값이 없는 키를 제외한 {valid, error?, errors?} 딕셔너리를 반환"""
        return self.model_dump(exclude_none=True)
