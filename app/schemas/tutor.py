from decimal import Decimal, InvalidOperation
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# 검색 조건은 모두 선택 사항이며, 해석할 수 없는 값은 "조건 없음"으로 처리
class TutorSearchFilters(BaseModel):
    skill: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_rating: Optional[Decimal] = None
    sort_by: Optional[str] = None

    @field_validator("min_price", "max_price", "min_rating", mode="before")
    @classmethod
    def _lenient_decimal(cls, v):
        if v is None or isinstance(v, Decimal):
            return v
        try:
            value = Decimal(str(v).strip())
        except (InvalidOperation, ValueError):
            return None
        return value if value.is_finite() else None

    @field_validator("skill", "sort_by", mode="before")
    @classmethod
    def _lenient_str(cls, v):
        return v if v is None or isinstance(v, str) else str(v)


class TutorCard(BaseModel):
    id: int
    full_name: str
    username: str
    email: str
    skills: List[str] = Field(default_factory=list)
    hourly_rate: Optional[Decimal] = None
    average_rating: Optional[Decimal] = None
    total_reviews: int = 0
    bio: Optional[str] = None
    availability: Optional[str] = None
    # 일정 기능이 생기기 전까지는 항상 True
    is_available: bool = True


class TutorSearchResult(TutorSearchFilters):
    tutors: List[TutorCard] = Field(default_factory=list)
    available_skills: List[str] = Field(default_factory=list)


class TutorProfileUpdate(BaseModel):
    skill: Optional[str] = Field(default=None, max_length=255)
    hourly_rate: Optional[Decimal] = Field(default=None, ge=0)
    bio: Optional[str] = Field(default=None, max_length=1000)
    availability: Optional[str] = Field(default=None, max_length=500)


class TutorProfileResponse(BaseModel):
    id: int
    user_id: int
    skill: str
    hourly_rate: Optional[Decimal] = None
    average_rating: Optional[Decimal] = None
    total_reviews: int = 0
    bio: Optional[str] = None
    availability: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
