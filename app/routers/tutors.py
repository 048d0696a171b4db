"""
tutors.py

튜터 디렉터리 검색 API.

- 로그인 없이 누구나 조회 가능
- 검색 조건은 모두 선택 사항이며, 잘못된 값은 조건 없음으로 처리 (422를 내지 않음)

"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.deps import get_tutor_service
from app.schemas.tutor import TutorSearchFilters
from app.services.tutor import TutorDirectory

router = APIRouter(prefix="/tutors", tags=["tutors"])


# 튜터 검색 (과목 / 시급 범위 / 최소 평점 / 정렬)
@router.get("")
def search_tutors(
    skill: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    min_rating: Optional[str] = None,
    sort_by: Optional[str] = None,
    service: TutorDirectory = Depends(get_tutor_service),
):
    filters = TutorSearchFilters(
        skill=skill,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        sort_by=sort_by,
    )
    result = service.search(filters)
    return {
        "data": result.model_dump(mode="json"),
        "meta": {
            "count": len(result.tutors),
        },
    }


# 필터 UI용 전체 과목 목록
@router.get("/skills")
def list_skills(service: TutorDirectory = Depends(get_tutor_service)):
    return {"data": service.get_all_skills()}


# 튜터 상세 조회
@router.get("/{tutor_id}")
def tutor_details(tutor_id: int, service: TutorDirectory = Depends(get_tutor_service)):
    card = service.get_details(tutor_id)
    if card is None:
        raise HTTPException(status_code=404, detail="Tutor not found")
    return {"data": card.model_dump(mode="json")}
