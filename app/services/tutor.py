"""
services/tutor.py

튜터 디렉터리 검색 비즈니스 로직(Service).

이 파일은 튜터 목록 검색/필터/정렬과
화면 표시용 카드(TutorCard) 변환,
필터 UI에 쓰이는 전체 과목 목록 계산을 담당한다.

주요 기능:
- 과목(부분 일치, 유니코드 대소문자 무시) / 시급 범위 / 최소 평점 필터
  (시급 / 평점은 SQL에서, 과목은 조회 후 casefold 비교)
- 4가지 정렬 기준 (app.services.tutor_sort)
- 튜터 상세 조회
- 전체 과목 목록 (검색 조건과 무관한 전역 목록)

설계 원칙:
- 검색 조건은 권고 사항일 뿐, 어떤 입력도 에러로 거부하지 않음
  (0 이하 / 해석 불가 값은 조건 없음으로 처리)
- 탈퇴한 계정 / 삭제된 튜터 프로필은 어떤 결과에도 포함하지 않음
- 로깅은 LoggingTutorService로 감싸서 추가 (같은 인터페이스를 구현)

관련 파일:
- app.models.tutor        : Tutor 모델
- app.services.tutor_sort : 정렬 기준
- app.routers.tutors      : 튜터 검색 API

"""

import logging
from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session, contains_eager

from app.models.tutor import Tutor
from app.models.user import User
from app.schemas.tutor import TutorCard, TutorSearchFilters, TutorSearchResult
from app.services.tutor_sort import sort_tutors


class TutorDirectory(Protocol):
    def search(self, filters: TutorSearchFilters) -> TutorSearchResult: ...

    def get_details(self, tutor_id: int) -> Optional[TutorCard]: ...

    def get_all_skills(self) -> List[str]: ...


"""
과목 문자열 분리

- 쉼표 기준으로 나누고 앞뒤 공백 제거
- 빈 항목은 버림

"""

def split_skills(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


def to_card(tutor: Tutor) -> TutorCard:
    user = tutor.user
    return TutorCard(
        id=tutor.id,
        full_name=user.full_name,
        username=user.username,
        email=user.email,
        skills=split_skills(tutor.skill),
        hourly_rate=tutor.hourly_rate,
        average_rating=tutor.average_rating,
        total_reviews=tutor.total_reviews or 0,
        bio=tutor.bio,
        availability=tutor.availability,
        is_available=True,
    )


class TutorService:
    def __init__(self, db: Session, logger: logging.Logger):
        self.db = db
        self.logger = logger

    def _live_tutors(self):
        return (
            select(Tutor)
            .join(Tutor.user)
            .options(contains_eager(Tutor.user))
            .where(Tutor.deleted_at.is_(None), User.deleted_at.is_(None))
        )

    def search(self, filters: TutorSearchFilters) -> TutorSearchResult:
        query = self._live_tutors()

        if filters.min_price is not None and filters.min_price > 0:
            query = query.where(Tutor.hourly_rate.is_not(None), Tutor.hourly_rate >= filters.min_price)
        if filters.max_price is not None and filters.max_price > 0:
            query = query.where(Tutor.hourly_rate.is_not(None), Tutor.hourly_rate <= filters.max_price)

        if filters.min_rating is not None and filters.min_rating > 0:
            query = query.where(Tutor.average_rating.is_not(None), Tutor.average_rating >= filters.min_rating)

        # 정렬 전 순서를 id로 고정해서 동점일 때 결과가 흔들리지 않게 함
        tutors = self.db.scalars(query.order_by(Tutor.id)).unique().all()

        # 과목은 DB lower()가 ASCII만 처리하는 경우가 있어 casefold로 비교
        term = (filters.skill or "").strip().casefold()
        if term:
            tutors = [t for t in tutors if term in (t.skill or "").casefold()]

        tutors = sort_tutors(tutors, filters.sort_by)

        return TutorSearchResult(
            **filters.model_dump(),
            tutors=[to_card(t) for t in tutors],
            available_skills=self.get_all_skills(),
        )

    def get_details(self, tutor_id: int) -> Optional[TutorCard]:
        tutor = self.db.scalar(self._live_tutors().where(Tutor.id == tutor_id))
        if tutor is None:
            return None
        return to_card(tutor)

    def get_all_skills(self) -> List[str]:
        raw_skills = self.db.scalars(
            select(Tutor.skill).where(Tutor.deleted_at.is_(None), Tutor.skill != "")
        ).all()

        self.logger.debug("All skills fetched for filtering tutors.")

        return sorted({s for raw in raw_skills for s in split_skills(raw)})


class LoggingTutorService:
    """TutorDirectory 구현을 감싸서 모든 호출을 로그로 남긴 뒤 그대로 위임한다."""

    def __init__(self, inner: TutorDirectory, logger: logging.Logger):
        self._inner = inner
        self._logger = logger

    def search(self, filters: TutorSearchFilters) -> TutorSearchResult:
        self._logger.info("search called: %s", filters.model_dump(exclude_none=True))
        result = self._inner.search(filters)
        self._logger.info("search returned %d tutors", len(result.tutors))
        return result

    def get_details(self, tutor_id: int) -> Optional[TutorCard]:
        self._logger.info("get_details called: tutor_id=%s", tutor_id)
        return self._inner.get_details(tutor_id)

    def get_all_skills(self) -> List[str]:
        self._logger.info("get_all_skills called")
        return self._inner.get_all_skills()
