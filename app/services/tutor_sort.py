"""
services/tutor_sort.py

튜터 검색 결과 정렬 기준 모음.

정렬 기준은 고정된 4가지이며, 각 기준은 sorted()에 넘길 key 함수로 표현한다.
모든 정렬은 안정 정렬(stable)이므로 key가 같으면 입력 순서를 유지한다.

- rating     : 평점 내림차순, 같으면 리뷰 수 내림차순 (평점 없음은 맨 뒤)
- price_asc  : 시급 오름차순 (시급 없음은 최대값 취급 → 맨 뒤)
- price_desc : 시급 내림차순 (시급 없음은 0 취급)
- newest     : 등록일 내림차순

알 수 없는 값이나 미지정은 rating으로 처리한다.

"""

from enum import Enum
from typing import Callable, Iterable, List

from app.models.tutor import Tutor


class SortKey(str, Enum):
    RATING = "rating"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "newest"

    @classmethod
    def parse(cls, value: str | None) -> "SortKey":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.RATING


def _by_rating(t: Tutor):
    return (t.average_rating is None, -(t.average_rating or 0), -(t.total_reviews or 0))


def _by_price_asc(t: Tutor):
    return (t.hourly_rate is None, t.hourly_rate or 0)


def _by_price_desc(t: Tutor):
    return -(t.hourly_rate or 0)


def _by_newest(t: Tutor):
    return -t.created_at.timestamp()


SORT_KEYS: dict[SortKey, Callable[[Tutor], object]] = {
    SortKey.RATING: _by_rating,
    SortKey.PRICE_ASC: _by_price_asc,
    SortKey.PRICE_DESC: _by_price_desc,
    SortKey.NEWEST: _by_newest,
}


def sort_tutors(tutors: Iterable[Tutor], sort_by: str | None) -> List[Tutor]:
    return sorted(tutors, key=SORT_KEYS[SortKey.parse(sort_by)])
