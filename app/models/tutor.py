"""
tutor.py

튜터 프로필(Tutor) 모델 정의 파일.

TUTOR 권한 계정에 딸린 튜터 전용 정보(과목, 시급, 평점, 소개 등)를 관리한다.
계정(User)이 유일한 소유자이며, 계정 Soft Delete 시 함께 Soft Delete 된다.

- skill         : 쉼표로 구분된 과목 목록 (자유 입력)
- hourly_rate   : 시간당 수업료 (미입력 가능)
- average_rating: 평균 평점 0~5 (NULL = 평가 없음)
- total_reviews : 리뷰 수
- deleted_at    : Soft Delete (NULL = 활성)

"""

import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, utcnow


class Tutor(Base):
    __tablename__ = "tutors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    skill: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    hourly_rate: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    average_rating: Mapped[Decimal | None] = mapped_column(Numeric(3, 2), nullable=True)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bio: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    availability: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)

    user: Mapped["User"] = relationship(back_populates="tutors")
