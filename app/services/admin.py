"""
services/admin.py

관리자 관련 비즈니스 로직(Service) 모음.

이 파일은 관리자 기능에서 공통으로 사용되는
순수 비즈니스 로직을 담당한다.
라우터에서는 이 파일의 함수/클래스를 호출하여
DB 조회/검증/정책 판단을 수행한다.

주요 기능:
- 대시보드 통계 (전체 회원 / 튜터 / 학생 수)
- 회원 목록 / 상세 조회
- 관리자 회원 생성 (권한 id 직접 지정)
- 회원 정보 수정
- 회원 Soft Delete (튜터 프로필까지 함께 삭제)

설계 원칙:
- HTTP / FastAPI 의존성 없음
- 규칙 위반은 BusinessRuleError, 수정 대상 없음은 UserNotFoundError
- 계정 삭제와 튜터 프로필 삭제는 한 번의 commit으로 함께 반영

관련 파일:
- app.models.user        : User / Role 모델
- app.models.tutor       : Tutor 모델
- app.routers.admin      : 관리자 API

"""

import logging
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import DuplicateAccountError, InvalidRoleError, UserNotFoundError
from app.db.base import utcnow
from app.models.tutor import Tutor
from app.models.user import User, Role
from app.schemas.auth import RegisterRequest
from app.schemas.user import AdminStatsResponse, UserUpdate
from app.services.account import build_user


def _parse_role(role_id: int) -> Role:
    try:
        return Role(role_id)
    except ValueError:
        raise InvalidRoleError(role_id)


class AdminService:
    def __init__(self, db: Session, logger: logging.Logger):
        self.db = db
        self.logger = logger

    # 활성 회원 수
    def count_users(self) -> int:
        return self.db.scalar(
            select(func.count()).select_from(User).where(User.deleted_at.is_(None))
        ) or 0

    # 활성 튜터 프로필 수
    def count_tutors(self) -> int:
        return self.db.scalar(
            select(func.count()).select_from(Tutor).where(Tutor.deleted_at.is_(None))
        ) or 0

    # 활성 STUDENT 회원 수
    def count_students(self) -> int:
        return self.db.scalar(
            select(func.count()).select_from(User).where(
                User.role_id == Role.STUDENT.value,
                User.deleted_at.is_(None),
            )
        ) or 0

    def get_stats(self) -> AdminStatsResponse:
        return AdminStatsResponse(
            total_users=self.count_users(),
            total_tutors=self.count_tutors(),
            total_students=self.count_students(),
        )

    def list_users(self) -> List[User]:
        return list(self.db.scalars(
            select(User)
            .options(selectinload(User.tutors))
            .where(User.deleted_at.is_(None))
            .order_by(User.id)
        ).all())

    # 수정 화면용 조회 (탈퇴 여부와 무관)
    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_tutors_by_user_id(self, user_id: int) -> List[Tutor]:
        return list(self.db.scalars(
            select(Tutor).where(Tutor.user_id == user_id).order_by(Tutor.id)
        ).all())

    """
    관리자 회원 생성

    - role_id는 ADMIN / STUDENT / TUTOR 중 하나여야 함
    - 활성 계정 기준 이메일 → 아이디 순서로 중복 검사
    - TUTOR면 과목이 비어있어도 항상 튜터 프로필 생성

    """
    def admin_create(self, data: RegisterRequest, role_id: int) -> User:
        role = _parse_role(role_id)

        if self.db.scalar(select(User.id).where(User.email == data.email, User.deleted_at.is_(None))):
            raise DuplicateAccountError("email", "Email already registered")
        if self.db.scalar(select(User.id).where(User.username == data.username, User.deleted_at.is_(None))):
            raise DuplicateAccountError("username", "Username already taken")

        user = build_user(data, role)
        self.db.add(user)
        self.db.flush()

        if role == Role.TUTOR:
            self.db.add(Tutor(user_id=user.id, skill=(data.skills or "").strip()))

        self.db.commit()
        self.db.refresh(user)

        self.logger.info("User created by admin: user_id=%s role=%s", user.id, role.label)
        return user

    """
    회원 정보 수정

    - 이름 / 이메일 / 아이디 / 권한만 덮어씀
    - id에 해당하는 계정이 없으면 (탈퇴 여부와 무관) UserNotFoundError
    - 다른 활성 계정과 이메일 / 아이디가 겹치면 DuplicateAccountError

    """
    def update_profile(self, user_id: int, data: UserUpdate) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        role = _parse_role(data.role_id)

        # 다른 활성 계정과 겹치면 partial unique index에 걸리기 전에 거부
        others = select(User.id).where(User.id != user_id, User.deleted_at.is_(None))
        if self.db.scalar(others.where(User.email == data.email)):
            raise DuplicateAccountError("email", "Email already registered")
        if self.db.scalar(others.where(User.username == data.username)):
            raise DuplicateAccountError("username", "Username already taken")

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email
        user.username = data.username
        user.role_id = role.value

        self.db.commit()
        self.db.refresh(user)
        return user

    """
    회원 Soft Delete

    - 계정 deleted_at 설정
    - 해당 계정의 모든 튜터 프로필 deleted_at 설정
    - 없는 id면 아무것도 하지 않음

    """
    def soft_delete(self, user_id: int) -> None:
        user = self.db.get(User, user_id)
        if user is None:
            return

        now = utcnow()
        user.deleted_at = now
        for tutor in self.get_tutors_by_user_id(user_id):
            tutor.deleted_at = now

        self.db.commit()
        self.logger.info("User soft-deleted: user_id=%s", user_id)
