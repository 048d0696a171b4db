"""
services/account.py

회원 계정(Account) 비즈니스 로직 (회원 본인용).

주요 기능:
- 이메일 / 아이디 사용 여부 확인
- 회원 가입 (salt + 해시 생성, TUTOR 가입 시 튜터 프로필 생성)
- 로그인 (이메일 조회 + 비밀번호 검증)
- 로그인 사용자 식별 정보(UserSession) 생성
- 본인 정보 / 튜터 프로필 조회 및 수정

설계 원칙:
- HTTP / FastAPI 의존성 없음
- register()는 중복 검사를 하지 않음 → 호출 측에서 is_*_taken()으로 먼저 확인
- 로그인 실패 사유(없는 계정 / 틀린 비밀번호)를 구분하지 않고 모두 None
- 탈퇴 계정(deleted_at != NULL)은 로그인 / 중복 검사 대상에서 제외

관련 파일:
- app.core.security      : salt / 해시
- app.models.user        : User / Role 모델
- app.models.tutor       : Tutor 모델
- app.routers.auth       : 회원 가입 / 로그인 API

"""

import logging
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import UserNotFoundError
from app.core.security import generate_salt, hash_password, verify_password
from app.models.tutor import Tutor
from app.models.user import User, Role
from app.schemas.auth import RegisterRequest, UserSession
from app.schemas.tutor import TutorProfileUpdate


def build_user(data: RegisterRequest, role: Role) -> User:
    salt = generate_salt()
    return User(
        email=data.email,
        username=data.username,
        first_name=data.first_name,
        last_name=data.last_name,
        password_salt=salt,
        password_hash=hash_password(data.password, salt),
        role_id=role.value,
    )


def to_session(user: User) -> UserSession:
    return UserSession(
        user_id=user.id,
        username=user.username,
        first_name=user.first_name,
        role_name=user.role_name,
        role_id=user.role_id,
    )


class AccountService:
    def __init__(self, db: Session, logger: logging.Logger):
        self.db = db
        self.logger = logger

    def is_email_taken(self, email: str) -> bool:
        return bool(self.db.scalar(
            select(exists().where(User.email == email, User.deleted_at.is_(None)))
        ))

    def is_username_taken(self, username: str) -> bool:
        return bool(self.db.scalar(
            select(exists().where(User.username == username, User.deleted_at.is_(None)))
        ))

    """
    회원 가입

    - role 문자열이 "tutor"(대소문자 무시)면 TUTOR, 그 외는 STUDENT
    - TUTOR이고 과목(skills)이 비어있지 않을 때만 튜터 프로필 생성
    - 계정과 튜터 프로필은 한 트랜잭션으로 저장

    """
    def register(self, data: RegisterRequest) -> User:
        role = Role.from_name(data.role)
        user = build_user(data, role)
        self.db.add(user)
        self.db.flush()

        if role == Role.TUTOR and data.skills and data.skills.strip():
            self.db.add(Tutor(user_id=user.id, skill=data.skills))

        self.db.commit()
        self.db.refresh(user)

        self.logger.info("User registered: user_id=%s role=%s", user.id, user.role_name)
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        user = self.db.scalar(
            select(User).where(User.email == email, User.deleted_at.is_(None))
        )
        if user is None:
            return None
        if not verify_password(password, user.password_hash, user.password_salt):
            return None
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.scalar(
            select(User)
            .options(selectinload(User.tutors))
            .where(User.id == user_id, User.deleted_at.is_(None))
        )

    """
    튜터 프로필 수정

    - 계정의 활성 튜터 프로필만 수정 가능
    - None인 항목은 기존 값 유지
    - 활성 프로필이 없으면 UserNotFoundError

    """
    def update_tutor_profile(self, user_id: int, data: TutorProfileUpdate) -> Tutor:
        tutor = self.db.scalar(
            select(Tutor)
            .join(Tutor.user)
            .where(
                Tutor.user_id == user_id,
                Tutor.deleted_at.is_(None),
                User.deleted_at.is_(None),
            )
            .order_by(Tutor.id)
            .limit(1)
        )
        if tutor is None:
            raise UserNotFoundError(user_id)

        if data.skill is not None:
            tutor.skill = data.skill
        if data.hourly_rate is not None:
            tutor.hourly_rate = data.hourly_rate
        if data.bio is not None:
            tutor.bio = data.bio
        if data.availability is not None:
            tutor.availability = data.availability

        self.db.commit()
        self.db.refresh(tutor)
        return tutor
