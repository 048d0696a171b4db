"""
user.py

사용자(User) 및 권한(Role) 모델 정의 파일.

이 파일은 회원의 기본 정보와
권한(Role), 탈퇴 상태(Soft Delete), 비밀번호 salt/해시,
비밀번호 재설정 토큰 정보를 관리한다.

모든 인증, 권한, 튜터 프로필, 관리자 기능의 기준이 되는 핵심 모델이다.

"""

import datetime
from enum import Enum

from sqlalchemy import String, Integer, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, utcnow



"""
사용자 권한(Role) 정의

- ADMIN    (1) : 관리자
- STUDENT  (2) : 학생 (기본 가입 권한)
- TUTOR    (3) : 튜터 (튜터 프로필 보유 가능)

DB에는 숫자 id(role_id)로 저장하고, 화면 표시는 label을 사용한다.

"""

class Role(int, Enum):
    ADMIN = 1
    STUDENT = 2
    TUTOR = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str | None, *, allow_admin: bool = False) -> "Role":
        # 회원 가입: "tutor"만 TUTOR, 나머지는 모두 STUDENT
        # 관리자 생성: "admin"도 인식
        value = (name or "").strip().lower()
        if value == "tutor":
            return cls.TUTOR
        if allow_admin and value == "admin":
            return cls.ADMIN
        return cls.STUDENT



"""
사용자(User) 모델

- email / username 은 탈퇴하지 않은 계정 사이에서만 고유 (partial unique index)
- password_salt / password_hash 로 비밀번호 저장 (평문 저장 없음)
- deleted_at 으로 Soft Delete 지원 (NULL = 활성)
- reset_token / reset_token_expiry 로 비밀번호 재설정 토큰 1개만 유지

"""

class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_active", "email", unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_users_username_active", "username", unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(100), nullable=False)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    password_salt: Mapped[str] = mapped_column(String(200), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(200), nullable=False)

    role_id: Mapped[int] = mapped_column(Integer, nullable=False, default=Role.STUDENT.value)

    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)

    reset_token: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    reset_token_expiry: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    tutors: Mapped[list["Tutor"]] = relationship(back_populates="user")

    @property
    def role(self) -> Role:
        return Role(self.role_id)

    @property
    def role_name(self) -> str:
        return self.role.label

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
