"""
services/password_reset.py

비밀번호 재설정(Reset Password) 비즈니스 로직.

계정마다 재설정 토큰은 하나만 유지한다.

흐름:
1) issue_reset_link(email)
   - 활성 계정을 이메일로 조회, 없으면 None
   - 새 토큰 발급 (기존 토큰은 덮어써서 즉시 무효화)
   - 만료 시각 = 현재 + RESET_TOKEN_EXPIRE_MINUTES (기본 30분)
   - 저장 후 링크(base?token=...)를 메일로 보내고 링크 반환
2) reset_password(token, new_password)
   - 토큰이 정확히 일치하고 만료 시각 > 현재 인 계정만 허용
   - 새 salt / 해시로 교체하고 토큰과 만료 시각을 함께 비움
   - 성공 True / 실패 False

설계 원칙:
- 만료 비교는 strict (만료 시각 == 현재 이면 만료)
- 빈 토큰 / 공백 토큰은 절대 일치하지 않음
- 메일 발송 실패는 잡지 않고 호출 측으로 전파 (토큰은 이미 저장된 상태)

관련 파일:
- app.core.security      : salt / 해시
- app.services.email     : 재설정 메일 발송
- app.routers.auth       : forgot-password / reset-password API

"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import generate_salt, hash_password
from app.db.base import utcnow
from app.models.user import User
from app.services.email import EmailService


class PasswordResetService:
    def __init__(
        self,
        db: Session,
        email_service: EmailService,
        logger: logging.Logger,
        *,
        expire_minutes: int | None = None,
    ):
        self.db = db
        self.email_service = email_service
        self.logger = logger
        self.expire_minutes = settings.RESET_TOKEN_EXPIRE_MINUTES if expire_minutes is None else expire_minutes

    def issue_reset_link(self, email: str, reset_url_base: str, now: Optional[datetime] = None) -> Optional[str]:
        user = self.db.scalar(
            select(User).where(User.email == email, User.deleted_at.is_(None))
        )
        if user is None:
            self.logger.info("Password reset requested for unknown email")
            return None

        now = now or utcnow()
        user.reset_token = str(uuid.uuid4())
        user.reset_token_expiry = now + timedelta(minutes=self.expire_minutes)
        self.db.commit()

        link = f"{reset_url_base}?token={user.reset_token}"

        self.email_service.send_reset_password_email(email, link)
        self.logger.info("Password reset link issued for user_id=%s", user.id)

        return link

    def reset_password(self, token: str | None, new_password: str, now: Optional[datetime] = None) -> bool:
        if not token or not token.strip():
            return False

        now = now or utcnow()
        user = self.db.scalar(
            select(User).where(
                User.reset_token == token,
                User.reset_token_expiry > now,
            )
        )
        if user is None:
            return False

        salt = generate_salt()
        user.password_salt = salt
        user.password_hash = hash_password(new_password, salt)
        user.reset_token = None
        user.reset_token_expiry = None
        self.db.commit()

        self.logger.info("Password reset completed for user_id=%s", user.id)
        return True
