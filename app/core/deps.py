from typing import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import decode_session_token
from app.db.session import SessionLocal
from app.models.user import Role
from app.schemas.auth import UserSession
from app.services.account import AccountService
from app.services.admin import AdminService
from app.services.email import EmailService, build_email_sender
from app.services.password_reset import PasswordResetService
from app.services.tutor import LoggingTutorService, TutorDirectory, TutorService

# Swagger Authorize에서 "Bearer 토큰" 입력받는 스키마
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_session(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserSession:
    if cred is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_session_token(cred.credentials)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_role(role: Role):
    def _checker(session: UserSession = Depends(get_current_session)) -> UserSession:
        if session.role_id != role.value:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. {role.label} privileges required.",
            )
        return session
    return _checker

get_current_admin = require_role(Role.ADMIN)


# 서비스 조립 (요청마다 DB 세션과 logger를 주입)

def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db, get_logger("account"))


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(db, get_logger("admin"))


def get_tutor_service(db: Session = Depends(get_db)) -> TutorDirectory:
    return LoggingTutorService(TutorService(db, get_logger("tutor")), get_logger("tutor.calls"))


def get_email_service() -> EmailService:
    return EmailService(build_email_sender(settings, get_logger("email")))


def get_password_reset_service(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> PasswordResetService:
    return PasswordResetService(db, email_service, get_logger("password_reset"))
