"""
auth.py

인증(Authentication) 및 비밀번호 재설정 API 모음.

이 파일은 회원 가입, 로그인, 비밀번호 재설정과 같이
사용자 인증 흐름 전반을 담당한다.
로그인 성공 시 사용자 식별 정보(UserSession)를 담은 세션 토큰(JWT)을 발급한다.

주요 기능:
- 회원 가입 (이메일 → 아이디 순서로 중복 확인 후 가입)
- 로그인 및 세션 토큰 발급
- 현재 로그인 사용자 식별 정보 조회
- 비밀번호 재설정 링크 발송
- 재설정 토큰으로 비밀번호 변경

설계 원칙:
- 세션 토큰은 Authorization Header(Bearer)로 전달
- 로그인 실패 사유는 구분하지 않음 ("Invalid email or password")
- 비즈니스 규칙은 services 계층에 위임하고, 여기서는 HTTP 응답 변환만 수행

관련 파일:
- app.core.security          : 세션 토큰 생성
- app.core.deps              : 서비스 / 인증 의존성
- app.services.account       : 회원 가입 / 로그인
- app.services.password_reset: 비밀번호 재설정
- app.schemas.auth           : 인증 관련 요청/응답

"""

from fastapi import APIRouter, Depends, HTTPException, status

from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.deps import (
    get_account_service,
    get_current_session,
    get_password_reset_service,
)
from app.core.security import create_session_token
from app.schemas.auth import (
    RegisterRequest, RegisterResponse,
    LoginRequest, SessionTokenResponse, UserSession,
    ForgotPasswordRequest, ResetPasswordRequest,
)
from app.services.account import AccountService, to_session
from app.services.password_reset import PasswordResetService

router = APIRouter(prefix="/auth", tags=["auth"])

"""
회원 가입 API

- 활성 계정 기준 이메일 중복 → 아이디 중복 순서로 확인
- role이 "Tutor"면 TUTOR, 그 외는 STUDENT
- TUTOR이고 과목을 입력한 경우 튜터 프로필도 함께 생성

"""

@router.post("/register")
def register(data: RegisterRequest, service: AccountService = Depends(get_account_service)):

    if service.is_email_taken(data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    if service.is_username_taken(data.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")

    try:
        user = service.register(data)
    except IntegrityError:
        service.db.rollback()
        raise HTTPException(status_code=400, detail="Email or username already registered")

    return {
        "data": RegisterResponse(
            id=user.id,
            email=user.email,
            username=user.username,
            role_name=user.role_name,
        ).model_dump(),
    }


"""
로그인 API

- 이메일 / 비밀번호 인증 (탈퇴 계정 제외)
- 세션 토큰과 사용자 식별 정보 반환

"""

@router.post("/login")
def login(data: LoginRequest, service: AccountService = Depends(get_account_service)):

    user = service.authenticate(data.email, data.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    session = to_session(user)
    return {
        "data": SessionTokenResponse(
            access_token=create_session_token(session),
            user=session,
        ).model_dump(),
    }


# 현재 세션 토큰의 사용자 식별 정보
@router.get("/me")
def me(session: UserSession = Depends(get_current_session)):
    return {"data": session.model_dump()}


"""
비밀번호 재설정 링크 발송 API

- 활성 계정이 없으면 404
- 링크는 메일로만 전달하고 응답에는 포함하지 않음

"""

@router.post("/forgot-password")
def forgot_password(
    data: ForgotPasswordRequest,
    service: PasswordResetService = Depends(get_password_reset_service),
):
    link = service.issue_reset_link(data.email, settings.RESET_URL_BASE)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Email not found")

    return {
        "data": {
            "status": "reset_link_sent",
        }
    }


"""
비밀번호 재설정 API

- 새 비밀번호 / 확인 값 일치 필요
- 토큰이 없거나 만료되었으면 400

"""

@router.post("/reset-password")
def reset_password(
    data: ResetPasswordRequest,
    service: PasswordResetService = Depends(get_password_reset_service),
):
    if data.new_password != data.confirm_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Passwords do not match")

    if not service.reset_password(data.token, data.new_password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid or expired token")

    return {
        "data": {
            "status": "password_updated",
        }
    }
