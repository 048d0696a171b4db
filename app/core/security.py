"""
security.py

비밀번호 해싱 및 세션 토큰 생성/검증을 담당하는 보안 유틸리티 모음.

이 파일은 인증(auth) 로직에서 사용하는
저수준(low-level) 보안 기능만을 제공하며,
라우터나 비즈니스 로직은 포함하지 않는다.

주요 기능:
- 계정별 랜덤 salt 생성
- salt + 비밀번호 기반 해시 생성 및 검증 (pbkdf2-sha256)
- 로그인 사용자 식별 정보(UserSession)를 담은 세션 토큰 생성
- 세션 토큰 디코딩 및 검증

설계 원칙:
- salt는 계정마다 별도로 저장하고, 해시는 (비밀번호, salt)에 대해 결정적
- 같은 입력이면 항상 같은 해시, 비밀번호나 salt가 다르면 다른 해시
- salt/해시 형식 오류는 비즈니스 오류가 아닌 프로그래밍 오류로 취급 (즉시 예외)
- 검증은 해시 문자열에 기록된 반복 횟수를 따름 (반복 횟수 설정 변경과 무관)
- 시간 기반(exp) 만료는 UTC 기준으로 처리

관련 파일:
- app.core.config        : 토큰 시크릿 / 해시 반복 횟수 설정
- app.core.deps          : 토큰을 실제로 검증하는 인증 의존성
- app.services.account   : 회원 가입 / 로그인
- app.services.password_reset : 비밀번호 재설정

"""

import base64
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.hash import pbkdf2_sha256

from app.core.config import settings
from app.schemas.auth import UserSession


SALT_SIZE = 32


"""
salt 생성 함수

- 암호학적으로 안전한 난수 32바이트
- DB 저장을 위해 base64 문자열로 반환

"""

def generate_salt() -> str:
    return base64.b64encode(secrets.token_bytes(SALT_SIZE)).decode("ascii")


"""
비밀번호 해싱 함수

- base64 salt를 원래 바이트로 복원하여 pbkdf2-sha256에 고정 salt로 사용
- (password, salt)가 같으면 항상 같은 결과
- 잘못된 base64 salt는 binascii.Error 발생

"""

def hash_password(password: str, salt: str) -> str:
    salt_bytes = base64.b64decode(salt, validate=True)
    handler = pbkdf2_sha256.using(salt=salt_bytes, rounds=settings.PASSWORD_HASH_ROUNDS)
    return handler.hash(password)


"""
비밀번호 검증 함수

- 저장된 해시 문자열에 기록된 반복 횟수로 검증
  (PASSWORD_HASH_ROUNDS를 바꿔도 기존 계정은 그대로 로그인 가능)
- 해시에 담긴 salt가 계정에 저장된 salt와 다르면 실패
- 잘못된 형식의 salt / 해시는 ValueError 발생

"""

def verify_password(password: str, password_hash: str, salt: str) -> bool:
    salt_bytes = base64.b64decode(salt, validate=True)
    stored = pbkdf2_sha256.from_string(password_hash)
    if not hmac.compare_digest(stored.salt, salt_bytes):
        return False
    return pbkdf2_sha256.verify(password, password_hash)


"""
세션 토큰 생성 함수

- 로그인 성공 시 UserSession 정보를 JWT로 서명하여 반환
- sub: 사용자 id, 나머지 필드는 화면 표시 / 권한 확인용
- exp: 만료 시각 (UTC timestamp)

"""

def create_session_token(session: UserSession, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    )
    payload = {
        "sub": str(session.user_id),
        "username": session.username,
        "first_name": session.first_name,
        "role_name": session.role_name,
        "role_id": session.role_id,
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


"""
세션 토큰 디코딩 함수

- 서명 / 만료 검증 후 UserSession 복원
- 유효하지 않을 경우 JWTError 발생

"""

def decode_session_token(token: str) -> UserSession:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    sub = payload.get("sub")
    if not sub:
        raise JWTError("Missing subject")
    return UserSession(
        user_id=int(sub),
        username=payload.get("username", ""),
        first_name=payload.get("first_name", ""),
        role_name=payload.get("role_name", "Student"),
        role_id=int(payload.get("role_id", 0)),
    )
