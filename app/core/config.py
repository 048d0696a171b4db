"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

이 파일은 .env 환경 변수들을 Pydantic BaseSettings를 통해 로드하여
애플리케이션 전반에서 공통으로 사용하는 설정 값을 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보
- 세션 토큰(JWT) 시크릿 및 만료 정책
- 비밀번호 해시 반복 횟수
- 비밀번호 재설정 토큰 만료 시간 / 재설정 링크 주소
- 이메일 발송 방식(console / smtp)
- CORS 허용 도메인 목록, 로그 레벨

설계 원칙:
- 모든 환경 변수는 이 파일을 통해서만 접근
- 로컬 / 테스트 / 운영 환경을 .env로 분리하여 관리
- 설정 값은 런타임 중 변경되지 않는 불변 객체로 취급

관련 파일:
- app.main               : CORS / 로깅 초기화 시 설정 사용
- app.core.security      : 세션 토큰 시크릿 / 해시 반복 횟수 사용
- app.db.session         : DATABASE_URL 사용
- app.services.email     : 이메일 발송 설정 사용

"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal

# .env 파일에 정의된 환경 변수를 로드하는 설정 클래스
# extra="ignore" 옵션으로 정의되지 않은 환경 변수는 무시
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./tutorlink.db"
    TEST_DATABASE_URL: str | None = None

    # 세션 토큰 서명용 (운영에서는 반드시 .env로 교체)
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 30

    # pbkdf2-sha256 반복 횟수
    PASSWORD_HASH_ROUNDS: int = 29000

    # 비밀번호 재설정
    RESET_TOKEN_EXPIRE_MINUTES: int = 30
    RESET_URL_BASE: str = "http://localhost:8000/auth/reset-password"

    # 이메일 발송
    # - console : 실제 발송 없이 로그로만 출력 (개발용)
    # - smtp    : SMTP 서버로 실제 발송
    EMAIL_BACKEND: Literal["console", "smtp"] = "console"
    SMTP_SERVER: str | None = None
    SMTP_PORT: int = 587
    SMTP_EMAIL: str | None = None
    SMTP_PASSWORD: str | None = None

    # CORS 허용 도메인 (프론트엔드 주소)
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    LOG_LEVEL: str = "INFO"

# 애플리케이션 전역에서 import하여 사용하는 Settings 인스턴스
# 실행 시 한 번만 생성됨
settings = Settings()
