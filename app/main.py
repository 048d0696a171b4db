"""
main.py

TutorLink 백엔드 FastAPI 진입점.

서버 시작 시 로그 설정을 한 번 초기화하고,
CORS / 라우터 / 공통 예외 변환을 조립한다.

주요 역할:
- 로그 설정 (configure_logging)
- CORS 미들웨어 설정 (프론트엔드 주소 허용)
- 라우터 등록: auth, users, tutors, admin
- 서비스 계층 예외 → HTTP 응답 변환
  (BusinessRuleError → 400, UserNotFoundError → 404)
- /health, /db-ping 상태 확인

설계 원칙:
- 조립만 담당하고 비즈니스 규칙은 services 계층에 둔다
- 라우터가 직접 잡지 않은 서비스 예외도 여기서 일관된 형태({"detail": ...})로 응답

관련 파일:
- app.core.config        : 설정 로드
- app.core.logging       : 로그 설정
- app.core.exceptions    : 서비스 예외 정의
- app.routers.*          : 기능별 API 라우터

실행:
- pip install -e ".[server]"
- uvicorn app.main:app --reload

"""

from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text

from app.core.config import settings
from app.core.deps import get_db
from app.core.exceptions import BusinessRuleError, UserNotFoundError
from app.core.logging import configure_logging, get_logger
from app.routers import auth, users, tutors, admin

configure_logging(settings.LOG_LEVEL)
logger = get_logger("main")

app = FastAPI(title="TutorLink Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (auth, users, tutors, admin):
    app.include_router(module.router)


@app.exception_handler(BusinessRuleError)
def business_rule_error_handler(request: Request, exc: BusinessRuleError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.exception_handler(UserNotFoundError)
def user_not_found_handler(request: Request, exc: UserNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "User not found"})


# 프로세스 생존 여부 (로드밸런서 / 배포 환경 확인용)
@app.get("/health")
def health():
    return {"status": "ok"}


# DB 연결 확인: 서버는 살아 있으나 DB가 죽은 상황을 분리해서 감지
@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    value = db.execute(text("SELECT 1")).scalar_one()
    return {"db": "ok", "value": value}
