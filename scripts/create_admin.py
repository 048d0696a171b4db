"""

ADMIN 초기 계정 생성 스크립트.

- 서버 최초 세팅 시 단 한 번 실행하는 용도
- 테이블이 없으면 먼저 생성한다 (create_all)
- .env에 정의된 ADMIN_* 환경 변수를 읽어
  ADMIN 계정을 생성한다.
- 이미 활성 ADMIN 계정이 존재하면 생성하지 않고 종료한다.

사용 목적:
- 회원 관리 API(/admin/*)에 접근할 수 있는
  최초 관리자 계정을 안전하게 초기화하기 위함

사용 방법
- 가상환경 접속
- (.venv) ~\backend~$ python -m scripts.create_admin

"""

import os
from dotenv import load_dotenv
load_dotenv()

from sqlalchemy import select
from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import User, Role
from app.schemas.auth import RegisterRequest
from app.services.admin import AdminService



def main():
    configure_logging(settings.LOG_LEVEL)
    logger = get_logger("scripts.create_admin")

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        exists = db.scalar(
            select(User).where(User.role_id == Role.ADMIN.value, User.deleted_at.is_(None))
        )
        if exists:
            logger.info("ADMIN already exists. Skip creation.")
            return

        data = RegisterRequest(
            email=os.environ["ADMIN_EMAIL"],
            password=os.environ["ADMIN_PASSWORD"],
            username=os.environ.get("ADMIN_USERNAME", "admin"),
            first_name=os.environ.get("ADMIN_FIRST_NAME", "Admin"),
            last_name=os.environ.get("ADMIN_LAST_NAME", "User"),
            role="Admin",
        )

        user = AdminService(db, logger).admin_create(data, Role.from_name(data.role, allow_admin=True).value)
        logger.info("ADMIN created: %s", user.email)

    finally:
        db.close()


if __name__ == "__main__":
    main()
