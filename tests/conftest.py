import logging
import os

# 테스트에서는 해시 반복 횟수를 낮춰서 속도 확보 (app import 전에 설정해야 반영됨)
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app as fastapi_app
from app.core.config import settings
from app.core.deps import get_db
from app.db.base import Base
from app.db.session import build_engine

# ✅ 모델 import (Base.metadata에 테이블 등록)
import app.models  # noqa: F401


TEST_DB_URL = settings.TEST_DATABASE_URL or "sqlite://"

if TEST_DB_URL == "sqlite://":
    # 메모리 DB는 커넥션마다 새로 생기므로 하나의 커넥션을 공유
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
else:
    engine = build_engine(TEST_DB_URL)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_test_db():
    """각 테스트마다 스키마 새로 생성 / 종료 후 삭제"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def logger():
    return logging.getLogger("tutorlink.tests")


@pytest.fixture()
def client():
    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
