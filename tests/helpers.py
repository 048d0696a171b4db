# tests/helpers.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.security import generate_salt, hash_password
from app.models.tutor import Tutor
from app.models.user import User, Role


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def as_utc_naive(dt: datetime) -> datetime:
    # SQLite는 tz 정보 없이 돌려주므로 비교 전에 맞춰줌
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def create_user_in_db(
    db: Session,
    *,
    email: str | None = None,
    username: str | None = None,
    password: str = "Passw0rd!",
    role: Role = Role.STUDENT,
    first_name: str = "Test",
    last_name: str = "User",
) -> User:
    suffix = uuid.uuid4().hex[:6]
    salt = generate_salt()
    user = User(
        email=email or f"user_{suffix}@test.com",
        username=username or f"user_{suffix}",
        first_name=first_name,
        last_name=last_name,
        password_salt=salt,
        password_hash=hash_password(password, salt),
        role_id=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_tutor_in_db(
    db: Session,
    *,
    skill: str,
    hourly_rate=None,
    average_rating=None,
    total_reviews: int = 0,
    created_at: datetime | None = None,
    first_name: str = "Tutor",
    last_name: str = "User",
    bio: str | None = None,
    availability: str | None = None,
) -> Tutor:
    user = create_user_in_db(db, role=Role.TUTOR, first_name=first_name, last_name=last_name)
    tutor = Tutor(
        user_id=user.id,
        skill=skill,
        hourly_rate=Decimal(str(hourly_rate)) if hourly_rate is not None else None,
        average_rating=Decimal(str(average_rating)) if average_rating is not None else None,
        total_reviews=total_reviews,
        bio=bio,
        availability=availability,
    )
    if created_at is not None:
        tutor.created_at = created_at
    db.add(tutor)
    db.commit()
    db.refresh(tutor)
    return tutor


def create_admin_and_login(client, db: Session) -> dict:
    """
    ADMIN 계정 생성 후 로그인하여 토큰 반환
    """
    password = "AdminPassw0rd!"
    admin = create_user_in_db(db, password=password, role=Role.ADMIN, first_name="Admin")

    login = client.post("/auth/login", json={"email": admin.email, "password": password})
    assert login.status_code == 200, login.text

    return {
        "admin_id": admin.id,
        "admin_email": admin.email,
        "admin_token": login.json()["data"]["access_token"],
    }
