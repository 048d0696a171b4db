"""
인증 기본 플로우 통합 테스트.
- 회원가입 → 로그인 → 세션 정보 조회, 튜터 프로필 조회 / 수정
- 중복 가입 거부 (이메일 먼저), 로그인 실패 메시지 통일
- 비밀번호 찾기 → 메일로 받은 링크의 토큰으로 재설정 → 새 비밀번호로 로그인
"""

import pytest

from app.core.deps import get_email_service
from app.main import app as fastapi_app
from app.services.email import EmailService
from tests.helpers import auth_header


class RecordingSender:
    def __init__(self):
        self.sent = []

    def send(self, to, subject, body):
        self.sent.append((to, subject, body))


@pytest.fixture()
def outbox(client):
    sender = RecordingSender()
    fastapi_app.dependency_overrides[get_email_service] = lambda: EmailService(sender)
    yield sender.sent
    fastapi_app.dependency_overrides.pop(get_email_service, None)


def _register(client, **overrides):
    payload = {
        "email": "tutor@test.com",
        "username": "tutor1",
        "password": "Passw0rd!",
        "first_name": "Tina",
        "last_name": "Tutor",
        "role": "Tutor",
        "skills": "Math, Physics",
    }
    payload.update(overrides)
    return client.post("/auth/register", json=payload)


def _login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


def test_register_login_me_flow(client):
    reg = _register(client)
    assert reg.status_code == 200, reg.text
    body = reg.json()["data"]
    assert body["username"] == "tutor1"
    assert body["role_name"] == "Tutor"

    login = _login(client, "tutor@test.com", "Passw0rd!")
    assert login.status_code == 200, login.text
    data = login.json()["data"]
    assert data["token_type"] == "bearer"
    assert data["user"] == {
        "user_id": body["id"],
        "username": "tutor1",
        "first_name": "Tina",
        "role_name": "Tutor",
        "role_id": 3,
    }

    me = client.get("/auth/me", headers=auth_header(data["access_token"]))
    assert me.status_code == 200
    assert me.json()["data"]["user_id"] == body["id"]

    profile = client.get("/users/profile", headers=auth_header(data["access_token"]))
    assert profile.status_code == 200
    tutors = profile.json()["data"]["tutors"]
    assert len(tutors) == 1
    assert tutors[0]["skill"] == "Math, Physics"


def test_me_requires_valid_token(client):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers=auth_header("garbage")).status_code == 401


def test_duplicate_email_reported_before_username(client):
    assert _register(client).status_code == 200

    both = _register(client)
    assert both.status_code == 400
    assert both.json()["detail"] == "Email already registered"

    username_only = _register(client, email="other@test.com")
    assert username_only.status_code == 400
    assert username_only.json()["detail"] == "Username already taken"


def test_register_validates_password_length(client):
    r = _register(client, password="short")
    assert r.status_code == 422


def test_login_failure_message_is_generic(client):
    _register(client)

    wrong_pw = _login(client, "tutor@test.com", "WrongPassw0rd!")
    unknown = _login(client, "nobody@test.com", "Passw0rd!")

    assert wrong_pw.status_code == unknown.status_code == 401
    assert wrong_pw.json()["detail"] == unknown.json()["detail"] == "Invalid email or password"


def test_edit_tutor_profile(client):
    _register(client)
    token = _login(client, "tutor@test.com", "Passw0rd!").json()["data"]["access_token"]

    r = client.patch(
        "/users/profile/tutor",
        json={"hourly_rate": "35.00", "availability": "Weekends"},
        headers=auth_header(token),
    )
    assert r.status_code == 200, r.text
    assert r.json()["data"]["availability"] == "Weekends"
    assert r.json()["data"]["skill"] == "Math, Physics"


def test_student_has_no_tutor_profile_to_edit(client):
    _register(client, role="Student", skills=None)
    token = _login(client, "tutor@test.com", "Passw0rd!").json()["data"]["access_token"]

    r = client.patch("/users/profile/tutor", json={"bio": "hi"}, headers=auth_header(token))
    assert r.status_code == 404
    assert r.json()["detail"] == "Tutor profile not found"


def test_forgot_and_reset_password_flow(client, outbox):
    _register(client)

    forgot = client.post("/auth/forgot-password", json={"email": "tutor@test.com"})
    assert forgot.status_code == 200, forgot.text
    assert forgot.json()["data"] == {"status": "reset_link_sent"}
    # 링크는 응답에 포함되지 않고 메일로만 전달
    assert "token" not in forgot.text

    assert len(outbox) == 1
    to, subject, body = outbox[0]
    assert to == "tutor@test.com"
    assert subject == "Reset password"
    token = body.rsplit("?token=", 1)[1].strip()

    mismatch = client.post(
        "/auth/reset-password",
        json={"token": token, "new_password": "NewPassw0rd!", "confirm_password": "OtherPassw0rd!"},
    )
    assert mismatch.status_code == 400
    assert mismatch.json()["detail"] == "Passwords do not match"

    reset = client.post(
        "/auth/reset-password",
        json={"token": token, "new_password": "NewPassw0rd!", "confirm_password": "NewPassw0rd!"},
    )
    assert reset.status_code == 200, reset.text
    assert reset.json()["data"] == {"status": "password_updated"}

    assert _login(client, "tutor@test.com", "Passw0rd!").status_code == 401
    assert _login(client, "tutor@test.com", "NewPassw0rd!").status_code == 200

    reused = client.post(
        "/auth/reset-password",
        json={"token": token, "new_password": "NewPassw0rd!", "confirm_password": "NewPassw0rd!"},
    )
    assert reused.status_code == 400
    assert reused.json()["detail"] == "Invalid or expired token"


def test_forgot_password_unknown_email(client, outbox):
    r = client.post("/auth/forgot-password", json={"email": "nobody@test.com"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Email not found"
    assert outbox == []
