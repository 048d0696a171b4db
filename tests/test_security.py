"""
비밀번호 해시 / 세션 토큰 단위 테스트.
- 같은 (비밀번호, salt) → 같은 해시, 하나라도 다르면 다른 해시
- salt 길이 / 고유성, 잘못된 salt 입력 시 즉시 예외
- 세션 토큰 생성 → 디코딩 시 UserSession 복원, 변조/만료 토큰 거부
"""

import base64
from datetime import timedelta

import pytest
from jose import JWTError

from app.core.config import settings
from app.core.security import (
    create_session_token,
    decode_session_token,
    generate_salt,
    hash_password,
    verify_password,
)
from app.schemas.auth import UserSession


def test_salt_is_32_random_bytes_base64():
    salt = generate_salt()
    assert len(base64.b64decode(salt)) == 32


def test_salts_are_unique():
    salts = {generate_salt() for _ in range(1000)}
    assert len(salts) == 1000


def test_hash_is_deterministic_for_same_password_and_salt():
    salt = generate_salt()
    assert hash_password("Passw0rd!", salt) == hash_password("Passw0rd!", salt)


def test_hash_differs_when_password_or_salt_differs():
    salt = generate_salt()
    base = hash_password("Passw0rd!", salt)

    assert hash_password("Passw0rd?", salt) != base
    assert hash_password("Passw0rd!", generate_salt()) != base


def test_hash_does_not_contain_plain_password():
    salt = generate_salt()
    assert "Passw0rd!" not in hash_password("Passw0rd!", salt)


def test_verify_password():
    salt = generate_salt()
    stored = hash_password("Passw0rd!", salt)

    assert verify_password("Passw0rd!", stored, salt) is True
    assert verify_password("wrong-password", stored, salt) is False
    # 다른 salt로는 검증 실패
    assert verify_password("Passw0rd!", stored, generate_salt()) is False


def test_malformed_salt_raises():
    with pytest.raises(ValueError):
        hash_password("Passw0rd!", "not base64 !!")


def test_verify_survives_rounds_change(monkeypatch):
    salt = generate_salt()
    stored = hash_password("Passw0rd!", salt)

    # 반복 횟수 설정을 바꿔도 기존 해시는 기록된 횟수로 검증
    monkeypatch.setattr(settings, "PASSWORD_HASH_ROUNDS", settings.PASSWORD_HASH_ROUNDS + 1)

    assert hash_password("Passw0rd!", salt) != stored
    assert verify_password("Passw0rd!", stored, salt) is True
    assert verify_password("wrong-password", stored, salt) is False


def test_malformed_digest_raises():
    with pytest.raises(ValueError):
        verify_password("Passw0rd!", "not-a-digest", generate_salt())


def test_session_token_roundtrip():
    session = UserSession(user_id=7, username="alice", first_name="Alice", role_name="Tutor", role_id=3)
    token = create_session_token(session)

    assert decode_session_token(token) == session


def test_tampered_session_token_rejected():
    token = create_session_token(UserSession(user_id=1, username="bob"))
    head, payload, sig = token.split(".")
    tampered = ".".join([head, payload, sig[::-1]])

    with pytest.raises(JWTError):
        decode_session_token(tampered)


def test_expired_session_token_rejected():
    token = create_session_token(UserSession(user_id=1), expires_delta=timedelta(minutes=-1))

    with pytest.raises(JWTError):
        decode_session_token(token)
