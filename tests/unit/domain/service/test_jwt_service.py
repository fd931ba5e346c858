"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from blog.config import AuthSettings
from blog.domain.error import InvalidCredentialError, UnauthenticatedError
from blog.domain.service import JWTService
from blog.domain.value import UserId
from blog.util.jwt import JWTError, create_token


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


def test_token_round_trip(jwt_service):
    user_id = UserId(uuid4())
    token = jwt_service.create_token(user_id, "alice")

    payload = jwt_service.verify_token(token)

    assert payload.user_id == str(user_id)
    assert payload.username == "alice"


def test_bearer_header_resolves_user(jwt_service):
    user_id = UserId(uuid4())
    token = jwt_service.create_token(user_id, "alice")

    assert jwt_service.authenticate_bearer(f"Bearer {token}") == user_id


@pytest.mark.parametrize("header", [None, "", "Bearer ", "Token abc", "Bearer    "])
def test_missing_token_is_unauthenticated(jwt_service, header):
    with pytest.raises(UnauthenticatedError):
        jwt_service.authenticate_bearer(header)


def test_garbage_token_is_invalid(jwt_service):
    with pytest.raises(InvalidCredentialError):
        jwt_service.authenticate_bearer("Bearer not.a.jwt")


def test_token_signed_with_other_secret_is_invalid(jwt_service):
    other = JWTService(AuthSettings(jwt_secret="other-secret"))
    token = other.create_token(UserId(uuid4()), "mallory")

    with pytest.raises(InvalidCredentialError):
        jwt_service.authenticate_bearer(f"Bearer {token}")


def test_expired_token_is_invalid():
    expired = JWTService(AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1))
    token = expired.create_token(UserId(uuid4()), "alice")

    with pytest.raises(JWTError, match="expired"):
        expired.verify_token(token)
    with pytest.raises(InvalidCredentialError, match="expired"):
        expired.authenticate_bearer(f"Bearer {token}")


def test_non_uuid_subject_is_invalid(jwt_service):
    token = create_token("not-a-uuid", "alice", jwt_service.auth_settings)

    with pytest.raises(InvalidCredentialError):
        jwt_service.authenticate_bearer(f"Bearer {token}")
