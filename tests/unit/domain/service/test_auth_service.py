"""Unit tests for AuthService."""

from uuid import uuid4

import pytest

from blog.domain.error import InvalidCredentialError, NotFoundError, ValidationError
from blog.domain.repository import UserRepository
from blog.domain.service import AuthService
from blog.domain.value import UserId
from blog.util.password import hash_password, verify_password
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PASSWORD = "Secret123"


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_creates_account(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        user = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        assert user.username.root == "ada"
        assert user.google_auth is False
        assert user.password_hash != PASSWORD
        assert verify_password(PASSWORD, user.password_hash)
        assert user.profile_img.endswith("seed=ada")
        assert await user_repo.find_by_email("ada@example.com") == user

    @pytest.mark.asyncio
    async def test_taken_username_gets_suffix(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("ada", email="ada@other.org"))

        user = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        assert user.username.root.startswith("ada")
        assert len(user.username.root) == len("ada") + 5

    @pytest.mark.parametrize(
        "fullname,email,password,message",
        [
            ("Al", "al@example.com", PASSWORD, "Full name"),
            ("Alan Turing", "not-an-email", PASSWORD, "Invalid email"),
            ("Alan Turing", "alan@example.com", "short", "Password must"),
            ("Alan Turing", "alan@example.com", "alllowercase1", "Password must"),
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_signup_rejected(
        self, unit_env, fullname, email, password, message
    ):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match=message):
            await auth_service.signup(fullname, email, password)

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="already used"):
            await auth_service.signup("Ada Again", "ada@example.com", PASSWORD)


class TestSignin:
    @pytest.mark.asyncio
    async def test_signin_with_correct_password(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        created = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        user = await auth_service.signin("ada@example.com", PASSWORD)

        assert user.id == created.id

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="incorrect"):
            await auth_service.signin("ada@example.com", "Wrong1234")

    @pytest.mark.asyncio
    async def test_unknown_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="Email not found"):
            await auth_service.signin("nobody@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_google_account_cannot_use_password(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.federated_login("mock:grace@example.com:Grace Hopper")

        with pytest.raises(ValidationError, match="Google"):
            await auth_service.signin("grace@example.com", PASSWORD)


class TestFederatedLogin:
    @pytest.mark.asyncio
    async def test_first_login_creates_google_account(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        user = await auth_service.federated_login("mock:grace@example.com:Grace Hopper")

        assert user.google_auth is True
        assert user.password_hash is None
        assert user.fullname == "Grace Hopper"
        assert user.username.root == "grace"
        assert user.profile_img.endswith("s384-c")

    @pytest.mark.asyncio
    async def test_second_login_returns_same_account(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        first = await auth_service.federated_login("mock:grace@example.com:Grace Hopper")

        second = await auth_service.federated_login("mock:grace@example.com")

        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_password_account_email_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="without Google"):
            await auth_service.federated_login("mock:ada@example.com")

    @pytest.mark.asyncio
    async def test_rejected_token_raises_invalid_credential(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(InvalidCredentialError):
            await auth_service.federated_login("not-a-google-token")


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_password_replaced(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        await auth_service.change_password(user.id, PASSWORD, "Newpass456")

        await auth_service.signin("ada@example.com", "Newpass456")
        with pytest.raises(ValidationError):
            await auth_service.signin("ada@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_current_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="Incorrect Current Password"):
            await auth_service.change_password(user.id, "Wrong1234", "Newpass456")

    @pytest.mark.asyncio
    async def test_weak_new_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.signup("Ada Lovelace", "ada@example.com", PASSWORD)

        with pytest.raises(ValidationError, match="Both passwords"):
            await auth_service.change_password(user.id, PASSWORD, "weak")

    @pytest.mark.asyncio
    async def test_google_account_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.federated_login("mock:grace@example.com")

        with pytest.raises(ValidationError, match="Google"):
            await auth_service.change_password(user.id, PASSWORD, "Newpass456")

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(NotFoundError):
            await auth_service.change_password(UserId(uuid4()), PASSWORD, "Newpass456")


def test_password_hash_round_trip():
    password_hash = hash_password(PASSWORD)

    assert verify_password(PASSWORD, password_hash)
    assert not verify_password("Other123", password_hash)
    assert not verify_password(PASSWORD, "not-a-hash")
