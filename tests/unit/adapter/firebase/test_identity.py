"""Unit tests for the Firebase identity verifiers."""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import auth as firebase_auth

from blog.adapter.error import ProviderError
from blog.adapter.firebase import (
    MockFirebaseIdentityVerifier,
    RealFirebaseIdentityVerifier,
)
from blog.domain.error import InvalidCredentialError


@pytest.fixture
def verifier():
    """Real verifier with the Firebase app replaced by a stub."""
    real = RealFirebaseIdentityVerifier(credentials_path="/nonexistent.json")
    real._app = MagicMock()
    return real


class TestRealFirebaseIdentityVerifier:
    @pytest.mark.asyncio
    async def test_decoded_claims_become_identity(self, verifier):
        claims = {
            "email": "grace@example.com",
            "name": "Grace Hopper",
            "picture": "https://lh3.googleusercontent.com/a/x=s96-c",
        }
        with patch.object(firebase_auth, "verify_id_token", return_value=claims) as verify:
            identity = await verifier.verify("id-token")

        verify.assert_called_once_with("id-token", app=verifier._app)
        assert identity.email == "grace@example.com"
        assert identity.name == "Grace Hopper"
        assert identity.picture.endswith("s96-c")

    @pytest.mark.asyncio
    async def test_missing_name_falls_back_to_local_part(self, verifier):
        with patch.object(
            firebase_auth, "verify_id_token", return_value={"email": "grace@example.com"}
        ):
            identity = await verifier.verify("id-token")

        assert identity.name == "grace"
        assert identity.picture is None

    @pytest.mark.asyncio
    async def test_token_without_email_rejected(self, verifier):
        with patch.object(firebase_auth, "verify_id_token", return_value={"name": "X"}):
            with pytest.raises(InvalidCredentialError):
                await verifier.verify("id-token")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [firebase_auth.InvalidIdTokenError("bad token"), ValueError("malformed")],
    )
    async def test_rejected_token_is_invalid_credential(self, verifier, error):
        with patch.object(firebase_auth, "verify_id_token", side_effect=error):
            with pytest.raises(InvalidCredentialError, match="Google"):
                await verifier.verify("id-token")

    @pytest.mark.asyncio
    async def test_certificate_fetch_failure_is_provider_error(self, verifier):
        error = firebase_auth.CertificateFetchError("unreachable", None)
        with patch.object(firebase_auth, "verify_id_token", side_effect=error):
            with pytest.raises(ProviderError):
                await verifier.verify("id-token")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contents", ["{not json", None])
    async def test_unusable_credentials_are_provider_error(self, tmp_path, contents):
        credentials_path = tmp_path / "service-account.json"
        if contents is not None:
            credentials_path.write_text(contents)
        verifier = RealFirebaseIdentityVerifier(credentials_path=str(credentials_path))

        with patch.object(firebase_auth, "verify_id_token") as verify:
            with pytest.raises(ProviderError, match="misconfigured"):
                await verifier.verify("id-token")

        verify.assert_not_called()


class TestMockFirebaseIdentityVerifier:
    @pytest.mark.asyncio
    async def test_mock_token_with_name(self):
        identity = await MockFirebaseIdentityVerifier().verify("mock:ada@example.com:Ada")

        assert identity.email == "ada@example.com"
        assert identity.name == "Ada"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "mock", "mock:no-at-sign", "real-token"])
    async def test_other_tokens_rejected(self, token):
        with pytest.raises(InvalidCredentialError):
            await MockFirebaseIdentityVerifier().verify(token)
