"""Firebase federated identity verifier.

Verifies Google sign-in ID tokens with the Firebase Admin SDK.
"""

import asyncio

import firebase_admin
import logfire
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials

from blog.adapter.error import ProviderError
from blog.domain.error import InvalidCredentialError
from blog.domain.service.auth_service import FederatedIdentityVerifier
from blog.domain.value import FederatedIdentity

FIREBASE_APP_NAME = "blog-backend"


class FirebaseIdentityVerifier(FederatedIdentityVerifier):
    """Base class for Firebase identity verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealFirebaseIdentityVerifier(FirebaseIdentityVerifier):
    """Verifies ID tokens against Firebase.

    The Firebase app is initialized lazily on first use so the SDK only
    loads credentials when a federated login actually happens.
    """

    def __init__(self, credentials_path: str, project_id: str | None = None) -> None:
        """Initialize Firebase verifier.

        Args:
            credentials_path: Path to the service account JSON file
            project_id: Firebase project ID (read from the credentials if None)
        """
        self.credentials_path = credentials_path
        self.project_id = project_id
        self._app: firebase_admin.App | None = None

    def _get_app(self) -> firebase_admin.App:
        if self._app is not None:
            return self._app
        try:
            self._app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            options = {"projectId": self.project_id} if self.project_id else None
            try:
                certificate = credentials.Certificate(self.credentials_path)
            except (OSError, ValueError) as e:
                logfire.error(
                    "Firebase credentials unusable",
                    credentials_path=self.credentials_path,
                    error=str(e),
                )
                raise ProviderError(f"Identity provider misconfigured: {e}") from e
            self._app = firebase_admin.initialize_app(
                certificate, options, name=FIREBASE_APP_NAME
            )
            logfire.info("Firebase initialized", project_id=self.project_id)
        return self._app

    async def verify(self, id_token: str) -> FederatedIdentity:
        """Verify a Google ID token.

        Args:
            id_token: Token from the client's Google sign-in

        Returns:
            Email, name and picture asserted by the token

        Raises:
            InvalidCredentialError: If Firebase rejects the token
            ProviderError: If Firebase cannot be reached or is misconfigured
        """
        with logfire.span("firebase.verify_id_token"):
            app = self._get_app()
            try:
                decoded = await asyncio.to_thread(
                    firebase_auth.verify_id_token, id_token, app=app
                )
            except firebase_auth.CertificateFetchError as e:
                logfire.error("Firebase certificate fetch failed", error=str(e))
                raise ProviderError(f"Identity provider unavailable: {e}") from e
            except (firebase_auth.InvalidIdTokenError, ValueError) as e:
                logfire.warn("Firebase rejected ID token", error=str(e))
                raise InvalidCredentialError(
                    "Failed to authenticate you with Google. Try with another Google account"
                ) from e

            email = decoded.get("email")
            if not email:
                raise InvalidCredentialError("Google account has no email address")

            return FederatedIdentity(
                email=email,
                name=decoded.get("name") or email.split("@")[0],
                picture=decoded.get("picture"),
            )


class MockFirebaseIdentityVerifier(FirebaseIdentityVerifier):
    """Mock verifier for testing.

    Accepts tokens of the form ``mock:<email>[:<name>]`` and rejects
    everything else, without contacting Firebase.
    """

    def __init__(self) -> None:
        """Initialize mock verifier without Firebase configuration."""
        pass

    async def verify(self, id_token: str) -> FederatedIdentity:
        """Decode a mock token."""
        parts = id_token.split(":")
        if len(parts) < 2 or parts[0] != "mock" or "@" not in parts[1]:
            raise InvalidCredentialError(
                "Failed to authenticate you with Google. Try with another Google account"
            )
        email = parts[1]
        name = parts[2] if len(parts) > 2 else "Mock Google User"
        return FederatedIdentity(
            email=email,
            name=name,
            picture="https://lh3.googleusercontent.com/a/mock=s96-c",
        )
