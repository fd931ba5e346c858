"""Firebase infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.firebase import RealFirebaseIdentityVerifier
from blog.config import Settings
from blog.domain.service import FederatedIdentityVerifier
from blog.util.di.base import ProviderBase
from blog.util.error import ConfigurationError


class FirebaseProvider(ProviderBase):
    """Firebase component base."""

    __mock_component__ = "firebase"


class ProdFirebaseProvider(FirebaseProvider):
    """Production Firebase provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_verifier(self, settings: Settings) -> FederatedIdentityVerifier:
        """Provide the Google ID token verifier.

        Raises:
            ConfigurationError: If the service account path is not configured
        """
        if not settings.firebase.credentials_path:
            raise ConfigurationError("Firebase credentials path must be configured")

        return RealFirebaseIdentityVerifier(
            credentials_path=settings.firebase.credentials_path,
            project_id=settings.firebase.project_id,
        )
