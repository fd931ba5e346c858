"""Object storage infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.s3 import RealS3UploadUrlSigner
from blog.config import Settings
from blog.domain.service import UploadUrlSigner
from blog.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production S3 provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_upload_url_signer(self, settings: Settings) -> UploadUrlSigner:
        """Provide the presigned upload URL signer."""
        storage = settings.storage
        return RealS3UploadUrlSigner(
            bucket=storage.bucket,
            region=storage.region,
            expires_in=storage.upload_url_expiry,
            content_type=storage.content_type,
            access_key_id=storage.access_key_id,
            secret_access_key=storage.secret_access_key,
        )
