"""S3 presigned upload URL signer."""

import asyncio

import boto3
import logfire
from botocore.exceptions import BotoCoreError, ClientError

from blog.adapter.error import ProviderError
from blog.domain.service.upload_service import UploadUrlSigner


class S3UploadUrlSigner(UploadUrlSigner):
    """Base class for S3 signers.

    Provides type distinction for dependency injection.
    """

    pass


class RealS3UploadUrlSigner(S3UploadUrlSigner):
    """Issues presigned ``put_object`` URLs with boto3."""

    def __init__(
        self,
        bucket: str,
        region: str,
        expires_in: int,
        content_type: str,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> None:
        """Initialize S3 signer.

        Args:
            bucket: Target bucket
            region: Bucket region
            expires_in: URL lifetime in seconds
            content_type: Content type the upload must declare
            access_key_id: AWS access key (default credential chain if None)
            secret_access_key: AWS secret key (default credential chain if None)
        """
        self.bucket = bucket
        self.expires_in = expires_in
        self.content_type = content_type
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    async def generate_upload_url(self, key: str) -> str:
        """Presign a PUT for ``key``.

        Raises:
            ProviderError: If S3 refuses to sign
        """
        try:
            return await asyncio.to_thread(
                self._client.generate_presigned_url,
                ClientMethod="put_object",
                Params={
                    "Bucket": self.bucket,
                    "Key": key,
                    "ContentType": self.content_type,
                },
                ExpiresIn=self.expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logfire.error("S3 presign failed", key=key, error=str(e))
            raise ProviderError(f"S3 error: {e}") from e


class MockS3UploadUrlSigner(S3UploadUrlSigner):
    """Mock signer for testing. Returns a deterministic fake URL."""

    def __init__(self, bucket: str = "test-bucket") -> None:
        self.bucket = bucket
        self.signed_keys: list[str] = []

    async def generate_upload_url(self, key: str) -> str:
        """Return a fake presigned URL and remember the key."""
        self.signed_keys.append(key)
        return f"https://{self.bucket}.s3.amazonaws.com/{key}?X-Amz-Signature=mock"
