"""Media upload domain service."""

import secrets
import time

import logfire

from .base import Service


class UploadUrlSigner:
    """Interface to the object store that issues upload targets."""

    async def generate_upload_url(self, key: str) -> str:
        """Return a time-limited URL the client can PUT the object to.

        Args:
            key: Object key to upload under
        """
        raise NotImplementedError


class UploadService(Service):
    """Domain service for issuing image upload URLs."""

    def __init__(self, signer: UploadUrlSigner) -> None:
        """Initialize upload service.

        Args:
            signer: Object storage signer
        """
        self.signer = signer

    @staticmethod
    def generate_key() -> str:
        """Unique object key: a random id plus the current epoch milliseconds."""
        return f"{secrets.token_urlsafe(16)}-{int(time.time() * 1000)}.jpeg"

    async def create_upload_url(self) -> str:
        """Issue a presigned upload URL for a fresh image key."""
        key = self.generate_key()
        with logfire.span("upload_service.create_upload_url", key=key):
            url = await self.signer.generate_upload_url(key)
            logfire.info("Upload URL issued", key=key)
            return url
