"""S3 object storage adapter."""

from .signer import MockS3UploadUrlSigner, RealS3UploadUrlSigner, S3UploadUrlSigner

__all__ = ["S3UploadUrlSigner", "RealS3UploadUrlSigner", "MockS3UploadUrlSigner"]
