"""Upload use cases."""

from .get_upload_url import GetUploadUrlUseCase, UploadUrlResponse

__all__ = ["GetUploadUrlUseCase", "UploadUrlResponse"]
