"""Get upload URL use case."""

from pydantic import BaseModel, ConfigDict, Field

from blog.domain.service import UploadService


class UploadUrlResponse(BaseModel):
    """Presigned upload URL."""

    model_config = ConfigDict(populate_by_name=True)

    upload_url: str = Field(alias="UploadURL")


class GetUploadUrlUseCase:
    """Use case for issuing an image upload URL."""

    def __init__(self, upload_service: UploadService) -> None:
        self.upload_service = upload_service

    async def execute(self) -> UploadUrlResponse:
        return UploadUrlResponse(upload_url=await self.upload_service.create_upload_url())
