"""Media upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.usecase.upload import GetUploadUrlUseCase, UploadUrlResponse

router = APIRouter(tags=["uploads"], route_class=DishkaRoute)


@router.get("/get-upload-url", response_model=UploadUrlResponse)
async def get_upload_url(
    get_upload_url_use_case: FromDishka[GetUploadUrlUseCase],
) -> UploadUrlResponse:
    """Issue a presigned URL the client PUTs an image to."""
    return await get_upload_url_use_case.execute()
