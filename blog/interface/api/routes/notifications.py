"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.common import CountResponse
from blog.application.usecase.notification import (
    NewNotificationResponse,
    NotificationsRequest,
    NotificationsResponse,
    NotificationsUseCase,
)
from blog.domain.service import JWTService
from blog.interface.api.gate import current_user_id

router = APIRouter(tags=["notifications"], route_class=DishkaRoute)


@router.get("/new-notification", response_model=NewNotificationResponse)
async def new_notification(
    notifications_use_case: FromDishka[NotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> NewNotificationResponse:
    """Whether the caller has unseen notifications.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await notifications_use_case.has_new(user_id)


class NotificationsAPIRequest(BaseModel):
    """API request for a page of notifications."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = 1
    filter: str = Field(default="all", pattern="^(all|like|comment|reply)$")
    deleted_doc_count: int = Field(default=0, alias="deletedDocCount")


@router.post("/notifications", response_model=NotificationsResponse)
async def notifications(
    request: NotificationsAPIRequest,
    notifications_use_case: FromDishka[NotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> NotificationsResponse:
    """One page of the caller's notifications; all matching ones are marked seen.

    Requires authentication.
    """
    user_id = current_user_id(authorization, jwt_service)
    return await notifications_use_case.page(
        NotificationsRequest(
            user_id=user_id,
            page=request.page,
            filter=request.filter,
            deleted_doc_count=request.deleted_doc_count,
        )
    )


@router.post("/all-notifications-count", response_model=CountResponse)
async def all_notifications_count(
    request: NotificationsAPIRequest,
    notifications_use_case: FromDishka[NotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CountResponse:
    user_id = current_user_id(authorization, jwt_service)
    return await notifications_use_case.count(
        NotificationsRequest(user_id=user_id, filter=request.filter)
    )
