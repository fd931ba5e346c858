"""Notification use cases."""

from .get_notifications import (
    NewNotificationResponse,
    NotificationItem,
    NotificationsRequest,
    NotificationsResponse,
    NotificationsUseCase,
)

__all__ = [
    "NewNotificationResponse",
    "NotificationItem",
    "NotificationsRequest",
    "NotificationsResponse",
    "NotificationsUseCase",
]
