"""Endpoints exposing the notification lifecycle."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.infrastructure.events import NotificationEventListener
from notification_service.interfaces.api.dependencies import (
    get_notification_event_listener,
    get_notification_service,
)
from notification_service.interfaces.api.schemas import ApiResponse, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("", response_model=ApiResponse[NotificationRead])
def create_notification(
    user_id: int = Query(..., alias="userId"),
    message: str = Query(...),
    type: str = Query(...),
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[NotificationRead]:
    """Create an unread notification for ``userId``."""

    notification = service.create_notification(user_id, message, type)
    return ApiResponse[NotificationRead].ok(
        NotificationRead.from_entity(notification),
        "Notification created successfully",
    )


@router.post(
    "/events",
    response_model=ApiResponse[None],
    status_code=status.HTTP_202_ACCEPTED,
)
def ingest_notification_event(
    payload: dict[str, Any] = Body(...),
    listener: NotificationEventListener = Depends(get_notification_event_listener),
) -> ApiResponse[None]:
    """Accept a domain event and turn it into a notification."""

    listener.handle_message(payload)
    return ApiResponse[None].ok(message="Notification event accepted")


@router.get("/user/{user_id}", response_model=ApiResponse[list[NotificationRead]])
def list_user_notifications(
    user_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[list[NotificationRead]]:
    """Return every notification of ``user_id``, newest first."""

    notifications = service.get_user_notifications(user_id)
    return ApiResponse[list[NotificationRead]].ok(
        [NotificationRead.from_entity(notification) for notification in notifications]
    )


@router.get("/user/{user_id}/unread", response_model=ApiResponse[list[NotificationRead]])
def list_unread_notifications(
    user_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[list[NotificationRead]]:
    """Return the unread notifications of ``user_id``, newest first."""

    notifications = service.get_unread_notifications(user_id)
    return ApiResponse[list[NotificationRead]].ok(
        [NotificationRead.from_entity(notification) for notification in notifications]
    )


@router.get("/user/{user_id}/unread/count", response_model=ApiResponse[int])
def count_unread_notifications(
    user_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[int]:
    """Return how many notifications of ``user_id`` are still unread."""

    return ApiResponse[int].ok(service.get_unread_count(user_id))


@router.patch("/{notification_id}/read", response_model=ApiResponse[NotificationRead])
def mark_notification_as_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[NotificationRead]:
    """Mark one notification as read; answers 404 for unknown identifiers."""

    notification = service.mark_as_read(notification_id)
    return ApiResponse[NotificationRead].ok(
        NotificationRead.from_entity(notification),
        "Notification marked as read",
    )


@router.patch("/user/{user_id}/read-all", response_model=ApiResponse[None])
def mark_all_notifications_as_read(
    user_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[None]:
    """Mark every unread notification of ``user_id`` as read."""

    service.mark_all_as_read(user_id)
    return ApiResponse[None].ok(message="All notifications marked as read")


@router.delete("/user/{user_id}", response_model=ApiResponse[None])
def delete_user_notifications(
    user_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[None]:
    """Delete all notifications of ``user_id``; succeeds when there are none."""

    service.delete_all_user_notifications(user_id)
    return ApiResponse[None].ok(message="All notifications deleted successfully")


@router.delete("/{notification_id}", response_model=ApiResponse[None])
def delete_notification(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> ApiResponse[None]:
    """Delete one notification; answers 404 for unknown identifiers."""

    service.delete_notification(notification_id)
    return ApiResponse[None].ok(message="Notification deleted successfully")
