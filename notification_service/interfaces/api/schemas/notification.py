"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from notification_service.domain.entities import Notification
from notification_service.utils import format_timestamp


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    user_id: int
    message: str
    type: str
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None

    @field_serializer("created_at", "read_at")
    def _serialize_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value)

    @classmethod
    def from_entity(cls, notification: Notification) -> NotificationRead:
        return cls(
            id=notification.id or "",
            user_id=notification.user_id,
            message=notification.message,
            type=notification.type,
            is_read=bool(notification.is_read),
            created_at=notification.created_at,
            read_at=notification.read_at,
        )


__all__ = ["NotificationRead"]
