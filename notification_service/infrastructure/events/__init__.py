"""Inbound event adapters for the infrastructure layer."""

from .listener import (
    InvalidNotificationEventError,
    NotificationEventListener,
    NotificationEventPayload,
    parse_notification_event,
)

__all__ = [
    "InvalidNotificationEventError",
    "NotificationEventListener",
    "NotificationEventPayload",
    "parse_notification_event",
]
