"""Domain entities exposed by the application."""

from .notification import Notification
from .notification_event import NotificationEvent

__all__ = [
    "Notification",
    "NotificationEvent",
]
