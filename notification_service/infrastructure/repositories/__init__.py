"""Repository implementations for infrastructure layer."""

from .in_memory_notification_repository import InMemoryNotificationRepository
from .notification_repository import NotificationRepository

__all__ = [
    "InMemoryNotificationRepository",
    "NotificationRepository",
]
