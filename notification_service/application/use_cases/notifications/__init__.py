"""Use cases for managing user notifications."""

from .service import Clock, NotificationService

__all__ = [
    "Clock",
    "NotificationService",
]
