"""Errors raised by the notification domain."""

NOTIFICATION_NOT_FOUND_MESSAGE = "Notification not found"


class NotificationNotFoundError(ValueError):
    """Raised when a notification lookup by identifier yields nothing."""

    def __init__(self, notification_id: str | None = None) -> None:
        super().__init__(NOTIFICATION_NOT_FOUND_MESSAGE)
        self.notification_id = notification_id


__all__ = ["NOTIFICATION_NOT_FOUND_MESSAGE", "NotificationNotFoundError"]
