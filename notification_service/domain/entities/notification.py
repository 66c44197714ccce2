"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from notification_service.utils import ensure_utc


@dataclass
class Notification:
    """Message delivered to a specific user together with its read state.

    ``read_at`` is set if and only if ``is_read`` is true. ``is_read`` and
    ``created_at`` stay ``None`` only until the service fills the creation
    defaults.
    """

    id: str | None
    user_id: int
    message: str
    type: str
    is_read: bool | None = None
    created_at: datetime | None = None
    read_at: datetime | None = None

    def with_creation_defaults(self, now: datetime) -> Notification:
        """Return a copy with every unset creation field filled in.

        Timestamps are normalized to UTC; naive values are read as UTC.
        """

        created_at = ensure_utc(self.created_at or now)
        is_read = bool(self.is_read)
        read_at = ensure_utc(self.read_at) if is_read else None
        if is_read and read_at is None:
            read_at = created_at
        return Notification(
            id=self.id,
            user_id=self.user_id,
            message=self.message,
            type=self.type,
            is_read=is_read,
            created_at=created_at,
            read_at=read_at,
        )

    def mark_read(self, at: datetime) -> bool:
        """Transition to read, keeping an earlier ``read_at``.

        Returns ``True`` when the notification changed.
        """

        if self.is_read and self.read_at is not None:
            return False
        self.is_read = True
        self.read_at = self.read_at or at
        return True


__all__ = ["Notification"]
