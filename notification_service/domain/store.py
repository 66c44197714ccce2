"""Persistence contract the notification service relies on."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from notification_service.domain.entities import Notification


class NotificationStore(Protocol):
    """Durable collection of notifications keyed by an opaque identifier.

    Listings are ordered by ``created_at`` descending. Bulk writes are not
    transactional and no locking or versioning is offered.
    """

    def insert(self, notification: Notification) -> Notification:
        """Assign an identifier, persist and return the stored record."""

    def find_by_id(self, notification_id: str) -> Notification | None: ...

    def find_by_user(self, user_id: int) -> Sequence[Notification]: ...

    def find_unread_by_user(self, user_id: int) -> Sequence[Notification]: ...

    def count_unread(self, user_id: int) -> int: ...

    def save(self, notification: Notification) -> Notification: ...

    def save_all(self, notifications: Iterable[Notification]) -> Sequence[Notification]: ...

    def delete(self, notification: Notification) -> None: ...

    def delete_by_user(self, user_id: int) -> None: ...


__all__ = ["NotificationStore"]
