"""Dictionary backed notification store for tests and local runs."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import replace
from itertools import count
from uuid import uuid4

from notification_service.domain.entities import Notification
from notification_service.utils import now_utc


class InMemoryNotificationRepository:
    """Keep notifications in process memory.

    Records are copied on the way in and out, so changes only become visible
    through :meth:`save` or :meth:`save_all`, as with the SQL store.
    """

    def __init__(self) -> None:
        self._records: dict[str, tuple[int, Notification]] = {}
        self._sequence = count()
        self._lock = threading.Lock()

    def find_by_id(self, notification_id: str) -> Notification | None:
        with self._lock:
            entry = self._records.get(notification_id)
        return replace(entry[1]) if entry else None

    def find_by_user(self, user_id: int) -> Sequence[Notification]:
        return self._select(lambda n: n.user_id == user_id)

    def find_unread_by_user(self, user_id: int) -> Sequence[Notification]:
        return self._select(lambda n: n.user_id == user_id and not n.is_read)

    def count_unread(self, user_id: int) -> int:
        return len(self.find_unread_by_user(user_id))

    def insert(self, notification: Notification) -> Notification:
        stored = replace(
            notification,
            id=uuid4().hex,
            is_read=bool(notification.is_read),
            created_at=notification.created_at or now_utc(),
        )
        with self._lock:
            self._records[stored.id] = (next(self._sequence), stored)
        return replace(stored)

    def save(self, notification: Notification) -> Notification:
        with self._lock:
            return self._put(notification)

    def save_all(self, notifications: Iterable[Notification]) -> Sequence[Notification]:
        with self._lock:
            return [self._put(notification) for notification in notifications]

    def delete(self, notification: Notification) -> None:
        if notification.id is None:
            return
        with self._lock:
            self._records.pop(notification.id, None)

    def delete_by_user(self, user_id: int) -> None:
        with self._lock:
            for notification_id in [
                key for key, (_, stored) in self._records.items() if stored.user_id == user_id
            ]:
                del self._records[notification_id]

    def _put(self, notification: Notification) -> Notification:
        notification_id = notification.id or uuid4().hex
        existing = self._records.get(notification_id)
        if existing is None:
            stored = replace(
                notification,
                id=notification_id,
                is_read=bool(notification.is_read),
                created_at=notification.created_at or now_utc(),
            )
            self._records[notification_id] = (next(self._sequence), stored)
        else:
            sequence, current = existing
            # user_id, message, type and created_at never change after insert.
            stored = replace(
                current,
                is_read=bool(notification.is_read),
                read_at=notification.read_at,
            )
            self._records[notification_id] = (sequence, stored)
        return replace(stored)

    def _select(self, predicate) -> list[Notification]:
        with self._lock:
            entries = [entry for entry in self._records.values() if predicate(entry[1])]
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [replace(stored) for _, stored in entries]


__all__ = ["InMemoryNotificationRepository"]
