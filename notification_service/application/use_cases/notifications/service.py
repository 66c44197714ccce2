"""Notification lifecycle: creation defaults, read state and bulk operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from notification_service.domain.entities import Notification, NotificationEvent
from notification_service.domain.exceptions import NotificationNotFoundError
from notification_service.domain.store import NotificationStore
from notification_service.utils import now_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class NotificationService:
    """Sole writer of the notification business rules.

    The service keeps no state of its own besides its collaborators; every
    call reads from or writes to ``store``. No locking is attempted, so two
    concurrent :meth:`mark_as_read` calls resolve as last write wins.
    """

    def __init__(self, store: NotificationStore, *, clock: Clock = now_utc) -> None:
        self._store = store
        self._clock = clock

    def create_notification(self, user_id: int, message: str, type: str) -> Notification:
        """Persist a new unread notification stamped with the current time.

        Input is stored as given, empty strings included.
        """

        notification = Notification(
            id=None,
            user_id=user_id,
            message=message,
            type=type,
            is_read=False,
            created_at=self._clock(),
            read_at=None,
        )
        saved = self._store.insert(notification)
        logger.info(
            "Created notification %s of type %s for user %s", saved.id, saved.type, saved.user_id
        )
        return saved

    def store_notification(self, notification: Notification) -> Notification:
        """Persist a caller-built record after filling its creation defaults.

        Fields the caller already set (``is_read``, ``created_at``,
        ``read_at``) are kept; an already-read record without ``read_at``
        gets its ``created_at``.
        """

        prepared = notification.with_creation_defaults(self._clock())
        saved = self._store.insert(prepared)
        logger.info("Stored notification %s for user %s", saved.id, saved.user_id)
        return saved

    def send_notification(self, event: NotificationEvent) -> None:
        """Create the notification described by ``event``.

        ``event.timestamp`` is not used as ``created_at``.
        """

        self.create_notification(event.user_id, event.message, event.type)

    def get_user_notifications(self, user_id: int) -> Sequence[Notification]:
        return self._store.find_by_user(user_id)

    def get_unread_notifications(self, user_id: int) -> Sequence[Notification]:
        return self._store.find_unread_by_user(user_id)

    def get_unread_count(self, user_id: int) -> int:
        return self._store.count_unread(user_id)

    def mark_as_read(self, notification_id: str) -> Notification:
        """Mark a notification as read, keeping the first ``read_at``.

        Raises :class:`NotificationNotFoundError` when the identifier is
        unknown. Already-read notifications are returned without a write.
        """

        notification = self._get_or_raise(notification_id)
        if not notification.mark_read(self._clock()):
            logger.debug("Notification %s already read at %s", notification_id, notification.read_at)
            return notification
        saved = self._store.save(notification)
        logger.info("Marked notification %s as read", notification_id)
        return saved

    def mark_all_as_read(self, user_id: int) -> None:
        """Mark every unread notification of ``user_id`` as read in one save.

        All records in the batch share the same ``read_at``. The save is not
        transactional; an interrupted batch is not rolled back.
        """

        unread = list(self._store.find_unread_by_user(user_id))
        if not unread:
            logger.debug("No unread notifications for user %s", user_id)
            return
        read_at = self._clock()
        for notification in unread:
            notification.mark_read(read_at)
        self._store.save_all(unread)
        logger.info("Marked %d notifications as read for user %s", len(unread), user_id)

    def delete_notification(self, notification_id: str) -> None:
        notification = self._get_or_raise(notification_id)
        self._store.delete(notification)
        logger.info("Deleted notification %s", notification_id)

    def delete_all_user_notifications(self, user_id: int) -> None:
        self._store.delete_by_user(user_id)
        logger.info("Deleted all notifications for user %s", user_id)

    def _get_or_raise(self, notification_id: str) -> Notification:
        notification = self._store.find_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        return notification


__all__ = ["Clock", "NotificationService"]
