"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Depends

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.config import get_settings
from notification_service.domain.store import NotificationStore
from notification_service.infrastructure import database
from notification_service.infrastructure.events import NotificationEventListener
from notification_service.infrastructure.repositories import (
    InMemoryNotificationRepository,
    NotificationRepository,
)

memory_store = InMemoryNotificationRepository()


def get_notification_store() -> Generator[NotificationStore, None, None]:
    """Yield the store selected by the ``NOTIFICATION_STORE`` setting.

    A database session is opened only for the SQLAlchemy store and closed
    once the request is done.
    """

    if get_settings().notification_store == "memory":
        yield memory_store
        return

    db = database.SessionLocal()
    try:
        yield NotificationRepository(db)
    finally:
        db.close()


def get_notification_service(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationService:
    return NotificationService(store)


def get_notification_event_listener(
    service: NotificationService = Depends(get_notification_service),
) -> NotificationEventListener:
    return NotificationEventListener(service)
