"""Consume notification events published by other subsystems."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.domain.entities import NotificationEvent

logger = logging.getLogger(__name__)


class InvalidNotificationEventError(ValueError):
    """Raised when an inbound event payload cannot be parsed."""


class NotificationEventPayload(BaseModel):
    """Wire format of a notification event.

    Producers send camelCase keys (``userId``); snake_case is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    message: str
    type: str
    timestamp: datetime | None = None

    def to_event(self) -> NotificationEvent:
        return NotificationEvent(
            user_id=self.user_id,
            message=self.message,
            type=self.type,
            timestamp=self.timestamp,
        )


class NotificationEventListener:
    """Translate inbound events into notification creation calls.

    Delivery is assumed at least once and nothing is deduplicated here, so a
    redelivered event produces a second notification.
    """

    def __init__(self, service: NotificationService) -> None:
        self._service = service

    def on_event(self, event: NotificationEvent) -> None:
        logger.debug("Received %s event for user %s", event.type, event.user_id)
        self._service.send_notification(event)

    def handle_message(self, raw: str | bytes | Mapping[str, Any]) -> NotificationEvent:
        """Parse ``raw`` and dispatch it; return the parsed event."""

        event = parse_notification_event(raw)
        self.on_event(event)
        return event


def parse_notification_event(raw: str | bytes | Mapping[str, Any]) -> NotificationEvent:
    """Return the :class:`NotificationEvent` encoded in ``raw``."""

    try:
        if isinstance(raw, (str, bytes)):
            payload = NotificationEventPayload.model_validate_json(raw)
        else:
            payload = NotificationEventPayload.model_validate(raw)
    except ValidationError as exc:
        logger.error("Discarding malformed notification event: %s", exc)
        raise InvalidNotificationEventError(str(exc)) from exc
    return payload.to_event()


__all__ = [
    "InvalidNotificationEventError",
    "NotificationEventListener",
    "NotificationEventPayload",
    "parse_notification_event",
]
