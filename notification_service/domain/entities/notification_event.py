"""Domain event published by other subsystems to notify a user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NotificationEvent:
    """Inbound request to deliver ``message`` to ``user_id``.

    ``timestamp`` records when the upstream event happened. It is
    informational only and never becomes the notification's ``created_at``.
    """

    user_id: int
    message: str
    type: str
    timestamp: datetime | None = None


__all__ = ["NotificationEvent"]
