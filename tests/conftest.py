"""Shared fixtures for the notification service tests."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep the default engine in memory so importing the package never touches disk.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("NOTIFICATION_STORE", "memory")

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.infrastructure.repositories import InMemoryNotificationRepository


class SteppingClock:
    """Clock returning ``start`` and then one more second on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture()
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture()
def store() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture()
def service(store: InMemoryNotificationRepository, clock: SteppingClock) -> NotificationService:
    return NotificationService(store, clock=clock)
