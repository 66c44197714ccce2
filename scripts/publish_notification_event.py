"""Utility script to feed a notification event into the configured store."""

from __future__ import annotations

import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.infrastructure.database import SessionLocal, initialize_database
from notification_service.infrastructure.events import (
    InvalidNotificationEventError,
    NotificationEventListener,
)
from notification_service.infrastructure.repositories import NotificationRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for event publication."""

    parser = argparse.ArgumentParser(
        description=(
            "Deliver a notification event as if it came from the event bus. "
            "Reads a JSON payload from --payload or stdin."
        ),
    )
    parser.add_argument(
        "--payload",
        default=None,
        help='JSON event, e.g. {"userId": 100, "message": "Hi", "type": "TEST"}',
    )
    return parser.parse_args()


def main() -> None:
    """Parse the event and persist the resulting notification."""

    args = parse_args()
    raw = args.payload if args.payload is not None else sys.stdin.read()

    initialize_database()

    session = SessionLocal()
    try:
        listener = NotificationEventListener(NotificationService(NotificationRepository(session)))
        event = listener.handle_message(raw)
    except InvalidNotificationEventError as exc:
        raise SystemExit(f"Invalid notification event: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the notification: {exc}") from exc
    else:
        print(f"Notification of type {event.type} delivered to user {event.user_id}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
