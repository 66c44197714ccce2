"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from notification_service.infrastructure.database import Base
from notification_service.utils import ensure_utc_naive, now_utc


def _now_utc_naive():
    return ensure_utc_naive(now_utc())


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(String(32), primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    message = Column(Text, nullable=False)
    type = Column(String(100), nullable=False)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=_now_utc_naive, index=True)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
