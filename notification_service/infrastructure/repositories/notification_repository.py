"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import uuid4

from sqlalchemy import false, func
from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.infrastructure.models import NotificationModel
from notification_service.utils import ensure_utc, ensure_utc_naive, now_utc


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def find_by_user(self, user_id: int) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def find_unread_by_user(self, user_id: int) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read == false())
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int) -> int:
        count = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read == false())
            .scalar()
        )
        return int(count or 0)

    def insert(self, notification: Notification) -> Notification:
        model = NotificationModel(id=uuid4().hex)
        self._apply_entity_to_model(model, notification, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def save(self, notification: Notification) -> Notification:
        model = self._stage(notification)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def save_all(self, notifications: Iterable[Notification]) -> Sequence[Notification]:
        models = [self._stage(notification) for notification in notifications]
        if not models:
            return []
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def delete(self, notification: Notification) -> None:
        if notification.id is None:
            return
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def delete_by_user(self, user_id: int) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        ).delete(synchronize_session=False)
        self.session.commit()

    def _stage(self, notification: Notification) -> NotificationModel:
        """Add or update the model backing ``notification`` without committing."""

        model = None
        if notification.id is not None:
            model = self.session.get(NotificationModel, notification.id)
        if model is None:
            model = NotificationModel(id=notification.id or uuid4().hex)
            self._apply_entity_to_model(model, notification, include_creation_fields=True)
        else:
            self._apply_entity_to_model(model, notification, include_creation_fields=False)
        self.session.add(model)
        return model

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel,
        notification: Notification,
        *,
        include_creation_fields: bool,
    ) -> None:
        if include_creation_fields:
            model.user_id = notification.user_id
            model.message = notification.message
            model.type = notification.type
            model.created_at = ensure_utc_naive(notification.created_at or now_utc())
        model.is_read = bool(notification.is_read)
        model.read_at = ensure_utc_naive(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            message=model.message,
            type=model.type,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
            read_at=ensure_utc(model.read_at),
        )


__all__ = ["NotificationRepository"]
