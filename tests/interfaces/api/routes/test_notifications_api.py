"""Integration tests for the notification API endpoints."""

from __future__ import annotations

import re

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from notification_service.application.use_cases.notifications import NotificationService
from notification_service.domain.entities import Notification
from notification_service.interfaces.api.dependencies import get_notification_service
from notification_service.main import create_app

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.fixture()
def client(service: NotificationService):
    """Return a test client whose routes use the in-memory service fixture."""

    app = create_app()
    app.dependency_overrides[get_notification_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client


def _seed(service: NotificationService, *, user_id: int = 100, is_read: bool = False, **kwargs):
    values = {"message": "Test notification", "type": "TEST"}
    values.update(kwargs)
    return service.store_notification(
        Notification(id=None, user_id=user_id, is_read=is_read, **values)
    )


def test_create_notification(client: TestClient) -> None:
    response = client.post(
        "/notifications",
        params={"userId": "100", "message": "Test notification", "type": "TEST_TYPE"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["userId"] == 100
    assert body["data"]["message"] == "Test notification"
    assert body["data"]["type"] == "TEST_TYPE"
    assert body["data"]["isRead"] is False
    assert body["data"]["readAt"] is None
    assert TIMESTAMP_PATTERN.match(body["data"]["createdAt"])


def test_list_user_notifications(client: TestClient, service: NotificationService) -> None:
    _seed(service, message="Notification 1", type="TYPE1")
    _seed(service, message="Notification 2", type="TYPE2", is_read=True)
    _seed(service, user_id=200)

    response = client.get("/notifications/user/100")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [item["message"] for item in body["data"]] == ["Notification 2", "Notification 1"]


def test_list_unread_notifications(client: TestClient, service: NotificationService) -> None:
    _seed(service, message="Unread notification", type="UNREAD")
    _seed(service, message="Read notification", type="READ", is_read=True)

    response = client.get("/notifications/user/100/unread")

    body = response.json()
    assert response.status_code == 200
    assert len(body["data"]) == 1
    assert body["data"][0]["isRead"] is False
    assert body["data"][0]["message"] == "Unread notification"


def test_unread_count_and_mark_all_read(client: TestClient, service: NotificationService) -> None:
    for index in range(3):
        _seed(service, message=f"Unread {index}", type="UNREAD")

    assert client.get("/notifications/user/100/unread/count").json()["data"] == 3

    response = client.patch("/notifications/user/100/read-all")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["message"] == "All notifications marked as read"
    assert client.get("/notifications/user/100/unread/count").json()["data"] == 0


def test_mark_all_read_without_notifications_succeeds(client: TestClient) -> None:
    response = client.patch("/notifications/user/555/read-all")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_mark_as_read(client: TestClient, service: NotificationService) -> None:
    saved = _seed(service)

    response = client.patch(f"/notifications/{saved.id}/read")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["isRead"] is True
    assert TIMESTAMP_PATTERN.match(data["readAt"])

    again = client.patch(f"/notifications/{saved.id}/read").json()["data"]
    assert again["readAt"] == data["readAt"]


def test_mark_as_read_not_found(client: TestClient) -> None:
    response = client.patch("/notifications/invalid123/read")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Notification not found"


def test_delete_notification(client: TestClient, service: NotificationService) -> None:
    saved = _seed(service)

    response = client.delete(f"/notifications/{saved.id}")

    assert response.status_code == 200
    assert response.json()["message"] == "Notification deleted successfully"
    assert service.get_user_notifications(100) == []


def test_delete_notification_not_found(client: TestClient) -> None:
    response = client.delete("/notifications/invalid123")

    assert response.status_code == 404
    assert response.json()["error"] == "Notification not found"


def test_delete_all_user_notifications(client: TestClient, service: NotificationService) -> None:
    for index in range(3):
        _seed(service, message=f"Notification {index}")

    response = client.delete("/notifications/user/100")

    assert response.status_code == 200
    assert response.json()["message"] == "All notifications deleted successfully"
    assert client.get("/notifications/user/100").json()["data"] == []


def test_ingest_notification_event(client: TestClient, service: NotificationService) -> None:
    response = client.post(
        "/notifications/events",
        json={
            "userId": 100,
            "message": "Application submitted successfully",
            "type": "APPLICATION_SUBMITTED",
            "timestamp": "2024-04-30T08:15:00",
        },
    )

    assert response.status_code == 202
    assert response.json()["success"] is True
    (notification,) = service.get_unread_notifications(100)
    assert notification.type == "APPLICATION_SUBMITTED"


def test_ingest_malformed_event(client: TestClient) -> None:
    response = client.post("/notifications/events", json={"message": "no user"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"]


def test_store_failure_maps_to_server_error() -> None:
    class BrokenStore:
        def find_by_user(self, user_id):
            raise RuntimeError("store unavailable")

    app = create_app()
    app.dependency_overrides[get_notification_service] = lambda: NotificationService(BrokenStore())

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/notifications/user/100")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "data": None,
        "message": None,
        "error": "Internal server error",
    }


def test_non_integer_user_id_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/notifications/user/abc")

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert "user_id" in body["error"]
    assert "detail" not in body


def test_create_without_user_id_uses_error_envelope(client: TestClient) -> None:
    response = client.post("/notifications", params={"message": "Hi", "type": "TEST"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert "userId" in body["error"]


def test_non_object_event_body_uses_error_envelope(client: TestClient) -> None:
    response = client.post("/notifications/events", json=[1, 2, 3])

    assert response.status_code == 422
    assert response.json()["success"] is False
