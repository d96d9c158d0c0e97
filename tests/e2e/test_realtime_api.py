"""End-to-end tests for the realtime task event stream."""

from uuid import uuid4

import pytest
from starlette.websockets import WebSocketDisconnect

from taskboard.config import Settings
from taskboard.util.jwt import create_token
from tests.harness import auth_headers, create_client_fixture

client = create_client_fixture()


def _token(user_id: str) -> str:
    return create_token(user_id, Settings().auth)


def _create_project(client, owner: str) -> str:
    return client.post(
        "/collab/projects", json={"name": "Launch"}, headers=auth_headers(owner)
    ).json()["project"]["project_id"]


def _close_code(client, url: str) -> int:
    with client.websocket_connect(url) as ws:
        with pytest.raises(WebSocketDisconnect) as exc:
            ws.receive_json()
    return exc.value.code


class TestRealtimeAPI:
    """End-to-end tests for WS /ws/projects/{project_id}."""

    def test_missing_token_is_refused(self, client):
        project_id = _create_project(client, str(uuid4()))

        assert _close_code(client, f"/ws/projects/{project_id}") == 4401

    def test_bad_token_is_refused(self, client):
        project_id = _create_project(client, str(uuid4()))

        code = _close_code(client, f"/ws/projects/{project_id}?token=garbage")

        assert code == 4401

    def test_non_member_is_refused(self, client):
        project_id = _create_project(client, str(uuid4()))
        token = _token(str(uuid4()))

        code = _close_code(client, f"/ws/projects/{project_id}?token={token}")

        assert code == 4403

    def test_unknown_project_is_refused(self, client):
        token = _token(str(uuid4()))

        assert _close_code(client, f"/ws/projects/{uuid4()}?token={token}") == 4404

    def test_member_receives_task_events(self, client):
        # Arrange
        owner = str(uuid4())
        project_id = _create_project(client, owner)

        with client.websocket_connect(
            f"/ws/projects/{project_id}?token={_token(owner)}"
        ) as ws:
            assert ws.receive_json() == {"type": "subscribed", "project_id": project_id}

            # Act
            task = client.post(
                "/tasks",
                json={"project_id": project_id, "title": "Ship it"},
                headers=auth_headers(owner),
            ).json()
            client.delete(f"/tasks/{task['task_id']}", headers=auth_headers(owner))
            created = ws.receive_json()
            deleted = ws.receive_json()

        # Assert
        assert created["type"] == "task.created"
        assert created["task_id"] == task["task_id"]
        assert created["task"]["title"] == "Ship it"
        assert deleted["type"] == "task.deleted"
        assert deleted["task"] is None

    def test_guest_changes_are_broadcast(self, client):
        # Arrange
        owner = str(uuid4())
        project_id = _create_project(client, owner)
        share = client.get(
            f"/collab/projects/{project_id}/share-link", headers=auth_headers(owner)
        ).json()["share_link"]

        with client.websocket_connect(
            f"/ws/projects/{project_id}?token={_token(owner)}"
        ) as ws:
            ws.receive_json()

            # Act
            client.post(f"/guest/{share['token']}/tasks", json={"title": "Ship it"})
            event = ws.receive_json()

        # Assert
        assert event["type"] == "task.created"
        assert event["project_id"] == project_id

    def test_personal_tasks_are_not_broadcast(self, client):
        # Arrange
        owner = str(uuid4())
        project_id = _create_project(client, owner)

        with client.websocket_connect(
            f"/ws/projects/{project_id}?token={_token(owner)}"
        ) as ws:
            ws.receive_json()

            # Act
            client.post("/tasks", json={"title": "Buy milk"}, headers=auth_headers(owner))
            client.post(
                "/tasks",
                json={"project_id": project_id, "title": "Ship it"},
                headers=auth_headers(owner),
            )
            event = ws.receive_json()

        # Assert
        assert event["task"]["title"] == "Ship it"
