"""End-to-end tests for guest routes."""

from uuid import uuid4

from tests.harness import auth_headers, create_client_fixture

client = create_client_fixture()


def _share_token(client, owner: str, name: str = "Launch") -> tuple[dict, str]:
    project = client.post(
        "/collab/projects", json={"name": name}, headers=auth_headers(owner)
    ).json()["project"]
    link = client.get(
        f"/collab/projects/{project['project_id']}/share-link",
        headers=auth_headers(owner),
    ).json()["share_link"]
    return project, link["token"]


class TestGuestAPI:
    """End-to-end tests for anonymous access through tokens."""

    def test_guest_views_project(self, client):
        project, token = _share_token(client, str(uuid4()))

        response = client.get(f"/guest/{token}")

        assert response.status_code == 200
        assert response.json()["project"]["project_id"] == project["project_id"]

    def test_unknown_token_is_not_found(self, client):
        assert client.get("/guest/not-a-real-token").status_code == 404

    def test_pending_invite_token_opens_project(self, client):
        # Arrange
        owner = str(uuid4())
        project, _ = _share_token(client, owner)
        invite = client.post(
            "/collab/invite",
            json={"project_id": project["project_id"], "email": "a@x.com"},
            headers=auth_headers(owner),
        ).json()

        # Act
        response = client.get(f"/guest/{invite['token']}")

        # Assert
        assert response.status_code == 200

    def test_accepted_invite_token_no_longer_opens_project(self, client):
        # Arrange
        owner = str(uuid4())
        project, _ = _share_token(client, owner)
        invite = client.post(
            "/collab/invite",
            json={"project_id": project["project_id"], "email": "a@x.com"},
            headers=auth_headers(owner),
        ).json()
        client.post(
            "/collab/accept",
            json={"token": invite["token"]},
            headers=auth_headers(str(uuid4())),
        )

        # Act
        response = client.get(f"/guest/{invite['token']}/tasks")

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "Invite not pending"

    def test_guest_task_lifecycle(self, client):
        # Arrange
        owner = str(uuid4())
        _, token = _share_token(client, owner)

        # Act
        created = client.post(
            f"/guest/{token}/tasks", json={"title": "Ship it", "tags": ["release"]}
        )
        task_id = created.json()["task_id"]
        updated = client.patch(
            f"/guest/{token}/tasks/{task_id}", json={"completed": True}
        )
        listed = client.get(f"/guest/{token}/tasks")
        deleted = client.delete(f"/guest/{token}/tasks/{task_id}")

        # Assert
        assert created.status_code == 201
        assert created.json()["owner_id"] == owner
        assert created.json()["priority"] == "Medium"
        assert updated.status_code == 200
        assert updated.json()["completed"] is True
        assert updated.json()["completed_at"] is not None
        assert [t["task_id"] for t in listed.json()["tasks"]] == [task_id]
        assert deleted.status_code == 200
        assert client.get(f"/guest/{token}/tasks").json() == {"tasks": []}

    def test_authorization_header_is_ignored(self, client):
        """Guest routes attribute tasks to the owner even for signed-in callers."""
        owner = str(uuid4())
        _, token = _share_token(client, owner)

        created = client.post(
            f"/guest/{token}/tasks",
            json={"title": "Ship it"},
            headers=auth_headers(str(uuid4())),
        )

        assert created.json()["owner_id"] == owner

    def test_guest_cannot_touch_task_of_another_project(self, client):
        # Arrange
        _, mine = _share_token(client, str(uuid4()), "Mine")
        _, theirs = _share_token(client, str(uuid4()), "Theirs")
        foreign = client.post(f"/guest/{theirs}/tasks", json={"title": "Secret"})
        task_id = foreign.json()["task_id"]

        # Act
        patch = client.patch(f"/guest/{mine}/tasks/{task_id}", json={"title": "x"})
        delete = client.delete(f"/guest/{mine}/tasks/{task_id}")

        # Assert
        assert patch.status_code == 403
        assert patch.json()["detail"] == "Task not in this project"
        assert delete.status_code == 403

    def test_unknown_task_is_not_found(self, client):
        _, token = _share_token(client, str(uuid4()))

        response = client.delete(f"/guest/{token}/tasks/{uuid4()}")

        assert response.status_code == 404
