"""Unit tests for request span attributes."""

from types import SimpleNamespace

from fastapi import APIRouter

from taskboard.util.observability import _request_attributes, mask_path


def make_request(path: str, route=None, method: str | None = "GET"):
    """Minimal stand-in exposing what the attribute mapper reads."""
    scope = {"route": route} if route is not None else {}
    return SimpleNamespace(
        scope=scope,
        url=SimpleNamespace(path=path),
        method=method,
        client=SimpleNamespace(host="10.0.0.1"),
    )


def guest_route():
    router = APIRouter(prefix="/guest")

    @router.get("/{token}/tasks")
    async def list_tasks(token: str):
        return []

    return router.routes[0]


class TestRequestAttributes:
    """Tests for the span attribute mapper."""

    def test_route_template_replaces_token_in_path(self):
        request = make_request("/guest/s3cr3t-token/tasks", route=guest_route())

        result = _request_attributes(request, {"x": 1})

        assert result["path"] == "/guest/{token}/tasks"
        assert "s3cr3t-token" not in str(result)
        assert result["x"] == 1
        assert result["method"] == "GET"
        assert result["client_host"] == "10.0.0.1"

    def test_unmatched_request_masks_token_segments(self):
        request = make_request("/collab/accept/s3cr3t-token", method=None)

        result = _request_attributes(request, {})

        assert result["path"] == "/collab/accept/{token}"
        assert result["method"] == "WEBSOCKET"


class TestMaskPath:
    """Tests for mask_path."""

    def test_masks_guest_and_accept_tokens(self):
        assert mask_path("/guest/abc/tasks/1") == "/guest/{token}/tasks/1"
        assert mask_path("/collab/accept/abc") == "/collab/accept/{token}"

    def test_other_paths_are_unchanged(self):
        assert mask_path("/tasks/123") == "/tasks/123"
        assert mask_path("/guest/") == "/guest/"
