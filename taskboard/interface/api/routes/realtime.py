"""Realtime task event stream.

Browsers cannot set headers on a WebSocket handshake, so the bearer token
travels in the ``token`` query parameter. Close codes mirror HTTP status:
4401 unauthenticated, 4403 not a member, 4404 unknown project. Once
subscribed, the server sends ``{"type": "subscribed"}`` before any event.
"""

import asyncio
from uuid import UUID

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from taskboard.adapter.realtime import InProcessTaskEventBroker
from taskboard.domain.error import ForbiddenError, NotFoundError
from taskboard.domain.model import TaskEvent
from taskboard.domain.service import JWTService, ProjectService
from taskboard.domain.value import ProjectId, UserId
from taskboard.util.jwt import JWTError

router = APIRouter(tags=["realtime"])

CLOSE_UNAUTHENTICATED = 4401
CLOSE_FORBIDDEN = 4403
CLOSE_NOT_FOUND = 4404


async def _authorize(
    container: AsyncContainer, project_id: UUID, token: str | None
) -> int | None:
    """Check the caller may watch the project.

    Returns:
        None if allowed, otherwise the close code to send
    """
    if not token:
        return CLOSE_UNAUTHENTICATED

    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
        project_service = await request_container.get(ProjectService)

        try:
            user_id = UserId(UUID(jwt_service.verify_token(token).user_id))
        except (JWTError, ValueError):
            return CLOSE_UNAUTHENTICATED

        try:
            await project_service.require_member(ProjectId(project_id), user_id)
        except NotFoundError:
            return CLOSE_NOT_FOUND
        except ForbiddenError:
            return CLOSE_FORBIDDEN

    return None


async def _forward(websocket: WebSocket, queue: asyncio.Queue[TaskEvent]) -> None:
    while True:
        event = await queue.get()
        await websocket.send_json(event.model_dump(mode="json"))


async def _drain(websocket: WebSocket) -> None:
    # Incoming messages are ignored; receiving surfaces the disconnect.
    while True:
        await websocket.receive_text()


@router.websocket("/ws/projects/{project_id}")
async def project_events(
    websocket: WebSocket,
    project_id: UUID,
    token: str | None = Query(default=None),
) -> None:
    """Stream task events of one project to a member."""
    container: AsyncContainer = websocket.app.state.dishka_container

    await websocket.accept()

    close_code = await _authorize(container, project_id, token)
    if close_code is not None:
        logfire.warn(
            "Realtime subscription refused",
            project_id=str(project_id),
            close_code=close_code,
        )
        await websocket.close(code=close_code)
        return

    broker = await container.get(InProcessTaskEventBroker)
    channel = f"project_{project_id}"
    queue = broker.subscribe(channel)
    tasks: list[asyncio.Task[None]] = []
    try:
        # Clients may rely on events published after this acknowledgement
        await websocket.send_json(
            {"type": "subscribed", "project_id": str(project_id)}
        )
        tasks = [
            asyncio.create_task(_forward(websocket, queue)),
            asyncio.create_task(_drain(websocket)),
        ]
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                raise error
    finally:
        for task in tasks:
            task.cancel()
        broker.unsubscribe(channel, queue)
