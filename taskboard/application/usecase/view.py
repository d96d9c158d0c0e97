"""Response views shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from taskboard.domain.model import Invite, Project, Task
from taskboard.domain.value import InviteStatus, Role, TaskPriority


class MemberView(BaseModel):
    """Project member."""

    user_id: str
    role: Role


class ProjectView(BaseModel):
    """Project without owner-only details."""

    project_id: str
    name: str
    owner_id: str
    members: list[MemberView]
    created_at: datetime


class InviteView(BaseModel):
    """Targeted invite, as seen by the project owner."""

    invite_id: str
    email: str
    token: str
    project_id: str
    status: InviteStatus
    expires_at: datetime | None
    created_at: datetime
    accepted_at: datetime | None


class ShareLinkView(BaseModel):
    """Standing share link of a project."""

    token: str
    url: str
    created_at: datetime | None


class TaskView(BaseModel):
    """Task."""

    task_id: str
    title: str
    description: str
    priority: TaskPriority
    due_date: datetime | None
    tags: list[str]
    completed: bool
    completed_at: datetime | None
    owner_id: str
    project_id: str | None
    created_at: datetime


def project_view(project: Project) -> ProjectView:
    """Owner first, then recorded members."""
    members = [MemberView(user_id=str(project.owner_id), role=Role.OWNER)]
    members.extend(
        MemberView(user_id=str(m.user_id), role=m.role) for m in project.members
    )
    return ProjectView(
        project_id=str(project.id),
        name=project.name,
        owner_id=str(project.owner_id),
        members=members,
        created_at=project.created_at,
    )


def invite_view(invite: Invite) -> InviteView:
    return InviteView(
        invite_id=str(invite.id),
        email=invite.email.root,
        token=invite.token.root,
        project_id=str(invite.project_id),
        status=invite.status,
        expires_at=invite.expires_at,
        created_at=invite.created_at,
        accepted_at=invite.accepted_at,
    )


def share_link_view(project: Project, url: str) -> ShareLinkView:
    """Requires a live token on ``project``."""
    if project.invite_token is None:
        raise ValueError(f"Project {project.id} has no live share link")
    return ShareLinkView(
        token=project.invite_token.root,
        url=url,
        created_at=project.invite_token_created_at,
    )


def task_view(task: Task) -> TaskView:
    return TaskView(
        task_id=str(task.id),
        title=task.title,
        description=task.description,
        priority=task.priority,
        due_date=task.due_date,
        tags=list(task.tags),
        completed=task.completed,
        completed_at=task.completed_at,
        owner_id=str(task.owner_id),
        project_id=str(task.project_id) if task.project_id else None,
        created_at=task.created_at,
    )
