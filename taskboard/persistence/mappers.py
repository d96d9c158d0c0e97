"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from taskboard.domain.model import Invite, Project, ProjectMember, Task
from taskboard.domain.value import (
    AccessToken,
    Email,
    InviteId,
    InviteStatus,
    ProjectId,
    Role,
    TaskId,
    TaskPriority,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_member(row: Dict[str, Any]) -> ProjectMember:
    """Convert a project_members row to a ProjectMember."""
    return ProjectMember(user_id=UserId(_uuid(row["user_id"])), role=Role(row["role"]))


def row_to_project(
    row: Dict[str, Any], member_rows: Iterable[Dict[str, Any]] = ()
) -> Project:
    """Convert database rows to a Project aggregate.

    Args:
        row: projects row as dict
        member_rows: project_members rows of this project

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(_uuid(row["id"])),
        name=row["name"],
        owner_id=UserId(_uuid(row["owner_id"])),
        members=[row_to_member(m) for m in member_rows],
        invite_token=AccessToken(root=row["invite_token"])
        if row.get("invite_token")
        else None,
        invite_token_created_at=row.get("invite_token_created_at"),
        created_at=row["created_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert a Project to a projects row. Members are stored separately."""
    return {
        "id": project.id,
        "name": project.name,
        "owner_id": project.owner_id,
        "invite_token": project.invite_token.root if project.invite_token else None,
        "invite_token_created_at": project.invite_token_created_at,
        "created_at": project.created_at,
    }


def member_to_dict(project_id: ProjectId, member: ProjectMember) -> Dict[str, Any]:
    """Convert a ProjectMember to a project_members row."""
    return {
        "project_id": project_id,
        "user_id": member.user_id,
        "role": member.role.value,
    }


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        email=Email(root=row["email"]),
        project_id=ProjectId(_uuid(row["project_id"])),
        token=AccessToken(root=row["token"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        status=InviteStatus(row["status"]),
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by=_optional_uuid(row.get("accepted_by")),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": invite.id,
        "email": invite.email.root,
        "project_id": invite.project_id,
        "token": invite.token.root,
        "invited_by": invite.invited_by,
        "status": invite.status.value,
        "expires_at": invite.expires_at,
        "created_at": invite.created_at,
        "accepted_at": invite.accepted_at,
        "accepted_by": invite.accepted_by,
    }


def row_to_task(row: Dict[str, Any]) -> Task:
    """Convert database row to Task domain model."""
    return Task(
        id=TaskId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        priority=TaskPriority(row["priority"]),
        due_date=row.get("due_date"),
        tags=list(row.get("tags") or []),
        completed=row["completed"],
        completed_at=row.get("completed_at"),
        owner_id=UserId(_uuid(row["owner_id"])),
        project_id=_optional_uuid(row.get("project_id")),
        created_at=row["created_at"],
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert Task domain model to database dict."""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": task.priority.value,
        "due_date": task.due_date,
        "tags": list(task.tags),
        "completed": task.completed,
        "completed_at": task.completed_at,
        "owner_id": task.owner_id,
        "project_id": task.project_id,
        "created_at": task.created_at,
    }
