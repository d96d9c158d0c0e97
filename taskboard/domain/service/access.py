"""Access resolver.

Pure functions over already-loaded entities. They answer authorization
questions with values and never raise; callers map the answer to an error.
Roles are always read from the project, so a membership change applies to
every task of the project at once.
"""

from taskboard.domain.model.access import TaskAccess, TaskAccessStatus
from taskboard.domain.model.project import Project
from taskboard.domain.model.task import Task
from taskboard.domain.value import Role, UserId


def role_of(project: Project, user_id: UserId | None) -> Role | None:
    """Effective role of a user in a project.

    The ``owner_id`` field wins over any membership entry for the same user.

    Args:
        project: Loaded project
        user_id: Caller, or None for an anonymous caller

    Returns:
        The caller's role, or None if the caller has no access
    """
    if user_id is None:
        return None
    if project.owner_id == user_id:
        return Role.OWNER
    for member in project.members:
        if member.user_id == user_id:
            return member.role
    return None


def can_edit(role: Role | None) -> bool:
    """Whether a role may mutate project content. Viewers may only read."""
    return role in (Role.OWNER, Role.EDITOR)


def is_owner(project: Project, user_id: UserId | None) -> bool:
    """Whether the caller owns the project."""
    return role_of(project, user_id) == Role.OWNER


def resolve_task_access(
    task: Task | None, project: Project | None, user_id: UserId
) -> TaskAccess:
    """Classify a caller's access to a task.

    Args:
        task: The task, or None if it was not found
        project: The task's project, or None if the task is personal or the
            project was not found
        user_id: Caller

    Returns:
        Access classification; ``role`` is set when access is granted
    """
    if task is None:
        return TaskAccess(status=TaskAccessStatus.TASK_NOT_FOUND)

    if task.project_id is None:
        if task.owner_id == user_id:
            return TaskAccess(status=TaskAccessStatus.GRANTED, role=Role.OWNER)
        return TaskAccess(status=TaskAccessStatus.FORBIDDEN)

    if project is None or project.id != task.project_id:
        return TaskAccess(status=TaskAccessStatus.PROJECT_NOT_FOUND)

    role = role_of(project, user_id)
    if role is None:
        return TaskAccess(status=TaskAccessStatus.FORBIDDEN)
    return TaskAccess(status=TaskAccessStatus.GRANTED, role=role)
