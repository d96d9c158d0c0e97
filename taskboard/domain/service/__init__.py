"""Domain services."""

from .access import can_edit, is_owner, resolve_task_access, role_of
from .base import Service
from .invite_service import InviteService
from .jwt_service import JWTService
from .notification import InviteDelivery, InviteNotificationService, InviteNotifier
from .project_service import ProjectService
from .realtime import TaskEventPublisher
from .task_service import TaskService

__all__ = [
    "InviteDelivery",
    "InviteNotificationService",
    "InviteNotifier",
    "InviteService",
    "JWTService",
    "ProjectService",
    "Service",
    "TaskEventPublisher",
    "TaskService",
    "can_edit",
    "is_owner",
    "resolve_task_access",
    "role_of",
]
