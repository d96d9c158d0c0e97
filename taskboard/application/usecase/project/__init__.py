"""Project use cases."""

from taskboard.application.usecase.project.create_project import (
    CreateProjectRequest,
    CreateProjectResponse,
    CreateProjectUseCase,
)
from taskboard.application.usecase.project.delete_project import (
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
)
from taskboard.application.usecase.project.get_project import (
    GetProjectRequest,
    GetProjectResponse,
    GetProjectUseCase,
)
from taskboard.application.usecase.project.list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    ProjectListItem,
)
from taskboard.application.usecase.project.share_link import (
    GetShareLinkUseCase,
    ResetShareLinkUseCase,
    ShareLinkRequest,
    ShareLinkResponse,
)

__all__ = [
    "CreateProjectRequest",
    "CreateProjectResponse",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectResponse",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectResponse",
    "GetProjectUseCase",
    "GetShareLinkUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "ProjectListItem",
    "ResetShareLinkUseCase",
    "ShareLinkRequest",
    "ShareLinkResponse",
]
