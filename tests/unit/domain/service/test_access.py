"""Unit tests for the access resolver."""

from uuid import uuid4

from taskboard.domain.model import Project, ProjectMember, Task, TaskAccessStatus
from taskboard.domain.service import can_edit, is_owner, resolve_task_access, role_of
from taskboard.domain.value import ProjectId, Role, TaskId, UserId


def _project(owner: UserId, members: list[ProjectMember] | None = None) -> Project:
    return Project(
        id=ProjectId(uuid4()), name="Launch", owner_id=owner, members=members or []
    )


def _task(owner: UserId, project: Project | None = None) -> Task:
    return Task(
        id=TaskId(uuid4()),
        title="Write release notes",
        owner_id=owner,
        project_id=project.id if project else None,
    )


class TestRoleOf:
    """Tests for role_of."""

    def test_owner_field_gives_owner_role(self):
        """The project owner is an owner without a membership entry."""
        owner = UserId(uuid4())
        project = _project(owner)

        assert role_of(project, owner) == Role.OWNER

    def test_member_role_is_returned(self):
        """Members get the role stored on their entry."""
        owner, editor, viewer = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        project = _project(
            owner,
            [
                ProjectMember(user_id=editor, role=Role.EDITOR),
                ProjectMember(user_id=viewer, role=Role.VIEWER),
            ],
        )

        assert role_of(project, editor) == Role.EDITOR
        assert role_of(project, viewer) == Role.VIEWER

    def test_stranger_and_anonymous_have_no_role(self):
        """Callers outside the project have no role."""
        project = _project(UserId(uuid4()))

        assert role_of(project, UserId(uuid4())) is None
        assert role_of(project, None) is None

    def test_owner_field_wins_over_member_entry(self):
        """A stray editor entry for the owner does not demote them."""
        owner = UserId(uuid4())
        project = _project(owner, [ProjectMember(user_id=owner, role=Role.EDITOR)])

        assert role_of(project, owner) == Role.OWNER
        assert is_owner(project, owner)


class TestCanEdit:
    """Tests for can_edit."""

    def test_owner_and_editor_can_edit(self):
        assert can_edit(Role.OWNER)
        assert can_edit(Role.EDITOR)

    def test_viewer_and_outsider_cannot_edit(self):
        assert not can_edit(Role.VIEWER)
        assert not can_edit(None)


class TestResolveTaskAccess:
    """Tests for resolve_task_access."""

    def test_missing_task(self):
        """No task classifies as task not found."""
        access = resolve_task_access(None, None, UserId(uuid4()))

        assert access.status == TaskAccessStatus.TASK_NOT_FOUND
        assert not access.granted

    def test_personal_task_owner_is_granted(self):
        """The owner of a personal task has full access."""
        owner = UserId(uuid4())

        access = resolve_task_access(_task(owner), None, owner)

        assert access.granted
        assert access.can_write

    def test_personal_task_of_someone_else_is_forbidden(self):
        """Personal tasks are private to their owner."""
        access = resolve_task_access(_task(UserId(uuid4())), None, UserId(uuid4()))

        assert access.status == TaskAccessStatus.FORBIDDEN

    def test_project_task_with_missing_project(self):
        """A project task whose project is gone classifies as project not found."""
        project = _project(UserId(uuid4()))
        task = _task(project.owner_id, project)

        access = resolve_task_access(task, None, project.owner_id)

        assert access.status == TaskAccessStatus.PROJECT_NOT_FOUND

    def test_project_task_viewer_can_read_but_not_write(self):
        """Viewers are granted read access only."""
        owner, viewer = UserId(uuid4()), UserId(uuid4())
        project = _project(owner, [ProjectMember(user_id=viewer, role=Role.VIEWER)])
        task = _task(owner, project)

        access = resolve_task_access(task, project, viewer)

        assert access.granted
        assert access.role == Role.VIEWER
        assert not access.can_write

    def test_project_task_editor_can_write_tasks_they_do_not_own(self):
        """Editors may change any task of the project."""
        owner, editor = UserId(uuid4()), UserId(uuid4())
        project = _project(owner, [ProjectMember(user_id=editor, role=Role.EDITOR)])
        task = _task(owner, project)

        access = resolve_task_access(task, project, editor)

        assert access.can_write

    def test_project_task_outsider_is_forbidden(self):
        """Non-members are refused even if they once owned the task."""
        former_member = UserId(uuid4())
        project = _project(UserId(uuid4()))
        task = _task(former_member, project)

        access = resolve_task_access(task, project, former_member)

        assert access.status == TaskAccessStatus.FORBIDDEN
