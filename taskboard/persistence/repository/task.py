"""PostgreSQL implementation of Task repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.model import Task
from taskboard.domain.repository import TaskRepository
from taskboard.domain.value import ProjectId, TaskId, UserId
from taskboard.persistence.mappers import row_to_task, task_to_dict
from taskboard.persistence.tables import tasks_table


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        stmt = select(tasks_table).where(tasks_table.c.id == task_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_task(dict(row)) if row else None

    async def find_by_project(self, project_id: ProjectId) -> list[Task]:
        """Find tasks of a project, newest first."""
        stmt = (
            select(tasks_table)
            .where(tasks_table.c.project_id == project_id)
            .order_by(tasks_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_task(dict(row)) for row in result.mappings()]

    async def find_visible_to(
        self, owner_id: UserId, project_ids: Sequence[ProjectId]
    ) -> list[Task]:
        """Find personal tasks of ``owner_id`` plus tasks of ``project_ids``."""
        personal = (tasks_table.c.owner_id == owner_id) & (
            tasks_table.c.project_id.is_(None)
        )
        condition = personal
        if project_ids:
            condition = or_(personal, tasks_table.c.project_id.in_(list(project_ids)))

        stmt = (
            select(tasks_table)
            .where(condition)
            .order_by(tasks_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_task(dict(row)) for row in result.mappings()]

    async def save(self, task: Task) -> Task:
        """Save a task (create or update).

        Args:
            task: Task to save

        Returns:
            Saved task
        """
        task_dict = task_to_dict(task)

        existing = await self.find_by_id(task.id)

        if existing:
            stmt = (
                update(tasks_table)
                .where(tasks_table.c.id == task.id)
                .values(**task_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(tasks_table).values(**task_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return task

    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task."""
        stmt = delete(tasks_table).where(tasks_table.c.id == task_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every task of a project."""
        stmt = delete(tasks_table).where(tasks_table.c.project_id == project_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
