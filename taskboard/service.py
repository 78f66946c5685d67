"""Application use cases for tasks."""

from __future__ import annotations

from datetime import datetime

from .domain import Task, TaskQuery, TaskRepository, TaskStatus


class TaskService:
    """Creates, reads, updates and deletes tasks through a repository."""

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def create_task(
        self, title: str, description: str = "", due_at: datetime | None = None
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            status=TaskStatus.PENDING,
            due_at=due_at,
        )
        return self._repo.save(task)

    def get_task_by_id(self, task_id: int) -> Task:
        return self._repo.find_by_id(task_id)

    def get_tasks(self, query: TaskQuery) -> tuple[list[Task], int]:
        return self._repo.find_tasks(query)

    def update_task(
        self,
        task_id: int,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | None = None,
        due_at: datetime | None = None,
    ) -> Task:
        """Apply the given changes; an empty title is ignored."""
        task = self._repo.find_by_id(task_id)
        if title:
            task.title = title
        if description is not None:
            task.description = description
        if status is not None:
            task.status = TaskStatus(status)
        if due_at is not None:
            task.due_at = due_at
        return self._repo.update(task)

    def delete_task(self, task_id: int) -> None:
        self._repo.delete(task_id)