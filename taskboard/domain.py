"""Task entities, query objects and the repository contract."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class TaskStatus(str, enum.Enum):
    PENDING = "Pending"
    DOING = "Doing"
    DONE = "Done"

    def __str__(self) -> str:
        return self.value


def is_valid_task_status(status: Any) -> bool:
    """Return True if ``status`` names a known task state."""
    try:
        TaskStatus(status)
    except ValueError:
        return False
    return True


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class Task:
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    due_at: datetime | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the task in its JSON wire shape."""
        return {
            "ID": self.id,
            "Title": self.title,
            "Description": self.description,
            "Status": TaskStatus(self.status).value,
            "CreatedAt": _iso(self.created_at),
            "UpdatedAt": _iso(self.updated_at),
            "DueAt": _iso(self.due_at),
        }


@dataclass
class BaseQuery:
    page: int = 0
    page_size: int = 0


@dataclass
class TaskQuery(BaseQuery):
    search: str = ""
    sort_by: str = ""
    sort_order: str = ""
    status: TaskStatus | None = None


@dataclass
class PaginationMeta:
    total: int
    page: int
    page_size: int
    total_pages: int

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
        }


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested id."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


class TaskRepository(abc.ABC):
    """Storage for tasks."""

    @abc.abstractmethod
    def save(self, task: Task) -> Task: ...

    @abc.abstractmethod
    def find_by_id(self, task_id: int) -> Task: ...

    @abc.abstractmethod
    def find_tasks(self, query: TaskQuery) -> tuple[list[Task], int]: ...

    @abc.abstractmethod
    def update(self, task: Task) -> Task: ...

    @abc.abstractmethod
    def delete(self, task_id: int) -> None: ...