"""SQL storage for tasks."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    delete,
    func,
    insert,
    or_,
    select,
    update,
)
from sqlalchemy.engine import Engine

from .domain import Task, TaskNotFoundError, TaskQuery, TaskRepository, TaskStatus

_metadata = MetaData()

_tasks = Table(
    "tasks",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("status", String(10), server_default=TaskStatus.PENDING.value),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    Column("due_at", DateTime(timezone=True), nullable=True),
)


def _to_task(row) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description or "",
        status=TaskStatus(row.status or TaskStatus.PENDING),
        created_at=row.created_at,
        updated_at=row.updated_at,
        due_at=row.due_at,
    )


def _columns(task: Task) -> dict:
    values = {
        "title": task.title,
        "description": task.description,
        "status": TaskStatus(task.status or TaskStatus.PENDING).value,
        "created_at": task.created_at,
        "updated_at": task.updated_at,
        "due_at": task.due_at,
    }
    if task.id is not None:
        values["id"] = task.id
    return values


class SqlTaskRepository(TaskRepository):
    """Task repository backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def migrate(self) -> None:
        _metadata.create_all(self._engine)

    def save(self, task: Task) -> Task:
        now = datetime.now(timezone.utc)
        task.created_at = task.created_at or now
        task.updated_at = task.updated_at or now
        with self._engine.begin() as conn:
            result = conn.execute(insert(_tasks).values(**_columns(task)))
        task.id = result.inserted_primary_key[0]
        return task

    def find_by_id(self, task_id: int) -> Task:
        with self._engine.connect() as conn:
            row = conn.execute(select(_tasks).where(_tasks.c.id == task_id)).first()
        if row is None:
            raise TaskNotFoundError()
        return _to_task(row)

    def find_tasks(self, query: TaskQuery) -> tuple[list[Task], int]:
        conditions = []
        if query.search:
            pattern = f"%{query.search}%"
            conditions.append(or_(_tasks.c.title.like(pattern), _tasks.c.description.like(pattern)))
        if query.status is not None:
            conditions.append(_tasks.c.status == TaskStatus(query.status).value)

        if query.sort_by and query.sort_order:
            column = _tasks.c.get(query.sort_by)
            order = query.sort_order.lower()
            if column is None or order not in ("asc", "desc"):
                raise ValueError(f"invalid ordering: {query.sort_by} {query.sort_order}")
            ordering = [column.asc() if order == "asc" else column.desc(), _tasks.c.id.asc()]
        else:
            ordering = [_tasks.c.created_at.desc(), _tasks.c.id.desc()]

        stmt = select(_tasks).where(*conditions).order_by(*ordering)
        if query.page > 0 and query.page_size > 0:
            stmt = stmt.offset((query.page - 1) * query.page_size).limit(query.page_size)

        with self._engine.connect() as conn:
            total = conn.execute(select(func.count()).select_from(_tasks).where(*conditions)).scalar_one()
            tasks = [_to_task(row) for row in conn.execute(stmt)]
        return tasks, int(total)

    def update(self, task: Task) -> Task:
        """Write every field of ``task``, inserting it if no row has its id."""
        if task.id is None:
            return self.save(task)
        now = datetime.now(timezone.utc)
        task.updated_at = now
        with self._engine.begin() as conn:
            values = _columns(task)
            del values["id"]
            result = conn.execute(update(_tasks).where(_tasks.c.id == task.id).values(**values))
            if result.rowcount == 0:
                task.created_at = task.created_at or now
                conn.execute(insert(_tasks).values(**_columns(task)))
        return task

    def delete(self, task_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(_tasks).where(_tasks.c.id == task_id))