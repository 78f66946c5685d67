from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from taskboard.domain import Task, TaskNotFoundError, TaskQuery, TaskStatus
from taskboard.repository import SqlTaskRepository


@pytest.fixture
def repo():
    engine = create_engine(
        "sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False}
    )
    repository = SqlTaskRepository(engine)
    repository.migrate()
    yield repository
    engine.dispose()


def test_save_assigns_id_and_timestamps(repo):
    task = repo.save(Task(title="first"))
    assert task.id is not None and task.id >= 1
    assert task.created_at == task.updated_at
    second = repo.save(Task(title="second"))
    assert second.id > task.id


def test_find_by_id_round_trip(repo):
    due = datetime(2030, 1, 1, 12, 0)
    saved = repo.save(Task(title="report", description="quarterly", due_at=due))
    found = repo.find_by_id(saved.id)
    assert found.title == "report"
    assert found.description == "quarterly"
    assert found.status is TaskStatus.PENDING
    assert found.due_at == due


def test_find_by_id_missing_raises(repo):
    with pytest.raises(TaskNotFoundError, match="record not found"):
        repo.find_by_id(999)


def test_migrate_is_idempotent(repo):
    repo.migrate()
    saved = repo.save(Task(title="still here"))
    assert repo.find_by_id(saved.id).title == "still here"


def test_search_matches_title_or_description(repo):
    repo.save(Task(title="Buy milk", description="groceries"))
    repo.save(Task(title="Write report", description="quarterly numbers"))
    tasks, total = repo.find_tasks(TaskQuery(search="report"))
    assert total == 1
    assert [t.title for t in tasks] == ["Write report"]
    tasks, total = repo.find_tasks(TaskQuery(search="groceries"))
    assert [t.title for t in tasks] == ["Buy milk"]


def test_status_filter(repo):
    repo.save(Task(title="a"))
    repo.save(Task(title="b", status=TaskStatus.DONE))
    tasks, total = repo.find_tasks(TaskQuery(status=TaskStatus.DONE))
    assert total == 1
    assert tasks[0].title == "b"


def test_pagination_and_sorting(repo):
    for name in ["t3", "t0", "t4", "t1", "t2"]:
        repo.save(Task(title=name))
    tasks, total = repo.find_tasks(
        TaskQuery(page=2, page_size=2, sort_by="title", sort_order="asc")
    )
    assert total == 5
    assert [t.title for t in tasks] == ["t2", "t3"]
    tasks, _ = repo.find_tasks(TaskQuery(sort_by="title", sort_order="desc"))
    assert [t.title for t in tasks] == ["t4", "t3", "t2", "t1", "t0"]


def test_default_order_is_newest_first(repo):
    first = repo.save(Task(title="old"))
    second = repo.save(Task(title="new"))
    tasks, _ = repo.find_tasks(TaskQuery())
    assert [t.id for t in tasks] == [second.id, first.id]


def test_sort_needs_both_field_and_order(repo):
    first = repo.save(Task(title="b"))
    second = repo.save(Task(title="a"))
    tasks, _ = repo.find_tasks(TaskQuery(sort_by="title"))
    assert [t.id for t in tasks] == [second.id, first.id]


def test_unknown_sort_column_raises(repo):
    with pytest.raises(ValueError):
        repo.find_tasks(TaskQuery(sort_by="nope", sort_order="asc"))


def test_update_persists_changes(repo):
    saved = repo.save(Task(title="draft"))
    saved.title = "final"
    saved.status = TaskStatus.DONE
    repo.update(saved)
    found = repo.find_by_id(saved.id)
    assert found.title == "final"
    assert found.status is TaskStatus.DONE


def test_update_of_unknown_id_inserts(repo):
    repo.update(Task(title="upserted", id=42))
    assert repo.find_by_id(42).title == "upserted"


def test_delete_removes_task(repo):
    saved = repo.save(Task(title="gone"))
    repo.delete(saved.id)
    with pytest.raises(TaskNotFoundError):
        repo.find_by_id(saved.id)
    _, total = repo.find_tasks(TaskQuery())
    assert total == 0


def test_delete_missing_is_silent(repo):
    kept = repo.save(Task(title="kept"))
    repo.delete(kept.id + 100)
    assert repo.find_by_id(kept.id).title == "kept"