from datetime import datetime, timedelta, timezone

import pytest

from taskboard.domain import PaginationMeta, Task, TaskStatus
from taskboard.dto import (
    TaskListResponse,
    TaskQueryDTO,
    ValidationError,
    parse_create,
    parse_query,
    parse_update,
)


def test_parse_create_full_payload():
    dto = parse_create(
        {"title": "Write", "description": "docs", "due_at": "2024-01-02T03:04:05Z"}
    )
    assert dto.title == "Write"
    assert dto.description == "docs"
    assert dto.due_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_parse_create_defaults():
    dto = parse_create({"title": "Only title"})
    assert dto.description == ""
    assert dto.due_at is None


def test_parse_create_offset_timestamp():
    dto = parse_create({"title": "t", "due_at": "2024-01-02T03:04:05+02:00"})
    assert dto.due_at.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": None}])
def test_parse_create_requires_title(payload):
    with pytest.raises(ValidationError, match="title is required"):
        parse_create(payload)


@pytest.mark.parametrize("payload", [None, [], "title"])
def test_parse_create_rejects_non_objects(payload):
    with pytest.raises(ValidationError):
        parse_create(payload)


@pytest.mark.parametrize(
    "due_at", ["2024-01-02T03:04:05", "yesterday", "2024-01-02", 12]
)
def test_parse_create_rejects_bad_timestamps(due_at):
    with pytest.raises(ValidationError):
        parse_create({"title": "t", "due_at": due_at})


def test_parse_create_rejects_non_string_title():
    with pytest.raises(ValidationError):
        parse_create({"title": 5})


def test_parse_update_absent_and_null_fields_are_none():
    dto = parse_update({"title": None})
    assert (dto.title, dto.description, dto.status, dto.due_at) == (None, None, None, None)


def test_parse_update_keeps_given_fields():
    dto = parse_update({"title": "", "description": "", "status": "Done"})
    assert dto.title == ""
    assert dto.description == ""
    assert dto.status == "Done"


def test_parse_query_defaults():
    assert parse_query({}) == TaskQueryDTO()


def test_parse_query_reads_all_fields():
    dto = parse_query(
        {
            "page": "3",
            "page_size": "7",
            "search": "x",
            "sort_by": "title",
            "sort_order": "asc",
            "status": "Doing",
        }
    )
    assert dto == TaskQueryDTO(3, 7, "x", "title", "asc", "Doing")


def test_parse_query_zero_page_is_unset():
    assert parse_query({"page": "0"}).page == 0


@pytest.mark.parametrize("raw", ["-1", "abc", "1.5"])
def test_parse_query_rejects_bad_page(raw):
    with pytest.raises(ValidationError, match="page"):
        parse_query({"page": raw})


def test_parse_query_rejects_bad_page_size():
    with pytest.raises(ValidationError, match="page_size"):
        parse_query({"page_size": "-4"})


def test_task_list_response_to_dict():
    task = Task(title="a", id=1, status=TaskStatus.DONE)
    meta = PaginationMeta(total=1, page=1, page_size=10, total_pages=1)
    body = TaskListResponse(tasks=[task], meta=meta).to_dict()
    assert body["tasks"] == [task.to_dict()]
    assert body["meta"] == meta.to_dict()