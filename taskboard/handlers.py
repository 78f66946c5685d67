"""HTTP handlers for the task endpoints."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Response, jsonify, request

from .domain import PaginationMeta, TaskQuery, TaskStatus, is_valid_task_status
from .dto import TaskListResponse, ValidationError, parse_create, parse_query, parse_update
from .responses import error_response, simple_error_response, simple_success_response, success_response
from .service import TaskService

_ALLOWED_SORT_FIELDS = ("title", "due_at", "created_at")
_ALLOWED_SORT_ORDERS = ("asc", "desc")
_MAX_ID = 2**32 - 1
_DEFAULT_PAGE = 1
_DEFAULT_PAGE_SIZE = 10


def _reply(body: dict[str, Any], status: int = HTTPStatus.OK) -> Response:
    response = jsonify(body)
    response.status_code = int(status)
    return response


def _bad_request(message: str) -> Response:
    return _reply(simple_error_response(message), HTTPStatus.BAD_REQUEST)


def _failure(status: HTTPStatus, message: str, error: Exception) -> Response:
    return _reply(error_response(status, message, str(error)), status)


def _parse_id(raw: str) -> int | None:
    if raw.isascii() and raw.isdigit():
        value = int(raw)
        if value <= _MAX_ID:
            return value
    return None


class TaskHandler:
    """Turns HTTP requests into task service calls and JSON replies."""

    def __init__(self, service: TaskService) -> None:
        self._service = service

    def create_task(self) -> Response:
        try:
            dto = parse_create(request.get_json(silent=True))
        except ValidationError as exc:
            return _bad_request(str(exc))
        try:
            task = self._service.create_task(dto.title, dto.description, dto.due_at)
        except Exception as exc:
            return _failure(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to create task", exc)
        return _reply(success_response(task.to_dict()))

    def get_task(self, id: str) -> Response:
        task_id = _parse_id(id)
        if task_id is None:
            return _bad_request("Invalid ID")
        try:
            task = self._service.get_task_by_id(task_id)
        except Exception as exc:
            return _failure(HTTPStatus.NOT_FOUND, "Task not found", exc)
        return _reply(success_response(task.to_dict()))

    def get_tasks(self) -> Response:
        try:
            dto = parse_query(request.args)
        except ValidationError as exc:
            return _bad_request(str(exc))

        page = dto.page if dto.page > 0 else _DEFAULT_PAGE
        page_size = dto.page_size if dto.page_size > 0 else _DEFAULT_PAGE_SIZE

        if dto.sort_by and dto.sort_by not in _ALLOWED_SORT_FIELDS:
            return _bad_request("Invalid sort_by")
        if dto.sort_order and dto.sort_order not in _ALLOWED_SORT_ORDERS:
            return _bad_request("Invalid sort_order")

        status = None
        if dto.status:
            if not is_valid_task_status(dto.status):
                return _bad_request("Invalid status")
            status = TaskStatus(dto.status)

        query = TaskQuery(
            page=page,
            page_size=page_size,
            search=dto.search,
            sort_by=dto.sort_by,
            sort_order=dto.sort_order,
            status=status,
        )
        try:
            tasks, total = self._service.get_tasks(query)
        except Exception as exc:
            return _failure(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to retrieve tasks", exc)

        meta = PaginationMeta(
            total=total,
            page=page,
            page_size=page_size,
            total_pages=-(-total // page_size),
        )
        return _reply(success_response(TaskListResponse(tasks=tasks, meta=meta).to_dict()))

    def update_task(self, id: str) -> Response:
        task_id = _parse_id(id)
        if task_id is None:
            return _bad_request("Invalid ID")
        try:
            dto = parse_update(request.get_json(silent=True))
        except ValidationError as exc:
            return _bad_request(str(exc))

        status = None
        if dto.status is not None:
            if not is_valid_task_status(dto.status):
                return _bad_request("Invalid status")
            status = TaskStatus(dto.status)

        try:
            task = self._service.update_task(
                task_id, dto.title, dto.description, status, dto.due_at
            )
        except Exception as exc:
            return _failure(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to update task", exc)
        return _reply(success_response(task.to_dict()))

    def delete_task(self, id: str) -> Response:
        task_id = _parse_id(id)
        if task_id is None:
            return _bad_request("Invalid ID")
        try:
            self._service.delete_task(task_id)
        except Exception as exc:
            return _failure(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to delete task", exc)
        return _reply(simple_success_response("Task deleted"))