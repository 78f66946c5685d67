"""Request payloads and response bodies for the task API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .domain import PaginationMeta, Task


class ValidationError(ValueError):
    """Raised when a request payload or query string is malformed."""


@dataclass
class TaskCreateDTO:
    title: str
    description: str = ""
    due_at: datetime | None = None


@dataclass
class TaskUpdateDTO:
    title: str | None = None
    description: str | None = None
    status: str | None = None
    due_at: datetime | None = None


@dataclass
class TaskQueryDTO:
    page: int = 0
    page_size: int = 0
    search: str = ""
    sort_by: str = ""
    sort_order: str = ""
    status: str = ""


@dataclass
class TaskListResponse:
    tasks: list[Task] = field(default_factory=list)
    meta: PaginationMeta = field(default_factory=lambda: PaginationMeta(0, 0, 0, 0))

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self.tasks], "meta": self.meta.to_dict()}


def _object(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("request body must be a JSON object")
    return payload


def _string(body: Mapping[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


def _timestamp(body: Mapping[str, Any], key: str) -> datetime | None:
    value = _string(body, key)
    if value is None:
        return None
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    if len(text) <= 10 or text[10] not in "Tt":
        raise ValidationError(f"{key} must be an RFC 3339 timestamp")
    try:
        parsed = datetime.fromisoformat(text[:10] + "T" + text[11:])
    except ValueError as exc:
        raise ValidationError(f"{key} must be an RFC 3339 timestamp") from exc
    if parsed.tzinfo is None:
        raise ValidationError(f"{key} must include a time zone offset")
    return parsed


def _positive_int(args: Mapping[str, str], key: str) -> int:
    raw = args.get(key, "")
    if raw == "":
        return 0
    digits = raw[1:] if raw[:1] in "+-" else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ValidationError(f"{key} must be an integer")
    value = int(raw)
    if value < 0:
        raise ValidationError(f"{key} must be at least 1")
    return value


def parse_create(payload: Any) -> TaskCreateDTO:
    body = _object(payload)
    title = _string(body, "title")
    if not title:
        raise ValidationError("title is required")
    return TaskCreateDTO(title, _string(body, "description") or "", _timestamp(body, "due_at"))


def parse_update(payload: Any) -> TaskUpdateDTO:
    body = _object(payload)
    return TaskUpdateDTO(
        _string(body, "title"),
        _string(body, "description"),
        _string(body, "status"),
        _timestamp(body, "due_at"),
    )


def parse_query(args: Mapping[str, str]) -> TaskQueryDTO:
    return TaskQueryDTO(
        page=_positive_int(args, "page"),
        page_size=_positive_int(args, "page_size"),
        search=args.get("search", ""),
        sort_by=args.get("sort_by", ""),
        sort_order=args.get("sort_order", ""),
        status=args.get("status", ""),
    )