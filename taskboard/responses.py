"""Envelope builders for JSON API responses."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


def error_response(code: int, message: str, detail: str = "") -> dict[str, Any]:
    """Build a failure envelope; an empty ``detail`` is left out."""
    error: dict[str, Any] = {"code": int(code), "message": message}
    if detail:
        error["detail"] = detail
    return {"success": False, "error": error}


def simple_error_response(message: str) -> dict[str, Any]:
    """Build a 400 failure envelope with ``message`` as its detail."""
    return error_response(HTTPStatus.BAD_REQUEST, "Error", message)


def success_response(data: Any) -> dict[str, Any]:
    """Build a success envelope around ``data``."""
    return {"success": True, "data": data}


def simple_success_response(data: Any) -> dict[str, Any]:
    """Build a success envelope around a plain value such as a message."""
    return success_response(data)