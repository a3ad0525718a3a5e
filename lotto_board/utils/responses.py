"""Helpers for consistent JSON responses."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200, cache_control: str | None = None) -> Response:
    """Success response. The payload is returned as-is (no envelope)."""

    resp = jsonify(data)
    resp.status_code = status_code
    if cache_control:
        resp.headers["Cache-Control"] = cache_control
    return resp


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    body: dict[str, Any] = {"error": message, "code": code}
    if details is not None:
        body["details"] = details
    resp = jsonify(body)
    resp.status_code = status_code
    return resp
