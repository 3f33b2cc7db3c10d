from __future__ import annotations

import uuid
from typing import Any, Tuple

from flask import Response, g, jsonify, request

from utils.errors import ErrorCode


def request_id() -> str:
    rid = getattr(g, "request_id", None)
    if rid:
        return rid
    return request.headers.get("X-Request-Id") or str(uuid.uuid4())


def jerror(message: str, code: ErrorCode = ErrorCode.INVALID_ARGUMENT) -> Tuple[Response, int]:
    resp = jsonify({"error": {"status": code.wire_status, "message": message}})
    resp.headers["X-Request-Id"] = request_id()
    return resp, code.http_status


def jresult(data: Any, status: int = 200) -> Tuple[Response, int]:
    resp = jsonify({"result": data})
    resp.headers["X-Request-Id"] = request_id()
    return resp, status
