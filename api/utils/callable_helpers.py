from __future__ import annotations

from typing import Any, Callable, Tuple

from firebase_admin import exceptions as firebase_exceptions
from flask import Response, request
from google.api_core import exceptions as google_exceptions

from config import log
from schemas.account import AuthData, CallableContext
from utils.auth_helpers import verify_id_token_from_request
from utils.debug_events import record_event
from utils.errors import ErrorCode, ServiceError
from utils.json_helpers import jerror, jresult, request_id

CallableHandler = Callable[[Any, CallableContext], Any]


# =========================
# Callable protocol
# =========================
def build_context() -> CallableContext:
    claims = verify_id_token_from_request()
    auth = None
    if claims and claims.get("uid"):
        auth = AuthData(uid=claims["uid"], token=dict(claims))
    return CallableContext(
        auth=auth,
        instance_id_token=request.headers.get("Firebase-Instance-ID-Token") or None,
        request_id=request_id(),
    )


def error_from_exception(e: Exception) -> ServiceError:
    """
    Translates a handler failure into a wire error. ServiceError passes as is,
    Google API and Firebase errors keep their kind and message, anything else
    is INTERNAL.
    """
    if isinstance(e, ServiceError):
        return e
    if isinstance(e, google_exceptions.GoogleAPICallError):
        grpc_code = e.grpc_status_code
        code = ErrorCode.from_grpc_name(grpc_code.name) if grpc_code is not None else ErrorCode.INTERNAL
        return ServiceError(e.message or code.wire_status, code)
    if isinstance(e, firebase_exceptions.FirebaseError):
        code = ErrorCode.from_grpc_name(e.code or "")
        return ServiceError(str(e) or code.wire_status, code)
    return ServiceError("INTERNAL", ErrorCode.INTERNAL)


def handle_callable(handler: CallableHandler) -> Tuple[Response, int]:
    """
    Runs `handler(data, context)` for the current request.
    Body must be JSON of the form {"data": ...}; the result is wrapped as {"result": ...}.
    """
    if not request.is_json:
        return jerror("Bad Request", ErrorCode.INVALID_ARGUMENT)
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or "data" not in body:
        return jerror("Bad Request", ErrorCode.INVALID_ARGUMENT)

    try:
        context = build_context()
        return jresult(handler(body["data"], context))
    except ServiceError as e:
        log.info("Callable %s rejected: %s (%s)", request.path, e.message, e.code.wire_status)
        return jerror(e.message, e.code)
    except Exception as e:
        err = error_from_exception(e)
        log.exception("Callable %s failed", request.path)
        record_event(
            "error",
            type(e).__name__,
            data={"error": str(e), "path": request.path, "status": err.code.wire_status},
            request_id=request_id(),
            level="error",
        )
        return jerror(err.message, err.code)
