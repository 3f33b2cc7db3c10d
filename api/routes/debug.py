from __future__ import annotations

from flask import Blueprint, request

from utils.debug_events import clear_events, debug_enabled, list_events
from utils.errors import ErrorCode
from utils.json_helpers import jerror, jresult


debug_bp = Blueprint("debug", __name__)


@debug_bp.get("/debug/events")
def debug_events():
    """Query: since=<event id>, category=<request|account|error>."""
    if not debug_enabled():
        return jerror("Debug console disabled", ErrorCode.NOT_FOUND)
    try:
        since = int(request.args.get("since") or 0)
    except ValueError:
        return jerror("since must be an integer", ErrorCode.INVALID_ARGUMENT)
    category = request.args.get("category") or None
    return jresult({"events": list_events(since, category)})


@debug_bp.post("/debug/clear")
def debug_clear():
    if not debug_enabled():
        return jerror("Debug console disabled", ErrorCode.NOT_FOUND)
    return jresult({"cleared": clear_events()})
