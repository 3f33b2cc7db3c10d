from __future__ import annotations

import itertools
import time
from collections import deque
from threading import Lock
from typing import Any, Dict, List, Optional

import config


class DebugEventLog:
    """Bounded ring of request/deletion events, readable from /debug/events."""

    def __init__(self, capacity: int):
        self._lock = Lock()
        self._events: deque = deque(maxlen=max(1, capacity))
        self._ids = itertools.count(1)

    def append(self, event: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            event["id"] = next(self._ids)
            self._events.append(event)
        return event

    def since(self, since_id: int = 0, category: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock:
            return [
                e for e in self._events
                if e["id"] > since_id and (category is None or e["category"] == category)
            ]

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
            return dropped


_LOG = DebugEventLog(config.DEBUG_EVENTS_MAX)


def debug_enabled() -> bool:
    return bool(config.DEBUG_CONSOLE_ENABLED)


def record_event(
    category: str,
    message: str,
    *,
    data: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    level: str = "info",
) -> Dict[str, Any]:
    """Returns the stored event, or {} when the console is off."""
    if not debug_enabled():
        return {}
    return _LOG.append({
        "ts": time.time(),
        "level": level,
        "category": category,
        "message": message,
        "request_id": request_id or "",
        "data": data or {},
    })


def list_events(since_id: int = 0, category: Optional[str] = None) -> List[Dict[str, Any]]:
    return _LOG.since(since_id, category)


def clear_events() -> int:
    return _LOG.clear()
