from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TypedDict


@dataclass(frozen=True)
class AuthData:
    uid: str
    token: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CallableContext:
    """Per-call metadata handed to a callable handler by the transport."""

    auth: Optional[AuthData] = None
    instance_id_token: Optional[str] = None
    request_id: Optional[str] = None


class AccountDeleteResponse(TypedDict):
    ok: bool
