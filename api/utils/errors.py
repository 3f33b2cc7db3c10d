from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Canonical error kinds of the callable protocol, with their HTTP status."""

    OK = ("ok", 200)
    CANCELLED = ("cancelled", 499)
    UNKNOWN = ("unknown", 500)
    INVALID_ARGUMENT = ("invalid-argument", 400)
    DEADLINE_EXCEEDED = ("deadline-exceeded", 504)
    NOT_FOUND = ("not-found", 404)
    ALREADY_EXISTS = ("already-exists", 409)
    PERMISSION_DENIED = ("permission-denied", 403)
    RESOURCE_EXHAUSTED = ("resource-exhausted", 429)
    FAILED_PRECONDITION = ("failed-precondition", 400)
    ABORTED = ("aborted", 409)
    OUT_OF_RANGE = ("out-of-range", 400)
    UNIMPLEMENTED = ("unimplemented", 501)
    INTERNAL = ("internal", 500)
    UNAVAILABLE = ("unavailable", 503)
    DATA_LOSS = ("data-loss", 500)
    UNAUTHENTICATED = ("unauthenticated", 401)

    def __init__(self, kind: str, http_status: int):
        self.kind = kind
        self.http_status = http_status

    @property
    def wire_status(self) -> str:
        # "invalid-argument" -> "INVALID_ARGUMENT"
        return self.name

    @classmethod
    def from_grpc_name(cls, name: str) -> "ErrorCode":
        try:
            return cls[name.upper()]
        except KeyError:
            return cls.UNKNOWN


class ServiceError(Exception):
    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def status(self) -> int:
        return self.code.http_status
