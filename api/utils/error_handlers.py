from __future__ import annotations

from flask import Flask

from utils.errors import ErrorCode
from utils.json_helpers import jerror


# =========================
# Error Handlers
# =========================
def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_):
        return jerror("Route not found", ErrorCode.NOT_FOUND)

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jerror("Bad Request", ErrorCode.INVALID_ARGUMENT)

    @app.errorhandler(500)
    def internal(_):
        return jerror("INTERNAL", ErrorCode.INTERNAL)
