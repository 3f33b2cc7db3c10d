from __future__ import annotations

import time
import uuid

from flask import Flask, g, got_request_exception, request
from flask_cors import CORS

from config import DEBUG, FLASK_SECRET, PORT
from utils.debug_events import debug_enabled, record_event
from utils.error_handlers import register_error_handlers


def create_app() -> Flask:
    app = Flask(__name__)
    app.secret_key = FLASK_SECRET
    # Callable clients run in browsers on other origins.
    CORS(app)

    @app.before_request
    def _request_start():
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g.request_start_ts = time.time()
        record_event(
            "request",
            f"{request.method} {request.path} start",
            data={"method": request.method, "path": request.path},
            request_id=g.request_id,
        )

    @app.after_request
    def _request_end(response):
        rid = getattr(g, "request_id", None)
        start_ts = getattr(g, "request_start_ts", None)
        response.headers["X-Request-Id"] = rid or response.headers.get("X-Request-Id", "")
        record_event(
            "request",
            f"{request.method} {request.path} end",
            data={
                "status": response.status_code,
                "duration_ms": int((time.time() - start_ts) * 1000) if start_ts else None,
            },
            request_id=rid,
        )
        return response

    def _log_exception(sender, exception, **extra):
        if not debug_enabled():
            return
        record_event(
            "error",
            type(exception).__name__,
            data={"error": str(exception), "path": request.path},
            request_id=getattr(g, "request_id", None),
            level="error",
        )

    got_request_exception.connect(_log_exception, app)

    # Register blueprints
    from routes.account import account_bp
    from routes.debug import debug_bp
    from routes.meta import meta_bp

    app.register_blueprint(account_bp)
    app.register_blueprint(meta_bp)
    app.register_blueprint(debug_bp)

    register_error_handlers(app)
    return app


app = create_app()


# =========================
# Run
# =========================
if __name__ == "__main__":
    # Local dev only.
    app.run(host="0.0.0.0", port=PORT, debug=DEBUG)
