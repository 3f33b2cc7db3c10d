from __future__ import annotations

from flask import Blueprint

import config
from utils.json_helpers import jresult

meta_bp = Blueprint("meta", __name__)


# =========================
# Meta / Health
# =========================
@meta_bp.get("/health")
def health():
    return jresult(
        {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "store": config.DOCUMENT_STORE,
        }
    )


@meta_bp.get("/version")
def version():
    return jresult({"name": config.APP_NAME, "version": config.APP_VERSION})
