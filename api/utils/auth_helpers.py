from __future__ import annotations

from typing import Any, Dict, Optional

from firebase_admin import auth
from flask import request

from clients.firebase_client import get_firebase_app
from config import VERIFY_TOKEN_REVOCATION, log

# Token problems that mean "this caller is not signed in". A user deleted from
# Firebase Auth surfaces as UserNotFoundError when revocation is checked.
_REJECTED_TOKEN_ERRORS = (
    ValueError,
    auth.InvalidIdTokenError,
    auth.CertificateFetchError,
    auth.UserDisabledError,
    auth.UserNotFoundError,
)


# =========================
# Auth helpers
# =========================
def bearer_token_from_request() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    token = header.split(" ", 1)[1].strip()
    return token or None


def verify_id_token_from_request() -> Optional[Dict[str, Any]]:
    """
    Verifies the Firebase ID token carried as 'Authorization: Bearer <token>'.
    Returns the decoded claims, or None when the header is missing or the
    token does not verify (expired, revoked, wrong project, malformed, or
    its user no longer exists). Other Firebase errors propagate.
    """
    token = bearer_token_from_request()
    if not token:
        return None
    try:
        return auth.verify_id_token(
            token,
            app=get_firebase_app(),
            check_revoked=VERIFY_TOKEN_REVOCATION,
        )
    except _REJECTED_TOKEN_ERRORS as e:
        log.warning("Firebase ID token verification failed: %s", e)
        return None
