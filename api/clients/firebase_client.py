from __future__ import annotations

import os
from threading import Lock
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

from config import FIREBASE_CREDENTIALS_PATH, FIREBASE_PROJECT_ID, ROOT_DIR, log

_INIT_LOCK = Lock()


def _credentials() -> Optional[credentials.Base]:
    path = FIREBASE_CREDENTIALS_PATH
    if not path:
        return None
    if not os.path.isabs(path):
        path = os.path.join(ROOT_DIR, path)
    return credentials.Certificate(path)


def get_firebase_app() -> firebase_admin.App:
    """Returns the default Firebase app, initializing it on first use."""
    with _INIT_LOCK:
        try:
            return firebase_admin.get_app()
        except ValueError:
            options = {"projectId": FIREBASE_PROJECT_ID} if FIREBASE_PROJECT_ID else None
            log.info("Initializing Firebase Admin (project=%s)", FIREBASE_PROJECT_ID or "<default>")
            return firebase_admin.initialize_app(_credentials(), options)


def get_firestore_client():
    return firestore.client(get_firebase_app())
