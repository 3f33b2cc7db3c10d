from __future__ import annotations

from threading import Lock
from typing import Optional

import config
from storage.document_store import DocumentStore
from utils.errors import ErrorCode, ServiceError

_LOCK = Lock()
_STORE: Optional[DocumentStore] = None


def _build_store(backend: str) -> DocumentStore:
    if backend == "firestore":
        from clients.firebase_client import get_firestore_client
        from storage.firestore_store import FirestoreStore

        return FirestoreStore(get_firestore_client())
    if backend == "memory":
        from storage.in_memory_store import InMemoryDocumentStore

        return InMemoryDocumentStore()
    raise ServiceError(f"Unknown document store backend: {backend}", ErrorCode.FAILED_PRECONDITION)


def get_document_store() -> DocumentStore:
    """Returns the process-wide store selected by DOCUMENT_STORE."""
    global _STORE
    with _LOCK:
        if _STORE is None:
            _STORE = _build_store(config.DOCUMENT_STORE)
            config.log.info("Document store backend: %s", _STORE.name)
        return _STORE


def reset_document_store() -> None:
    global _STORE
    with _LOCK:
        _STORE = None
