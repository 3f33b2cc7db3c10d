from __future__ import annotations

from threading import Lock
from typing import Any, List, Optional

from google.api_core import exceptions as google_exceptions

from config import FIRESTORE_DELETE_MAX_ATTEMPTS, RECURSIVE_DELETE_CHUNK_SIZE, log


class FirestoreStore:
    """Document store backed by Cloud Firestore's recursive delete."""

    name = "firestore"

    def __init__(self, client: Any, chunk_size: Optional[int] = None, max_attempts: Optional[int] = None):
        self._client = client
        self._chunk_size = chunk_size or RECURSIVE_DELETE_CHUNK_SIZE
        self._max_attempts = max(1, max_attempts or FIRESTORE_DELETE_MAX_ATTEMPTS)

    def recursive_delete(self, path: str) -> int:
        """
        Deletes `path` and its descendants. The BulkWriter only reports failed
        writes through its error callback, so failures are collected there and
        raised once the writer has drained.
        """
        failures: List[Any] = []
        failures_lock = Lock()

        def _on_write_error(failure, _writer) -> bool:
            # failure.attempts counts retries already made for this write.
            if failure.attempts + 1 < self._max_attempts:
                return True
            with failures_lock:
                failures.append(failure)
            return False

        bulk_writer = self._client.bulk_writer()
        bulk_writer.on_write_error(_on_write_error)

        ref = self._client.document(path)
        queued = self._client.recursive_delete(ref, bulk_writer=bulk_writer, chunk_size=self._chunk_size)

        if failures:
            first = failures[0]
            log.warning(
                "Firestore recursive delete %s: %s of %s deletes failed (first: code=%s %s)",
                path, len(failures), queued, first.code, first.message,
            )
            raise google_exceptions.from_grpc_status(first.code, first.message or "Delete failed")

        log.debug("Firestore recursive delete %s removed %s documents", path, queued)
        return queued
