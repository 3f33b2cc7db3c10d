from __future__ import annotations

from typing import Optional

from config import log
from schemas.account import AccountDeleteResponse, CallableContext
from storage.document_store import DocumentStore, user_record_path
from storage.store_factory import get_document_store
from utils.debug_events import record_event
from utils.errors import ErrorCode, ServiceError

UNAUTHENTICATED_MESSAGE = "You must be signed in."


def delete_account_data(
    context: CallableContext,
    store: Optional[DocumentStore] = None,
) -> AccountDeleteResponse:
    """
    Deletes users/{uid} and every nested subcollection beneath it for the
    signed-in caller. Store failures propagate untouched; calling again after
    a failure (or after success) is safe.
    """
    uid = context.auth.uid if context.auth else None
    if not uid:
        raise ServiceError(UNAUTHENTICATED_MESSAGE, ErrorCode.UNAUTHENTICATED)

    path = user_record_path(uid)
    store = store or get_document_store()
    deleted = store.recursive_delete(path)

    log.info("Deleted account data for uid=%s (%s documents)", uid, deleted)
    record_event(
        "account",
        "account data deleted",
        data={"uid": uid, "path": path, "deleted": deleted},
        request_id=context.request_id,
    )
    return {"ok": True}
