import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from schemas.account import AuthData, CallableContext
from services.account_service import delete_account_data
from storage.in_memory_store import InMemoryDocumentStore


def run():
    store = InMemoryDocumentStore()
    store.set_document("users/smoke-user", {"name": "Smoke"})
    store.set_document("users/smoke-user/sessions/s1", {"n": 1})
    store.set_document("users/smoke-user/sessions/s1/events/e1", {"n": 2})
    print("[account_delete_smoke] documents before:", store.document_count())

    ctx = CallableContext(auth=AuthData(uid="smoke-user"))
    print("[account_delete_smoke] first:", delete_account_data(ctx, store=store))
    print("[account_delete_smoke] second:", delete_account_data(ctx, store=store))
    print("[account_delete_smoke] documents after:", store.document_count())


if __name__ == "__main__":
    run()
