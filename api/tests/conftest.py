import os
import sys

import pytest

# Ensure api/ is on sys.path so imports like "services.*" work in tests.
API_DIR = os.path.dirname(os.path.dirname(__file__))
if API_DIR not in sys.path:
    sys.path.insert(0, API_DIR)

from storage import store_factory  # noqa: E402
from storage.in_memory_store import InMemoryDocumentStore  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_store():
    store_factory.reset_document_store()
    yield
    store_factory.reset_document_store()


@pytest.fixture
def memory_store():
    store = InMemoryDocumentStore()
    store.set_document("users/abc123", {"name": "Ada"})
    store.set_document("users/abc123/notes/n1", {"text": "hello"})
    store.set_document("users/abc123/notes/n1/attachments/a1", {"size": 3})
    store.set_document("users/abc123/settings/prefs", {"theme": "dark"})
    store.set_document("users/other", {"name": "Bob"})
    store.set_document("users/other/notes/n9", {"text": "keep"})
    return store
