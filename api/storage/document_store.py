from __future__ import annotations

from typing import List, Protocol

from config import USERS_COLLECTION


class DocumentStore(Protocol):
    name: str

    def recursive_delete(self, path: str) -> int:
        """Deletes the document at `path` and everything nested beneath it."""
        ...


def user_record_path(uid: str) -> str:
    return f"{USERS_COLLECTION}/{uid}"


def split_path(path: str) -> List[str]:
    parts = [p for p in (path or "").split("/") if p]
    if not parts:
        raise ValueError("Empty document path")
    return parts


def is_document_path(path: str) -> bool:
    return len(split_path(path)) % 2 == 0
