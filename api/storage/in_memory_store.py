from __future__ import annotations

import copy
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple

from storage.document_store import is_document_path, split_path


class _Node:
    """A document slot. `data` is None for a document that only has children."""

    __slots__ = ("data", "collections")

    def __init__(self) -> None:
        self.data: Optional[Dict[str, Any]] = None
        self.collections: Dict[str, Dict[str, "_Node"]] = {}

    def count(self) -> int:
        own = 1 if self.data is not None else 0
        return own + sum(child.count() for coll in self.collections.values() for child in coll.values())


class InMemoryDocumentStore:
    """
    Hierarchical document store held in process memory.
    Paths alternate collection/document segments: "users/u1/notes/n1".
    """

    name = "memory"

    def __init__(self) -> None:
        self._lock = Lock()
        self._root: Dict[str, Dict[str, _Node]] = {}

    def _walk(self, parts: List[str], create: bool) -> Optional[_Node]:
        collections = self._root
        node: Optional[_Node] = None
        for i in range(0, len(parts), 2):
            coll_name, doc_id = parts[i], parts[i + 1]
            coll = collections.get(coll_name)
            if coll is None:
                if not create:
                    return None
                coll = collections[coll_name] = {}
            node = coll.get(doc_id)
            if node is None:
                if not create:
                    return None
                node = coll[doc_id] = _Node()
            collections = node.collections
        return node

    @staticmethod
    def _document_parts(path: str) -> List[str]:
        if not is_document_path(path):
            raise ValueError(f"Not a document path: {path}")
        return split_path(path)

    def set_document(self, path: str, data: Dict[str, Any]) -> None:
        parts = self._document_parts(path)
        with self._lock:
            node = self._walk(parts, create=True)
            node.data = copy.deepcopy(data)

    def get_document(self, path: str) -> Optional[Dict[str, Any]]:
        parts = self._document_parts(path)
        with self._lock:
            node = self._walk(parts, create=False)
            if node is None or node.data is None:
                return None
            return copy.deepcopy(node.data)

    def list_documents(self, collection_path: str) -> List[str]:
        """Ids of documents directly under a collection, including data-less parents."""
        parts = split_path(collection_path)
        if len(parts) % 2 != 1:
            raise ValueError(f"Not a collection path: {collection_path}")
        with self._lock:
            if len(parts) == 1:
                coll = self._root.get(parts[0], {})
            else:
                parent = self._walk(parts[:-1], create=False)
                coll = parent.collections.get(parts[-1], {}) if parent else {}
            return sorted(coll)

    def document_count(self) -> int:
        with self._lock:
            return sum(node.count() for coll in self._root.values() for node in coll.values())

    def recursive_delete(self, path: str) -> int:
        parts = self._document_parts(path)
        with self._lock:
            container, doc_id = self._container_of(parts)
            if container is None or doc_id not in container:
                return 0
            node = container.pop(doc_id)
            self._prune(parts[:-1])
            return node.count()

    def _container_of(self, parts: List[str]) -> Tuple[Optional[Dict[str, _Node]], str]:
        if len(parts) == 2:
            return self._root.get(parts[0]), parts[1]
        parent = self._walk(parts[:-2], create=False)
        if parent is None:
            return None, parts[-1]
        return parent.collections.get(parts[-2]), parts[-1]

    def _prune(self, coll_parts: List[str]) -> None:
        # Drop an emptied collection so list_documents stays consistent with Firestore.
        if len(coll_parts) == 1:
            if not self._root.get(coll_parts[0]):
                self._root.pop(coll_parts[0], None)
            return
        parent = self._walk(coll_parts[:-1], create=False)
        if parent is not None and not parent.collections.get(coll_parts[-1]):
            parent.collections.pop(coll_parts[-1], None)
