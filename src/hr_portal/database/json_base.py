from __future__ import annotations

import uuid
from typing import Any, Callable, Dict, List, Optional

from .connection import JsonDocumentStore

Row = Dict[str, Any]


def new_id() -> str:
    return str(uuid.uuid4())


def find_one(rows: List[Row], predicate: Callable[[Row], bool]) -> Optional[Row]:
    for row in rows:
        if predicate(row):
            return row
    return None


def find_all(rows: List[Row], predicate: Callable[[Row], bool]) -> List[Row]:
    return [row for row in rows if predicate(row)]


class JsonRepositoryBase:
    """Shared plumbing for repositories backed by one document collection."""

    collection: str = ""

    def __init__(self, store: JsonDocumentStore):
        self._store = store

    def _rows(self, doc: dict) -> List[Row]:
        return doc.setdefault(self.collection, [])
