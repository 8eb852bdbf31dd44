from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class JsonDocumentStore:
    """The whole entity set kept as one JSON document.

    Writers are serialized by a re-entrant lock: a transaction loads the document,
    hands it to the caller for in-place mutation and writes it back only when the
    outermost transaction exits cleanly. Nested transactions (e.g. a service calling
    several repositories) share the same document, so a multi-collection update is
    written all-or-nothing.

    `path=None` keeps the document in memory (tests, throwaway runs).
    """

    def __init__(
        self,
        path: Optional[str | Path],
        *,
        migrate: Optional[Callable[[Document], bool]] = None,
    ):
        self._path = Path(path) if path else None
        self._memory: Document = {}
        self._lock = threading.RLock()
        self._depth = 0
        self._current: Optional[Document] = None
        if migrate is None:
            from .migrations import apply_migrations

            migrate = apply_migrations
        self._migrate = migrate

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self._current
                finally:
                    self._depth -= 1
                return

            doc = self._load()
            self._current = doc
            self._depth = 1
            try:
                yield doc
                self._write(doc)
            finally:
                self._depth = 0
                self._current = None

    @contextmanager
    def read(self) -> Iterator[Document]:
        """Read-only view; inside a transaction this is the transaction's document."""
        with self._lock:
            if self._depth:
                yield self._current
                return
            yield self._load()

    def _load(self) -> Document:
        if self._path is None:
            doc = copy.deepcopy(self._memory)
        elif not self._path.exists():
            doc = {}
        else:
            try:
                with self._path.open("r", encoding="utf-8") as f:
                    doc = json.load(f)
            except (OSError, ValueError) as e:
                logger.error("Failed to read document store %s: %s", self._path, e)
                raise PersistenceError(f"Could not read data file {self._path}") from e
            if not isinstance(doc, dict):
                raise PersistenceError(f"Data file {self._path} does not hold a JSON object")

        if self._migrate(doc):
            self._write(doc)
        return doc

    def _write(self, doc: Document) -> None:
        if self._path is None:
            self._memory = copy.deepcopy(doc)
            return

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".db-", suffix=".json", dir=str(self._path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(doc, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.error("Failed to write document store %s: %s", self._path, e)
            raise PersistenceError(f"Could not write data file {self._path}") from e
