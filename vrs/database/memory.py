"""In-process document database used by the ``memory://`` backend."""
from __future__ import annotations

from typing import Any, Dict

Document = Dict[str, Any]


class InMemoryDatabase:
    """Named set of collections, each a dict of document id -> document."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._collections: Dict[str, Dict[str, Document]] = {}

    def collection(self, name: str) -> Dict[str, Document]:
        return self._collections.setdefault(name, {})

    def clear(self) -> None:
        self._collections.clear()


_databases: Dict[str, InMemoryDatabase] = {}


def get_memory_database(name: str) -> InMemoryDatabase:
    """Return the process-wide database registered under ``name``."""
    db = _databases.get(name)
    if db is None:
        db = InMemoryDatabase(name)
        _databases[name] = db
    return db


def drop_memory_database(name: str) -> None:
    _databases.pop(name, None)
