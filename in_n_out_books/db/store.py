"""Record store abstraction.

Handlers talk to a ``RecordStore`` injected through ``app.state`` rather
than a module-level collection, so the in-memory implementation below can
be swapped for a real database or a fake in tests.
"""
import asyncio
import copy
from typing import Any, Dict, Iterable, List, Optional

Record = Dict[str, Any]


class RecordStore:
    """Interface every store must provide. Methods are async so I/O-bound backends fit."""

    async def find_all(self) -> List[Record]:
        raise NotImplementedError

    async def find_one(self, key: Any) -> Optional[Record]:
        raise NotImplementedError

    async def insert(self, record: Record) -> Record:
        raise NotImplementedError

    async def insert_with_next_id(self, record: Record) -> Record:
        raise NotImplementedError

    async def update_one(self, key: Any, changes: Record) -> int:
        raise NotImplementedError

    async def delete_one(self, key: Any) -> int:
        raise NotImplementedError


def next_id(records: Iterable[Record]) -> int:
    """Max existing id + 1, or 1 for an empty collection."""
    return max((int(r["id"]) for r in records), default=0) + 1


class InMemoryStore(RecordStore):
    """List-backed store keyed on one field (``id`` for books, ``email`` for users)."""

    def __init__(self, records: Optional[Iterable[Record]] = None, key_field: str = "id") -> None:
        self.key_field = key_field
        self._records: List[Record] = copy.deepcopy(list(records or []))
        self._lock = asyncio.Lock()

    def _index_of(self, key: Any) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.get(self.key_field) == key:
                return index
        return None

    async def find_all(self) -> List[Record]:
        return copy.deepcopy(self._records)

    async def find_one(self, key: Any) -> Optional[Record]:
        index = self._index_of(key)
        if index is None:
            return None
        return copy.deepcopy(self._records[index])

    async def insert(self, record: Record) -> Record:
        async with self._lock:
            key = record.get(self.key_field)
            if key is None or self._index_of(key) is not None:
                raise ValueError(f"Duplicate or missing {self.key_field}: {key!r}")
            self._records.append(dict(record))
        return copy.deepcopy(record)

    async def insert_with_next_id(self, record: Record) -> Record:
        # Reading the max id and appending must not interleave with another create
        async with self._lock:
            created = {**record, "id": next_id(self._records)}
            self._records.append(created)
        return copy.deepcopy(created)

    async def update_one(self, key: Any, changes: Record) -> int:
        async with self._lock:
            index = self._index_of(key)
            if index is None:
                return 0
            self._records[index].update(changes)
            return 1

    async def delete_one(self, key: Any) -> int:
        async with self._lock:
            index = self._index_of(key)
            if index is None:
                return 0
            del self._records[index]
            return 1
