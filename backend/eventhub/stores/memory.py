"""
In-memory implementation of the DirectoryStore.

Each collection is an insertion-ordered dict keyed by id. A single RLock guards
every primitive so the store can be shared by the HTTP worker threads. It does
NOT make multi-step operations atomic: callers that read then write (capacity
checks) serialise themselves with EventLocks.
"""

import dataclasses
import threading
from typing import Any, Optional

from eventhub.core.logging import get_logger
from eventhub.stores.interfaces import Collection, DirectoryStore, Predicate, Record

logger = get_logger(__name__)


class InMemoryDirectoryStore(DirectoryStore):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._collections: dict[Collection, dict[str, Any]] = {c: {} for c in Collection}
        self._sequences: dict[Collection, int] = {c: 0 for c in Collection}

    def next_id(self, collection: Collection) -> str:
        with self._lock:
            records = self._collections[collection]
            seq = self._sequences[collection] + 1
            # Seeded records may already use small numeric ids
            while str(seq) in records:
                seq += 1
            self._sequences[collection] = seq
            return str(seq)

    def insert(self, collection: Collection, record: Record) -> Record:
        with self._lock:
            records = self._collections[collection]
            if record.id in records:
                raise ValueError(f"Duplicate id {record.id!r} in {collection.value}")
            records[record.id] = record
        logger.debug("store_insert", collection=collection.value, record_id=record.id)
        return record

    def find_by_id(self, collection: Collection, record_id: str) -> Optional[Any]:
        with self._lock:
            return self._collections[collection].get(record_id)

    def find_all(self, collection: Collection, predicate: Optional[Predicate] = None) -> list:
        with self._lock:
            records = list(self._collections[collection].values())
        if predicate is None:
            return records
        return [r for r in records if predicate(r)]

    def update_by_id(self, collection: Collection, record_id: str, patch: dict) -> Optional[Any]:
        with self._lock:
            records = self._collections[collection]
            current = records.get(record_id)
            if current is None:
                return None
            if "id" in patch and patch["id"] != record_id:
                raise ValueError("Record id cannot be changed")
            updated = dataclasses.replace(current, **patch)
            records[record_id] = updated
        logger.debug(
            "store_update",
            collection=collection.value,
            record_id=record_id,
            fields=sorted(patch),
        )
        return updated

    def remove_by_id(self, collection: Collection, record_id: str) -> bool:
        with self._lock:
            removed = self._collections[collection].pop(record_id, None)
        if removed is not None:
            logger.debug("store_remove", collection=collection.value, record_id=record_id)
        return removed is not None
