"""
Per-event serialisation for check-then-act sequences.

Problem:
  Two requests book the last tickets of an event at the same time.
  Both read committed=capacity-1, both pass the check, both insert.
  Result: Overbooking.

Solution:
  Every operation that reads an event's committed tickets and then writes
  (create booking, cancel booking, change capacity) holds that event's lock
  for the whole sequence. Operations on different events never contend.

This only serialises callers inside one process. A database-backed store
would instead run the same sequence in one transaction.

Locks are held weakly: an entry lives only while some caller holds or waits
on it, so ids that are never booked again (deleted or unknown events) do not
accumulate.
"""

import threading
import weakref
from contextlib import contextmanager
from typing import Iterator


class EventLocks:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()

    def _lock_for(self, event_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(event_id)
            if lock is None:
                lock = self._locks[event_id] = threading.Lock()
            return lock

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, event_id: str) -> Iterator[None]:
        lock = self._lock_for(event_id)
        with lock:
            yield
