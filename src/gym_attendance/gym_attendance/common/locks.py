from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from ..core.exceptions import LockTimeout


class MemberLocks:
    """Per-member mutual exclusion for the read-then-write attendance toggle.

    Locks are created on first use and kept for the process lifetime; the set of
    members in a gym is small.
    """

    def __init__(self, timeout: float):
        self._timeout = float(timeout)
        self._locks: Dict[int, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, member_id: int) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(member_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[member_id] = lock
            return lock

    @contextmanager
    def hold(self, member_id: int) -> Iterator[None]:
        lock = self._lock_for(int(member_id))
        if not lock.acquire(timeout=self._timeout):
            raise LockTimeout(f"Tiempo de espera agotado para el socio {member_id}")
        try:
            yield
        finally:
            lock.release()
