"""
Per-room locking for approvals.

approve() reads every reservation, checks for conflicts and then writes. Two approvals for
the same room running side by side can both pass the check before either writes. Holding
the room's lock across that sequence closes the gap inside a single process; it does not
coordinate separate worker processes.
"""
from __future__ import annotations

import threading
from contextlib import AbstractContextManager


class RoomLockRegistry:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def for_room(self, room_id: int) -> AbstractContextManager:
        """
        Return the lock for room_id, creating it on first use.

        Usage:
            with registry.for_room(reservation.room_id):
                ...check and write...
        """
        with self._guard:
            lock = self._locks.get(room_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[room_id] = lock
            return lock


room_locks = RoomLockRegistry()
