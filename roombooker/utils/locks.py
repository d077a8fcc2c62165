from contextlib import contextmanager
from threading import Lock
from typing import Tuple
from weakref import WeakValueDictionary


class SlotLocks:
    """
    One lock per (room, date) so overlap counting and the write happen together.

    Entries are weak: a lock disappears once no request holds it, so the map
    only contains slots that are being written right now.
    """

    def __init__(self) -> None:
        self._guard = Lock()
        self._locks: "WeakValueDictionary[Tuple[int, str], Lock]" = WeakValueDictionary()

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def get(self, room_id: int, date: str) -> Lock:
        with self._guard:
            lock = self._locks.get((room_id, date))
            if lock is None:
                lock = Lock()
                self._locks[(room_id, date)] = lock
            return lock

    @contextmanager
    def hold(self, room_id: int, date: str):
        lock = self.get(room_id, date)
        with lock:
            yield
