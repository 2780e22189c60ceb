from __future__ import annotations

from threading import Lock


class IdGenerator:
    """Monotonic id source. Ids are never reused or handed out twice."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("id generator must start at 1 or above")
        self._next = start
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        with self._lock:
            return self._next

    def reset(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("id generator must start at 1 or above")
        with self._lock:
            self._next = start


default_ids = IdGenerator()
