"""A first-in, first-out queue of enclave tasks."""

from __future__ import annotations

from collections import deque


class Scheduler:
    """Holds submitted tasks and hands them out in submission order."""

    def __init__(self) -> None:
        self._queue: deque[bytes] = deque()

    def submit(self, task: bytes) -> None:
        """Add a task to the back of the queue."""
        self._queue.append(bytes(task))

    def next(self) -> bytes | None:
        """Remove and return the oldest task, or None if the queue is empty."""
        if not self._queue:
            return None
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)