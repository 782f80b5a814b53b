"""A queue built from two stacks and a stack built from one queue."""

from __future__ import annotations

from collections import deque


class QueueFromStacks:
    """First-in first-out queue backed by an inbox and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        self._inbox.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value. Raises IndexError when empty."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("dequeue from empty queue")
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class StackFromQueue:
    """Last-in first-out stack kept in a single queue, newest at the front."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, value: int) -> None:
        """Put ``value`` on top, rotating older items behind it."""
        self._queue.append(value)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top value. Raises IndexError when empty."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top value without removing it. Raises IndexError when empty."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)