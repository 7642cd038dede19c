"""A first-in, first-out queue."""

from collections import deque


class Queue:
    """A FIFO queue; ``pop`` and ``front`` raise IndexError when it is empty."""

    def __init__(self):
        self._items = deque()

    def push(self, item):
        """Add ``item`` at the back."""
        self._items.append(item)

    def pop(self):
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self):
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def is_empty(self):
        """Return True if the queue holds no items."""
        return not self._items

    def __len__(self):
        return len(self._items)