"""A last-in, first-out stack."""


class Stack:
    """A LIFO stack; ``pop`` and ``top`` raise IndexError when it is empty."""

    def __init__(self):
        self._items = []

    def push(self, item):
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self):
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self):
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self):
        """Return True if the stack holds no items."""
        return not self._items

    def __len__(self):
        return len(self._items)