"""A doubly linked list with sentinel head and tail nodes."""


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data=None, prev=None, next=None):
        self.data = data
        self.prev = prev
        self.next = next


class LinkedList:
    """A doubly linked sequence supporting insertion and removal at positions."""

    def __init__(self, items=()):
        self._head = _Node()
        self._tail = _Node(prev=self._head)
        self._head.next = self._tail
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._head.next
        while node is not self._tail:
            yield node.data
            node = node.next

    def __reversed__(self):
        node = self._tail.prev
        while node is not self._head:
            yield node.data
            node = node.prev

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index):
        if index <= self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - index):
                node = node.prev
        return node

    def _link_before(self, node, value):
        new = _Node(value, node.prev, node)
        node.prev.next = new
        node.prev = new
        self._size += 1

    def _unlink(self, node):
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def push_front(self, value):
        """Add ``value`` at the front."""
        self._link_before(self._head.next, value)

    def push_back(self, value):
        """Add ``value`` at the back."""
        self._link_before(self._tail, value)

    def _require_items(self):
        if not self._size:
            raise IndexError("list is empty")

    def pop_front(self):
        """Remove and return the first item."""
        self._require_items()
        return self._unlink(self._head.next)

    def pop_back(self):
        """Remove and return the last item."""
        self._require_items()
        return self._unlink(self._tail.prev)

    def front(self):
        """Return the first item."""
        self._require_items()
        return self._head.next.data

    def back(self):
        """Return the last item."""
        self._require_items()
        return self._tail.prev.data

    def insert(self, index, value):
        """Insert ``value`` before position ``index`` (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        self._link_before(self._node_at(index), value)

    def erase(self, start, stop=None):
        """Remove the items at positions ``start..stop-1``.

        Without ``stop`` only the item at ``start`` is removed.
        """
        if stop is None:
            if not 0 <= start < self._size:
                raise IndexError(f"index {start} out of range")
            stop = start + 1
        if not 0 <= start <= stop <= self._size:
            raise IndexError(f"range {start}..{stop} out of bounds")
        node = self._node_at(start)
        for _ in range(stop - start):
            following = node.next
            self._unlink(node)
            node = following

    def clear(self):
        """Remove every item."""
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0