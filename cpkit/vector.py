"""A growable array with explicit capacity management."""


class Vector:
    """A dynamic array that keeps spare capacity and doubles when full.

    New slots created by ``resize`` hold the ``default`` given at creation.
    """

    SPARE_CAPACITY = 16

    def __init__(self, size=0, default=None):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._fill = default
        self._size = size
        self._data = [default] * size + [None] * self.SPARE_CAPACITY

    def capacity(self):
        """Return how many items fit before the storage must grow."""
        return len(self._data)

    def reserve(self, new_capacity):
        """Set the capacity; requests below the current size are ignored."""
        if new_capacity < self._size:
            return
        self._data = self._data[: self._size] + [None] * (new_capacity - self._size)

    def resize(self, new_size):
        """Change the size, growing storage to twice the size if needed."""
        if new_size < 0:
            raise ValueError("size must be non-negative")
        if new_size > self.capacity():
            self.reserve(new_size * 2)
        if new_size > self._size:
            self._data[self._size : new_size] = [self._fill] * (new_size - self._size)
        else:
            self._data[new_size : self._size] = [None] * (self._size - new_size)
        self._size = new_size

    def assign(self, new_size, default=0):
        """Replace the contents with ``new_size`` copies of ``default``."""
        if new_size < 0:
            raise ValueError("size must be non-negative")
        if new_size > self.capacity():
            self._data = [None] * (new_size * 2)
        else:
            self._data[new_size:] = [None] * (len(self._data) - new_size)
        self._data[:new_size] = [default] * new_size
        self._size = new_size

    def _index(self, index):
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("vector index out of range")
        return index

    def __getitem__(self, index):
        return self._data[self._index(index)]

    def __setitem__(self, index, value):
        self._data[self._index(index)] = value

    def __len__(self):
        return self._size

    def __iter__(self):
        for i in range(self._size):
            yield self._data[i]

    def __repr__(self):
        return f"Vector({list(self)!r})"

    def push_back(self, value):
        """Append ``value``, growing capacity to ``2 * capacity + 1`` when full."""
        if self._size == self.capacity():
            self.reserve(2 * self.capacity() + 1)
        self._data[self._size] = value
        self._size += 1

    def pop_back(self):
        """Remove and return the last item."""
        if not self._size:
            raise IndexError("pop from empty vector")
        self._size -= 1
        value = self._data[self._size]
        self._data[self._size] = None
        return value

    def back(self):
        """Return the last item."""
        if not self._size:
            raise IndexError("back of empty vector")
        return self._data[self._size - 1]