"""A Fenwick (binary indexed) tree for point updates and prefix sums."""


class FenwickTree:
    """Prefix sums over positions ``0..size-1``, all starting at zero."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def update(self, index, value):
        """Add ``value`` to the entry at position ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        i = index + 1
        while i <= self._size:
            self._tree[i] += value
            i += i & -i

    def query(self, index):
        """Return the sum of the entries at positions ``0..index-1``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total