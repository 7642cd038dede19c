"""Segment trees: range queries with point assignment, and range addition."""

import operator


class SegmentTree:
    """Range queries under an associative ``combine`` with point assignment.

    Positions are numbered from 0. ``identity`` is returned for empty ranges
    and must leave any value unchanged when combined with it.
    """

    def __init__(self, values=(), combine=operator.add, identity=0):
        self._values = list(values)
        self._combine = combine
        self._identity = identity
        self._n = len(self._values)
        self._tree = [identity] * (4 * max(self._n, 1))
        if self._n:
            self._build(1, 0, self._n - 1)

    def __len__(self):
        return self._n

    def _build(self, node, lo, hi):
        if lo == hi:
            self._tree[node] = self._values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid)
        self._build(2 * node + 1, mid + 1, hi)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def _check(self, pos):
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} out of range")

    def query(self, start, end):
        """Combine the values at positions ``start..end`` inclusive.

        An empty range (``start > end``) yields the identity.
        """
        if start > end:
            return self._identity
        self._check(start)
        self._check(end)
        return self._query(1, 0, self._n - 1, start, end)

    def _query(self, node, lo, hi, start, end):
        if start > hi or end < lo:
            return self._identity
        if start <= lo and hi <= end:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node, lo, mid, start, end),
            self._query(2 * node + 1, mid + 1, hi, start, end),
        )

    def update(self, pos, value):
        """Set the value at position ``pos``."""
        self._check(pos)
        self._values[pos] = value
        self._update(1, 0, self._n - 1, pos, value)

    def _update(self, node, lo, hi, pos, value):
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if pos <= mid:
            self._update(2 * node, lo, mid, pos, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, pos, value)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])


class RangeAddTree:
    """Add a value to every position of a range; read single positions.

    Additions are kept lazily on the nodes covering the range, and a point
    read sums the pending additions along the path to its leaf.
    """

    def __init__(self, values=()):
        self._values = list(values)
        self._n = len(self._values)
        self._lazy = [0] * (4 * max(self._n, 1))

    def __len__(self):
        return self._n

    def _check(self, pos):
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} out of range")

    def add(self, start, end, value):
        """Add ``value`` to every position in ``start..end`` inclusive."""
        if start > end:
            return
        self._check(start)
        self._check(end)
        self._add(1, 0, self._n - 1, start, end, value)

    def _add(self, node, lo, hi, start, end, value):
        if start > hi or end < lo:
            return
        if start <= lo and hi <= end:
            self._lazy[node] += value
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, start, end, value)
        self._add(2 * node + 1, mid + 1, hi, start, end, value)

    def get(self, pos):
        """Return the current value at position ``pos``."""
        self._check(pos)
        total = self._values[pos]
        node, lo, hi = 1, 0, self._n - 1
        while True:
            total += self._lazy[node]
            if lo == hi:
                return total
            mid = (lo + hi) // 2
            if pos <= mid:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1