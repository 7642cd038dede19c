"""Disjoint-set union with path compression."""


class DisjointSet:
    """Disjoint sets over the nodes ``0..size-1``, each starting alone."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))

    def _check(self, node):
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} out of range")

    def find(self, node):
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a, b):
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True