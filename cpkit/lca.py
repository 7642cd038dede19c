"""Lowest common ancestors in rooted forests, by climbing and by sqrt jumps."""

from collections.abc import Mapping

_DONE = object()


def _children_map(adjacency):
    if isinstance(adjacency, Mapping):
        return {node: list(kids) for node, kids in adjacency.items()}
    return {node: list(kids) for node, kids in enumerate(adjacency)}


class RootedForest:
    """A forest built from child lists, answering LCA queries by climbing.

    ``adjacency`` maps each node to its children, either as a mapping or as a
    sequence indexed by node. Nodes are visited depth-first in the order they
    are listed; a node not yet reached becomes the root of a new tree.
    """

    def __init__(self, adjacency):
        children = _children_map(adjacency)
        self.parent = {}
        self.depth = {}
        self._order = []
        for root in children:
            if root not in self.depth:
                self._visit(root, children)

    def _visit(self, root, children):
        self.parent[root] = None
        self.depth[root] = 0
        self._order.append(root)
        path = [root]
        stack = [iter(children.get(root, ()))]
        while stack:
            child = next(stack[-1], _DONE)
            if child is _DONE:
                stack.pop()
                path.pop()
                continue
            if child in self.depth:
                continue
            self.parent[child] = path[-1]
            self.depth[child] = self.depth[path[-1]] + 1
            self._order.append(child)
            path.append(child)
            stack.append(iter(children.get(child, ())))

    def _check(self, *nodes):
        for node in nodes:
            if node not in self.depth:
                raise ValueError(f"unknown node {node!r}")

    def _climb(self, u, v):
        while u != v:
            du, dv = self.depth[u], self.depth[v]
            if du > dv:
                u = self.parent[u]
            elif dv > du:
                v = self.parent[v]
            else:
                u, v = self.parent[u], self.parent[v]
            if u is None or v is None:
                raise ValueError("nodes lie in different trees")
        return u

    def lca(self, u, v):
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u, v)
        return self._climb(u, v)


class SqrtForest(RootedForest):
    """A rooted forest that skips whole blocks of depth before climbing."""

    def __init__(self, adjacency, block_size=40):
        if block_size < 1:
            raise ValueError("block_size must be positive")
        super().__init__(adjacency)
        self.block_size = block_size
        self._jump = {}
        for node in self._order:
            parent = self.parent[node]
            if self.depth[node] % block_size == 0 or parent is None:
                self._jump[node] = parent
            else:
                self._jump[node] = self._jump[parent]

    def lca(self, u, v):
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u, v)
        while self._jump[u] != self._jump[v]:
            du, dv = self.depth[u], self.depth[v]
            if du > dv:
                u = self._jump[u]
            elif dv > du:
                v = self._jump[v]
            else:
                u, v = self._jump[u], self._jump[v]
            if u is None or v is None:
                raise ValueError("nodes lie in different trees")
        return self._climb(u, v)