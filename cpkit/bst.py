"""An unbalanced binary search tree with an optional ordering key."""

from cpkit.avl import EmptyTreeError


class _Node:
    __slots__ = ("element", "left", "right")

    def __init__(self, element):
        self.element = element
        self.left = None
        self.right = None


class BinarySearchTree:
    """A binary search tree ordered by ``key(item)``; duplicates are ignored."""

    def __init__(self, items=(), key=None):
        self._key = key
        self._root = None
        for item in items:
            self.insert(item)

    def _less(self, a, b):
        if self._key is None:
            return a < b
        return self._key(a) < self._key(b)

    def insert(self, x):
        """Insert ``x``; nothing happens if an equivalent item is present."""
        if self._root is None:
            self._root = _Node(x)
            return
        node = self._root
        while True:
            if self._less(x, node.element):
                if node.left is None:
                    node.left = _Node(x)
                    return
                node = node.left
            elif self._less(node.element, x):
                if node.right is None:
                    node.right = _Node(x)
                    return
                node = node.right
            else:
                return

    def remove(self, x):
        """Remove the item equivalent to ``x``; nothing happens if absent."""
        parent = None
        node = self._root
        while node is not None:
            if self._less(x, node.element):
                parent, node = node, node.left
            elif self._less(node.element, x):
                parent, node = node, node.right
            else:
                break
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.element = successor.element
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, x):
        node = self._root
        while node is not None:
            if self._less(x, node.element):
                node = node.left
            elif self._less(node.element, x):
                node = node.right
            else:
                return True
        return False

    def find_min(self):
        """Return the smallest item; raise EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.element

    def find_max(self):
        """Return the largest item; raise EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.element

    def is_empty(self):
        """Return True if the tree holds no items."""
        return self._root is None

    def clear(self):
        """Remove every item."""
        self._root = None

    def _preorder(self):
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.element
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def copy(self):
        """Return an independent copy with the same shape and key."""
        return BinarySearchTree(self._preorder(), key=self._key)

    def __iter__(self):
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right