"""A self-balancing AVL search tree holding unique, ordered items."""

_ALLOWED_IMBALANCE = 1


class EmptyTreeError(LookupError):
    """Raised when the smallest or largest item of an empty tree is requested."""


class _Node:
    __slots__ = ("element", "left", "right", "height")

    def __init__(self, element, left=None, right=None, height=0):
        self.element = element
        self.left = left
        self.right = right
        self.height = height


def _height(node):
    return -1 if node is None else node.height


def _update_height(node):
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_with_left_child(k2):
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    _update_height(k2)
    _update_height(k1)
    return k1


def _rotate_with_right_child(k1):
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    _update_height(k1)
    _update_height(k2)
    return k2


def _double_with_left_child(k3):
    k3.left = _rotate_with_right_child(k3.left)
    return _rotate_with_left_child(k3)


def _double_with_right_child(k1):
    k1.right = _rotate_with_left_child(k1.right)
    return _rotate_with_right_child(k1)


def _balance(node):
    if node is None:
        return None
    if _height(node.left) - _height(node.right) > _ALLOWED_IMBALANCE:
        if _height(node.left.left) >= _height(node.left.right):
            node = _rotate_with_left_child(node)
        else:
            node = _double_with_left_child(node)
    elif _height(node.right) - _height(node.left) > _ALLOWED_IMBALANCE:
        if _height(node.right.right) >= _height(node.right.left):
            node = _rotate_with_right_child(node)
        else:
            node = _double_with_right_child(node)
    _update_height(node)
    return node


def _insert(x, node):
    if node is None:
        return _Node(x)
    if x < node.element:
        node.left = _insert(x, node.left)
    elif node.element < x:
        node.right = _insert(x, node.right)
    return _balance(node)


def _leftmost(node):
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node):
    while node.right is not None:
        node = node.right
    return node


def _remove(x, node):
    if node is None:
        return None
    if x < node.element:
        node.left = _remove(x, node.left)
    elif node.element < x:
        node.right = _remove(x, node.right)
    elif node.left is not None and node.right is not None:
        node.element = _leftmost(node.right).element
        node.right = _remove(node.element, node.right)
    else:
        node = node.left if node.left is not None else node.right
    return _balance(node)


def _clone(node):
    if node is None:
        return None
    return _Node(node.element, _clone(node.left), _clone(node.right), node.height)


class AVLTree:
    """An AVL tree; duplicates are ignored and iteration is in sorted order."""

    def __init__(self, items=()):
        self._root = None
        for item in items:
            self.insert(item)

    def insert(self, x):
        """Insert ``x``; nothing happens if an equal item is present."""
        self._root = _insert(x, self._root)

    def remove(self, x):
        """Remove ``x``; nothing happens if it is absent."""
        self._root = _remove(x, self._root)

    def __contains__(self, x):
        node = self._root
        while node is not None:
            if x < node.element:
                node = node.left
            elif node.element < x:
                node = node.right
            else:
                return True
        return False

    def find_min(self):
        """Return the smallest item; raise EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("tree is empty")
        return _leftmost(self._root).element

    def find_max(self):
        """Return the largest item; raise EmptyTreeError if the tree is empty."""
        if self._root is None:
            raise EmptyTreeError("tree is empty")
        return _rightmost(self._root).element

    def is_empty(self):
        """Return True if the tree holds no items."""
        return self._root is None

    def clear(self):
        """Remove every item."""
        self._root = None

    def copy(self):
        """Return an independent deep copy of the tree."""
        result = AVLTree()
        result._root = _clone(self._root)
        return result

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

    def height(self):
        """Return the height of the tree: -1 when empty, 0 for a single item."""
        return _height(self._root)