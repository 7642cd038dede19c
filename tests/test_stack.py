import pytest

from cpkit.stack import Stack


def test_lifo_order():
    stack = Stack()
    items = ["a", "b", "c", "d"]
    for item in items:
        stack.push(item)
    assert len(stack) == len(items)
    popped = [stack.pop() for _ in items]
    assert popped == items[::-1]
    assert stack.is_empty()


def test_top_does_not_remove():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert len(stack) == 2
    assert not stack.is_empty()


def test_empty_errors():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()