"""Sequential search over any iterable."""


def linear_search(iterable, value):
    """Return the position of the first item equal to ``value``, or None."""
    return next((i for i, item in enumerate(iterable) if item == value), None)