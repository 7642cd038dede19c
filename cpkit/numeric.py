"""Root finding and the circle through three points."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    x: float
    y: float
    radius: float


def bisection(f, low=0.0, high=1.0, eps=1e-9):
    """Find a root of ``f`` in ``[low, high]`` by repeated halving."""
    while low + eps < high:
        mid = (low + high) / 2.0
        if f(mid) * f(low) <= 0:
            high = mid
        else:
            low = mid
    return (high + low) / 2.0


def secant(f, x0=0.0, x1=1.0, eps=1e-9):
    """Find a root of ``f`` by the secant method starting from x0 and x1."""
    if f(x0) == 0:
        return x0
    while True:
        f1, f0 = f(x1), f(x0)
        if f1 == f0:
            raise ValueError("secant step undefined: f(x0) == f(x1)")
        step = f1 * (x1 - x0) / (f1 - f0)
        if abs(step) < eps:
            return x1
        x0, x1 = x1, x1 - step


def circle_through_points(p1, p2, p3):
    """Return the circle through three points; collinear points raise ValueError."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    s1, s2, s3 = x1 * x1 + y1 * y1, x2 * x2 + y2 * y2, x3 * x3 + y3 * y3
    a = x1 * (y2 - y3) - y1 * (x2 - x3) + x2 * y3 - x3 * y2
    if a == 0:
        raise ValueError("points are collinear")
    b = s1 * (y3 - y2) + s2 * (y1 - y3) + s3 * (y2 - y1)
    c = s1 * (x2 - x3) + s2 * (x3 - x1) + s3 * (x1 - x2)
    d = s1 * (x3 * y2 - x2 * y3) + s2 * (x1 * y3 - x3 * y1) + s3 * (x2 * y1 - x1 * y2)
    radius = math.sqrt((b * b + c * c - 4 * a * d) / (4.0 * a * a))
    return Circle(-(b / (2.0 * a)), -(c / (2.0 * a)), radius)