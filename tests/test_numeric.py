import math

import pytest

from cpkit.numeric import Circle, bisection, circle_through_points, secant


def test_bisection_linear():
    assert bisection(lambda x: x - 0.3) == pytest.approx(0.3, abs=1e-8)


def test_bisection_custom_interval():
    root = bisection(lambda x: x * x - 2, 0.0, 2.0)
    assert root == pytest.approx(math.sqrt(2), abs=1e-8)


def test_secant_sqrt_two():
    root = secant(lambda x: x * x - 2)
    assert root == pytest.approx(math.sqrt(2), abs=1e-8)


def test_secant_root_at_start():
    assert secant(lambda x: x * (x - 5)) == 0.0


def test_secant_flat_function_raises():
    with pytest.raises(ValueError):
        secant(lambda x: 1.0)


@pytest.mark.parametrize(
    "points",
    [
        ((1, 0), (0, 1), (-1, 0)),
        ((4, 4), (3, 5), (2, 4)),
        ((0, 0), (6, 1), (2, -7)),
    ],
)
def test_circle_passes_through_points(points):
    circle = circle_through_points(*points)
    for px, py in points:
        assert math.hypot(px - circle.x, py - circle.y) == pytest.approx(circle.radius)


def test_unit_circle():
    circle = circle_through_points((1, 0), (0, 1), (-1, 0))
    assert circle == Circle(0.0, 0.0, 1.0)


def test_collinear_points_raise():
    with pytest.raises(ValueError):
        circle_through_points((0, 0), (1, 1), (2, 2))