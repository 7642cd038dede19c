"""Convex hull by gift wrapping, keeping collinear boundary points."""


def _cross(a, b, c):
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _squared_distance(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _closer(a, b, c):
    to_b, to_c = _squared_distance(a, b), _squared_distance(a, c)
    if to_b == to_c:
        return a
    return c if to_b > to_c else b


def convex_hull(points):
    """Return the points on the convex hull boundary, sorted.

    Points lying on a hull edge are included as well as the corners.
    """
    pts = [tuple(p) for p in points]
    if not pts:
        raise ValueError("no points given")
    start = min(pts, key=lambda p: p[0])
    hull = {start}
    current = start
    while True:
        target = pts[0]
        collinear = []
        for p in pts:
            if p == current:
                continue
            turn = _cross(current, target, p)
            if turn > 0:
                target = p
                collinear.clear()
            elif turn == 0:
                if _closer(current, target, p) == target:
                    collinear.append(target)
                    target = p
                else:
                    collinear.append(p)
        hull.update(collinear)
        if target == start:
            break
        hull.add(target)
        current = target
    return sorted(hull)