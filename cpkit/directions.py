"""Grid movement offsets and neighbour generation."""

FOUR_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

EIGHT_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1), (0, 1),
    (0, -1), (1, 1), (1, -1), (1, 0),
)

KNIGHT_MOVES = (
    (-2, -1), (-1, -2), (1, -2), (2, -1),
    (-2, 1), (-1, 2), (1, 2), (2, 1),
)


def neighbours(x, y, moves=FOUR_DIRECTIONS):
    """Yield the cells reached from ``(x, y)`` by each offset in ``moves``."""
    for dx, dy in moves:
        yield x + dx, y + dy