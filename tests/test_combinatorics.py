import math

import pytest

from cpkit.combinatorics import (
    catalan_numbers,
    factorial_digit_count,
    max_non_attacking_kings,
    max_non_attacking_knights,
    max_non_attacking_queens,
    max_non_attacking_rooks,
    n_choose_r,
    nth_non_fibonacci,
)


def test_catalan_closed_form():
    values = catalan_numbers(15)
    assert len(values) == 16
    assert values[:2] == [1, 1]
    for n, c in enumerate(values):
        assert c == math.comb(2 * n, n) // (n + 1)


def test_catalan_negative():
    with pytest.raises(ValueError):
        catalan_numbers(-1)


def test_n_choose_r_pascal():
    for n in range(1, 25):
        for r in range(1, n):
            assert n_choose_r(n, r) == n_choose_r(n - 1, r - 1) + n_choose_r(n - 1, r)


def test_n_choose_r_edges_and_symmetry():
    assert n_choose_r(10, 0) == 1
    assert n_choose_r(10, 10) == 1
    assert n_choose_r(30, 7) == n_choose_r(30, 23)


@pytest.mark.parametrize("n,r", [(3, 4), (3, -1), (-1, 0)])
def test_n_choose_r_invalid(n, r):
    with pytest.raises(ValueError):
        n_choose_r(n, r)


def test_nth_non_fibonacci_sequence():
    fibs = {1, 2}
    a, b = 1, 2
    while b < 10000:
        a, b = b, a + b
        fibs.add(b)
    expected = [k for k in range(1, 5000) if k not in fibs]
    got = [nth_non_fibonacci(i) for i in range(1, len(expected) + 1)]
    assert got == expected


def test_nth_non_fibonacci_first():
    assert nth_non_fibonacci(1) == 4


def test_nth_non_fibonacci_invalid():
    with pytest.raises(ValueError):
        nth_non_fibonacci(0)


def test_factorial_digit_count_exact():
    for n in range(0, 300):
        assert factorial_digit_count(n) == len(str(math.factorial(n)))


def test_factorial_digit_count_negative():
    assert factorial_digit_count(-5) == 0


def test_rooks_and_queens():
    assert max_non_attacking_rooks(3, 5) == 3
    assert max_non_attacking_queens(8, 5) == 5


def test_knights_and_kings_on_chessboard():
    assert max_non_attacking_knights(8, 8) == 32
    assert max_non_attacking_kings(8, 8) == 16


@pytest.mark.parametrize("m,n", [(3, 7), (4, 9), (1, 6)])
def test_board_counts_symmetric(m, n):
    assert max_non_attacking_knights(m, n) == max_non_attacking_knights(n, m)
    assert max_non_attacking_kings(m, n) == max_non_attacking_kings(n, m)