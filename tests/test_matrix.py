import pytest

from cpkit.matrix import Matrix, matrix_power


def _fib_matrix(modulus=10**9 + 7):
    m = Matrix(2, modulus)
    m.rows = [[1, 1], [1, 0]]
    return m


def test_identity_str():
    assert str(Matrix.identity(2)) == "1 0 \n0 1 \n"


def test_power_matches_repeated_product():
    m = _fib_matrix()
    expected = Matrix.identity(2)
    for _ in range(12):
        expected = expected * m
    assert (m**12).rows == expected.rows


def test_power_gives_fibonacci_relation():
    rows = matrix_power(_fib_matrix(), 30).rows
    assert rows[0][0] == rows[0][1] + rows[1][1]
    assert rows[0][1] == rows[1][0]


def test_matrix_power_does_not_mutate():
    m = _fib_matrix()
    matrix_power(m, 5)
    assert m.rows == [[1, 1], [1, 0]]


def test_power_zero_is_identity():
    assert (_fib_matrix() ** 0).rows == Matrix.identity(2).rows


def test_imul_matches_mul():
    a = _fib_matrix()
    b = _fib_matrix()
    product = a * b
    a *= b
    assert a.rows == product.rows


def test_entries_reduced():
    m = _fib_matrix(modulus=97)
    result = m**50
    assert all(0 <= v < 97 for row in result.rows for v in row)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2) * Matrix(3)


def test_negative_exponent_raises():
    with pytest.raises(ValueError):
        _fib_matrix() ** -1