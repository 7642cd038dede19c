"""Modular arithmetic helpers for a fixed or user-supplied modulus."""

from itertools import accumulate

MOD = 10**9 + 7
MAXN = 10**5 + 100
MAXM = 10**5 + 100


def mod_pow(a, b, modulus=MOD):
    """Return ``a ** b`` reduced modulo ``modulus`` by binary exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    a %= modulus
    while b:
        if b & 1:
            result = result * a % modulus
        a = a * a % modulus
        b >>= 1
    return result


def mod_inverse(a, modulus=MOD):
    """Return the multiplicative inverse of ``a`` modulo ``modulus``.

    A modulus of 1 yields 0. Raises ValueError when no inverse exists.
    """
    if modulus == 1:
        return 0
    try:
        return pow(a, -1, modulus)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {modulus}") from None


def mod_add(a, b):
    """Return ``(a + b) mod MOD`` as a non-negative residue."""
    return (a % MOD + b % MOD) % MOD


def mod_sub(a, b):
    """Return ``(a - b) mod MOD`` as a non-negative residue."""
    return (a % MOD - b % MOD) % MOD


def mod_mul(a, b):
    """Return ``(a * b) mod MOD`` as a non-negative residue."""
    return (a % MOD) * (b % MOD) % MOD


def mod_div(a, b):
    """Return ``a / b`` modulo MOD, using the inverse of ``b``."""
    return mod_mul(a, mod_inverse(b % MOD, MOD))


def inverse_table(n, modulus=MOD):
    """Return inverses of 0..n modulo a prime ``modulus`` in linear time.

    Entry 0 holds 1, as do entries for 1; every other entry i satisfies
    ``i * table[i] % modulus == 1``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if modulus <= n:
        raise ValueError("modulus must exceed n")
    table = [1] * (n + 1)
    for i in range(2, n + 1):
        table[i] = table[modulus % i] * (modulus - modulus // i) % modulus
    return table


def factorial_table(n, modulus=MOD):
    """Return factorials of 0..n reduced modulo ``modulus``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return list(
        accumulate(range(1, n + 1), lambda acc, i: acc * i % modulus, initial=1)
    )