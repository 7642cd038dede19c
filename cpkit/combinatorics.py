"""Counting formulas: Catalan numbers, binomials, non-Fibonacci numbers, chess."""

import math


def catalan_numbers(n):
    """Return the Catalan numbers C(0) through C(n)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    catalan = [1]
    for i in range(1, n + 1):
        catalan.append(sum(catalan[j] * catalan[i - j - 1] for j in range(i)))
    return catalan


def n_choose_r(n, r):
    """Return the number of ways to choose ``r`` items from ``n``."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("need 0 <= r <= n")
    return math.comb(n, r)


def nth_non_fibonacci(n):
    """Return the n-th positive integer that is not a Fibonacci number."""
    if n < 1:
        raise ValueError("n must be positive")
    prev, curr = 2, 3
    while n > 0:
        prev, curr = curr, prev + curr
        n -= curr - prev - 1
    n += curr - prev - 1
    return prev + n


def factorial_digit_count(n):
    """Return the number of decimal digits of n! by Kamenetsky's formula.

    Negative ``n`` yields 0.
    """
    if n < 0:
        return 0
    if n <= 1:
        return 1
    x = n * math.log10(n / math.e) + math.log10(2 * math.pi * n) / 2.0
    return math.floor(x) + 1


def max_non_attacking_rooks(m, n):
    """Return how many rooks fit on an m x n board without attacking."""
    return min(m, n)


def max_non_attacking_queens(m, n):
    """Return how many queens fit on an m x n board without attacking."""
    return min(m, n)


def max_non_attacking_knights(m, n):
    """Return how many knights fit on an m x n board by colour counting."""
    return ((m + 1) // 2) * ((n + 1) // 2) + (m // 2) * (n // 2)


def max_non_attacking_kings(m, n):
    """Return how many kings fit on an m x n board without attacking."""
    return ((m + 1) // 2) * ((n + 1) // 2)