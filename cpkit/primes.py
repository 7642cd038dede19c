"""Prime sieves and a probabilistic primality test."""

import random
from math import isqrt


def _linear_sieve(n):
    if n < 0:
        raise ValueError("n must be non-negative")
    lowest = [0] * (n + 1)
    primes = []
    for i in range(2, n + 1):
        if lowest[i] == 0:
            lowest[i] = i
            primes.append(i)
        for p in primes:
            if p > lowest[i] or i * p > n:
                break
            lowest[i * p] = p
    return lowest, primes


def smallest_prime_factors(n):
    """Return a list whose entry i is the least prime factor of i (0 for 0, 1)."""
    return _linear_sieve(n)[0]


def primes_up_to(n):
    """Return all primes not greater than ``n`` in increasing order."""
    return _linear_sieve(n)[1]


def count_primes(n):
    """Return how many primes are not greater than ``n``."""
    if n < 2:
        return 0
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    sieve[4::2] = bytes(len(range(4, n + 1, 2)))
    for i in range(3, isqrt(n) + 1, 2):
        if sieve[i]:
            sieve[i * i :: 2 * i] = bytes(len(range(i * i, n + 1, 2 * i)))
    return sum(sieve)


def _is_composite_witness(n, a, d, s):
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n, iterations=5):
    """Miller-Rabin test: False means composite, True means probably prime."""
    if n < 4:
        return n in (2, 3)
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return not any(
        _is_composite_witness(n, random.randrange(2, n - 1), d, s)
        for _ in range(iterations)
    )