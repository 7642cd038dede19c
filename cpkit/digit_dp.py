"""Digit dynamic programming: counting numbers below a limit by digit properties.

Digit positions are counted from the right starting at 1; odd positions feed
the odd-position sum and even positions the even-position sum.
"""

from functools import lru_cache

from cpkit.primes import primes_up_to


def _digits(limit):
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return [int(c) for c in str(limit)]


def digit_sum_total(limit):
    """Return the sum of the digit sums of every integer in ``[0, limit)``."""
    digits = _digits(limit)
    total = 0
    prefix = 0
    for pos, d in enumerate(digits):
        free = len(digits) - pos - 1
        block = 10**free
        tail = 45 * free * 10 ** (free - 1) if free else 0
        for j in range(d):
            total += (prefix + j) * block + tail
        prefix += d
    return total


def digit_sum_between(a, b):
    """Return the sum of the digit sums of every integer in ``[a, b]``."""
    return digit_sum_total(b + 1) - digit_sum_total(a)


def _place_sums(place, odd, even, digit):
    if place % 2 == 0:
        return odd, even + digit
    return odd + digit, even


def _count_below(limit, accept):
    digits = _digits(limit)

    @lru_cache(maxsize=None)
    def completions(remaining, odd, even):
        if remaining == 0:
            return 1 if accept(odd, even) else 0
        return sum(
            completions(remaining - 1, *_place_sums(remaining, odd, even, i))
            for i in range(10)
        )

    total = 0
    odd = even = 0
    for pos, d in enumerate(digits):
        place = len(digits) - pos
        total += sum(
            completions(place - 1, *_place_sums(place, odd, even, j)) for j in range(d)
        )
        odd, even = _place_sums(place, odd, even, d)
    return total


def _prime_set(limit):
    return frozenset(primes_up_to(9 * len(str(max(limit, 0)))))


def count_prime_digit_sum(limit):
    """Return how many integers in ``[0, limit)`` have a prime digit sum."""
    primes = _prime_set(limit)
    return _count_below(limit, lambda odd, even: odd + even in primes)


def count_prime_digit_sum_between(a, b):
    """Return how many integers in ``[a, b]`` have a prime digit sum."""
    return count_prime_digit_sum(b + 1) - count_prime_digit_sum(a)


def count_prime_alternating_difference(limit):
    """Count integers in ``[0, limit)`` whose even-position minus odd-position
    digit sum is a prime."""
    primes = _prime_set(limit)
    return _count_below(limit, lambda odd, even: even - odd in primes)


def count_difference_one(limit):
    """Count integers in ``[0, limit)`` whose even-position digit sum exceeds
    the odd-position digit sum by exactly one."""
    return _count_below(limit, lambda odd, even: even - odd == 1)