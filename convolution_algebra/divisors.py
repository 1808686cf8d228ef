"""
Divisor Utilities

Finite divisor sets used by Dirichlet convolution. Every function treats
n = 0 as having no divisors, so sums over them are empty.
"""

import numbers
from math import gcd, isqrt
from typing import Dict, List, Tuple


def as_natural(n: int) -> int:
    """Validate a natural-number argument and return it as a Python int."""
    if not isinstance(n, numbers.Integral) or isinstance(n, bool):
        raise TypeError(f"Expected a natural number, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Expected a natural number, got {n}")
    return int(n)


def divisors(n: int) -> List[int]:
    """
    Positive divisors of n in increasing order.

    Args:
        n: Natural number

    Returns:
        Sorted list of divisors; empty for n = 0
    """
    n = as_natural(n)
    small, large = [], []
    for d in range(1, isqrt(n) + 1):
        if n % d == 0:
            small.append(d)
            if d != n // d:
                large.append(n // d)
    return small + large[::-1]


def proper_divisors(n: int) -> List[int]:
    """Divisors of n other than n itself."""
    return [d for d in divisors(n) if d != n]


def divisors_antidiagonal(n: int) -> List[Tuple[int, int]]:
    """Ordered pairs (d, e) with d * e == n, increasing in d; empty for n = 0."""
    return [(d, n // d) for d in divisors(n)]


def factorization(n: int) -> Dict[int, int]:
    """
    Prime factorization of n by trial division.

    Returns:
        Mapping prime -> exponent; empty for n in {0, 1}
    """
    n = as_natural(n)
    factors: Dict[int, int] = {}
    if n == 0:
        return factors
    p = 2
    while p * p <= n:
        while n % p == 0:
            factors[p] = factors.get(p, 0) + 1
            n //= p
        p += 1 if p == 2 else 2
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def prime_factors(n: int) -> List[int]:
    """Distinct prime factors of n in increasing order."""
    return sorted(factorization(n))


def is_squarefree(n: int) -> bool:
    """True when no prime square divides n; 0 is not squarefree."""
    if as_natural(n) == 0:
        return False
    return all(e == 1 for e in factorization(n).values())


def coprime(m: int, n: int) -> bool:
    return gcd(m, n) == 1
