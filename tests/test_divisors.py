"""
Tests for divisor utilities
"""

import pytest

from convolution_algebra.divisors import (
    coprime,
    divisors,
    divisors_antidiagonal,
    factorization,
    is_squarefree,
    prime_factors,
    proper_divisors,
)


class TestDivisors:
    def test_divisors_sorted(self):
        assert divisors(12) == [1, 2, 3, 4, 6, 12]
        assert divisors(1) == [1]
        assert divisors(49) == [1, 7, 49]

    def test_zero_has_no_divisors(self):
        assert divisors(0) == []
        assert divisors_antidiagonal(0) == []
        assert factorization(0) == {}

    def test_proper_divisors(self):
        assert proper_divisors(12) == [1, 2, 3, 4, 6]
        assert proper_divisors(1) == []

    def test_antidiagonal(self):
        assert divisors_antidiagonal(6) == [(1, 6), (2, 3), (3, 2), (6, 1)]

    def test_negative_input(self):
        with pytest.raises(ValueError):
            divisors(-4)

    def test_non_integer_input(self):
        with pytest.raises(TypeError):
            divisors(4.0)
        with pytest.raises(TypeError):
            divisors(True)


class TestFactorization:
    def test_factorization(self):
        assert factorization(360) == {2: 3, 3: 2, 5: 1}
        assert factorization(97) == {97: 1}
        assert factorization(1) == {}

    def test_prime_factors(self):
        assert prime_factors(90) == [2, 3, 5]

    def test_squarefree(self):
        assert is_squarefree(30)
        assert not is_squarefree(12)
        assert is_squarefree(1)
        assert not is_squarefree(0)

    def test_coprime(self):
        assert coprime(8, 15)
        assert not coprime(6, 9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
