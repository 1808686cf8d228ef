"""
Tests for the Finite Support Map
"""

from fractions import Fraction

import numpy as np
import pytest

from convolution_algebra import AddMonoidAlgebra, FiniteSupportMap, INTEGERS, NATURALS, RATIONALS, REALS, zmod
from convolution_algebra.errors import StructureError


class TestConstruction:
    def test_single_nonzero(self):
        m = FiniteSupportMap.single("a", 3)
        assert m.support == {"a"}
        assert m["a"] == 3

    def test_single_zero_has_empty_support(self):
        m = FiniteSupportMap.single("a", 0)
        assert m.support == frozenset()
        assert not m
        assert m == FiniteSupportMap.zero()

    def test_explicit_zeros_are_pruned(self):
        m = FiniteSupportMap({1: 2, 2: 0, 3: -1})
        assert m.support == {1, 3}
        assert len(m) == 2

    def test_from_pairs_accumulates(self):
        m = FiniteSupportMap.from_pairs([(1, 2), (2, 5), (1, 3), (2, -5)])
        assert m.to_dict() == {1: 5}

    def test_on_finset(self):
        m = FiniteSupportMap.on_finset(range(5), lambda k: k % 2)
        assert m.support == {1, 3}

    def test_coercion_reduces_modulo(self):
        m = FiniteSupportMap({0: 3, 1: 4}, zmod(3))
        assert m.support == {1}
        assert m[1] == 1


class TestEvaluation:
    def test_evaluate_outside_support_is_zero(self):
        m = FiniteSupportMap.single(1, 7)
        assert m.evaluate(2) == 0
        assert m[100] == 0

    def test_rational_zero(self):
        m = FiniteSupportMap.zero(RATIONALS)
        assert m["x"] == RATIONALS.zero

    def test_support_matches_evaluate(self):
        m = FiniteSupportMap({1: 1, 2: 0, 3: 4})
        for key in range(5):
            assert (key in m.support) == (m[key] != 0)


class TestPointwiseOperations:
    def test_add_is_pointwise(self):
        a = FiniteSupportMap({1: 1, 2: 2})
        b = FiniteSupportMap({2: 3, 3: 4})
        total = a + b
        assert total.to_dict() == {1: 1, 2: 5, 3: 4}

    def test_add_cancellation_shrinks_support(self):
        a = FiniteSupportMap({1: 1, 2: 2})
        b = FiniteSupportMap({2: -2})
        assert (a + b).support == {1}

    def test_neg_and_sub(self):
        a = FiniteSupportMap({1: 1, 2: 2})
        assert (a - a) == FiniteSupportMap.zero()
        assert (-a)[2] == -2

    def test_neg_on_semiring_raises(self):
        with pytest.raises(StructureError):
            -FiniteSupportMap({1: 1}, NATURALS)

    def test_mixed_coefficients_raise(self):
        with pytest.raises(StructureError):
            FiniteSupportMap({1: 1}) + FiniteSupportMap({1: 1}, RATIONALS)

    def test_smul(self):
        m = FiniteSupportMap({1: 2, 2: 3})
        assert m.smul(2).to_dict() == {1: 4, 2: 6}
        assert not m.smul(0)

    def test_map_domain_merges_collisions(self):
        m = FiniteSupportMap({1: 2, -1: 3, 2: 1})
        assert m.map_domain(abs).to_dict() == {1: 5, 2: 1}

    def test_map_range(self):
        m = FiniteSupportMap({1: 2, 2: 3}).map_range(lambda v: v % 2)
        assert m.to_dict() == {2: 1}

    def test_filter_erase_update(self):
        m = FiniteSupportMap({1: 1, 2: 2, 3: 3})
        assert m.filter(lambda k: k > 1).support == {2, 3}
        assert m.erase(2).support == {1, 3}
        assert m.update(1, 0).support == {2, 3}
        assert m.update(4, 9)[4] == 9


class TestSumOverSupport:
    def test_sum_of_zero_map_is_zero(self):
        assert FiniteSupportMap.zero().sum(lambda k, v: v) == 0

    def test_sum_with_ambient_target(self):
        m = FiniteSupportMap({"ab": 2, "c": 3})
        total = m.sum(lambda k, v: [k] * v, zero=[], add=lambda a, b: a + b)
        assert sorted(total) == ["ab", "ab", "c", "c", "c"]

    def test_sum_skips_zero_entries(self):
        calls = []
        m = FiniteSupportMap({1: 1, 2: 0})
        m.sum(lambda k, v: calls.append(k) or v)
        assert calls == [1]

    def test_target_zero_without_add_raises(self):
        with pytest.raises(TypeError):
            FiniteSupportMap({1: 1}).sum(lambda k, v: v, zero=0)

    def test_target_add_without_zero_raises(self):
        with pytest.raises(TypeError):
            FiniteSupportMap.zero().sum(lambda k, v: v, add=lambda a, b: a + b)


class TestCoefficientValidation:
    def test_integers_reject_fractional_values(self):
        with pytest.raises(TypeError):
            FiniteSupportMap({1: 2.7})
        with pytest.raises(TypeError):
            FiniteSupportMap.single(1, Fraction(1, 2))

    def test_fraction_into_polynomial_over_integers_raises(self):
        with pytest.raises(TypeError):
            AddMonoidAlgebra.single(1, Fraction(1, 2))

    def test_naturals_reject_negatives(self):
        with pytest.raises(ValueError):
            FiniteSupportMap({1: -3}, NATURALS)
        with pytest.raises(ValueError):
            FiniteSupportMap.single(1, 2).map_range(lambda v: -v, NATURALS)

    def test_modular_coefficients_reject_fractions(self):
        with pytest.raises(TypeError):
            FiniteSupportMap({1: 1.5}, zmod(3))

    def test_integral_inputs_are_kept(self):
        m = FiniteSupportMap({1: np.int64(4), 2: True}, INTEGERS)
        assert m[1] == 4 and type(m[1]) is int
        assert m[2] == 1

    def test_reals_accept_any_real(self):
        m = FiniteSupportMap({1: Fraction(1, 4), 2: 3}, REALS)
        assert m[1] == 0.25
        assert m[2] == 3.0
        with pytest.raises(TypeError):
            FiniteSupportMap({1: "2.5"}, REALS)


class TestEquality:
    def test_pointwise_equality(self):
        a = FiniteSupportMap.from_pairs([(1, 1), (2, 0)])
        b = FiniteSupportMap({1: 1})
        assert a == b
        assert hash(a) == hash(b)

    def test_different_coefficients_are_unequal(self):
        assert FiniteSupportMap({1: 1}, INTEGERS) != FiniteSupportMap({1: 1}, NATURALS)

    def test_unequal_values(self):
        assert FiniteSupportMap({1: 1}) != FiniteSupportMap({1: 2})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
