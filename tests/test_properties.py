"""
Property-based tests of the ring laws, extensionality and the universal property.

Elements are drawn over several key/coefficient combinations, including a
non-commutative key monoid, a non-abelian group, non-commutative matrix
coefficients and a modular ring.
"""

from fractions import Fraction

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from convolution_algebra import (
    AddMonoidAlgebra,
    ArithmeticFunction,
    MonoidAlgebra,
    MonoidHom,
    FREE_MONOID,
    INT_ADD,
    INTEGERS,
    NAT_ADD,
    RATIONALS,
    lift,
    matrix_ring,
    scalar_algebra,
    symmetric_group,
    zmod,
)

PERMUTATIONS = [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)]

small_ints = st.integers(min_value=-4, max_value=4)
matrices = st.tuples(st.tuples(small_ints, small_ints), st.tuples(small_ints, small_ints))

# (algebra class, keys, coeffs, key strategy, value strategy)
VARIANTS = {
    "polynomials": (AddMonoidAlgebra, NAT_ADD, INTEGERS,
                    st.integers(min_value=0, max_value=5), small_ints),
    "laurent": (AddMonoidAlgebra, INT_ADD, INTEGERS,
                st.integers(min_value=-3, max_value=3), small_ints),
    "free_monoid": (MonoidAlgebra, FREE_MONOID, INTEGERS,
                    st.text(alphabet="ab", max_size=2), small_ints),
    "s3_mod5": (MonoidAlgebra, symmetric_group(3), zmod(5),
                st.sampled_from(PERMUTATIONS), st.integers(min_value=0, max_value=4)),
    "matrix_coefficients": (AddMonoidAlgebra, NAT_ADD, matrix_ring(2),
                            st.integers(min_value=0, max_value=3), matrices),
}


def elements(variant, max_terms=4):
    algebra, keys, coeffs, key_strategy, value_strategy = VARIANTS[variant]
    return st.lists(st.tuples(key_strategy, value_strategy), max_size=max_terms).map(
        lambda pairs: algebra.from_pairs(pairs, keys, coeffs)
    )


def triples(variant):
    return st.tuples(elements(variant), elements(variant), elements(variant))


variant_names = pytest.mark.parametrize("variant", sorted(VARIANTS))

common = settings(max_examples=40, deadline=None)


class TestRingLaws:
    @variant_names
    def test_identity(self, variant):
        @common
        @given(elements(variant))
        def check(f):
            one = f.one(f.keys, f.coeffs)
            assert one * f == f
            assert f * one == f
        check()

    @variant_names
    def test_absorption(self, variant):
        @common
        @given(elements(variant))
        def check(f):
            zero = f.zero(f.keys, f.coeffs)
            assert zero * f == zero
            assert f * zero == zero
        check()

    @variant_names
    def test_associativity(self, variant):
        @common
        @given(triples(variant))
        def check(fgh):
            f, g, h = fgh
            assert (f * g) * h == f * (g * h)
        check()

    @variant_names
    def test_distributivity(self, variant):
        @common
        @given(triples(variant))
        def check(fgh):
            f, g, h = fgh
            assert f * (g + h) == f * g + f * h
            assert (f + g) * h == f * h + g * h
        check()

    @pytest.mark.parametrize("variant", ["polynomials", "laurent"])
    def test_commutativity(self, variant):
        @common
        @given(elements(variant), elements(variant))
        def check(f, g):
            assert f.is_commutative
            assert f * g == g * f
        check()

    @variant_names
    def test_product_support_bounds_support(self, variant):
        @common
        @given(elements(variant), elements(variant))
        def check(f, g):
            assert (f * g).support <= f.product_support(g)
        check()

    @variant_names
    def test_mul_apply_agrees_with_product(self, variant):
        @common
        @given(elements(variant), elements(variant))
        def check(f, g):
            product = f * g
            for key in f.product_support(g):
                assert f.mul_apply(g, key) == product.evaluate(key)
        check()


class TestGroupClosedForms:
    @common
    @given(elements("s3_mod5"), elements("s3_mod5"))
    def test_left_and_right_closed_forms(self, f, g):
        product = f * g
        for x in PERMUTATIONS:
            assert f.mul_apply_left(g, x) == product.evaluate(x)
            assert f.mul_apply_right(g, x) == product.evaluate(x)


class TestExtensionality:
    @common
    @given(elements("laurent"), elements("laurent"))
    def test_equality_is_pointwise_on_supports(self, f, g):
        keys = f.support | g.support
        assert (f == g) == all(f.evaluate(k) == g.evaluate(k) for k in keys)

    @common
    @given(elements("polynomials"), st.lists(st.integers(min_value=6, max_value=9), max_size=3))
    def test_explicit_zero_terms_do_not_matter(self, f, extra_keys):
        padded = AddMonoidAlgebra.from_pairs(list(f.items()) + [(k, 0) for k in extra_keys])
        assert padded == f
        assert hash(padded) == hash(f)


class TestLiftNaturality:
    @common
    @given(st.fractions(min_value=-3, max_value=3, max_denominator=5),
           st.integers(min_value=0, max_value=6))
    def test_lift_sends_generators_to_images(self, point, k):
        F = MonoidHom(func=lambda n: point ** n, source=NAT_ADD, target=scalar_algebra(RATIONALS))
        ev = lift(F, RATIONALS, AddMonoidAlgebra)
        assert ev(AddMonoidAlgebra.of(k, NAT_ADD, RATIONALS)) == F(k)

    @common
    @given(st.fractions(min_value=-3, max_value=3, max_denominator=5),
           st.lists(st.tuples(st.integers(min_value=0, max_value=4), small_ints), max_size=4),
           st.lists(st.tuples(st.integers(min_value=0, max_value=4), small_ints), max_size=4))
    def test_lift_is_multiplicative(self, point, f_pairs, g_pairs):
        F = MonoidHom(func=lambda n: point ** n, source=NAT_ADD, target=scalar_algebra(RATIONALS))
        ev = lift(F, RATIONALS, AddMonoidAlgebra)
        f = AddMonoidAlgebra.from_pairs(f_pairs, NAT_ADD, RATIONALS)
        g = AddMonoidAlgebra.from_pairs(g_pairs, NAT_ADD, RATIONALS)
        assert ev(f * g) == ev(f) * ev(g)
        assert ev(f + g) == ev(f) + ev(g)


arithmetic_functions = st.lists(small_ints, min_size=1, max_size=13).map(
    lambda values: ArithmeticFunction.from_values([0] + values)
)


class TestDirichletProperties:
    @common
    @given(arithmetic_functions, arithmetic_functions)
    def test_value_at_zero(self, f, g):
        assert (f * g)(0) == 0

    @common
    @given(arithmetic_functions, arithmetic_functions, arithmetic_functions)
    def test_associativity(self, f, g, h):
        assert ((f * g) * h).agrees_with(f * (g * h), 24)

    @common
    @given(arithmetic_functions, arithmetic_functions)
    def test_commutativity(self, f, g):
        assert (f * g).agrees_with(g * f, 24)

    @common
    @given(arithmetic_functions)
    def test_identity(self, f):
        one = ArithmeticFunction.one()
        assert (one * f).agrees_with(f, 24)
        assert (f * one).agrees_with(f, 24)

    @common
    @given(arithmetic_functions)
    def test_moebius_inversion(self, f):
        assert f.sum_over_divisors().moebius_inversion().agrees_with(f, 24)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
