"""
Example: Polynomials and Group Rings as Convolution Algebras

Builds polynomials over the integers, multiplies them by convolution,
evaluates them through the universal property, and shows cancellation in
the Laurent polynomial ring.
"""

from fractions import Fraction

from convolution_algebra import (
    AddMonoidAlgebra,
    MonoidHom,
    INT_ADD,
    NAT_ADD,
    RATIONALS,
    lift,
    scalar_algebra,
    verify_semiring_laws,
)


def main():
    print("=" * 60)
    print("Convolution Algebra - Polynomial Demo")
    print("=" * 60)

    # Example 1: (3 + 2x) * x
    print("\nExample 1: Convolution of polynomials")
    print("-" * 60)
    f = AddMonoidAlgebra.single(1, 2) + AddMonoidAlgebra.single(0, 3)
    g = AddMonoidAlgebra.single(1, 1)
    product = f * g
    print(f"   f       = {f!r}")
    print(f"   g       = {g!r}")
    print(f"   f * g   = {product!r}")
    print(f"   dense   = {list(product.to_dense())}")

    # Example 2: evaluation as a lift
    print("\nExample 2: Evaluation at x = 1/2 via lift")
    print("-" * 60)
    half = Fraction(1, 2)
    at_half = MonoidHom(func=lambda k: half ** k, source=NAT_ADD,
                        target=scalar_algebra(RATIONALS), name="ev(1/2)")
    ev = lift(at_half, RATIONALS, AddMonoidAlgebra)
    p = AddMonoidAlgebra.from_dense([1, 1], RATIONALS) ** 4
    print(f"   (1 + x)^4 = {list(p.to_dense())}")
    print(f"   value     = {ev(p)}")

    # Example 3: cancellation
    print("\nExample 3: Cancellation in Laurent polynomials")
    print("-" * 60)
    u = AddMonoidAlgebra.from_pairs([(1, 1), (-1, 1)], INT_ADD)
    v = AddMonoidAlgebra.from_pairs([(1, 1), (-1, -1)], INT_ADD)
    print(f"   product support  = {sorted((u * v).support)}")
    print(f"   candidate keys   = {sorted(u.product_support(v))}")

    # Example 4: law check
    print("\nExample 4: Semiring laws on a sample")
    print("-" * 60)
    for law, holds in verify_semiring_laws([f, g, product]).items():
        print(f"   {law:<24} {'ok' if holds else 'FAILED'}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
