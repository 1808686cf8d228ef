"""
Example: Arithmetic Functions and Dirichlet Convolution

Counts divisors with ζ * ζ, inverts ζ to recover the Möbius function and
tabulates σ_1 = ζ * id with the sieve-based table.
"""

from convolution_algebra import ArithmeticFunction, NATURALS, convolve_table


def main():
    print("=" * 60)
    print("Convolution Algebra - Dirichlet Demo")
    print("=" * 60)

    zeta = ArithmeticFunction.zeta(NATURALS)
    d = zeta * zeta
    print("\n1. Number of divisors, ζ * ζ")
    print("   " + ", ".join(f"d({n})={d(n)}" for n in range(1, 13)))

    mu = ArithmeticFunction.zeta().dirichlet_inverse()
    print("\n2. Dirichlet inverse of ζ (the Möbius function)")
    print("   " + ", ".join(f"μ({n})={mu(n)}" for n in range(1, 13)))
    print(f"   agrees with μ: {mu.agrees_with(ArithmeticFunction.moebius())}")

    sigma = convolve_table(ArithmeticFunction.zeta(), ArithmeticFunction.identity(), 20)
    print("\n3. σ_1 up to 20 by sieve")
    print(f"   {list(sigma[1:])}")
    print(f"   multiplicative: {ArithmeticFunction.sigma(1).is_multiplicative()}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
