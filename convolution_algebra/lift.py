"""
Lift Module

The universal property of convolution algebras. A monoid homomorphism
F: K -> (A, ·) into an R-algebra A extends uniquely to an algebra
homomorphism

    lift(F)(f) = sum over k in supp f of f(k) • F(k)

and restricting an algebra homomorphism to the generators [k] recovers F.
Consequently two algebra homomorphisms out of R[K] agree everywhere iff
they agree on every generator [k].
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Type

import numpy as np

from .errors import StructureError
from .monoid_algebra import ConvolutionAlgebra, MonoidAlgebra
from .structures import KeyMonoid, Semiring

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TargetAlgebra:
    """
    An algebra A over a coefficient semiring, as seen by ``lift``.

    Attributes:
        name: Display name
        zero: Additive identity of A
        one: Multiplicative identity of A
        add: Addition in A
        mul: Multiplication in A
        smul: Scalar action R x A -> A
        eq: Equality test in A
    """
    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    mul: Callable[[Any, Any], Any]
    smul: Callable[[Any, Any], Any]
    eq: Callable[[Any, Any], bool]


def scalar_algebra(coeffs: Semiring) -> TargetAlgebra:
    """R as an algebra over itself."""
    return TargetAlgebra(
        name=coeffs.name, zero=coeffs.zero, one=coeffs.one,
        add=coeffs.add, mul=coeffs.mul, smul=coeffs.mul,
        eq=lambda a, b: a == b,
    )


def matrix_algebra(n: int, coeffs: Semiring) -> TargetAlgebra:
    """
    n x n matrices as numpy object arrays.

    Entries combine with Python operators, so ``coeffs`` must use them
    (integers, rationals, reals).
    """
    identity = np.empty((n, n), dtype=object)
    for i in range(n):
        for j in range(n):
            identity[i, j] = coeffs.one if i == j else coeffs.zero
    zero = np.empty((n, n), dtype=object)
    zero.fill(coeffs.zero)
    return TargetAlgebra(
        name=f"M{n}({coeffs.name})", zero=zero, one=identity,
        add=lambda a, b: a + b,
        mul=lambda a, b: a @ b,
        smul=lambda r, a: r * a,
        eq=lambda a, b: bool(np.array_equal(a, b)),
    )


def convolution_target(algebra: Type[ConvolutionAlgebra], keys: KeyMonoid,
                       coeffs: Semiring) -> TargetAlgebra:
    """Another convolution algebra R[K'] as a lift target."""
    return TargetAlgebra(
        name=f"{algebra.__name__}({keys.name}, {coeffs.name})",
        zero=algebra.zero(keys, coeffs),
        one=algebra.one(keys, coeffs),
        add=lambda a, b: a + b,
        mul=lambda a, b: a * b,
        smul=lambda r, a: a.smul(r),
        eq=lambda a, b: a == b,
    )


@dataclass(frozen=True)
class MonoidHom:
    """
    A map F: K -> A preserving identity and combination.

    Attributes:
        func: The underlying map on keys
        source: Key monoid K
        target: Target algebra A (its multiplicative monoid)
        name: Display name
    """
    func: Callable[[Hashable], Any]
    source: KeyMonoid
    target: TargetAlgebra
    name: str = "F"

    def __call__(self, key: Hashable) -> Any:
        return self.func(key)

    def respects_structure(self, keys: Iterable[Hashable]) -> bool:
        """
        Check F(1) = 1 and F(a·b) = F(a) F(b) for all a, b in ``keys``.

        Only a finite sample can be checked; a True result is evidence, not proof.
        """
        target = self.target
        if not target.eq(self(self.source.identity), target.one):
            return False
        sample = list(keys)
        return all(
            target.eq(self(self.source.combine(a, b)), target.mul(self(a), self(b)))
            for a in sample for b in sample
        )


@dataclass(frozen=True)
class AlgebraHom:
    """
    An R-algebra homomorphism out of a convolution algebra.

    Attributes:
        func: The underlying map on algebra elements
        algebra: Domain class (MonoidAlgebra or AddMonoidAlgebra)
        keys: Domain key monoid
        coeffs: Domain coefficient semiring
        target: Codomain algebra
        name: Display name
    """
    func: Callable[[ConvolutionAlgebra], Any]
    algebra: Type[ConvolutionAlgebra]
    keys: KeyMonoid
    coeffs: Semiring
    target: TargetAlgebra
    name: str = "L"

    def __call__(self, element: ConvolutionAlgebra) -> Any:
        if (type(element) is not self.algebra or element.keys != self.keys
                or element.coeffs != self.coeffs):
            raise StructureError(f"{self.name} is not defined on {element!r}")
        return self.func(element)

    def generator(self, key: Hashable) -> ConvolutionAlgebra:
        return self.algebra.of(key, self.keys, self.coeffs)

    def restrict(self) -> MonoidHom:
        """The monoid homomorphism k ↦ L([k])."""
        return MonoidHom(func=lambda key: self(self.generator(key)), source=self.keys,
                         target=self.target, name=f"{self.name}∘of")

    def compose(self, after: Callable[[Any], Any], target: TargetAlgebra,
                name: Optional[str] = None) -> "AlgebraHom":
        """``after ∘ self`` for an algebra homomorphism ``after`` out of the target."""
        return AlgebraHom(func=lambda element: after(self(element)), algebra=self.algebra,
                          keys=self.keys, coeffs=self.coeffs, target=target,
                          name=name or f"{getattr(after, 'name', 'g')}∘{self.name}")


def lift(hom: MonoidHom, coeffs: Semiring,
         algebra: Type[ConvolutionAlgebra] = MonoidAlgebra) -> AlgebraHom:
    """
    Extend a monoid homomorphism to the algebra homomorphism R[K] -> A.

    Args:
        hom: Monoid homomorphism F: K -> A
        coeffs: Coefficient semiring R of the domain
        algebra: Convolution algebra variant of the domain

    Returns:
        AlgebraHom with lift(F)([k]) = F(k) for every key k
    """
    target = hom.target
    logger.debug("Lifting %s: %s -> %s over %s", hom.name, hom.source.name, target.name, coeffs.name)

    def apply(element: ConvolutionAlgebra) -> Any:
        return element.terms.sum(lambda key, value: target.smul(value, hom(key)),
                                 zero=target.zero, add=target.add)

    return AlgebraHom(func=apply, algebra=algebra, keys=hom.source, coeffs=coeffs,
                      target=target, name=f"lift({hom.name})")


def lift_symm(hom: AlgebraHom) -> MonoidHom:
    """Inverse of ``lift``: restriction to the generators."""
    return hom.restrict()


def alg_hom_ext(phi: AlgebraHom, psi: AlgebraHom, keys: Iterable[Hashable]) -> bool:
    """
    Decide phi == psi from their values on the generators [k], k in ``keys``.

    ``keys`` must cover the supports of every element the homomorphisms are
    applied to; over those elements the answer is exact.
    """
    if phi.algebra is not psi.algebra or phi.keys != psi.keys or phi.coeffs != psi.coeffs:
        raise StructureError(f"{phi.name} and {psi.name} have different domains")
    return all(phi.target.eq(phi(phi.generator(k)), psi(psi.generator(k))) for k in keys)


def agree_on(phi: AlgebraHom, psi: AlgebraHom, elements: Iterable[ConvolutionAlgebra]) -> bool:
    """Pointwise comparison on the given elements."""
    return all(phi.target.eq(phi(x), psi(x)) for x in elements)
