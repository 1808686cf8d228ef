"""
Algebra Laws Module

Runtime checks of the semiring laws for convolution algebras and of the
homomorphism laws for lifts, evaluated on finite samples of elements.
Each check returns a dictionary of law name -> bool; failed laws are logged.
"""

import itertools
import logging
from typing import Any, Dict, Iterable, List, Sequence

from .constants import DEFAULT_SAMPLE_LIMIT
from .lift import AlgebraHom
from .monoid_algebra import ConvolutionAlgebra

logger = logging.getLogger(__name__)


def _sample(elements: Iterable[ConvolutionAlgebra], limit: int) -> List[ConvolutionAlgebra]:
    sample = list(itertools.islice(elements, limit))
    if not sample:
        raise ValueError("At least one element is needed to check algebra laws")
    return sample


def _report(results: Dict[str, bool], subject: str) -> Dict[str, bool]:
    for law, holds in results.items():
        if not holds:
            logger.warning("%s violates %s", subject, law)
    return results


def verify_semiring_laws(elements: Iterable[ConvolutionAlgebra],
                         limit: int = DEFAULT_SAMPLE_LIMIT) -> Dict[str, bool]:
    """
    Check the semiring laws on all pairs and triples drawn from ``elements``.

    Args:
        elements: Elements of one convolution algebra
        limit: Maximum number of elements taken from ``elements``

    Returns:
        Dictionary with one entry per law
    """
    sample = _sample(elements, limit)
    first = sample[0]
    zero = first.zero(first.keys, first.coeffs)
    one = first.one(first.keys, first.coeffs)
    pairs = list(itertools.product(sample, repeat=2))
    triples = list(itertools.product(sample, repeat=3))

    results = {
        "left_identity": all(one * f == f for f in sample),
        "right_identity": all(f * one == f for f in sample),
        "left_absorption": all(zero * f == zero for f in sample),
        "right_absorption": all(f * zero == zero for f in sample),
        "additive_identity": all(f + zero == f for f in sample),
        "additive_commutativity": all(f + g == g + f for f, g in pairs),
        "additive_associativity": all((f + g) + h == f + (g + h) for f, g, h in triples),
        "associativity": all((f * g) * h == f * (g * h) for f, g, h in triples),
        "left_distributivity": all(f * (g + h) == f * g + f * h for f, g, h in triples),
        "right_distributivity": all((f + g) * h == f * h + g * h for f, g, h in triples),
    }
    return _report(results, type(first).__name__)


def verify_commutativity(elements: Iterable[ConvolutionAlgebra],
                         limit: int = DEFAULT_SAMPLE_LIMIT) -> Dict[str, bool]:
    """Check f * g == g * f on all sampled pairs."""
    sample = _sample(elements, limit)
    results = {"commutativity": all(f.commutes_with(g) for f, g in itertools.product(sample, repeat=2))}
    return _report(results, type(sample[0]).__name__)


def verify_hom_laws(hom: AlgebraHom, elements: Iterable[ConvolutionAlgebra],
                    scalars: Sequence[Any] = (), limit: int = DEFAULT_SAMPLE_LIMIT) -> Dict[str, bool]:
    """
    Check that ``hom`` is additive, multiplicative, unital and R-linear.

    Args:
        hom: Algebra homomorphism to check
        elements: Elements of its domain
        scalars: Coefficients used for the scalar-compatibility law
        limit: Maximum number of elements taken from ``elements``

    Returns:
        Dictionary with one entry per law
    """
    sample = _sample(elements, limit)
    target = hom.target
    eq = target.eq
    zero = hom.algebra.zero(hom.keys, hom.coeffs)
    one = hom.algebra.one(hom.keys, hom.coeffs)
    pairs = list(itertools.product(sample, repeat=2))

    results = {
        "map_zero": eq(hom(zero), target.zero),
        "map_one": eq(hom(one), target.one),
        "map_add": all(eq(hom(f + g), target.add(hom(f), hom(g))) for f, g in pairs),
        "map_mul": all(eq(hom(f * g), target.mul(hom(f), hom(g))) for f, g in pairs),
        "map_smul": all(eq(hom(f.smul(r)), target.smul(hom.coeffs.coerce(r), hom(f)))
                        for f in sample for r in scalars),
    }
    return _report(results, hom.name)
