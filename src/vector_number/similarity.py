# vector_number.similarity

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING

from vector_number.core.coefficients import Coefficient, add, true_divide
from vector_number.core.utils import as_vector, clamp_cosine, require_direction
from vector_number.geometry import dot_product, magnitude

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from vector_number.core.vector import VectorNumber


def cosine(vector: "VectorNumber", other: object) -> float:
    """Cosine of the angle between two vectors, in [-1, 1]."""
    require_direction(vector)
    if other is vector:
        return 1.0
    other = as_vector(vector, other)
    require_direction(other)

    product = dot_product(vector, other)
    if product == 0:
        return 0.0
    return clamp_cosine(float(product) / magnitude(vector) / magnitude(other))


def jaccard_index(vector: "VectorNumber", other: object) -> Fraction:
    """
    Share of units present in both vectors among units present in either.

    Coefficients are ignored. Raises ``ZeroDivisionError`` if both are zero.
    """
    other = as_vector(vector, other)
    shared = sum(1 for unit in vector.units() if other.has_unit(unit))
    return Fraction(shared, vector.size + other.size - shared)


def jaccard_similarity(vector: "VectorNumber", other: object) -> Coefficient:
    """
    Weighted Jaccard similarity: ``sum(min) / sum(max)`` over all units.

    Only meaningful for non-negative vectors. Exact coefficients give a
    ``Fraction``. Raises ``ZeroDivisionError`` if both vectors are zero.
    """
    other = as_vector(vector, other)
    units = vector.units() + [u for u in other.units() if not vector.has_unit(u)]

    numerator: Coefficient = 0
    denominator: Coefficient = 0
    for unit in units:
        a, b = vector[unit], other[unit]
        if vector.has_unit(unit):
            numerator = add(numerator, min(a, b))
        denominator = add(denominator, max(a, b))
    return true_divide(numerator, denominator)


__all__ = ["cosine", "jaccard_index", "jaccard_similarity"]
