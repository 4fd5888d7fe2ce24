"""
vector_number.geometry
======================

Euclidean geometry over vector numbers: norms, dot product, angles,
projections and rejections. Units are treated as orthonormal basis vectors.

Everything here reads vectors only through their public interface
(iteration, indexing, ``size``), and every function that takes ``other``
accepts any value, promoting it to a vector number first.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import TYPE_CHECKING, List

from vector_number.core.coefficients import Coefficient, add, multiply
from vector_number.core.utils import as_vector, clamp_cosine, require_direction

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from vector_number.core.vector import VectorNumber


# --- Norms -------------------------------------------------------------------

def abs2(vector: "VectorNumber") -> Coefficient:
    """Squared magnitude; exact for exact coefficients."""
    return reduce(add, (multiply(c, c) for c in vector.coefficients()), 0)


def magnitude(vector: "VectorNumber") -> float:
    """Euclidean (2-)norm."""
    return math.hypot(*(float(c) for c in vector.coefficients()))


def p_norm(vector: "VectorNumber", p: float) -> float:
    total = sum(abs(float(c)) ** p for c in vector.coefficients())
    return total ** (1.0 / p)


def maximum_norm(vector: "VectorNumber") -> Coefficient:
    """Largest absolute coefficient (infinity norm); ``0`` for the zero vector."""
    if vector.is_zero():
        return 0
    return max(abs(c) for c in vector.coefficients())


# --- Derived vectors ---------------------------------------------------------

def subspace_basis(vector: "VectorNumber") -> List["VectorNumber"]:
    """One vector with coefficient 1 per unit of ``vector``."""
    cls = type(vector)
    return [cls({unit: 1}, vector.options) for unit in vector.units()]


def uniform_vector(vector: "VectorNumber") -> "VectorNumber":
    """Same units as ``vector``, all coefficients set to 1."""
    return type(vector)(vector, vector.options, lambda _: 1)


def unit_vector(vector: "VectorNumber") -> "VectorNumber":
    require_direction(vector)
    return vector / magnitude(vector)


# --- Products & angles -------------------------------------------------------

def dot_product(vector: "VectorNumber", other: object) -> Coefficient:
    if other is vector:
        return abs2(vector)
    other = as_vector(vector, other)
    products = (multiply(c, other[u]) for u, c in vector if other.has_unit(u))
    return reduce(add, products, 0)


def angle(vector: "VectorNumber", other: object) -> float:
    """Angle between two vectors in radians."""
    require_direction(vector)
    if other is vector:
        return 0.0
    other = as_vector(vector, other)
    require_direction(other)

    product = dot_product(vector, other)
    if product == 0:
        return math.pi / 2.0
    return math.acos(clamp_cosine(float(product) / magnitude(vector) / magnitude(other)))


def vector_projection(vector: "VectorNumber", other: object) -> "VectorNumber":
    if other is vector:
        require_direction(vector)
        return vector
    other = as_vector(vector, other)
    require_direction(other)
    return other * dot_product(vector, other) / abs2(other)


def scalar_projection(vector: "VectorNumber", other: object) -> float:
    """Signed length of the projection of ``vector`` onto ``other``."""
    if other is vector:
        require_direction(vector)
        return magnitude(vector)
    other = as_vector(vector, other)
    require_direction(other)
    return float(dot_product(vector, other)) / magnitude(other)


def vector_rejection(vector: "VectorNumber", other: object) -> "VectorNumber":
    """``vector`` minus its projection onto ``other``."""
    if other is vector:
        require_direction(vector)
        return type(vector)(None, vector.options)
    other = as_vector(vector, other)
    require_direction(other)
    return vector - vector_projection(vector, other)


def scalar_rejection(vector: "VectorNumber", other: object) -> float:
    if other is vector:
        require_direction(vector)
        return 0.0
    other = as_vector(vector, other)
    require_direction(other)
    squared = float(abs2(vector)) - float(dot_product(vector, other)) ** 2 / float(abs2(other))
    return math.sqrt(max(squared, 0.0))


__all__ = [
    "abs2",
    "magnitude",
    "p_norm",
    "maximum_norm",
    "subspace_basis",
    "uniform_vector",
    "unit_vector",
    "dot_product",
    "angle",
    "vector_projection",
    "scalar_projection",
    "vector_rejection",
    "scalar_rejection",
]
