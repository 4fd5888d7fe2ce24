"""
vector_number.core.utils
========================

Helpers shared by the vector operations in `vector_number.geometry` and
`vector_number.similarity`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from vector_number.core.vector import VectorNumber


def as_vector(vector: "VectorNumber", other: object) -> "VectorNumber":
    """Promote ``other`` to a vector number carrying ``vector``'s options."""
    promoted, _ = vector.coerce(other)
    return promoted


def require_direction(vector: "VectorNumber") -> None:
    """Raise ``ZeroDivisionError`` for the zero vector, which has no direction."""
    if vector.is_zero():
        raise ZeroDivisionError("direction is undefined for a zero vector")


def clamp_cosine(value: float) -> float:
    # rounding can push a cosine slightly outside [-1, 1]
    return max(-1.0, min(1.0, value))


__all__ = ["as_vector", "require_direction", "clamp_cosine"]
