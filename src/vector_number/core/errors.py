# vector_number.core.errors

from __future__ import annotations


class VectorNumberError(Exception):
    """Marker base for every error raised by vector_number itself."""


class UnsupportedSourceError(VectorNumberError, TypeError):
    """Construction source is not None, an iterable, a mapping or a VectorNumber."""


class UnhashableUnitError(VectorNumberError, TypeError):
    """A value that would become a unit cannot be used as a mapping key."""


class NonRealValueError(VectorNumberError, ValueError):
    """A coefficient (or a conversion target) is not a real number."""


class NonRealOperandError(NonRealValueError):
    """Multiplier or divisor is not a real scalar or a real VectorNumber."""


class FrozenVectorError(VectorNumberError, AttributeError):
    """Attempt to modify or unfreeze an immutable VectorNumber."""


__all__ = [
    "VectorNumberError",
    "UnsupportedSourceError",
    "UnhashableUnitError",
    "NonRealValueError",
    "NonRealOperandError",
    "FrozenVectorError",
]
