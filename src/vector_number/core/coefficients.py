"""
vector_number.core.coefficients
===============================

The coefficient model: which values may be stored as coefficients, and how two
coefficients of possibly different representations are combined.

A coefficient is one of ``int``, ``Fraction``, ``float`` or ``Decimal``. When
two coefficients meet, Python's own numeric tower decides the result type for
int/Fraction/float; a ``Decimal`` is preserved whenever one is involved, and its
partner is converted to a ``Decimal`` first (``Decimal`` refuses to mix with
``float`` and ``Fraction`` on its own).
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Optional, Tuple, TypeAlias, Union

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from vector_number.core.vector import VectorNumber

Coefficient: TypeAlias = Union[int, Fraction, float, Decimal]

REAL_TYPES: Tuple[type, ...] = (int, Fraction, float, Decimal)


def _vector_type() -> type["VectorNumber"]:
    # Local import avoids a cycle: vector.py builds on this module.
    from vector_number.core.vector import VectorNumber
    return VectorNumber


# --- Classification ----------------------------------------------------------

def is_real_scalar(value: object) -> bool:
    """Whether ``value`` is a plain coefficient (bools are not numbers here)."""
    return isinstance(value, REAL_TYPES) and not isinstance(value, bool)


def is_complex_like(value: object) -> bool:
    """Whether ``value`` is a complex-shaped number, e.g. ``complex`` or numpy complex."""
    return (
        isinstance(value, numbers.Complex)
        and not isinstance(value, bool)
        and not is_real_scalar(value)
    )


def is_real_number(value: object) -> bool:
    """
    Whether ``value`` may be used as a coefficient, multiplier or divisor.

    Accepts real scalars, complex-shaped numbers with a zero imaginary part and
    VectorNumbers that are real (``is_numeric(1)``).
    """
    if is_real_scalar(value):
        return True
    if is_complex_like(value):
        return value.imag == 0  # type: ignore[attr-defined]
    if isinstance(value, _vector_type()):
        return value.is_numeric(1)
    return False


def real_value(value: Any) -> Coefficient:
    """Unwrap a value accepted by :func:`is_real_number` into a plain coefficient."""
    if is_real_scalar(value):
        return value
    # complex-like or VectorNumber; both expose `.real`
    return value.real


def is_number(value: object) -> bool:
    """Whether ``value`` is a scalar a VectorNumber may compare equal to."""
    return isinstance(value, (numbers.Number, Decimal)) and not isinstance(value, bool)


# --- Promotion ---------------------------------------------------------------

def to_decimal(value: Coefficient) -> Decimal:
    """Convert a coefficient to ``Decimal`` under the active decimal context."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # shortest repr round-trips, so 0.1 becomes Decimal("0.1")
        return Decimal(repr(value))
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(value)


def promote(a: Coefficient, b: Coefficient) -> Tuple[Coefficient, Coefficient]:
    """Return ``(a, b)`` converted to representations that can be combined."""
    if isinstance(a, Decimal) or isinstance(b, Decimal):
        return to_decimal(a), to_decimal(b)
    return a, b


# --- Elementwise arithmetic --------------------------------------------------

def add(a: Coefficient, b: Coefficient) -> Coefficient:
    x, y = promote(a, b)
    return x + y


def negate(a: Coefficient) -> Coefficient:
    return -a


def multiply(a: Coefficient, b: Coefficient) -> Coefficient:
    x, y = promote(a, b)
    return x * y


def true_divide(a: Coefficient, b: Coefficient) -> Coefficient:
    """Divide without ever truncating: an ``int`` divisor becomes a ``Fraction``."""
    if isinstance(b, int):
        b = Fraction(b)
    x, y = promote(a, b)
    return x / y


def float_divide(a: Coefficient, b: Coefficient) -> float:
    return float(true_divide(a, b))


def _decimal_floor_divmod(x: Decimal, y: Decimal) -> Tuple[Decimal, Decimal]:
    # Decimal // and % truncate toward zero; shift to floor semantics
    quotient, rest = divmod(x, y)
    if rest.is_finite() and rest != 0 and (rest < 0) != (y < 0):
        quotient -= 1
        rest += y
    return quotient, rest


def floor_divide(a: Coefficient, b: Coefficient) -> Coefficient:
    x, y = promote(a, b)
    if isinstance(x, Decimal):
        return _decimal_floor_divmod(x, y)[0]
    return x // y


def modulo(a: Coefficient, b: Coefficient) -> Coefficient:
    """Remainder of floor division; the result has the sign of ``b``."""
    x, y = promote(a, b)
    if isinstance(x, Decimal):
        return _decimal_floor_divmod(x, y)[1]
    return x % y


def remainder(a: Coefficient, b: Coefficient) -> Coefficient:
    """
    Remainder of truncating division: ``a - b * trunc(a / b)``.

    The result has the sign of ``a`` (``modulo`` follows the sign of ``b``).
    """
    x, y = promote(a, b)
    if isinstance(x, Decimal):
        # Decimal's % already truncates
        return x % y
    if isinstance(x, float) or isinstance(y, float):
        if not math.isfinite(x):
            return math.nan
        return math.fmod(x, y)
    return x - y * math.trunc(Fraction(x) / y)


# --- Predicates --------------------------------------------------------------

def is_nan(value: Coefficient) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def is_finite(value: Coefficient) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def is_positive(value: Coefficient) -> bool:
    return not is_nan(value) and value > 0


def is_negative(value: Coefficient) -> bool:
    return not is_nan(value) and value < 0


def compare(a: Coefficient, b: Coefficient) -> Optional[int]:
    """Three-way comparison; ``None`` when either side is NaN."""
    if is_nan(a) or is_nan(b):
        return None
    if a == b:
        return 0
    return -1 if a < b else 1


def same_coefficient(a: Coefficient, b: Coefficient) -> bool:
    """Type-preserving equality: ``1`` and ``1.0`` are different coefficients."""
    return type(a) is type(b) and a == b


__all__ = [
    "Coefficient",
    "REAL_TYPES",
    "is_real_scalar",
    "is_complex_like",
    "is_real_number",
    "real_value",
    "is_number",
    "to_decimal",
    "promote",
    "add",
    "negate",
    "multiply",
    "true_divide",
    "float_divide",
    "floor_divide",
    "modulo",
    "remainder",
    "is_nan",
    "is_finite",
    "is_positive",
    "is_negative",
    "compare",
    "same_coefficient",
]
