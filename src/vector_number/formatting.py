"""
vector_number.formatting
========================

String representation of vector numbers, e.g. ``3 + 2i - 1.5⋅'a'``.

The real part is shown as a bare number, the imaginary part with an ``i``
suffix, and every other term as ``coefficient<mult>unit``, where ``mult`` is
taken from the vector's ``"mult"`` option unless given explicitly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from vector_number.core.coefficients import Coefficient, is_negative
from vector_number.core.units import I, R

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from vector_number.core.vector import VectorNumber

# Named multiplication symbols for the "mult" option.
MULT_STRINGS: Mapping[str, str] = MappingProxyType({
    "asterisk": "*",       # U+002A
    "cross": "×",          # U+00D7
    "dot": "⋅",            # U+22C5
    "invisible": "\u2062",  # U+2062, zero-width multiplication operator
    "space": " ",
    "none": "",
})


def _resolve_mult(mult: Any) -> str:
    if not isinstance(mult, str):
        raise TypeError(f"mult must be a string, got {type(mult).__name__}")
    return MULT_STRINGS.get(mult, mult)


def _term_to_str(unit: Any, coefficient: Coefficient, mult: str) -> str:
    if unit is R:
        return str(coefficient)
    if unit is I:
        return f"{coefficient}i"
    shown = repr(unit) if isinstance(unit, str) else str(unit)
    return f"{coefficient}{mult}{shown}"


def format_vector(vector: "VectorNumber", mult: Optional[Any] = None) -> str:
    """
    Render ``vector`` as a sum of terms.

    Parameters
    ----------
    vector : VectorNumber
    mult : str, optional
        One of :data:`MULT_STRINGS` keys or any literal string to put between a
        coefficient and its unit. Defaults to the vector's ``"mult"`` option.

    Raises
    ------
    TypeError
        If ``mult`` is not a string.
    """
    joiner = _resolve_mult(vector.options.get("mult", "dot") if mult is None else mult)
    if vector.is_zero():
        return "0"

    result = ""
    for index, (unit, coefficient) in enumerate(vector):
        negative = is_negative(coefficient)
        if index == 0:
            result += "-" if negative else ""
        else:
            result += " - " if negative else " + "
        result += _term_to_str(unit, abs(coefficient), joiner)
    return result


def format_spec(vector: "VectorNumber", spec: str) -> str:
    """
    Back end of ``format(vector, spec)``.

    Supported specifiers
    --------------------
    "" (empty)
        Use the vector's own ``"mult"`` option.
    any key of MULT_STRINGS
        Use that multiplication symbol, e.g. ``f"{v:asterisk}"`` -> ``2*'a'``.
    """
    spec = (spec or "").strip()
    if spec == "":
        return format_vector(vector)
    if spec in MULT_STRINGS:
        return format_vector(vector, spec)
    raise ValueError(f"Unknown format spec; use '' or one of {', '.join(MULT_STRINGS)}")


__all__ = ["MULT_STRINGS", "format_vector", "format_spec"]
