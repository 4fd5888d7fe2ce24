"""
vector_number: A Python library for adding together anything.

A `VectorNumber` generalizes real and complex numbers to a sparse sum of
``coefficient × unit`` terms, where the unit may be any hashable object:

>>> from vector_number import vec
>>> vec(4, "death", "death", 13)
(17 + 2⋅'death')

Coefficients stay exact where the inputs are (``int``, ``Fraction``,
``Decimal``), and vectors that hold only a real or imaginary part compare,
hash and convert like ordinary numbers.
"""

from importlib import metadata as _metadata

from vector_number.core.errors import (
    FrozenVectorError,
    NonRealOperandError,
    NonRealValueError,
    UnhashableUnitError,
    UnsupportedSourceError,
    VectorNumberError,
)
from vector_number.core.options import DEFAULT_OPTIONS, KNOWN_OPTIONS
from vector_number.core.units import I, R, UNIT, SpecialUnit, numeric_unit
from vector_number.core.vector import VectorNumber, vec
from vector_number.formatting import MULT_STRINGS


__author__ = "vector-number contributors"
__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("vector-number")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "VectorNumber",
    "vec",
    "R",
    "I",
    "UNIT",
    "SpecialUnit",
    "numeric_unit",
    "DEFAULT_OPTIONS",
    "KNOWN_OPTIONS",
    "MULT_STRINGS",
    "VectorNumberError",
    "UnsupportedSourceError",
    "UnhashableUnitError",
    "NonRealValueError",
    "NonRealOperandError",
    "FrozenVectorError",
]
