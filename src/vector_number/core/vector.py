"""
vector_number.core.vector
=========================

Defines the `VectorNumber` class: an immutable sum of ``coefficient × unit``
terms, where a unit may be any hashable object.

This module provides:
- Construction from ``None``, iterables of arbitrary values, unit→coefficient
  mappings and other vector numbers, with duplicate units merged by addition
  and zero coefficients compacted away.
- Arithmetic: negation, addition and subtraction of anything, and scalar
  multiplication and division (true, float, floor, modulo, remainder).
- Queries, value/strict equality, ordering of real vectors and conversions to
  Python's numeric types.

Real and imaginary parts live under the reserved units `R` and `I`, so a
vector holding only those behaves like a plain real or complex number.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, localcontext
from enum import Enum
from fractions import Fraction
from typing import (
    Any,
    Callable,
    Dict,
    ItemsView,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from vector_number.core import coefficients as coef
from vector_number.core.coefficients import Coefficient
from vector_number.core.errors import (
    FrozenVectorError,
    NonRealOperandError,
    NonRealValueError,
    UnhashableUnitError,
    UnsupportedSourceError,
)
from vector_number.core.options import Options, merge_options
from vector_number.core.units import I, R, UNIT

Transform = Callable[[Coefficient], Any]
Terms = Dict[Any, Coefficient]


class _Kind(Enum):
    """How a single value is folded into the terms being built."""

    VECTOR = "vector"
    REAL = "real"
    COMPLEX = "complex"
    ITSELF = "itself"


def _kind_of(value: object) -> _Kind:
    if isinstance(value, VectorNumber):
        return _Kind.VECTOR
    if coef.is_real_scalar(value):
        return _Kind.REAL
    if coef.is_complex_like(value):
        return _Kind.REAL if value.imag == 0 else _Kind.COMPLEX  # type: ignore[attr-defined]
    return _Kind.ITSELF


def _accumulate(terms: Terms, unit: Any, value: Coefficient) -> None:
    terms[unit] = coef.add(terms.get(unit, 0), value)


def _merge_terms(terms: Terms, source: Iterable[Tuple[Any, Any]]) -> None:
    for unit, value in source:
        if not coef.is_real_number(value):
            raise NonRealValueError(f"{value!r} is not a real number")
        _accumulate(terms, unit, coef.real_value(value))


def _fold_value(terms: Terms, value: Any) -> None:
    kind = _kind_of(value)
    if kind is _Kind.VECTOR:
        _merge_terms(terms, value.items())
    elif kind is _Kind.REAL:
        _accumulate(terms, R, coef.real_value(value))
    elif kind is _Kind.COMPLEX:
        _accumulate(terms, R, value.real)
        _accumulate(terms, I, value.imag)
    else:
        try:
            hash(value)
        except TypeError as err:
            raise UnhashableUnitError(
                f"unhashable type can't be used as a unit: {type(value).__name__}"
            ) from err
        _accumulate(terms, value, 1)


def _build_terms(values: object) -> Tuple[Terms, Optional[Options]]:
    """Return the raw (uncompacted) terms for ``values`` and the options to inherit."""
    terms: Terms = {}
    if values is None:
        return terms, None

    if isinstance(values, VectorNumber):
        return dict(values.items()), values.options

    if isinstance(values, Mapping):
        _merge_terms(terms, values.items())
        return terms, None

    # strings are iterable, but a bare string is a unit, not a list of letters
    if isinstance(values, Iterable) and not isinstance(values, (str, bytes, bytearray)):
        inherited: Optional[Options] = None
        for value in values:
            if inherited is None and isinstance(value, VectorNumber):
                inherited = value.options
            _fold_value(terms, value)
        return terms, inherited

    raise UnsupportedSourceError(f"unsupported type for values: {type(values).__name__}")


def _apply_transform(terms: Terms, transform: Transform) -> Terms:
    result: Terms = {}
    for unit, value in terms.items():
        new_value = transform(value)
        if not coef.is_real_number(new_value):
            raise NonRealValueError(
                f"transform returned non-real value {new_value!r} for coefficient {value!r}"
            )
        result[unit] = coef.real_value(new_value)
    return result


class VectorNumber(numbers.Number):
    """
    A number made of any amount of ``coefficient × unit`` terms.

    Instances are immutable: every operation returns a new vector. Zero
    coefficients are never stored, so ``size`` counts non-zero terms only.

    Parameters
    ----------
    values : None, iterable, mapping or VectorNumber
        - ``None``: the zero vector.
        - iterable: every item is added in turn. Real numbers go to the real
          unit `R`, complex numbers are split between `R` and `I`, vector
          numbers contribute all their terms, and any other object becomes
          its own unit with coefficient 1.
        - mapping: ready-made ``unit -> coefficient`` terms; every coefficient
          must be a real number.
        - VectorNumber: copied together with its options.
    options : mapping, optional
        Known keys override the inherited options (those of the first vector
        number in ``values``, or the defaults). Unknown keys are ignored.
    transform : callable, optional
        Applied to every coefficient before zeros are compacted; must return a
        real number.

    Raises
    ------
    UnsupportedSourceError
        If ``values`` is not one of the supported shapes.
    NonRealValueError
        If a mapping coefficient or a transform result is not real.
    """

    __slots__ = ("_data", "_options", "_size")

    _data: Terms
    _options: Options
    _size: int

    def __init__(
        self,
        values: object = None,
        options: Optional[Mapping[str, Any]] = None,
        transform: Optional[Transform] = None,
    ) -> None:
        if hasattr(self, "_data"):
            raise FrozenVectorError("VectorNumber is already initialized")

        terms, inherited = _build_terms(values)
        if transform is not None:
            terms = _apply_transform(terms, transform)
        data = {unit: value for unit, value in terms.items() if value != 0}

        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_size", len(data))
        object.__setattr__(self, "_options", merge_options(options, inherited))

    @classmethod
    def of(cls, *values: Any, **options: Any) -> "VectorNumber":
        """Create a vector from positional values, e.g. ``VectorNumber.of(5, "a", "a")``."""
        return cls(values, options)

    # --- Immutability ---
    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenVectorError(f"cannot assign to attribute {name!r} of a VectorNumber")

    def __delattr__(self, name: str) -> None:
        raise FrozenVectorError(f"cannot delete attribute {name!r} of a VectorNumber")

    def __copy__(self) -> "VectorNumber":
        return self

    def __deepcopy__(self, memo: dict) -> "VectorNumber":
        return self

    def __reduce__(self) -> tuple:
        return (type(self), (dict(self._data), dict(self._options)))

    def _new(self, values: object, transform: Optional[Transform] = None) -> "VectorNumber":
        """Derive a new vector that keeps this vector's options."""
        return type(self)(values, self._options, transform)

    # --- Terms (read-only) ---
    @property
    def size(self) -> int:
        return self._size

    @property
    def options(self) -> Options:
        return self._options

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[Any, Coefficient]]:
        """Iterate over ``(unit, coefficient)`` pairs."""
        return iter(self._data.items())

    def items(self) -> ItemsView[Any, Coefficient]:
        return self._data.items()

    def units(self) -> List[Any]:
        return list(self._data)

    def coefficients(self) -> List[Coefficient]:
        return list(self._data.values())

    def __getitem__(self, unit: Any) -> Coefficient:
        # absent units have a zero coefficient
        return self._data.get(unit, 0)

    def get(self, unit: Any) -> Coefficient:
        return self[unit]

    def has_unit(self, unit: Any) -> bool:
        return unit in self._data

    def __contains__(self, unit: Any) -> bool:
        return self.has_unit(unit)

    def to_dict(self) -> Dict[Any, Coefficient]:
        """Return a new ``dict`` of ``unit -> coefficient``; mutating it does not affect the vector."""
        return dict(self._data)

    # --- Queries ---
    def is_zero(self) -> bool:
        return self._size == 0

    def nonzero(self) -> Optional["VectorNumber"]:
        return None if self.is_zero() else self

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_numeric(self, dimensions: int = 2) -> bool:
        """
        Whether the vector is a plain number in the first ``dimensions`` numeric units.

        ``0`` accepts only zero, ``1`` real numbers, ``2`` complex numbers.
        """
        if dimensions < 0:
            raise ValueError("`dimensions` must be non-negative")
        present = sum(1 for unit in UNIT[:dimensions] if unit in self._data)
        return self._size <= dimensions and present == self._size

    def is_nonnumeric(self, dimensions: int = 2) -> bool:
        return not self.is_numeric(dimensions)

    def is_finite(self) -> bool:
        return all(coef.is_finite(value) for value in self._data.values())

    def infinite(self) -> Optional[int]:
        """``1`` if any coefficient is infinite (or NaN), ``None`` otherwise."""
        return None if self.is_finite() else 1

    def is_positive(self) -> bool:
        return not self.is_zero() and all(coef.is_positive(v) for v in self._data.values())

    def is_negative(self) -> bool:
        return not self.is_zero() and all(coef.is_negative(v) for v in self._data.values())

    # --- Equality & ordering ---
    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if isinstance(other, VectorNumber):
            return self._size == other._size and self._data == other._data
        if coef.is_number(other):
            return (
                self.is_numeric(2)
                and self.real == other.real  # type: ignore[attr-defined]
                and self.imag == other.imag  # type: ignore[attr-defined]
            )
        return NotImplemented

    def __hash__(self) -> int:
        # equal to plain numbers, so hash like them
        if self.is_numeric(2):
            real, imag = self.real, self.imag
            if imag == 0:
                return hash(real)
            try:
                return hash(complex(float(real), float(imag)))
            except OverflowError:
                # too large for a float, so no complex can be equal to it
                return hash(frozenset(self._data.items()))
        return hash(frozenset(self._data.items()))

    def eql(self, other: object) -> bool:
        """Strict equality: same units and coefficients of the same types."""
        if other is self:
            return True
        if not isinstance(other, VectorNumber) or self._size != other._size:
            return False
        return all(
            unit in other._data and coef.same_coefficient(value, other._data[unit])
            for unit, value in self._data.items()
        )

    def compare(self, other: object) -> Optional[int]:
        """
        Compare on the real number line.

        Returns -1, 0 or 1, or ``None`` if either side is not a real number.
        """
        if not self.is_numeric(1):
            return None
        if isinstance(other, VectorNumber):
            return coef.compare(self.real, other.real) if other.is_numeric(1) else None
        if coef.is_number(other) and other.imag == 0:  # type: ignore[attr-defined]
            return coef.compare(self.real, other.real)  # type: ignore[attr-defined]
        return None

    def __lt__(self, other: object) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result >= 0

    # --- Arithmetic ---
    def coerce(self, other: object) -> Tuple["VectorNumber", "VectorNumber"]:
        """Return ``(other as a VectorNumber, self)``; anything can be promoted."""
        if isinstance(other, VectorNumber):
            return other, self
        return self._new([other]), self

    def __pos__(self) -> "VectorNumber":
        return self

    def __neg__(self) -> "VectorNumber":
        return self._new(self, coef.negate)

    def __add__(self, other: object) -> "VectorNumber":
        return self._new([self, other])

    def __radd__(self, other: object) -> "VectorNumber":
        return self._new([other, self])

    def __sub__(self, other: object) -> "VectorNumber":
        promoted, _ = self.coerce(other)
        return self + (-promoted)

    def __rsub__(self, other: object) -> "VectorNumber":
        promoted, _ = self.coerce(other)
        return promoted - self

    def __mul__(self, other: object) -> "VectorNumber":
        if coef.is_real_number(other):
            factor = coef.real_value(other)
            return self._new(self, lambda value: coef.multiply(value, factor))
        if isinstance(other, VectorNumber) and self.is_numeric(1):
            # scalar-like self: let the other vector scale itself
            return other * self
        raise NonRealOperandError(f"can't multiply {self} and {other!r}")

    def __rmul__(self, other: object) -> "VectorNumber":
        if not coef.is_real_number(other):
            raise NonRealOperandError(f"can't multiply {other!r} and {self}")
        return self * other

    def _check_divisor(self, other: object) -> Coefficient:
        if not coef.is_real_number(other):
            raise NonRealOperandError(f"can't divide {self} by {other!r}")
        divisor = coef.real_value(other)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        return divisor

    def __truediv__(self, other: object) -> "VectorNumber":
        divisor = self._check_divisor(other)
        return self._new(self, lambda value: coef.true_divide(value, divisor))

    quo = __truediv__

    def fdiv(self, other: object) -> "VectorNumber":
        """Divide every coefficient, producing ``float`` coefficients."""
        divisor = self._check_divisor(other)
        return self._new(self, lambda value: coef.float_divide(value, divisor))

    def __floordiv__(self, other: object) -> "VectorNumber":
        divisor = self._check_divisor(other)
        return self._new(self, lambda value: coef.floor_divide(value, divisor))

    div = __floordiv__

    def __mod__(self, other: object) -> "VectorNumber":
        divisor = self._check_divisor(other)
        return self._new(self, lambda value: coef.modulo(value, divisor))

    modulo = __mod__

    def __divmod__(self, other: object) -> Tuple["VectorNumber", "VectorNumber"]:
        return self // other, self % other

    def remainder(self, other: object) -> "VectorNumber":
        """Like ``%``, but the remainder takes the sign of each coefficient."""
        divisor = self._check_divisor(other)
        return self._new(self, lambda value: coef.remainder(value, divisor))

    def __rtruediv__(self, other: object) -> "VectorNumber":
        promoted, _ = self.coerce(other)
        return promoted / self

    def __rfloordiv__(self, other: object) -> "VectorNumber":
        promoted, _ = self.coerce(other)
        return promoted // self

    def __rmod__(self, other: object) -> "VectorNumber":
        promoted, _ = self.coerce(other)
        return promoted % self

    def __rdivmod__(self, other: object) -> Tuple["VectorNumber", "VectorNumber"]:
        promoted, _ = self.coerce(other)
        return divmod(promoted, self)

    # --- Rounding (elementwise) ---
    def __trunc__(self) -> "VectorNumber":
        return self._new(self, math.trunc)

    def __floor__(self) -> "VectorNumber":
        return self._new(self, math.floor)

    def __ceil__(self) -> "VectorNumber":
        return self._new(self, math.ceil)

    def __round__(self, ndigits: Optional[int] = None) -> "VectorNumber":
        return self._new(self, lambda value: round(value, ndigits))

    # --- Conversions ---
    @property
    def real(self) -> Coefficient:
        return self._data.get(R, 0)

    @property
    def imag(self) -> Coefficient:
        return self._data.get(I, 0)

    imaginary = imag

    def _ensure_real(self, target: str) -> None:
        if not self.is_numeric(1):
            raise NonRealValueError(f"can't convert {self} into {target}")

    def __int__(self) -> int:
        self._ensure_real("int")
        return int(self.real)

    def __float__(self) -> float:
        self._ensure_real("float")
        return float(self.real)

    def __complex__(self) -> complex:
        if not self.is_numeric(2):
            raise NonRealValueError(f"can't convert {self} into complex")
        return complex(float(self.real), float(self.imag))

    def to_fraction(self) -> Fraction:
        self._ensure_real("Fraction")
        return Fraction(self.real)

    def to_decimal(self, ndigits: Optional[int] = None) -> Decimal:
        """Real part as a ``Decimal``, rounded to ``ndigits`` significant digits if given."""
        self._ensure_real("Decimal")
        if ndigits is None:
            return coef.to_decimal(self.real)
        with localcontext() as ctx:
            ctx.prec = ndigits
            return +coef.to_decimal(self.real)

    # --- Display ---
    def __str__(self) -> str:
        from vector_number.formatting import format_vector
        return format_vector(self)

    def __repr__(self) -> str:
        return f"({self})"

    def __format__(self, spec: str) -> str:
        from vector_number.formatting import format_spec
        return format_spec(self, spec)

    # --- Vector operations ---
    # Implemented in vector_number.geometry / vector_number.similarity on top of
    # the read-only surface above; imported lazily to avoid a cycle.
    def __abs__(self) -> float:
        return self.magnitude()

    def magnitude(self) -> float:
        from vector_number.geometry import magnitude
        return magnitude(self)

    def abs2(self) -> Coefficient:
        from vector_number.geometry import abs2
        return abs2(self)

    def p_norm(self, p: float) -> float:
        from vector_number.geometry import p_norm
        return p_norm(self, p)

    def maximum_norm(self) -> Coefficient:
        from vector_number.geometry import maximum_norm
        return maximum_norm(self)

    infinity_norm = maximum_norm

    def subspace_basis(self) -> List["VectorNumber"]:
        from vector_number.geometry import subspace_basis
        return subspace_basis(self)

    def uniform_vector(self) -> "VectorNumber":
        from vector_number.geometry import uniform_vector
        return uniform_vector(self)

    def unit_vector(self) -> "VectorNumber":
        from vector_number.geometry import unit_vector
        return unit_vector(self)

    def dot_product(self, other: object) -> Coefficient:
        from vector_number.geometry import dot_product
        return dot_product(self, other)

    inner_product = dot_product

    def angle(self, other: object) -> float:
        from vector_number.geometry import angle
        return angle(self, other)

    def vector_projection(self, other: object) -> "VectorNumber":
        from vector_number.geometry import vector_projection
        return vector_projection(self, other)

    def scalar_projection(self, other: object) -> float:
        from vector_number.geometry import scalar_projection
        return scalar_projection(self, other)

    def vector_rejection(self, other: object) -> "VectorNumber":
        from vector_number.geometry import vector_rejection
        return vector_rejection(self, other)

    def scalar_rejection(self, other: object) -> float:
        from vector_number.geometry import scalar_rejection
        return scalar_rejection(self, other)

    def cosine(self, other: object) -> float:
        from vector_number.similarity import cosine
        return cosine(self, other)

    cosine_similarity = cosine

    def jaccard_index(self, other: object) -> Fraction:
        from vector_number.similarity import jaccard_index
        return jaccard_index(self, other)

    def jaccard_similarity(self, other: object) -> Coefficient:
        from vector_number.similarity import jaccard_similarity
        return jaccard_similarity(self, other)


def vec(*values: Any, **options: Any) -> VectorNumber:
    """Shorthand for :meth:`VectorNumber.of`."""
    return VectorNumber.of(*values, **options)


__all__ = ["VectorNumber", "vec"]
