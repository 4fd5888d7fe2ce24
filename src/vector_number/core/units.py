# vector_number.core.units

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True, slots=True, eq=False)
class SpecialUnit:
    """
    A reserved unit, compared by identity only.

    Two special units with the same attributes are still different units, so
    nothing a caller constructs can collide with the reserved real/imaginary
    units.

    Attributes
    ----------
    key : object
        Short identifier shown by ``repr`` (e.g. ``1`` -> ``unit/1``).
    text : str
        Text used when the unit is displayed next to a coefficient.
    """

    key: Any
    text: str

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"unit/{self.key}"

    def __reduce__(self) -> str | tuple:
        # The reserved units must stay the very same objects after unpickling.
        for name in ("R", "I"):
            if globals().get(name) is self:
                return name
        return (SpecialUnit, (self.key, self.text))


# --- Public constants --------------------------------------------------------

R: SpecialUnit = SpecialUnit(1, "")
I: SpecialUnit = SpecialUnit("i", "i")

# Numeric dimensions in order: UNIT[0] is the real unit, UNIT[1] the imaginary one.
UNIT: Tuple[SpecialUnit, ...] = (R, I)


def numeric_unit(unit: object) -> bool:
    """Whether ``unit`` is one of the reserved numeric units."""
    return any(unit is u for u in UNIT)


__all__ = ["SpecialUnit", "R", "I", "UNIT", "numeric_unit"]
