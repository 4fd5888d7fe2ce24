# vector_number.core.options

from __future__ import annotations

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional

Options = Mapping[str, Any]

# Only these keys survive into an instance's options; anything else is dropped.
KNOWN_OPTIONS: FrozenSet[str] = frozenset({"mult"})

DEFAULT_OPTIONS: Options = MappingProxyType({
    # text between coefficient and unit, see vector_number.formatting.MULT_STRINGS
    "mult": "dot",
})


def merge_options(explicit: object = None, inherited: Optional[Options] = None) -> Options:
    """
    Build the read-only options mapping for a new instance.

    Known keys of ``explicit`` win over ``inherited``, which in turn falls back
    to :data:`DEFAULT_OPTIONS`. Unknown keys are silently ignored, as is an
    ``explicit`` value that is not a mapping at all.
    """
    base = DEFAULT_OPTIONS if inherited is None else inherited
    if not isinstance(explicit, Mapping):
        return base

    picked = {k: v for k, v in explicit.items() if k in KNOWN_OPTIONS}
    if all(k in base and base[k] == v for k, v in picked.items()):
        return base

    merged = dict(base)
    merged.update(picked)
    return MappingProxyType(merged)


__all__ = ["Options", "KNOWN_OPTIONS", "DEFAULT_OPTIONS", "merge_options"]
