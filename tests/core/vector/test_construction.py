from decimal import Decimal
from fractions import Fraction

import pytest

from vector_number import (
    DEFAULT_OPTIONS,
    I,
    R,
    NonRealValueError,
    UnhashableUnitError,
    UnsupportedSourceError,
    VectorNumber,
    vec,
)


# -------------------------------
# Source shapes
# -------------------------------

def test_none_gives_zero():
    v = VectorNumber()
    assert v.is_zero()
    assert v.size == 0
    assert VectorNumber(None).to_dict() == {}


def test_empty_sequence_gives_zero():
    assert VectorNumber([]).is_zero()
    assert vec().is_zero()


def test_sequence_accumulates_duplicates():
    v = VectorNumber([4, "death", "death", 13, None])
    assert v.to_dict() == {R: 17, "death": 2, None: 1}
    assert v.size == 3


def test_sequence_of_strings():
    v = VectorNumber(["string", "string", "string", "str"])
    assert v.to_dict() == {"string": 3, "str": 1}


def test_sequence_mixes_numbers_and_objects():
    v = VectorNumber([1, Fraction(1, 4), 2.5j, "a", "a", ("a",), 0, -0.5, complex(1, 2)])
    assert v.size == 4
    assert v.to_dict() == {R: 1.75, I: 4.5, "a": 2, ("a",): 1}


def test_zero_coefficients_are_compacted():
    v = VectorNumber([0j, int])
    assert v.size == 1
    assert v.to_dict() == {int: 1}

    assert VectorNumber([1, -1, "a", -vec("a")]).is_zero()


def test_nested_vector_contributes_its_terms():
    inner = vec(Fraction(15), complex(3, 4.1), "s")
    v = VectorNumber([Fraction(1, 4), inner, "s"])
    assert v.size == 3
    assert v.to_dict() == {R: 18.25, I: 4.1, "s": 2}


def test_objects_including_none_and_bools_become_units():
    marker = object()
    v = VectorNumber([marker, None, True, 1])
    assert v.to_dict() == {marker: 1, None: 1, True: 1, R: 1}
    assert v[True] == 1
    assert v[R] == 1


def test_any_iterable_is_a_sequence():
    v = VectorNumber(x for x in ["a", 1, "a"])
    assert v.to_dict() == {"a": 2, R: 1}


def test_copy_of_vector_number():
    source = vec("you", "are", "cute")
    v = VectorNumber(source)
    assert v is not source
    assert v == source
    assert sorted(v.units()) == ["are", "cute", "you"]


def test_mapping_is_taken_as_terms():
    v = VectorNumber({R: 5, 1: -123, "u r": 0xC001, "enc": 1.337})
    assert v.size == 4
    assert v.to_dict() == {R: 5, 1: -123, "u r": 49153, "enc": 1.337}
    # the integer 1 is just another unit, not the real part
    assert v.real == 5


def test_mapping_zero_coefficients_are_compacted():
    assert VectorNumber({"a": 0, "b": 0.0, "c": Decimal(0)}).is_zero()


def test_mapping_accepts_real_vector_coefficients():
    v = VectorNumber({"a": vec(2), "b": complex(3, 0)})
    assert v.to_dict() == {"a": 2, "b": 3.0}


@pytest.mark.parametrize("bad", [-123j, "b", object(), vec("x"), vec(1, 1j), None])
def test_mapping_rejects_non_real_coefficients(bad):
    with pytest.raises(NonRealValueError):
        VectorNumber({"a": bad})


def test_non_real_error_is_a_value_error():
    with pytest.raises(ValueError):
        VectorNumber({R: 1j})


@pytest.mark.parametrize("source", [object(), 5, 2.5, "abc", b"abc"])
def test_unsupported_sources(source):
    with pytest.raises(UnsupportedSourceError, match=type(source).__name__):
        VectorNumber(source)


def test_unsupported_source_is_a_type_error():
    with pytest.raises(TypeError):
        VectorNumber(object())


def test_unhashable_values_cannot_be_units():
    with pytest.raises(UnhashableUnitError):
        VectorNumber([["a"]])
    with pytest.raises(TypeError):
        VectorNumber([{"a": 1}])


# -------------------------------
# Transform
# -------------------------------

def test_transform_is_applied_to_every_coefficient():
    v = VectorNumber([Fraction(1, 2), "s"], transform=lambda c: c + 1)
    assert v.to_dict() == {R: Fraction(3, 2), "s": 2}


def test_transform_runs_before_compaction():
    v = VectorNumber([1, -1, "s"], transform=lambda c: c + 1)
    assert v.to_dict() == {R: 1, "s": 2}

    w = VectorNumber(["a", "b"], transform=lambda c: c - 1)
    assert w.is_zero()


def test_transform_may_return_real_vector():
    v = VectorNumber([Fraction(1, 2), "s"], transform=lambda c: vec(c + 1))
    assert v.to_dict() == {R: Fraction(3, 2), "s": 2}


@pytest.mark.parametrize("transform", [
    lambda c: complex(1, c),
    lambda c: vec(str(c)),
    lambda c: "a" * int(c),
    lambda c: object(),
])
def test_transform_must_return_real_values(transform):
    with pytest.raises(NonRealValueError, match="transform"):
        VectorNumber([Fraction(1, 2), "s"], transform=transform)


# -------------------------------
# Options
# -------------------------------

def test_default_options():
    assert vec(1).options == DEFAULT_OPTIONS
    assert VectorNumber().options["mult"] == "dot"


def test_explicit_options():
    v = VectorNumber(["a"], {"mult": "cross"})
    assert v.options == {"mult": "cross"}
    assert vec("a", mult="asterisk").options == {"mult": "asterisk"}


def test_unknown_options_are_dropped():
    v = vec("a", colour="red")
    assert v.options == DEFAULT_OPTIONS
    assert "colour" not in v.options


def test_options_are_copied_from_source_vector():
    source = vec("a", mult="cross")
    assert VectorNumber(source).options == {"mult": "cross"}


def test_explicit_options_override_source_vector():
    source = vec("a", mult="cross")
    assert VectorNumber(source, {"mult": "space", "bogus": 1}).options == {"mult": "space"}


def test_first_vector_in_sequence_provides_options():
    first = vec("a", mult="cross")
    second = vec("b", mult="space")
    v = VectorNumber([1, first, second])
    assert v.options == {"mult": "cross"}


def test_sequence_without_vectors_uses_defaults():
    assert VectorNumber([1, "a"]).options == DEFAULT_OPTIONS
