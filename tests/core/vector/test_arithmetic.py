from decimal import Decimal
from fractions import Fraction

import pytest

from vector_number import I, R, NonRealOperandError, VectorNumber, vec


# -------------------------------
# Negation, addition, subtraction
# -------------------------------

def test_unary_plus_returns_same_instance():
    v = vec(1, "a")
    assert +v is v


def test_negation():
    v = VectorNumber({R: 1, "a": -Fraction(1, 2), I: 2.5})
    assert (-v).to_dict() == {R: -1, "a": Fraction(1, 2), I: -2.5}
    assert -(-v) == v
    assert (-VectorNumber()).is_zero()


def test_add_anything():
    assert (vec(5) + "string").to_dict() == {R: 5, "string": 1}
    assert (vec("a") + vec("a", 2)).to_dict() == {"a": 2, R: 2}
    assert (vec("a") + 2j).to_dict() == {"a": 1, I: 2.0}


def test_reflected_add():
    assert (5 + vec("a")).to_dict() == {R: 5, "a": 1}
    assert (Fraction(1, 2) + vec(Fraction(1, 2))).to_dict() == {R: 1}
    assert ("b" + vec("a")).to_dict() == {"b": 1, "a": 1}


def test_add_then_subtract_scalar():
    v = vec(5) + vec("string") - 0.5
    assert v.to_dict() == {R: 4.5, "string": 1}


def test_subtract_anything():
    assert (vec("a") - "a").is_zero()
    assert (vec("a", "b") - vec("b")).to_dict() == {"a": 1}
    assert (vec(3) - 5).to_dict() == {R: -2}


def test_reflected_subtract():
    assert (10 - vec(3)) == vec(7)
    assert ("a" - vec("b")).to_dict() == {"a": 1, "b": -1}


def test_addition_keeps_exact_coefficients():
    v = vec(Fraction(1, 3)) + 1
    assert isinstance(v.real, Fraction)
    assert v.real == Fraction(4, 3)

    d = vec(Decimal("0.1")) + 0.2
    assert isinstance(d.real, Decimal)
    assert d.real == Decimal("0.3")


# -------------------------------
# Scalar multiplication
# -------------------------------

def test_multiply_by_scalar():
    v = vec(8) * 2 + vec("a") * 0.3
    assert v.to_dict() == {R: 16, "a": 0.3}


@pytest.mark.parametrize("factor", [3, Fraction(3), 3.0, Decimal(3), complex(3, 0), vec(3)])
def test_multiply_by_any_real(factor):
    assert vec("a", "a") * factor == vec("a") * 6
    assert factor * vec("a", "a") == vec("a") * 6


def test_multiply_by_zero_gives_zero():
    assert (vec(1, "a") * 0).is_zero()
    assert (0 * vec(1, "a")).is_zero()
    assert (vec(1, "a") * VectorNumber()).is_zero()


def test_multiply_decimal_keeps_decimal():
    v = vec("a") * Decimal("1.5")
    assert isinstance(v["a"], Decimal)
    assert v["a"] == Decimal("1.5")


def test_real_vector_times_vector_swaps_operands():
    assert (vec(2) * vec("a")).to_dict() == {"a": 2}
    assert (vec("a") * vec(2)).to_dict() == {"a": 2}


@pytest.mark.parametrize("factor", ["b", vec("b"), complex(1, 1), vec(1, 1j), object()])
def test_multiply_by_non_real_raises(factor):
    with pytest.raises(NonRealOperandError, match="can't multiply"):
        vec("a") * factor


def test_multiply_error_is_a_value_error():
    with pytest.raises(ValueError):
        vec("a") * vec("b")


# -------------------------------
# Options propagation
# -------------------------------

@pytest.mark.parametrize("operation", [
    lambda v: -v,
    lambda v: v + 1,
    lambda v: 1 + v,
    lambda v: v - "a",
    lambda v: "a" - v,
    lambda v: v * 2,
    lambda v: 2 * v,
    lambda v: v / 2,
    lambda v: v.fdiv(2),
    lambda v: v // 2,
    lambda v: v % 2,
    lambda v: v.remainder(2),
    lambda v: v + vec("z"),
    lambda v: round(v),
])
def test_derived_vectors_keep_options(operation):
    v = vec(3, "a", mult="cross")
    assert operation(v).options == {"mult": "cross"}


def test_left_operand_decides_options():
    crossed = vec("a", mult="cross")
    plain = vec(1)
    assert (crossed + plain).options["mult"] == "cross"
    assert (plain + crossed).options["mult"] == "dot"


@pytest.mark.parametrize("factor", ["b", complex(1, 1), object(), None])
def test_reflected_multiply_by_non_real_raises(factor):
    with pytest.raises(NonRealOperandError, match="can't multiply"):
        factor * vec(3)


def test_multiplication_rejects_strings_in_both_orders():
    with pytest.raises(NonRealOperandError):
        vec(3) * "a"
    with pytest.raises(NonRealOperandError):
        "a" * vec(3)
