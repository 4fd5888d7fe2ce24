# tests/conftest.py
import pytest

from vector_number import VectorNumber, vec


@pytest.fixture
def zero():
    return VectorNumber()


@pytest.fixture
def real_number():
    return vec(2.5)


@pytest.fixture
def composite():
    """Two-term vector used across the geometry and similarity tests."""
    return vec(2, "a")


@pytest.fixture(params=["zero", "fraction", "composite", "single_unit"])
def any_vector(request):
    return {
        "zero": VectorNumber([complex(0, 0), 0.0, 1, -1]),
        "fraction": vec(VectorNumber([-3]) / 2),
        "composite": vec("y", ("a",), 5),
        "single_unit": vec("f"),
    }[request.param]
