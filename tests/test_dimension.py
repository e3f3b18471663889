import pytest

from exact_units.units import OHM, Dimension

L = Dimension.LENGTH
T = Dimension.TIME


def test_dimension_multiplication():
    assert L * L == Dimension({"L": 2})
    assert str(L * L) == "[L]^2"


def test_dimension_division():
    assert str(L / T) == "[L].[T]^-1"
    assert L / L == Dimension.NONE
    assert (L / L).is_dimensionless()


def test_dimension_zero_exponent_removed():
    assert Dimension({"L": 1, "T": 0}).exponents == {"L": 1}


def test_dimension_str_uses_base_order():
    assert str(OHM.dimension) == "[L]^2.[M].[T]^-3.[I]^-2"
    assert str(Dimension.NONE) == "[1]"


def test_dimension_inverse_and_root():
    assert L.inverse() == L**-1
    assert Dimension({"L": 2}).root(2) == L
    with pytest.raises(ValueError):
        L.root(2)


def test_dimension_equality_and_hash():
    assert Dimension({"L": 1, "T": -1}) == L / T
    assert hash(Dimension({"L": 1, "T": -1})) == hash(L / T)
    assert L != T
    assert L != "L"
