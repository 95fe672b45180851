import pytest

from aimdkit.elements import (
    ATOMIC_NAMES,
    ELEMENTS,
    STANDARD_ATOMIC_WEIGHTS,
    atomic_num_to_mass,
    atomic_symbol_to_num,
)


@pytest.mark.parametrize("symbol,expected", [("H", 1), ("O", 8), ("Og", 118)])
def test_symbol_to_num(symbol, expected):
    assert atomic_symbol_to_num(symbol) == expected


@pytest.mark.parametrize("symbol", ["X", "Xx", "", "h"])
def test_unknown_symbol_gives_zero(symbol):
    assert atomic_symbol_to_num(symbol) == 0


def test_symbol_round_trip():
    for z in range(1, len(ELEMENTS)):
        assert atomic_symbol_to_num(ELEMENTS[z]) == z


def test_tables_are_aligned():
    last = atomic_symbol_to_num("Og")
    assert last == len(ELEMENTS) - 1 == len(ATOMIC_NAMES) - 1
    assert ATOMIC_NAMES[last] == "Oganesson"
    assert atomic_num_to_mass(last) == STANDARD_ATOMIC_WEIGHTS[-1]


def test_mass_values():
    assert atomic_num_to_mass(1) == 1.008
    assert atomic_num_to_mass(8) == 15.999
    assert atomic_num_to_mass(118) == 294.214


@pytest.mark.parametrize("z", [-1, 119, 500])
def test_mass_out_of_range(z):
    with pytest.raises(ValueError):
        atomic_num_to_mass(z)