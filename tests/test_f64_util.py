import pytest

from aimdkit.f64_util import compare_f64_values, round_f64_to_string


def test_example_from_documentation():
    assert round_f64_to_string(-7.49646977125e01, 10) == "-7.4964697713e+01"


def test_tie_rounds_away_from_zero():
    assert round_f64_to_string(2.675, 2) == "2.68e+00"


@pytest.mark.parametrize("value", [1.0, -3.25, 6.02214076e23, 1e-300])
def test_sixteen_digits_is_plain_formatting(value):
    assert round_f64_to_string(value, 16) == f"{value:.16e}"


@pytest.mark.parametrize("value", [0.5, 12.0, -0.125])
def test_exact_values_are_unchanged(value):
    assert round_f64_to_string(value, 3) == f"{value:.3e}"


@pytest.mark.parametrize("n", [-1, 17])
def test_invalid_digit_count(n):
    with pytest.raises(ValueError):
        round_f64_to_string(1.0, n)


def test_identical_values_match_fully():
    assert compare_f64_values(-74.96469771, -74.96469771) == 16


def test_opposite_signs_do_not_match():
    assert compare_f64_values(1.0, -1.0) == -1


def test_close_values_match_partially():
    digits = compare_f64_values(1.0000001, 1.0)
    assert 0 <= digits < 16
    assert round_f64_to_string(1.0000001, digits) == round_f64_to_string(1.0, digits)


def test_comparison_is_symmetric():
    assert compare_f64_values(3.14159, 3.14160) == compare_f64_values(3.14160, 3.14159)