import json

import pytest

from aimdkit.basis_set import (
    ElementBasis,
    ShellFunction,
    format_basis_set,
    load_basis_set_from_file,
    parse_basis_set,
    sanitize_basis_set_path,
)
from aimdkit.elements import STO_3G_ATOMIC_ORBITAL_COUNT

H_EXPONENTS = ["0.3425250914E+01", "0.6239137298E+00", "0.1688554040E+00"]
H_COEFFS = ["0.1543289673E+00", "0.5353281423E+00", "0.4446345422E+00"]
LI_CORE_EXPONENTS = ["0.1611957475E+02", "0.2936200663E+01", "0.7946504870E+00"]
LI_VALENCE_EXPONENTS = ["0.6362897469E+00", "0.1478600533E+00", "0.4808867840E-01"]
LI_S_COEFFS = ["-0.9996722919E-01", "0.3995128261E+00", "0.7001154689E+00"]
LI_P_COEFFS = ["0.1559162750E+00", "0.6076837186E+00", "0.3919573931E+00"]

DATA = {
    "name": "STO-3G",
    "elements": {
        "1": {
            "electron_shells": [
                {"angular_momentum": [0], "exponents": H_EXPONENTS, "coefficients": [H_COEFFS]}
            ]
        },
        "2": {
            "electron_shells": [
                {"angular_momentum": [0], "exponents": H_EXPONENTS, "coefficients": [H_COEFFS]}
            ]
        },
        "3": {
            "electron_shells": [
                {
                    "angular_momentum": [0],
                    "exponents": LI_CORE_EXPONENTS,
                    "coefficients": [H_COEFFS],
                },
                {
                    "angular_momentum": [0, 1],
                    "exponents": LI_VALENCE_EXPONENTS,
                    "coefficients": [LI_S_COEFFS, LI_P_COEFFS],
                },
            ]
        },
    },
}


def test_sanitize_path():
    assert sanitize_basis_set_path("basis-set/6-31g*.json") == "basis-set/6-31g_st_.json"
    assert sanitize_basis_set_path("plain.json") == "plain.json"


def test_selects_elements_in_file_order():
    result = parse_basis_set(DATA, [3, 1])
    assert [e.atomic_num for e in result] == [1, 3]


def test_function_counts_match_sto3g_table():
    for element in parse_basis_set(DATA, [1, 3]):
        assert len(element.functions) == STO_3G_ATOMIC_ORBITAL_COUNT[element.atomic_num]


def test_hydrogen_function_contents():
    (hydrogen,) = parse_basis_set(DATA, [1])
    (function,) = hydrogen.functions
    assert function.angular_momentum == (0, 0, 0)
    assert function.exponents == tuple(float(e) for e in H_EXPONENTS)
    assert function.coefficients == tuple(float(c) for c in H_COEFFS)


def test_p_shell_expansion_order_and_coefficients():
    (lithium,) = parse_basis_set(DATA, [3])
    p_functions = lithium.functions[2:]
    assert [f.angular_momentum for f in p_functions] == [(1, 0, 0), (0, 1, 0), (0, 0, 1)]
    for function in p_functions:
        assert sum(function.angular_momentum) == 1
        assert function.coefficients == tuple(float(c) for c in LI_P_COEFFS)
        assert function.exponents == tuple(float(e) for e in LI_VALENCE_EXPONENTS)
    assert lithium.functions[1].coefficients == tuple(float(c) for c in LI_S_COEFFS)


def test_d_shell_has_six_cartesian_components():
    data = {
        "elements": {
            "6": {
                "electron_shells": [
                    {"angular_momentum": [2], "exponents": ["0.8"], "coefficients": [["1.0"]]}
                ]
            }
        }
    }
    (carbon,) = parse_basis_set(data, [6])
    powers = [f.angular_momentum for f in carbon.functions]
    assert len(powers) == len(set(powers)) == 6
    assert all(sum(p) == 2 for p in powers)
    assert powers[0] == (2, 0, 0)
    assert powers[-1] == (0, 0, 2)


def test_no_selected_elements_gives_empty():
    assert parse_basis_set(DATA, [8]) == []


def test_missing_coefficients_raise():
    data = {
        "elements": {
            "3": {
                "electron_shells": [
                    {"angular_momentum": [0, 1], "exponents": ["1.0"], "coefficients": [["1.0"]]}
                ]
            }
        }
    }
    with pytest.raises(ValueError):
        parse_basis_set(data, [3])


def test_missing_elements_key_raises():
    with pytest.raises(ValueError):
        parse_basis_set({"name": "empty"}, [1])


def test_load_from_file_with_star(tmp_path):
    (tmp_path / "sto-3g_st_.json").write_text(json.dumps(DATA), encoding="utf-8")
    loaded = load_basis_set_from_file(str(tmp_path / "sto-3g*.json"), [1, 3])
    assert loaded == parse_basis_set(DATA, [1, 3])


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_basis_set_from_file(tmp_path / "absent.json", [1])


def test_format_basis_set_structure():
    elements = [
        ElementBasis(1, (ShellFunction(0, 0, 0, (3.5, 0.5), (0.25, 0.75)),)),
    ]
    text = format_basis_set(elements)
    lines = text.split("\n")
    assert "n_elements: 1" in lines
    assert "atomic_num: 1" in lines
    assert "n_basis_funcs: 1" in lines
    assert "angular_momentum: 0 0 0" in lines
    exponent_line = next(line for line in lines if line.startswith("exponents   :"))
    values = [float(v) for v in exponent_line[len("exponents   :"):].split()]
    assert values == [3.5, 0.5]
    coefficient_line = next(line for line in lines if line.startswith("coefficients:"))
    assert [float(v) for v in coefficient_line[len("coefficients:"):].split()] == [0.25, 0.75]