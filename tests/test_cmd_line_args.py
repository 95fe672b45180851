import pytest

from aimdkit.cmd_line_args import (
    CCMethod,
    GridScheme,
    JobType,
    check_flag,
    get_arg_value_by_key,
    main,
    parse_cmd_line_args,
)


def test_defaults():
    args = parse_cmd_line_args([])
    assert args.job_type == JobType.SPE
    assert args.basis_set == "basis-set/sto-3g.json"
    assert args.mol_file is None
    assert args.cc_method == CCMethod.DFT
    assert args.damping is False
    assert args.diis_subspace_size == 6
    assert (args.x_functional_id, args.c_functional_id) == (450, 236)
    assert args.radial_grid_level == 3
    assert args.lebedev_level == 13
    assert args.md_steps == 10
    assert args.md_delta_t_fs == 1.0
    assert args.md_temperature_K == 300.0
    assert args.md_thermostat_time_smoothing_factor == 1e-3
    assert args.silent is False
    assert args.check_results == 0
    assert args.grid_scheme == GridScheme.SG2


def test_get_arg_value_first_match_wins():
    argv = ["--a", "1", "--a", "2"]
    assert get_arg_value_by_key(argv, "--a") == "1"


def test_get_arg_value_key_without_value():
    assert get_arg_value_by_key(["--x", "--a"], "--a") is None
    assert get_arg_value_by_key([], "--a") is None


def test_check_flag():
    assert check_flag(["--silent", "--hf"], "--hf") is True
    assert check_flag(["--silent"], "--hf") is False


def test_string_options():
    args = parse_cmd_line_args(["--mol", "samples/h2o.xyz", "--basis-set", "b.json"])
    assert args.mol_file == "samples/h2o.xyz"
    assert args.basis_set == "b.json"


def test_cc_method_value_and_flags():
    assert parse_cmd_line_args(["--cc-method", "hf"]).cc_method == CCMethod.HF
    assert parse_cmd_line_args(["--hf"]).cc_method == CCMethod.HF
    assert parse_cmd_line_args(["--hf", "--dft"]).cc_method == CCMethod.DFT
    assert parse_cmd_line_args(["--cc-method", "hf", "--dft"]).cc_method == CCMethod.DFT


def test_unknown_cc_method_raises():
    with pytest.raises(ValueError):
        parse_cmd_line_args(["--cc-method", "mp2"])


def test_unknown_cc_method_overridden_by_flag():
    assert parse_cmd_line_args(["--cc-method", "mp2", "--hf"]).cc_method == CCMethod.HF


@pytest.mark.parametrize(
    "value, ids",
    [("1,7", (1, 7)), ("101", (101, 0)), (",7", (0, 7))],
)
def test_xc_functional(value, ids):
    args = parse_cmd_line_args(["--xc-functional", value])
    assert (args.x_functional_id, args.c_functional_id) == ids


def test_job_type_force_wins_over_bomd():
    assert parse_cmd_line_args(["--bomd"]).job_type == JobType.BOMD
    assert parse_cmd_line_args(["--force"]).job_type == JobType.SPF
    assert parse_cmd_line_args(["--bomd", "--force"]).job_type == JobType.SPF


def test_numeric_prefix_parsing():
    args = parse_cmd_line_args(
        [
            "--md-delta-t", "0.5fs",
            "--md-temperature", "1e2",
            "--diis-subspace-size", "abc",
            "--md-steps", "25steps",
            "--check-results", "2",
        ]
    )
    assert args.md_delta_t_fs == 0.5
    assert args.md_temperature_K == 1e2
    assert args.diis_subspace_size == 0
    assert args.md_steps == 25
    assert args.check_results == 2


def test_flags():
    args = parse_cmd_line_args(["--damping", "--silent"])
    assert args.damping is True
    assert args.silent is True


def test_main_prints_settings(capsys):
    assert main(["--hf", "--md-steps", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "cc_method: 1" in lines
    assert "md_steps: 4" in lines
    assert "md_temperature_K: 3.000e+02" in lines
    assert lines[0] == "job_type: 1"