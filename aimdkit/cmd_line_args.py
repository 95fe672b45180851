"""Command-line options of the quantum chemistry and molecular dynamics driver."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

_U64_LIMIT = 2**64

_UINT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

DEFAULT_BASIS_SET = "basis-set/sto-3g.json"


class JobType(IntEnum):
    SPE = 1  # single point energy
    SPF = 2  # single point forces
    BOMD = 3  # Born-Oppenheimer molecular dynamics


class CCMethod(IntEnum):
    HF = 1  # Hartree-Fock
    DFT = 2  # density functional theory


class GridScheme(IntEnum):
    FULL = 1
    SG2 = 2
    SG3 = 3


@dataclass
class CmdLineArgs:
    """Settings of one run; ``mol_file`` is None for the built-in sample molecule."""

    job_type: JobType = JobType.SPE
    basis_set: str = DEFAULT_BASIS_SET
    mol_file: str | None = None
    cc_method: CCMethod = CCMethod.DFT
    damping: bool = False
    diis_subspace_size: int = 6
    x_functional_id: int = 450
    c_functional_id: int = 236
    radial_grid_level: int = 3
    lebedev_level: int = 13
    grid_scheme: GridScheme = GridScheme.SG2
    md_steps: int = 10
    md_delta_t_fs: float = 1.0
    md_temperature_K: float = 300.0
    md_thermostat_time_smoothing_factor: float = 1e-3
    silent: bool = False
    check_results: int = 0


def _parse_uint_prefix(text: str) -> tuple[int, int]:
    """Parse a leading unsigned decimal; return (value, characters consumed)."""
    match = _UINT_PREFIX.match(text)
    if match is None:
        return 0, 0
    value = min(int(match.group(2)), _U64_LIMIT - 1)
    if match.group(1) == "-":
        value = (-value) % _U64_LIMIT
    return value, match.end()


def _parse_uint(text: str) -> int:
    return _parse_uint_prefix(text)[0]


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def get_arg_value_by_key(argv: Sequence[str], key: str) -> str | None:
    """Return the argument following the first ``key`` that has one, or None."""
    for index, arg in enumerate(argv[:-1]):
        if arg == key:
            return argv[index + 1]
    return None


def check_flag(argv: Sequence[str], key: str) -> bool:
    """Return whether ``key`` occurs among the arguments."""
    return key in argv


def parse_cmd_line_args(argv: Sequence[str] | None = None) -> CmdLineArgs:
    """Build the run settings from the arguments (program name excluded)."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    args = CmdLineArgs()

    def value(key: str) -> str | None:
        return get_arg_value_by_key(argv, key)

    args.mol_file = value("--mol")

    basis_set = value("--basis-set")
    if basis_set is not None:
        args.basis_set = basis_set

    cc_method: CCMethod | None = CCMethod.DFT
    method_value = value("--cc-method")
    if method_value is not None:
        cc_method = {"hf": CCMethod.HF, "dft": CCMethod.DFT}.get(method_value)
    if check_flag(argv, "--hf"):
        cc_method = CCMethod.HF
    if check_flag(argv, "--dft"):
        cc_method = CCMethod.DFT
    if cc_method is None:
        raise ValueError(f"unknown computational chemistry method: {method_value!r}")
    args.cc_method = cc_method

    args.damping = check_flag(argv, "--damping")

    diis = value("--diis-subspace-size")
    if diis is not None:
        args.diis_subspace_size = _parse_uint(diis)

    # Accepted forms: "xid,cid" or a single "xcid".
    xc = value("--xc-functional")
    if xc is not None:
        args.x_functional_id, end = _parse_uint_prefix(xc)
        args.c_functional_id = _parse_uint(xc[end + 1:]) if end < len(xc) else 0

    args.silent = check_flag(argv, "--silent")

    args.job_type = JobType.SPE
    if check_flag(argv, "--bomd"):
        args.job_type = JobType.BOMD
    if check_flag(argv, "--force"):
        args.job_type = JobType.SPF

    for key, attribute, parse in (
        ("--radial-grid-level", "radial_grid_level", _parse_uint),
        ("--lebedev-level", "lebedev_level", _parse_uint),
        ("--md-steps", "md_steps", _parse_uint),
        ("--md-delta-t", "md_delta_t_fs", _parse_float),
        ("--md-temperature", "md_temperature_K", _parse_float),
        (
            "--md-thermostat-time-smoothing-factor",
            "md_thermostat_time_smoothing_factor",
            _parse_float,
        ),
        ("--check-results", "check_results", _parse_uint),
    ):
        text = value(key)
        if text is not None:
            setattr(args, attribute, parse(text))

    args.grid_scheme = GridScheme.SG2
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and print the resulting settings."""
    args = parse_cmd_line_args(argv)
    lines = [
        f"job_type: {int(args.job_type)}",
        f"basis_set: {args.basis_set}",
        f"cc_method: {int(args.cc_method)}",
        f"damping: {int(args.damping)}",
        f"diis_subspace_size: {args.diis_subspace_size}",
        f"x_functional_id: {args.x_functional_id}",
        f"c_functional_id: {args.c_functional_id}",
        f"radial_grid_level: {args.radial_grid_level}",
        f"lebedev_level: {args.lebedev_level}",
        f"md_steps: {args.md_steps}",
        f"md_delta_t_fs: {args.md_delta_t_fs:.3e}",
        f"md_temperature_K: {args.md_temperature_K:.3e}",
        f"md_thermostat_time_smoothing_factor: {args.md_thermostat_time_smoothing_factor:.3e}",
        f"silent: {int(args.silent)}",
        f"check_results: {args.check_results}",
    ]
    print("\n".join(lines))
    return 0