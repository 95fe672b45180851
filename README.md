# aimdkit

Building blocks for ab initio quantum chemistry and molecular dynamics code:

- **Elements** (`aimdkit.elements`): element symbols, names, standard atomic
  weights, Bragg-Slater radii and STO-3G orbital counts;
  `atomic_symbol_to_num` (returns 0 for an unknown symbol) and
  `atomic_num_to_mass` (raises `ValueError` outside 0..118).
- **Tensor contractions** (`aimdkit.einsum`): the fixed `einsum` patterns
  `einsum_mn_np__mp`, `einsum_mn_mp__np`, `einsum_mn_mp_m__np`,
  `einsumaa_mn_mp_m__np` (adds into a numpy array in place),
  `einsum_mn_mn__m` and `einsum_mn_nm`, on numpy arrays.
- **Functionals** (`aimdkit.functional`): `functional_lda_x` (Slater
  exchange) and `functional_lda_c_vwn` (VWN correlation), unpolarized. Each
  takes an array of densities and returns `(exc, vrho)`; densities below
  `1e-10` give zeros.
- **Gaussian basis functions** (`aimdkit.basis_func`):
  `double_factorial`, `normalize_gaussian_primitive`,
  `normalize_contracted_gaussian_func`, and the `BasisFunc` dataclass with
  `value`, `first_derivative`, `second_derivative`, `laplacian`,
  `third_derivative` and `describe`.
- **Basis sets** (`aimdkit.basis_set`): `load_basis_set_from_file` and
  `parse_basis_set` read basis-set JSON (an `elements` object with
  `electron_shells`) and expand each shell into Cartesian `ShellFunction`s,
  grouped per `ElementBasis`; `format_basis_set` lists them as text.
- **File helpers** (`aimdkit.fileio`): `filename_stem`,
  `ensure_dir_exists`, `read_file_to_buffer`.
- **Command-line settings** (`aimdkit.cmd_line_args`): `CmdLineArgs`,
  `JobType`, `CCMethod`, `GridScheme`, `parse_cmd_line_args`,
  `get_arg_value_by_key`, `check_flag` and `main`.
- **Diagnostics** (`aimdkit.diagnostics`, `aimdkit.f64_util`): console
  printing with optional time stamps, text tables of float and integer
  arrays, NaN reports, binary dumps of float arrays (`dump_f64_array`,
  `load_f64_array`), and digit-level comparison of floating point values
  (`round_f64_to_string`, `compare_f64_values`, `format_f64_diff`). The
  `format_*` functions and `inspect_nan` return strings rather than printing.

## Installation

```
pip install .
```

numpy is the only runtime dependency.

## Examples

```python
import numpy as np

from aimdkit.elements import atomic_symbol_to_num, atomic_num_to_mass
from aimdkit.einsum import einsum_mn_np__mp, einsum_mn_nm
from aimdkit.basis_func import BasisFunc, normalize_gaussian_primitive
from aimdkit.f64_util import compare_f64_values

atomic_symbol_to_num("O")        # 8
atomic_num_to_mass(8)            # 15.999

a = np.arange(6.0).reshape(3, 2)
b = np.arange(6.0).reshape(2, 3)
einsum_mn_np__mp(a, b)           # 3 x 3 matrix product
einsum_mn_nm(a, b)               # trace of the product

norm = normalize_gaussian_primitive(0.1688554, 0, 0, 0)
s = BasisFunc(0, 0, 0, exponents=(0.1688554,), coefficients=(1.0,),
              normalization_factors=(norm,))
s.value((0.0, 0.0, 1.0))
s.first_derivative((0.0, 0.0, 1.0))   # (x, y, z)

# number of matching fraction digits in scientific notation
compare_f64_values(-74.96469771270, -74.96469771281)
```

`load_basis_set_from_file(path, selected_elements)` keeps only the listed
atomic numbers, in the order they appear in the file. A `*` in the path is
looked up as `_st_`, so `6-31g*.json` is read from `6-31g_st_.json`.

## Command line

`aimdkit-args` parses the options of a calculation and prints the resulting
settings:

```
aimdkit-args --cc-method hf --diis-subspace-size 8 --force
```

| Option | Default |
| --- | --- |
| `--mol PATH` | none (recorded as `mol_file`) |
| `--basis-set PATH` | `basis-set/sto-3g.json` |
| `--cc-method hf\|dft`, `--hf`, `--dft` | `dft` |
| `--damping` | off |
| `--diis-subspace-size N` | 6 |
| `--xc-functional X[,C]` | `450,236` (a single `X` sets C to 0) |
| `--radial-grid-level N` | 3 |
| `--lebedev-level N` | 13 |
| `--bomd` / `--force` | single point energy (`--force` wins over `--bomd`) |
| `--md-steps N` | 10 |
| `--md-delta-t FS` | 1.0 |
| `--md-temperature K` | 300.0 |
| `--md-thermostat-time-smoothing-factor F` | 1e-3 |
| `--check-results ID` | 0 |
| `--silent` | off |

An unknown `--cc-method` value raises `ValueError` unless `--hf` or `--dft`
is also given.

## What the package does not do

It does not run calculations. There is no Hartree-Fock or DFT
self-consistent field loop, no molecular integrals, no integration grids, no
force evaluation and no molecular dynamics propagation, and molecule files
are not read: `--mol` only records the path. `aimdkit-args` parses and prints
settings and nothing more.

## Tests

```
pip install .[test]
pytest
```