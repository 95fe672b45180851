"""Built-in LDA exchange (Slater) and VWN correlation functionals, unpolarized."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

XC_TOLERANCE_THRESHOLD = 1e-10

LDA_X_EXC_PREFACTOR = -7.3855876638202245e-01
LDA_X_VRHO_PREFACTOR = -9.8474502184269663e-01

_ONE_THIRD = 1.0 / 3.0

_VWN_A = 0.0310907
_VWN_X0 = -0.10498
_VWN_B = 3.72744
_VWN_C = 12.9352


def _split(rho: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    rho_arr = np.asarray(rho, dtype=float)
    exc = np.zeros_like(rho_arr)
    vrho = np.zeros_like(rho_arr)
    mask = ~(rho_arr < XC_TOLERANCE_THRESHOLD)
    return rho_arr, exc, vrho, mask


def functional_lda_x(rho: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Return (exc, vrho) of Slater exchange for the given densities.

    Densities below the tolerance threshold give zero.
    """
    rho_arr, exc, vrho, mask = _split(rho)
    rho_1_3rd = np.power(rho_arr[mask], _ONE_THIRD)
    exc[mask] = LDA_X_EXC_PREFACTOR * rho_1_3rd
    vrho[mask] = LDA_X_VRHO_PREFACTOR * rho_1_3rd
    return exc, vrho


def functional_lda_c_vwn(rho: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Return (exc, vrho) of VWN correlation for the given densities.

    Densities below the tolerance threshold give zero.
    """
    rho_arr, exc, vrho, mask = _split(rho)
    a, x0, b, c = _VWN_A, _VWN_X0, _VWN_B, _VWN_C

    x = np.power(3.0 / 4.0 / math.pi / rho_arr[mask], 1.0 / 6.0)
    c4_bb = c * 4.0 - b * b
    c4_bb_sqrt = math.sqrt(c4_bb)
    x_sq = x * x
    x_b_c = x_sq + b * x + c
    x0_b_c = x0 * x0 + b * x0 + c

    e = a * (
        np.log(x_sq / x_b_c)
        - b * (x0 / x0_b_c) * np.log((x - x0) ** 2 / x_b_c)
        + (2.0 * b / c4_bb_sqrt)
        * (1.0 - (x0 * (2.0 * x0 + b) / x0_b_c))
        * np.arctan(c4_bb_sqrt / (2.0 * x + b))
    )

    x2_b = x * 2.0 + b
    x2_b_sq_c4_bb = x2_b * x2_b + c4_bb
    v = e - (x / 6.0) * a * (
        2.0 / x
        - x2_b / x_b_c
        - 4.0 * b / x2_b_sq_c4_bb
        - (b * x0 / x0_b_c)
        * (2.0 / (x - x0) - x2_b / x_b_c - 4.0 * (2.0 * x0 + b) / x2_b_sq_c4_bb)
    )

    exc[mask] = e
    vrho[mask] = v
    return exc, vrho