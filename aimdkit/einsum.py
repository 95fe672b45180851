"""Small fixed-pattern tensor contractions used by the SCF code."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def _matrix(a: ArrayLike) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2-D array, got {arr.ndim}-D")
    return arr


def _vector(a: ArrayLike) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"expected a 1-D array, got {arr.ndim}-D")
    return arr


def einsum_mn_np__mp(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return einsum('mn,np->mp', a, b), the matrix product a @ b."""
    return np.einsum("mn,np->mp", _matrix(a), _matrix(b))


def einsum_mn_mp__np(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return einsum('mn,mp->np', a, b), that is a.T @ b."""
    return np.einsum("mn,mp->np", _matrix(a), _matrix(b))


def einsum_mn_mp_m__np(a: ArrayLike, b: ArrayLike, c: ArrayLike) -> np.ndarray:
    """Return einsum('mn,mp,m->np', a, b, c)."""
    return np.einsum("mn,mp,m->np", _matrix(a), _matrix(b), _vector(c))


def einsumaa_mn_mp_m__np(
    a: ArrayLike, b: ArrayLike, c: ArrayLike, d: np.ndarray
) -> np.ndarray:
    """Add einsum('mn,mp,m->np', a, b, c) to ``d`` in place and return ``d``."""
    if not isinstance(d, np.ndarray):
        raise TypeError("d must be a numpy array to be updated in place")
    d += einsum_mn_mp_m__np(a, b, c)
    return d


def einsum_mn_mn__m(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Return einsum('mn,mn->m', a, b): the row-wise dot products."""
    return np.einsum("mn,mn->m", _matrix(a), _matrix(b))


def einsum_mn_nm(a: ArrayLike, b: ArrayLike) -> float:
    """Return einsum('mn,nm->', a, b), the trace of a @ b."""
    return float(np.einsum("mn,nm->", _matrix(a), _matrix(b)))