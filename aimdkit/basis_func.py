"""Contracted Cartesian Gaussian basis functions: normalization, values and derivatives."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

POW_PI_1_DOT_5 = math.pi**1.5

# Offsets added to the displacement from the center so that the formulas
# never divide by an exact zero.
_SHIFT = 1e-100
_SHIFT_THIRD = 1e-60


def double_factorial(n: int) -> int:
    """Return n!! ; by convention 0!! = (-1)!! = 1 and any n <= 0 gives 1."""
    result = 1
    while n > 1:
        result *= n
        n -= 2
    return result


def _angular_factor(l: int, m: int, n: int) -> int:
    return (
        double_factorial(2 * l - 1)
        * double_factorial(2 * m - 1)
        * double_factorial(2 * n - 1)
    )


def normalize_gaussian_primitive(alpha: float, l: int, m: int, n: int) -> float:
    """Return the normalization factor of a Cartesian Gaussian primitive."""
    total = l + m + n
    return (
        2.0 ** (total + 0.75)
        * alpha ** (0.5 * total + 0.75)
        / math.sqrt(_angular_factor(l, m, n) * POW_PI_1_DOT_5)
    )


def normalize_contracted_gaussian_func(
    l: int,
    m: int,
    n: int,
    exponents: Sequence[float],
    coefficients: Sequence[float],
    primitive_normalization_factors: Sequence[float],
) -> float:
    """Return the normalization factor of a contraction of normalized primitives."""
    if not len(exponents) == len(coefficients) == len(primitive_normalization_factors):
        raise ValueError("exponents, coefficients and normalization factors differ in length")
    total = l + m + n
    terms = list(zip(exponents, coefficients, primitive_normalization_factors))
    overlap = sum(
        ni * nj * ci * cj / (ai + aj) ** (total + 1.5)
        for ai, ci, ni in terms
        for aj, cj, nj in terms
    )
    return (overlap * POW_PI_1_DOT_5 * _angular_factor(l, m, n) / 2.0**total) ** -0.5


def _coords(point: Sequence[float]) -> tuple[float, float, float]:
    if len(point) != 3:
        raise ValueError(f"a point needs 3 coordinates, got {len(point)}")
    x, y, z = point
    return float(x), float(y), float(z)


@dataclass(frozen=True)
class BasisFunc:
    """A contracted Gaussian x^l y^m z^n sum_k c_k N_k exp(-a_k r^2) about a center."""

    l: int
    m: int
    n: int
    exponents: tuple[float, ...]
    coefficients: tuple[float, ...]
    normalization_factors: tuple[float, ...]
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    contracted_normalization_factor: float = 1.0
    _primitives: tuple[tuple[float, float], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        exps = tuple(float(a) for a in self.exponents)
        coeffs = tuple(float(c) for c in self.coefficients)
        norms = tuple(float(f) for f in self.normalization_factors)
        if not len(exps) == len(coeffs) == len(norms):
            raise ValueError(
                "exponents, coefficients and normalization factors differ in length"
            )
        if min(self.l, self.m, self.n) < 0:
            raise ValueError("angular quantum numbers must be non-negative")
        object.__setattr__(self, "exponents", exps)
        object.__setattr__(self, "coefficients", coeffs)
        object.__setattr__(self, "normalization_factors", norms)
        object.__setattr__(self, "center", _coords(self.center))
        object.__setattr__(
            self, "_primitives", tuple((a, c * f) for a, c, f in zip(exps, coeffs, norms))
        )

    def _shifted(self, point: Sequence[float], shift: float) -> tuple[float, float, float]:
        x, y, z = _coords(point)
        x0, y0, z0 = self.center
        return x - x0 + shift, y - y0 + shift, z - z0 + shift

    def _polynomial(self, dx: float, dy: float, dz: float) -> float:
        return dx**self.l * dy**self.m * dz**self.n

    def _second_prefactors(
        self, alpha: float, dx2: float, dy2: float, dz2: float
    ) -> tuple[float, float, float]:
        l, m, n = self.l, self.m, self.n
        xx = l * l - l * (4 * alpha * dx2 + 1) + 2 * alpha * (2 * alpha * dx2 - 1) * dx2
        yy = m * m - m * (4 * alpha * dy2 + 1) + 2 * alpha * (2 * alpha * dy2 - 1) * dy2
        zz = n * n - n * (4 * alpha * dz2 + 1) + 2 * alpha * (2 * alpha * dz2 - 1) * dz2
        return xx, yy, zz

    def value(self, point: Sequence[float]) -> float:
        """Return the function value at ``point``."""
        x, y, z = _coords(point)
        x0, y0, z0 = self.center
        r_sq = (x - x0) ** 2 + (y - y0) ** 2 + (z - z0) ** 2
        poly = self._polynomial(*self._shifted(point, _SHIFT))
        return sum(cn * poly * math.exp(-(alpha * r_sq)) for alpha, cn in self._primitives)

    def first_derivative(self, point: Sequence[float]) -> tuple[float, float, float]:
        """Return the gradient (x, y, z) at ``point``."""
        dx, dy, dz = self._shifted(point, _SHIFT)
        r_sq = dx * dx + dy * dy + dz * dz
        poly = self._polynomial(dx, dy, dz)
        gx = gy = gz = 0.0
        for alpha, cn in self._primitives:
            v = cn * poly * math.exp(-(alpha * r_sq))
            gx += v * (self.l / dx - 2 * alpha * dx)
            gy += v * (self.m / dy - 2 * alpha * dy)
            gz += v * (self.n / dz - 2 * alpha * dz)
        return gx, gy, gz

    def second_derivative(
        self, point: Sequence[float]
    ) -> tuple[float, float, float, float, float, float]:
        """Return the second derivatives (xx, yy, zz, xy, xz, yz) at ``point``."""
        dx, dy, dz = self._shifted(point, _SHIFT)
        dx2, dy2, dz2 = dx * dx, dy * dy, dz * dz
        r_sq = dx2 + dy2 + dz2
        poly = self._polynomial(dx, dy, dz)
        xx = yy = zz = xy = xz = yz = 0.0
        for alpha, cn in self._primitives:
            v = cn * poly * math.exp(-(alpha * r_sq))
            pxx, pyy, pzz = self._second_prefactors(alpha, dx2, dy2, dz2)
            ax = 2 * alpha * dx2 - self.l
            ay = 2 * alpha * dy2 - self.m
            az = 2 * alpha * dz2 - self.n
            xx += pxx * v / dx2
            yy += pyy * v / dy2
            zz += pzz * v / dz2
            xy += ax * ay * v / (dx * dy)
            xz += ax * az * v / (dx * dz)
            yz += ay * az * v / (dy * dz)
        return xx, yy, zz, xy, xz, yz

    def laplacian(self, point: Sequence[float]) -> float:
        """Return the Laplacian at ``point``."""
        dx, dy, dz = self._shifted(point, _SHIFT)
        dx2, dy2, dz2 = dx * dx, dy * dy, dz * dz
        r_sq = dx2 + dy2 + dz2
        poly = self._polynomial(dx, dy, dz)
        result = 0.0
        for alpha, cn in self._primitives:
            v = cn * poly * math.exp(-(alpha * r_sq))
            pxx, pyy, pzz = self._second_prefactors(alpha, dx2, dy2, dz2)
            result += pxx * v / dx2
            result += pyy * v / dy2
            result += pzz * v / dz2
        return result

    def third_derivative(
        self, point: Sequence[float]
    ) -> tuple[float, float, float, float, float, float, float, float, float]:
        """Return the third derivatives (xxx, xyy, xzz, yyy, yxx, yzz, zzz, zxx, zyy).

        The mixed terms are the prefactor products only; they are not scaled
        by the function value.
        """
        dx, dy, dz = self._shifted(point, _SHIFT_THIRD)
        dx2, dy2, dz2 = dx * dx, dy * dy, dz * dz
        r_sq = dx2 + dy2 + dz2
        dx3, dy3, dz3 = dx2 * dx, dy2 * dy, dz2 * dz
        dx4, dy4, dz4 = dx2 * dx2, dy2 * dy2, dz2 * dz2
        l, m, n = self.l, self.m, self.n
        poly = self._polynomial(dx, dy, dz)

        xxx = xyy = xzz = yxx = yyy = yzz = zxx = zyy = zzz = 0.0
        for alpha, cn in self._primitives:
            v = cn * poly * math.exp(-(alpha * r_sq))
            a2 = alpha * alpha

            def cubic(k: int, d2: float, d4: float) -> float:
                return (
                    k * k * k
                    - 3 * k * k * (2 * alpha * d2 + 1)
                    + 2 * k * (6 * a2 * d4 + 1)
                    - 4 * a2 * (2 * alpha * d2 - 3) * d4
                )

            xxx += cubic(l, dx2, dx4) * v / dx3
            yyy += cubic(m, dy2, dy4) * v / dy3
            zzz += cubic(n, dz2, dz4) * v / dz3

            pxx, pyy, pzz = self._second_prefactors(alpha, dx2, dy2, dz2)
            bx = l - 2 * alpha * dx2
            by = m - 2 * alpha * dy2
            bz = n - 2 * alpha * dz2

            xyy += bx * pyy / (dx * dy2)
            xzz += bx * pzz / (dx * dz2)
            yxx += by * pxx / (dy * dx2)
            yzz += by * pzz / (dy * dz2)
            zxx += bz * pxx / (dz * dx2)
            zyy += bz * pyy / (dz * dy2)

        return xxx, xyy, xzz, yyy, yxx, yzz, zzz, zxx, zyy

    def describe(self) -> str:
        """Return a multi-line text description of the function."""
        x0, y0, z0 = self.center
        lines = [
            f"center: ({x0:.6e} {y0:.6e} {z0:.6e})",
            f"l: {self.l} m: {self.m} n: {self.n} n_exponents: {len(self.exponents)}",
        ]
        lines.extend(
            f"{k}: coeff:{c:.6e} exponent:{a:.6e} norm_factor:{f:.6e}"
            for k, (c, a, f) in enumerate(
                zip(self.coefficients, self.exponents, self.normalization_factors)
            )
        )
        return "\n".join(lines)