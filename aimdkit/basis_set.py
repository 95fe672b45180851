"""Loading Gaussian basis sets from JSON files in the basis-set-exchange layout."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ShellFunction:
    """One Cartesian contracted Gaussian: powers (l, m, n), exponents and coefficients."""

    l: int
    m: int
    n: int
    exponents: tuple[float, ...]
    coefficients: tuple[float, ...]

    @property
    def angular_momentum(self) -> tuple[int, int, int]:
        return self.l, self.m, self.n


@dataclass(frozen=True)
class ElementBasis:
    """The basis functions of one element."""

    atomic_num: int
    functions: tuple[ShellFunction, ...]


def sanitize_basis_set_path(path: str) -> str:
    """Replace every ``*`` in a basis set file path with ``_st_``."""
    return path.replace("*", "_st_")


def _member(obj: Mapping, key: str, where: str):
    try:
        return obj[key]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"missing '{key}' in {where}") from exc


def _cartesian_powers(k: int) -> Iterable[tuple[int, int, int]]:
    for l in range(k, -1, -1):
        for m in range(k - l, -1, -1):
            yield l, m, k - l - m


def _shell_functions(shell: Mapping, where: str) -> Iterable[ShellFunction]:
    exponents = tuple(float(e) for e in _member(shell, "exponents", where))
    coefficient_sets: Sequence = _member(shell, "coefficients", where)
    angular_momenta: Sequence = _member(shell, "angular_momentum", where)

    for am_index, am in enumerate(angular_momenta):
        if am_index >= len(coefficient_sets):
            raise ValueError(
                f"no coefficients for angular momentum #{am_index} in {where}"
            )
        coefficients = tuple(float(c) for c in coefficient_sets[am_index])
        if len(coefficients) != len(exponents):
            raise ValueError(
                f"{len(coefficients)} coefficients for {len(exponents)} exponents in {where}"
            )
        k = int(am)
        if k < 0:
            raise ValueError(f"negative angular momentum {k} in {where}")
        for l, m, n in _cartesian_powers(k):
            yield ShellFunction(l, m, n, exponents, coefficients)


def parse_basis_set(data: Mapping, selected_elements: Iterable[int]) -> list[ElementBasis]:
    """Extract the basis functions of the selected elements from decoded JSON.

    Elements come out in the order they appear in ``data``; each shell is
    expanded into its Cartesian components, highest x power first.
    """
    selected = {int(z) for z in selected_elements}
    elements = _member(data, "elements", "basis set")
    if not isinstance(elements, Mapping):
        raise ValueError("'elements' in basis set is not an object")

    result = []
    for key, element in elements.items():
        atomic_num = int(key)
        if atomic_num not in selected:
            continue
        where = f"element {atomic_num}"
        functions = [
            function
            for shell in _member(element, "electron_shells", where)
            for function in _shell_functions(shell, where)
        ]
        result.append(ElementBasis(atomic_num, tuple(functions)))
    return result


def load_basis_set_from_file(
    path: str | os.PathLike[str], selected_elements: Iterable[int]
) -> list[ElementBasis]:
    """Read a basis set JSON file and return the selected elements' functions.

    A ``*`` in the path stands for ``_st_`` in the name of the file on disk.
    """
    sanitized = sanitize_basis_set_path(os.fspath(path))
    with open(sanitized, encoding="utf-8") as handle:
        data = json.load(handle)
    return parse_basis_set(data, selected_elements)


def format_basis_set(elements: Sequence[ElementBasis]) -> str:
    """Return a human-readable listing of loaded basis functions."""
    lines = ["", f"n_elements: {len(elements)}", ""]
    for element in elements:
        lines.append(f"atomic_num: {element.atomic_num}")
        lines.append(f"n_basis_funcs: {len(element.functions)}")
        for function in element.functions:
            lines.append(
                f"angular_momentum: {function.l} {function.m} {function.n}"
            )
            lines.append(f"n_exponents: {len(function.exponents)}")
            lines.append(
                "exponents   :" + "".join(f"{e:19.12e} " for e in function.exponents)
            )
            lines.append(
                "coefficients:" + "".join(f"{c:19.12e} " for c in function.coefficients)
            )
        lines.append("")
    return "\n".join(lines) + "\n"