"""Console logging helpers, array dumps and text reports for inspecting results."""

from __future__ import annotations

import math
import os
import struct
import time
from collections.abc import Sequence

from .f64_util import compare_f64_values

_COUNT_FORMAT = "<Q"
_VALUE_FORMAT = "<d"
_COUNT_SIZE = struct.calcsize(_COUNT_FORMAT)
_VALUE_SIZE = struct.calcsize(_VALUE_FORMAT)


def _current_time_str() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def console_print(silent: bool, message: str) -> None:
    """Print ``message`` as is, unless ``silent``."""
    if not silent:
        print(message, end="")


def log_tm_print(silent: bool, message: str) -> None:
    """Print ``message`` prefixed with the current time, unless ``silent``."""
    if not silent:
        print(f"[{_current_time_str()}] {message}", end="")


def _threshold(max_count: int | None) -> float:
    if max_count is None or max_count < 0:
        return math.inf
    return max_count


def _dashes(col_size: int, field_width: int) -> str:
    return "-" * (col_size * field_width - 1) + "\n"


def _check_col_size(col_size: int) -> None:
    if col_size <= 0:
        raise ValueError(f"column size must be positive, got {col_size}")


def _rows(values: Sequence, col_size: int) -> tuple[list[Sequence], Sequence, int]:
    """Split into full rows and the trailing partial row; also return its start index."""
    n_full = len(values) // col_size
    full = [values[i * col_size:(i + 1) * col_size] for i in range(n_full)]
    start = n_full * col_size
    return full, values[start:], start


def format_f64_array(values: Sequence[float], col_size: int, precision: int) -> str:
    """Return a table of ``values`` in scientific notation, ``col_size`` per row."""
    _check_col_size(col_size)
    width = precision + 7
    full, last, _ = _rows(list(values), col_size)

    def cells(row: Sequence[float]) -> str:
        return "".join(f"{float(v):{width}.{precision}e} " for v in row) + "\n"

    parts = ["".join(f"{j:>{width}} " for j in range(col_size)) + "\n"]
    parts.append(_dashes(col_size, precision + 8))
    parts.extend(cells(row) for row in full)
    parts.append(cells(last))
    parts.append(_dashes(col_size, precision + 8))
    return "".join(parts)


def format_f64_array_with_label(
    values: Sequence[float], col_size: int, precision: int, label: str
) -> str:
    """Return ``format_f64_array`` output headed by ``label``."""
    return f"{label}:\n" + format_f64_array(values, col_size, precision)


def format_u32_array(values: Sequence[int], col_size: int) -> str:
    """Return a table of unsigned integers, ``col_size`` per row."""
    _check_col_size(col_size)
    full, last, _ = _rows(list(values), col_size)

    def cells(row: Sequence[int]) -> str:
        return "".join(f"{int(v)} " for v in row) + "\n"

    parts = [_dashes(col_size, 6)]
    parts.extend(cells(row) for row in full)
    parts.append(cells(last))
    parts.append(_dashes(col_size, 6))
    return "".join(parts)


def format_u32_array_with_label(values: Sequence[int], col_size: int, label: str) -> str:
    """Return ``format_u32_array`` output headed by ``label``."""
    return f"{label}:\n" + format_u32_array(values, col_size)


def format_f64_values_within_bounds(
    values: Sequence[float],
    lower_bound: float,
    upper_bound: float,
    col_size: int,
    precision: int,
    max_count: int | None = None,
) -> str:
    """Return the ``index:value`` entries whose value lies within the bounds.

    Rows are scanned whole; once at least ``max_count`` entries have been
    listed no further rows are scanned.  ``None`` or a negative count means
    no limit.
    """
    _check_col_size(col_size)
    width = precision + 7
    threshold = _threshold(max_count)
    values = [float(v) for v in values]
    full, last, last_start = _rows(values, col_size)

    def row_entries(row: Sequence[float], start: int) -> list[str]:
        return [
            f"{start + j}:{v:{width}.{precision}e} "
            for j, v in enumerate(row)
            if lower_bound <= v <= upper_bound
        ]

    parts = ["".join(f"{j:>{width}} " for j in range(col_size)) + "\n"]
    parts.append(_dashes(col_size, precision + 8))

    total = 0
    stopped = False
    for i, row in enumerate(full):
        entries = row_entries(row, i * col_size)
        if entries:
            parts.append("".join(entries) + "\n")
        total += len(entries)
        if total >= threshold:
            stopped = True
            break

    if not stopped:
        entries = row_entries(last, last_start)
        if entries:
            parts.append("".join(entries) + "\n")

    parts.append(_dashes(col_size, precision + 8))
    return "".join(parts)


def inspect_nan(
    values: Sequence[float], col_size: int, max_count: int | None, label: str
) -> str:
    """Return a report listing the indices of NaN values, ``col_size`` per line."""
    _check_col_size(col_size)
    threshold = _threshold(max_count)
    parts = [f"checking {label} for nan values ...\n"]

    total = 0
    col_count = 0
    for index, value in enumerate(values):
        if math.isnan(value):
            parts.append(f"{index}:nan ")
            total += 1
            col_count += 1
        if col_count == col_size:
            parts.append("\n")
            col_count = 0
        if total >= threshold:
            break
    if total > 0:
        parts.append("\n")
    else:
        parts.append("No nan has been found.\n")
    return "".join(parts)


def dump_f64_array(values: Sequence[float], path: str | os.PathLike[str]) -> None:
    """Write the values to a binary file: a 64-bit count followed by the doubles."""
    values = [float(v) for v in values]
    with open(path, "wb") as handle:
        handle.write(struct.pack(_COUNT_FORMAT, len(values)))
        handle.write(struct.pack(f"<{len(values)}d", *values))


def load_f64_array(path: str | os.PathLike[str]) -> list[float]:
    """Read values written by ``dump_f64_array``."""
    with open(path, "rb") as handle:
        header = handle.read(_COUNT_SIZE)
        if len(header) != _COUNT_SIZE:
            raise ValueError(f"failed to read record count from {os.fspath(path)}")
        (count,) = struct.unpack(_COUNT_FORMAT, header)
        body = handle.read(count * _VALUE_SIZE)
    if len(body) != count * _VALUE_SIZE:
        raise ValueError(f"failed to read {count} f64 values from {os.fspath(path)}")
    return list(struct.unpack(f"<{count}d", body))


def compare_f64_arrays(a: Sequence[float], b: Sequence[float]) -> int:
    """Compare element by element: -1 if ``a`` is smaller first, 1 if larger, else 0."""
    if len(a) != len(b):
        raise ValueError(f"arrays differ in length: {len(a)} and {len(b)}")
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def format_f64_diff(value: float, expected: float, label: str) -> str:
    """Return a report comparing ``value`` with ``expected``."""
    rule = "-" * 33
    lines = [
        rule,
        f"{label}:",
        f"   value: {value:.14e}",
        f"expected: {expected:.14e}",
        f"    diff: {abs(value - expected):.14e}",
        f"matched digits: {compare_f64_values(value, expected)}",
        rule,
    ]
    return "\n".join(lines) + "\n"