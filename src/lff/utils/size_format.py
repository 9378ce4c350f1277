"""Byte-size formatting for the text report."""

from __future__ import annotations

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
_DECIMAL_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB")


def format_size(num: int, *, pretty: bool = False, base_ten: bool = False) -> str:
    """Render *num* bytes.

    Without *pretty* this is the plain byte count (``"1183"``). With it,
    sizes below one unit stay in bytes (``"544 B"``) and larger sizes use
    1024-based units (``"1.16 KiB"``) or, with *base_ten*, 1000-based ones
    (``"1.18 KB"``). Two decimals below 10, one below 100, none above:
    ``"11.6 KiB"``, ``"116 KiB"``.
    """
    if num < 0:
        raise ValueError(f"size must be >= 0, got {num}")
    if not pretty:
        return str(num)

    step = 1000 if base_ten else 1024
    units = _DECIMAL_UNITS if base_ten else _BINARY_UNITS
    if num < step:
        return f"{num} B"

    value = float(num)
    for unit in units:
        value /= step
        if value < step or unit == units[-1]:
            break
    return f"{value:.{_decimals(value)}f} {unit}"


def _decimals(value: float) -> int:
    if value < 10:
        return 2
    if value < 100:
        return 1
    return 0
