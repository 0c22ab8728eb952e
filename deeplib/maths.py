"""Basic numeric helpers: angle conversion, fixed-width absolute value and integer limits."""

from __future__ import annotations

PI = 3.14159265358979323846

_WIDTHS = (8, 16, 32, 64)


def _check_bits(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")


def int_limits(bits, signed=True) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` for an integer of the given width."""
    _check_bits(bits)
    if signed:
        low = -(1 << (bits - 1))
        return low, ~low
    return 0, (1 << bits) - 1


def deg_to_rad(degrees):
    """Convert degrees to radians."""
    return degrees * PI / 180.0


def unsigned_abs(value, bits=32) -> int:
    """Absolute value of a signed ``bits``-wide integer, as an unsigned integer.

    The minimum signed value maps to its magnitude, which fits in the
    unsigned type of the same width.
    """
    low, high = int_limits(bits, True)
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in a signed {bits}-bit integer")
    if value >= 0:
        return value
    mask = (1 << bits) - 1
    return (0 - (value & mask)) & mask


MIN_INT8, MAX_INT8 = int_limits(8, True)
MIN_INT16, MAX_INT16 = int_limits(16, True)
MIN_INT32, MAX_INT32 = int_limits(32, True)
MIN_INT64, MAX_INT64 = int_limits(64, True)
MIN_UINT8, MAX_UINT8 = int_limits(8, False)
MIN_UINT16, MAX_UINT16 = int_limits(16, False)
MIN_UINT32, MAX_UINT32 = int_limits(32, False)
MIN_UINT64, MAX_UINT64 = int_limits(64, False)