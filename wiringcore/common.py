"""Pin enumerations, math constants and bit/byte helpers shared by the core."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "PinStatus",
    "PinMode",
    "BitOrder",
    "PI",
    "HALF_PI",
    "TWO_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "EULER",
    "SERIAL",
    "DISPLAY",
    "map_range",
    "make_word",
    "constrain",
    "radians",
    "degrees",
    "sq",
    "low_byte",
    "high_byte",
    "bit",
    "bit_read",
    "bit_set",
    "bit_clear",
    "bit_toggle",
    "bit_write",
]


class PinStatus(IntEnum):
    """Logic level of a pin, or the edge an interrupt fires on."""

    LOW = 0
    HIGH = 1
    CHANGE = 2
    FALLING = 3
    RISING = 4
    UNDEFINED = 5


class PinMode(IntEnum):
    """Electrical configuration of a pin."""

    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2
    INPUT_PULLDOWN = 0x3
    OUTPUT_OPENDRAIN = 0x4


class BitOrder(IntEnum):
    """Order in which the bits of a byte are shifted out."""

    LSBFIRST = 0
    MSBFIRST = 1


PI = 3.1415926535897932384626433832795
HALF_PI = 1.5707963267948966192313216916398
TWO_PI = 6.283185307179586476925286766559
DEG_TO_RAD = 0.017453292519943295769236907684886
RAD_TO_DEG = 57.295779513082320876798154814105
EULER = 2.718281828459045235360287471352

SERIAL = 0x0
DISPLAY = 0x1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map an integer from one range to another, truncating toward zero."""
    if in_max == in_min:
        raise ZeroDivisionError("input range is empty")
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def make_word(high: int, low: int | None = None) -> int:
    """Build a 16-bit word from two bytes, or truncate a single value to 16 bits."""
    if low is None:
        return high & 0xFFFF
    return ((high & 0xFF) << 8) | (low & 0xFF)


def constrain(amt, low, high):
    """Clamp ``amt`` to the closed range ``[low, high]``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def sq(x):
    """Square of ``x``."""
    return x * x


def low_byte(w: int) -> int:
    """Least significant byte of ``w``."""
    return w & 0xFF


def high_byte(w: int) -> int:
    """Second least significant byte of ``w``."""
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    """Value with only bit ``b`` set."""
    return 1 << b


def bit_read(value: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``value`` (0 or 1)."""
    return (value >> bit_index) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` set."""
    return value | bit(bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` cleared."""
    return value & ~bit(bit_index)


def bit_toggle(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` flipped."""
    return value ^ bit(bit_index)


def bit_write(value: int, bit_index: int, bit_value) -> int:
    """Return ``value`` with bit ``bit_index`` set if ``bit_value`` is truthy, else cleared."""
    if bit_value:
        return bit_set(value, bit_index)
    return bit_clear(value, bit_index)