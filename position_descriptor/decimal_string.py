"""Significant-figure rounding and decimal string rendering.

Values arrive as plain unsigned integers carrying one extra rounding digit.
They are reduced to five significant figures and written into a pre-sized
ASCII buffer according to a DecimalLayout.
"""

from .exceptions import BufferLayoutError
from .types import DecimalLayout

SIGFIGS = 5

# "0." plus the leading zeros needed for the smallest price at 10**44 scale
BELOW_ONE_PRECISION = 43

_ZERO = ord("0")
_DOT = ord(".")
_PERCENT = ord("%")


def digit_count(value: int) -> int:
    """Count decimal digits by repeated division (0 has no digits)."""
    digits = 0
    while value != 0:
        digits += 1
        value //= 10
    return digits


def sigfigs_rounded(value: int, digits: int) -> tuple[int, bool]:
    """
    Round a value to at most five significant figures, half up.

    Args:
        value: Unsigned integer whose last digit is a rounding guard
        digits: Number of digits in value, not counting the guard digit

    Returns:
        Tuple of (sigfigs, carried). carried is True when rounding added a
        digit (99999|5 -> 100000 -> 10000), so callers must bump digits by one.
    """
    if digits > SIGFIGS:
        value //= 10 ** (digits - SIGFIGS)

    round_up = value % 10 > 4
    value //= 10
    if round_up:
        value += 1

    if value == 10**SIGFIGS:
        return value // 10, True
    if digits < SIGFIGS and value == 10**digits:
        return value, True
    return value, False


def price_layout(digits: int, price_below_one: bool) -> DecimalLayout:
    """
    Compute the buffer layout for a price with the given digit count.

    For prices below one, digits is measured at 10**44 scale. Otherwise it is
    the integer digit count plus four fractional digits.

    Args:
        digits: Significant digit count after rounding
        price_below_one: Whether the price is below one

    Returns:
        Layout for generate_decimal_string
    """
    if price_below_one:
        if digits > BELOW_ONE_PRECISION:
            raise BufferLayoutError(f"Below-one price cannot have {digits} digits")
        zero_count = BELOW_ONE_PRECISION - digits
        buffer_length = 2 + zero_count + min(digits, SIGFIGS)
        return DecimalLayout(
            buffer_length=buffer_length,
            sigfig_index=buffer_length - 1,
            zeros_start_index=2,
            zeros_end_index=zero_count + 1,
            is_less_than_one=True,
        )

    if digits < SIGFIGS:
        raise BufferLayoutError(f"Price of at least one cannot have {digits} digits")

    if digits >= 9:
        # no decimal point, trailing zeros after the sigfigs
        buffer_length = digits - 4
        return DecimalLayout(
            buffer_length=buffer_length,
            sigfig_index=4,
            zeros_start_index=5,
            zeros_end_index=buffer_length - 1,
        )

    # 5 sigfigs around a decimal point
    return DecimalLayout(
        buffer_length=6,
        sigfig_index=5,
        decimal_index=digits - SIGFIGS + 1,
    )


class _DecimalBuffer:
    """Fixed-size ASCII buffer that rejects out-of-range and repeated writes."""

    def __init__(self, length: int):
        self._data = bytearray(length)
        self._written = [False] * length

    def write(self, index: int, char: int) -> None:
        if index < 0 or index >= len(self._data):
            raise BufferLayoutError(f"Index {index} outside buffer of length {len(self._data)}")
        if self._written[index]:
            raise BufferLayoutError(f"Index {index} written twice")
        self._data[index] = char
        self._written[index] = True

    def decode(self) -> str:
        if not all(self._written):
            missing = [i for i, written in enumerate(self._written) if not written]
            raise BufferLayoutError(f"Buffer positions never written: {missing}")
        return self._data.decode("ascii")


def generate_decimal_string(layout: DecimalLayout, sigfigs: int) -> str:
    """
    Render significant figures into the buffer described by layout.

    Args:
        layout: Precomputed buffer layout
        sigfigs: Digits to display, already rounded

    Returns:
        ASCII string of exactly layout.buffer_length characters

    Raises:
        BufferLayoutError: If the layout and sigfigs disagree
    """
    buffer = _DecimalBuffer(layout.buffer_length)

    if layout.is_percent:
        buffer.write(layout.buffer_length - 1, _PERCENT)
    if layout.is_less_than_one:
        buffer.write(0, _ZERO)
        buffer.write(1, _DOT)

    for index in range(layout.zeros_start_index, layout.zeros_end_index + 1):
        buffer.write(index, _ZERO)

    cursor = layout.sigfig_index
    while sigfigs > 0:
        if layout.decimal_index > 0 and cursor == layout.decimal_index:
            buffer.write(cursor, _DOT)
            cursor -= 1
        buffer.write(cursor, _ZERO + sigfigs % 10)
        cursor -= 1
        sigfigs //= 10

    return buffer.decode()
