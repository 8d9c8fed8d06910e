"""Checked unsigned 256-bit arithmetic helpers.

Python integers never wrap, so every helper here enforces the uint256 range
explicitly instead of relying on overflow behavior.
"""

from .exceptions import ArithmeticOverflowError

Q64 = 1 << 64
Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192

MAX_UINT8 = (1 << 8) - 1
MAX_UINT24 = (1 << 24) - 1
MAX_UINT160 = (1 << 160) - 1
MAX_UINT256 = (1 << 256) - 1


def to_uint256(value: int) -> int:
    """
    Check that a value lies in the uint256 range.

    Args:
        value: Integer to check

    Returns:
        The value unchanged

    Raises:
        ArithmeticOverflowError: If the value is negative or wider than 256 bits
    """
    if value < 0 or value > MAX_UINT256:
        raise ArithmeticOverflowError(f"Value out of uint256 range: {value}")
    return value


def checked_mul(a: int, b: int) -> int:
    """Multiply two uint256 values, failing if the product overflows."""
    return to_uint256(to_uint256(a) * to_uint256(b))


def mul_div(a: int, b: int, denominator: int) -> int:
    """
    Calculate floor(a * b / denominator) with full precision.

    The intermediate product may exceed 256 bits, only the result must fit.

    Args:
        a: Multiplicand
        b: Multiplier
        denominator: Divisor

    Returns:
        The 256-bit result

    Raises:
        ZeroDivisionError: If denominator is zero
        ArithmeticOverflowError: If an input or the result is out of range
    """
    to_uint256(a)
    to_uint256(b)
    to_uint256(denominator)
    if denominator == 0:
        raise ZeroDivisionError("mul_div denominator is zero")
    return to_uint256((a * b) // denominator)
