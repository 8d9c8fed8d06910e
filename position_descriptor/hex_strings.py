"""Fixed-width lowercase hexadecimal encoding."""

from .exceptions import LengthInsufficientError

_ALPHABET = b"0123456789abcdef"


def _fill_nibbles(buffer: bytearray, start: int, value: int) -> int:
    """Write nibbles of value into buffer[start:] from the right, return the remainder."""
    for index in range(len(buffer) - 1, start - 1, -1):
        buffer[index] = _ALPHABET[value & 0xF]
        value >>= 4
    return value


def to_hex_string(value: int, length: int) -> str:
    """
    Encode a value as "0x" followed by exactly 2 * length hex digits.

    Args:
        value: Unsigned integer to encode
        length: Width in bytes

    Returns:
        Prefixed, zero-padded hex string

    Raises:
        LengthInsufficientError: If the value needs more than length bytes
    """
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative value: {value}")

    buffer = bytearray(2 * length + 2)
    buffer[0:2] = b"0x"
    remainder = _fill_nibbles(buffer, 2, value)
    if remainder != 0:
        raise LengthInsufficientError(value, length)
    return buffer.decode("ascii")


def to_hex_string_no_prefix(value: int, length: int) -> str:
    """
    Encode the low length bytes of a value as 2 * length hex digits.

    Bits above the requested width are dropped without error; callers use this
    to slice fixed-width fragments such as 3-byte colors out of larger values.
    """
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative value: {value}")

    buffer = bytearray(2 * length)
    _fill_nibbles(buffer, 0, value)
    return buffer.decode("ascii")
