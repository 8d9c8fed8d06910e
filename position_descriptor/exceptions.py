"""Exception types raised by the descriptor SDK."""


class DescriptorError(Exception):
    """Base exception for all descriptor errors."""

    pass


class LengthInsufficientError(DescriptorError, ValueError):
    """Value does not fit in the requested fixed hex width."""

    def __init__(self, value: int, length: int):
        """
        Initialize length error.

        Args:
            value: Value that was being encoded
            length: Requested width in bytes
        """
        self.value = value
        self.length = length
        super().__init__(f"Hex length insufficient: {value:#x} does not fit in {length} bytes")


class ArithmeticOverflowError(DescriptorError, OverflowError):
    """A checked uint256 operation left the unsigned 256-bit range."""

    pass


class BufferLayoutError(DescriptorError):
    """A decimal layout wrote outside, twice into, or left gaps in its buffer."""

    pass


class TokenNotFoundError(DescriptorError, KeyError):
    """Token metadata is missing from the registry."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
