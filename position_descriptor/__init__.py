"""Position Descriptor SDK for Python."""

# Main unified client
from .descriptor import PositionDescriptor

# Services
from .registry import TokenRegistry
from .metadata import MetadataService, DescribedPosition, over_range
from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel
from .format import (
    tick_to_decimal_string,
    fixed_point_to_decimal_string,
    fee_to_percent_string,
    address_to_string,
    token_to_color_hex,
    escape_quotes,
)

# Rendering engine
from .decimal_string import sigfigs_rounded, price_layout, generate_decimal_string
from .fixed_point import price_at_tick, adjust_for_decimal_precision, tick_boundaries
from .hex_strings import to_hex_string, to_hex_string_no_prefix
from .tick_math import MIN_TICK, MAX_TICK, get_sqrt_ratio_at_tick

# Types
from .types import (
    PriceBound,
    DecimalLayout,
    Token,
    PositionParams,
    ArtworkParams,
)

# Exceptions
from .exceptions import (
    DescriptorError,
    LengthInsufficientError,
    ArithmeticOverflowError,
    BufferLayoutError,
    TokenNotFoundError,
)

__all__ = [
    # Main client
    "PositionDescriptor",
    # Services
    "TokenRegistry",
    "MetadataService",
    "DescribedPosition",
    "over_range",
    "ConsoleLogger",
    "NoopLogger",
    "Logger",
    "LogLevel",
    # Format utilities
    "tick_to_decimal_string",
    "fixed_point_to_decimal_string",
    "fee_to_percent_string",
    "address_to_string",
    "token_to_color_hex",
    "escape_quotes",
    # Rendering engine
    "sigfigs_rounded",
    "price_layout",
    "generate_decimal_string",
    "price_at_tick",
    "adjust_for_decimal_precision",
    "tick_boundaries",
    "to_hex_string",
    "to_hex_string_no_prefix",
    "MIN_TICK",
    "MAX_TICK",
    "get_sqrt_ratio_at_tick",
    # Domain types
    "PriceBound",
    "DecimalLayout",
    "Token",
    "PositionParams",
    "ArtworkParams",
    # Exceptions
    "DescriptorError",
    "LengthInsufficientError",
    "ArithmeticOverflowError",
    "BufferLayoutError",
    "TokenNotFoundError",
]

__version__ = "0.1.0"
