"""Display formatting for position descriptor metadata.

These convert raw on-chain values into the strings embedded in token
metadata: price bounds, fee tiers, addresses and colors.
"""

from .fixed_point import PriceLookup, fixed_point_to_decimal_string, price_at_tick
from .hex_strings import to_hex_string, to_hex_string_no_prefix
from .percent import fee_to_percent_string
from .text import escape_quotes
from .tick_math import get_sqrt_ratio_at_tick
from .types import PriceBound

__all__ = [
    "tick_to_decimal_string",
    "fixed_point_to_decimal_string",
    "fee_to_percent_string",
    "address_to_string",
    "token_to_color_hex",
    "escape_quotes",
]


def tick_to_decimal_string(
    tick: int,
    tick_spacing: int,
    base_token_decimals: int,
    quote_token_decimals: int,
    flip_ratio: bool,
    price_lookup: PriceLookup = get_sqrt_ratio_at_tick,
) -> str:
    """
    Format the price at a tick.

    Args:
        tick: Tick index
        tick_spacing: Pool tick spacing
        base_token_decimals: Base token decimals
        quote_token_decimals: Quote token decimals
        flip_ratio: Whether to show the inverted price
        price_lookup: Tick to Q64.96 square-root price

    Returns:
        "MIN", "MAX" or a 5 significant figure decimal string
    """
    sqrt_price = price_at_tick(tick, tick_spacing, flip_ratio, price_lookup)
    if isinstance(sqrt_price, PriceBound):
        return sqrt_price.value
    return fixed_point_to_decimal_string(sqrt_price, base_token_decimals, quote_token_decimals)


def address_to_string(address: int) -> str:
    """
    Format an address as a 0x-prefixed, 40 digit hex string.

    Args:
        address: Address as an unsigned integer

    Returns:
        Lowercase hex address
    """
    return to_hex_string(address, 20)


def token_to_color_hex(token: int, offset: int) -> str:
    """Take 3 bytes of a token address, starting offset bits up, as a hex color."""
    return to_hex_string_no_prefix(token >> offset, 3)
