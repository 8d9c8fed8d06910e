"""Tick and Q64.96 square-root price conversion to decimal strings.

All arithmetic is integer-only so the same inputs always produce the same
bytes.
"""

import math
from typing import Callable, Union

from .decimal_string import (
    BELOW_ONE_PRECISION,
    SIGFIGS,
    digit_count,
    generate_decimal_string,
    price_layout,
    sigfigs_rounded,
)
from .full_math import Q64, Q96, Q128, Q192, checked_mul, mul_div, to_uint256
from .tick_math import MIN_TICK, MAX_TICK
from .types import PriceBound

PriceLookup = Callable[[int], int]

# floor(sqrt(10) * 2**128)
SQRT10_X128 = math.isqrt(10 << 256)

# Largest token decimal difference that is compensated
MAX_DECIMAL_ADJUSTMENT = 18

# Scale keeping 5 sigfigs of the smallest price plus a rounding digit
BELOW_ONE_SCALE = 10**44

# Scale keeping 4 decimal places plus a rounding digit
ABOVE_ONE_SCALE = 10**5


def _truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def tick_boundaries(tick_spacing: int) -> tuple[int, int]:
    """
    Get the lowest and highest usable ticks for a spacing.

    Args:
        tick_spacing: Positive tick spacing

    Returns:
        Tuple of (min_tick, max_tick) aligned to the spacing
    """
    if tick_spacing <= 0:
        raise ValueError(f"tick_spacing must be positive, got {tick_spacing}")
    return (
        _truncated_div(MIN_TICK, tick_spacing) * tick_spacing,
        _truncated_div(MAX_TICK, tick_spacing) * tick_spacing,
    )


def price_at_tick(
    tick: int,
    tick_spacing: int,
    invert: bool,
    price_lookup: PriceLookup,
) -> Union[int, PriceBound]:
    """
    Map a tick to its square-root price, or a sentinel at the range edges.

    Inverting a price swaps which bound is small, so MIN and MAX trade places
    when invert is set.

    Args:
        tick: Tick index
        tick_spacing: Pool tick spacing
        invert: Whether to return the reciprocal price
        price_lookup: Tick to Q64.96 square-root price

    Returns:
        Q64.96 square-root price, or PriceBound.MIN / PriceBound.MAX
    """
    min_tick, max_tick = tick_boundaries(tick_spacing)
    if tick == min_tick:
        return PriceBound.MAX if invert else PriceBound.MIN
    if tick == max_tick:
        return PriceBound.MIN if invert else PriceBound.MAX

    sqrt_price = to_uint256(price_lookup(tick))
    if invert:
        sqrt_price = Q192 // sqrt_price
    return sqrt_price


def adjust_for_decimal_precision(
    sqrt_price: int, base_token_decimals: int, quote_token_decimals: int
) -> int:
    """
    Rescale a square-root price for tokens with different decimals.

    The square-root domain scales by sqrt(10) per decimal, so an odd difference
    needs one extra sqrt(10) factor. Differences above 18 are left unadjusted.

    Args:
        sqrt_price: Q64.96 square-root price
        base_token_decimals: Decimals of the base token
        quote_token_decimals: Decimals of the quote token

    Returns:
        Adjusted square-root price (uint256)
    """
    difference = abs(base_token_decimals - quote_token_decimals)
    if difference == 0 or difference > MAX_DECIMAL_ADJUSTMENT:
        return to_uint256(sqrt_price)

    factor = 10 ** (difference // 2)
    if base_token_decimals > quote_token_decimals:
        adjusted = checked_mul(sqrt_price, factor)
        if difference % 2 == 1:
            adjusted = mul_div(adjusted, SQRT10_X128, Q128)
    else:
        adjusted = to_uint256(sqrt_price) // factor
        if difference % 2 == 1:
            adjusted = mul_div(adjusted, Q128, SQRT10_X128)
    return adjusted


def fixed_point_to_decimal_string(
    sqrt_price: int, base_token_decimals: int, quote_token_decimals: int
) -> str:
    """
    Render a Q64.96 square-root price as a 5 significant figure string.

    Args:
        sqrt_price: Q64.96 square-root price
        base_token_decimals: Decimals of the base token
        quote_token_decimals: Decimals of the quote token

    Returns:
        Decimal string such as "0.00012345", "81.000" or "12100"
    """
    adjusted = adjust_for_decimal_precision(sqrt_price, base_token_decimals, quote_token_decimals)
    value = mul_div(adjusted, adjusted, Q64)

    price_below_one = adjusted < Q96
    if price_below_one:
        value = mul_div(value, BELOW_ONE_SCALE, Q128)
    else:
        value = mul_div(value, ABOVE_ONE_SCALE, Q128)

    # don't count the rounding digit
    digits = max(digit_count(value) - 1, 0)

    sigfigs, carried = sigfigs_rounded(value, digits)
    if carried:
        digits += 1

    if price_below_one and digits > BELOW_ONE_PRECISION:
        # rounded up to exactly one
        price_below_one = False
        digits = SIGFIGS

    return generate_decimal_string(price_layout(digits, price_below_one), sigfigs)
