"""Fee tier rendering as percentage strings."""

from .decimal_string import generate_decimal_string
from .full_math import MAX_UINT24
from .types import DecimalLayout

# fee units per 1%
FEE_PERCENT_DECIMALS = 4


def _count_fee_digits(fee: int) -> tuple[int, int]:
    """
    Count all digits and the significant ones.

    Trailing zeros below the least significant non-zero digit are not
    significant.

    Returns:
        Tuple of (digits, num_sigfigs)
    """
    digits = 0
    num_sigfigs = 0
    while fee != 0:
        if num_sigfigs > 0 or fee % 10 != 0:
            num_sigfigs += 1
        digits += 1
        fee //= 10
    return digits, num_sigfigs


def fee_layout(digits: int, num_sigfigs: int) -> DecimalLayout:
    """
    Compute the buffer layout for a fee with the given digit counts.

    Args:
        digits: Total digits in the fee
        num_sigfigs: Significant digits in the fee

    Returns:
        Layout with the percent suffix enabled
    """
    decimal_index = digits - FEE_PERCENT_DECIMALS if digits > FEE_PERCENT_DECIMALS else 0

    if digits > FEE_PERCENT_DECIMALS:
        # at least 1%, the 5th digit is the ones place
        decimal_place = 0 if digits - num_sigfigs >= FEE_PERCENT_DECIMALS else 1
        n_zeros = max(0, (digits - 5) - (num_sigfigs - 1))
        return DecimalLayout(
            buffer_length=n_zeros + num_sigfigs + 1 + decimal_place,
            sigfig_index=num_sigfigs - 1 + decimal_place,
            decimal_index=decimal_index,
            zeros_start_index=num_sigfigs,
            zeros_end_index=num_sigfigs + n_zeros - 1,
            is_percent=True,
        )

    # below 1%: "0." then leading zeros before the sigfigs
    n_zeros = FEE_PERCENT_DECIMALS - digits
    buffer_length = 2 + n_zeros + num_sigfigs + 1
    return DecimalLayout(
        buffer_length=buffer_length,
        sigfig_index=buffer_length - 2,
        decimal_index=decimal_index,
        zeros_start_index=2,
        zeros_end_index=n_zeros + 1,
        is_less_than_one=True,
        is_percent=True,
    )


def fee_to_percent_string(fee: int) -> str:
    """
    Render a fee in hundredths of a basis point as a percentage.

    Args:
        fee: Fee amount where 10000 is 1% (uint24)

    Returns:
        Percentage string such as "0.05%", "0.3%" or "1%"
    """
    if fee < 0 or fee > MAX_UINT24:
        raise ValueError(f"Fee out of uint24 range: {fee}")
    if fee == 0:
        return "0%"

    digits, num_sigfigs = _count_fee_digits(fee)
    sigfigs = fee // 10 ** (digits - num_sigfigs)
    return generate_decimal_string(fee_layout(digits, num_sigfigs), sigfigs)
