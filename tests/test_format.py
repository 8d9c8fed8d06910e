"""Tests for format utilities."""

import pytest
from position_descriptor import (
    address_to_string,
    token_to_color_hex,
    tick_to_decimal_string,
    fee_to_percent_string,
    fixed_point_to_decimal_string,
    LengthInsufficientError,
)

WETH = 0xC02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2


class TestFormatUtilities:
    """Test display formatting helpers."""

    def test_address_to_string(self):
        """Test addresses become 20-byte lowercase hex."""
        assert address_to_string(WETH) == "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
        assert address_to_string(1) == "0x" + "0" * 39 + "1"

    def test_address_too_wide(self):
        """Test values wider than an address are rejected."""
        with pytest.raises(LengthInsufficientError):
            address_to_string(1 << 160)

    def test_token_to_color_hex(self):
        """Test colors are 3-byte slices of the address."""
        assert token_to_color_hex(WETH, 136) == "c02aaa"
        assert token_to_color_hex(WETH, 0) == "756cc2"

    def test_price_and_fee_together(self):
        """Test the facade exposes the price and fee renderers."""
        assert tick_to_decimal_string(0, 60, 18, 18, False) == "1.0000"
        assert fixed_point_to_decimal_string(9 << 96, 6, 6) == "81.000"
        assert fee_to_percent_string(3000) == "0.3%"
