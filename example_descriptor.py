"""Example usage of the Position Descriptor SDK."""

import base64
import json
from position_descriptor import (
    PositionDescriptor,
    LogLevel,
    Token,
    fee_to_percent_string,
    tick_to_decimal_string,
)


def main():
    descriptor = PositionDescriptor(log_level=LogLevel.INFO)

    # ========================================================================
    # Token metadata is supplied by the caller
    # ========================================================================

    usdc = Token(address=0xA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48, symbol="USDC", decimals=6)
    weth = Token(address=0xC02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2, symbol="WETH", decimals=18)
    descriptor.register_tokens([usdc, weth])

    # ========================================================================
    # Standalone formatting
    # ========================================================================

    for fee in (100, 500, 3000, 10000):
        print(f"Fee {fee}: {fee_to_percent_string(fee)}")

    for tick in (-887220, -60, 0, 60, 887220):
        print(f"Tick {tick}: {tick_to_decimal_string(tick, 60, 18, 6, False)}")

    # ========================================================================
    # Full metadata for a position
    # ========================================================================

    params = descriptor.build_params(
        token_id=1,
        pool_address=0x88E6A0C2DDD26FEEB64F039A2C41296FCB3F5640,
        quote_token_address=usdc.address,
        base_token_address=weth.address,
        fee=500,
        tick_spacing=10,
        tick_lower=200000,
        tick_upper=201000,
        tick_current=200500,
    )

    described = descriptor.describe(params)
    print(f"\nName: {described['name']}")
    print(f"Range: {described['price_lower_display']} - {described['price_upper_display']}")

    uri = descriptor.token_uri(params)
    metadata = json.loads(base64.b64decode(uri.split(",", 1)[1]))
    print(f"\nDescription:\n{metadata['description']}")


if __name__ == "__main__":
    main()
