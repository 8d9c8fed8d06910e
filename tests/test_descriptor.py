"""Tests for the unified descriptor client."""

import base64
import json
import pytest
from io import StringIO
from pydantic import ValidationError
from position_descriptor import (
    PositionDescriptor,
    ConsoleLogger,
    NoopLogger,
    LogLevel,
    Token,
    TokenNotFoundError,
)
from position_descriptor.full_math import Q96

WETH = Token(address=0xC02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2, symbol="WETH", decimals=18)
USDC = Token(address=0xA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48, symbol="USDC", decimals=6)
POOL = 0x88E6A0C2DDD26FEEB64F039A2C41296FCB3F5640


@pytest.fixture
def descriptor():
    """Create a descriptor with both tokens registered."""
    client = PositionDescriptor(logger=NoopLogger())
    client.register_tokens([WETH, USDC])
    return client


def build(client, **overrides):
    """Build params for a USDC/WETH position."""
    fields = dict(
        token_id=7,
        pool_address=POOL,
        quote_token_address=USDC.address,
        base_token_address=WETH.address,
        fee=500,
        tick_spacing=10,
        tick_lower=-100,
        tick_upper=100,
        tick_current=0,
    )
    fields.update(overrides)
    return client.build_params(**fields)


class TestPositionDescriptor:
    """Test descriptor client."""

    def test_default_logger(self):
        """Test a console logger is created from log_level."""
        client = PositionDescriptor(log_level=LogLevel.ERROR)
        assert isinstance(client.logger, ConsoleLogger)
        assert client.logger.get_level() == LogLevel.ERROR

    def test_build_params_resolves_tokens(self, descriptor):
        """Test symbols and decimals come from the registry."""
        params = build(descriptor)

        assert params.quote_token_symbol == "USDC"
        assert params.quote_token_decimals == 6
        assert params.base_token_symbol == "WETH"
        assert params.base_token_decimals == 18

    def test_build_params_unknown_token(self, descriptor):
        """Test missing tokens raise with the available list."""
        with pytest.raises(TokenNotFoundError) as exc_info:
            build(descriptor, quote_token_address=0x1234)

        message = str(exc_info.value)
        assert "0x0000000000000000000000000000000000001234" in message
        assert "USDC" in message
        assert "WETH" in message
        assert isinstance(exc_info.value, KeyError)

    def test_build_params_empty_registry(self):
        """Test the error mentions an empty registry."""
        client = PositionDescriptor(logger=NoopLogger())
        with pytest.raises(TokenNotFoundError, match="Available tokens: none"):
            build(client)

    def test_build_params_validates_ticks(self, descriptor):
        """Test misaligned ticks are rejected."""
        with pytest.raises(ValidationError):
            build(descriptor, tick_lower=-105)

    def test_price_bounds_with_decimal_gap(self):
        """Test a 12 decimal gap scales both bounds."""
        client = PositionDescriptor(price_lookup=lambda tick: Q96, logger=NoopLogger())
        client.register_tokens([WETH, USDC])

        assert client.price_bounds(build(client)) == ("1000000000000", "1000000000000")

    def test_fee_tier(self, descriptor):
        """Test fee formatting."""
        assert descriptor.fee_tier(500) == "0.05%"

    def test_describe(self, descriptor):
        """Test describe delegates to the metadata service."""
        described = descriptor.describe(build(descriptor))

        assert described["fee_tier"] == "0.05%"
        assert described["name"].startswith("Uniswap - 0.05% - USDC/WETH - ")
        assert described["over_range"] == 0

    def test_token_uri(self, descriptor):
        """Test the token URI decodes to JSON metadata."""
        uri = descriptor.token_uri(build(descriptor))
        payload = base64.b64decode(uri.split(",", 1)[1]).decode("utf-8")
        metadata = json.loads(payload)

        assert metadata["name"].startswith("Uniswap - 0.05% - USDC/WETH - ")
        assert "image" not in metadata

    def test_token_uri_with_renderer(self):
        """Test the configured image renderer is used."""
        client = PositionDescriptor(image_renderer=lambda artwork: "<svg/>", logger=NoopLogger())
        client.register_tokens([WETH, USDC])

        uri = client.token_uri(build(client))
        metadata = json.loads(base64.b64decode(uri.split(",", 1)[1]))
        assert metadata["image"].startswith("data:image/svg+xml;base64,")

    def test_logging(self):
        """Test registry and URI activity is logged."""
        stream = StringIO()
        client = PositionDescriptor(logger=ConsoleLogger(level=LogLevel.DEBUG, stream=stream))
        client.register_tokens([WETH, USDC])
        client.token_uri(build(client))

        output = stream.getvalue()
        assert "Registered 2 tokens" in output
        assert "Token registry ready: 2 tokens" in output
        assert "Building token URI for token 7" in output
