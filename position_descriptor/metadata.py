"""Service for turning position parameters into token metadata."""

import base64
from typing import Callable, Optional, TypedDict
from .types import ArtworkParams, PositionParams
from .logger import Logger
from .fixed_point import PriceLookup
from .format import (
    address_to_string,
    escape_quotes,
    fee_to_percent_string,
    tick_to_decimal_string,
    token_to_color_hex,
)

ImageRenderer = Callable[[ArtworkParams], str]

DISCLAIMER = (
    "⚠️ DISCLAIMER: Due diligence is imperative when assessing this NFT. "
    "Make sure token addresses match the expected tokens, as token symbols may be imitated."
)

# JSON escape sequence, the metadata is assembled as raw JSON text
_NEWLINE = "\\n"


class DescribedPosition(TypedDict):
    """Position with display values."""

    # Original fields
    token_id: int
    quote_token_address: int
    base_token_address: int
    pool_address: int
    fee: int
    tick_lower: int
    tick_upper: int
    tick_current: int
    flip_ratio: bool
    # Display fields
    name: str
    description: str
    fee_tier: str
    price_lower_display: str
    price_upper_display: str
    quote_token_display: str
    base_token_display: str
    pool_address_display: str
    over_range: int


def over_range(tick_lower: int, tick_upper: int, tick_current: int) -> int:
    """Return -1 below the range, 1 above it and 0 inside."""
    if tick_current < tick_lower:
        return -1
    if tick_current > tick_upper:
        return 1
    return 0


class MetadataService:
    """Service for building names, descriptions and token URIs."""

    def __init__(self, price_lookup: PriceLookup, logger: Logger):
        """
        Initialize metadata service.

        Args:
            price_lookup: Tick to Q64.96 square-root price
            logger: Logger instance
        """
        self._price_lookup = price_lookup
        self._logger = logger

    def _bound_string(self, tick: int, params: PositionParams) -> str:
        return tick_to_decimal_string(
            tick,
            params.tick_spacing,
            params.base_token_decimals,
            params.quote_token_decimals,
            params.flip_ratio,
            self._price_lookup,
        )

    def price_bounds(self, params: PositionParams) -> tuple[str, str]:
        """
        Format the position's price range, smaller price first.

        Inverting the ratio turns the upper tick into the lower price.

        Args:
            params: Position parameters

        Returns:
            Tuple of (lower, upper) display prices
        """
        if params.flip_ratio:
            first, second = params.tick_upper, params.tick_lower
        else:
            first, second = params.tick_lower, params.tick_upper
        return self._bound_string(first, params), self._bound_string(second, params)

    def generate_name(self, params: PositionParams) -> str:
        """
        Generate the token name.

        Args:
            params: Position parameters

        Returns:
            Name such as "Uniswap - 0.3% - DAI/WETH - 0.00050000<>0.0010000"
        """
        lower, upper = self.price_bounds(params)
        return (
            f"Uniswap - {fee_to_percent_string(params.fee)} - "
            f"{escape_quotes(params.quote_token_symbol)}/{escape_quotes(params.base_token_symbol)} - "
            f"{lower}<>{upper}"
        )

    def generate_description(self, params: PositionParams) -> str:
        """
        Generate the token description.

        Args:
            params: Position parameters

        Returns:
            Description with JSON-escaped newlines
        """
        quote_symbol = escape_quotes(params.quote_token_symbol)
        base_symbol = escape_quotes(params.base_token_symbol)
        part_one = (
            f"This NFT represents a liquidity position in a Uniswap V3 {quote_symbol}-{base_symbol} pool. "
            f"The owner of this NFT can modify or redeem the position.{_NEWLINE}"
            f"{_NEWLINE}Pool Address: {address_to_string(params.pool_address)}"
            f"{_NEWLINE}{quote_symbol} Address: "
        )
        part_two = (
            f"{address_to_string(params.quote_token_address)}"
            f"{_NEWLINE}{base_symbol} Address: {address_to_string(params.base_token_address)}"
            f"{_NEWLINE}Fee Tier: {fee_to_percent_string(params.fee)}"
            f"{_NEWLINE}Token ID: {params.token_id}{_NEWLINE}{_NEWLINE}"
            f"{DISCLAIMER}"
        )
        return part_one + part_two

    def artwork_params(self, params: PositionParams) -> ArtworkParams:
        """
        Collect the inputs for an image renderer.

        Args:
            params: Position parameters

        Returns:
            Artwork parameters
        """
        lower, upper = self.price_bounds(params)
        return ArtworkParams(
            token_id=params.token_id,
            quote_token=address_to_string(params.quote_token_address),
            base_token=address_to_string(params.base_token_address),
            pool_address=address_to_string(params.pool_address),
            quote_token_symbol=params.quote_token_symbol,
            base_token_symbol=params.base_token_symbol,
            fee_tier=fee_to_percent_string(params.fee),
            tick_lower=params.tick_lower,
            tick_upper=params.tick_upper,
            tick_spacing=params.tick_spacing,
            price_lower=lower,
            price_upper=upper,
            over_range=over_range(params.tick_lower, params.tick_upper, params.tick_current),
            color0=token_to_color_hex(params.quote_token_address, 136),
            color1=token_to_color_hex(params.base_token_address, 136),
            color2=token_to_color_hex(params.quote_token_address, 0),
            color3=token_to_color_hex(params.base_token_address, 0),
        )

    def construct_token_uri(
        self, params: PositionParams, image_renderer: Optional[ImageRenderer] = None
    ) -> str:
        """
        Build the base64 JSON data URI for a position.

        Args:
            params: Position parameters
            image_renderer: Optional renderer producing SVG text

        Returns:
            "data:application/json;base64,..." URI
        """
        body = (
            f'{{"name":"{self.generate_name(params)}", '
            f'"description":"{self.generate_description(params)}"'
        )
        if image_renderer is not None:
            svg = image_renderer(self.artwork_params(params))
            image = base64.b64encode(svg.encode("utf-8")).decode("ascii")
            body += f', "image": "data:image/svg+xml;base64,{image}"'
        else:
            self._logger.debug(f"No image renderer, token {params.token_id} has no image")
        body += "}"

        encoded = base64.b64encode(body.encode("utf-8")).decode("ascii")
        return f"data:application/json;base64,{encoded}"

    def describe(self, params: PositionParams) -> DescribedPosition:
        """
        Enhance position parameters with display values.

        Args:
            params: Position parameters

        Returns:
            Described position
        """
        lower, upper = self.price_bounds(params)
        return DescribedPosition(
            token_id=params.token_id,
            quote_token_address=params.quote_token_address,
            base_token_address=params.base_token_address,
            pool_address=params.pool_address,
            fee=params.fee,
            tick_lower=params.tick_lower,
            tick_upper=params.tick_upper,
            tick_current=params.tick_current,
            flip_ratio=params.flip_ratio,
            name=self.generate_name(params),
            description=self.generate_description(params),
            fee_tier=fee_to_percent_string(params.fee),
            price_lower_display=lower,
            price_upper_display=upper,
            quote_token_display=address_to_string(params.quote_token_address),
            base_token_display=address_to_string(params.base_token_address),
            pool_address_display=address_to_string(params.pool_address),
            over_range=over_range(params.tick_lower, params.tick_upper, params.tick_current),
        )
