"""Main Position Descriptor client with unified interface."""

from typing import Optional
from .exceptions import TokenNotFoundError
from .fixed_point import PriceLookup
from .format import address_to_string, fee_to_percent_string
from .logger import Logger, ConsoleLogger, LogLevel
from .metadata import DescribedPosition, ImageRenderer, MetadataService
from .registry import TokenRegistry
from .tick_math import get_sqrt_ratio_at_tick
from .types import PositionParams, Token


class PositionDescriptor:
    """
    Position descriptor combining token registry, formatting and metadata.

    Example:
        ```python
        descriptor = PositionDescriptor(log_level=LogLevel.WARN)
        descriptor.register_tokens([weth, dai])

        params = descriptor.build_params(
            token_id=1,
            pool_address=pool,
            quote_token_address=weth.address,
            base_token_address=dai.address,
            fee=3000,
            tick_spacing=60,
            tick_lower=-60,
            tick_upper=60,
            tick_current=0,
        )
        uri = descriptor.token_uri(params)
        ```
    """

    def __init__(
        self,
        price_lookup: Optional[PriceLookup] = None,
        image_renderer: Optional[ImageRenderer] = None,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the descriptor.

        Args:
            price_lookup: Tick to Q64.96 square-root price, integer tick math by default
            image_renderer: Optional SVG renderer for token URIs
            log_level: Minimum log level
            logger: Custom logger instance
        """
        self.logger = logger or ConsoleLogger(level=log_level)
        self.price_lookup = price_lookup or get_sqrt_ratio_at_tick
        self.image_renderer = image_renderer
        self.registry = TokenRegistry(self.logger)
        self.metadata = MetadataService(self.price_lookup, self.logger)

    # ========================================================================
    # Token Registry
    # ========================================================================

    def register_tokens(self, tokens: list[Token]) -> None:
        """Register token metadata, replacing anything registered before."""
        self.registry.set_tokens(tokens)
        self.logger.info(f"Token registry ready: {len(tokens)} tokens")

    def _require_token(self, address: int) -> Token:
        token = self.registry.get_token(address)
        if token is None:
            available = (
                ", ".join(f"{t.symbol} ({address_to_string(t.address)})" for t in self.registry.get_all_tokens())
                or "none"
            )
            raise TokenNotFoundError(
                f"Token {address_to_string(address)} not found in registry. "
                f"Available tokens: {available}. "
                f"Call register_tokens() first."
            )
        return token

    def build_params(
        self,
        token_id: int,
        pool_address: int,
        quote_token_address: int,
        base_token_address: int,
        fee: int,
        tick_spacing: int,
        tick_lower: int,
        tick_upper: int,
        tick_current: int,
        flip_ratio: bool = False,
    ) -> PositionParams:
        """
        Build position parameters, resolving symbols and decimals from the registry.

        Raises:
            TokenNotFoundError: If either token is not registered
        """
        quote_token = self._require_token(quote_token_address)
        base_token = self._require_token(base_token_address)

        return PositionParams(
            token_id=token_id,
            quote_token_address=quote_token_address,
            base_token_address=base_token_address,
            quote_token_symbol=quote_token.symbol,
            base_token_symbol=base_token.symbol,
            quote_token_decimals=quote_token.decimals,
            base_token_decimals=base_token.decimals,
            flip_ratio=flip_ratio,
            tick_lower=tick_lower,
            tick_upper=tick_upper,
            tick_current=tick_current,
            tick_spacing=tick_spacing,
            fee=fee,
            pool_address=pool_address,
        )

    # ========================================================================
    # Metadata
    # ========================================================================

    def describe(self, params: PositionParams) -> DescribedPosition:
        """Get display values for a position."""
        return self.metadata.describe(params)

    def token_uri(self, params: PositionParams) -> str:
        """Build the token URI for a position."""
        self.logger.debug(f"Building token URI for token {params.token_id}")
        return self.metadata.construct_token_uri(params, self.image_renderer)

    def price_bounds(self, params: PositionParams) -> tuple[str, str]:
        """Get the position's (lower, upper) display prices."""
        return self.metadata.price_bounds(params)

    def fee_tier(self, fee: int) -> str:
        """Format a fee as a percentage."""
        return fee_to_percent_string(fee)
