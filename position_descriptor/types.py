"""Type definitions for the Position Descriptor SDK."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .full_math import MAX_UINT8, MAX_UINT24, MAX_UINT160
from .tick_math import MIN_TICK, MAX_TICK


# ============================================================================
# Enums
# ============================================================================


class PriceBound(str, Enum):
    """Sentinel rendered in place of a price at the edge of the tick range."""

    MIN = "MIN"
    MAX = "MAX"


# ============================================================================
# Rendering Models
# ============================================================================


class DecimalLayout(BaseModel):
    """
    Buffer layout for rendering significant figures as a decimal string.

    Digits are written from sigfig_index toward index 0. An empty zero run has
    zeros_end_index < zeros_start_index.
    """

    model_config = ConfigDict(frozen=True)

    buffer_length: int = Field(gt=0)
    sigfig_index: int = Field(ge=0)
    decimal_index: int = Field(default=0, ge=0)
    zeros_start_index: int = Field(default=0, ge=0)
    zeros_end_index: int = Field(default=-1, ge=-1)
    is_less_than_one: bool = False
    is_percent: bool = False

    @property
    def zero_count(self) -> int:
        """Number of positions in the zero run."""
        return max(0, self.zeros_end_index - self.zeros_start_index + 1)


# ============================================================================
# Domain Models
# ============================================================================


class Token(BaseModel):
    """Token metadata supplied by the caller."""

    address: int = Field(ge=0, le=MAX_UINT160)
    symbol: str
    decimals: int = Field(ge=0, le=MAX_UINT8)


class PositionParams(BaseModel):
    """Everything needed to describe a single liquidity position."""

    token_id: int = Field(ge=0)
    quote_token_address: int = Field(ge=0, le=MAX_UINT160)
    base_token_address: int = Field(ge=0, le=MAX_UINT160)
    quote_token_symbol: str
    base_token_symbol: str
    quote_token_decimals: int = Field(ge=0, le=MAX_UINT8)
    base_token_decimals: int = Field(ge=0, le=MAX_UINT8)
    flip_ratio: bool = False
    tick_lower: int = Field(ge=MIN_TICK, le=MAX_TICK)
    tick_upper: int = Field(ge=MIN_TICK, le=MAX_TICK)
    tick_current: int = Field(ge=MIN_TICK, le=MAX_TICK)
    tick_spacing: int = Field(gt=0)
    fee: int = Field(ge=0, le=MAX_UINT24)
    pool_address: int = Field(ge=0, le=MAX_UINT160)

    @model_validator(mode="after")
    def check_tick_range(self) -> "PositionParams":
        if self.tick_lower >= self.tick_upper:
            raise ValueError(
                f"tick_lower ({self.tick_lower}) must be below tick_upper ({self.tick_upper})"
            )
        for tick in (self.tick_lower, self.tick_upper):
            if tick % self.tick_spacing != 0:
                raise ValueError(f"Tick {tick} is not a multiple of spacing {self.tick_spacing}")
        return self


class ArtworkParams(BaseModel):
    """Inputs handed to an external image renderer."""

    token_id: int
    quote_token: str
    base_token: str
    pool_address: str
    quote_token_symbol: str
    base_token_symbol: str
    fee_tier: str
    tick_lower: int
    tick_upper: int
    tick_spacing: int
    price_lower: str
    price_upper: str
    over_range: int = Field(ge=-1, le=1)
    color0: str
    color1: str
    color2: str
    color3: str
