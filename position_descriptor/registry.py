"""Registry of caller-supplied token metadata."""

from typing import Optional
from .types import Token
from .logger import Logger
from .format import address_to_string


class TokenRegistry:
    """In-memory token metadata keyed by address."""

    def __init__(self, logger: Logger):
        """
        Initialize token registry.

        Args:
            logger: Logger instance
        """
        self._tokens: dict[int, Token] = {}
        self._logger = logger

    def set_tokens(self, tokens: list[Token]) -> None:
        """
        Replace all registered tokens.

        Args:
            tokens: Tokens to register
        """
        self._tokens.clear()
        for token in tokens:
            self._tokens[token.address] = token
        self._logger.debug(f"Registered {len(tokens)} tokens")

    def add_token(self, token: Token) -> None:
        """Register or overwrite a single token."""
        if token.address in self._tokens:
            self._logger.warn(f"Overwriting token {address_to_string(token.address)}")
        self._tokens[token.address] = token

    def get_token(self, address: int) -> Optional[Token]:
        """
        Get token by address.

        Args:
            address: Token address

        Returns:
            Token or None if not registered
        """
        return self._tokens.get(address)

    def get_all_tokens(self) -> list[Token]:
        """Get all registered tokens."""
        return list(self._tokens.values())

    def has_token(self, address: int) -> bool:
        """Check if a token is registered."""
        return address in self._tokens

    def clear(self) -> None:
        """Remove all tokens."""
        self._tokens.clear()
        self._logger.debug("Token registry cleared")

    def get_stats(self) -> dict[str, int]:
        """
        Get registry statistics.

        Returns:
            Dictionary with registry stats
        """
        return {"tokens": len(self._tokens)}
